from django import forms

FORM_BASE_STYLE = {
    "textarea": "base-textarea",
    "select": "base-dropdown",
    "selectmultiple": "base-dropdown",
    "checkbox": "simple-toggle",
    "checkboxselectmultiple": "simple-toggle",
    "radioselect": "",
    "fileinput": "base-input",
    "clearablefileinput": "base-input",
    "hiddeninput": "",
    "base": "base-input",
}


class Presenter:
    """Decides how controls look for a given CSS framework."""

    styles = {}
    layouts = {}

    def decorate(self, widget: forms.Widget):
        css_class = self.widget_class(widget)
        if css_class:
            existing = widget.attrs.get("class", "")
            widget.attrs["class"] = f"{css_class} {existing}".strip()
        return widget

    def widget_class(self, widget):
        widget_type = type(widget).__name__.lower()
        if isinstance(widget, forms.CheckboxInput):
            widget_type = "checkbox"
        return self.styles.get(widget_type, self.styles.get("base", ""))

    def helper_options(self, layout):
        """Extra crispy ``FormHelper`` attributes for a layout name."""
        return dict(self.layouts.get(layout, {}))


class TailwindPresenter(Presenter):
    styles = FORM_BASE_STYLE
    layouts = {
        "horizontal": {
            "form_class": "form-horizontal",
            "label_class": "w-1/3",
            "field_class": "w-2/3",
        },
        "vertical": {
            "form_class": "",
            "label_class": "",
            "field_class": "",
        },
    }
