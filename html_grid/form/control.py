import logging
from pathlib import PurePosixPath

from crispy_forms.helper import FormHelper
from crispy_forms.layout import Fieldset, Layout
from django import forms

from html_grid.exceptions import UnknownControlType

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"

# type -> (form field class, widget class, widget kwargs)
CONTROL_TYPES = {
    "input:text": (forms.CharField, forms.TextInput, {}),
    "input:email": (forms.EmailField, forms.EmailInput, {}),
    "input:password": (forms.CharField, forms.PasswordInput, {}),
    "input:number": (forms.DecimalField, forms.NumberInput, {}),
    "input:date": (forms.DateField, forms.DateInput, {"format": DATE_FORMAT, "attrs": {"type": "date"}}),
    "input:file": (forms.FileField, forms.ClearableFileInput, {}),
    "input:hidden": (forms.CharField, forms.HiddenInput, {}),
    "textarea": (forms.CharField, forms.Textarea, {}),
    "select": (forms.ChoiceField, forms.Select, {}),
    "radio": (forms.ChoiceField, forms.RadioSelect, {}),
    "checkboxes": (forms.MultipleChoiceField, forms.CheckboxSelectMultiple, {}),
    "checkbox": (forms.BooleanField, forms.CheckboxInput, {}),
}
CONTROL_TYPES["text"] = CONTROL_TYPES["input:text"]

CHOICE_FIELDS = (forms.ChoiceField, forms.MultipleChoiceField)


def normalize_choices(options):
    if isinstance(options, dict):
        return list(options.items())
    choices = []
    for option in options or []:
        if isinstance(option, (list, tuple)):
            choices.append(tuple(option))
        else:
            choices.append((option, option))
    return choices


class Control:
    """Turns grid fields into a Django form laid out with crispy-forms."""

    def __init__(self, presenter):
        self.presenter = presenter

    def make_field(self, control, row=None):
        if control.renderer is not None:
            return control.renderer(row, control)

        try:
            field_class, widget_class, widget_kwargs = CONTROL_TYPES[control.type]
        except KeyError:
            raise UnknownControlType(control.type) from None

        widget_kwargs = dict(widget_kwargs)
        attrs = dict(widget_kwargs.pop("attrs", {}))
        attrs.update(control.attributes)
        widget = self.presenter.decorate(widget_class(attrs=attrs, **widget_kwargs))

        kwargs = {
            "label": control.label,
            "help_text": control.help,
            "required": control.required,
            "widget": widget,
        }
        if issubclass(field_class, CHOICE_FIELDS):
            options = control.options(row, control) if callable(control.options) else control.options
            kwargs["choices"] = normalize_choices(options)
        return field_class(**kwargs)

    def build(self, grid):
        """Return an unbound form for ``grid`` and the crispy helper describing its layout."""
        fields = {}
        initial = {}
        layout = []

        for fieldset in grid.fieldsets:
            names = []
            for control in fieldset:
                fields[control.name] = self.make_field(control, grid.row)
                initial[control.name] = control.resolve_value(grid.row)
                names.append(control.name)

            attrs = dict(fieldset.attributes)
            layout.append(
                Fieldset(
                    fieldset.legend() or "",
                    *names,
                    css_class=attrs.pop("class", None),
                    css_id=attrs.pop("id", None),
                    **attrs,
                )
            )

        form_class = type("GridForm", (forms.Form,), fields)
        form = form_class(initial=initial)

        helper = FormHelper()
        helper.form_tag = False
        helper.disable_csrf = True
        helper.layout = Layout(*layout)
        for key, value in self.presenter.helper_options(PurePosixPath(grid.view).stem).items():
            setattr(helper, key, value)

        logger.debug("Built form for grid %r with %d field(s)", grid.name, len(fields))
        return form, helper
