import logging

from html_grid.builder import Builder

logger = logging.getLogger(__name__)


class FormBuilder(Builder):
    def __init__(self, request, translator, view, grid, control, markup):
        super().__init__(request, translator, view, grid)
        self.control = control
        self.markup = markup

    def render(self):
        grid = self.grid
        method = grid.get_attribute("method", "POST")

        attributes = {key: value for key, value in grid.attributes.items() if key not in ("url", "method")}
        attributes["action"] = grid.get_attribute("url", "")
        attributes["method"] = self.markup.form_method(method)

        form, helper = self.control.build(grid)

        data = {
            "attributes": attributes,
            "empty": self.translator(grid.empty),
            "fieldsets": grid.fieldsets,
            "form": form,
            "grid": grid,
            "helper": helper,
            "hiddens": list(grid.hiddens.values()),
            "method": self.markup.method_override(method),
            "row": grid.row,
            "submit": self.translator(grid.submit),
            "token": grid.token,
        }

        logger.debug("Rendering form %r with view %s", grid.name, grid.view)
        return self._render_view(data)
