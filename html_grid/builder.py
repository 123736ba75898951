from django.utils.safestring import mark_safe


class Builder:
    """Renders a configured grid through the template engine.

    ``translator`` is a ``gettext``-style callable and ``view`` anything
    exposing ``render_to_string(template_name, context, request=None)``,
    usually ``django.template.loader``.
    """

    def __init__(self, request, translator, view, grid):
        self.request = request
        self.translator = translator
        self.view = view
        self.grid = grid

    def extend(self, callback=None):
        if callback is not None:
            callback(self.grid)
        return self

    def render(self):
        raise NotImplementedError

    def _render_view(self, context):
        return mark_safe(self.view.render_to_string(self.grid.view, context, request=self.request))

    def __str__(self):
        return self.render()

    def __html__(self):
        return self.render()
