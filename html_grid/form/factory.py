from django.template import loader
from django.utils.translation import gettext

from html_grid.form.builder import FormBuilder
from html_grid.form.grid import Grid


class FormFactory:
    def __init__(self, config, control, markup, translator=gettext, view=loader):
        self.config = config
        self.control = control
        self.markup = markup
        self.translator = translator
        self.view = view

    def make(self, callback=None, request=None, name=None):
        """Return a builder around a fresh grid, configured by ``callback``."""
        builder = FormBuilder(
            request,
            self.translator,
            self.view,
            Grid(self.config, self.markup, name=name),
            self.control,
            self.markup,
        )

        return builder.extend(callback)

    def hidden(self, name, value="", attributes=None):
        return self.markup.hidden(name, value, attributes)

    def token(self, request):
        return self.markup.token(request)
