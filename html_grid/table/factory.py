from django.template import loader
from django.utils.translation import gettext

from html_grid.table.builder import TableBuilder
from html_grid.table.grid import Grid


class TableFactory:
    def __init__(self, config, translator=gettext, view=loader):
        self.config = config
        self.translator = translator
        self.view = view

    def make(self, callback=None, request=None, name=None):
        """Return a builder around a fresh table grid, configured by ``callback``."""
        builder = TableBuilder(request, self.translator, self.view, Grid(self.config, name=name))

        return builder.extend(callback)
