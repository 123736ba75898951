import logging

import django_tables2 as tables
from django.db.models import QuerySet
from django.http import HttpRequest
from django.utils.safestring import mark_safe
from django_tables2 import RequestConfig

from html_grid.builder import Builder

logger = logging.getLogger(__name__)

PAGINATION_VIEW = "html_grid/table/pagination.html"


class GridColumn(tables.Column):
    """A django-tables2 column whose cells come from a grid ``Column``."""

    def __init__(self, column, **kwargs):
        self.column = column
        kwargs.setdefault("verbose_name", column.label)
        kwargs.setdefault("orderable", False)
        kwargs.setdefault("empty_values", ())
        kwargs.setdefault("attrs", {"th": dict(column.headers)})
        super().__init__(**kwargs)

    def render(self, record):
        value = self.column.get_value(record)
        return value if self.column.escape else mark_safe(value)


class TableBuilder(Builder):
    def __init__(self, request, translator, view, grid):
        # Rendering outside a view still needs an (empty) query string.
        super().__init__(request if request is not None else HttpRequest(), translator, view, grid)

    def render(self):
        grid = self.grid

        pagination = ""
        if grid.paginate is True:
            data = grid.model if isinstance(grid.model, QuerySet) else grid.data()
            table = self.make_table(data)
            RequestConfig(self.request, paginate={"per_page": grid.per_page}).configure(table)
            # Page links replace ``page`` in the current query string.
            pagination = self.view.render_to_string(PAGINATION_VIEW, {"table": table}, request=self.request)
        else:
            table = self.make_table(grid.data())

        rows = [bound_row.record for bound_row in table.paginated_rows]
        data = {
            "attributes": {
                "row": grid.rows.attributes,
                "table": grid.attributes,
            },
            "body": self.make_body(table),
            "columns": grid.columns(),
            "empty": self.translator(grid.empty),
            "grid": grid,
            "pagination": mark_safe(pagination),
            "rows": rows,
            "table": table,
        }

        logger.debug("Rendering table %r with %d row(s) using %s", grid.name, len(rows), grid.view)
        return self._render_view(data)

    def make_table(self, rows):
        columns = {f"column_{index}": GridColumn(column) for index, column in enumerate(self.grid.columns())}
        table_class = type("GridTable", (tables.Table,), columns)
        return table_class(
            rows,
            attrs=dict(self.grid.attributes) or None,
            orderable=False,
            empty_text=self.translator(self.grid.empty),
        )

    def make_body(self, table):
        body = []
        for bound_row in table.paginated_rows:
            record = bound_row.record
            cells = [
                {"attributes": column.attributes(record), "label": column.label, "value": value}
                for column, (_bound_column, value) in zip(self.grid.columns(), bound_row.items())
            ]
            body.append({"attributes": self.grid.rows.attributes(record), "cells": cells})
        return body
