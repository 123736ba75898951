import logging
from dataclasses import dataclass, field

from django.forms.utils import pretty_name

from html_grid.exceptions import NameNotAvailable
from html_grid.grid import Grid as BaseGrid
from html_grid.utils.datastructures import data_get
from html_grid.utils.html import slugify_name

logger = logging.getLogger(__name__)


def no_attributes(row):
    return {}


@dataclass
class Column:
    id: str
    label: str = ""
    value: object = None
    escape: bool = True
    headers: dict = field(default_factory=dict)
    attributes: object = no_attributes

    def get_value(self, row):
        if callable(self.value):
            return self.value(row)
        return data_get(row, self.id, "")


@dataclass
class Rows:
    data: list = field(default_factory=list)
    attributes: object = no_attributes


class Grid(BaseGrid):
    kind = "table"

    def __init__(self, config, name=None):
        super().__init__(config, name=name)
        self.per_page = config.per_page
        self.paginate = False
        self.model = None
        self.rows = Rows()
        self._columns = []

    def with_(self, model=None, paginate=True):
        """Attach ``model`` (a queryset or any iterable of rows), or return the attached one."""
        if model is None:
            return self.model

        self.model = model
        self.paginate = paginate
        self.rows.data = model

    def columns(self):
        return self._columns

    def data(self):
        return list(self.rows.data)

    def column(self, name=None, callback=None, **options):
        if callable(name):
            name, callback = None, name

        column_id = name or f"column-{len(self._columns)}"
        column = Column(id=column_id, label=pretty_name(column_id.rsplit(".", 1)[-1]) if name else "")

        if isinstance(callback, str):
            column.label, callback = callback, None

        for key, option in options.items():
            if not hasattr(column, key):
                raise TypeError(f"Unknown column option '{key}' for [{column_id}]")
            setattr(column, key, option)

        if callback is not None:
            callback(column)

        self._register(slugify_name(column_id), column, self._columns)
        return column

    def find(self, name):
        key = slugify_name(name)
        if key not in self.key_map:
            raise NameNotAvailable(name)
        return self.key_map[key]
