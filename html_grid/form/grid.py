import logging
from collections.abc import Mapping
from types import MappingProxyType

from html_grid.exceptions import NameNotAvailable
from html_grid.form.fieldset import Field, Fieldset
from html_grid.grid import Grid as BaseGrid
from html_grid.utils.datastructures import Fluent, data_get
from html_grid.utils.html import slugify_name

logger = logging.getLogger(__name__)

DEFAULT_FIELDSET = "fieldset-0"


def model_exists(model):
    """Whether ``model`` is already persisted.

    Django models answer through ``_state.adding``; other records may expose
    an ``exists`` flag.
    """
    exists = getattr(model, "exists", None)
    if isinstance(exists, bool):
        return exists
    state = getattr(model, "_state", None)
    if state is not None:
        return not state.adding
    return False


def model_key(model):
    key = getattr(model, "pk", None)
    return key if key is not None else getattr(model, "id", None)


class Grid(BaseGrid):
    kind = "form"

    def __init__(self, config, markup, name=None):
        super().__init__(config, name=name)
        self.markup = markup
        self.token = config.token
        self.submit = config.submit
        self.fieldsets = []
        self._hiddens = {}
        self._row = None

    @property
    def hiddens(self):
        return MappingProxyType(self._hiddens)

    @property
    def row(self):
        return self._row

    @row.setter
    def row(self, row):
        if isinstance(row, Mapping) and not isinstance(row, Fluent):
            row = Fluent(row)
        self._row = row

    def with_(self, row=None):
        """Bind ``row`` as the data source for default values, or return the bound row."""
        if row is None:
            return self._row
        self.row = row

    def fieldset(self, name=None, callback=None):
        fieldset = Fieldset(name, callback)

        if fieldset.name is None:
            key = f"fieldset-{len(self.fieldsets)}"
        else:
            key = slugify_name(fieldset.name)

        self._register(key, fieldset, self.fieldsets)
        return self.fieldsets

    def hidden(self, name, callback=None):
        value = data_get(self._row, name)
        field = Field(name=name, type="input:hidden", value="" if value is None else value)

        if callback is not None:
            callback(field)

        self._hiddens[name] = self.markup.hidden(name, field.value, field.attributes)

    def find(self, name):
        if "." in name:
            fieldset, control = name.split(".", 1)
        else:
            fieldset, control = DEFAULT_FIELDSET, name

        if fieldset not in self.key_map:
            raise NameNotAvailable(name)

        return self.key_map[fieldset].of(control)

    def resource(self, listener, url, model, attributes=None):
        attributes = dict(attributes or {})
        method = "POST"

        if model_exists(model):
            url = f"{url}/{model_key(model)}"
            method = "PUT"

        attributes["method"] = method
        logger.debug("Form %r bound as resource %s %s", self.name, method, url)

        return self.setup(listener, url, model, attributes)

    def setup(self, listener, url, model, attributes=None):
        attributes = dict(attributes or {})
        method = attributes.get("method", "POST")
        url = listener.handles(url)

        attributes.update(url=url, method=method)

        self.with_(model)
        self.set_attributes(attributes)
        logger.debug("Form %r setup with %s %s", self.name, method, url)
        listener.setup_form(self)

        return self
