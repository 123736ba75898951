import logging
from dataclasses import dataclass, field, fields

from django.forms.utils import pretty_name

from html_grid.utils.datastructures import data_get

logger = logging.getLogger(__name__)


@dataclass
class Field:
    """A single form control, mutable until the form is materialized.

    ``value`` left as ``None`` is read from the bound row by dotted path when
    the form is built, so the row may be bound after the control is declared.
    It may also be a callable taking ``(row, field)``. ``renderer`` may be a
    callable taking ``(row, field)`` and returning a Django form field, which
    replaces the one the control type would produce.
    """

    name: str
    type: str = "input:text"
    label: str = ""
    value: object = None
    attributes: dict = field(default_factory=dict)
    options: object = field(default_factory=list)
    help: str = ""
    required: bool = False
    renderer: object = None

    @property
    def id(self):
        return self.name

    def resolve_value(self, row):
        if self.value is None:
            value = data_get(row, self.name)
            return "" if value is None else value
        if callable(self.value):
            return self.value(row, self)
        return self.value


CONTROL_OPTIONS = {f.name for f in fields(Field)} - {"name"}


class Fieldset:
    def __init__(self, name=None, callback=None):
        if callable(name):
            name, callback = None, name

        self.name = name
        self.controls = []
        self.key_map = {}
        self.attributes = {}
        self._legend = None

        if callback is not None:
            callback(self)

    def legend(self, value=None):
        if value is None:
            return self._legend if self._legend is not None else self.name
        self._legend = value

    def control(self, type_, name, callback=None, **options):
        control = Field(name=name, type=type_, label=pretty_name(name.rsplit(".", 1)[-1]))

        for key, option in options.items():
            if key not in CONTROL_OPTIONS:
                raise TypeError(f"Unknown control option '{key}' for [{name}]")
            setattr(control, key, option)

        if callback is not None:
            callback(control)

        existing = self.key_map.get(name)
        if existing is not None:
            logger.warning("Control [%s] is defined twice in fieldset %r, replacing it", name, self.name)
            self.controls[self.controls.index(existing)] = control
        else:
            self.controls.append(control)
        self.key_map[name] = control
        return control

    def of(self, name, default=None):
        return self.key_map.get(name, default)

    def __iter__(self):
        return iter(self.controls)

    def __len__(self):
        return len(self.controls)
