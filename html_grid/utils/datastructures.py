from collections.abc import Mapping

from django_tables2.utils import Accessor


class Fluent(Mapping):
    """Read-only record over a mapping.

    Values are reachable both as items and as attributes, so a plain dict
    bound to a grid behaves like a model instance in templates and lookups.
    """

    def __init__(self, mapping=None, **kwargs):
        data = dict(mapping or {})
        data.update(kwargs)
        self.__dict__["_data"] = data

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __getattr__(self, name):
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'") from None

    def __setattr__(self, name, value):
        raise AttributeError(f"'{type(self).__name__}' object is read-only")

    def __repr__(self):
        return f"{type(self).__name__}({self._data!r})"

    def to_dict(self):
        return dict(self._data)


def data_get(target, path, default=None):
    """Resolve a dotted ``path`` against ``target``, returning ``default`` when any segment is missing."""
    if target is None or path is None or path == "":
        return default
    accessor = Accessor(str(path).replace(Accessor.LEGACY_SEPARATOR, Accessor.SEPARATOR))
    value = accessor.resolve(target, quiet=True)
    return default if value is None else value
