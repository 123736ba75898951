import logging

logger = logging.getLogger(__name__)

LAYOUTS = ("horizontal", "vertical")


class Grid:
    """Configuration shared by form and table grids.

    A grid is created per request, configured through callbacks and then
    handed to a builder for rendering. Subclasses set ``kind`` so that the
    built-in layouts resolve to ``html_grid/<kind>/<layout>.html``.
    """

    kind = None

    def __init__(self, config, name=None):
        self.config = config
        self.name = name
        self.key_map = {}
        self._attributes = {}
        self._view = config.view
        self.empty = config.empty

    @property
    def attributes(self):
        return self._attributes

    @attributes.setter
    def attributes(self, values):
        self.set_attributes(values)

    def set_attributes(self, mapping=None, **kwargs):
        self._attributes.update(mapping or {}, **kwargs)
        return self._attributes

    def get_attribute(self, key, default=None):
        return self._attributes.get(key, default)

    @property
    def view(self):
        return self._view

    def layout(self, name):
        if name in LAYOUTS:
            self._view = f"html_grid/{self.kind}/{name}.html"
        else:
            self._view = name

    def _register(self, key, item, collection):
        if key in self.key_map:
            logger.warning(
                "Name [%s] is registered twice on %s grid %r, lookups use the latest", key, self.kind, self.name
            )
        self.key_map[key] = item
        collection.append(item)
