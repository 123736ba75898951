import logging

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from html_grid.conf import get_form_settings, get_table_settings
from html_grid.form.control import Control
from html_grid.form.factory import FormFactory
from html_grid.form.markup import FormMarkup
from html_grid.table.factory import TableFactory

logger = logging.getLogger(__name__)

_registry = {}


def make_presenter(path):
    try:
        presenter_class = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(f"Unable to import form presenter '{path}': {e}") from e
    return presenter_class()


def register():
    """Build the shared form and table services from settings."""
    form_settings = get_form_settings()
    table_settings = get_table_settings()

    markup = FormMarkup()
    presenter = make_presenter(form_settings.presenter)
    control = Control(presenter)

    _registry.update(
        {
            "markup": markup,
            "presenter": presenter,
            "control": control,
            "form": FormFactory(form_settings, control, markup),
            "table": TableFactory(table_settings),
        }
    )
    logger.debug("Registered html grid services with presenter %s", form_settings.presenter)
    return _registry


def reset():
    _registry.clear()


def get(name):
    if not _registry:
        register()
    return _registry[name]


def form_factory() -> FormFactory:
    return get("form")


def table_factory() -> TableFactory:
    return get("table")
