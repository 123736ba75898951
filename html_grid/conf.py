from dataclasses import dataclass, fields

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class FormSettings:
    view: str = "html_grid/form/horizontal.html"
    submit: str = "Submit"
    empty: str = "No fields available."
    token: bool = False
    presenter: str = "html_grid.form.presenter.TailwindPresenter"


@dataclass(frozen=True)
class TableSettings:
    view: str = "html_grid/table/horizontal.html"
    empty: str = "No records."
    per_page: int = DEFAULT_PAGE_SIZE


def _load(settings_class, section):
    options = getattr(settings, "HTML_GRID", {}).get(section, {})
    known = {f.name for f in fields(settings_class)}
    unknown = set(options) - known
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown HTML_GRID['{section}'] option(s): {', '.join(sorted(unknown))}. "
            f"Expected any of: {', '.join(sorted(known))}."
        )
    return settings_class(**options)


def get_form_settings() -> FormSettings:
    return _load(FormSettings, "form")


def get_table_settings() -> TableSettings:
    return _load(TableSettings, "table")
