import pytest

from html_grid import services
from html_grid.conf import FormSettings, TableSettings
from html_grid.form.control import Control
from html_grid.form.grid import Grid as FormGrid
from html_grid.form.markup import FormMarkup
from html_grid.form.presenter import TailwindPresenter
from html_grid.listeners import GridListener
from html_grid.table.grid import Grid as TableGrid


class RecordingListener(GridListener):
    def __init__(self):
        self.setup_calls = []

    def setup_form(self, grid):
        self.setup_calls.append(grid)


class RecordingView:
    """Stands in for ``django.template.loader`` and keeps what it was asked to render."""

    def __init__(self, output="rendered"):
        self.output = output
        self.calls = []

    def render_to_string(self, template_name, context=None, request=None):
        self.calls.append((template_name, context))
        return self.output


@pytest.fixture(autouse=True)
def service_registry():
    services.reset()
    yield
    services.reset()


@pytest.fixture
def form_settings() -> FormSettings:
    return FormSettings()


@pytest.fixture
def table_settings() -> TableSettings:
    return TableSettings(per_page=20)


@pytest.fixture
def markup() -> FormMarkup:
    return FormMarkup()


@pytest.fixture
def control() -> Control:
    return Control(TailwindPresenter())


@pytest.fixture
def form_grid(form_settings, markup) -> FormGrid:
    return FormGrid(form_settings, markup, name="user")


@pytest.fixture
def table_grid(table_settings) -> TableGrid:
    return TableGrid(table_settings, name="users")


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def recording_view() -> RecordingView:
    return RecordingView()
