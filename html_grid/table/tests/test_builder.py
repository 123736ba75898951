import pytest

from html_grid.table.builder import TableBuilder
from html_grid.table.factory import TableFactory
from html_grid.tests.factories import UserFactory

USERS = [{"id": index, "name": f"User {index}", "email": f"user{index}@example.com"} for index in range(1, 46)]


def users_table(rows, paginate=True):
    def configure(grid):
        grid.with_(rows, paginate=paginate)
        grid.column("name")
        grid.column("email", "E-mail")

    return configure


@pytest.fixture
def factory(table_settings):
    return TableFactory(table_settings)


def test_make(factory, rf):
    request = rf.get("/users/")
    seen = []

    builder = factory.make(seen.append, request=request, name="users")

    assert isinstance(builder, TableBuilder)
    assert seen == [builder.grid]
    assert builder.grid.name == "users"
    assert factory.make().grid is not builder.grid


class TestRenderContext:
    def test_without_pagination(self, table_settings, recording_view, rf):
        factory = TableFactory(table_settings, translator=str.upper, view=recording_view)
        request = rf.get("/users/", {"page": 2, "q": "ann"})

        factory.make(users_table(USERS[:3], paginate=False), request=request).render()

        ((view, data),) = recording_view.calls
        assert view == "html_grid/table/horizontal.html"
        assert data["pagination"] == ""
        assert data["rows"] == USERS[:3]
        assert data["empty"] == "NO RECORDS."
        assert [column.id for column in data["columns"]] == ["name", "email"]
        assert data["attributes"]["table"] == {}
        assert data["attributes"]["row"]({}) == {}
        assert data["grid"].name is None

    def test_with_pagination(self, table_settings, recording_view, rf):
        factory = TableFactory(table_settings, view=recording_view)
        request = rf.get("/users/", {"page": 2, "q": "ann"})

        factory.make(users_table(USERS), request=request).render()

        (pagination_call, (_view, data)) = recording_view.calls
        assert pagination_call[0] == "html_grid/table/pagination.html"
        assert pagination_call[1]["table"] is data["table"]
        assert data["table"].page.number == 2
        assert data["table"].paginator.num_pages == 3
        assert data["pagination"] == "rendered"
        assert data["rows"] == USERS[20:40]


class TestRenderHtml:
    def test_table(self, factory, rf):
        def configure(grid):
            users_table(USERS[:2], paginate=False)(grid)
            grid.attributes = {"class": "table", "id": "users"}
            grid.rows.attributes = lambda row: {"data-id": row["id"]}
            grid.column("id", attributes=lambda row: {"class": "text-center"}, headers={"class": "w-8"})

        html = factory.make(configure, request=rf.get("/users/")).render()

        assert 'id="users"' in html
        assert "E-mail" in html
        assert "user1@example.com" in html
        assert 'data-id="2"' in html
        assert 'class="text-center"' in html
        assert 'class="w-8' in html
        assert "pagination" not in html

    def test_escaping(self, factory, rf):
        def configure(grid):
            grid.with_([{"bio": "<b>bold</b>"}], paginate=False)
            grid.column("bio")
            grid.column("raw", value=lambda row: row["bio"], escape=False)

        html = factory.make(configure, request=rf.get("/")).render()

        assert "&lt;b&gt;bold&lt;/b&gt;" in html
        assert "<b>bold</b>" in html

    def test_empty(self, factory, rf):
        html = factory.make(users_table([], paginate=False), request=rf.get("/")).render()
        assert "No records." in html

    def test_pagination_links_drop_stale_page(self, factory, rf):
        request = rf.get("/users/", {"page": 2, "q": "ann"})

        html = factory.make(users_table(USERS), request=request).render()

        assert "User 21" in html
        assert "User 41" not in html
        assert "Page 2 of 3" in html
        assert "?page=1&amp;q=ann" in html
        assert "?page=3&amp;q=ann" in html
        assert "page=2&amp;" not in html

    def test_vertical_layout(self, factory, rf):
        def configure(grid):
            users_table(USERS[:1], paginate=False)(grid)
            grid.layout("vertical")

        html = factory.make(configure, request=rf.get("/")).render()

        assert "<dt>E-mail</dt>" in html
        assert "user1@example.com" in html

    @pytest.mark.django_db
    def test_queryset(self, factory, rf):
        from django.contrib.auth import get_user_model

        UserFactory(username="ann")
        UserFactory(username="bob")

        def configure(grid):
            grid.with_(get_user_model().objects.order_by("username"))
            grid.column("username")

        html = factory.make(configure, request=rf.get("/")).render()

        assert html.index("ann") < html.index("bob")
        assert "Page 1 of 1" in html


class TestRenderWithoutRequest:
    def test_paginated(self, factory):
        html = factory.make(users_table(USERS)).render()

        assert "User 1<" in html
        assert "User 21" not in html
        assert "Page 1 of 3" in html
        assert "?page=2" in html

    def test_not_paginated(self, factory):
        html = factory.make(users_table(USERS[:2], paginate=False)).render()

        assert "User 2" in html
        assert "pagination" not in html

    def test_out_of_range_page_shows_last(self, factory, rf):
        html = factory.make(users_table(USERS), request=rf.get("/", {"page": 9})).render()

        assert "Page 3 of 3" in html
        assert "User 45" in html
