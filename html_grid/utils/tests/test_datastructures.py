from types import SimpleNamespace

import pytest

from html_grid.utils.datastructures import Fluent, data_get
from html_grid.utils.html import flat_attrs, slugify_name


class TestFluent:
    def test_attribute_and_item_access(self):
        record = Fluent({"name": "Ann"}, email="ann@example.com")

        assert record.name == "Ann"
        assert record["email"] == "ann@example.com"
        assert record.get("missing", "x") == "x"
        assert dict(record) == {"name": "Ann", "email": "ann@example.com"}

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            Fluent({}).name

    def test_read_only(self):
        record = Fluent({"name": "Ann"})
        with pytest.raises(AttributeError):
            record.name = "Bob"
        assert record.to_dict() == {"name": "Ann"}


class TestDataGet:
    @pytest.mark.parametrize(
        "target,path,expected",
        [
            ({"user": {"email": "a@b.com"}}, "user.email", "a@b.com"),
            (Fluent({"user": Fluent({"email": "a@b.com"})}), "user.email", "a@b.com"),
            (SimpleNamespace(user=SimpleNamespace(name="Ann")), "user.name", "Ann"),
            ({"items": [{"name": "first"}, {"name": "second"}]}, "items.1.name", "second"),
            ({"name": "Ann"}, "name", "Ann"),
        ],
    )
    def test_resolves_path(self, target, path, expected):
        assert data_get(target, path) == expected

    @pytest.mark.parametrize(
        "target,path",
        [
            ({"user": {}}, "user.email"),
            ({}, "user.email"),
            (None, "user.email"),
            ({"user": None}, "user.email"),
            ({"name": "Ann"}, ""),
        ],
    )
    def test_missing_path_returns_default(self, target, path):
        assert data_get(target, path) is None
        assert data_get(target, path, "") == ""

    def test_falsy_values_are_kept(self):
        assert data_get({"count": 0}, "count", "") == 0


def test_flat_attrs():
    html = flat_attrs({"class": "table", "hidden": True, "title": None, "disabled": False})
    assert 'class="table"' in html
    assert " hidden" in html
    assert "title" not in html
    assert "disabled" not in html
    assert flat_attrs({}) == ""


def test_slugify_name():
    assert slugify_name("User Information") == "user-information"
