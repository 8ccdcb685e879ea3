"""Tests for the import table."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from javawriter import ImportTable, DuplicateImportError, MalformedNameError
from javawriter.imports import simple_name


@pytest.fixture
def table():
    return ImportTable()


class TestSimpleName:
    def test_last_segment(self):
        assert simple_name("java.util.List") == "List"

    def test_unqualified(self):
        assert simple_name("Foo") == "Foo"

    def test_nested_class(self):
        assert simple_name("java.util.Map$Entry") == "Map$Entry"

    def test_wildcard(self):
        assert simple_name("java.util.*") == "*"

    @pytest.mark.parametrize("name", ["", "java.util.List<String>", "java util", "a-b.C"])
    def test_malformed(self, name):
        with pytest.raises(MalformedNameError):
            simple_name(name)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            simple_name("int[]")


class TestImportTable:
    def test_register_returns_short_name(self, table):
        assert table.register("java.util.List") == "List"
        assert table.lookup("java.util.List") == "List"
        assert "java.util.List" in table
        assert len(table) == 1

    def test_lookup_missing(self, table):
        assert table.lookup("java.util.Set") is None

    def test_duplicate(self, table):
        table.register("java.util.List")
        with pytest.raises(DuplicateImportError) as exc_info:
            table.register("java.util.List")
        assert exc_info.value.name == "java.util.List"

    def test_same_short_name_from_different_packages(self, table):
        table.register("java.util.Date")
        table.register("java.sql.Date")
        assert table.lookup("java.util.Date") == "Date"
        assert table.lookup("java.sql.Date") == "Date"
        assert table.is_short_name_taken("Date")

    def test_malformed_not_registered(self, table):
        with pytest.raises(MalformedNameError):
            table.register("java.util.List<T>")
        assert len(table) == 0

    def test_iteration_keeps_registration_order(self, table):
        table.register("b.B")
        table.register("a.A")
        assert list(table) == ["b.B", "a.A"]
        assert dict(table.items()) == {"b.B": "B", "a.A": "A"}
