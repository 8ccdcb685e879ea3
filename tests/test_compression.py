"""Tests for type name compression."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from javawriter import ImportTable, NameCompressor, CompressionBeforePackageError


@pytest.fixture
def compressor():
    c = NameCompressor(ImportTable())
    c.package_prefix = "com.example."
    return c


class TestCompression:
    def test_requires_package(self):
        c = NameCompressor(ImportTable())
        with pytest.raises(CompressionBeforePackageError):
            c.compress("java.util.List")

    def test_imported(self, compressor):
        compressor.imports.register("java.util.List")
        assert compressor.compress("java.util.List") == "List"

    def test_imported_regardless_of_package(self, compressor):
        compressor.imports.register("com.example.sub.Thing")
        assert compressor.compress("com.example.sub.Thing") == "Thing"

    @pytest.mark.parametrize("name", [
        "org.other.Thing",
        "java.util.Map",
        "com.example.sub.Thing",
        "com.examples.Foo",
    ])
    def test_unrelated_names_unchanged(self, compressor, name):
        assert compressor.compress(name) == name

    def test_same_package(self, compressor):
        assert compressor.compress("com.example.Foo") == "Foo"

    def test_same_package_nested_class(self, compressor):
        assert compressor.compress("com.example.Foo.Bar") == "Foo.Bar"

    def test_same_package_ambiguous_with_import(self, compressor):
        compressor.imports.register("org.other.Foo")
        assert compressor.compress("com.example.Foo") == "com.example.Foo"
        assert compressor.compress("org.other.Foo") == "Foo"

    def test_java_lang(self, compressor):
        assert compressor.compress("java.lang.String") == "String"

    def test_generics(self, compressor):
        compressor.imports.register("java.util.Map")
        compressor.imports.register("java.util.List")
        text = "java.util.Map<java.lang.String, java.util.List<com.example.Foo>>"
        assert compressor.compress(text) == "Map<String, List<Foo>>"

    def test_wildcard_generics(self, compressor):
        compressor.imports.register("java.util.List")
        assert compressor.compress("java.util.List<? extends java.lang.Number>") == \
            "List<? extends Number>"

    def test_arrays_and_varargs(self, compressor):
        assert compressor.compress("java.lang.String[]") == "String[]"
        assert compressor.compress("java.lang.String...") == "String..."

    def test_primitives_unchanged(self, compressor):
        assert compressor.compress("int") == "int"

    def test_empty_package(self):
        c = NameCompressor(ImportTable())
        c.package_prefix = ""
        assert c.compress("Foo") == "Foo"
        assert c.compress("java.util.List") == "java.util.List"
        assert c.compress("java.lang.Object") == "Object"

    def test_ambiguity_only_checks_imports(self, compressor):
        # A same-package name equal to a java.lang simple name is still shortened.
        assert compressor.compress("com.example.String") == "String"
        assert compressor.compress("java.lang.String") == "String"
