"""
Annotation output and attribute layout.
"""

from collections.abc import Mapping

from ..scopes import ScopeStack
from ..types import Scope, MAX_SINGLE_LINE_ATTRIBUTES


def _is_array(value) -> bool:
    return isinstance(value, (list, tuple))


def _value_text(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class AnnotationMixin:
    """Mixin providing annotations."""

    scopes: ScopeStack
    _write: callable
    _indent: callable
    _emit_compressed_type: callable

    def emit_annotation(self, annotation: str, value=None):
        """Annotate the next element.

        `value` may be omitted (bare annotation), a mapping of attribute
        names to values, or a single value for the `value` attribute.
        List and tuple values are written as array initializers.
        """
        if value is None:
            return self._emit_annotation_attributes(annotation, {})
        if isinstance(value, Mapping):
            return self._emit_annotation_attributes(annotation, value)
        self._indent()
        self._write("@")
        self._emit_compressed_type(annotation)
        self._write("(")
        self._emit_annotation_value(value)
        self._write(")\n")
        return self

    def _emit_annotation_attributes(self, annotation: str, attributes: Mapping):
        self._indent()
        self._write("@")
        self._emit_compressed_type(annotation)
        if len(attributes) == 1:
            (key, value), = attributes.items()
            self._write("(")
            if key != "value":
                self._write(f"{key} = ")
            self._emit_annotation_value(value)
            self._write(")")
        elif attributes:
            split = (len(attributes) > MAX_SINGLE_LINE_ATTRIBUTES
                     or any(_is_array(v) for v in attributes.values()))
            self._write("(")
            self.scopes.push(Scope.ANNOTATION_ATTRIBUTE)
            separator = "\n" if split else ""
            for key, value in attributes.items():
                self._write(separator)
                separator = ",\n" if split else ", "
                if split:
                    self._indent()
                self._write(f"{key} = ")
                self._emit_annotation_value(value)
            self.scopes.pop(Scope.ANNOTATION_ATTRIBUTE, operation="emit_annotation")
            if split:
                self._write("\n")
                self._indent()
            self._write(")")
        self._write("\n")
        return self

    def _emit_annotation_value(self, value):
        if not _is_array(value):
            self._write(_value_text(value))
            return
        self._write("{")
        self.scopes.push(Scope.ANNOTATION_ARRAY_VALUE)
        separator = "\n"
        for element in value:
            self._write(separator)
            separator = ",\n"
            self._indent()
            self._write(_value_text(element))
        self.scopes.pop(Scope.ANNOTATION_ARRAY_VALUE, operation="emit_annotation")
        self._write("\n")
        self._indent()
        self._write("}")
