"""
Errors, scope tags, modifiers and constants shared by the writer.
"""

import re
from enum import Enum
from typing import Iterable, Optional


DEFAULT_INDENT = "  "
MAX_SINGLE_LINE_ATTRIBUTES = 3
JAVA_LANG_PREFIX = "java.lang."

# Leading "segment." runs, then the simple name (which may hold '.', '$' or '*').
TYPE_PATTERN = re.compile(r"(?:[\w$]+\.)*([\w.*$]+)", re.ASCII)


class JavaWriterError(Exception):
    """Base class for call-sequencing errors raised by the writer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Scope(Enum):
    """A nesting context on the scope stack."""
    TYPE = "type"
    ABSTRACT_METHOD = "abstract method"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    CONTROL_FLOW = "control flow"
    ANNOTATION_ATTRIBUTE = "annotation attribute"
    ANNOTATION_ARRAY_VALUE = "annotation array value"
    INITIALIZER = "initializer"
    SWITCH = "switch"


# Scopes in which a statement may appear.
METHOD_SCOPES = (
    Scope.METHOD,
    Scope.CONSTRUCTOR,
    Scope.CONTROL_FLOW,
    Scope.INITIALIZER,
    Scope.SWITCH,
)


def _scope_label(scope: Optional[Scope]) -> str:
    return scope.value if scope is not None else "file level"


class ScopeMismatchError(JavaWriterError):
    """An operation was issued in a scope that does not allow it."""

    def __init__(self, operation: str, expected: Iterable[Optional[Scope]], actual: Optional[Scope]):
        self.operation = operation
        self.expected = tuple(expected)
        self.actual = actual
        wanted = " or ".join(_scope_label(s) for s in self.expected)
        found = _scope_label(actual)
        super().__init__(f"{operation}: expected {wanted}, found {found}")


class DuplicateImportError(JavaWriterError):
    """The same fully-qualified name was imported twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate import: {name}")


class MalformedNameError(JavaWriterError, ValueError):
    """An import is not a qualified type name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Not a qualified name: {name!r}")


class PackageAlreadySetError(JavaWriterError):
    """The package declaration was emitted more than once."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Package already set to {current!r}, cannot set {requested!r}")


class CompressionBeforePackageError(JavaWriterError):
    """A type name was compressed before the package was emitted."""

    def __init__(self, type_text: str):
        self.type_text = type_text
        super().__init__(f"Cannot compress {type_text!r} before emit_package()")


class InvalidParameterListError(JavaWriterError, ValueError):
    """A parameter list does not alternate type and name."""

    def __init__(self, parameters: Iterable[str]):
        self.parameters = tuple(parameters)
        super().__init__(
            f"Parameters must be type/name pairs, got {len(self.parameters)} entries"
        )


class Modifier(Enum):
    """Java modifiers, declared in the order they are written out."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    ABSTRACT = "abstract"
    DEFAULT = "default"
    STATIC = "static"
    FINAL = "final"
    TRANSIENT = "transient"
    VOLATILE = "volatile"
    SYNCHRONIZED = "synchronized"
    NATIVE = "native"
    STRICTFP = "strictfp"

    def __str__(self) -> str:
        return self.value


_MODIFIER_ORDER = {m: i for i, m in enumerate(Modifier)}


def ordered_modifiers(modifiers: Optional[Iterable]) -> list[Modifier]:
    """Normalize modifiers (members or keywords) into canonical order."""
    if not modifiers:
        return []
    if isinstance(modifiers, (str, Modifier)):
        modifiers = (modifiers,)
    result = {m if isinstance(m, Modifier) else Modifier(m.lower()) for m in modifiers}
    return sorted(result, key=_MODIFIER_ORDER.__getitem__)
