"""javawriter - stream Java source text with automatic import shortening."""

from .types import (
    JavaWriterError,
    ScopeMismatchError,
    DuplicateImportError,
    MalformedNameError,
    PackageAlreadySetError,
    CompressionBeforePackageError,
    InvalidParameterListError,
    Modifier,
    Scope,
)
from .imports import ImportTable
from .compression import NameCompressor
from .scopes import ScopeStack
from .literals import string_literal, type_name
from .log import setup_logging, get_logger
from .writer import JavaWriter

__version__ = "0.1.0"
__all__ = [
    "JavaWriter",
    "JavaWriterError",
    "ScopeMismatchError",
    "DuplicateImportError",
    "MalformedNameError",
    "PackageAlreadySetError",
    "CompressionBeforePackageError",
    "InvalidParameterListError",
    "Modifier",
    "Scope",
    "ImportTable",
    "NameCompressor",
    "ScopeStack",
    "string_literal",
    "type_name",
    "setup_logging",
    "get_logger",
]
