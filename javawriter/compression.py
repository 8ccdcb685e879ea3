"""
Type name compression.

Every qualified-name-shaped run in a piece of text is replaced by the
shortest form that still reads unambiguously given the imports and the
current package. Everything between those runs (generic brackets,
commas, whitespace, operators) is copied through unchanged.
"""

from typing import Optional

from .imports import ImportTable
from .types import TYPE_PATTERN, JAVA_LANG_PREFIX, CompressionBeforePackageError
from .log import get_logger

logger = get_logger(__name__)


class NameCompressor:
    """Shortens fully-qualified names using imports and package context."""

    def __init__(self, imports: ImportTable):
        self.imports = imports
        self.package_prefix: Optional[str] = None

    def compress(self, text: str) -> str:
        """Rewrite every type name in `text` to its shortest display form."""
        if self.package_prefix is None:
            raise CompressionBeforePackageError(text)
        return TYPE_PATTERN.sub(lambda m: self.compress_name(m.group(0)), text)

    def compress_name(self, name: str) -> str:
        """Compress one qualified name."""
        imported = self.imports.lookup(name)
        if imported is not None:
            return imported
        if self.is_class_in_package(name):
            compressed = name[len(self.package_prefix):]
            if self.imports.is_short_name_taken(compressed):
                logger.debug(f"{compressed} is ambiguous, keeping {name}")
                return name
            return compressed
        if name.startswith(JAVA_LANG_PREFIX):
            return name[len(JAVA_LANG_PREFIX):]
        return name

    def is_class_in_package(self, name: str) -> bool:
        """Guess whether `name` names a class in the current package.

        A name directly under the package is; a deeper name is only when
        the part after the package starts upper-case (a nested class
        rather than a subpackage).
        """
        prefix = self.package_prefix
        if not name.startswith(prefix):
            return False
        if name.find(".", len(prefix)) == -1:
            return True
        return name[len(prefix)].isupper()
