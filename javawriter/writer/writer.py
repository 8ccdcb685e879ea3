"""
The JavaWriter: streams Java source text to a character sink.
"""

from collections.abc import Iterable
from typing import Optional, TextIO

from ..compression import NameCompressor
from ..imports import ImportTable
from ..scopes import ScopeStack, TypeNameStack
from ..types import DEFAULT_INDENT, PackageAlreadySetError, ordered_modifiers
from ..log import get_logger

from .declarations import DeclarationMixin
from .statements import StatementMixin
from .annotations import AnnotationMixin
from .documentation import DocumentationMixin

logger = get_logger(__name__)


def _iter_names(names) -> Iterable[str]:
    for item in names:
        if isinstance(item, str):
            yield item
        else:
            yield from item


class JavaWriter(
    DeclarationMixin,
    StatementMixin,
    AnnotationMixin,
    DocumentationMixin,
):
    """Emits Java source one construct at a time.

    Every call writes straight through to `out`; the writer only keeps the
    open scopes, the names of open types and the import table. Type names
    passed to declarations are compressed against the imports and the
    package given to emit_package(), which must be called first.
    """

    def __init__(self, out: TextIO, indent: str = DEFAULT_INDENT, compressing_types: bool = True):
        self.out = out
        self.indent = indent
        self.compressing_types = compressing_types
        self.imports = ImportTable()
        self.compressor = NameCompressor(self.imports)
        self.scopes = ScopeStack()
        self.types = TypeNameStack()
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        """Close the sink. Open scopes are not checked or closed."""
        if self._closed:
            return
        self._closed = True
        close = getattr(self.out, "close", None)
        if close is not None:
            close()
        logger.debug("Output closed")

    @property
    def depth(self) -> int:
        return len(self.scopes)

    @property
    def package_prefix(self) -> Optional[str]:
        return self.compressor.package_prefix

    # ==================== LOW-LEVEL OUTPUT ====================

    def _write(self, text: str):
        self.out.write(text)

    def _indent(self):
        self.out.write(self.indent * len(self.scopes))

    def _hanging_indent(self):
        self.out.write(self.indent * (len(self.scopes) + 2))

    def _emit_compressed_type(self, type_text: str):
        if self.compressing_types:
            self.out.write(self.compress_type(type_text))
        else:
            self.out.write(type_text)

    def _emit_modifiers(self, modifiers):
        for modifier in ordered_modifiers(modifiers):
            self.out.write(f"{modifier} ")

    def compress_type(self, type_text: str) -> str:
        """Return `type_text` with every type name in its shortest form."""
        return self.compressor.compress(type_text)

    # ==================== PACKAGE & IMPORTS ====================

    def emit_package(self, package_name: str):
        """Emit the package declaration. An empty name means the default package."""
        current = self.compressor.package_prefix
        if current is not None:
            raise PackageAlreadySetError(current.rstrip("."), package_name)
        if not package_name:
            self.compressor.package_prefix = ""
        else:
            self._write(f"package {package_name};\n\n")
            self.compressor.package_prefix = package_name + "."
        logger.debug(f"Package set to {package_name!r}")
        return self

    def emit_imports(self, *names):
        """Emit `import` lines, sorted and de-duplicated, for names or iterables of names."""
        return self._emit_imports("import", names)

    def emit_static_imports(self, *names):
        """Emit `import static` lines for the given members."""
        return self._emit_imports("import static", names)

    def _emit_imports(self, keyword: str, names):
        for name in sorted(set(_iter_names(names))):
            self.imports.register(name)
            self._write(f"{keyword} {name};\n")
        return self
