"""
Import table: fully-qualified names and the short names they display as.
"""

from .types import TYPE_PATTERN, DuplicateImportError, MalformedNameError
from .log import get_logger

logger = get_logger(__name__)


def simple_name(name: str) -> str:
    """Return the short name an import of `name` makes available.

    Raises MalformedNameError unless the whole string is a qualified name.
    """
    match = TYPE_PATTERN.fullmatch(name)
    if match is None:
        raise MalformedNameError(name)
    return match.group(1)


class ImportTable:
    """Append-only mapping of imported names to their short names."""

    def __init__(self):
        self._short_names: dict[str, str] = {}

    def register(self, name: str) -> str:
        """Register an import and return its short name."""
        short = simple_name(name)
        if name in self._short_names:
            raise DuplicateImportError(name)
        self._short_names[name] = short
        logger.debug(f"Imported {name} as {short}")
        return short

    def lookup(self, name: str):
        """Return the short name for an imported name, or None."""
        return self._short_names.get(name)

    def is_short_name_taken(self, short: str) -> bool:
        return short in self._short_names.values()

    def __contains__(self, name: str) -> bool:
        return name in self._short_names

    def __len__(self) -> int:
        return len(self._short_names)

    def __iter__(self):
        return iter(self._short_names)

    def items(self):
        return self._short_names.items()
