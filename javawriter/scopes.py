"""
Scope stack: the nesting state machine behind indentation.
"""

from typing import Optional

from .types import Scope, METHOD_SCOPES, ScopeMismatchError
from .log import get_logger

logger = get_logger(__name__)


class ScopeStack:
    """Open scopes, innermost last. Its depth is the indentation depth."""

    def __init__(self):
        self._scopes: list[Scope] = []

    @property
    def top(self) -> Optional[Scope]:
        """The innermost open scope, or None at file level."""
        return self._scopes[-1] if self._scopes else None

    def __len__(self) -> int:
        return len(self._scopes)

    def __bool__(self) -> bool:
        return bool(self._scopes)

    def __iter__(self):
        return iter(self._scopes)

    def push(self, scope: Scope):
        self._scopes.append(scope)
        logger.debug(f"push {scope.value} (depth {len(self._scopes)})")

    def pop(self, *expected: Scope, operation: str = "pop") -> Scope:
        """Pop the innermost scope, which must be one of `expected`."""
        actual = self.top
        if actual is None or actual not in expected:
            raise ScopeMismatchError(operation, expected, actual)
        self._scopes.pop()
        logger.debug(f"pop {actual.value} (depth {len(self._scopes)})")
        return actual

    def in_statement_scope(self) -> bool:
        return self.top in METHOD_SCOPES

    def check_in(self, operation: str, *allowed: Optional[Scope]):
        """Raise unless the innermost scope is one of `allowed`.

        None in `allowed` stands for file level.
        """
        if self.top not in allowed:
            raise ScopeMismatchError(operation, allowed, self.top)

    def check_in_method(self, operation: str):
        """Raise unless a statement may appear here."""
        self.check_in(operation, *METHOD_SCOPES)


class TypeNameStack:
    """Names of the open type declarations, innermost last."""

    def __init__(self):
        self._names: list[str] = []

    def push(self, name: str):
        self._names.append(name)

    def pop(self) -> str:
        return self._names.pop()

    @property
    def innermost(self) -> Optional[str]:
        return self._names[-1] if self._names else None

    def __len__(self) -> int:
        return len(self._names)
