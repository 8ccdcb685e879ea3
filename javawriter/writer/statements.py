"""
Statements, control flow blocks and switches.
"""

from ..literals import format_text
from ..scopes import ScopeStack
from ..types import Scope


class StatementMixin:
    """Mixin providing statement output."""

    scopes: ScopeStack
    _write: callable
    _indent: callable
    _hanging_indent: callable

    def emit_statement(self, pattern: str, *args):
        """Emit a statement, adding the semicolon.

        Lines after the first get a hanging indent two levels deeper.
        """
        self.scopes.check_in_method("emit_statement")
        lines = format_text(pattern, args).split("\n")
        self._indent()
        self._write(lines[0])
        for line in lines[1:]:
            self._write("\n")
            self._hanging_indent()
            self._write(line)
        self._write(";\n")
        return self

    def begin_control_flow(self, control_flow: str):
        """Open a block such as begin_control_flow("if (x == null)")."""
        self.scopes.check_in_method("begin_control_flow")
        self._indent()
        self._write(f"{control_flow} {{\n")
        self.scopes.push(Scope.CONTROL_FLOW)
        return self

    def next_control_flow(self, control_flow: str):
        """Close the current block and open the next, as in "} else {"."""
        self.scopes.pop(Scope.CONTROL_FLOW, operation="next_control_flow")
        self._indent()
        self.scopes.push(Scope.CONTROL_FLOW)
        self._write(f"}} {control_flow} {{\n")
        return self

    def end_control_flow(self, control_flow: str = None):
        """Close a block; a trailing clause gives "} while (x);"."""
        self.scopes.pop(Scope.CONTROL_FLOW, operation="end_control_flow")
        self._indent()
        if control_flow is not None:
            self._write(f"}} {control_flow};\n")
        else:
            self._write("}\n")
        return self

    def begin_switch(self, expression: str):
        self.scopes.check_in_method("begin_switch")
        self._indent()
        self.scopes.push(Scope.SWITCH)
        self._write(f"switch({expression}) {{\n")
        return self

    def end_switch(self):
        self.scopes.pop(Scope.SWITCH, operation="end_switch")
        self._indent()
        self._write("}\n")
        return self
