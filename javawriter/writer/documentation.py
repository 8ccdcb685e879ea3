"""
Comments, Javadoc and blank lines.
"""

from ..literals import format_text


class DocumentationMixin:
    """Mixin providing comments."""

    _write: callable
    _indent: callable

    def emit_javadoc(self, javadoc: str, *args):
        """Emit a /** ... */ block, one " * " line per line of text."""
        text = format_text(javadoc, args)
        lines = text.split("\n")
        if text:
            # Trailing empty lines are dropped; only empty text keeps one.
            while lines and not lines[-1]:
                lines.pop()
        self._indent()
        self._write("/**\n")
        for line in lines:
            self._indent()
            self._write(f" * {line}\n" if line else " *\n")
        self._indent()
        self._write(" */\n")
        return self

    def emit_single_line_comment(self, comment: str, *args):
        self._indent()
        self._write(f"// {format_text(comment, args)}\n")
        return self

    def emit_empty_line(self):
        self._write("\n")
        return self
