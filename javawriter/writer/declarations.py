"""
Type, method, constructor, initializer, field and enum constant output.
"""

from typing import Optional, Sequence

from ..scopes import ScopeStack, TypeNameStack
from ..types import Scope, Modifier, InvalidParameterListError, ordered_modifiers


def _names(names) -> tuple:
    """A single name or a sequence of names, as a tuple."""
    if isinstance(names, str):
        return (names,)
    return tuple(names or ())


class DeclarationMixin:
    """Mixin providing declarations."""

    # These are expected from the JavaWriter base
    scopes: ScopeStack
    types: TypeNameStack
    _write: callable
    _indent: callable
    _emit_compressed_type: callable
    _emit_modifiers: callable

    # ==================== TYPES ====================

    def begin_type(self, type_name: str, kind: str, modifiers=(),
                   extends_type: Optional[str] = None,
                   implements_types: Sequence[str] = ()):
        """Open a type declaration, e.g. begin_type("com.example.Foo", "class")."""
        self.scopes.check_in("begin_type", None, Scope.TYPE)
        modifiers = ordered_modifiers(modifiers)
        implements_types = _names(implements_types)
        self._indent()
        self._emit_modifiers(modifiers)
        self._write(f"{kind} ")
        self._emit_compressed_type(type_name)
        if extends_type is not None:
            self._write(" extends ")
            self._emit_compressed_type(extends_type)
        if implements_types:
            self._write("\n")
            self._indent()
            self._write("    implements ")
            for i, implements_type in enumerate(implements_types):
                if i:
                    self._write(", ")
                self._emit_compressed_type(implements_type)
        self._write(" {\n")
        self.scopes.push(Scope.TYPE)
        self.types.push(type_name)
        return self

    def end_type(self):
        self.scopes.pop(Scope.TYPE, operation="end_type")
        self.types.pop()
        self._indent()
        self._write("}\n")
        return self

    # ==================== METHODS ====================

    def begin_method(self, return_type: Optional[str], name: str, modifiers=(),
                     parameters: Sequence[str] = (),
                     throws_types: Sequence[str] = ()):
        """Open a method.

        `parameters` alternates types and names: ["int", "x", "String", "s"].
        A None return type declares a constructor named `name`. Abstract
        methods get no body; close them with end_method() all the same.
        """
        self.scopes.check_in("begin_method", Scope.TYPE)
        parameters = _names(parameters)
        throws_types = _names(throws_types)
        if len(parameters) % 2:
            raise InvalidParameterListError(parameters)
        modifiers = ordered_modifiers(modifiers)

        self._indent()
        self._emit_modifiers(modifiers)
        if return_type is not None:
            self._emit_compressed_type(return_type)
            self._write(f" {name}")
        else:
            self._emit_compressed_type(name)
        self._write("(")
        for p in range(0, len(parameters), 2):
            if p:
                self._write(", ")
            self._emit_compressed_type(parameters[p])
            self._write(" ")
            self._emit_compressed_type(parameters[p + 1])
        self._write(")")
        if throws_types:
            self._write("\n")
            self._indent()
            self._write("    throws ")
            for i, throws_type in enumerate(throws_types):
                if i:
                    self._write(", ")
                self._emit_compressed_type(throws_type)

        if Modifier.ABSTRACT in modifiers:
            self._write(";\n")
            self.scopes.push(Scope.ABSTRACT_METHOD)
        else:
            self._write(" {\n")
            self.scopes.push(Scope.CONSTRUCTOR if return_type is None else Scope.METHOD)
        return self

    def end_method(self):
        """Close a method or constructor; a no-op on the page for abstract methods."""
        popped = self.scopes.pop(Scope.METHOD, Scope.CONSTRUCTOR, Scope.ABSTRACT_METHOD,
                                 operation="end_method")
        if popped is not Scope.ABSTRACT_METHOD:
            self._indent()
            self._write("}\n")
        return self

    def begin_constructor(self, modifiers=(), parameters: Sequence[str] = (),
                          throws_types: Sequence[str] = ()):
        """Open a constructor for the innermost open type."""
        self.scopes.check_in("begin_constructor", Scope.TYPE)
        return self.begin_method(None, self.types.innermost, modifiers, parameters, throws_types)

    def end_constructor(self):
        self.scopes.pop(Scope.CONSTRUCTOR, operation="end_constructor")
        self._indent()
        self._write("}\n")
        return self

    # ==================== INITIALIZERS ====================

    def begin_initializer(self, is_static: bool):
        self.scopes.check_in("begin_initializer", Scope.TYPE)
        self._indent()
        self._write("static {\n" if is_static else "{\n")
        self.scopes.push(Scope.INITIALIZER)
        return self

    def end_initializer(self):
        self.scopes.pop(Scope.INITIALIZER, operation="end_initializer")
        self._indent()
        self._write("}\n")
        return self

    # ==================== MEMBERS ====================

    def emit_field(self, type_name: str, name: str, modifiers=(),
                   initial_value: Optional[str] = None):
        modifiers = ordered_modifiers(modifiers)
        self._indent()
        self._emit_modifiers(modifiers)
        self._emit_compressed_type(type_name)
        self._write(f" {name}")
        if initial_value is not None:
            self._write(f" = {initial_value}")
        self._write(";\n")
        return self

    def emit_enum_value(self, name: str):
        self._indent()
        self._write(f"{name},\n")
        return self

    def emit_last_enum_value(self, name: str):
        self._indent()
        self._write(f"{name};\n")
        return self

    def emit_enum_values(self, names):
        """Emit enum constants, terminating the last one with a semicolon."""
        names = list(names)
        for i, name in enumerate(names):
            if i == len(names) - 1:
                self.emit_last_enum_value(name)
            else:
                self.emit_enum_value(name)
        return self
