"""
Property declarations.

A property uses exactly one body style:

* auto        ``public int MyProp { get; private set; }``
* expression  ``public static CombatDef Combat => Runtime.Combat;``
* full        separate ``get``/``set`` blocks with statement bodies
"""

from typing import List, Optional

from ..core import syntax
from ..core.emitter import ConflictingPropertyBody, EmitterError, raise_first
from ..core.indent import IndentEmitter
from ..core.syntax import Visibility
from ..core.types import CsType
from .code_block import BlockCallback, render_braced
from .members import MemberBuilder, MemberCategory


class PropertyBuilder(MemberBuilder):
    """Fluent builder for a single property."""

    category = MemberCategory.PROPERTY

    def __init__(self, name: str, property_type: CsType):
        super().__init__(name)
        self.property_type = property_type
        self.is_static = False
        self.default_value: Optional[str] = None
        self.expression_body: Optional[str] = None

        self.has_getter = False
        self.has_setter = False
        self.getter: Optional[BlockCallback] = None
        self.setter: Optional[BlockCallback] = None
        self.getter_visibility: Optional[Visibility] = None
        self.setter_visibility: Optional[Visibility] = None

    def with_static(self, is_static: bool = True) -> "PropertyBuilder":
        self.is_static = is_static
        return self

    def with_default_value(self, default_value: Optional[str]) -> "PropertyBuilder":
        """Initializer for auto properties: ``{ get; set; } = value;``."""
        self.default_value = default_value
        return self

    def with_auto_getter(self, visibility: Optional[Visibility] = None) -> "PropertyBuilder":
        self.has_getter = True
        self.getter = None
        self.getter_visibility = visibility
        return self

    def with_auto_setter(self, visibility: Optional[Visibility] = None) -> "PropertyBuilder":
        self.has_setter = True
        self.setter = None
        self.setter_visibility = visibility
        return self

    def with_getter(
        self, body: BlockCallback, visibility: Optional[Visibility] = None
    ) -> "PropertyBuilder":
        self.has_getter = True
        self.getter = body
        self.getter_visibility = visibility
        return self

    def with_setter(
        self, body: BlockCallback, visibility: Optional[Visibility] = None
    ) -> "PropertyBuilder":
        self.has_setter = True
        self.setter = body
        self.setter_visibility = visibility
        return self

    def with_expression_getter(self, expression: str) -> "PropertyBuilder":
        self.expression_body = expression
        return self

    def validate(self) -> List[EmitterError]:
        if self.expression_body is not None and (self.has_getter or self.has_setter):
            return [ConflictingPropertyBody(self.name)]
        return []

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        raise_first(self.validate())
        indent = indent or IndentEmitter()

        if self.expression_body is not None:
            body = self._render_expression(indent)
        elif self.getter is None and self.setter is None:
            body = self._render_auto(indent)
        else:
            body = self._render_full(indent)

        return self.render_preamble(indent) + body

    def _declaration(self) -> str:
        parts = [self.visibility.keyword]
        if self.is_static:
            parts.append(syntax.STATIC)
        return f"{syntax.join_modifiers(parts)}{self.property_type.emit()} {self.name}"

    def _render_expression(self, indent: IndentEmitter) -> str:
        return indent.line(f"{self._declaration()} => {self.expression_body};") + "\n"

    def _render_auto(self, indent: IndentEmitter) -> str:
        accessors = ""
        if self.has_getter:
            accessors += f"{_accessor_prefix(self.getter_visibility)}{syntax.GET}; "
        if self.has_setter:
            accessors += f"{_accessor_prefix(self.setter_visibility)}{syntax.SET}; "

        initializer = f" = {self.default_value};" if self.default_value is not None else ""
        return indent.line(f"{self._declaration()} {{ {accessors}}}{initializer}") + "\n"

    def _render_full(self, indent: IndentEmitter) -> str:
        out = [
            indent.line(self._declaration()) + "\n",
            indent.line(syntax.OPEN_BRACE) + "\n",
        ]
        indent.push()
        if self.has_getter:
            header = f"{_accessor_prefix(self.getter_visibility)}{syntax.GET}"
            out.append(render_braced(indent, header, self.getter))
        if self.has_setter:
            header = f"{_accessor_prefix(self.setter_visibility)}{syntax.SET}"
            out.append(render_braced(indent, header, self.setter))
        indent.pop()
        out.append(indent.line(syntax.CLOSE_BRACE) + "\n")
        return "".join(out)


def _accessor_prefix(visibility: Optional[Visibility]) -> str:
    return f"{visibility.keyword} " if visibility is not None else ""
