"""
Field declarations.

Examples:
    FieldBuilder("_myField", CsType.INT)
        -> private int _myField;

    FieldBuilder("DefaultPosition", CsType.of("Vector3"))
        .with_visibility(Visibility.PUBLIC).with_static().with_readonly()
        .with_default_value("Vector3.zero")
        -> public static readonly Vector3 DefaultPosition = Vector3.zero;
"""

from typing import List, Optional

from ..core import syntax
from ..core.emitter import EmitterError, MissingConstInitializer, raise_first
from ..core.indent import IndentEmitter
from ..core.syntax import Visibility
from ..core.types import CsType
from .members import MemberBuilder, MemberCategory


class FieldBuilder(MemberBuilder):
    """Fluent builder for a single field."""

    category = MemberCategory.FIELD
    default_visibility = Visibility.PRIVATE

    def __init__(self, name: str, field_type: CsType):
        super().__init__(name)
        self.field_type = field_type
        self.is_static = False
        self.is_readonly = False
        self.is_const = False
        self.default_value: Optional[str] = None

    def with_static(self, is_static: bool = True) -> "FieldBuilder":
        self.is_static = is_static
        return self

    def with_const(self, is_const: bool = True) -> "FieldBuilder":
        """Mark the field const; const implies static."""
        self.is_const = is_const
        if is_const:
            self.is_static = True
        return self

    def with_readonly(self, is_readonly: bool = True) -> "FieldBuilder":
        self.is_readonly = is_readonly
        return self

    def with_default_value(self, default_value: Optional[str]) -> "FieldBuilder":
        self.default_value = default_value
        return self

    def validate(self) -> List[EmitterError]:
        if self.is_const and (self.default_value is None or not self.default_value.strip()):
            return [MissingConstInitializer(self.name)]
        return []

    def _modifiers(self) -> str:
        parts = [self.visibility.keyword]
        if self.is_const:
            parts.append(syntax.CONST)
        else:
            if self.is_static:
                parts.append(syntax.STATIC)
            if self.is_readonly:
                parts.append(syntax.READONLY)
        return syntax.join_modifiers(parts)

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        raise_first(self.validate())
        indent = indent or IndentEmitter()

        declaration = f"{self._modifiers()}{self.field_type.emit()} {self.name}"
        if self.default_value is not None:
            declaration += f" = {self.default_value}"

        return self.render_preamble(indent) + indent.line(declaration + syntax.TERMINATOR) + "\n"
