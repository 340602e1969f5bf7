"""
Struct declarations.

Explicit struct constructors must take at least one parameter; a
parameterless one is reported as InvalidParameterlessStructConstructor at
render time.
"""

from typing import List

from ..core import syntax
from .container import ContainerBuilder


class StructBuilder(ContainerBuilder):
    """Fluent builder for a struct declaration."""

    keyword = syntax.STRUCT
    requires_constructor_parameters = True

    def __init__(self, name: str):
        super().__init__(name)
        self.is_readonly = False
        self.is_partial = False

    def with_readonly(self, is_readonly: bool = True) -> "StructBuilder":
        self.is_readonly = is_readonly
        return self

    def with_partial(self, is_partial: bool = True) -> "StructBuilder":
        self.is_partial = is_partial
        return self

    def modifier_keywords(self) -> List[str]:
        parts = []
        if self.is_readonly:
            parts.append(syntax.READONLY)
        if self.is_partial:
            parts.append(syntax.PARTIAL)
        return parts
