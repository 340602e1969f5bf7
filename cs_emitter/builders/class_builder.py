"""
Class declarations.

Examples:
    ClassBuilder("MyHandler").with_base_class("BaseHandler")
        -> public class MyHandler : BaseHandler

    ClassBuilder("MyHandler")
        .with_type_parameter("T")
        .with_base_class(CsType.generic("BaseHandler", CsType.of("T")))
        .with_type_constraint("T", "IMessage")
        -> public class MyHandler<T> : BaseHandler<T> where T : IMessage
"""

from typing import List, Optional, Union

from ..core import syntax
from ..core.types import CsType
from .container import ContainerBuilder


class ClassBuilder(ContainerBuilder):
    """Fluent builder for a class declaration."""

    keyword = syntax.CLASS

    def __init__(self, name: str):
        super().__init__(name)
        self.is_static = False
        self.is_abstract = False
        self.is_sealed = False
        self.is_partial = False
        self.base_class: Optional[str] = None

    def with_static(self, is_static: bool = True) -> "ClassBuilder":
        self.is_static = is_static
        return self

    def with_abstract(self, is_abstract: bool = True) -> "ClassBuilder":
        self.is_abstract = is_abstract
        return self

    def with_sealed(self, is_sealed: bool = True) -> "ClassBuilder":
        self.is_sealed = is_sealed
        return self

    def with_partial(self, is_partial: bool = True) -> "ClassBuilder":
        self.is_partial = is_partial
        return self

    def with_base_class(self, base_class: Union[str, CsType]) -> "ClassBuilder":
        """Set the base class by plain name or full (possibly generic) type."""
        self.base_class = base_class.emit() if isinstance(base_class, CsType) else base_class
        return self

    def modifier_keywords(self) -> List[str]:
        parts = []
        if self.is_static:
            parts.append(syntax.STATIC)
        if self.is_abstract:
            parts.append(syntax.ABSTRACT)
        if self.is_sealed:
            parts.append(syntax.SEALED)
        if self.is_partial:
            parts.append(syntax.PARTIAL)
        return parts

    def base_clause(self) -> str:
        return f" : {self.base_class}" if self.base_class is not None else ""
