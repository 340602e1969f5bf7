"""
Method declarations.

Examples:
    MethodBuilder("Initialize", CsType.VOID)
        .with_body(lambda body: body.assign("_isReady", "true").call("Setup"))

    MethodBuilder("GetOrCreate", CsType.of("T"))
        .with_type_parameter("T")
        .with_type_constraint("T", "new()")
        .with_parameter(CsType.STRING, "key")

    MethodBuilder("Execute", CsType.VOID).with_abstract()
        -> public abstract void Execute();
"""

from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from ..core import syntax
from ..core.indent import IndentEmitter
from ..core.types import CsType
from .code_block import BlockCallback, render_braced
from .constructor import render_parameters
from .members import MemberBuilder, MemberCategory

T = TypeVar("T")


def render_constraints(constraints: List[Tuple[str, str]]) -> str:
    """`` where T : constraint`` clauses in append order."""
    return "".join(
        f" {syntax.WHERE} {type_param} : {constraint}"
        for type_param, constraint in constraints
    )


class MethodBuilder(MemberBuilder):
    """Fluent builder for a single method."""

    category = MemberCategory.METHOD

    def __init__(self, name: str, return_type: CsType):
        super().__init__(name)
        self.return_type = return_type
        self.is_static = False
        self.is_virtual = False
        self.is_override = False
        self.is_abstract = False
        self.is_partial = False
        self.parameters: List[Tuple[CsType, str]] = []
        self.type_parameters: List[str] = []
        self.type_constraints: List[Tuple[str, str]] = []
        self.body: Optional[BlockCallback] = None

    def with_static(self, is_static: bool = True) -> "MethodBuilder":
        self.is_static = is_static
        return self

    def with_virtual(self, is_virtual: bool = True) -> "MethodBuilder":
        self.is_virtual = is_virtual
        return self

    def with_override(self, is_override: bool = True) -> "MethodBuilder":
        self.is_override = is_override
        return self

    def with_abstract(self, is_abstract: bool = True) -> "MethodBuilder":
        """Abstract methods render without a body, even if one is configured."""
        self.is_abstract = is_abstract
        return self

    def with_partial(self, is_partial: bool = True) -> "MethodBuilder":
        """Partial methods render a body only when one is configured."""
        self.is_partial = is_partial
        return self

    def with_parameter(self, type_: CsType, name: str) -> "MethodBuilder":
        self.parameters.append((type_, name))
        return self

    def with_parameters(
        self,
        source: Iterable[T],
        type_selector: Callable[[T], CsType],
        name_selector: Callable[[T], str],
    ) -> "MethodBuilder":
        for item in source:
            self.parameters.append((type_selector(item), name_selector(item)))
        return self

    def with_type_parameter(self, type_param: str) -> "MethodBuilder":
        self.type_parameters.append(type_param)
        return self

    def with_type_parameters(
        self, source: Iterable[T], name_selector: Callable[[T], str]
    ) -> "MethodBuilder":
        for item in source:
            self.type_parameters.append(name_selector(item))
        return self

    def with_type_constraint(self, type_param: str, constraint: str) -> "MethodBuilder":
        """One ``where`` clause; combine several constraints in one string."""
        self.type_constraints.append((type_param, constraint))
        return self

    def with_type_constraints(
        self,
        source: Iterable[T],
        type_param_selector: Callable[[T], str],
        constraint_selector: Callable[[T], str],
    ) -> "MethodBuilder":
        for item in source:
            self.type_constraints.append(
                (type_param_selector(item), constraint_selector(item))
            )
        return self

    def with_body(self, body: BlockCallback) -> "MethodBuilder":
        self.body = body
        return self

    @property
    def is_declaration_only(self) -> bool:
        return self.is_abstract or (self.is_partial and self.body is None)

    def _modifiers(self) -> str:
        parts = [self.visibility.keyword]
        if self.is_static:
            parts.append(syntax.STATIC)
        if self.is_virtual:
            parts.append(syntax.VIRTUAL)
        if self.is_override:
            parts.append(syntax.OVERRIDE)
        if self.is_abstract:
            parts.append(syntax.ABSTRACT)
        if self.is_partial:
            parts.append(syntax.PARTIAL)
        return syntax.join_modifiers(parts)

    def _signature(self) -> str:
        signature = f"{self._modifiers()}{self.return_type.emit()} {self.name}"
        if self.type_parameters:
            signature += f"<{', '.join(self.type_parameters)}>"
        signature += f"({render_parameters(self.parameters)})"
        return signature + render_constraints(self.type_constraints)

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        indent = indent or IndentEmitter()
        preamble = self.render_preamble(indent)

        if self.is_declaration_only:
            return preamble + indent.line(self._signature() + syntax.TERMINATOR) + "\n"

        return preamble + render_braced(indent, self._signature(), self.body)
