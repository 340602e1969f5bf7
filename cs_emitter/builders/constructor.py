"""Constructor declarations with optional ``base(...)``/``this(...)`` chaining."""

from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from ..core import syntax
from ..core.indent import IndentEmitter
from ..core.types import CsType
from .code_block import BlockCallback, render_braced
from .members import MemberBuilder, MemberCategory

T = TypeVar("T")


def render_parameters(parameters: List[Tuple[CsType, str]]) -> str:
    return ", ".join(f"{type_.emit()} {name}" for type_, name in parameters)


class ConstructorBuilder(MemberBuilder):
    """Fluent builder for a constructor of the named type."""

    category = MemberCategory.CONSTRUCTOR

    def __init__(self, type_name: str):
        super().__init__(type_name)
        self.parameters: List[Tuple[CsType, str]] = []
        self.base_args: Optional[Tuple[str, ...]] = None
        self.this_args: Optional[Tuple[str, ...]] = None
        self.body: Optional[BlockCallback] = None

    @property
    def has_parameters(self) -> bool:
        return len(self.parameters) > 0

    def with_parameter(self, type_: CsType, name: str) -> "ConstructorBuilder":
        self.parameters.append((type_, name))
        return self

    def with_parameters(
        self,
        source: Iterable[T],
        type_selector: Callable[[T], CsType],
        name_selector: Callable[[T], str],
    ) -> "ConstructorBuilder":
        for item in source:
            self.parameters.append((type_selector(item), name_selector(item)))
        return self

    def with_base_call(self, *args: str) -> "ConstructorBuilder":
        """Chain to the base type constructor; wins over a ``this`` call."""
        self.base_args = args
        return self

    def with_this_call(self, *args: str) -> "ConstructorBuilder":
        self.this_args = args
        return self

    def with_body(self, body: BlockCallback) -> "ConstructorBuilder":
        self.body = body
        return self

    def _signature(self) -> str:
        signature = (
            f"{self.visibility.keyword} {self.name}({render_parameters(self.parameters)})"
        )
        if self.base_args is not None:
            signature += f" : {syntax.BASE}({', '.join(self.base_args)})"
        elif self.this_args is not None:
            signature += f" : {syntax.THIS}({', '.join(self.this_args)})"
        return signature

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        indent = indent or IndentEmitter()
        return self.render_preamble(indent) + render_braced(
            indent, self._signature(), self.body
        )
