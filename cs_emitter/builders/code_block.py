"""
Statement blocks for method, constructor and accessor bodies.

The block only records statements; expression text is emitted verbatim.
Compound statements (if/else, foreach, for) keep the caller's callback and run
it against a fresh nested block at render time, sharing the same indent.

Example:
    body = (
        CodeBlockBuilder()
        .declare_local("instance", "new MyClass()")
        .assign("_instance", "instance")
        .call("Setup", "true", "42", target="_instance")
        .for_each("point", "_points", lambda loop: loop.call("ProcessPoint", "point"),
                  item_type=CsType.of("Vector3"))
        .if_("_instance.IsReady",
             lambda then: then.call("OnReady"),
             lambda otherwise: otherwise.call("LogError", '"Not ready"'))
    )
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..core import syntax
from ..core.indent import IndentEmitter
from ..core.types import CsType

BlockCallback = Callable[["CodeBlockBuilder"], None]


def _type_or_var(type_: Optional[CsType]) -> str:
    return type_.emit() if type_ is not None else syntax.VAR


def _call_expression(target: Optional[str], method: str, args: Sequence[str]) -> str:
    call = f"{method}({', '.join(args)})"
    return f"{target}.{call}" if target is not None else call


def render_braced(indent: IndentEmitter, header: str, callback: Optional[BlockCallback]) -> str:
    """Render ``header { nested block }`` at the current depth."""
    out = [
        indent.line(header) + "\n",
        indent.line(syntax.OPEN_BRACE) + "\n",
    ]
    indent.push()
    if callback is not None:
        nested = CodeBlockBuilder()
        callback(nested)
        out.append(nested.render(indent))
    indent.pop()
    out.append(indent.line(syntax.CLOSE_BRACE) + "\n")
    return "".join(out)


# ---------------------------------------------------------------------------
# Statement variants
# ---------------------------------------------------------------------------


@dataclass
class LocalDeclaration:
    name: str
    value: Optional[str] = None
    type: Optional[CsType] = None

    def render(self, indent: IndentEmitter) -> str:
        type_part = _type_or_var(self.type)
        if self.value is not None:
            return indent.line(f"{type_part} {self.name} = {self.value};") + "\n"
        return indent.line(f"{type_part} {self.name};") + "\n"


@dataclass
class Assignment:
    target: str
    value: str

    def render(self, indent: IndentEmitter) -> str:
        return indent.line(f"{self.target} = {self.value};") + "\n"


@dataclass
class CompoundAssignment:
    target: str
    op: str
    value: str

    def render(self, indent: IndentEmitter) -> str:
        return indent.line(f"{self.target} {self.op}= {self.value};") + "\n"


@dataclass
class MethodCall:
    method: str
    args: Sequence[str]
    target: Optional[str] = None

    def render(self, indent: IndentEmitter) -> str:
        return indent.line(_call_expression(self.target, self.method, self.args) + ";") + "\n"


@dataclass
class CallAndAssign:
    result_name: str
    method: str
    args: Sequence[str]
    target: Optional[str] = None
    result_type: Optional[CsType] = None

    def render(self, indent: IndentEmitter) -> str:
        call = _call_expression(self.target, self.method, self.args)
        return indent.line(f"{_type_or_var(self.result_type)} {self.result_name} = {call};") + "\n"


@dataclass
class Return:
    value: Optional[str] = None

    def render(self, indent: IndentEmitter) -> str:
        if self.value is not None:
            return indent.line(f"{syntax.RETURN} {self.value};") + "\n"
        return indent.line(f"{syntax.RETURN};") + "\n"


@dataclass
class IfStatement:
    condition: str
    then_body: BlockCallback
    else_body: Optional[BlockCallback] = None

    def render(self, indent: IndentEmitter) -> str:
        text = render_braced(indent, f"{syntax.IF} ({self.condition})", self.then_body)
        if self.else_body is not None:
            text += render_braced(indent, syntax.ELSE, self.else_body)
        return text


@dataclass
class ForEachStatement:
    item_name: str
    collection: str
    body: BlockCallback
    item_type: Optional[CsType] = None

    def render(self, indent: IndentEmitter) -> str:
        header = (
            f"{syntax.FOREACH} ({_type_or_var(self.item_type)} {self.item_name} "
            f"{syntax.IN} {self.collection})"
        )
        return render_braced(indent, header, self.body)


@dataclass
class ForStatement:
    initializer: str
    condition: str
    iterator: str
    body: BlockCallback

    def render(self, indent: IndentEmitter) -> str:
        header = f"{syntax.FOR} ({self.initializer}; {self.condition}; {self.iterator})"
        return render_braced(indent, header, self.body)


@dataclass
class RawStatement:
    line: str

    def render(self, indent: IndentEmitter) -> str:
        return indent.line(self.line) + "\n"


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class CodeBlockBuilder:
    """Ordered sequence of statements rendered at the current indent."""

    def __init__(self):
        self.statements: List = []

    def declare_local(
        self, name: str, value: Optional[str] = None, type: Optional[CsType] = None
    ) -> "CodeBlockBuilder":
        """Declare a local; ``var`` is used when no type is given."""
        self.statements.append(LocalDeclaration(name, value, type))
        return self

    def assign(self, target: str, value: str) -> "CodeBlockBuilder":
        self.statements.append(Assignment(target, value))
        return self

    def compound_assign(self, target: str, op: str, value: str) -> "CodeBlockBuilder":
        """``target op= value;`` for ``op`` such as ``+`` or ``??``."""
        self.statements.append(CompoundAssignment(target, op, value))
        return self

    def call(self, method: str, *args: str, target: Optional[str] = None) -> "CodeBlockBuilder":
        self.statements.append(MethodCall(method, args, target))
        return self

    def call_and_assign(
        self,
        result_name: str,
        method: str,
        *args: str,
        target: Optional[str] = None,
        type: Optional[CsType] = None,
    ) -> "CodeBlockBuilder":
        """Store a call result in a new local (``var`` unless a type is given)."""
        self.statements.append(CallAndAssign(result_name, method, args, target, type))
        return self

    def return_(self, value: Optional[str] = None) -> "CodeBlockBuilder":
        self.statements.append(Return(value))
        return self

    def if_(
        self,
        condition: str,
        then_body: BlockCallback,
        else_body: Optional[BlockCallback] = None,
    ) -> "CodeBlockBuilder":
        self.statements.append(IfStatement(condition, then_body, else_body))
        return self

    def for_each(
        self,
        item_name: str,
        collection: str,
        body: BlockCallback,
        item_type: Optional[CsType] = None,
    ) -> "CodeBlockBuilder":
        self.statements.append(ForEachStatement(item_name, collection, body, item_type))
        return self

    def for_(
        self, initializer: str, condition: str, iterator: str, body: BlockCallback
    ) -> "CodeBlockBuilder":
        self.statements.append(ForStatement(initializer, condition, iterator, body))
        return self

    def raw(self, line: str) -> "CodeBlockBuilder":
        """Add a line not covered by the other statement kinds."""
        self.statements.append(RawStatement(line))
        return self

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        indent = indent or IndentEmitter()
        return "".join(statement.render(indent) for statement in self.statements)
