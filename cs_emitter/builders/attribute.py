"""Attribute annotations emitted above declarations."""

from typing import List, Optional

from ..core.indent import IndentEmitter


class AttributeBuilder:
    """A single ``[Name]`` / ``[Name(arg1, arg2)]`` annotation line."""

    def __init__(self, name: str):
        self.name = name
        self.arguments: List[str] = []

    def with_argument(self, argument: str) -> "AttributeBuilder":
        """Add a positional or named argument, e.g. ``menuName = "My/Menu"``."""
        self.arguments.append(argument)
        return self

    def with_arguments(self, *arguments: str) -> "AttributeBuilder":
        for argument in arguments:
            self.with_argument(argument)
        return self

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        indent = indent or IndentEmitter()
        if not self.arguments:
            return indent.line(f"[{self.name}]") + "\n"
        return indent.line(f"[{self.name}({', '.join(self.arguments)})]") + "\n"
