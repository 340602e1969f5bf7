"""
Indentation state shared across one render pass.

Every composite renderer pushes before emitting its braced interior and pops
afterwards, so the depth after a render equals the depth before it.
"""


class IndentEmitter:
    """Mutable indentation depth with a fixed indent unit.

    Example:
        >>> indent = IndentEmitter()
        >>> indent.push()
        >>> indent.line("return;")
        '\\treturn;'
    """

    def __init__(self, unit: str = "\t"):
        self.unit = unit
        self._depth = 0

    @property
    def depth(self) -> int:
        """Current nesting level."""
        return self._depth

    def reset(self):
        """Return to depth zero."""
        self._depth = 0

    def get(self) -> str:
        """Return the prefix for the current depth."""
        return self.unit * self._depth

    def push(self):
        """Increase depth by one."""
        self._depth += 1

    def pop(self):
        """Decrease depth by one; never goes below zero."""
        self._depth = max(0, self._depth - 1)

    def line(self, content: str) -> str:
        """Prefix content with the current indent."""
        return f"{self.get()}{content}"

    def __repr__(self) -> str:
        return f"IndentEmitter(depth={self._depth}, unit={self.unit!r})"
