"""
C# type references for code emission.

A type is a name plus an ordered, possibly empty, sequence of type arguments.
Rendering is recursive so arbitrarily nested generics come out correctly.
"""

from dataclasses import dataclass, field
from typing import Tuple

from .syntax import BOOL, DICTIONARY, FLOAT, INT, LIST, STRING, VOID


@dataclass(frozen=True)
class CsType:
    """
    Immutable representation of a (possibly generic) C# type.

    Examples:
        CsType.INT                                        -> int
        CsType.list_of(CsType.of("Vector3"))              -> List<Vector3>
        CsType.dictionary_of(CsType.STRING, CsType.INT)   -> Dictionary<string, int>
        CsType.generic("Dictionary", CsType.STRING,
                       CsType.list_of(CsType.INT))        -> Dictionary<string, List<int>>
    """

    name: str
    type_arguments: Tuple["CsType", ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of arguments but store a tuple
        if not isinstance(self.type_arguments, tuple):
            object.__setattr__(self, "type_arguments", tuple(self.type_arguments))

    @property
    def is_generic(self) -> bool:
        """True when the type carries type arguments."""
        return len(self.type_arguments) > 0

    @classmethod
    def of(cls, name: str) -> "CsType":
        """Create a non-generic type."""
        return cls(name)

    @classmethod
    def generic(cls, name: str, *type_arguments: "CsType") -> "CsType":
        """Create a generic type with the given arguments."""
        return cls(name, tuple(type_arguments))

    @classmethod
    def list_of(cls, element_type: "CsType") -> "CsType":
        """``List<element_type>``."""
        return cls.generic(LIST, element_type)

    @classmethod
    def dictionary_of(cls, key_type: "CsType", value_type: "CsType") -> "CsType":
        """``Dictionary<key_type, value_type>``."""
        return cls.generic(DICTIONARY, key_type, value_type)

    def emit(self) -> str:
        """Render the type as C# source text."""
        if not self.is_generic:
            return self.name

        args = ", ".join(arg.emit() for arg in self.type_arguments)
        return f"{self.name}<{args}>"

    def __str__(self) -> str:
        return self.emit()


CsType.VOID = CsType.of(VOID)
CsType.INT = CsType.of(INT)
CsType.FLOAT = CsType.of(FLOAT)
CsType.BOOL = CsType.of(BOOL)
CsType.STRING = CsType.of(STRING)
