"""
Target syntax table for C# emission.

Keywords, punctuation and the visibility levels used by the builders. The
builders never hard-code keyword text; they read it from here.
"""

from enum import Enum

# Declarations and modifiers
ABSTRACT = "abstract"
CLASS = "class"
CONST = "const"
INTERNAL = "internal"
NAMESPACE = "namespace"
OVERRIDE = "override"
PARTIAL = "partial"
PRIVATE = "private"
PROTECTED = "protected"
PUBLIC = "public"
READONLY = "readonly"
SEALED = "sealed"
STATIC = "static"
STRUCT = "struct"
USING = "using"
VIRTUAL = "virtual"
WHERE = "where"

# Statements and expressions
BASE = "base"
ELSE = "else"
FOR = "for"
FOREACH = "foreach"
GET = "get"
IF = "if"
IN = "in"
RETURN = "return"
SET = "set"
THIS = "this"
VAR = "var"

# Built-in and well-known types
BOOL = "bool"
DICTIONARY = "Dictionary"
FLOAT = "float"
INT = "int"
LIST = "List"
STRING = "string"
VOID = "void"

# XML documentation
CREF = "cref"
EXCEPTION = "exception"
INHERIT_DOC = "inheritdoc"
NAME = "name"
PARAM = "param"
REMARKS = "remarks"
RETURNS = "returns"
SUMMARY = "summary"
TYPE_PARAM = "typeparam"

# Punctuation
DOC_COMMENT = "///"
LINE_COMMENT = "//"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
TERMINATOR = ";"


class Visibility(Enum):
    """Access levels for types and members."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PROTECTED_INTERNAL = "protected_internal"

    @property
    def keyword(self) -> str:
        """Source text for this access level."""
        if self is Visibility.PROTECTED_INTERNAL:
            return f"{PROTECTED} {INTERNAL}"
        return self.value

    @classmethod
    def parse(cls, value: str) -> "Visibility":
        """Parse ``"public"``, ``"protected internal"`` or an enum name."""
        normalized = value.strip().lower().replace(" ", "_")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown visibility: {value}")


def join_modifiers(parts) -> str:
    """Join modifier keywords with a trailing separator space."""
    return " ".join(parts) + " "
