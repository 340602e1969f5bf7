"""
Naming utilities for model-driven generation.

Handles name sanitization, case conversions and C# keyword conflicts when
identifiers come from external data rather than hand-written builder calls.
"""

import re
from enum import Enum
from typing import Dict, Optional, Set


class NamingCase(Enum):
    """Different naming case styles."""

    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    PRIVATE_FIELD = "private_field"  # _userName


def snake_case(value: str) -> str:
    """Convert string to snake_case."""
    name = re.sub(r"[-\s]+", "_", str(value))
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    name = name.lower()
    name = re.sub(r"_+", "_", name)
    return name.strip("_")


def camel_case(value: str) -> str:
    """Convert string to camelCase."""
    parts = snake_case(value).split("_")
    return parts[0].lower() + "".join(part.capitalize() for part in parts[1:])


def pascal_case(value: str) -> str:
    """Convert string to PascalCase."""
    return "".join(part.capitalize() for part in snake_case(value).split("_") if part)


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Optional[Set[str]] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
        """
        self.reserved_words = reserved_words or set()
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.PASCAL_CASE) -> str:
        """
        Sanitize a name for safe use as a C# identifier.

        Args:
            name: Original name to sanitize
            target_case: Desired case style

        Returns:
            Sanitized identifier
        """
        cache_key = f"{name}_{target_case.value}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case)
        final_name = self._resolve_keyword(converted)

        self._name_cache[cache_key] = final_name
        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        cleaned = re.sub(r"[^a-zA-Z0-9_-]", "_", name)
        cleaned = cleaned.strip("_-")

        if not cleaned:
            cleaned = "value"

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.PASCAL_CASE:
            converted = pascal_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            converted = camel_case(name)
        else:
            return "_" + camel_case(name)

        # Identifiers may not start with a digit
        if converted and converted[0].isdigit():
            converted = f"_{converted}"
        return converted

    def _resolve_keyword(self, name: str) -> str:
        """Escape C# keywords with the verbatim identifier prefix."""
        if name in self.reserved_words:
            return f"@{name}"
        return name


CSHARP_KEYWORDS = {
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char",
    "checked", "class", "const", "continue", "decimal", "default", "delegate",
    "do", "double", "else", "enum", "event", "explicit", "extern", "false",
    "finally", "fixed", "float", "for", "foreach", "goto", "if", "implicit",
    "in", "int", "interface", "internal", "is", "lock", "long", "namespace",
    "new", "null", "object", "operator", "out", "override", "params", "private",
    "protected", "public", "readonly", "ref", "return", "sbyte", "sealed",
    "short", "sizeof", "stackalloc", "static", "string", "struct", "switch",
    "this", "throw", "true", "try", "typeof", "uint", "ulong", "unchecked",
    "unsafe", "ushort", "using", "virtual", "void", "volatile", "while",
}


def create_csharp_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for C#."""
    return NameSanitizer(CSHARP_KEYWORDS)
