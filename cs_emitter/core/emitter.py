"""
Render-time validation errors and the non-raising emission entry point.

Builders are freely mutable while they are configured; structural invariants
are only checked when text is produced. Every builder exposes ``validate()``
returning the errors its ``render()`` would raise, and :func:`emit_source`
wraps a render in an :class:`EmitResult` so callers can inspect failures
without matching on exceptions.
"""

from typing import Any, Dict, List, Optional

from ..logging_config import get_logger

logger = get_logger(__name__)


class EmitterError(Exception):
    """Base exception for structurally invalid builder graphs."""

    pass


class MissingConstInitializer(EmitterError):
    """A const field has no usable default value."""

    def __init__(self, member_name: str):
        self.member_name = member_name
        super().__init__(
            f"Field '{member_name}': const fields must have a default value."
        )


class ConflictingPropertyBody(EmitterError):
    """An expression body was combined with get/set accessors."""

    def __init__(self, member_name: str):
        self.member_name = member_name
        super().__init__(
            f"Property '{member_name}': cannot combine an expression body "
            f"with a getter or setter."
        )


class InvalidParameterlessStructConstructor(EmitterError):
    """A struct declares an explicit constructor without parameters."""

    def __init__(self, container_name: str):
        self.container_name = container_name
        super().__init__(
            f"Struct '{container_name}': explicit constructors must have at least "
            f"one parameter. Remove the constructor or add parameters to it."
        )


def raise_first(errors: List[EmitterError]):
    """Raise the first collected validation error, if any."""
    if errors:
        logger.warning("Render aborted: %s", errors[0])
        raise errors[0]


class EmitResult:
    """Container for emission results and metadata."""

    def __init__(
        self,
        code: str,
        errors: Optional[List[EmitterError]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize emission result.

        Args:
            code: Rendered source text (empty on failure)
            errors: Validation errors that prevented rendering
            metadata: Additional information about the render
        """
        self.code = code
        self.errors = errors or []
        self.metadata = metadata or {}
        self.success = not self.errors

    @property
    def error_message(self) -> Optional[str]:
        """Message of the first error, or None on success."""
        return str(self.errors[0]) if self.errors else None

    @classmethod
    def failed(cls, errors: List[EmitterError]) -> "EmitResult":
        """Create a failed emission result."""
        return cls(code="", errors=list(errors))


def emit_source(builder) -> EmitResult:
    """
    Validate and render a builder without raising on invalid structure.

    Args:
        builder: Any builder exposing ``validate()`` and ``render()``

    Returns:
        EmitResult carrying either the code or every validation error
    """
    errors = builder.validate()
    if errors:
        logger.warning(
            "%s has %d validation error(s)", type(builder).__name__, len(errors)
        )
        return EmitResult.failed(errors)

    code = builder.render()
    metadata = {
        "builder": type(builder).__name__,
        "line_count": code.count("\n"),
    }
    return EmitResult(code, metadata=metadata)
