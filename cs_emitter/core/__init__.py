"""
Core emission components.

Indentation state, type references, the keyword table, configuration and the
validation/error model shared by every builder.
"""

from .indent import IndentEmitter
from .types import CsType
from .syntax import Visibility
from .emitter import (
    EmitterError,
    MissingConstInitializer,
    ConflictingPropertyBody,
    InvalidParameterlessStructConstructor,
    EmitResult,
    emit_source,
)
from .naming import NameSanitizer, NamingCase, create_csharp_sanitizer
from .config import EmitterConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, render_header

__all__ = [
    # Rendering primitives
    "IndentEmitter",
    "CsType",
    "Visibility",
    # Validation and errors
    "EmitterError",
    "MissingConstInitializer",
    "ConflictingPropertyBody",
    "InvalidParameterlessStructConstructor",
    "EmitResult",
    "emit_source",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "create_csharp_sanitizer",
    # Configuration system
    "EmitterConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Header templates
    "TemplateEngine",
    "TemplateError",
    "render_header",
]
