"""
C# Source Emitter

Builds C# source files from fluent builder calls or plain model documents.
"""

from .core import (
    IndentEmitter,
    CsType,
    Visibility,
    EmitterError,
    MissingConstInitializer,
    ConflictingPropertyBody,
    InvalidParameterlessStructConstructor,
    EmitResult,
    emit_source,
    EmitterConfig,
    ConfigError,
    load_config,
)
from .builders import (
    AttributeBuilder,
    XmlDocBuilder,
    CodeBlockBuilder,
    FieldBuilder,
    PropertyBuilder,
    ConstructorBuilder,
    MethodBuilder,
    ClassBuilder,
    StructBuilder,
    FileBuilder,
)
from .model import ModelConverter, ModelError, build_file_from_model
from .logging_config import configure_logging, get_logger

# Version info
__version__ = "0.1.0"


# Convenience functions
def generate_from_model(model, config=None):
    """
    Render a model document without touching the file system.

    Args:
        model: Model document (dict)
        config: EmitterConfig, or a dict of configuration overrides

    Returns:
        EmitResult with the rendered code or the validation errors
    """
    if isinstance(config, dict):
        config = load_config(custom_config=config)
    return emit_source(build_file_from_model(model, config))


def quick_emit(model, **options):
    """
    Quick code emission from a model document.

    Args:
        model: Model document (dict or JSON string)
        **options: Configuration overrides

    Returns:
        Generated code string
    """
    if isinstance(model, str):
        import json

        model = json.loads(model)

    result = generate_from_model(model, options)

    if result.success:
        return result.code
    else:
        raise EmitterError(f"Code emission failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "IndentEmitter",
    "CsType",
    "Visibility",
    "EmitterError",
    "MissingConstInitializer",
    "ConflictingPropertyBody",
    "InvalidParameterlessStructConstructor",
    "EmitResult",
    "emit_source",
    "EmitterConfig",
    "ConfigError",
    "load_config",
    "AttributeBuilder",
    "XmlDocBuilder",
    "CodeBlockBuilder",
    "FieldBuilder",
    "PropertyBuilder",
    "ConstructorBuilder",
    "MethodBuilder",
    "ClassBuilder",
    "StructBuilder",
    "FileBuilder",
    "ModelConverter",
    "ModelError",
    "build_file_from_model",
    "generate_from_model",
    "quick_emit",
    "configure_logging",
    "get_logger",
]
