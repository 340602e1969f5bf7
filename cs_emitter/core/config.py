"""
Configuration management for source emission.

Handles loading and merging configuration from JSON files,
providing defaults and validation for emitter settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


DEFAULT_HEADER_TEMPLATE = """<auto-generated>
This code was generated by {{ generator }}.
{%- if file_name %}
Source: {{ file_name }}
{%- endif %}
Changes to this file may be lost when the code is regenerated.
</auto-generated>"""


@dataclass
class EmitterConfig:
    """Settings applied to a whole output file."""

    # Output settings
    output_file: Optional[str] = None
    namespace: Optional[str] = None
    usings: List[str] = field(default_factory=list)

    # Code style settings
    use_tabs: bool = True
    indent_size: int = 4
    line_ending: str = "\n"

    # Header banner (jinja2 template, rendered as // comment lines)
    add_header: bool = False
    header_template: str = DEFAULT_HEADER_TEMPLATE

    # Model-driven generation
    sanitize_names: bool = False

    # Anything not covered above
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent_unit(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(EmitterConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> EmitterConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Explicit overrides (highest precedence)
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)
        base_config["usings"] = list(base_config["usings"])
        base_config["custom"] = dict(base_config["custom"])

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> EmitterConfig:
        """Convert dictionary to EmitterConfig instance."""
        known_fields = {f.name for f in fields(EmitterConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        usings = config_args.get("usings")
        if not isinstance(usings, list) or not all(isinstance(u, str) for u in usings):
            raise ConfigError(f"usings must be a list of namespace names, got {usings!r}")

        return EmitterConfig(**config_args)

    def save_config(self, config: EmitterConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: EmitterConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.line_ending not in {"\n", "\r\n"}:
            warnings.append(f"Unsupported line_ending: {config.line_ending!r}")

        if config.namespace is not None:
            parts = config.namespace.split(".")
            if not all(part.isidentifier() for part in parts):
                warnings.append(f"Invalid namespace: {config.namespace}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> EmitterConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Explicit overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)
