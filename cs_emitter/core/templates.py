"""
Template engine wrapper for file header banners.

Provides a small interface over Jinja2 with the naming and comment filters
used when rendering generated-file banners.
"""

from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError as JinjaError

from .config import DEFAULT_HEADER_TEMPLATE
from .naming import camel_case, pascal_case, snake_case

HEADER_TEMPLATE_NAME = "header"


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for a Jinja2 environment with code generation filters."""

    def __init__(self, templates: Optional[Dict[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: Mapping of template name to template source
        """
        self._env = Environment(
            loader=DictLoader(dict(templates or {})),
            autoescape=False,
            keep_trailing_newline=False,
            undefined=StrictUndefined,
        )

        self._env.filters["snake_case"] = snake_case
        self._env.filters["camel_case"] = camel_case
        self._env.filters["pascal_case"] = pascal_case
        self._env.filters["comment"] = comment

    def add_template(self, name: str, content: str):
        """Register an in-memory template."""
        self._env.loader.mapping[name] = content

    def template_exists(self, name: str) -> bool:
        return name in self._env.loader.mapping

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a registered template with the given context."""
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except JinjaError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e


def comment(value: str, style: str = "//") -> str:
    """Add comment markers to each line."""
    lines = str(value).split("\n")
    return "\n".join(f"{style} {line.rstrip()}" if line.strip() else style for line in lines)


_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine({HEADER_TEMPLATE_NAME: DEFAULT_HEADER_TEMPLATE})
    return _default_engine


def render_header(
    template: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Render a file header banner.

    Args:
        template: Template source; the built-in auto-generated banner if omitted
        context: Template variables (``generator`` defaults to ``cs_emitter``)

    Returns:
        Banner text without comment markers
    """
    engine = get_default_template_engine()
    template_context = {"generator": "cs_emitter", "file_name": None, **(context or {})}

    if template is None:
        return engine.render_template(HEADER_TEMPLATE_NAME, template_context)
    return engine.render_string(template, template_context)
