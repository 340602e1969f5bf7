"""
Whole source files: header banner, usings, optional namespace, type declarations.

Example:
    (
        FileBuilder("Generated/MyClass.cs")
        .with_usings("System.Collections.Generic", "UnityEngine")
        .with_namespace("MyProject.Generated")
        .with_class("MyClass", lambda cls: cls
            .with_sealed()
            .with_field("_data", CsType.INT))
        .save()
    )
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional, TypeVar, Union

from ..core import syntax
from ..core.config import EmitterConfig
from ..core.emitter import EmitterError, raise_first
from ..core.indent import IndentEmitter
from ..core.templates import comment
from ..logging_config import get_logger
from ..utils import write_source
from .class_builder import ClassBuilder
from .struct_builder import StructBuilder

logger = get_logger(__name__)

T = TypeVar("T")


class FileBuilder:
    """Fluent builder for one C# source file."""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        config: Optional[EmitterConfig] = None,
    ):
        self.config = config or EmitterConfig()
        self.path = path if path is not None else self.config.output_file
        self.usings: List[str] = []
        self.namespace: Optional[str] = self.config.namespace
        self.header: Optional[str] = None
        self.containers: List = []
        self._indent = IndentEmitter(self.config.indent_unit)

        self.with_usings(*self.config.usings)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def with_using(self, namespace: str) -> "FileBuilder":
        """Add a using directive; duplicates are ignored."""
        if namespace not in self.usings:
            self.usings.append(namespace)
        return self

    def with_usings(self, *namespaces: str) -> "FileBuilder":
        for namespace in namespaces:
            self.with_using(namespace)
        return self

    def with_usings_from(
        self, source: Iterable[T], name_selector: Callable[[T], str]
    ) -> "FileBuilder":
        for item in source:
            self.with_using(name_selector(item))
        return self

    def with_namespace(self, namespace: Optional[str]) -> "FileBuilder":
        self.namespace = namespace
        return self

    def with_header(self, text: Optional[str]) -> "FileBuilder":
        """Banner text emitted as ``//`` comment lines at the top of the file."""
        self.header = text
        return self

    def add_class(
        self, name: str, configure: Optional[Callable[[ClassBuilder], None]] = None
    ) -> ClassBuilder:
        """Add a class and return its builder for deferred configuration."""
        builder = ClassBuilder(name)
        if configure is not None:
            configure(builder)
        self.containers.append(builder)
        return builder

    def with_class(
        self, name: str, configure: Optional[Callable[[ClassBuilder], None]] = None
    ) -> "FileBuilder":
        self.add_class(name, configure)
        return self

    def add_struct(
        self, name: str, configure: Optional[Callable[[StructBuilder], None]] = None
    ) -> StructBuilder:
        builder = StructBuilder(name)
        if configure is not None:
            configure(builder)
        self.containers.append(builder)
        return builder

    def with_struct(
        self, name: str, configure: Optional[Callable[[StructBuilder], None]] = None
    ) -> "FileBuilder":
        self.add_struct(name, configure)
        return self

    # ------------------------------------------------------------------
    # Emit and save
    # ------------------------------------------------------------------

    @property
    def has_namespace(self) -> bool:
        return bool(self.namespace and self.namespace.strip())

    def validate(self) -> List[EmitterError]:
        errors: List[EmitterError] = []
        for container in self.containers:
            errors.extend(container.validate())
        return errors

    def render(self) -> str:
        """Render the file; repeated calls on an unchanged file are identical."""
        raise_first(self.validate())
        self._indent.reset()
        logger.debug(
            "Rendering file %s: %d using(s), %d type(s)",
            self.path,
            len(self.usings),
            len(self.containers),
        )

        out = []

        if self.header:
            out.append(comment(self.header, syntax.LINE_COMMENT) + "\n")
            out.append("\n")

        if self.usings:
            for namespace in sorted(self.usings):
                out.append(f"{syntax.USING} {namespace};\n")
            out.append("\n")

        if self.has_namespace:
            out.append(f"{syntax.NAMESPACE} {self.namespace}\n")
            out.append(f"{syntax.OPEN_BRACE}\n")
            self._indent.push()

        for container in self.containers:
            out.append(container.render(self._indent))
            out.append("\n")

        if self.has_namespace:
            self._indent.pop()
            out.append(f"{syntax.CLOSE_BRACE}\n")

        return "".join(out)

    def preview(self) -> str:
        """Rendered text without touching the file system."""
        return self.render()

    def save(self) -> Path:
        """Write to the configured path."""
        if self.path is None:
            raise ValueError("FileBuilder has no output path; use save_to()")
        return self.save_to(self.path)

    def save_to(self, file_path: Union[str, Path]) -> Path:
        """Write to ``file_path``, ignoring the configured path."""
        return write_source(file_path, self.render(), self.config.line_ending)
