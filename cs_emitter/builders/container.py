"""
Shared behaviour of type declarations (classes and structs).

A container owns an ordered member list. Members may be added in any order;
rendering groups them as fields, properties, constructors, methods, with raw
lines kept at their insertion position.
"""

from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from ..core import syntax
from ..core.emitter import (
    EmitterError,
    InvalidParameterlessStructConstructor,
    raise_first,
)
from ..core.indent import IndentEmitter
from ..core.syntax import Visibility
from ..core.types import CsType
from ..logging_config import get_logger
from .attribute import AttributeBuilder
from .constructor import ConstructorBuilder
from .field import FieldBuilder
from .members import RawMember, render_members
from .method import MethodBuilder, render_constraints
from .property import PropertyBuilder
from .xml_doc import XmlDocBuilder

logger = get_logger(__name__)

T = TypeVar("T")


class ContainerBuilder:
    """Base class for class and struct builders."""

    keyword: str = ""
    # Explicit constructors of this kind must declare at least one parameter
    requires_constructor_parameters = False

    def __init__(self, name: str):
        self.name = name
        self.visibility = Visibility.PUBLIC
        self.type_parameters: List[str] = []
        self.type_constraints: List[Tuple[str, str]] = []
        self.members: List = []
        self.xml_doc: Optional[XmlDocBuilder] = None
        self.attributes: List[AttributeBuilder] = []

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def with_visibility(self, visibility: Visibility):
        self.visibility = visibility
        return self

    def with_xml_doc(self, configure: Callable[[XmlDocBuilder], None]):
        self.xml_doc = XmlDocBuilder()
        configure(self.xml_doc)
        return self

    def with_attribute(
        self, name: str, configure: Optional[Callable[[AttributeBuilder], None]] = None
    ):
        attribute = AttributeBuilder(name)
        if configure is not None:
            configure(attribute)
        self.attributes.append(attribute)
        return self

    def with_type_parameter(self, type_param: str):
        self.type_parameters.append(type_param)
        return self

    def with_type_parameters(self, *type_params: str):
        self.type_parameters.extend(type_params)
        return self

    def with_type_constraint(self, type_param: str, constraint: str):
        """Add a ``where`` clause; constraints for one parameter are not merged."""
        self.type_constraints.append((type_param, constraint))
        return self

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------

    def _add(self, member, configure=None):
        if configure is not None:
            configure(member)
        self.members.append(member)
        return member

    def add_field(
        self,
        name: str,
        field_type: CsType,
        configure: Optional[Callable[[FieldBuilder], None]] = None,
    ) -> FieldBuilder:
        """Add a field and return its builder for later configuration."""
        return self._add(FieldBuilder(name, field_type), configure)

    def with_field(
        self,
        name: str,
        field_type: CsType,
        configure: Optional[Callable[[FieldBuilder], None]] = None,
    ):
        self.add_field(name, field_type, configure)
        return self

    def with_fields(
        self,
        source: Iterable[T],
        name_selector: Callable[[T], str],
        type_selector: Callable[[T], CsType],
        configure: Optional[Callable[[T, FieldBuilder], None]] = None,
    ):
        for item in source:
            builder = FieldBuilder(name_selector(item), type_selector(item))
            if configure is not None:
                configure(item, builder)
            self.members.append(builder)
        return self

    def add_property(
        self,
        name: str,
        property_type: CsType,
        configure: Optional[Callable[[PropertyBuilder], None]] = None,
    ) -> PropertyBuilder:
        return self._add(PropertyBuilder(name, property_type), configure)

    def with_property(
        self,
        name: str,
        property_type: CsType,
        configure: Optional[Callable[[PropertyBuilder], None]] = None,
    ):
        self.add_property(name, property_type, configure)
        return self

    def with_properties(
        self,
        source: Iterable[T],
        name_selector: Callable[[T], str],
        type_selector: Callable[[T], CsType],
        configure: Optional[Callable[[T, PropertyBuilder], None]] = None,
    ):
        for item in source:
            builder = PropertyBuilder(name_selector(item), type_selector(item))
            if configure is not None:
                configure(item, builder)
            self.members.append(builder)
        return self

    def add_constructor(
        self, configure: Optional[Callable[[ConstructorBuilder], None]] = None
    ) -> ConstructorBuilder:
        return self._add(ConstructorBuilder(self.name), configure)

    def with_constructor(
        self, configure: Optional[Callable[[ConstructorBuilder], None]] = None
    ):
        self.add_constructor(configure)
        return self

    def with_constructor_if(
        self,
        condition: bool,
        configure: Optional[Callable[[ConstructorBuilder], None]] = None,
    ):
        """Add a constructor only when ``condition`` holds."""
        if condition:
            self.add_constructor(configure)
        return self

    def add_method(
        self,
        name: str,
        return_type: CsType,
        configure: Optional[Callable[[MethodBuilder], None]] = None,
    ) -> MethodBuilder:
        return self._add(MethodBuilder(name, return_type), configure)

    def with_method(
        self,
        name: str,
        return_type: CsType,
        configure: Optional[Callable[[MethodBuilder], None]] = None,
    ):
        self.add_method(name, return_type, configure)
        return self

    def with_methods(
        self,
        source: Iterable[T],
        name_selector: Callable[[T], str],
        return_type_selector: Callable[[T], CsType],
        configure: Optional[Callable[[T, MethodBuilder], None]] = None,
    ):
        for item in source:
            builder = MethodBuilder(name_selector(item), return_type_selector(item))
            if configure is not None:
                configure(item, builder)
            self.members.append(builder)
        return self

    def with_raw(self, line: str):
        """Add a verbatim line that keeps its position among the members."""
        self.members.append(RawMember(line))
        return self

    @property
    def constructors(self) -> List[ConstructorBuilder]:
        return [m for m in self.members if isinstance(m, ConstructorBuilder)]

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def modifier_keywords(self) -> List[str]:
        """Modifiers following the visibility keyword, in canonical order."""
        return []

    def base_clause(self) -> str:
        return ""

    def declaration(self) -> str:
        parts = [self.visibility.keyword, *self.modifier_keywords()]
        text = f"{syntax.join_modifiers(parts)}{self.keyword} {self.name}"
        if self.type_parameters:
            text += f"<{', '.join(self.type_parameters)}>"
        text += self.base_clause()
        return text + render_constraints(self.type_constraints)

    def validate(self) -> List[EmitterError]:
        """Collect every structural error in this declaration and its members."""
        errors: List[EmitterError] = []
        for member in self.members:
            errors.extend(member.validate())
        if self.requires_constructor_parameters and any(
            not constructor.has_parameters for constructor in self.constructors
        ):
            errors.append(InvalidParameterlessStructConstructor(self.name))
        return errors

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        raise_first(self.validate())
        indent = indent or IndentEmitter()
        logger.debug(
            "Rendering %s %s with %d member(s) at depth %d",
            self.keyword,
            self.name,
            len(self.members),
            indent.depth,
        )

        out = []
        if self.xml_doc is not None:
            out.append(self.xml_doc.render(indent))
        out.extend(attribute.render(indent) for attribute in self.attributes)

        out.append(indent.line(self.declaration()) + "\n")
        out.append(indent.line(syntax.OPEN_BRACE) + "\n")
        indent.push()
        out.append(render_members(self.members, indent))
        indent.pop()
        out.append(indent.line(syntax.CLOSE_BRACE) + "\n")
        return "".join(out)
