"""
Member variants and their canonical emission order inside a container.

Containers keep members in insertion order and only impose the category
grouping (fields, properties, constructors, methods) when rendering. Raw
members are pinned to their insertion index and never regrouped.
"""

from enum import IntEnum
from typing import Callable, List, Optional

from ..core.emitter import EmitterError
from ..core.indent import IndentEmitter
from ..core.syntax import Visibility
from .attribute import AttributeBuilder
from .xml_doc import XmlDocBuilder


class MemberCategory(IntEnum):
    """Member kinds; the integer value is the emission rank."""

    FIELD = 0
    PROPERTY = 1
    CONSTRUCTOR = 2
    METHOD = 3
    RAW = 99


class MemberBuilder:
    """Shared configuration for fields, properties, constructors and methods."""

    category: MemberCategory
    default_visibility = Visibility.PUBLIC

    def __init__(self, name: str):
        self.name = name
        self.visibility = self.default_visibility
        self.xml_doc: Optional[XmlDocBuilder] = None
        self.attributes: List[AttributeBuilder] = []

    def with_visibility(self, visibility: Visibility):
        self.visibility = visibility
        return self

    def with_xml_doc(self, configure: Callable[[XmlDocBuilder], None]):
        """Replace the documentation block with a freshly configured one."""
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

    def validate(self) -> List[EmitterError]:
        """Errors that would prevent this member from rendering."""
        return []

    def render_preamble(self, indent: IndentEmitter) -> str:
        """Documentation block followed by attribute lines."""
        parts = []
        if self.xml_doc is not None:
            parts.append(self.xml_doc.render(indent))
        parts.extend(attribute.render(indent) for attribute in self.attributes)
        return "".join(parts)

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        raise NotImplementedError


class RawMember:
    """A verbatim line kept at its exact insertion position."""

    category = MemberCategory.RAW

    def __init__(self, line: str):
        self.line = line

    def validate(self) -> List[EmitterError]:
        return []

    def render(self, indent: Optional[IndentEmitter] = None) -> str:
        return self.line + "\n"


def canonical_order(members: List) -> List:
    """
    Arrange members for emission.

    Non-raw members are stably grouped by category; each raw member is then
    re-inserted at the index it occupied in the original sequence.
    """
    grouped = sorted(
        (m for m in members if m.category is not MemberCategory.RAW),
        key=lambda m: m.category,
    )
    for index, member in enumerate(members):
        if member.category is MemberCategory.RAW:
            grouped.insert(index, member)
    return grouped


def render_members(members: List, indent: IndentEmitter) -> str:
    """
    Render members in canonical order.

    A blank line follows the last member of each field, property and
    constructor group, and every method.
    """
    ordered = canonical_order(members)
    last_of_category = {}
    for position, member in enumerate(ordered):
        last_of_category[member.category] = position

    out = []
    for position, member in enumerate(ordered):
        out.append(member.render(indent))
        if member.category is MemberCategory.RAW:
            continue
        if (
            member.category is MemberCategory.METHOD
            or last_of_category[member.category] == position
        ):
            out.append("\n")
    return "".join(out)
