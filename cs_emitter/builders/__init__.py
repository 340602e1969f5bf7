"""Fluent builders for every declaration kind of a C# source file."""

from .attribute import AttributeBuilder
from .xml_doc import XmlDocBuilder
from .code_block import CodeBlockBuilder
from .field import FieldBuilder
from .property import PropertyBuilder
from .constructor import ConstructorBuilder
from .method import MethodBuilder
from .members import MemberCategory, RawMember
from .class_builder import ClassBuilder
from .struct_builder import StructBuilder
from .file_builder import FileBuilder

__all__ = [
    "AttributeBuilder",
    "XmlDocBuilder",
    "CodeBlockBuilder",
    "FieldBuilder",
    "PropertyBuilder",
    "ConstructorBuilder",
    "MethodBuilder",
    "MemberCategory",
    "RawMember",
    "ClassBuilder",
    "StructBuilder",
    "FileBuilder",
]
