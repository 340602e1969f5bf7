"""
Data-to-code generation from plain model documents.

A model document is a dict (usually loaded from JSON) describing one source
file. It is translated into a :class:`FileBuilder` so that the usual render,
validate and save operations apply. Expression and statement text is passed
through untouched.

Example document:
    {
        "namespace": "Game.Data",
        "usings": ["System", "UnityEngine"],
        "types": [
            {
                "kind": "class",
                "name": "PlayerState",
                "modifiers": ["sealed"],
                "base": "ScriptableObject",
                "summary": "Runtime state of a player.",
                "fields": [{"name": "_health", "type": "int", "default": "100"}],
                "properties": [
                    {"name": "Health", "type": "int", "expression": "_health"}
                ],
                "methods": [
                    {
                        "name": "Heal",
                        "returns": "void",
                        "parameters": [{"type": "int", "name": "amount"}],
                        "body": ["_health += amount;"]
                    }
                ]
            }
        ]
    }
"""

import re
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from .builders.class_builder import ClassBuilder
from .builders.code_block import CodeBlockBuilder
from .builders.container import ContainerBuilder
from .builders.file_builder import FileBuilder
from .builders.struct_builder import StructBuilder
from .builders.xml_doc import XmlDocBuilder
from .core.config import EmitterConfig
from .core.naming import NameSanitizer, NamingCase, create_csharp_sanitizer
from .core.syntax import Visibility
from .core.templates import render_header
from .core.types import CsType
from .logging_config import get_logger

logger = get_logger(__name__)

TypeSpec = Union[str, Dict[str, Any]]

_TYPE_TOKEN = re.compile(r"\s*([^<>,\s]+|[<>,])")

CLASS_MODIFIERS = {"static", "abstract", "sealed", "partial"}
STRUCT_MODIFIERS = {"readonly", "partial"}
METHOD_MODIFIERS = {"static", "virtual", "override", "abstract", "partial"}


class ModelError(Exception):
    """Exception raised for invalid model documents."""

    pass


def parse_type(spec: TypeSpec) -> CsType:
    """
    Convert a type specification into a CsType.

    Accepts either C# type text (``"Dictionary<string, List<int>>"``) or a
    mapping ``{"name": "Dictionary", "args": ["string", "int"]}`` whose
    arguments are themselves type specifications.
    """
    if isinstance(spec, dict):
        name = spec.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ModelError(f"Type mapping requires a 'name': {spec!r}")
        args = spec.get("args") or []
        if not isinstance(args, list):
            raise ModelError(f"Type arguments must be a list: {spec!r}")
        return CsType.generic(name.strip(), *(parse_type(arg) for arg in args))

    if not isinstance(spec, str) or not spec.strip():
        raise ModelError(f"Invalid type specification: {spec!r}")

    tokens = _tokenize_type(spec)
    parsed, position = _parse_type_tokens(tokens, 0, spec)
    if position != len(tokens):
        raise ModelError(f"Unexpected '{tokens[position]}' in type '{spec}'")
    return parsed


def _tokenize_type(text: str) -> List[str]:
    tokens = []
    position = 0
    text = text.rstrip()
    while position < len(text):
        match = _TYPE_TOKEN.match(text, position)
        if not match:
            raise ModelError(f"Cannot parse type '{text}'")
        tokens.append(match.group(1))
        position = match.end()
    return tokens


def _parse_type_tokens(tokens: List[str], position: int, source: str):
    if position >= len(tokens) or tokens[position] in "<>,":
        raise ModelError(f"Expected a type name in '{source}'")

    name = tokens[position]
    position += 1
    if position >= len(tokens) or tokens[position] != "<":
        return CsType.of(name), position

    arguments = []
    position += 1
    while True:
        argument, position = _parse_type_tokens(tokens, position, source)
        arguments.append(argument)
        if position >= len(tokens):
            raise ModelError(f"Unclosed '<' in type '{source}'")
        if tokens[position] == ",":
            position += 1
            continue
        if tokens[position] == ">":
            return CsType.generic(name, *arguments), position + 1
        raise ModelError(f"Unexpected '{tokens[position]}' in type '{source}'")


def _parse_visibility(value: Optional[str], default: Optional[Visibility] = None):
    if value is None:
        return default
    if not isinstance(value, str):
        raise ModelError(f"Invalid visibility: {value!r}")
    try:
        return Visibility.parse(value)
    except ValueError as e:
        raise ModelError(str(e)) from e


def _statement_callback(lines: Optional[List[str]]) -> Optional[Callable[[CodeBlockBuilder], None]]:
    """Body callback adding each line as a raw statement."""
    if lines is None:
        return None
    if isinstance(lines, str):
        lines = lines.splitlines()

    def build(block: CodeBlockBuilder):
        for line in lines:
            block.raw(line)

    return build


def _apply_doc(target, entry: Dict[str, Any], owner: str):
    doc = entry.get("doc")
    summary = entry.get("summary")
    if doc is None and summary is None:
        return
    if doc is not None and not isinstance(doc, dict):
        raise ModelError(f"{owner}: 'doc' must be an object")
    doc = doc or {}
    typeparams = _require_mapping(doc, "typeparams", owner)
    params = _require_mapping(doc, "params", owner)
    exceptions = _require_mapping(doc, "exceptions", owner)

    def configure(builder: XmlDocBuilder):
        if summary is not None:
            builder.with_summary(summary)
        if doc.get("inherit"):
            builder.with_inherit_doc()
        if "summary" in doc:
            builder.with_summary(doc["summary"])
        if "remarks" in doc:
            builder.with_remarks(doc["remarks"])
        if "returns" in doc:
            builder.with_returns(doc["returns"])
        for name, text in typeparams.items():
            builder.with_type_param(name, text)
        for name, text in params.items():
            builder.with_param(name, text)
        for cref, text in exceptions.items():
            builder.with_exception(cref, text)

    target.with_xml_doc(configure)


def _apply_attributes(target, entry: Dict[str, Any], owner: str):
    for attribute in _require_list(entry, "attributes", owner):
        if isinstance(attribute, str):
            target.with_attribute(attribute)
        elif isinstance(attribute, dict) and "name" in attribute:
            args = _require_list(attribute, "args", f"{owner} attribute")
            target.with_attribute(attribute["name"], lambda a, args=args: a.with_arguments(*args))
        else:
            raise ModelError(f"Invalid attribute entry: {attribute!r}")


def _modifiers(entry: Dict[str, Any], allowed: set, owner: str) -> set:
    modifiers = set(_require_strings(entry, "modifiers", owner))
    unknown = modifiers - allowed
    if unknown:
        raise ModelError(
            f"{owner}: unsupported modifier(s) {', '.join(sorted(unknown))}"
        )
    return modifiers


def _require(entry: Dict[str, Any], key: str, owner: str):
    if not isinstance(entry, dict):
        raise ModelError(f"{owner}: expected an object, got {type(entry).__name__}")
    if key not in entry:
        raise ModelError(f"{owner}: missing required key '{key}'")
    return entry[key]


def _require_list(entry: Dict[str, Any], key: str, owner: str) -> list:
    """Optional list entry; absent or null reads as empty."""
    value = entry.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ModelError(f"{owner}: '{key}' must be a list")
    return value


def _require_strings(entry: Dict[str, Any], key: str, owner: str) -> List[str]:
    values = _require_list(entry, key, owner)
    for value in values:
        if not isinstance(value, str):
            raise ModelError(f"{owner}: '{key}' entries must be strings, got {value!r}")
    return values


def _require_mapping(entry: Dict[str, Any], key: str, owner: str) -> dict:
    value = entry.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ModelError(f"{owner}: '{key}' must be an object")
    return value


class ModelConverter:
    """Translate model documents into file builders."""

    def __init__(self, config: Optional[EmitterConfig] = None):
        """
        Initialize converter.

        Args:
            config: Emitter configuration; ``sanitize_names`` turns on
                identifier cleanup and ``add_header`` adds a generated banner.
        """
        self.config = config or EmitterConfig()
        self.sanitizer: Optional[NameSanitizer] = (
            create_csharp_sanitizer() if self.config.sanitize_names else None
        )

    def _name(self, name: str, case: NamingCase) -> str:
        if not isinstance(name, str) or not name:
            raise ModelError(f"Invalid identifier: {name!r}")
        if self.sanitizer is None:
            return name
        return self.sanitizer.sanitize_name(name, case)

    def convert(
        self,
        model: Dict[str, Any],
        path: Optional[Union[str, Path]] = None,
        source_name: Optional[str] = None,
    ) -> FileBuilder:
        """
        Build a FileBuilder from a model document.

        Args:
            model: Parsed model document
            path: Output path for ``save()``; the configured one if omitted
            source_name: Name of the model source, shown in the header banner

        Returns:
            Configured FileBuilder
        """
        if not isinstance(model, dict):
            raise ModelError("Model document must be an object")

        file_builder = FileBuilder(path, self.config)

        usings = _require_strings(model, "usings", "Model")
        file_builder.with_usings(*usings)

        if "namespace" in model:
            file_builder.with_namespace(model["namespace"])

        if "header" in model:
            file_builder.with_header(model["header"])
        elif self.config.add_header:
            file_builder.with_header(
                render_header(self.config.header_template, {"file_name": source_name})
            )

        types = model.get("types", [])
        if not isinstance(types, list):
            raise ModelError("'types' must be a list")

        for index, entry in enumerate(types):
            kind = _require(entry, "kind", f"types[{index}]")
            if kind == "class":
                self._build_class(file_builder.add_class(self._type_name(entry, index)), entry)
            elif kind == "struct":
                self._build_struct(file_builder.add_struct(self._type_name(entry, index)), entry)
            else:
                raise ModelError(f"types[{index}]: unknown kind '{kind}'")

        logger.debug(
            "Converted model with %d type(s) into %s", len(types), file_builder.path
        )
        return file_builder

    def _type_name(self, entry: Dict[str, Any], index: int) -> str:
        return self._name(_require(entry, "name", f"types[{index}]"), NamingCase.PASCAL_CASE)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _build_class(self, builder: ClassBuilder, entry: Dict[str, Any]):
        modifiers = _modifiers(entry, CLASS_MODIFIERS, f"Class '{builder.name}'")
        builder.with_static("static" in modifiers)
        builder.with_abstract("abstract" in modifiers)
        builder.with_sealed("sealed" in modifiers)
        builder.with_partial("partial" in modifiers)
        if entry.get("base") is not None:
            builder.with_base_class(parse_type(entry["base"]))
        self._build_container(builder, entry)

    def _build_struct(self, builder: StructBuilder, entry: Dict[str, Any]):
        modifiers = _modifiers(entry, STRUCT_MODIFIERS, f"Struct '{builder.name}'")
        builder.with_readonly("readonly" in modifiers)
        builder.with_partial("partial" in modifiers)
        if entry.get("base") is not None:
            raise ModelError(f"Struct '{builder.name}': structs cannot have a base type")
        self._build_container(builder, entry)

    def _build_container(self, builder: ContainerBuilder, entry: Dict[str, Any]):
        owner = f"Type '{builder.name}'"
        builder.with_visibility(_parse_visibility(entry.get("visibility"), Visibility.PUBLIC))
        _apply_doc(builder, entry, owner)
        _apply_attributes(builder, entry, owner)

        builder.with_type_parameters(*_require_strings(entry, "type_parameters", owner))
        for constraint in _require_list(entry, "constraints", owner):
            builder.with_type_constraint(
                _require(constraint, "param", f"{builder.name} constraint"),
                _require(constraint, "constraint", f"{builder.name} constraint"),
            )

        for field in _require_list(entry, "fields", owner):
            self._add_field(builder, field)
        for prop in _require_list(entry, "properties", owner):
            self._add_property(builder, prop)
        for ctor in _require_list(entry, "constructors", owner):
            self._add_constructor(builder, ctor)
        for method in _require_list(entry, "methods", owner):
            self._add_method(builder, method)
        for line in _require_strings(entry, "raw", owner):
            builder.with_raw(line)

    # ------------------------------------------------------------------
    # Members
    # ------------------------------------------------------------------

    def _add_field(self, container: ContainerBuilder, entry: Dict[str, Any]):
        owner = f"{container.name} field"
        name = _require(entry, "name", owner)
        visibility = _parse_visibility(entry.get("visibility"), Visibility.PRIVATE)
        case = (
            NamingCase.PRIVATE_FIELD
            if visibility is Visibility.PRIVATE
            else NamingCase.PASCAL_CASE
        )
        field = container.add_field(
            self._name(name, case),
            parse_type(_require(entry, "type", owner)),
        )
        field.with_visibility(visibility)
        field.with_static(bool(entry.get("static")))
        field.with_readonly(bool(entry.get("readonly")))
        field.with_const(bool(entry.get("const")))
        field.with_default_value(entry.get("default"))
        _apply_doc(field, entry, f"{owner} '{field.name}'")
        _apply_attributes(field, entry, f"{owner} '{field.name}'")

    def _add_property(self, container: ContainerBuilder, entry: Dict[str, Any]):
        owner = f"{container.name} property"
        prop = container.add_property(
            self._name(_require(entry, "name", owner), NamingCase.PASCAL_CASE),
            parse_type(_require(entry, "type", owner)),
        )
        prop.with_visibility(_parse_visibility(entry.get("visibility"), Visibility.PUBLIC))
        prop.with_static(bool(entry.get("static")))
        prop.with_default_value(entry.get("default"))

        if "expression" in entry:
            prop.with_expression_getter(entry["expression"])

        # true → plain accessor, a string → accessor visibility, a list → body lines
        for accessor, auto, full in (
            ("get", prop.with_auto_getter, prop.with_getter),
            ("set", prop.with_auto_setter, prop.with_setter),
        ):
            value = entry.get(accessor)
            if value is None or value is False:
                continue
            if value is True:
                auto()
            elif isinstance(value, str):
                auto(_parse_visibility(value))
            elif isinstance(value, list):
                full(_statement_callback(value))
            elif isinstance(value, dict):
                full(
                    _statement_callback(value.get("body") or []),
                    _parse_visibility(value.get("visibility")),
                )
            else:
                raise ModelError(f"{owner} '{prop.name}': invalid '{accessor}' entry")

        if "expression" not in entry and not (prop.has_getter or prop.has_setter):
            prop.with_auto_getter().with_auto_setter()

        _apply_doc(prop, entry, f"{owner} '{prop.name}'")
        _apply_attributes(prop, entry, f"{owner} '{prop.name}'")

    def _parameters(self, entry: Dict[str, Any], owner: str):
        parameters = []
        for parameter in _require_list(entry, "parameters", owner):
            parameters.append(
                (
                    parse_type(_require(parameter, "type", owner)),
                    self._name(_require(parameter, "name", owner), NamingCase.CAMEL_CASE),
                )
            )
        return parameters

    def _add_constructor(self, container: ContainerBuilder, entry: Dict[str, Any]):
        owner = f"{container.name} constructor"
        if not isinstance(entry, dict):
            raise ModelError(f"{owner}: expected an object")
        ctor = container.add_constructor()
        ctor.with_visibility(_parse_visibility(entry.get("visibility"), Visibility.PUBLIC))
        for type_, name in self._parameters(entry, owner):
            ctor.with_parameter(type_, name)
        for key, chain in (("base", ctor.with_base_call), ("this", ctor.with_this_call)):
            args = entry.get(key)
            if args is None:
                continue
            if not isinstance(args, list):
                raise ModelError(f"{owner}: '{key}' must be a list of arguments")
            chain(*args)
        body = _statement_callback(entry.get("body"))
        if body is not None:
            ctor.with_body(body)
        _apply_doc(ctor, entry, owner)
        _apply_attributes(ctor, entry, owner)

    def _add_method(self, container: ContainerBuilder, entry: Dict[str, Any]):
        owner = f"{container.name} method"
        method = container.add_method(
            self._name(_require(entry, "name", owner), NamingCase.PASCAL_CASE),
            parse_type(entry.get("returns", "void")),
        )
        method.with_visibility(_parse_visibility(entry.get("visibility"), Visibility.PUBLIC))

        modifiers = _modifiers(entry, METHOD_MODIFIERS, f"{owner} '{method.name}'")
        method.with_static("static" in modifiers)
        method.with_virtual("virtual" in modifiers)
        method.with_override("override" in modifiers)
        method.with_abstract("abstract" in modifiers)
        method.with_partial("partial" in modifiers)

        for type_, name in self._parameters(entry, owner):
            method.with_parameter(type_, name)
        for type_param in _require_strings(entry, "type_parameters", owner):
            method.with_type_parameter(type_param)
        for constraint in _require_list(entry, "constraints", owner):
            method.with_type_constraint(
                _require(constraint, "param", owner),
                _require(constraint, "constraint", owner),
            )

        body = _statement_callback(entry.get("body"))
        if body is not None:
            method.with_body(body)
        _apply_doc(method, entry, f"{owner} '{method.name}'")
        _apply_attributes(method, entry, f"{owner} '{method.name}'")


def build_file_from_model(
    model: Dict[str, Any],
    config: Optional[EmitterConfig] = None,
    path: Optional[Union[str, Path]] = None,
    source_name: Optional[str] = None,
) -> FileBuilder:
    """
    Convenience function to convert a model document.

    Args:
        model: Parsed model document
        config: Emitter configuration
        path: Output path for ``save()``
        source_name: Name shown in the header banner

    Returns:
        Configured FileBuilder
    """
    return ModelConverter(config).convert(model, path, source_name)
