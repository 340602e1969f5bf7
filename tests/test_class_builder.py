"""
Tests for cs_emitter.builders.class_builder module.

Covers declarations, canonical member ordering and blank-line layout.
"""

import pytest

from cs_emitter.builders.class_builder import ClassBuilder
from cs_emitter.core.emitter import MissingConstInitializer
from cs_emitter.core.indent import IndentEmitter
from cs_emitter.core.syntax import Visibility
from cs_emitter.core.types import CsType


class TestClassDeclaration:
    """Tests for the class declaration line."""

    def test_empty_class(self):
        """Test an empty class renders declaration and braces only."""
        assert ClassBuilder("Foo").render() == "public class Foo\n{\n}\n"

    def test_base_class_by_name(self):
        """Test base class clause."""
        cls = ClassBuilder("MyHandler").with_base_class("BaseHandler")

        assert cls.render().startswith("public class MyHandler : BaseHandler\n")

    def test_generic_base_and_constraint(self):
        """Test type parameters, generic base type and where clause."""
        cls = (
            ClassBuilder("MyHandler")
            .with_type_parameter("T")
            .with_base_class(CsType.generic("BaseHandler", CsType.of("T")))
            .with_type_constraint("T", "IMessage")
        )

        assert cls.render() == (
            "public class MyHandler<T> : BaseHandler<T> where T : IMessage\n{\n}\n"
        )

    def test_modifier_order(self):
        """Test class modifiers in canonical order."""
        cls = ClassBuilder("Repo").with_partial().with_sealed()

        assert cls.render().startswith("public sealed partial class Repo\n")

    def test_static_internal(self):
        """Test visibility and static modifier."""
        cls = ClassBuilder("Extensions").with_visibility(Visibility.INTERNAL).with_static()

        assert cls.render().startswith("internal static class Extensions\n")

    def test_doc_and_attributes(self):
        """Test doc block and attributes precede the declaration."""
        cls = (
            ClassBuilder("ItemDef")
            .with_xml_doc(lambda doc: doc.with_summary("An item."))
            .with_attribute(
                "CreateAssetMenu", lambda a: a.with_argument('menuName = "Game/Item"')
            )
        )

        assert cls.render() == (
            "/// <summary>\n"
            "/// An item.\n"
            "/// </summary>\n"
            '[CreateAssetMenu(menuName = "Game/Item")]\n'
            "public class ItemDef\n"
            "{\n"
            "}\n"
        )


class TestMemberLayout:
    """Tests for member ordering and blank lines."""

    def test_field_before_property(self):
        """Test a property added before a field renders after it."""
        cls = (
            ClassBuilder("Foo")
            .with_property("Name", CsType.STRING, lambda p: p.with_auto_getter())
            .with_field("_id", CsType.INT)
        )

        assert cls.render() == (
            "public class Foo\n"
            "{\n"
            "\tprivate int _id;\n"
            "\n"
            "\tpublic string Name { get; }\n"
            "\n"
            "}\n"
        )

    def test_full_category_order(self):
        """Test fields, properties, constructors, then methods."""
        cls = (
            ClassBuilder("Player")
            .with_method("Tick", CsType.VOID)
            .with_constructor(lambda c: c.with_parameter(CsType.INT, "id"))
            .with_property("Id", CsType.INT, lambda p: p.with_auto_getter())
            .with_field("_a", CsType.INT)
            .with_field("_b", CsType.INT)
            .with_method("Reset", CsType.VOID)
        )

        assert cls.render() == (
            "public class Player\n"
            "{\n"
            "\tprivate int _a;\n"
            "\tprivate int _b;\n"
            "\n"
            "\tpublic int Id { get; }\n"
            "\n"
            "\tpublic Player(int id)\n"
            "\t{\n"
            "\t}\n"
            "\n"
            "\tpublic void Tick()\n"
            "\t{\n"
            "\t}\n"
            "\n"
            "\tpublic void Reset()\n"
            "\t{\n"
            "\t}\n"
            "\n"
            "}\n"
        )

    def test_raw_member_keeps_position(self):
        """Test raw lines stay at their insertion index without indent."""
        cls = (
            ClassBuilder("Foo")
            .with_field("_a", CsType.INT)
            .with_raw("#region Api")
            .with_method("M", CsType.VOID)
            .with_property("P", CsType.INT, lambda p: p.with_auto_getter())
        )

        lines = cls.render().splitlines()

        assert lines.index("#region Api") == 4
        assert lines.index("\tprivate int _a;") == 2
        assert lines.index("\tpublic int P { get; }") == 5
        assert lines.index("\tpublic void M()") == 7

    def test_add_returns_member_handle(self):
        """Test add_* returns the member for deferred configuration."""
        cls = ClassBuilder("Foo")
        field = cls.add_field("Speed", CsType.FLOAT)

        field.with_visibility(Visibility.PUBLIC).with_default_value("1f")

        assert "\tpublic float Speed = 1f;\n" in cls.render()

    def test_batch_fields_with_item_configure(self):
        """Test with_fields passes (item, builder) to the configure callback."""
        stats = [("Health", "int", "100"), ("Speed", "float", "2.5f")]
        cls = ClassBuilder("Stats").with_fields(
            stats,
            lambda s: s[0],
            lambda s: CsType.of(s[1]),
            lambda s, f: f.with_visibility(Visibility.PUBLIC).with_default_value(s[2]),
        )

        text = cls.render()

        assert "\tpublic int Health = 100;\n\tpublic float Speed = 2.5f;\n\n" in text

    def test_batch_properties_and_methods(self):
        """Test property and method batch forms."""
        names = ["A", "B"]
        cls = (
            ClassBuilder("Foo")
            .with_properties(names, lambda n: n, lambda n: CsType.INT, lambda n, p: p.with_auto_getter())
            .with_methods(names, lambda n: f"Get{n}", lambda n: CsType.INT, lambda n, m: m.with_body(lambda b: b.return_(n)))
        )

        text = cls.render()

        assert "\tpublic int A { get; }\n\tpublic int B { get; }\n\n" in text
        assert "\tpublic int GetB()\n\t{\n\t\treturn B;\n\t}\n" in text

    def test_constructor_named_after_class(self):
        """Test constructors take the container's name."""
        cls = ClassBuilder("Widget")
        ctor = cls.add_constructor()

        assert ctor.name == "Widget"
        assert cls.constructors == [ctor]

    def test_member_error_propagates(self):
        """Test member validation errors surface at container render."""
        cls = ClassBuilder("Config").with_field("Max", CsType.INT, lambda f: f.with_const())

        assert [type(e) for e in cls.validate()] == [MissingConstInitializer]
        with pytest.raises(MissingConstInitializer):
            cls.render()

    def test_nested_depth(self):
        """Test class at depth one indents members at depth two."""
        indent = IndentEmitter()
        indent.push()
        cls = ClassBuilder("Foo").with_method(
            "Run", CsType.VOID, lambda m: m.with_body(lambda b: b.return_())
        )

        text = cls.render(indent)

        assert text.startswith("\tpublic class Foo\n\t{\n\t\tpublic void Run()\n")
        assert "\t\t\treturn;\n" in text
        assert indent.depth == 1

    def test_render_is_idempotent(self):
        """Test repeated renders produce identical output."""
        cls = (
            ClassBuilder("Foo")
            .with_field("_x", CsType.INT)
            .with_method("Go", CsType.VOID, lambda m: m.with_body(lambda b: b.call("Run")))
        )

        assert cls.render() == cls.render()
