"""
Tests for cs_emitter.builders.property module.
"""

import pytest

from cs_emitter.builders.property import PropertyBuilder
from cs_emitter.core.emitter import ConflictingPropertyBody
from cs_emitter.core.syntax import Visibility
from cs_emitter.core.types import CsType


class TestAutoProperties:
    """Tests for auto-implemented properties."""

    def test_accessor_visibility(self):
        """Test per-accessor visibility."""
        prop = (
            PropertyBuilder("MyProp", CsType.INT)
            .with_auto_getter()
            .with_auto_setter(Visibility.PRIVATE)
        )

        assert prop.render() == "public int MyProp { get; private set; }\n"

    def test_getter_only(self):
        """Test read-only auto property."""
        prop = PropertyBuilder("Id", CsType.STRING).with_auto_getter()

        assert prop.render() == "public string Id { get; }\n"

    def test_initializer(self):
        """Test auto property with default value."""
        prop = (
            PropertyBuilder("Items", CsType.list_of(CsType.INT))
            .with_auto_getter()
            .with_auto_setter()
            .with_default_value("new List<int>()")
        )

        assert prop.render() == (
            "public List<int> Items { get; set; } = new List<int>();\n"
        )

    def test_static(self):
        """Test static modifier follows visibility."""
        prop = PropertyBuilder("Instance", CsType.of("Game")).with_static().with_auto_getter()

        assert prop.render() == "public static Game Instance { get; }\n"


class TestExpressionProperties:
    """Tests for expression-bodied properties."""

    def test_expression_body(self):
        """Test expression body rendering."""
        prop = (
            PropertyBuilder("Combat", CsType.of("CombatDef"))
            .with_static()
            .with_expression_getter("Runtime.Combat")
        )

        assert prop.render() == "public static CombatDef Combat => Runtime.Combat;\n"

    def test_expression_with_getter_body_raises(self):
        """Test combining expression and explicit getter fails."""
        prop = (
            PropertyBuilder("X", CsType.INT)
            .with_expression_getter("_x")
            .with_getter(lambda body: body.return_("_x"))
        )

        with pytest.raises(ConflictingPropertyBody) as exc_info:
            prop.render()

        assert exc_info.value.member_name == "X"

    def test_expression_with_auto_setter_raises(self):
        """Test combining expression and auto accessor fails."""
        prop = PropertyBuilder("X", CsType.INT).with_expression_getter("_x").with_auto_setter()

        assert len(prop.validate()) == 1
        with pytest.raises(ConflictingPropertyBody):
            prop.render()


class TestFullProperties:
    """Tests for properties with accessor bodies."""

    def test_getter_and_setter_blocks(self):
        """Test full property layout."""
        prop = (
            PropertyBuilder("Health", CsType.INT)
            .with_getter(lambda body: body.return_("_health"))
            .with_setter(lambda body: body.assign("_health", "value"))
        )

        assert prop.render() == (
            "public int Health\n"
            "{\n"
            "\tget\n"
            "\t{\n"
            "\t\treturn _health;\n"
            "\t}\n"
            "\tset\n"
            "\t{\n"
            "\t\t_health = value;\n"
            "\t}\n"
            "}\n"
        )

    def test_accessor_without_body_renders_empty_braces(self):
        """Test mixing a body getter with a bodiless private setter."""
        prop = (
            PropertyBuilder("Value", CsType.FLOAT)
            .with_getter(lambda body: body.return_("_value"))
            .with_auto_setter(Visibility.PRIVATE)
        )

        assert "\tprivate set\n\t{\n\t}\n" in prop.render()

    def test_doc_precedes_declaration(self):
        """Test documentation is emitted before the property."""
        prop = (
            PropertyBuilder("Name", CsType.STRING)
            .with_auto_getter()
            .with_xml_doc(lambda doc: doc.with_inherit_doc())
        )

        assert prop.render() == "/// <inheritdoc/>\npublic string Name { get; }\n"
