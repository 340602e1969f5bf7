"""
Tests for cs_emitter.builders.field module.
"""

import pytest

from cs_emitter.builders.field import FieldBuilder
from cs_emitter.core.emitter import MissingConstInitializer
from cs_emitter.core.indent import IndentEmitter
from cs_emitter.core.syntax import Visibility
from cs_emitter.core.types import CsType


class TestFieldBuilder:
    """Tests for the FieldBuilder class."""

    def test_default_private(self):
        """Test fields default to private."""
        assert FieldBuilder("_myField", CsType.INT).render() == "private int _myField;\n"

    def test_static_readonly_with_default(self):
        """Test modifier order and initializer."""
        field = (
            FieldBuilder("DefaultPosition", CsType.of("Vector3"))
            .with_visibility(Visibility.PUBLIC)
            .with_readonly()
            .with_static()
            .with_default_value("Vector3.zero")
        )

        assert field.render() == (
            "public static readonly Vector3 DefaultPosition = Vector3.zero;\n"
        )

    def test_const_suppresses_static_and_readonly(self):
        """Test const renders without static/readonly keywords."""
        field = (
            FieldBuilder("MaxCount", CsType.INT)
            .with_visibility(Visibility.PUBLIC)
            .with_readonly()
            .with_const()
            .with_default_value("10")
        )

        assert field.render() == "public const int MaxCount = 10;\n"

    def test_const_implies_static(self):
        """Test with_const sets the static flag."""
        field = FieldBuilder("A", CsType.INT).with_const()

        assert field.is_static is True

    def test_const_without_default_raises(self):
        """Test const field with no default fails at render."""
        field = FieldBuilder("MaxCount", CsType.INT).with_const()

        with pytest.raises(MissingConstInitializer) as exc_info:
            field.render()

        assert exc_info.value.member_name == "MaxCount"

    def test_const_with_blank_default_raises(self):
        """Test whitespace-only default counts as missing."""
        field = FieldBuilder("Name", CsType.STRING).with_const().with_default_value("   ")

        with pytest.raises(MissingConstInitializer):
            field.render()

    def test_validation_is_deferred(self):
        """Test a later call can fix the field before render."""
        field = FieldBuilder("Max", CsType.INT).with_const()
        assert len(field.validate()) == 1

        field.with_default_value("3")

        assert field.validate() == []
        assert field.render() == "private const int Max = 3;\n"

    def test_doc_and_attributes(self):
        """Test doc block then attributes precede the declaration."""
        indent = IndentEmitter()
        indent.push()
        field = (
            FieldBuilder("_health", CsType.INT)
            .with_xml_doc(lambda doc: doc.with_summary("Current health."))
            .with_attribute("SerializeField")
            .with_attribute("Range", lambda a: a.with_arguments("0", "100"))
        )

        assert field.render(indent) == (
            "\t/// <summary>\n"
            "\t/// Current health.\n"
            "\t/// </summary>\n"
            "\t[SerializeField]\n"
            "\t[Range(0, 100)]\n"
            "\tprivate int _health;\n"
        )

    def test_protected_internal(self):
        """Test combined access level keyword."""
        field = FieldBuilder("Shared", CsType.BOOL).with_visibility(
            Visibility.PROTECTED_INTERNAL
        )

        assert field.render() == "protected internal bool Shared;\n"
