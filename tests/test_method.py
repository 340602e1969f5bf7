"""
Tests for cs_emitter.builders.method module.
"""

from cs_emitter.builders.method import MethodBuilder
from cs_emitter.core.indent import IndentEmitter
from cs_emitter.core.syntax import Visibility
from cs_emitter.core.types import CsType


class TestMethodBuilder:
    """Tests for the MethodBuilder class."""

    def test_body(self):
        """Test a simple method with a body."""
        method = MethodBuilder("Initialize", CsType.VOID).with_body(
            lambda body: body.assign("_isReady", "true").call("Setup")
        )

        assert method.render() == (
            "public void Initialize()\n{\n\t_isReady = true;\n\tSetup();\n}\n"
        )

    def test_without_body_renders_empty_block(self):
        """Test a regular method without body still has braces."""
        method = MethodBuilder("OnEnable", CsType.VOID).with_visibility(
            Visibility.PROTECTED
        ).with_override()

        assert method.render() == "protected override void OnEnable()\n{\n}\n"

    def test_abstract_ignores_body(self):
        """Test abstract methods render a declaration even with a body."""
        method = (
            MethodBuilder("Execute", CsType.VOID)
            .with_abstract()
            .with_body(lambda body: body.call("Never"))
        )

        assert method.render() == "public abstract void Execute();\n"

    def test_partial_without_body(self):
        """Test partial declaration."""
        method = MethodBuilder("OnCreated", CsType.VOID).with_visibility(
            Visibility.PRIVATE
        ).with_partial()

        assert method.render() == "private partial void OnCreated();\n"

    def test_partial_with_body(self):
        """Test partial implementation."""
        method = (
            MethodBuilder("OnCreated", CsType.VOID)
            .with_visibility(Visibility.PRIVATE)
            .with_partial()
            .with_body(lambda body: body.call("Log"))
        )

        assert method.render() == "private partial void OnCreated()\n{\n\tLog();\n}\n"

    def test_generic_signature(self):
        """Test type parameters, parameters and constraints."""
        method = (
            MethodBuilder("GetOrCreate", CsType.of("T"))
            .with_type_parameter("T")
            .with_type_constraint("T", "new()")
            .with_parameter(CsType.STRING, "key")
            .with_body(lambda body: body.return_("new T()"))
        )

        assert method.render() == (
            "public T GetOrCreate<T>(string key) where T : new()\n"
            "{\n"
            "\treturn new T();\n"
            "}\n"
        )

    def test_batch_type_parameters_and_constraints(self):
        """Test selector-based generic configuration."""
        generics = [("TKey", "notnull"), ("TValue", "class")]
        method = (
            MethodBuilder("Map", CsType.VOID)
            .with_abstract()
            .with_type_parameters(generics, lambda g: g[0])
            .with_type_constraints(generics, lambda g: g[0], lambda g: g[1])
        )

        assert method.render() == (
            "public abstract void Map<TKey, TValue>() "
            "where TKey : notnull where TValue : class;\n"
        )

    def test_modifier_order(self):
        """Test modifiers render in canonical order regardless of call order."""
        method = (
            MethodBuilder("M", CsType.VOID)
            .with_partial()
            .with_abstract()
            .with_override()
            .with_virtual()
            .with_static()
        )

        assert method.render() == "public static virtual override abstract partial void M();\n"

    def test_parameters_from_source(self):
        """Test batch parameters."""
        params = [{"name": "a", "type": CsType.INT}, {"name": "b", "type": CsType.BOOL}]
        method = MethodBuilder("Run", CsType.BOOL).with_abstract().with_parameters(
            params, lambda p: p["type"], lambda p: p["name"]
        )

        assert method.render() == "public abstract bool Run(int a, bool b);\n"

    def test_depth_restored(self):
        """Test nested body leaves indent depth unchanged."""
        indent = IndentEmitter()
        indent.push()
        method = MethodBuilder("Loop", CsType.VOID).with_body(
            lambda body: body.for_each("x", "xs", lambda loop: loop.if_("x", lambda t: t.return_()))
        )

        text = method.render(indent)

        assert indent.depth == 1
        assert "\t\t\t\treturn;\n" in text
