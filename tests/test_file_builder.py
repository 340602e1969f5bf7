"""
Tests for cs_emitter.builders.file_builder module.

Tests rendering of whole files and persistence to disk.
"""

import pytest

from cs_emitter.builders.file_builder import FileBuilder
from cs_emitter.core.config import EmitterConfig
from cs_emitter.core.emitter import InvalidParameterlessStructConstructor
from cs_emitter.core.types import CsType


class TestFileRender:
    """Tests for FileBuilder.render."""

    def test_duplicate_using_emitted_once(self):
        """Test the same using added twice appears once."""
        text = FileBuilder().with_using("System").with_using("System").render()

        assert text == "using System;\n\n"

    def test_usings_sorted(self):
        """Test using lines are sorted lexicographically."""
        text = (
            FileBuilder()
            .with_usings("UnityEngine", "System.Collections.Generic", "System")
            .render()
        )

        assert text == (
            "using System;\nusing System.Collections.Generic;\nusing UnityEngine;\n\n"
        )

    def test_usings_from_source(self):
        """Test usings selected from arbitrary items."""
        modules = [{"ns": "B"}, {"ns": "A"}, {"ns": "B"}]
        builder = FileBuilder().with_usings_from(modules, lambda m: m["ns"])

        assert builder.usings == ["B", "A"]
        assert builder.render() == "using A;\nusing B;\n\n"

    def test_no_namespace(self):
        """Test containers at top level when no namespace is set."""
        text = FileBuilder().with_class("Foo").render()

        assert text == "public class Foo\n{\n}\n\n"

    def test_namespace_wraps_containers(self):
        """Test namespace block with indented containers."""
        text = (
            FileBuilder()
            .with_using("System")
            .with_namespace("Game.Data")
            .with_class("Foo", lambda cls: cls.with_field("_x", CsType.INT))
            .render()
        )

        assert text == (
            "using System;\n"
            "\n"
            "namespace Game.Data\n"
            "{\n"
            "\tpublic class Foo\n"
            "\t{\n"
            "\t\tprivate int _x;\n"
            "\n"
            "\t}\n"
            "\n"
            "}\n"
        )

    def test_blank_namespace_means_none(self):
        """Test whitespace-only namespace is ignored."""
        text = FileBuilder().with_namespace("   ").with_class("Foo").render()

        assert "namespace" not in text

    def test_containers_in_insertion_order(self):
        """Test a struct added before a class renders first."""
        text = FileBuilder().with_struct("Point").with_class("Shape").render()

        assert text.index("struct Point") < text.index("class Shape")

    def test_header_lines(self):
        """Test header text becomes comment lines before usings."""
        text = (
            FileBuilder()
            .with_header("Generated file.\n\nDo not edit.")
            .with_using("System")
            .render()
        )

        assert text == (
            "// Generated file.\n//\n// Do not edit.\n\nusing System;\n\n"
        )

    def test_header_trailing_whitespace(self):
        """Test header lines are commented without trailing whitespace."""
        text = FileBuilder().with_header("Generated file.   \n  \n").render()

        assert text == "// Generated file.\n//\n//\n\n"

    def test_add_class_handle(self):
        """Test add_class returns the class builder."""
        builder = FileBuilder()
        cls = builder.add_class("Foo")
        cls.with_sealed()

        assert "public sealed class Foo\n" in builder.render()

    def test_add_struct_handle(self):
        """Test add_struct returns the struct builder."""
        builder = FileBuilder()
        struct = builder.add_struct("Point")
        struct.with_readonly()

        assert "public readonly struct Point\n" in builder.render()

    def test_space_indentation_from_config(self):
        """Test configured spaces replace tabs."""
        config = EmitterConfig(use_tabs=False, indent_size=2)
        text = FileBuilder(config=config).with_namespace("N").with_class("Foo").render()

        assert "\n  public class Foo\n  {\n  }\n" in text

    def test_config_usings_and_namespace(self):
        """Test config supplies default usings and namespace."""
        config = EmitterConfig(namespace="Game", usings=["System"])
        text = FileBuilder(config=config).with_class("Foo").render()

        assert text.startswith("using System;\n\nnamespace Game\n{\n")

    def test_render_is_idempotent(self):
        """Test rendering twice yields identical text."""
        builder = (
            FileBuilder()
            .with_usings("System", "UnityEngine")
            .with_namespace("Game")
            .with_class(
                "Foo",
                lambda cls: cls.with_method(
                    "Run",
                    CsType.VOID,
                    lambda m: m.with_body(lambda b: b.if_("x", lambda t: t.return_())),
                ),
            )
        )

        assert builder.render() == builder.render()

    def test_invalid_container_raises(self):
        """Test validation errors abort the render."""
        builder = FileBuilder().with_struct("Point", lambda s: s.with_constructor())

        assert len(builder.validate()) == 1
        with pytest.raises(InvalidParameterlessStructConstructor):
            builder.render()


class TestFileSave:
    """Tests for FileBuilder persistence."""

    def test_preview_does_not_write(self, tmp_path):
        """Test preview returns text without creating the file."""
        target = tmp_path / "Foo.cs"
        builder = FileBuilder(target).with_class("Foo")

        assert builder.preview() == builder.render()
        assert not target.exists()

    def test_save_creates_directories(self, tmp_path):
        """Test save writes to the configured path, creating parents."""
        target = tmp_path / "Generated" / "Scripts" / "Foo.cs"
        builder = FileBuilder(target).with_using("System").with_class("Foo")

        written = builder.save()

        assert written == target
        assert target.read_text(encoding="utf-8") == builder.render()

    def test_save_to_overrides_path(self, tmp_path):
        """Test save_to ignores the configured path."""
        default = tmp_path / "default.cs"
        other = tmp_path / "other" / "Other.cs"
        builder = FileBuilder(default).with_class("Foo")

        builder.save_to(other)

        assert other.exists()
        assert not default.exists()

    def test_save_uses_config_output_file(self, tmp_path):
        """Test the configured output_file is the default path."""
        target = tmp_path / "Configured.cs"
        builder = FileBuilder(config=EmitterConfig(output_file=str(target)))

        builder.with_class("Foo").save()

        assert target.exists()

    def test_save_without_path_raises(self):
        """Test save requires a path."""
        with pytest.raises(ValueError):
            FileBuilder().with_class("Foo").save()

    def test_crlf_line_endings(self, tmp_path):
        """Test configured line ending is applied when writing."""
        target = tmp_path / "Foo.cs"
        config = EmitterConfig(line_ending="\r\n")

        FileBuilder(target, config).with_class("Foo").save()

        assert target.read_bytes() == b"public class Foo\r\n{\r\n}\r\n\r\n"

    def test_utf8_content(self, tmp_path):
        """Test non-ASCII text is written as UTF-8."""
        target = tmp_path / "Foo.cs"
        FileBuilder(target).with_header("Généré").with_class("Foo").save()

        assert target.read_bytes().startswith("// Généré\n".encode("utf-8"))
