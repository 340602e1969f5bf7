"""
Tests for cs_emitter.core.indent module.
"""

from cs_emitter.core.indent import IndentEmitter


class TestIndentEmitter:
    """Tests for the IndentEmitter class."""

    def test_starts_at_zero(self):
        """Test a new emitter has no indentation."""
        indent = IndentEmitter()

        assert indent.depth == 0
        assert indent.get() == ""

    def test_push_and_pop(self):
        """Test depth follows push/pop calls."""
        indent = IndentEmitter()
        indent.push()
        indent.push()

        assert indent.get() == "\t\t"

        indent.pop()
        assert indent.depth == 1

    def test_pop_clamps_at_zero(self):
        """Test popping past zero is a no-op."""
        indent = IndentEmitter()
        indent.pop()
        indent.pop()

        assert indent.depth == 0

    def test_reset(self):
        """Test reset returns to depth zero."""
        indent = IndentEmitter()
        for _ in range(3):
            indent.push()
        indent.reset()

        assert indent.depth == 0

    def test_custom_unit(self):
        """Test a space-based indent unit."""
        indent = IndentEmitter("    ")
        indent.push()

        assert indent.line("return;") == "    return;"

    def test_independent_counters(self):
        """Test two emitters do not share state."""
        first = IndentEmitter()
        second = IndentEmitter()
        first.push()

        assert second.depth == 0
