"""
Tests for line formatting.

Tests key functionality including:
- Best-effort template substitution
- Line rendering with and without caller locations
- Trace value rendering
"""

from collections import OrderedDict
from pathlib import PurePosixPath

import pytest

from slogan import ColorManager, LineFormatter, LogConfig
from slogan.constants import DEFAULT_FORMATS
from slogan.formatters import get_format, is_empty_value, render_trace, safe_format, type_name

# =============================================================================
# Test helpers
# =============================================================================


@pytest.mark.unit
class TestSafeFormat:
    """Test safe_format."""

    def test_positional(self):
        assert safe_format("{0}:{1}", "a.py", 3) == "a.py:3"

    def test_unused_arguments_are_ignored(self):
        assert safe_format("   {0} {1}", "tag", "msg", "caller") == "   tag msg"

    def test_missing_argument_keeps_template(self):
        assert safe_format("{0} {5}", "tag", "msg") == "{0} {5} tag msg"

    def test_malformed_template_keeps_template(self):
        assert safe_format("{0", "x") == "{0 x"

    def test_named_field_keeps_template(self):
        assert safe_format("{name}", "x") == "{name} x"

    def test_no_arguments(self):
        assert safe_format("{0}") == "{0}"


@pytest.mark.unit
class TestGetFormat:
    """Test get_format fallback."""

    def test_present(self):
        assert get_format({"where": "{1}@{0}"}, "where") == "{1}@{0}"

    def test_missing_falls_back_to_default(self):
        assert get_format({}, "where") == DEFAULT_FORMATS["where"]

    def test_unknown_name(self):
        assert get_format({}, "nope") == ""


@pytest.mark.unit
class TestTraceHelpers:
    """Test trace rendering helpers."""

    @pytest.mark.parametrize("value", [[], (), {}, set(), frozenset(), OrderedDict()])
    def test_empty_collections(self, value):
        assert is_empty_value(value)

    @pytest.mark.parametrize("value", ["", b"", [0], {"a": 1}, 0, None, 1.5])
    def test_not_empty_collections(self, value):
        assert not is_empty_value(value)

    def test_type_name(self):
        assert type_name([]) == "list"
        assert type_name(PurePosixPath("/tmp")) == "pathlib.PurePosixPath"

    def test_empty_sequence_uses_empty_template(self):
        assert render_trace(DEFAULT_FORMATS, []) == "[]"

    def test_empty_mapping_uses_empty_template(self):
        assert render_trace(DEFAULT_FORMATS, {}) == "{}"

    def test_non_empty_value_has_four_labeled_segments(self):
        text = render_trace(DEFAULT_FORMATS, [1, 2])
        segments = text.split("\n\n")
        assert segments == [
            "type: list",
            "str: [1, 2]",
            "pretty: [1, 2]",
            "repr: [1, 2]",
        ]

    def test_string_value_uses_trace_template(self):
        text = render_trace(DEFAULT_FORMATS, "")
        assert text.startswith("type: str")

    def test_failing_str_does_not_raise(self):
        class Broken:
            def __str__(self):
                raise RuntimeError("nope")

        text = render_trace(DEFAULT_FORMATS, Broken())
        assert "str failed: RuntimeError: nope" in text


# =============================================================================
# Test LineFormatter
# =============================================================================


@pytest.fixture
def formatter():
    return LineFormatter()


@pytest.mark.unit
class TestLineFormatter:
    """Test LineFormatter.render."""

    def test_default_template(self, formatter):
        line = formatter.render(LogConfig(), 8, "A debug message")
        assert line == "   debug     A debug message"

    def test_caller_template_base_only(self, formatter):
        line = formatter.render(LogConfig(), 7, "hi", ("/src/app/main.py", 12))
        assert line == "   info      main.py:12\t hi"

    def test_caller_template_full_path(self, formatter):
        config = LogConfig(caller_base=False)
        line = formatter.render(config, 7, "hi", ("/src/app/main.py", 12))
        assert line == "   info      /src/app/main.py:12\t hi"

    def test_silent_uses_prefix_slot(self, formatter):
        config = LogConfig().replace(tags=("pfx",) + LogConfig().tags[1:])
        assert formatter.render(config, 0, "kept") == "   pfx kept"

    def test_level_outside_tag_table(self, formatter):
        assert formatter.render(LogConfig(), 42, "odd") == "    odd"

    def test_malformed_template_renders_best_effort(self, formatter):
        config = LogConfig().replace(formats={"default": "{0} {7}"})
        line = formatter.render(config, 4, "boom")
        assert "{0} {7}" in line
        assert "boom" in line

    def test_missing_template_uses_default(self, formatter):
        config = LogConfig().replace(formats={})
        assert formatter.render(config, 8, "x") == "   debug     x"

    def test_colors_on_terminal(self, formatter):
        line = formatter.render(LogConfig(), 5, "careful", ("/a/b.py", 1), is_terminal=True)
        tag = ColorManager.apply("Yellow", "warning  ")
        where = ColorManager.apply("Underline", "b.py:1")
        # Message part is not colorized by default
        assert line == f"   {tag} {where}\t careful"

    def test_message_colored_when_log_part_enabled(self, formatter):
        config = LogConfig(force_colorize=True).replace(
            parts={"tag": False, "log": True, "caller": False, "prefix": False}
        )
        line = formatter.render(config, 4, "boom")
        assert line == "   error     " + ColorManager.apply("LightRed", "boom")


@pytest.mark.unit
class TestFormattingFailures:
    """Rendering never raises, whatever the values do."""

    def test_safe_format_argument_with_failing_format(self):
        class Loud:
            def __format__(self, spec):
                raise RuntimeError("no format")

            def __str__(self):
                return "loud"

        assert safe_format("{0}", Loud()) == "{0} loud"

    def test_safe_format_argument_with_failing_str(self):
        class Mute:
            def __format__(self, spec):
                raise RuntimeError("no format")

            def __str__(self):
                raise RuntimeError("no str")

        text = safe_format("{0}", Mute())
        assert text.startswith("{0} ")
        assert "str failed: RuntimeError: no str" in text

    def test_empty_collection_with_failing_repr(self):
        class BadEmpty(list):
            def __repr__(self):
                raise RuntimeError("nope")

        text = render_trace(DEFAULT_FORMATS, BadEmpty())
        assert text.startswith("{0!r}")
        assert "RuntimeError: nope" in text

    def test_collection_with_failing_len(self):
        class BadLen(list):
            def __len__(self):
                raise RuntimeError("no len")

        assert not is_empty_value(BadLen())
