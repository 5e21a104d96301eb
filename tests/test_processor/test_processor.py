"""Tests for the parse -> transform -> serialize entry points."""

import pytest

from responsive_type import (
    ProcessResult,
    StylesheetParseError,
    TransformConfig,
    UnitlessSizeError,
    process_css,
    transform_root,
)
from responsive_type.events import DeclarationTransformed, EventBus
from responsive_type.stylesheet import parse_stylesheet


class TestProcessCss:
    def test_returns_css_and_tree(self):
        result = process_css("h1 { font-size: responsive 14px 40px; font-range: 420px 1280px; }")
        assert isinstance(result, ProcessResult)
        assert "font-size: calc(14px + 26 * ((100vw - 420px) / 860));" in result.css
        assert "font-range" not in result.css
        assert len(result.root.nodes) == 3
        assert result.warnings == []

    def test_indent_and_media_type_config(self):
        config = TransformConfig(media_type="all", indent=2)
        result = process_css("h1 { font-size: responsive 14px 40px; }", config=config)
        assert "@media all and (max-width: 420px) {\n  h1 {\n    font-size: 14px;\n" in result.css

    def test_warnings_are_reported(self):
        result = process_css("p { line-height: responsive; }")
        assert [w.message for w in result.warnings] == ["this combination of units is not supported"]
        assert str(result.warnings[0]) == "WARNING 1:1 [p]: this combination of units is not supported"

    def test_root_size_does_not_leak_between_runs(self):
        first = process_css("html { font-size: 20px; } p { font-size: responsive 1rem 2rem; }")
        second = process_css("p { font-size: responsive 1rem 2rem; }")
        assert first.root_size == "20px"
        assert second.root_size == "16px"
        assert "21rem" in first.css
        assert "26.25rem" in second.css

    def test_parse_error(self):
        with pytest.raises(StylesheetParseError):
            process_css("h1 { color }")

    def test_unitless_error(self):
        with pytest.raises(UnitlessSizeError):
            process_css("h1 { font-size: responsive 14 40; }")

    def test_event_bus_is_used(self):
        bus = EventBus()
        found = []
        bus.subscribe(DeclarationTransformed, found.append)
        process_css("h1 { font-size: responsive; } h2 { font-size: responsive; }", event_bus=bus)
        assert [e.selector for e in found] == ["h1", "h2"]


class TestTransformRoot:
    def test_mutates_root_and_returns_context(self):
        root = parse_stylesheet("html { font-size: 12px; } h1 { font-size: responsive 1rem 2rem; }")
        context = transform_root(root)
        assert context.root_size == "12px"
        assert len(root.nodes) == 4
        assert context.config == TransformConfig()
