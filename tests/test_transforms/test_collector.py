"""Tests for sizing parameter resolution."""

import pytest

from responsive_type.model.params import (
    DECLARATION_NAMES,
    Attribute,
    SizingParameters,
    default_params,
)
from responsive_type.stylesheet import Rule, parse_stylesheet
from responsive_type.transforms.collector import (
    collect_parameters,
    merge_longhand,
    merge_range,
    merge_shorthand,
)


def _rule(body: str) -> Rule:
    return parse_stylesheet(f"h1 {{ {body} }}").nodes[0]


def _props(rule: Rule) -> list[str]:
    return [d.prop for d in rule.declarations()]


# ---------------------------------------------------------------------------
# Defaults and name tables
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_font_size(self):
        assert default_params(Attribute.FONT_SIZE) == SizingParameters(
            "12px", "21px", "420px", "1280px"
        )

    def test_line_height(self):
        assert default_params(Attribute.LINE_HEIGHT) == SizingParameters(
            "1.2em", "1.8em", "420px", "1280px"
        )

    def test_letter_spacing(self):
        assert default_params(Attribute.LETTER_SPACING) == SizingParameters(
            "0px", "4px", "420px", "1280px"
        )

    def test_defaults_are_copies(self):
        first = default_params(Attribute.FONT_SIZE)
        first.min_size = "99px"
        assert default_params(Attribute.FONT_SIZE).min_size == "12px"


class TestDeclarationNames:
    def test_font_size_family(self):
        names = DECLARATION_NAMES[Attribute.FONT_SIZE]
        assert names.range == "font-range"
        assert names.longhands() == [
            ("min_size", "min-font-size"),
            ("max_size", "max-font-size"),
            ("min_width", "lower-font-range"),
            ("max_width", "upper-font-range"),
        ]

    @pytest.mark.parametrize("attribute", ["line-height", "letter-spacing"])
    def test_other_families_follow_pattern(self, attribute):
        names = DECLARATION_NAMES[Attribute(attribute)]
        assert names.range == f"{attribute}-range"
        assert names.min_size == f"min-{attribute}"
        assert names.max_size == f"max-{attribute}"
        assert names.min_width == f"lower-{attribute}-range"
        assert names.max_width == f"upper-{attribute}-range"

    def test_from_prop(self):
        assert Attribute.from_prop("line-height") is Attribute.LINE_HEIGHT
        assert Attribute.from_prop("font-family") is None


# ---------------------------------------------------------------------------
# Merge passes
# ---------------------------------------------------------------------------


class TestMergeShorthand:
    def test_two_sizes(self):
        params = merge_shorthand(default_params(Attribute.FONT_SIZE), "responsive 14px 22px")
        assert (params.min_size, params.max_size) == ("14px", "22px")
        assert (params.min_width, params.max_width) == ("420px", "1280px")

    def test_sizes_anywhere_in_value(self):
        params = merge_shorthand(default_params(Attribute.FONT_SIZE), "1.5rem responsive -.5rem")
        assert (params.min_size, params.max_size) == ("1.5rem", "-.5rem")

    def test_keyword_without_sizes_keeps_defaults(self):
        params = merge_shorthand(default_params(Attribute.FONT_SIZE), "responsive")
        assert (params.min_size, params.max_size) == ("12px", "21px")

    def test_single_size_keeps_defaults(self):
        params = merge_shorthand(default_params(Attribute.FONT_SIZE), "responsive 14px")
        assert (params.min_size, params.max_size) == ("12px", "21px")

    def test_no_keyword_is_ignored(self):
        params = merge_shorthand(default_params(Attribute.FONT_SIZE), "14px 22px")
        assert params.min_size == "12px"

    def test_custom_keyword(self):
        params = merge_shorthand(default_params(Attribute.FONT_SIZE), "fluid 14px 22px", "fluid")
        assert params.min_size == "14px"


class TestMergeRange:
    def test_two_widths(self):
        params = merge_range(default_params(Attribute.FONT_SIZE), "300px   1000px")
        assert (params.min_width, params.max_width) == ("300px", "1000px")

    def test_single_width_keeps_defaults(self):
        params = merge_range(default_params(Attribute.FONT_SIZE), "300px")
        assert (params.min_width, params.max_width) == ("420px", "1280px")


class TestMergeLonghand:
    def test_sets_one_field(self):
        params = merge_longhand(default_params(Attribute.FONT_SIZE), "max_width", " 90em ")
        assert params.max_width == "90em"
        assert params.min_width == "420px"


# ---------------------------------------------------------------------------
# collect_parameters
# ---------------------------------------------------------------------------


class TestCollectParameters:
    def test_shorthand_only_uses_default_widths(self):
        rule = _rule("font-size: responsive 14px 22px;")
        params = collect_parameters(rule, Attribute.FONT_SIZE)
        assert params == SizingParameters("14px", "22px", "420px", "1280px")

    def test_keyword_declaration_is_left_in_place(self):
        rule = _rule("font-size: responsive 14px 22px; font-range: 1px 2px;")
        collect_parameters(rule, Attribute.FONT_SIZE)
        assert _props(rule) == ["font-size"]
        assert rule.declarations()[0].value == "responsive 14px 22px"

    def test_range_overrides_widths_and_is_removed(self):
        rule = _rule("font-size: responsive 14px 40px; font-range: 420px 1280px; color: red;")
        params = collect_parameters(rule, Attribute.FONT_SIZE)
        assert params == SizingParameters("14px", "40px", "420px", "1280px")
        assert _props(rule) == ["font-size", "color"]

    def test_longhand_beats_range_field_by_field(self):
        rule = _rule(
            "font-size: responsive 14px 40px;"
            "font-range: 300px 1000px;"
            "lower-font-range: 500px;"
            "min-font-size: 16px;"
        )
        params = collect_parameters(rule, Attribute.FONT_SIZE)
        assert params == SizingParameters("16px", "40px", "500px", "1000px")
        assert _props(rule) == ["font-size"]

    def test_all_longhands(self):
        rule = _rule(
            "line-height: responsive;"
            "min-line-height: 1em;"
            "max-line-height: 2em;"
            "lower-line-height-range: 30em;"
            "upper-line-height-range: 80em;"
        )
        params = collect_parameters(rule, Attribute.LINE_HEIGHT)
        assert params == SizingParameters("1em", "2em", "30em", "80em")
        assert _props(rule) == ["line-height"]

    def test_declaration_order_does_not_change_precedence(self):
        rule = _rule(
            "upper-font-range: 900px;"
            "font-range: 300px 1000px;"
            "font-size: responsive 14px 40px;"
        )
        params = collect_parameters(rule, Attribute.FONT_SIZE)
        assert (params.min_width, params.max_width) == ("300px", "900px")

    def test_other_attribute_declarations_untouched(self):
        rule = _rule(
            "font-size: responsive 14px 40px;"
            "line-height-range: 1px 2px;"
            "min-letter-spacing: 1px;"
        )
        collect_parameters(rule, Attribute.FONT_SIZE)
        assert _props(rule) == ["font-size", "line-height-range", "min-letter-spacing"]
