"""Build the fluid ``calc()`` expression and its two boundary media blocks."""

from __future__ import annotations

from dataclasses import dataclass

from responsive_type.errors import UnitlessSizeError
from responsive_type.model.context import Context
from responsive_type.model.params import Attribute, SizingParameters
from responsive_type.stylesheet.model import AtRule, Declaration, Rule
from responsive_type.units import format_number, get_unit, parse_number, px_to_rem

UNIT_MISMATCH = "unit-mismatch"
UNSUPPORTED_UNITS = "unsupported-units"


@dataclass
class GeneratedRules:
    """Output of :func:`build_rules` for one responsive declaration."""

    responsive: str
    min_media: AtRule
    max_media: AtRule


def _media_params(media_type: str, condition: str) -> str:
    if media_type:
        return f"{media_type} and ({condition})"
    return f"({condition})"


def _boundary(rule: Rule, attribute: Attribute, size: str, params: str) -> AtRule:
    return AtRule(
        name="media",
        params=params,
        nodes=[
            Rule(
                selector=rule.selector,
                nodes=[Declaration(prop=attribute.value, value=size)],
            )
        ],
    )


def build_rules(
    rule: Rule,
    attribute: Attribute,
    params: SizingParameters,
    context: Context,
) -> GeneratedRules:
    """Turn resolved *params* into a ``calc()`` string and two ``@media`` rules.

    Raises :class:`UnitlessSizeError` when ``min_size`` has no unit.  Unit
    problems that can still produce output are recorded as warnings on
    *context*; an unsupported size/width unit pairing leaves the widths
    unresolved and the expression carries ``NaN`` in their place.
    """
    size_unit = get_unit(params.min_size)
    max_size_unit = get_unit(params.max_size)
    width_unit = get_unit(params.min_width)
    max_width_unit = get_unit(params.max_width)

    if size_unit is None:
        raise UnitlessSizeError(
            "sizes with unitless values are not supported",
            line=rule.line,
            column=rule.column,
        )

    # Only warns when sizes and widths are both inconsistent.
    if size_unit != max_size_unit and width_unit != max_width_unit:
        context.warn(rule, "min/max unit types must match", UNIT_MISMATCH)

    min_width: str | None = None
    max_width: str | None = None
    if size_unit == "rem" and width_unit == "px":
        min_width = px_to_rem(params.min_width, context.root_size)
        max_width = px_to_rem(params.max_width, context.root_size)
    elif size_unit == width_unit or (size_unit == "rem" and width_unit == "em"):
        min_width = params.min_width
        max_width = params.max_width
    else:
        context.warn(rule, "this combination of units is not supported", UNSUPPORTED_UNITS)

    size_diff = parse_number(params.max_size) - parse_number(params.min_size)
    range_diff = parse_number(max_width) - parse_number(min_width)

    responsive = (
        f"calc({params.min_size} + {format_number(size_diff)} * "
        f"((100vw - {min_width or 'NaN'}) / {format_number(range_diff)}))"
    )

    media_type = context.config.media_type
    return GeneratedRules(
        responsive=responsive,
        min_media=_boundary(
            rule,
            attribute,
            params.min_size,
            _media_params(media_type, f"max-width: {params.min_width}"),
        ),
        max_media=_boundary(
            rule,
            attribute,
            params.max_size,
            _media_params(media_type, f"min-width: {params.max_width}"),
        ),
    )
