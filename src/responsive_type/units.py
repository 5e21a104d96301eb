"""Length helpers: unit extraction, px -> rem conversion, number formatting."""

from __future__ import annotations

import math
import re

DEFAULT_ROOT_SIZE = "16px"

# First recognised unit anywhere in the value; "rem" must win over "em".
_UNIT_RE = re.compile(r"px|rem|em")

# Leading number of a length string, e.g. "-0.5" in "-0.5em".
_NUMBER_RE = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def get_unit(value: str) -> str | None:
    """Return the first of ``px``, ``rem`` or ``em`` found in *value*."""
    match = _UNIT_RE.search(value)
    if match:
        return match.group(0)
    return None


def parse_number(value: str | None) -> float:
    """Parse the leading number of *value*; ``nan`` when there is none."""
    if value is None:
        return math.nan
    match = _NUMBER_RE.match(value)
    if not match:
        return math.nan
    return float(match.group(1))


def format_number(value: float) -> str:
    """Format a float for CSS output: ``26`` rather than ``26.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def px_to_rem(px: str, root_size: str = DEFAULT_ROOT_SIZE) -> str:
    """Convert a pixel length to ``rem`` relative to *root_size*."""
    root = parse_number(root_size)
    if root == 0:
        return "NaNrem"
    return format_number(parse_number(px) / root) + "rem"
