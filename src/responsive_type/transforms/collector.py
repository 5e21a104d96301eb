"""Resolve sizing parameters for one rule from its declaration forms.

Precedence, lowest to highest::

    built-in defaults
    shorthand       font-size: responsive 14px 40px
    range           font-range: 420px 1280px
    longhand        min-font-size / max-font-size /
                    lower-font-range / upper-font-range

Range and longhand declarations are consumed: they are removed from the rule
as they are read.  The keyword declaration itself is left in place.
"""

from __future__ import annotations

import logging
import re

from responsive_type.model.params import (
    DECLARATION_NAMES,
    Attribute,
    SizingParameters,
    default_params,
)
from responsive_type.stylesheet.model import Rule

log = logging.getLogger(__name__)

# Numbers with an optional unit suffix, e.g. "14px", "1.5", "-.25em".
_SIZE_RE = re.compile(r"-?\d*\.?\d+(?:\w+)?")


def merge_shorthand(
    params: SizingParameters, value: str, keyword: str = "responsive"
) -> SizingParameters:
    """Take ``min_size``/``max_size`` from a keyword shorthand value."""
    if keyword not in value:
        return params
    sizes = _SIZE_RE.findall(value)
    if len(sizes) >= 2:
        params.min_size, params.max_size = sizes[0], sizes[1]
    return params


def merge_range(params: SizingParameters, value: str) -> SizingParameters:
    """Take ``min_width``/``max_width`` from a two-length range value."""
    widths = value.split()
    if len(widths) >= 2:
        params.min_width, params.max_width = widths[0], widths[1]
    return params


def merge_longhand(
    params: SizingParameters, field_name: str, value: str
) -> SizingParameters:
    setattr(params, field_name, value.strip())
    return params


def collect_parameters(
    rule: Rule, attribute: Attribute, keyword: str = "responsive"
) -> SizingParameters:
    """Resolve *attribute*'s parameters from *rule*, consuming sibling forms."""
    names = DECLARATION_NAMES[attribute]
    params = default_params(attribute)

    for decl in rule.declarations(attribute.value):
        merge_shorthand(params, decl.value, keyword)

    for decl in rule.declarations(names.range):
        merge_range(params, decl.value)
        decl.remove()

    for field_name, prop in names.longhands():
        for decl in rule.declarations(prop):
            merge_longhand(params, field_name, decl.value)
            decl.remove()

    log.debug("Resolved %s for %r: %s", attribute.value, rule.selector, params)
    return params
