"""Sizing parameters, per-attribute defaults and declaration name tables."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum


class Attribute(str, Enum):
    """A property that accepts the ``responsive`` keyword."""

    FONT_SIZE = "font-size"
    LINE_HEIGHT = "line-height"
    LETTER_SPACING = "letter-spacing"

    @classmethod
    def from_prop(cls, prop: str) -> Attribute | None:
        try:
            return cls(prop)
        except ValueError:
            return None


@dataclass
class SizingParameters:
    """The four lengths that define one linear interpolation."""

    min_size: str
    max_size: str
    min_width: str
    max_width: str

    def copy(self) -> SizingParameters:
        return replace(self)


PARAM_FIELDS = tuple(f.name for f in fields(SizingParameters))


@dataclass(frozen=True)
class DeclarationNames:
    """Sibling declaration names that feed one attribute's parameters.

    ``range`` supplies both widths at once; the other four each override
    the :class:`SizingParameters` field of the same name.
    """

    range: str
    min_size: str
    max_size: str
    min_width: str
    max_width: str

    def longhands(self) -> list[tuple[str, str]]:
        """``(field, declaration name)`` pairs for the expanded form."""
        return [(name, getattr(self, name)) for name in PARAM_FIELDS]


_DEFAULT_PARAMS: dict[Attribute, SizingParameters] = {
    Attribute.FONT_SIZE: SizingParameters("12px", "21px", "420px", "1280px"),
    Attribute.LINE_HEIGHT: SizingParameters("1.2em", "1.8em", "420px", "1280px"),
    Attribute.LETTER_SPACING: SizingParameters("0px", "4px", "420px", "1280px"),
}

DECLARATION_NAMES: dict[Attribute, DeclarationNames] = {
    Attribute.FONT_SIZE: DeclarationNames(
        range="font-range",
        min_size="min-font-size",
        max_size="max-font-size",
        min_width="lower-font-range",
        max_width="upper-font-range",
    ),
    Attribute.LINE_HEIGHT: DeclarationNames(
        range="line-height-range",
        min_size="min-line-height",
        max_size="max-line-height",
        min_width="lower-line-height-range",
        max_width="upper-line-height-range",
    ),
    Attribute.LETTER_SPACING: DeclarationNames(
        range="letter-spacing-range",
        min_size="min-letter-spacing",
        max_size="max-letter-spacing",
        min_width="lower-letter-spacing-range",
        max_width="upper-letter-spacing-range",
    ),
}


def default_params(attribute: Attribute) -> SizingParameters:
    """Return a fresh copy of *attribute*'s built-in defaults."""
    return _DEFAULT_PARAMS[attribute].copy()
