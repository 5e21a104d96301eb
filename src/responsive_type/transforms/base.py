"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from responsive_type.model.context import Context
from responsive_type.stylesheet.model import Root


class Transform(Protocol):
    """An in-place stylesheet rewriting step sharing one run's context."""

    def apply(self, root: Root, context: Context) -> Root: ...
