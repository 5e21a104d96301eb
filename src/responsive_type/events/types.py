"""Event types emitted while transforming a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from responsive_type.model.diagnostic import Diagnostic
    from responsive_type.model.params import SizingParameters


@dataclass(frozen=True)
class TransformStarted:
    root_size: str


@dataclass(frozen=True)
class RootSizeChanged:
    selector: str
    root_size: str


@dataclass(frozen=True)
class DeclarationTransformed:
    selector: str
    prop: str
    params: SizingParameters
    expression: str


@dataclass(frozen=True)
class DiagnosticEmitted:
    diagnostic: Diagnostic


@dataclass(frozen=True)
class TransformCompleted:
    transformed: int
    warnings: int
