"""Event system: bus and event types for the transform lifecycle."""

from responsive_type.events.bus import EventBus
from responsive_type.events.types import (
    DeclarationTransformed,
    DiagnosticEmitted,
    RootSizeChanged,
    TransformCompleted,
    TransformStarted,
)

__all__ = [
    "EventBus",
    "DeclarationTransformed",
    "DiagnosticEmitted",
    "RootSizeChanged",
    "TransformCompleted",
    "TransformStarted",
]
