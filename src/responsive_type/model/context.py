"""Per-run state carried through one stylesheet transformation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from responsive_type.config import TransformConfig
from responsive_type.events.bus import EventBus
from responsive_type.events.types import DiagnosticEmitted
from responsive_type.model.diagnostic import Diagnostic, Severity
from responsive_type.stylesheet.model import Declaration, Node, Rule

log = logging.getLogger(__name__)


@dataclass
class Context:
    """State for a single document-processing run.

    ``root_size`` starts at the configured default and is recalibrated from
    ``html`` rules during the walk.  Create a new Context for every document
    so nothing leaks between runs.
    """

    config: TransformConfig = field(default_factory=TransformConfig)
    event_bus: EventBus = field(default_factory=EventBus)
    root_size: str = ""
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.root_size:
            self.root_size = self.config.default_root_size

    def warn(self, node: Node, message: str, code: str) -> Diagnostic:
        """Record a WARNING diagnostic tied to *node*'s source position."""
        selector: str | None = None
        prop: str | None = None
        if isinstance(node, Declaration):
            prop = node.prop
            if isinstance(node.parent, Rule):
                selector = node.parent.selector
        elif isinstance(node, Rule):
            selector = node.selector
        diagnostic = Diagnostic(
            code=code,
            severity=Severity.WARNING,
            message=message,
            selector=selector,
            prop=prop,
            line=node.line,
            column=node.column,
        )
        self.diagnostics.append(diagnostic)
        log.warning("%s", diagnostic)
        self.event_bus.emit(DiagnosticEmitted(diagnostic=diagnostic))
        return diagnostic

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]
