"""Diagnostic model: structured non-fatal findings about a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding raised while transforming a stylesheet.

    Attributes:
        code: Short identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: Selector of the rule involved, if applicable.
        prop: Declaration property involved, if applicable.
        line: 1-based source line, when the node came from parsed source.
        column: 1-based source column.
    """

    code: str
    severity: Severity
    message: str
    selector: str | None = None
    prop: str | None = None
    line: int | None = None
    column: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" {self.line}:{self.column}" if self.column else f" {self.line}"
        target = ""
        if self.selector:
            target = f" [{self.selector}"
            if self.prop:
                target += f" {{ {self.prop} }}"
            target += "]"
        return f"{self.severity.value}{location}{target}: {self.message}"
