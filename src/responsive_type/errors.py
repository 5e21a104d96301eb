"""Exception types raised while parsing or transforming a stylesheet."""

from __future__ import annotations


class ResponsiveTypeError(Exception):
    """Base class for errors that carry a source position."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.line}: {self.message}"
        return f"{self.line}:{self.column}: {self.message}"


class StylesheetParseError(ResponsiveTypeError):
    """Raised when CSS source cannot be parsed."""


class TransformError(ResponsiveTypeError):
    """Raised when a responsive declaration cannot be transformed."""


class UnitlessSizeError(TransformError):
    """Raised when the resolved minimum size has no recognised unit."""
