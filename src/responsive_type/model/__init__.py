"""Model layer -- public type re-exports."""

from responsive_type.model.context import Context
from responsive_type.model.diagnostic import Diagnostic, Severity
from responsive_type.model.params import (
    DECLARATION_NAMES,
    Attribute,
    DeclarationNames,
    SizingParameters,
    default_params,
)

__all__ = [
    # params
    "Attribute",
    "SizingParameters",
    "DeclarationNames",
    "DECLARATION_NAMES",
    "default_params",
    # context
    "Context",
    # diagnostic
    "Severity",
    "Diagnostic",
]
