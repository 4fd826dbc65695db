"""DyeScript model layer -- public type re-exports."""

from dyescript.model.diagnostic import Diagnostic, Severity
from dyescript.model.statement import ParsedSource

__all__ = [
    "Severity",
    "Diagnostic",
    "ParsedSource",
]
