"""Diagnostic model: structured messages recorded while compiling."""

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
    """A single finding about a compiled source.

    Attributes:
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        component: The part of the compiler that reported it.
        file: The source file name, if known.
        index: The statement's source line, if applicable.
    """

    severity: Severity
    message: str
    component: str = ""
    file: str | None = None
    index: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.file and self.index is not None:
            location = f" [{self.file}:{self.index}]"
        elif self.index is not None:
            location = f" [line {self.index}]"
        component = f" {self.component}" if self.component else ""
        return f"{self.severity.value}{component}{location}: {self.message}"
