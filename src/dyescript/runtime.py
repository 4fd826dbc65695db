"""Runtime services shared by one compilation: version, logger and modes."""

from __future__ import annotations

import logging

from dyescript import __version__
from dyescript.model.diagnostic import Diagnostic, Severity


class DyeLogger:
    """Logs through :mod:`logging` and keeps every message as a :class:`Diagnostic`."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or logging.getLogger("dyescript")
        self.diagnostics: list[Diagnostic] = []

    def error(
        self, message: str, component: str = "", file: str | None = None, index: int | None = None
    ) -> None:
        self._record(Severity.ERROR, message, component, file, index)

    def warning(
        self, message: str, component: str = "", file: str | None = None, index: int | None = None
    ) -> None:
        self._record(Severity.WARNING, message, component, file, index)

    def info(
        self, message: str, component: str = "", file: str | None = None, index: int | None = None
    ) -> None:
        self._record(Severity.INFO, message, component, file, index)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]

    def _record(
        self,
        severity: Severity,
        message: str,
        component: str,
        file: str | None,
        index: int | None,
    ) -> None:
        diagnostic = Diagnostic(
            severity=severity, message=message, component=component, file=file, index=index
        )
        self.diagnostics.append(diagnostic)
        level = {
            Severity.ERROR: logging.ERROR,
            Severity.WARNING: logging.WARNING,
            Severity.INFO: logging.INFO,
        }[severity]
        self._log.log(level, "%s", diagnostic)


class DyeRuntime:
    """Per-compilation runtime state.

    ``strict`` turns unresolved variables and unknown statements into errors.
    ``dyegest`` marks the source as a digested (pre-processed) file.
    """

    version: str = __version__

    def __init__(self, *, strict: bool = False, file: str | None = None, logger: DyeLogger | None = None) -> None:
        self.strict = strict
        self.dyegest = False
        self.file = file
        self.logger = logger or DyeLogger()

    def enable_strict_mode(self) -> None:
        self.strict = True

    def enable_dyegest_mode(self) -> None:
        self.dyegest = True

    def __repr__(self) -> str:
        return f"DyeRuntime(version={self.version!r}, strict={self.strict}, dyegest={self.dyegest})"
