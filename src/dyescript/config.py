from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerConfig:
    minify: bool = False
    strict: bool = False
    source_name: str | None = None  # used in diagnostics, e.g. "theme.dye"
