"""Parsed statement record handed from the parser to the interpreter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedSource:
    """One statement: its raw tokens in order plus the line it came from."""

    content: tuple[str, ...]
    index: int = 0

    def __post_init__(self) -> None:
        # Accept any sequence, store a tuple so the record stays immutable.
        object.__setattr__(self, "content", tuple(self.content))
