"""Tokenizer errors."""

from __future__ import annotations


class ParseError(Exception):
    """Source text that the DyeScript grammar cannot split into statements.

    Raised before interpretation starts, so unlike statement errors it
    aborts the whole compilation.
    """

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    @property
    def location(self) -> str:
        if self.line is None:
            return ""
        if self.column is None:
            return f"line {self.line}"
        return f"line {self.line}, column {self.column}"

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message
