"""Statement kinds, keyed by the leading token of a statement."""

from __future__ import annotations

from enum import Enum


class StatementKind(Enum):
    """Every statement the interpreter understands, by keyword form."""

    VAR = "var"
    DEFAULT = "default"
    SCOPE = "scope"
    STYLE = "style"
    CLASS = "class"
    IMPORT = "import"
    EXPOSE = "expose"
    EXPORT = "export"
    TYPE = "!type"
    DYEGEST = "!dyegest"
    VERSION = "!version"

    @classmethod
    def from_token(cls, token: str) -> StatementKind | None:
        """Normalize a symbolic or keyword leading token; ``None`` if unknown."""
        kind = SYMBOLS.get(token)
        if kind is not None:
            return kind
        try:
            return cls(token)
        except ValueError:
            return None


SYMBOLS: dict[str, StatementKind] = {
    "@": StatementKind.VAR,
    "!@": StatementKind.DEFAULT,
    "#": StatementKind.SCOPE,
    "$": StatementKind.STYLE,
    ".$": StatementKind.CLASS,
    "@@": StatementKind.IMPORT,
    "<=": StatementKind.EXPOSE,
    "=>": StatementKind.EXPORT,
}
