"""Error hierarchy for statement interpretation."""

from __future__ import annotations


class DyeError(Exception):
    """Base error for everything raised while interpreting a statement."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class DyeSyntaxError(DyeError):
    """A statement's payload does not have the shape its keyword requires."""


class InvalidVariableNameError(DyeError):
    """A ``var`` statement names a variable outside the identifier grammar."""

    def __init__(self, name: str, *, index: int | None = None) -> None:
        super().__init__(f"Invalid variable name: {name!r}", index=index)
        self.name = name


class NotSupportedError(DyeError):
    """The statement uses a language feature that is not available yet."""

    def __init__(self, feature: str, *, index: int | None = None) -> None:
        super().__init__(f"{feature} is not supported yet", index=index)
        self.feature = feature


class UnresolvedVariableError(DyeError):
    """Strict mode only: a ``&name`` reference resolved to nothing."""

    def __init__(self, name: str, *, index: int | None = None) -> None:
        super().__init__(f"Unresolved variable: &{name}", index=index)
        self.name = name


class UnknownStatementError(DyeError):
    """Strict mode only: the leading token is not a known keyword."""

    def __init__(self, keyword: str, *, index: int | None = None) -> None:
        super().__init__(f"Unknown statement: {keyword!r}", index=index)
        self.keyword = keyword
