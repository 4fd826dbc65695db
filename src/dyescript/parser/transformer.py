"""Lark Transformer that turns a DyeScript parse tree into statements."""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from dyescript.model.statement import ParsedSource
from dyescript.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_parser: Lark | None = None


def _unquote(raw: str) -> str:
    return raw[1:-1].replace('\\"', '"').replace("\\\\", "\\")


class DyeTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into :class:`ParsedSource` records."""

    def statement(self, items: list[Token]) -> ParsedSource:
        tokens = [_unquote(str(t)) if t.type == "STRING" else str(t) for t in items]
        return ParsedSource(content=tuple(tokens), index=items[0].line or 0)

    def start(self, items: list[ParsedSource]) -> list[ParsedSource]:
        return list(items)


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark(
            GRAMMAR_PATH.read_text(encoding="utf-8"),
            parser="lalr",
            propagate_positions=True,
        )
    return _parser


def parse_source(source: str) -> list[ParsedSource]:
    """Tokenize DyeScript *source* into statements, in source order.

    Raises :class:`ParseError` with the offending line and column.
    """
    if not source.endswith("\n"):
        source += "\n"
    try:
        tree = _get_parser().parse(source)
    except UnexpectedInput as exc:
        line = exc.line if exc.line > 0 else None
        column = exc.column if exc.column > 0 else None
        text = str(exc).strip()
        detail = text.splitlines()[0] if text else type(exc).__name__
        raise ParseError(f"Invalid DyeScript source: {detail}", line=line, column=column) from exc
    return DyeTransformer().transform(tree)
