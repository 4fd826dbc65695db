from dyescript.parser.errors import ParseError
from dyescript.parser.transformer import parse_source

__all__ = ["ParseError", "parse_source"]
