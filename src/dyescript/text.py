"""Case conversion between authoring (camelCase) and CSS (kebab-case) names."""

from __future__ import annotations

import re

__all__ = ["to_camel_case", "to_kebab_case"]

_DASH_RE = re.compile(r"-([a-zA-Z0-9])")
_UPPER_RE = re.compile(r"[A-Z]")


def to_camel_case(name: str) -> str:
    """``background-color`` -> ``backgroundColor``; ``-webkit-x`` -> ``WebkitX``.

    Names that are already camelCase come back unchanged.
    """
    return _DASH_RE.sub(lambda m: m.group(1).upper(), name)


def to_kebab_case(name: str) -> str:
    """``backgroundColor`` -> ``background-color``; ``WebkitX`` -> ``-webkit-x``."""
    return _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), name)
