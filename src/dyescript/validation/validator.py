"""Variable name validation."""

from __future__ import annotations

import re

# Letters and digits, starting with a letter.
_IDENTIFIER_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")


class VariableNameValidator:
    """Checks names given to ``var`` statements."""

    def is_valid(self, name: str | None) -> bool:
        if not name:
            return False
        return _IDENTIFIER_RE.match(name) is not None
