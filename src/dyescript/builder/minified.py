"""Minified variant of the CSS builder."""

from __future__ import annotations

from dyescript.builder.css import CSSBuilder
from dyescript.store.store import Store


class MinCSSBuilder(CSSBuilder):
    """Drops the redundant ``;`` before every ``}`` of the base output."""

    def build(self, store: Store) -> str:
        return super().build(store).replace(";}", "}")
