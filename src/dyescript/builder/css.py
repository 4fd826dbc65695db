"""Renders a finished :class:`Store` into CSS text."""

from __future__ import annotations

from dyescript.store.store import Animations, Font, Store, Styles
from dyescript.text import to_kebab_case

REDUCED_MOTION_QUERY = "@media (prefers-reduced-motion)"

_IMPORTANT = "!important"


def get_dominant_style(values: list[str]) -> str:
    """Pick the one value rendered for a property with several candidates.

    The last written candidate wins, except that an ``!important`` candidate
    beats plain ones (the last ``!important`` wins among several).
    """
    if not values:
        raise ValueError("No candidate values to choose from")
    important = [v for v in values if v.rstrip().endswith(_IMPORTANT)]
    if important:
        return important[-1]
    return values[-1]


class CSSBuilder:
    """Serializes styles, keyframes, reduced-motion keyframes and font faces, in that order.

    Every declaration is terminated with ``;``.  An empty store renders as an
    empty string.
    """

    def __init__(self) -> None:
        self._buffer: list[str] = []

    def build(self, store: Store) -> str:
        self._buffer = []
        try:
            self.process_styles(store.styles)
            self.process_animations(store.animations)
            self.process_motions(store.motions)
            self.process_fonts(store.fonts)
            return "".join(self._buffer)
        finally:
            self._buffer = []

    def append(self, text: str) -> None:
        self._buffer.append(text)

    # --- sections -------------------------------------------------------------

    def process_styles(self, styles: Styles) -> None:
        for selector, style in styles.items():
            if not style:
                continue
            self.append(f"{selector}{{")
            for prop, values in style.items():
                self.append(_declaration(prop, get_dominant_style(values)))
            self.append("}")

    def process_animations(self, animations: Animations) -> None:
        for name, frames in animations.items():
            self.append(_keyframes(name, frames))

    def process_motions(self, motions: Animations) -> None:
        blocks = [_keyframes(name, frames) for name, frames in motions.items()]
        if blocks:
            self.append(f"{REDUCED_MOTION_QUERY}{{{''.join(blocks)}}}")

    def process_fonts(self, fonts: dict[str, Font]) -> None:
        for family, font in fonts.items():
            if not font.source:
                continue
            parts = [f"font-family:{family}", f"src:url({font.source})"]
            parts.extend(f"{to_kebab_case(p)}:{v}" for p, v in font.descriptors.items())
            self.append(f"@font-face{{{';'.join(parts)}}}")


def _declaration(prop: str, value: str) -> str:
    return f"{to_kebab_case(prop)}:{value};"


def _keyframes(name: str, frames: dict[str, dict[str, str]]) -> str:
    body = "".join(
        f"{label}{{{''.join(_declaration(p, v) for p, v in props.items())}}}"
        for label, props in frames.items()
    )
    return f"@keyframes {name}{{{body}}}"
