"""The mutable accumulator for one compilation unit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from dyescript.store.collection import Collection
from dyescript.store.scope import ScopeManager

# selector -> camelCase property -> candidate values in write order
Styles = dict[str, dict[str, list[str]]]
# animation name -> keyframe label -> camelCase property -> value
Animations = dict[str, dict[str, dict[str, str]]]


@dataclass
class Font:
    """A ``@font-face`` descriptor; ``source`` is the URL inside ``src:url(...)``."""

    source: str | None = None
    descriptors: dict[str, str] = field(default_factory=dict)


class Store:
    """Styles, animations, motions and fonts, plus the scope manager."""

    def __init__(self) -> None:
        self.styles: Styles = {}
        self.animations: Animations = {}
        self.motions: Animations = {}
        self.fonts: dict[str, Font] = {}
        self.scope_manager = ScopeManager()

    def activate_collection(self, name: str) -> Collection:
        """Return the named collection, creating it if absent.

        The active scope is left alone; the caller decides whether to switch.
        """
        return self.scope_manager.collection(name)

    # --- styles ---------------------------------------------------------------

    def add_style(self, selectors: Iterable[str], property: str, value: str) -> None:
        """Record *value* as a candidate for *property* on every selector.

        Earlier candidates are kept; the renderer picks the dominant one.
        """
        for selector in _clean(selectors):
            style = self.styles.setdefault(selector, {})
            style.setdefault(property, []).append(value)

    def find_class(self, class_name: str) -> dict[str, list[str]] | None:
        """Declarations of ``.<class_name>``, falling back to a bare ``<class_name>`` selector."""
        style = self.styles.get(f".{class_name}")
        if style is None:
            style = self.styles.get(class_name)
        return style

    # --- animations -----------------------------------------------------------

    def add_keyframe(self, animation: str, label: str, property: str, value: str) -> None:
        _add_frame(self.animations, animation, label, property, value)

    def add_motion(self, motion: str, label: str, property: str, value: str) -> None:
        _add_frame(self.motions, motion, label, property, value)

    # --- fonts ----------------------------------------------------------------

    def add_font(self, family: str, source: str) -> None:
        self.fonts.setdefault(family, Font()).source = source

    def add_font_descriptor(self, family: str, property: str, value: str) -> None:
        self.fonts.setdefault(family, Font()).descriptors[property] = value

    # --- helpers --------------------------------------------------------------

    def is_empty(self) -> bool:
        return not (self.styles or self.animations or self.motions or self.fonts)

    def __repr__(self) -> str:
        return (
            f"Store(styles={len(self.styles)}, animations={len(self.animations)}, "
            f"motions={len(self.motions)}, fonts={len(self.fonts)})"
        )


def _clean(selectors: Iterable[str]) -> list[str]:
    return [s.strip() for s in selectors if s and s.strip()]


def _add_frame(target: Animations, name: str, label: str, property: str, value: str) -> None:
    frames = target.setdefault(name, {})
    frames.setdefault(label.strip(), {})[property] = value
