"""Tests for the CSS builders."""

import re

import pytest

from dyescript.builder import CSSBuilder, MinCSSBuilder, get_dominant_style
from dyescript.store import Store


def _box_store() -> Store:
    store = Store()
    store.add_style([".box"], "color", "red")
    return store


def _fade_store() -> Store:
    store = Store()
    store.add_keyframe("fade", "from", "opacity", "0")
    store.add_keyframe("fade", "to", "opacity", "1")
    return store


# ---------------------------------------------------------------------------
# Dominant value
# ---------------------------------------------------------------------------


class TestDominantStyle:
    def test_single(self):
        assert get_dominant_style(["red"]) == "red"

    def test_last_write_wins(self):
        assert get_dominant_style(["#f00", "rgb(255 0 0)"]) == "rgb(255 0 0)"

    def test_important_wins(self):
        assert get_dominant_style(["red !important", "blue"]) == "red !important"

    def test_last_important_wins(self):
        assert get_dominant_style(["red!important", "blue!important", "green"]) == "blue!important"

    def test_empty(self):
        with pytest.raises(ValueError):
            get_dominant_style([])


# ---------------------------------------------------------------------------
# Base builder
# ---------------------------------------------------------------------------


class TestCSSBuilder:
    def test_empty_store(self):
        assert CSSBuilder().build(Store()) == ""

    def test_style_rule(self):
        assert CSSBuilder().build(_box_store()) == ".box{color:red;}"

    def test_property_rendered_kebab_case(self):
        store = Store()
        store.add_style(["body"], "backgroundColor", "white")
        store.add_style(["body"], "WebkitTransition", "none")
        assert CSSBuilder().build(store) == "body{background-color:white;-webkit-transition:none;}"

    def test_dominant_value_rendered(self):
        store = Store()
        store.add_style([".a"], "color", "red")
        store.add_style([".a"], "color", "blue")
        assert CSSBuilder().build(store) == ".a{color:blue;}"

    def test_keyframes(self):
        assert CSSBuilder().build(_fade_store()) == "@keyframes fade{from{opacity:0;}to{opacity:1;}}"

    def test_motions_wrapped_once(self):
        store = Store()
        store.add_motion("spin", "to", "transform", "none")
        store.add_motion("pulse", "50%", "opacity", "1")
        assert CSSBuilder().build(store) == (
            "@media (prefers-reduced-motion){"
            "@keyframes spin{to{transform:none;}}"
            "@keyframes pulse{50%{opacity:1;}}"
            "}"
        )

    def test_font_face(self):
        store = Store()
        store.add_font("Inter", "/fonts/inter.woff2")
        assert CSSBuilder().build(store) == "@font-face{font-family:Inter;src:url(/fonts/inter.woff2)}"

    def test_font_descriptors(self):
        store = Store()
        store.add_font("Inter", "a.woff2")
        store.add_font_descriptor("Inter", "fontWeight", "700")
        assert CSSBuilder().build(store) == "@font-face{font-family:Inter;src:url(a.woff2);font-weight:700}"

    def test_font_without_source_skipped(self):
        store = Store()
        store.add_font_descriptor("Ghost", "fontWeight", "400")
        assert CSSBuilder().build(store) == ""

    def test_section_order(self):
        store = _fade_store()
        store.add_font("Inter", "a.woff2")
        store.add_motion("spin", "to", "transform", "none")
        store.add_style([".box"], "color", "red")
        css = CSSBuilder().build(store)
        positions = [css.index(s) for s in (".box{", "@keyframes fade", "@media", "@font-face")]
        assert positions == sorted(positions)

    def test_builder_is_reusable(self):
        builder = CSSBuilder()
        assert builder.build(_box_store()) == builder.build(_box_store())


# ---------------------------------------------------------------------------
# Minified builder
# ---------------------------------------------------------------------------


class TestMinCSSBuilder:
    def test_empty_store(self):
        assert MinCSSBuilder().build(Store()) == ""

    def test_style_rule(self):
        assert MinCSSBuilder().build(_box_store()) == ".box{color:red}"

    def test_keyframes(self):
        assert MinCSSBuilder().build(_fade_store()) == "@keyframes fade{from{opacity:0}to{opacity:1}}"

    def test_no_semicolon_before_brace(self):
        store = _fade_store()
        store.add_style([".a", ".b"], "margin", "0")
        store.add_style([".a"], "color", "red")
        store.add_motion("spin", "to", "transform", "none")
        assert ";}" not in MinCSSBuilder().build(store)

    def test_matches_base_output_without_semicolons(self):
        store = Store()
        store.add_style([".a", ".b"], "margin", "0")
        store.add_style([".a"], "color", "red")
        store.add_font("Inter", "a.woff2")
        base = CSSBuilder().build(store)
        assert not re.search(r"\s", base)
        assert base.replace(";}", "}") == MinCSSBuilder().build(store)

    def test_whitespace_insensitive_match(self):
        store = _fade_store()
        store.add_style([".a"], "border", "1px solid red")
        store.add_motion("spin", "to", "transform", "none")
        base = re.sub(r"\s+", "", CSSBuilder().build(store)).replace(";}", "}")
        assert base == re.sub(r"\s+", "", MinCSSBuilder().build(store))

    def test_required_spaces_survive(self):
        store = _fade_store()
        store.add_style([".a"], "border", "1px solid red")
        store.add_motion("spin", "to", "transform", "none")
        css = MinCSSBuilder().build(store)
        assert "@keyframes fade{" in css
        assert "border:1px solid red}" in css
        assert css.endswith("@media (prefers-reduced-motion){@keyframes spin{to{transform:none}}}")
