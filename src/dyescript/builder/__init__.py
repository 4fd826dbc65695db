from dyescript.builder.css import CSSBuilder, get_dominant_style
from dyescript.builder.minified import MinCSSBuilder

__all__ = ["CSSBuilder", "MinCSSBuilder", "get_dominant_style"]
