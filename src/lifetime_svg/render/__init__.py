"""SVG rendering of annotated code."""

from lifetime_svg.render.layout import Layout, BracketGeometry, bracket_for
from lifetime_svg.render.svg import SvgRenderer, STYLESHEET

__all__ = [
    "Layout",
    "BracketGeometry",
    "bracket_for",
    "SvgRenderer",
    "STYLESHEET",
]
