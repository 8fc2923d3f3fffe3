"""Data model and label markup parsing."""

from lifetime_svg.formatting.ir import (
    TextStyle,
    TextRun,
    TextBlock,
    Lifetime,
    AnnotatedSource,
    STYLE_CLASSES,
)
from lifetime_svg.formatting.markup import MarkupParser

__all__ = [
    "TextStyle",
    "TextRun",
    "TextBlock",
    "Lifetime",
    "AnnotatedSource",
    "STYLE_CLASSES",
    "MarkupParser",
]
