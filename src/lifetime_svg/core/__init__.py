"""Core pipeline for Lifetime SVG."""

from lifetime_svg.core.pipeline import (
    LifetimeDiagrammer,
    Diagram,
    DiagramError,
    SourceReadError,
)

__all__ = [
    "LifetimeDiagrammer",
    "Diagram",
    "DiagramError",
    "SourceReadError",
]
