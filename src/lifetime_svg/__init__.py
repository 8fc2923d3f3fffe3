"""Lifetime SVG - render lifetime-annotated code snippets as bracket diagrams."""

__version__ = "0.1.0"
