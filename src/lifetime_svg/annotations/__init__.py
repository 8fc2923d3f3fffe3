"""Lifetime annotation parsing."""

from lifetime_svg.annotations.parser import (
    AnnotationParser,
    AnnotationError,
    AnnotationErrorKind,
    SpanConflictError,
    UnmatchedCloseError,
    UnterminatedSpanError,
    split_lines,
)

__all__ = [
    "AnnotationParser",
    "AnnotationError",
    "AnnotationErrorKind",
    "SpanConflictError",
    "UnmatchedCloseError",
    "UnterminatedSpanError",
    "split_lines",
]
