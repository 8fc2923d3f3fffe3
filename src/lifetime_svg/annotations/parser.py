"""Parser for lifetime annotation comments.

An annotation is a trailing ``// `` comment made of a run of dashes and a
direction glyph::

    let r;         // -------\\ Lifetime of `r`
                   // -------/

A backslash opens a lifetime and a slash closes it. The number of dashes
(the width) pairs an opening annotation with its closing one, so lifetimes
of different widths may overlap freely while two lifetimes of the same
width may never be open at the same time.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lifetime_svg.formatting.ir import AnnotatedSource, Lifetime


class AnnotationErrorKind(str, Enum):
    """Kinds of malformed annotation input."""

    SPAN_CONFLICT = "span_conflict"
    UNMATCHED_CLOSE = "unmatched_close"
    UNTERMINATED_SPAN = "unterminated_span"


class AnnotationError(Exception):
    """Malformed annotations; no diagram can be produced for the input.

    Attributes:
        kind: Which rule the input broke
        width: Width of the offending annotation
        row: Zero-based row of the offending annotation
    """

    kind: AnnotationErrorKind

    def __init__(self, message: str, width: int, row: int) -> None:
        super().__init__(message)
        self.width = width
        self.row = row


class SpanConflictError(AnnotationError):
    """A lifetime was opened while one of the same width was still open."""

    kind = AnnotationErrorKind.SPAN_CONFLICT

    def __init__(self, width: int, open_row: int, row: int) -> None:
        super().__init__(
            f"Lifetime of width {width} opened on line {open_row} is opened "
            f"again on line {row} before it was closed",
            width,
            row,
        )
        self.open_row = open_row


class UnmatchedCloseError(AnnotationError):
    """A lifetime was closed without a matching opening annotation."""

    kind = AnnotationErrorKind.UNMATCHED_CLOSE

    def __init__(self, width: int, row: int) -> None:
        super().__init__(
            f"Lifetime of width {width} closed on line {row} was never opened",
            width,
            row,
        )


class UnterminatedSpanError(AnnotationError):
    """A lifetime was still open when the input ended."""

    kind = AnnotationErrorKind.UNTERMINATED_SPAN

    def __init__(self, width: int, row: int) -> None:
        super().__init__(
            f"Lifetime of width {width} opened on line {row} is never closed",
            width,
            row,
        )


@dataclass
class _OpenLifetime:
    starting_line: int
    comment: str


def split_lines(text: str) -> list[str]:
    """Split text into rows on ``\\n`` or ``\\r\\n``.

    A single trailing newline does not produce an extra empty row.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class AnnotationParser:
    """Find lifetime annotations and strip them from the code."""

    # Groups: code prefix, dash run, direction glyph, label
    ANNOTATION_PATTERN = re.compile(r"^(.*)// (-+)([/\\]) ?(.*)$")

    OPEN_GLYPH = "\\"
    CLOSE_GLYPH = "/"

    def __init__(
        self,
        pattern: Optional[re.Pattern[str]] = None,
        allow_unterminated: bool = False,
    ) -> None:
        """Initialize the parser.

        Args:
            pattern: Compiled annotation grammar with the same four groups
                as ANNOTATION_PATTERN (defaults to ANNOTATION_PATTERN)
            allow_unterminated: Silently drop lifetimes that are never
                closed instead of raising UnterminatedSpanError
        """
        self.pattern = pattern or self.ANNOTATION_PATTERN
        self.allow_unterminated = allow_unterminated

    def parse(self, text: str) -> AnnotatedSource:
        """Parse a complete document.

        Args:
            text: The annotated source text

        Returns:
            AnnotatedSource with cleaned lines and resolved lifetimes

        Raises:
            AnnotationError: If the annotations do not pair up
        """
        lines = split_lines(text)
        lifetimes = self.find_lifetimes(lines)
        return AnnotatedSource(lines=lines, lifetimes=lifetimes)

    def find_lifetimes(self, lines: list[str]) -> list[Lifetime]:
        """Resolve lifetimes and remove annotations from ``lines`` in place.

        Lines without an annotation are left untouched. Lifetimes are
        returned in the order they were closed.

        Raises:
            SpanConflictError: If a width is opened twice without closing
            UnmatchedCloseError: If a width is closed without being open
            UnterminatedSpanError: If a width is still open at the end and
                allow_unterminated is False
        """
        open_lifetimes: dict[int, _OpenLifetime] = {}
        lifetimes: list[Lifetime] = []

        for row, line in enumerate(lines):
            match = self.pattern.match(line)
            if match is None:
                continue

            code, dashes, glyph, comment = match.groups()
            width = len(dashes)

            if glyph == self.OPEN_GLYPH:
                if width in open_lifetimes:
                    raise SpanConflictError(
                        width, open_lifetimes[width].starting_line, row
                    )
                open_lifetimes[width] = _OpenLifetime(row, comment)
            else:
                if width not in open_lifetimes:
                    raise UnmatchedCloseError(width, row)
                opened = open_lifetimes.pop(width)
                lifetimes.append(
                    Lifetime(
                        starting_line=opened.starting_line,
                        ending_line=row,
                        comment=opened.comment,
                    )
                )

            lines[row] = code

        if open_lifetimes and not self.allow_unterminated:
            width, opened = min(
                open_lifetimes.items(), key=lambda item: item[1].starting_line
            )
            raise UnterminatedSpanError(width, opened.starting_line)

        return lifetimes
