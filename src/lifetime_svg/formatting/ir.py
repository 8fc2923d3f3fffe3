"""Intermediate Representation for annotated code and label text.

This module defines the data structures passed between the annotation
parser, the label markup parser and the SVG renderer.
"""

from dataclasses import dataclass, field
from enum import Flag, auto


class TextStyle(Flag):
    """Label styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    UNDERLINE = auto()
    ITALIC = auto()
    CODE = auto()


# CSS class per style, in the order they are listed on a <tspan>
STYLE_CLASSES: dict[TextStyle, str] = {
    TextStyle.BOLD: "m_bold",
    TextStyle.UNDERLINE: "m_underline",
    TextStyle.ITALIC: "m_italic",
    TextStyle.CODE: "m_code",
}


@dataclass
class TextRun:
    """A contiguous run of label text with one fixed set of styles.

    Attributes:
        text: The text content (markup already removed)
        style: Combined style flags active for the whole run
    """

    text: str
    style: TextStyle = TextStyle.NONE

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style

    @property
    def underline(self) -> bool:
        """Check if this run is underlined."""
        return TextStyle.UNDERLINE in self.style

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return TextStyle.ITALIC in self.style

    @property
    def code(self) -> bool:
        """Check if this run is set in the code font."""
        return TextStyle.CODE in self.style

    @property
    def css_classes(self) -> list[str]:
        """CSS class names for the active styles."""
        return [name for flag, name in STYLE_CLASSES.items() if flag in self.style]

    def __str__(self) -> str:
        return self.text


@dataclass
class TextBlock:
    """The styled runs of a single label, in left-to-right order."""

    runs: list[TextRun] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get the plain text content without styling."""
        return "".join(run.text for run in self.runs)

    def append(self, text: str, style: TextStyle = TextStyle.NONE) -> None:
        """Append text, extending the last run if it has the same style."""
        if not text:
            return
        if self.runs and self.runs[-1].style == style:
            self.runs[-1].text += text
        else:
            self.runs.append(TextRun(text=text, style=style))

    def __str__(self) -> str:
        return self.plain_text


@dataclass(frozen=True)
class Lifetime:
    """A resolved span between an opening and a closing annotation.

    Attributes:
        starting_line: Zero-based row of the opening annotation
        ending_line: Zero-based row of the closing annotation
        comment: Raw label text (still containing markup)
    """

    starting_line: int
    ending_line: int
    comment: str = ""


@dataclass
class AnnotatedSource:
    """Code lines with annotations stripped, plus the spans they described.

    Attributes:
        lines: Cleaned code rows, one per input line
        lifetimes: Spans in the order their closing annotation appeared
    """

    lines: list[str] = field(default_factory=list)
    lifetimes: list[Lifetime] = field(default_factory=list)
