"""Geometry of code rows and lifetime brackets.

Every code row is ``row_height`` units tall. Brackets start and end at the
gutter column, reach right to a label point that moves further right for
each lifetime, and carry the label just beside that point::

    (x_start, y_start) ──┐
                         ├──── (x_mid, y_mid)  label
                         │
    (x_end, y_end)   ────┘
"""

from dataclasses import dataclass
from typing import Optional, Union

from lifetime_svg.config import Settings, get_settings
from lifetime_svg.formatting.ir import Lifetime

Number = Union[int, float]
Point = tuple[Number, Number]


def _half(value: Number) -> Number:
    """Halve a value, keeping integers integral when possible."""
    if isinstance(value, int) and value % 2 == 0:
        return value // 2
    return value / 2


@dataclass(frozen=True)
class Layout:
    """Layout constants in SVG user units.

    Attributes:
        row_height: Height of one code row
        gutter_x: Column where brackets start and end
        bracket_reach: Distance from the gutter to the first label point
        fan_out: Extra reach per lifetime, by position in the lifetime list
        label_dx: Horizontal offset of a label from its label point
        label_dy: Vertical offset of a label from the bracket start
        font_size: Font size for code and labels
    """

    row_height: int = 20
    gutter_x: int = 150
    bracket_reach: int = 230
    fan_out: int = 20
    label_dx: int = 10
    label_dy: int = 15
    font_size: int = 16

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Layout":
        """Build a layout from application settings."""
        settings = settings or get_settings()
        return cls(
            row_height=settings.row_height,
            gutter_x=settings.gutter_x,
            bracket_reach=settings.bracket_reach,
            fan_out=settings.fan_out,
            label_dx=settings.label_dx,
            label_dy=settings.label_dy,
            font_size=settings.font_size,
        )

    def code_row_y(self, row: int) -> int:
        """Baseline of the code text on ``row``."""
        return row * self.row_height + self.row_height


@dataclass(frozen=True)
class BracketGeometry:
    """Coordinates of one lifetime bracket and its label."""

    x_start: Number
    y_start: Number
    x_mid: Number
    y_mid: Number
    x_end: Number
    y_end: Number
    label_x: Number
    label_y: Number

    @property
    def elbow_x(self) -> Number:
        """Column of the vertical bracket segments."""
        return _half(self.x_start + self.x_mid)

    @property
    def points(self) -> list[Point]:
        """Vertices of the bracket polyline, in drawing order."""
        elbow = self.elbow_x
        return [
            (self.x_start, self.y_start),
            (elbow, self.y_start),
            (elbow, self.y_mid),
            (self.x_mid, self.y_mid),
            (elbow, self.y_mid),
            (elbow, self.y_end),
            (self.x_end, self.y_end),
        ]

    @property
    def path_data(self) -> str:
        """SVG path data for the bracket (an open polyline)."""
        commands = []
        for i, (x, y) in enumerate(self.points):
            command = "M" if i == 0 else "L"
            commands.append(f"{command}{format_number(x)},{format_number(y)}")
        return " ".join(commands)


def format_number(value: Number) -> str:
    """Format a coordinate without a redundant ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def bracket_for(lifetime: Lifetime, index: int, layout: Layout) -> BracketGeometry:
    """Compute the bracket for a lifetime.

    Args:
        lifetime: The lifetime to draw
        index: Position of the lifetime in the parser's output list
        layout: Layout constants

    Returns:
        BracketGeometry for the lifetime
    """
    height = layout.row_height
    y_start = lifetime.starting_line * height + _half(height)
    y_mid = (lifetime.starting_line + 1) * height
    y_end = lifetime.ending_line * height + height + _half(height)
    x_mid = layout.gutter_x + layout.bracket_reach + layout.fan_out * index

    return BracketGeometry(
        x_start=layout.gutter_x,
        y_start=y_start,
        x_mid=x_mid,
        y_mid=y_mid,
        x_end=layout.gutter_x,
        y_end=y_end,
        label_x=x_mid + layout.label_dx,
        label_y=y_start + layout.label_dy,
    )
