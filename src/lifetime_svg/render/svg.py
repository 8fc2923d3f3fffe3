"""SVG renderer for annotated code."""

import re
import xml.etree.ElementTree as ET
from typing import Optional

from lifetime_svg.formatting.ir import AnnotatedSource, Lifetime, TextBlock, TextStyle
from lifetime_svg.formatting.markup import MarkupParser
from lifetime_svg.render.layout import Layout, bracket_for, format_number

SVG_NS = "http://www.w3.org/2000/svg"
ET.register_namespace("", SVG_NS)

STYLESHEET = """
.code {{
	font-family: monospace;
	font-size: {font_size};
	white-space: pre;
	tab-size: 4;
}}

.annotation {{
	font-size: {font_size};
}}

.m_code {{
	font-family: monospace;
}}

.m_italic {{
	font-style: italic;
}}

.m_underline {{
	text-decoration: underline;
}}

.m_bold {{
	font-weight: bold;
}}

.line {{
	fill: none;
	stroke: black;
	stroke-width: 2;
	stroke-linecap: round;
	stroke-linejoin: round;
}}
"""


def _q(tag: str) -> str:
    return f"{{{SVG_NS}}}{tag}"


# Characters XML 1.0 does not allow in character data
XML_INVALID_CHARS = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff\ud800-\udfff]"
)


def xml_safe(text: str) -> str:
    """Replace characters that cannot appear in an XML document with U+FFFD."""
    return XML_INVALID_CHARS.sub("\ufffd", text)


class SvgRenderer:
    """Render cleaned code lines and their lifetimes as an SVG document.

    The document holds, in order: a stylesheet, one ``<text class="code">``
    per code row (blank rows included so copied text keeps its line breaks),
    then a label ``<text class="annotation">`` and a bracket
    ``<path class="line">`` for each lifetime.
    """

    def __init__(
        self,
        layout: Optional[Layout] = None,
        markup_parser: Optional[MarkupParser] = None,
    ) -> None:
        self.layout = layout or Layout()
        self.markup_parser = markup_parser or MarkupParser()

    def render(self, lines: list[str], lifetimes: list[Lifetime]) -> str:
        """Render to a serialized SVG document."""
        return ET.tostring(self.build(lines, lifetimes), encoding="unicode")

    def render_source(self, source: AnnotatedSource) -> str:
        """Render a parsed AnnotatedSource."""
        return self.render(source.lines, source.lifetimes)

    def build(self, lines: list[str], lifetimes: list[Lifetime]) -> ET.Element:
        """Build the SVG element tree.

        Args:
            lines: Code rows with annotations already removed
            lifetimes: Lifetimes in the order the parser closed them

        Returns:
            The root ``<svg>`` element
        """
        root = ET.Element(_q("svg"), {"version": "1.1"})

        defs = ET.SubElement(root, _q("defs"))
        style = ET.SubElement(defs, _q("style"), {"type": "text/css"})
        style.text = STYLESHEET.format(font_size=self.layout.font_size)

        for row, line in enumerate(lines):
            text = ET.SubElement(
                root,
                _q("text"),
                {
                    "x": "0",
                    "y": format_number(self.layout.code_row_y(row)),
                    "class": "code",
                },
            )
            text.text = xml_safe(line)

        # Position in this list decides how far right each label sits
        for index, lifetime in enumerate(lifetimes):
            geometry = bracket_for(lifetime, index, self.layout)

            label = ET.SubElement(
                root,
                _q("text"),
                {
                    "x": format_number(geometry.label_x),
                    "y": format_number(geometry.label_y),
                    "class": "annotation",
                },
            )
            self._fill_label(label, self.markup_parser.parse(lifetime.comment))

            ET.SubElement(
                root,
                _q("path"),
                {"class": "line", "d": geometry.path_data},
            )

        return root

    def _fill_label(self, element: ET.Element, block: TextBlock) -> None:
        """Add label runs to a ``<text>`` element as text and ``<tspan>``s."""
        last: Optional[ET.Element] = None

        for run in block.runs:
            if run.style == TextStyle.NONE:
                if last is None:
                    element.text = (element.text or "") + xml_safe(run.text)
                else:
                    last.tail = (last.tail or "") + xml_safe(run.text)
                continue

            last = ET.SubElement(
                element, _q("tspan"), {"class": " ".join(run.css_classes)}
            )
            last.text = xml_safe(run.text)
