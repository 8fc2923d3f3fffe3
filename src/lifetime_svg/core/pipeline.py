"""Main pipeline: annotated text in, SVG document out."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from lifetime_svg.annotations.parser import AnnotationParser
from lifetime_svg.config import get_settings
from lifetime_svg.formatting.ir import AnnotatedSource
from lifetime_svg.render.layout import Layout
from lifetime_svg.render.svg import SvgRenderer


class DiagramError(Exception):
    """Error while producing a diagram."""

    pass


class SourceReadError(DiagramError):
    """The input could not be read or is not valid UTF-8."""

    pass


@dataclass
class Diagram:
    """A rendered document together with the source it was drawn from."""

    source: AnnotatedSource
    svg: str


class LifetimeDiagrammer:
    """Orchestrates the diagram pipeline.

    Pipeline:
    1. Read the whole input
    2. Split into lines and strip lifetime annotations
    3. Render code rows and lifetime brackets to SVG
    4. Write the document (or hand it back to the caller)

    Annotation errors propagate before anything is rendered, so callers get
    either a complete document or an exception.
    """

    def __init__(
        self,
        layout: Optional[Layout] = None,
        lenient: Optional[bool] = None,
    ) -> None:
        """Initialize the diagrammer.

        Args:
            layout: Layout constants (default: from settings)
            lenient: Drop never-closed lifetimes instead of failing
                (default: from settings)
        """
        settings = get_settings()
        self.layout = layout or Layout.from_settings(settings)
        self.lenient = settings.lenient if lenient is None else lenient

        self.parser = AnnotationParser(allow_unterminated=self.lenient)
        self.renderer = SvgRenderer(layout=self.layout)

    def parse(self, text: str) -> AnnotatedSource:
        """Strip annotations from text and resolve lifetimes."""
        return self.parser.parse(text)

    def read_source(self, path: Path) -> str:
        """Read an input file as UTF-8.

        Raises:
            SourceReadError: If the file is missing, unreadable or not UTF-8
        """
        if not path.exists():
            raise SourceReadError(f"Input file not found: {path}")
        try:
            data = path.read_bytes()
        except OSError as e:
            raise SourceReadError(f"Could not read {path}: {e}") from e
        return self.decode_source(data, str(path))

    def decode_source(self, data: bytes, name: str = "<stdin>") -> str:
        """Decode raw input bytes as UTF-8.

        Raises:
            SourceReadError: If the data is not valid UTF-8
        """
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SourceReadError(f"{name} is not valid UTF-8: {e}") from e

    def diagram_text(
        self,
        text: str,
        output_path: Optional[Path] = None,
    ) -> Diagram:
        """Convert annotated text, optionally writing the SVG to a file.

        Args:
            text: The annotated source text
            output_path: Optional path to write the SVG to

        Returns:
            Diagram with the parsed source and the SVG document

        Raises:
            AnnotationError: If the annotations do not pair up
            DiagramError: If the output cannot be written
        """
        source = self.parse(text)
        diagram = Diagram(source=source, svg=self.renderer.render_source(source))

        if output_path is not None:
            self.write_output(diagram.svg, output_path)

        return diagram

    def diagram_file(
        self,
        input_path: Path,
        output_path: Optional[Path] = None,
    ) -> Diagram:
        """Convert an annotated file, optionally writing the SVG to a file.

        Raises:
            SourceReadError: If the input cannot be read
            AnnotationError: If the annotations do not pair up
            DiagramError: If the output cannot be written
        """
        return self.diagram_text(self.read_source(input_path), output_path)

    def write_output(self, svg: str, path: Path) -> None:
        """Write an SVG document as UTF-8 with a trailing newline.

        Raises:
            DiagramError: If the file cannot be written
        """
        try:
            path.write_text(svg + "\n", encoding="utf-8")
        except OSError as e:
            raise DiagramError(f"Could not write {path}: {e}") from e
