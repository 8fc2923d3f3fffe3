"""Tests for the diagram pipeline."""

import pytest
from pathlib import Path

from lifetime_svg.annotations.parser import SpanConflictError, UnterminatedSpanError
from lifetime_svg.core.pipeline import (
    DiagramError,
    LifetimeDiagrammer,
    SourceReadError,
)
from lifetime_svg.render.layout import Layout


class TestLifetimeDiagrammer:
    """Tests for the LifetimeDiagrammer class."""

    def test_diagram_text(self, annotated_text: str):
        """Test converting annotated text to SVG."""
        diagram = LifetimeDiagrammer().diagram_text(annotated_text)

        assert diagram.svg.startswith("<svg")
        assert diagram.svg.count('class="line"') == 2
        assert "-------" not in diagram.svg
        assert len(diagram.source.lifetimes) == 2
        assert len(diagram.source.lines) == 5

    def test_diagram_text_writes_output(self, annotated_text: str, tmp_path: Path):
        """Test writing the SVG for text read elsewhere (e.g. stdin)."""
        output = tmp_path / "stdin.svg"

        diagram = LifetimeDiagrammer().diagram_text(annotated_text, output)

        assert output.read_text(encoding="utf-8") == diagram.svg + "\n"

    def test_diagram_file_writes_output(self, tmp_source_file: Path, tmp_path: Path):
        """Test writing the SVG next to the source."""
        output = tmp_path / "snippet.svg"

        diagram = LifetimeDiagrammer().diagram_file(tmp_source_file, output)

        assert output.exists()
        assert output.read_text(encoding="utf-8") == diagram.svg + "\n"

    def test_diagram_file_without_output(self, tmp_source_file: Path):
        """Test rendering without writing a file."""
        diagram = LifetimeDiagrammer().diagram_file(tmp_source_file)

        assert "<path" in diagram.svg

    def test_unwritable_output(self, tmp_source_file: Path, tmp_path: Path):
        """Test that write failures become DiagramErrors."""
        output = tmp_path / "no-such-dir" / "snippet.svg"

        with pytest.raises(DiagramError, match="Could not write"):
            LifetimeDiagrammer().diagram_file(tmp_source_file, output)

    def test_missing_file(self, tmp_path: Path):
        """Test error when the input does not exist."""
        with pytest.raises(SourceReadError, match="not found"):
            LifetimeDiagrammer().diagram_file(tmp_path / "missing.rs")

    def test_invalid_utf8(self, tmp_path: Path):
        """Test error when the input is not UTF-8."""
        source = tmp_path / "latin1.rs"
        source.write_bytes(b"let caf\xe9 = 1;\n")

        with pytest.raises(SourceReadError, match="UTF-8"):
            LifetimeDiagrammer().diagram_file(source)

    def test_invalid_utf8_bytes(self):
        """Test decoding raw input such as stdin."""
        with pytest.raises(SourceReadError, match="<stdin>"):
            LifetimeDiagrammer().decode_source(b"\xff\xfe")

    def test_read_error_is_diagram_error(self, tmp_path: Path):
        """Test that read failures are DiagramErrors."""
        with pytest.raises(DiagramError):
            LifetimeDiagrammer().read_source(tmp_path / "missing.rs")

    def test_conflict_writes_nothing(self, tmp_path: Path):
        """Test that malformed annotations produce no output file."""
        source = tmp_path / "bad.rs"
        source.write_text("a // ---\\ one\nb // ---\\ two\n", encoding="utf-8")
        output = tmp_path / "bad.svg"

        with pytest.raises(SpanConflictError):
            LifetimeDiagrammer().diagram_file(source, output)

        assert not output.exists()

    def test_strict_by_default(self):
        """Test that unclosed lifetimes fail unless lenient."""
        with pytest.raises(UnterminatedSpanError):
            LifetimeDiagrammer().diagram_text("a // -\\ open\n")

    def test_lenient(self):
        """Test that lenient mode drops unclosed lifetimes."""
        diagram = LifetimeDiagrammer(lenient=True).diagram_text("a // -\\ open\n")

        assert "<path" not in diagram.svg
        assert diagram.source.lifetimes == []

    def test_lenient_from_settings(self, monkeypatch: pytest.MonkeyPatch):
        """Test that lenient mode can be enabled from the environment."""
        monkeypatch.setenv("LIFETIME_SVG_LENIENT", "true")

        diagrammer = LifetimeDiagrammer()

        assert diagrammer.lenient is True
        assert diagrammer.parser.allow_unterminated is True

    def test_layout_from_settings(self, monkeypatch: pytest.MonkeyPatch):
        """Test that layout settings reach the renderer."""
        monkeypatch.setenv("LIFETIME_SVG_ROW_HEIGHT", "40")

        diagrammer = LifetimeDiagrammer()

        assert diagrammer.renderer.layout.row_height == 40

    def test_explicit_layout(self):
        """Test passing a layout directly."""
        layout = Layout(gutter_x=100)

        diagrammer = LifetimeDiagrammer(layout=layout)

        assert diagrammer.renderer.layout is layout

    def test_parse(self, nested_block_text: str):
        """Test the parse step on its own."""
        source = LifetimeDiagrammer().parse(nested_block_text)

        assert len(source.lines) == 11
        assert [lt.comment for lt in source.lifetimes] == [
            "Lifetime of `x`",
            "Lifetime of `r`",
        ]
        outer = source.lifetimes[1]
        assert (outer.starting_line, outer.ending_line) == (1, 9)
