"""Pytest fixtures for Lifetime SVG tests."""

import pytest
from pathlib import Path

from lifetime_svg import config


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Make every test build its own settings from the environment."""
    monkeypatch.setattr(config, "_settings", None)
    yield
    monkeypatch.setattr(config, "_settings", None)


@pytest.fixture
def annotated_text() -> str:
    """Two overlapping lifetimes; the inner one closes first."""
    return (
        "let r;         // -------\\ Lifetime of `r`\n"
        "let x = 5; // -\\ Lifetime of `b`\n"
        "r = &x;\n"
        "               // -/\n"
        "               // -------/\n"
    )


@pytest.fixture
def annotated_lines(annotated_text: str) -> list[str]:
    """The annotated text as a line buffer."""
    return annotated_text.splitlines()


@pytest.fixture
def nested_block_text() -> str:
    """A fuller snippet with blank rows and braces."""
    return (
        "{\n"
        "    let r;         // -------\\ Lifetime of `r`\n"
        "\n"
        "    {\n"
        "        let x = 5; // -\\ Lifetime of `x`\n"
        "        r = &x;\n"
        "    }              // -/\n"
        "\n"
        "    println!(\"r: {}\", r);\n"
        "                   // -------/\n"
        "}\n"
    )


@pytest.fixture
def tmp_source_file(tmp_path: Path, annotated_text: str) -> Path:
    """Create a temporary annotated source file."""
    file_path = tmp_path / "snippet.rs"
    file_path.write_text(annotated_text, encoding="utf-8")
    return file_path
