"""Command-line interface for Lifetime SVG."""

import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from lifetime_svg import __version__
from lifetime_svg.annotations.parser import AnnotationError
from lifetime_svg.config import get_settings
from lifetime_svg.core.pipeline import Diagram, DiagramError, LifetimeDiagrammer

app = typer.Typer(
    name="lifetime-svg",
    help="Convert lifetime-annotated code snippets into SVG bracket diagrams.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

STDIN_PATH = "-"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"lifetime-svg v{__version__}")
        raise typer.Exit()


def print_error(message: str) -> None:
    """Print a single ``Error:`` line."""
    message = " ".join(part.strip() for part in message.splitlines())
    console.print(
        f"[red]Error:[/red] {escape(message)}", soft_wrap=True, emoji=False
    )


def describe_settings_error(error: ValidationError) -> str:
    """Summarize invalid settings on one line."""
    problems = [
        f"{'.'.join(str(loc) for loc in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    ]
    return f"Invalid settings: {'; '.join(problems)}"


def run_diagram(
    diagrammer: LifetimeDiagrammer,
    path: Optional[Path],
    output: Optional[Path],
) -> Diagram:
    """Render a file, or stdin for None / ``-``, writing ``output`` if given."""
    if path is None or str(path) == STDIN_PATH:
        text = diagrammer.decode_source(sys.stdin.buffer.read())
        return diagrammer.diagram_text(text, output)
    return diagrammer.diagram_file(path, output)


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Annotated source file (default: read standard input)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the SVG to this file instead of standard output",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Drop lifetimes that are opened but never closed instead of failing",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render code annotated with // -\\ and // -/ comments as an SVG diagram.

    Examples:

        lifetime-svg snippet.rs > snippet.svg

        lifetime-svg snippet.rs -o snippet.svg

        cat snippet.rs | lifetime-svg --lenient
    """
    try:
        settings = get_settings()
        diagrammer = LifetimeDiagrammer(lenient=lenient or settings.lenient)

        if verbose:
            err_console.print(
                f"[blue]Input:[/blue] {escape(str(path or '<stdin>'))}",
                soft_wrap=True,
            )
            err_console.print(
                f"[blue]Output:[/blue] {escape(str(output or '<stdout>'))}",
                soft_wrap=True,
            )
            if diagrammer.lenient:
                err_console.print(
                    "[blue]Lenient:[/blue] Unclosed lifetimes are dropped"
                )

        diagram = run_diagram(diagrammer, path, output)
    except ValidationError as e:
        print_error(describe_settings_error(e))
        raise typer.Exit(1)
    except (AnnotationError, DiagramError) as e:
        print_error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        print_error(str(e))
        if verbose:
            err_console.print_exception()
        raise typer.Exit(1)

    if verbose:
        err_console.print(
            f"[blue]Found:[/blue] {len(diagram.source.lifetimes)} lifetime(s) "
            f"in {len(diagram.source.lines)} line(s)"
        )

    if output is None:
        typer.echo(diagram.svg)
    else:
        err_console.print(
            f"[green]Success:[/green] {escape(str(output))}", soft_wrap=True
        )


if __name__ == "__main__":
    app()
