"""Command line entrypoint for ReTree."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from ReTree.outline_parser import OutlineFormatError
from ReTree.tree_builder import render

app = typer.Typer(add_completion=False, help="Render an indented outline as an ASCII tree")
logger = logging.getLogger(__name__)


@app.command()
def main(
    source: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="UTF-8 text file holding the outline. Reads stdin when omitted.",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Print the tree for an outline of '- ' entries indented by 4 spaces."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if source is None:
        outline = sys.stdin.read()
    else:
        outline = source.read_text(encoding="utf-8")

    if not outline.strip():
        raise typer.BadParameter("The outline is empty.")

    try:
        tree = render(outline)
    except OutlineFormatError as exc:
        logger.debug("rejected lines: %s", exc.result.error_lines if exc.result else [])
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    typer.echo(tree)


if __name__ == "__main__":
    app()
