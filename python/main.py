#!/usr/bin/env python3
"""Bloxorz Solver.

Usage::

    python main.py level.txt                  # upright block at (0, 0)
    python main.py level.txt -x 1 -y 1 -o vertical
    python main.py level.txt --hint           # next move only
    python main.py level.txt -v               # log search statistics

A level file holds one row of tiles per line: ``.`` empty, ``#`` regular,
``!`` fragile, ``$`` goal.  Spaces between symbols are optional.
"""

import logging
import sys
from pathlib import Path

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gameplay import Game  # noqa: E402
from backend.models import Block, Orientation, Terrain  # noqa: E402
from frontend.cli.rich.app import console, run  # noqa: E402


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_terrain(path: Path) -> Terrain:
    try:
        return Terrain.from_text(path.read_text())
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="LEVEL") from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    level: Path = typer.Argument(
        ...,
        exists=True, dir_okay=False, readable=True,
        help="Level file, one row of tile symbols per line.",
    ),
    x: int = typer.Option(0, "-x", help="Start column of the block."),
    y: int = typer.Option(0, "-y", help="Start row of the block."),
    orientation: Orientation = typer.Option(
        Orientation.UPRIGHT, "-o", "--orientation",
        help="Start orientation of the block.",
    ),
    hint: bool = typer.Option(
        False, "--hint",
        help="Print only the next move of an optimal solution.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search statistics.",
    ),
) -> None:
    """Find the shortest solution to a Bloxorz level."""
    _configure_logging(verbose)

    terrain = _load_terrain(level)
    game = Game(terrain, Block((x, y), orientation))

    if not run(game, hint=hint):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
