#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                          # Rich terminal, 3×3
    python main.py -f pygame --image cat.png
    python main.py --rows 4 --cols 5 --shuffle-moves 500 --seed 7
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidepuzzle.config import (  # noqa: E402
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_SHUFFLE_MOVES,
    PuzzleConfig,
)
from slidepuzzle.errors import PuzzleError  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "slideview.cli.rich.app",
    Frontend.pygame: "slideview.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    rows: int = typer.Option(DEFAULT_ROWS, "-r", "--rows", help="Grid rows."),
    cols: int = typer.Option(DEFAULT_COLS, "-c", "--cols", help="Grid columns."),
    shuffle_moves: int = typer.Option(
        DEFAULT_SHUFFLE_MOVES, "-m", "--shuffle-moves",
        help="Random-walk length used to scramble (10-1000 recommended).",
    ),
    image: Optional[Path] = typer.Option(
        None, "-i", "--image",
        help="Source image sliced into tiles (pygame only).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible shuffle.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log moves and lifecycle events.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _configure_logging(verbose)

    config = PuzzleConfig(
        rows=rows,
        cols=cols,
        shuffle_moves=shuffle_moves,
        image=image,
        seed=seed,
    )
    try:
        config.validate()
        mod = importlib.import_module(_RUNNERS[frontend])
        mod.run(config)
    except PuzzleError as exc:
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
