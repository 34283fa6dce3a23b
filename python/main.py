#!/usr/bin/env python3
"""Color Slide Puzzle.

Usage::

    python main.py board --seed 7           # show a generated 5×5 board
    python main.py assignment               # show a 3×3 target layout
    python main.py replay 19 23 --seed 7    # apply moves by tile id
    python main.py -v board                 # with debug logging
"""

import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gameplay import IllegalMoveError, MoveEngine  # noqa: E402
from frontend.cli.rich import app as view  # noqa: E402

logger = logging.getLogger("colorslide")


# -- helpers ------------------------------------------------------------------


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=view.err_console, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)

_SEED = typer.Option(
    None, "-s", "--seed",
    help="Seed for the random generator (omit for a fresh board).",
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity at debug level.",
    ),
) -> None:
    """Color Slide Puzzle."""
    _setup_logging(verbose)


@app.command()
def board(seed: Optional[int] = _SEED) -> None:
    """Generate and show a 5×5 board."""
    view.show_board(GameGenerator.generate_board(_rng(seed)))


@app.command()
def assignment(seed: Optional[int] = _SEED) -> None:
    """Generate and show a 3×3 target assignment."""
    view.show_assignment(GameGenerator.generate_assignment(_rng(seed)))


@app.command()
def replay(
    moves: List[int] = typer.Argument(..., help="Tile ids to move, in order."),
    seed: Optional[int] = _SEED,
) -> None:
    """Generate a board, then slide the given tiles one after another."""
    current = GameGenerator.generate_board(_rng(seed))
    view.show_board(current, title="Start")

    for step, tile_id in enumerate(moves, 1):
        try:
            current = MoveEngine.apply_move(current, tile_id)
        except IllegalMoveError as exc:
            view.show_error(f"move {step}: {exc}")
            raise typer.Exit(code=1)
        view.show_move(step, tile_id, current)

    logger.debug("Replayed %d moves", len(moves))


if __name__ == "__main__":
    app()
