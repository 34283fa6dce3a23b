"""Generates the playable board and the smaller target assignment."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator.permutation import shuffled
from backend.models.board import Board, Color, Tile

logger = logging.getLogger(__name__)

BOARD_SIZE = 5
BOARD_COPIES = 4  # tiles per color on the main board
RESERVED_CORNER = (BOARD_SIZE - 1, BOARD_SIZE - 1)

ASSIGNMENT_SIZE = 3
ASSIGNMENT_COPIES = 2


class GameGenerator:
    """Builds fresh boards by scattering a fixed color pool over the grid.

    Only positions are randomised: colors are handed out in enumeration
    order to the shuffled coordinates.
    """

    @staticmethod
    def generate_board(rng: random.Random | None = None) -> Board:
        """Return a 5×5 board: 24 colored tiles plus the hole at (4, 4)."""
        colors = GameGenerator._color_pool(BOARD_COPIES)
        coords = [
            c for c in GameGenerator._coordinates(BOARD_SIZE)
            if c != RESERVED_CORNER
        ]
        tiles = GameGenerator._scatter(colors, coords, rng)
        cx, cy = RESERVED_CORNER
        tiles.append(Tile(id=len(tiles), x=cx, y=cy, color=Color.EMPTY))

        board = GameGenerator._row_major(BOARD_SIZE, tiles)
        logger.debug("Generated %d×%d board", BOARD_SIZE, BOARD_SIZE)
        return board

    @staticmethod
    def generate_assignment(rng: random.Random | None = None) -> Board:
        """Return a 3×3 target layout with no hole.

        The pool holds every color twice (12 tokens) but only the first
        nine are placed, so blue appears once and magenta never.
        """
        colors = GameGenerator._color_pool(ASSIGNMENT_COPIES)
        coords = GameGenerator._coordinates(ASSIGNMENT_SIZE)
        tiles = GameGenerator._scatter(colors, coords, rng)

        board = GameGenerator._row_major(ASSIGNMENT_SIZE, tiles)
        logger.debug(
            "Generated %d×%d assignment (%d of %d tokens used)",
            ASSIGNMENT_SIZE, ASSIGNMENT_SIZE, len(tiles), len(colors),
        )
        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _color_pool(copies: int) -> list[Color]:
        return [c for c in Color.playable() for _ in range(copies)]

    @staticmethod
    def _coordinates(size: int) -> list[tuple[int, int]]:
        return [(i % size, i // size) for i in range(size * size)]

    @staticmethod
    def _scatter(
        colors: list[Color],
        coords: list[tuple[int, int]],
        rng: random.Random | None,
    ) -> list[Tile]:
        # zip stops at the shorter list; surplus colors are dropped
        return [
            Tile(id=i, x=x, y=y, color=color)
            for i, ((x, y), color) in enumerate(zip(shuffled(coords, rng), colors))
        ]

    @staticmethod
    def _row_major(size: int, tiles: list[Tile]) -> Board:
        tiles.sort(key=lambda t: (t.y, t.x))
        return Board.from_tiles(size, size, tiles)
