"""Game session — owns the current board and forwards moves to the engine."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.moves import IllegalMoveError, MoveEngine
from backend.models.board import Board, Tile


class GamePlay:
    """Orchestrates a single game session.

    Checking the board against the assignment is left to the caller.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.board = GameGenerator.generate_board(rng)
        self.assignment = GameGenerator.generate_assignment(rng)

    @classmethod
    def from_board(
        cls, board: Board, assignment: Board | None = None
    ) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj._rng = None
        obj.board = board
        obj.assignment = assignment
        return obj

    # -- movement -------------------------------------------------------------

    def move_tile(self, tile_id: int) -> bool:
        """Slide tile *tile_id* into the hole.

        Returns True if the tile was adjacent to the hole and the move was
        applied; otherwise the board is left as it was.
        """
        try:
            self.board = MoveEngine.apply_move(self.board, tile_id)
        except IllegalMoveError:
            return False
        return True

    def restart(self) -> None:
        self.board = GameGenerator.generate_board(self._rng)
        self.assignment = GameGenerator.generate_assignment(self._rng)

    # -- queries --------------------------------------------------------------

    def is_movable(self, tile_id: int) -> bool:
        return MoveEngine.is_movable(self.board, tile_id)

    def movable_tiles(self) -> list[Tile]:
        return MoveEngine.movable_tiles(self.board)
