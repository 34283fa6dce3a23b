"""Move legality and the move transition."""

from __future__ import annotations

import logging

from backend.models.board import Board, Tile

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a tile that is not next to the hole is asked to move."""

    def __init__(self, tile_id: int, reason: str) -> None:
        super().__init__(f"Tile {tile_id} cannot move: {reason}.")
        self.tile_id = tile_id
        self.reason = reason


class MoveEngine:
    """Stateless move rules — all methods are static."""

    @staticmethod
    def is_movable(board: Board, tile_id: int) -> bool:
        """Return True if the tile sits orthogonally next to the hole."""
        return MoveEngine._rejection(board, tile_id) is None

    @staticmethod
    def movable_tiles(board: Board) -> list[Tile]:
        """Every tile that may move right now, top-to-bottom."""
        return [
            t for row in board.rows() for t in row
            if MoveEngine.is_movable(board, t.id)
        ]

    @staticmethod
    def apply_move(board: Board, tile_id: int) -> Board:
        """Slide *tile_id* into the hole and return the resulting board.

        *board* is not modified. Raises :class:`IllegalMoveError` if the
        tile is not movable.
        """
        reason = MoveEngine._rejection(board, tile_id)
        if reason is not None:
            logger.info("Rejected move of tile %d: %s", tile_id, reason)
            raise IllegalMoveError(tile_id, reason)

        tile = board.tile(tile_id)
        hole = board.empty_tile
        assert tile is not None and hole is not None

        logger.debug("Tile %d %s -> %s", tile_id, tile.pos, hole.pos)
        return board.replace_tiles(
            tile.moved_to(hole.x, hole.y),
            hole.moved_to(tile.x, tile.y),
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _rejection(board: Board, tile_id: int) -> str | None:
        """Why *tile_id* cannot move, or ``None`` if it can."""
        tile = board.tile(tile_id)
        if tile is None:
            return "no such tile"
        if tile.is_empty:
            return "the empty tile never moves itself"
        hole = board.empty_tile
        if hole is None:
            return "board has no empty tile"
        if abs(tile.x - hole.x) + abs(tile.y - hole.y) != 1:
            return "not adjacent to the empty tile"
        return None
