"""Plain-text encoding of a board, one letter per cell."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from backend.models.board import Board, Color, Tile

T = TypeVar("T")


def chunk_by_length(items: Sequence[T], length: int) -> list[list[T]]:
    """Split *items* into consecutive runs of *length*.

    A sequence no longer than *length* comes back as a single chunk, so an
    empty input yields ``[[]]``.
    """
    if length < 1:
        raise ValueError(f"Chunk length must be positive, got {length}.")
    if len(items) <= length:
        return [list(items)]
    return [list(items[i : i + length]) for i in range(0, len(items), length)]


class BoardSerializer:
    """Stateless codec — all methods are static."""

    @staticmethod
    def serialize(board: Board, width: int | None = None) -> str:
        """Return the board as rows of color letters.

        Example output for a 3×3 board::

            rry
            ygg
            ccb
        """
        width = width or board.width
        ordered = sorted(board.tiles, key=lambda t: (t.y, t.x))
        letters = [t.color.letter for t in ordered]
        return "\n".join("".join(row) for row in chunk_by_length(letters, width))

    @staticmethod
    def parse(text: str) -> Board:
        """Rebuild a board from :meth:`serialize` output.

        Tile ids are assigned in row-major order.
        """
        lines = [line.strip() for line in text.strip().splitlines()]
        if not lines or not lines[0]:
            raise ValueError("Cannot parse an empty board.")
        width = len(lines[0])
        tiles: list[Tile] = []
        for y, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(
                    f"Row {y} has {len(line)} cells, expected {width}."
                )
            for x, letter in enumerate(line):
                tiles.append(
                    Tile(id=len(tiles), x=x, y=y, color=Color.from_letter(letter))
                )
        return Board.from_tiles(width, len(lines), tiles)
