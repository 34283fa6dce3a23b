"""Board model for the color slide puzzle."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class Color(StrEnum):
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    MAGENTA = "magenta"
    EMPTY = "empty"

    @property
    def letter(self) -> str:
        return _LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> Color:
        for color, code in _LETTERS.items():
            if code == letter:
                return color
        raise ValueError(f"Unknown color letter {letter!r}.")

    @classmethod
    def playable(cls) -> list[Color]:
        """All colors a tile can carry, in enumeration order (no EMPTY)."""
        return [c for c in cls if c is not cls.EMPTY]


_LETTERS: dict[Color, str] = {
    Color.RED: "r",
    Color.YELLOW: "y",
    Color.GREEN: "g",
    Color.CYAN: "c",
    Color.BLUE: "b",
    Color.MAGENTA: "m",
    Color.EMPTY: "t",
}


@dataclass(frozen=True)
class Tile:
    id: int
    x: int
    y: int
    color: Color

    @property
    def pos(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_empty(self) -> bool:
        return self.color is Color.EMPTY

    def moved_to(self, x: int, y: int) -> Tile:
        return replace(self, x=x, y=y)


@dataclass(frozen=True)
class Board:
    """An immutable puzzle state.

    ``tiles`` keeps the order the board was built in; coordinates, not
    storage order, are the source of truth for the grid. Use :meth:`rows`
    to walk the board top-to-bottom, left-to-right.
    """

    width: int
    height: int
    tiles: tuple[Tile, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_tiles(cls, width: int, height: int, tiles: list[Tile]) -> Board:
        """Create a validated board.

        Example::

            Board.from_tiles(2, 1, [Tile(0, 0, 0, Color.RED),
                                    Tile(1, 1, 0, Color.EMPTY)])
        """
        board = cls(width=width, height=height, tiles=tuple(tiles))
        board.validate()
        return board

    def validate(self) -> None:
        """Raise ``ValueError`` unless the board is a complete grid."""
        if len(self.tiles) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} tiles for a "
                f"{self.width}×{self.height} board, got {len(self.tiles)}."
            )
        ids = {t.id for t in self.tiles}
        if len(ids) != len(self.tiles):
            raise ValueError("Tile ids must be unique.")
        seen: set[tuple[int, int]] = set()
        for t in self.tiles:
            if not (0 <= t.x < self.width and 0 <= t.y < self.height):
                raise ValueError(f"Tile {t.id} at {t.pos} is off the board.")
            if t.pos in seen:
                raise ValueError(f"Two tiles share position {t.pos}.")
            seen.add(t.pos)
        if sum(t.is_empty for t in self.tiles) > 1:
            raise ValueError("A board holds at most one empty tile.")

    # -- queries --------------------------------------------------------------

    def tile(self, tile_id: int) -> Tile | None:
        for t in self.tiles:
            if t.id == tile_id:
                return t
        return None

    def tile_at(self, x: int, y: int) -> Tile | None:
        for t in self.tiles:
            if t.x == x and t.y == y:
                return t
        return None

    @property
    def empty_tile(self) -> Tile | None:
        """The hole, or ``None`` on an assignment board."""
        for t in self.tiles:
            if t.is_empty:
                return t
        return None

    def rows(self) -> list[list[Tile]]:
        """Tiles grouped by row, each row ordered by increasing ``x``."""
        ordered = sorted(self.tiles, key=lambda t: (t.y, t.x))
        return [
            ordered[r * self.width : (r + 1) * self.width]
            for r in range(self.height)
        ]

    def positions(self) -> dict[int, tuple[int, int]]:
        return {t.id: t.pos for t in self.tiles}

    def color_counts(self) -> dict[Color, int]:
        counts: dict[Color, int] = {}
        for t in self.tiles:
            counts[t.color] = counts.get(t.color, 0) + 1
        return counts

    def replace_tiles(self, *changed: Tile) -> Board:
        """Return a copy with the given tiles swapped in by id."""
        by_id = {t.id: t for t in changed}
        return Board(
            width=self.width,
            height=self.height,
            tiles=tuple(by_id.get(t.id, t) for t in self.tiles),
        )
