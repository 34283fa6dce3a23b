"""Board model tests — validation and queries."""

from __future__ import annotations

import pytest

from backend.models.board import Board, Color, Tile


def _tiles(*cells: tuple[int, int, Color]) -> list[Tile]:
    return [Tile(id=i, x=x, y=y, color=c) for i, (x, y, c) in enumerate(cells)]


# -- Color ----------------------------------------------------------------------


@pytest.mark.parametrize(
    "color, letter",
    [
        (Color.RED, "r"),
        (Color.YELLOW, "y"),
        (Color.GREEN, "g"),
        (Color.CYAN, "c"),
        (Color.BLUE, "b"),
        (Color.MAGENTA, "m"),
        (Color.EMPTY, "t"),
    ],
)
def test_color_letters(color: Color, letter: str) -> None:
    assert color.letter == letter
    assert Color.from_letter(letter) is color


def test_unknown_letter_rejected() -> None:
    with pytest.raises(ValueError):
        Color.from_letter("x")


def test_playable_excludes_empty() -> None:
    assert Color.EMPTY not in Color.playable()
    assert len(Color.playable()) == 6


# -- validation -----------------------------------------------------------------


def test_from_tiles_accepts_complete_grid() -> None:
    board = Board.from_tiles(
        2, 1, _tiles((0, 0, Color.RED), (1, 0, Color.EMPTY))
    )
    assert board.empty_tile == Tile(1, 1, 0, Color.EMPTY)


def test_wrong_tile_count_rejected() -> None:
    with pytest.raises(ValueError, match="Expected 4 tiles"):
        Board.from_tiles(2, 2, _tiles((0, 0, Color.RED)))


def test_shared_position_rejected() -> None:
    with pytest.raises(ValueError, match="share position"):
        Board.from_tiles(2, 1, _tiles((0, 0, Color.RED), (0, 0, Color.BLUE)))


def test_off_board_rejected() -> None:
    with pytest.raises(ValueError, match="off the board"):
        Board.from_tiles(2, 1, _tiles((0, 0, Color.RED), (2, 0, Color.BLUE)))


def test_duplicate_ids_rejected() -> None:
    tiles = [Tile(0, 0, 0, Color.RED), Tile(0, 1, 0, Color.BLUE)]
    with pytest.raises(ValueError, match="unique"):
        Board.from_tiles(2, 1, tiles)


def test_two_holes_rejected() -> None:
    with pytest.raises(ValueError, match="at most one empty"):
        Board.from_tiles(2, 1, _tiles((0, 0, Color.EMPTY), (1, 0, Color.EMPTY)))


# -- queries --------------------------------------------------------------------


def test_rows_follow_coordinates_not_storage_order() -> None:
    board = Board.from_tiles(
        2,
        2,
        _tiles(
            (1, 1, Color.RED),
            (0, 0, Color.BLUE),
            (1, 0, Color.GREEN),
            (0, 1, Color.EMPTY),
        ),
    )
    colors = [[t.color for t in row] for row in board.rows()]
    assert colors == [[Color.BLUE, Color.GREEN], [Color.EMPTY, Color.RED]]


def test_lookup_by_id_and_position() -> None:
    board = Board.from_tiles(
        2, 1, _tiles((1, 0, Color.RED), (0, 0, Color.EMPTY))
    )
    assert board.tile(0) == Tile(0, 1, 0, Color.RED)
    assert board.tile_at(0, 0) == Tile(1, 0, 0, Color.EMPTY)
    assert board.tile(99) is None
    assert board.tile_at(5, 5) is None


def test_assignment_style_board_has_no_hole() -> None:
    board = Board.from_tiles(1, 1, _tiles((0, 0, Color.CYAN)))
    assert board.empty_tile is None


def test_replace_tiles_keeps_storage_order() -> None:
    board = Board.from_tiles(
        2, 1, _tiles((0, 0, Color.RED), (1, 0, Color.EMPTY))
    )
    moved = board.replace_tiles(board.tiles[0].moved_to(1, 0))
    assert [t.id for t in moved.tiles] == [0, 1]
    assert moved.tile(0).pos == (1, 0)
    assert board.tile(0).pos == (0, 0)
