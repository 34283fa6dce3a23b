"""Rich terminal frontend — coloured board views for the CLI commands.

Uses the ``rich`` library for styled output. Reads boards from the
backend and never changes them.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import MoveEngine
from backend.engine.serializer import BoardSerializer
from backend.models.board import Board, Color

console = Console()
err_console = Console(stderr=True)

_STYLES: dict[Color, str] = {
    Color.RED: "bold white on red",
    Color.YELLOW: "bold black on yellow",
    Color.GREEN: "bold black on green",
    Color.CYAN: "bold black on cyan",
    Color.BLUE: "bold white on blue",
    Color.MAGENTA: "bold white on magenta",
}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, highlight_movable: bool = False) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Each cell shows the tile id on its color. With *highlight_movable*,
    tiles next to the hole are underlined.
    """
    movable = (
        {t.id for t in MoveEngine.movable_tiles(board)}
        if highlight_movable
        else set()
    )
    width = len(str(len(board.tiles) - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width + 1, justify="center")

    for row in board.rows():
        cells: list[Text] = []
        for tile in row:
            if tile.is_empty:
                cells.append(Text("·", style="dim"))
                continue
            style = _STYLES[tile.color]
            if tile.id in movable:
                style += " underline"
            cells.append(Text(f"{tile.id:>{width}}", style=style))
        table.add_row(*cells)

    return table


def _panel(board: Board, title: str, highlight_movable: bool = False) -> Panel:
    body = Group(
        Align.center(render_board(board, highlight_movable)),
        Text(""),
        Align.center(Text(BoardSerializer.serialize(board), style="dim")),
    )
    return Panel(
        body,
        title=f"[bold cyan]{title}  {board.width}×{board.height}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )


# -- screens ------------------------------------------------------------------


def show_board(board: Board, title: str = "Board") -> None:
    console.print(_panel(board, title, highlight_movable=True))


def show_assignment(assignment: Board) -> None:
    console.print(_panel(assignment, "Assignment"))


def show_move(step: int, tile_id: int, board: Board) -> None:
    line = Text()
    line.append(f"  Move {step}: ", style="bold cyan")
    line.append(f"tile {tile_id}", style="bold")
    console.print(line)
    console.print(_panel(board, f"After move {step}", highlight_movable=True))


def show_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {message}")
