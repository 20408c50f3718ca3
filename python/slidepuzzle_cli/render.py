"""Rich rendering of puzzle boards for the terminal."""

from __future__ import annotations

import rich.box
from rich.panel import Panel
from rich.table import Table

from slidepuzzle.models.state import State


def render_board(state: State) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(state.rows * state.cols - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(state.cols):
        table.add_column(width=width + 1, justify="center")

    for r in range(state.rows):
        cells: list[str] = []
        for c in range(state.cols):
            i = state.index_of(r, c)
            val = state.board[i]
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif state.is_tile_home(i):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def board_panel(state: State, title: str) -> Panel:
    return Panel(
        render_board(state),
        title=f"[bold cyan]{title}  {state.rows}×{state.cols}[/bold cyan]",
        subtitle=f"[dim]distance {state.cost}[/dim]",
        border_style="cyan",
        expand=False,
    )
