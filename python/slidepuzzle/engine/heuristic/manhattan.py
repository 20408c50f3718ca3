"""Manhattan-distance heuristic."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slidepuzzle.models.state import State


def manhattan_distance(board: Sequence[int], cols: int, slot: int) -> int:
    """Sum of row and column offsets between every tile and its home index.

    The tile at ``board[i]`` belongs at index ``board[i]``; the empty
    slot is skipped.
    """
    dist = 0
    for i, tile in enumerate(board):
        if i == slot:
            continue
        r, c = divmod(i, cols)
        gr, gc = divmod(tile, cols)
        dist += abs(r - gr) + abs(c - gc)
    return dist


def heuristic(state: State) -> int:
    return manhattan_distance(state.board, state.cols, state.slot)
