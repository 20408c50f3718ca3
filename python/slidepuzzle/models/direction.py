"""Slide directions for the empty slot."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Where the empty slot moves.

    The values are the single-character move codes used in solution
    files: ``c`` (cima), ``b`` (baixo), ``e`` (esquerda), ``d`` (direita).
    ``Direction("x")`` raises ``ValueError`` for any other token.
    """

    UP = "c"
    DOWN = "b"
    LEFT = "e"
    RIGHT = "d"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def delta(self) -> tuple[int, int]:
        """``(row, col)`` offset applied to the slot."""
        return _DELTAS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}
