"""Puzzle state model for the R×C sliding puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from slidepuzzle.engine.heuristic.manhattan import manhattan_distance
from slidepuzzle.models.direction import Direction


@dataclass(frozen=True)
class State:
    """One board configuration plus the moves that produced it.

    Tiles are stored as a flat row-major tuple; 0 is the empty slot. The
    goal has every tile at the index equal to its value, so the slot
    ends up at index 0.

    Equality and hashing only look at ``board``: two different move paths
    reaching the same arrangement are the same state.
    """

    board: tuple[int, ...]
    rows: int = field(compare=False)
    cols: int = field(compare=False)
    slot: int = field(compare=False)
    moves: tuple[Direction, ...] = field(default=(), compare=False)
    cost: int = field(default=0, compare=False)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def new(cls, board: Iterable[int], rows: int, cols: int) -> State:
        """Create a fresh state from a flat row-major tile list.

        Example::

            State.new([1, 0, 2, 3, 4, 5], 2, 3)
        """
        tiles = tuple(board)
        if rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}×{cols}.")
        if len(tiles) != rows * cols:
            raise ValueError(
                f"Expected {rows * cols} tiles for a {rows}×{cols} board, "
                f"got {len(tiles)}."
            )
        if sorted(tiles) != list(range(rows * cols)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{rows * cols - 1} "
                "with exactly one empty slot (0)."
            )
        slot = tiles.index(0)
        return cls(
            board=tiles,
            rows=rows,
            cols=cols,
            slot=slot,
            cost=manhattan_distance(tiles, cols, slot),
        )

    @classmethod
    def goal(cls, rows: int, cols: int) -> State:
        return cls.new(range(rows * cols), rows, cols)

    @classmethod
    def from_text(cls, text: str) -> State:
        """Parse ``"rows cols"`` followed by the flattened board.

        Line breaks are not significant; the first two integers are the
        dimensions and everything after them is the board.
        """
        tokens = text.split()
        if len(tokens) < 2:
            raise ValueError("Missing board dimensions.")
        try:
            numbers = [int(t) for t in tokens]
        except ValueError as exc:
            raise ValueError(f"Board text contains a non-integer token: {exc}") from exc
        rows, cols, *board = numbers
        return cls.new(board, rows, cols)

    def to_text(self) -> str:
        return f"{self.rows} {self.cols}\n" + " ".join(str(t) for t in self.board)

    def __str__(self) -> str:
        return self.to_text()

    # -- geometry -------------------------------------------------------------

    def position(self, index: int) -> tuple[int, int]:
        return divmod(index, self.cols)

    def index_of(self, row: int, col: int) -> int:
        return row * self.cols + col

    # -- queries --------------------------------------------------------------

    def is_final(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(tile == i for i, tile in enumerate(self.board))

    def is_tile_home(self, index: int) -> bool:
        return self.board[index] == index

    def can_move(self, direction: Direction) -> bool:
        r, c = self.position(self.slot)
        if direction is Direction.UP:
            return r > 0
        if direction is Direction.DOWN:
            return r < self.rows - 1
        if direction is Direction.LEFT:
            return c > 0
        return c < self.cols - 1

    # -- moves ----------------------------------------------------------------

    def make_move(self, direction: Direction) -> State | None:
        """Slide the empty slot one cell in *direction*.

        Returns the resulting state, or ``None`` if the slot would leave
        the grid.
        """
        if not self.can_move(direction):
            return None

        r, c = self.position(self.slot)
        dr, dc = direction.delta
        target = self.index_of(r + dr, c + dc)

        tiles = list(self.board)
        tiles[self.slot], tiles[target] = tiles[target], tiles[self.slot]
        return State(
            board=tuple(tiles),
            rows=self.rows,
            cols=self.cols,
            slot=target,
            moves=self.moves + (direction,),
            cost=manhattan_distance(tiles, self.cols, target),
        )

    def possible_moves(self) -> Iterator[State]:
        """Yield every legal one-slide successor (Up, Down, Left, Right)."""
        for direction in Direction:
            successor = self.make_move(direction)
            if successor is not None:
                yield successor
