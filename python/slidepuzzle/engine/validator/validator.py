"""Replays a candidate move sequence against a puzzle."""

from __future__ import annotations

from collections.abc import Iterable

from slidepuzzle.models.direction import Direction
from slidepuzzle.models.state import State


class Validator:
    """Stateless validator; all methods are static."""

    @staticmethod
    def replay(start: State, tokens: Iterable[str]) -> State | None:
        """Apply move codes one at a time.

        Returns the final state, or ``None`` as soon as a token is not a
        known direction code or a move would leave the grid.
        """
        state = start
        for token in tokens:
            try:
                direction = Direction(token)
            except ValueError:
                return None
            moved = state.make_move(direction)
            if moved is None:
                return None
            state = moved
        return state

    @staticmethod
    def check_solution(start: State, tokens: Iterable[str]) -> bool:
        """Return True if *tokens* take *start* to the goal arrangement."""
        final = Validator.replay(start, tokens)
        return final is not None and final.is_final()
