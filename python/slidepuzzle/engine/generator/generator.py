"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from slidepuzzle.models.state import State

logger = logging.getLogger(__name__)


class Generator:
    """Creates solvable puzzles by random-walking from the solved state."""

    @staticmethod
    def scramble(state: State, amount: int, rng: random.Random) -> State:
        """Apply *amount* random legal slides to *state*.

        The slide that would undo the previous one is skipped unless it is
        the only legal move left.
        """
        if amount < 0:
            raise ValueError(f"Scramble amount must be non-negative, got {amount}.")

        for _ in range(amount):
            candidates = list(state.possible_moves())
            if not candidates:
                logger.debug("no legal slides on a %s×%s board", state.rows, state.cols)
                break
            if state.moves:
                undo = state.moves[-1].opposite
                forward = [s for s in candidates if s.moves[-1] is not undo]
                if forward:
                    candidates = forward
            state = rng.choice(candidates)

        logger.debug("scrambled with %d slides", len(state.moves))
        return state

    @staticmethod
    def generate(rows: int, cols: int, amount: int, rng: random.Random | None = None) -> State:
        """Return a random *solvable* board reached by *amount* slides from the goal.

        Only the scrambled board is kept; the returned state has no move
        history.
        """
        if rng is None:
            rng = random.Random()
        walked = Generator.scramble(State.goal(rows, cols), amount, rng)
        return State.new(walked.board, rows, cols)
