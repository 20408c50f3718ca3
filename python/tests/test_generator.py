from __future__ import annotations

import random

import pytest

from slidepuzzle.engine.generator import Generator
from slidepuzzle.engine.solver import Solver
from slidepuzzle.models.direction import Direction
from slidepuzzle.models.state import State


def test_zero_slides_is_goal() -> None:
    state = Generator.generate(3, 4, 0, rng=random.Random(1))
    assert state.is_final()
    assert state.board == tuple(range(12))


def test_single_slide_from_goal() -> None:
    seen: set[tuple[int, ...]] = set()
    for seed in range(20):
        state = Generator.generate(2, 3, 1, rng=random.Random(seed))
        seen.add(state.board)
    assert seen <= {(1, 0, 2, 3, 4, 5), (3, 1, 2, 0, 4, 5)}
    assert seen


@pytest.mark.parametrize(("rows", "cols"), [(2, 3), (3, 3), (4, 4), (3, 5)])
def test_output_is_solvable_without_history(rows: int, cols: int) -> None:
    rng = random.Random(rows * 10 + cols)
    for _ in range(10):
        state = Generator.generate(rows, cols, 50, rng=rng)
        assert state.moves == ()
        assert state.slot == state.board.index(0)
        assert Solver.is_solvable(state)


def test_seed_is_reproducible() -> None:
    a = Generator.generate(4, 4, 30, rng=random.Random(7))
    b = Generator.generate(4, 4, 30, rng=random.Random(7))
    assert a.board == b.board


def test_scramble_never_undoes_previous_slide() -> None:
    walked = Generator.scramble(State.goal(3, 3), 200, random.Random(3))
    assert len(walked.moves) == 200
    for prev, nxt in zip(walked.moves, walked.moves[1:]):
        assert nxt is not prev.opposite


def test_single_row_falls_back_to_reversal() -> None:
    walked = Generator.scramble(State.goal(1, 2), 3, random.Random(0))
    assert walked.moves == (Direction.RIGHT, Direction.LEFT, Direction.RIGHT)


def test_single_cell_board_has_no_slides() -> None:
    state = Generator.generate(1, 1, 5, rng=random.Random(0))
    assert state.board == (0,)


def test_negative_amount_rejected() -> None:
    with pytest.raises(ValueError):
        Generator.generate(2, 2, -1)


def test_generated_board_is_solved_by_search() -> None:
    start = Generator.generate(3, 3, 15, rng=random.Random(11))
    solution = Solver.solve(start)
    assert solution is not None
    assert solution.is_final()
