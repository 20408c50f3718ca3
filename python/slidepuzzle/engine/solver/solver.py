"""Sliding puzzle solver — weighted best-first search."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field

from slidepuzzle.models.direction import Direction
from slidepuzzle.models.state import State

logger = logging.getLogger(__name__)

# Path length is divided by this before adding the heuristic, so the
# search leans towards heuristic proximity. Results are near-optimal.
PATH_WEIGHT = 3


def score(state: State) -> int:
    return len(state.moves) // PATH_WEIGHT + state.cost


@dataclass(order=True)
class _QueueEntry:
    """Heap entry; the lowest score is popped first.

    ``heapq`` is a min-heap, so ordering on the plain score already gives
    "lower is better". ``seq`` breaks ties in insertion order and keeps
    the ``State`` itself out of comparisons.
    """

    score: int
    seq: int
    state: State = field(compare=False)


@dataclass
class SearchResult:
    solution: State | None
    expanded: int = 0
    generated: int = 0
    seen: int = 0

    @property
    def found(self) -> bool:
        return self.solution is not None


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(start: State, check_parity: bool = False) -> SearchResult:
        """Run the best-first search from *start* and report counters.

        Unsolvable boards are found by exhausting the reachable states
        unless *check_parity* is set, in which case they are rejected
        before searching.
        """
        if check_parity and not Solver.is_solvable(start):
            logger.debug("parity check rejected %s×%s board", start.rows, start.cols)
            return SearchResult(solution=None)

        counter = itertools.count()
        queue = [_QueueEntry(score(start), next(counter), start)]
        seen: set[tuple[int, ...]] = {start.board}
        result = SearchResult(solution=None)

        logger.debug("search start: %s×%s, cost %d", start.rows, start.cols, start.cost)
        while queue:
            current = heapq.heappop(queue).state
            result.expanded += 1

            if current.is_final():
                result.solution = current
                break

            for successor in current.possible_moves():
                result.generated += 1
                if successor.board in seen:
                    continue
                seen.add(successor.board)
                heapq.heappush(queue, _QueueEntry(score(successor), next(counter), successor))

        result.seen = len(seen)
        logger.debug(
            "search %s: expanded=%d generated=%d seen=%d",
            "solved" if result.found else "exhausted",
            result.expanded,
            result.generated,
            result.seen,
        )
        return result

    @staticmethod
    def solve(start: State) -> State | None:
        """Return the solved state (its ``moves`` are the answer), or ``None``."""
        return Solver.search(start).solution

    @staticmethod
    def hint(state: State) -> Direction | None:
        """Return the next move towards the goal, or ``None`` if solved / unsolvable."""
        if state.is_final():
            return None

        solution = Solver.solve(state)
        if solution is None:
            return None
        return solution.moves[len(state.moves)]

    @staticmethod
    def is_solvable(state: State) -> bool:
        """Return True if *state* can reach the goal state.

        A single row or column can only shift the slot along, so the tiles
        must already be in order. Otherwise every slide is one
        transposition and moves the slot one cell, so the permutation
        parity must match the parity of the slot's distance from index 0.
        """
        tiles = [t for t in state.board if t != 0]
        if state.rows == 1 or state.cols == 1:
            return tiles == sorted(tiles)

        inversions = 0
        for i in range(len(tiles)):
            for j in range(i + 1, len(tiles)):
                if tiles[i] > tiles[j]:
                    inversions += 1
        # Removing the slot from the permutation shifts every tile after
        # it by one position, which contributes `slot` extra inversions.
        parity = (inversions + state.slot) % 2
        r, c = state.position(state.slot)
        return parity == (r + c) % 2
