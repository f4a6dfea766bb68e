"""
Deduplicated best-first search over hashable, immutable states.

With a heuristic this is A*; without one it degrades to uniform-cost search.
The frontier may hold several entries for the same state; entries whose cost
no longer matches the best known distance are skipped when popped.
"""

import heapq
import itertools
import time
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

from ..util.logger import logger

S = TypeVar("S", bound=Hashable)

PROGRESS_INTERVAL = 50_000


@dataclass
class SearchResult(Generic[S]):
    """Result of a best-first search."""

    cost: Optional[int]
    path: Optional[List[S]]
    nodes_explored: int
    states_discovered: int
    time_taken_ms: float
    success: bool


def best_first_search(
    start: S,
    successors: Callable[[S], Iterable[Tuple[S, int]]],
    is_goal: Callable[[S], bool],
    heuristic: Optional[Callable[[S], int]] = None,
    track_path: bool = False,
) -> SearchResult[S]:
    """Find the cheapest path from ``start`` to a goal state.

    Args:
        start: Seed state
        successors: Yields ``(next_state, step_cost)`` pairs; costs must be positive
        is_goal: Goal test
        heuristic: Admissible lower bound on remaining cost, or None for uniform cost
        track_path: Record parents so the result carries the full path

    Returns:
        SearchResult; ``success`` is False when the frontier runs dry
    """
    log = logger.bind(component="search")
    start_time = time.time()

    if heuristic is None:
        heuristic = _zero

    dists: Dict[S, int] = {start: 0}
    parents: Dict[S, S] = {}
    # Entries are (estimate, cost, tiebreak, state); the counter keeps states
    # themselves out of comparisons.
    counter = itertools.count()
    frontier = [(heuristic(start), 0, next(counter), start)]
    nodes_explored = 0

    while frontier:
        _, dist, _, state = heapq.heappop(frontier)
        if dists.get(state) != dist:
            continue

        if is_goal(state):
            elapsed_ms = (time.time() - start_time) * 1000
            return SearchResult(
                cost=dist,
                path=_build_path(parents, state) if track_path else None,
                nodes_explored=nodes_explored,
                states_discovered=len(dists),
                time_taken_ms=elapsed_ms,
                success=True,
            )

        nodes_explored += 1
        if nodes_explored % PROGRESS_INTERVAL == 0:
            log.debug(
                f"Expanded {nodes_explored} states, frontier {len(frontier)}, "
                f"best cost so far {dist}"
            )

        for next_state, step_cost in successors(state):
            assert step_cost > 0, "step costs must be positive"
            cost = dist + step_cost
            if cost < dists.get(next_state, cost + 1):
                dists[next_state] = cost
                if track_path:
                    parents[next_state] = state
                heapq.heappush(
                    frontier, (cost + heuristic(next_state), cost, next(counter), next_state)
                )

    elapsed_ms = (time.time() - start_time) * 1000
    return SearchResult(
        cost=None,
        path=None,
        nodes_explored=nodes_explored,
        states_discovered=len(dists),
        time_taken_ms=elapsed_ms,
        success=False,
    )


def _zero(state) -> int:
    return 0


def _build_path(parents: Dict[S, S], goal: S) -> List[S]:
    path = [goal]
    while path[-1] in parents:
        path.append(parents[path[-1]])
    path.reverse()
    return path
