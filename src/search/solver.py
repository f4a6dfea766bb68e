"""
A* solver for the amphipod burrow.

Finds the minimum total energy needed to sort every amphipod into its home
room.
"""

from dataclasses import dataclass
from functools import partial
from typing import Sequence, Union

from ..burrow.board import BurrowGeometry
from ..burrow.heuristic import heuristic
from ..burrow.levels import BurrowConfig, RoomSpec
from ..burrow.moves import successors
from ..burrow.state import BurrowState
from ..util.logger import logger
from .best_first import SearchResult, best_first_search

Configuration = Union[BurrowConfig, Sequence[RoomSpec]]


@dataclass(frozen=True)
class NoSolution:
    """Returned by :func:`solve` when no move sequence reaches the goal."""

    nodes_explored: int


class BurrowSolver:
    """A* solver for the amphipod burrow."""

    def __init__(self, track_path: bool = False):
        """Initialize burrow solver.

        Args:
            track_path: Keep the sequence of states along the optimal path
        """
        self.track_path = track_path
        self.logger = logger.bind(component="solver")

    def search(self, configuration: Configuration) -> SearchResult[BurrowState]:
        """Run A* from the configuration's initial state.

        Args:
            configuration: Room contents, top to bottom

        Returns:
            SearchResult with the minimum energy if the goal is reachable
        """
        config = _as_config(configuration)
        geometry = config.geometry()
        return self.search_from(geometry, config.initial_state(geometry))

    def search_from(
        self, geometry: BurrowGeometry, state: BurrowState
    ) -> SearchResult[BurrowState]:
        """Run A* from an arbitrary state, such as one with a busy hallway."""
        self.logger.debug(
            f"Solving {geometry.room_count} rooms of depth {geometry.depth}, "
            f"initial estimate {heuristic(geometry, state)}"
        )

        result = best_first_search(
            state,
            successors=partial(successors, geometry),
            is_goal=lambda candidate: candidate.is_goal(geometry),
            heuristic=partial(heuristic, geometry),
            track_path=self.track_path,
        )

        if result.success:
            self.logger.info(
                f"Minimum energy {result.cost} after {result.nodes_explored} expansions "
                f"({result.states_discovered} states, {result.time_taken_ms:.1f}ms)"
            )
        else:
            self.logger.warning(
                f"No solution after {result.nodes_explored} expansions "
                f"({result.states_discovered} states)"
            )
        return result


def solve(initial_configuration: Configuration) -> Union[int, NoSolution]:
    """Minimum total energy to organise the burrow, or :class:`NoSolution`."""
    return to_outcome(BurrowSolver().search(initial_configuration))


def solve_from(geometry: BurrowGeometry, state: BurrowState) -> Union[int, NoSolution]:
    return to_outcome(BurrowSolver().search_from(geometry, state))


def to_outcome(result: SearchResult[BurrowState]) -> Union[int, NoSolution]:
    if not result.success:
        return NoSolution(nodes_explored=result.nodes_explored)
    return result.cost


def _as_config(configuration: Configuration) -> BurrowConfig:
    if isinstance(configuration, BurrowConfig):
        return configuration
    return BurrowConfig.from_rooms(configuration)
