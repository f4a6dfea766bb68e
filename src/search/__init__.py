"""
A* solver for the amphipod burrow puzzle.

Finds the minimum energy needed to sort every amphipod into its home room.
"""

from .best_first import SearchResult, best_first_search
from .puzzle import AmphipodPuzzle
from .solver import BurrowSolver, NoSolution, solve, solve_from

__all__ = [
    "AmphipodPuzzle",
    "BurrowSolver",
    "NoSolution",
    "SearchResult",
    "best_first_search",
    "solve",
    "solve_from",
]
