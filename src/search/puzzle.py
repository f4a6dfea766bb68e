"""
Two-answer facade over the burrow solver.

Part one solves the burrow as drawn; part two unfolds it to depth four first.
"""

from typing import List, Tuple, Union

from ..burrow.levels import BurrowConfig, parse_diagram
from ..burrow.moves import Move, generate_moves
from ..burrow.state import BurrowState
from .solver import BurrowSolver, NoSolution, to_outcome


class AmphipodPuzzle:
    def __init__(self, config: BurrowConfig):
        self.config = config

    @classmethod
    def from_text(cls, text: str) -> "AmphipodPuzzle":
        return cls(parse_diagram(text))

    def part_one(self) -> Union[int, NoSolution]:
        return to_outcome(BurrowSolver().search(self.config))

    def part_two(self) -> Union[int, NoSolution]:
        return to_outcome(BurrowSolver().search(self.config.unfold()))

    def optimal_moves(self, unfold: bool = False) -> List[Tuple[Move, BurrowState]]:
        """Moves along one optimal path, each paired with the state it leads to."""
        config = self.config.unfold() if unfold else self.config
        result = BurrowSolver(track_path=True).search(config)
        if not result.success:
            return []

        geometry = config.geometry()
        steps = []
        for before, after in zip(result.path, result.path[1:]):
            move = next(
                move
                for move in generate_moves(geometry, before)
                if move.apply(before) == after
            )
            steps.append((move, after))
        return steps
