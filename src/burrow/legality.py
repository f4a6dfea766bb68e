"""
Per-state legality snapshot for the burrow.

Answers the questions the move generator asks of a state: which rooms may
currently receive their own amphipods, which hallway positions are reachable
from each room entrance, and where the movable amphipod of each room sits.
"""

from dataclasses import dataclass

import numpy as np

from .board import Amphipod, BurrowGeometry
from .state import BurrowState


@dataclass(frozen=True, eq=False)
class LegalitySnapshot:
    """Derived facts about one state; rebuilt for every expanded state."""

    geometry: BurrowGeometry
    filled: np.ndarray  # (cell_count,) occupancy
    can_place: np.ndarray  # (room_count,) room holds only its own kind
    reach: np.ndarray  # (room_count, hallway_length) path clear from entrance

    @classmethod
    def from_state(
        cls, geometry: BurrowGeometry, state: BurrowState
    ) -> "LegalitySnapshot":
        filled = [cell is not None for cell in state.cells]

        can_place = [
            all(
                cell is None or cell.home_room == room
                for cell in state.room(geometry, room)
            )
            for room in range(geometry.room_count)
        ]

        # reach[r][h]: every hallway cell strictly between h and the entrance
        # of room r is empty. The entrance itself is counted, h is not.
        reach = []
        for room in range(geometry.room_count):
            row = [True] * geometry.hallway_length
            tip = geometry.entrance(room)
            for position in range(tip - 1, -1, -1):
                row[position] = row[position + 1] and not filled[position + 1]
            for position in range(tip + 1, geometry.hallway_length):
                row[position] = row[position - 1] and not filled[position - 1]
            reach.append(row)

        return cls(
            geometry=geometry,
            filled=np.array(filled, dtype=bool),
            can_place=np.array(can_place, dtype=bool),
            reach=np.array(reach, dtype=bool),
        )

    def top_occupant(self, room: int) -> int:
        """Index of the shallowest amphipod in a room that must be emptied."""
        assert not self.can_place[room], f"room {room} has nothing to evict"

        for index in self.geometry.room_cells(room):
            if self.filled[index]:
                return index
        raise AssertionError(f"room {room} is not placeable but empty")

    def can_move_to_room(self, position: int, amphipod: Amphipod) -> bool:
        assert self.geometry.is_hallway(position)

        room = amphipod.home_room
        return bool(self.can_place[room] and self.reach[room, position])

    def can_move_to_hallway(self, room: int, position: int) -> bool:
        assert self.geometry.is_hallway(position)

        return bool(
            not self.geometry.is_entrance(position)
            and not self.filled[position]
            and self.reach[room, position]
        )

    def destination(self, amphipod: Amphipod) -> int:
        """Deepest free slot of the amphipod's home room."""
        room = amphipod.home_room
        assert self.can_place[room]

        for index in reversed(self.geometry.room_cells(room)):
            if not self.filled[index]:
                return index
        raise AssertionError(f"room {room} is full")
