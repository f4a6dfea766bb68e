"""
Move generation for the burrow.

An amphipod either steps out of a room onto a hallway position, or walks
from the hallway straight into the deepest free slot of its home room.
Every move produced here is legal by construction.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .board import Amphipod, BurrowGeometry
from .legality import LegalitySnapshot
from .state import BurrowState


@dataclass(frozen=True)
class Move:
    """A single amphipod relocation and the energy it costs."""

    amphipod: Amphipod
    source: int
    target: int
    cost: int

    def apply(self, state: BurrowState) -> BurrowState:
        return state.relocate(self.source, self.target)

    def describe(self, geometry: BurrowGeometry) -> str:
        return (
            f"{self.amphipod.glyph}: {_cell_name(geometry, self.source)} -> "
            f"{_cell_name(geometry, self.target)} ({self.cost})"
        )


def _cell_name(geometry: BurrowGeometry, index: int) -> str:
    if geometry.is_hallway(index):
        return f"hallway {index}"
    room, depth = geometry.room_cell(index)
    return f"room {Amphipod(room).glyph}[{depth}]"


def generate_moves(
    geometry: BurrowGeometry,
    state: BurrowState,
    snapshot: Optional[LegalitySnapshot] = None,
) -> Iterator[Move]:
    if snapshot is None:
        snapshot = LegalitySnapshot.from_state(geometry, state)

    # Hallway -> home room
    for position in range(geometry.hallway_length):
        amphipod = state.occupant(position)
        if amphipod is None or not snapshot.can_move_to_room(position, amphipod):
            continue
        target = snapshot.destination(amphipod)
        cost = geometry.step_distance(position, target) * amphipod.energy
        yield Move(amphipod, position, target, cost)

    # Room -> hallway
    for room in range(geometry.room_count):
        if snapshot.can_place[room]:
            continue
        source = snapshot.top_occupant(room)
        amphipod = state.occupant(source)
        for position in range(geometry.hallway_length):
            if not snapshot.can_move_to_hallway(room, position):
                continue
            cost = geometry.step_distance(position, source) * amphipod.energy
            yield Move(amphipod, source, position, cost)


def successors(
    geometry: BurrowGeometry, state: BurrowState
) -> Iterator[Tuple[BurrowState, int]]:
    """Yield ``(next_state, cost)`` for every legal move from ``state``."""
    snapshot = LegalitySnapshot.from_state(geometry, state)
    for move in generate_moves(geometry, state, snapshot):
        yield move.apply(state), move.cost
