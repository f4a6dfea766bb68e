from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .board import Amphipod, BurrowGeometry

Occupant = Optional[Amphipod]


@dataclass(frozen=True)
class BurrowState:
    """Immutable assignment of an amphipod (or nothing) to every cell.

    ``cells`` follows the index layout of :class:`BurrowGeometry`: the
    hallway first, then every room top slot first. Two states with the same
    occupants compare and hash equal, which makes a state usable directly as
    a search key.
    """

    cells: Tuple[Occupant, ...]

    @classmethod
    def encode(
        cls,
        geometry: BurrowGeometry,
        rooms: Sequence[Sequence[Occupant]],
        hallway: Optional[Sequence[Occupant]] = None,
    ) -> "BurrowState":
        """Build a state from per-room occupants listed top to bottom."""
        if hallway is None:
            hallway = [None] * geometry.hallway_length
        assert len(hallway) == geometry.hallway_length
        assert len(rooms) == geometry.room_count
        assert all(len(room) == geometry.depth for room in rooms)

        cells = list(hallway)
        for room in rooms:
            cells.extend(room)
        return cls(tuple(cells))

    @classmethod
    def goal(cls, geometry: BurrowGeometry) -> "BurrowState":
        rooms = [[kind] * geometry.depth for kind in Amphipod.kinds(geometry.room_count)]
        return cls.encode(geometry, rooms)

    def __len__(self) -> int:
        return len(self.cells)

    def occupant(self, index: int) -> Occupant:
        return self.cells[index]

    def hallway(self, geometry: BurrowGeometry) -> Tuple[Occupant, ...]:
        return self.cells[: geometry.hallway_length]

    def room(self, geometry: BurrowGeometry, room: int) -> Tuple[Occupant, ...]:
        start = geometry.room_start(room)
        return self.cells[start : start + geometry.depth]

    def occupied(self) -> Iterable[Tuple[int, Amphipod]]:
        return ((index, cell) for index, cell in enumerate(self.cells) if cell is not None)

    def token_counts(self) -> Counter:
        return Counter(cell for cell in self.cells if cell is not None)

    def relocate(self, source: int, target: int) -> "BurrowState":
        """Return a new state with the amphipod at ``source`` moved to ``target``."""
        assert self.cells[source] is not None, f"no amphipod at {source}"
        assert self.cells[target] is None, f"cell {target} already occupied"

        cells = list(self.cells)
        cells[target] = cells[source]
        cells[source] = None
        return BurrowState(tuple(cells))

    def is_goal(self, geometry: BurrowGeometry) -> bool:
        if any(cell is not None for cell in self.hallway(geometry)):
            return False
        return all(
            cell is not None and cell.home_room == room
            for room in range(geometry.room_count)
            for cell in self.room(geometry, room)
        )

    def render(self, geometry: BurrowGeometry) -> str:
        """Draw the state the way the puzzle input is drawn."""

        def glyph(cell: Occupant) -> str:
            return "." if cell is None else cell.glyph

        width = geometry.hallway_length + 2
        lines = [
            "#" * width,
            "#" + "".join(glyph(cell) for cell in self.hallway(geometry)) + "#",
        ]
        for depth in range(geometry.depth):
            row = "#".join(
                glyph(self.cells[geometry.cell_index(room, depth)])
                for room in range(geometry.room_count)
            )
            if depth == 0:
                lines.append("###" + row + "###")
            else:
                lines.append("  #" + row + "#")
        lines.append("  " + "#" * (width - 4))
        return "\n".join(lines)
