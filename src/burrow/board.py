from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

MAX_ROOMS = 4


class Amphipod(Enum):
    A = 0
    B = 1
    C = 2
    D = 3

    @property
    def home_room(self) -> int:
        return self.value

    @property
    def energy(self) -> int:
        """Energy spent per step moved."""
        return 10**self.value

    @property
    def glyph(self) -> str:
        return self.name

    @classmethod
    def from_glyph(cls, glyph: str) -> "Amphipod":
        try:
            return cls[glyph]
        except KeyError:
            raise ValueError(f"Unknown amphipod glyph: {glyph!r}") from None

    @classmethod
    def kinds(cls, room_count: int) -> List["Amphipod"]:
        return [cls(i) for i in range(room_count)]


@dataclass(frozen=True)
class BurrowGeometry:
    """Static shape of a burrow: a hallway above ``room_count`` rooms.

    Cells are addressed by a single index. Hallway positions come first
    (``0..hallway_length - 1``), followed by each room in turn, top slot
    first. Room ``r`` opens onto hallway position ``2 + 2 * r``.
    """

    room_count: int
    depth: int

    def __post_init__(self):
        if not 1 <= self.room_count <= MAX_ROOMS:
            raise ValueError(
                f"Room count must be between 1 and {MAX_ROOMS}, got {self.room_count}"
            )
        if self.depth < 1:
            raise ValueError(f"Room depth must be positive, got {self.depth}")

    @classmethod
    def for_rooms(cls, depth: int, room_count: int = MAX_ROOMS) -> "BurrowGeometry":
        return cls(room_count=room_count, depth=depth)

    @property
    def hallway_length(self) -> int:
        return 2 * self.room_count + 3

    @property
    def cell_count(self) -> int:
        return self.hallway_length + self.room_count * self.depth

    @property
    def entrances(self) -> Tuple[int, ...]:
        return tuple(self.entrance(room) for room in range(self.room_count))

    def entrance(self, room: int) -> int:
        return 2 + 2 * room

    def is_entrance(self, position: int) -> bool:
        return 2 <= position <= 2 * self.room_count and position % 2 == 0

    def is_hallway(self, index: int) -> bool:
        return 0 <= index < self.hallway_length

    def resting_positions(self) -> List[int]:
        """Hallway positions an amphipod may stop on."""
        return [
            position
            for position in range(self.hallway_length)
            if not self.is_entrance(position)
        ]

    def room_start(self, room: int) -> int:
        return self.hallway_length + room * self.depth

    def cell_index(self, room: int, depth: int) -> int:
        return self.room_start(room) + depth

    def room_cell(self, index: int) -> Tuple[int, int]:
        """Map a room cell index back to ``(room, depth)``."""
        offset = index - self.hallway_length
        return offset // self.depth, offset % self.depth

    def room_cells(self, room: int) -> range:
        start = self.room_start(room)
        return range(start, start + self.depth)

    def step_distance(self, position: int, index: int) -> int:
        """Steps between hallway ``position`` and room cell ``index``."""
        room, depth = self.room_cell(index)
        return abs(position - self.entrance(room)) + depth + 1
