from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple, Union

from .board import MAX_ROOMS, Amphipod, BurrowGeometry
from .state import BurrowState

# Rows folded into the burrow for the extended puzzle, top row first.
UNFOLDED_ROWS: Tuple[Tuple[Amphipod, ...], ...] = (
    (Amphipod.D, Amphipod.C, Amphipod.B, Amphipod.A),
    (Amphipod.D, Amphipod.B, Amphipod.A, Amphipod.C),
)

RoomSpec = Sequence[Union[Amphipod, str]]


@dataclass(frozen=True)
class BurrowConfig:
    """Initial contents of every room, each listed top to bottom."""

    rooms: Tuple[Tuple[Amphipod, ...], ...]

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def depth(self) -> int:
        return len(self.rooms[0]) if self.rooms else 0

    @classmethod
    def from_rooms(cls, rooms: Sequence[RoomSpec]) -> "BurrowConfig":
        """Build and validate a configuration from amphipods or glyphs."""
        config = cls(
            tuple(
                tuple(
                    cell if isinstance(cell, Amphipod) else Amphipod.from_glyph(cell)
                    for cell in room
                )
                for room in rooms
            )
        )
        errors = config.validate()
        if errors:
            raise ValueError("Invalid burrow: " + "; ".join(errors))
        return config

    def validate(self) -> List[str]:
        errors = []

        if not 1 <= self.room_count <= MAX_ROOMS:
            errors.append(f"Burrow must have 1 to {MAX_ROOMS} rooms, got {self.room_count}")
            return errors

        depths = {len(room) for room in self.rooms}
        if len(depths) != 1:
            errors.append(f"Rooms have uneven depths: {sorted(depths)}")
            return errors
        if self.depth == 0:
            errors.append("Rooms must not be empty")
            return errors

        counts = Counter(cell for room in self.rooms for cell in room)
        for kind in Amphipod:
            expected = self.depth if kind.home_room < self.room_count else 0
            if counts.get(kind, 0) != expected:
                errors.append(
                    f"Expected {expected} amphipods of kind {kind.glyph}, "
                    f"found {counts.get(kind, 0)}"
                )

        return errors

    def geometry(self) -> BurrowGeometry:
        return BurrowGeometry.for_rooms(self.depth, room_count=self.room_count)

    def initial_state(self, geometry: BurrowGeometry) -> BurrowState:
        return BurrowState.encode(geometry, self.rooms)

    def unfold(self) -> "BurrowConfig":
        """Insert the extra rows between the first and last row of every room."""
        assert self.room_count == len(UNFOLDED_ROWS[0])
        rooms = tuple(
            (room[0],) + tuple(row[index] for row in UNFOLDED_ROWS) + room[1:]
            for index, room in enumerate(self.rooms)
        )
        return BurrowConfig(rooms)

    def to_dict(self) -> Dict[str, Any]:
        return {"rooms": [[cell.glyph for cell in room] for room in self.rooms]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BurrowConfig":
        return cls.from_rooms(data["rooms"])


def parse_diagram(text: str) -> BurrowConfig:
    """Read the ASCII burrow drawing into a configuration.

    The hallway line is the one made of ``#`` walls around dots; every later
    line holding amphipod letters is one row of the rooms, top row first.
    """
    lines = text.splitlines()
    for hallway_row, line in enumerate(lines):
        stripped = line.strip()
        if len(stripped) > 2 and stripped[0] == "#" and set(stripped[1:-1]) == {"."}:
            break
    else:
        raise ValueError("Burrow diagram has no hallway line")

    rows = []
    for line in lines[hallway_row + 1 :]:
        cells = [char for char in line if char not in "# \t"]
        if not cells:
            continue
        if any(not char.isalpha() for char in cells):
            raise ValueError(f"Unexpected characters in room row: {line!r}")
        rows.append([Amphipod.from_glyph(char) for char in cells])

    if not rows:
        raise ValueError("Burrow diagram has no room rows")
    widths = {len(row) for row in rows}
    if len(widths) != 1:
        raise ValueError(f"Room rows have uneven widths: {[len(row) for row in rows]}")

    rooms = [list(column) for column in zip(*rows)]
    config = BurrowConfig.from_rooms(rooms)

    hallway_length = len(lines[hallway_row].strip()) - 2
    if hallway_length != config.geometry().hallway_length:
        raise ValueError(
            f"Hallway of length {hallway_length} does not fit {config.room_count} rooms"
        )
    return config
