from .board import BurrowGeometry
from .state import BurrowState


def heuristic(geometry: BurrowGeometry, state: BurrowState) -> int:
    """Lower bound on the energy still needed to reach the goal.

    Every amphipod outside its home room is walked to the top slot of that
    room as if the burrow were otherwise empty. Amphipods already inside
    their home room cost nothing, even when they sit above a stranger and
    will have to step out again.
    """
    total = 0
    for index, amphipod in state.occupied():
        home = amphipod.home_room
        target = geometry.room_start(home)

        if geometry.is_hallway(index):
            total += geometry.step_distance(index, target) * amphipod.energy
            continue

        room, _ = geometry.room_cell(index)
        if room == home:
            continue

        entrance = geometry.entrance(room)
        steps = geometry.step_distance(entrance, index) + geometry.step_distance(
            entrance, target
        )
        total += steps * amphipod.energy
    return total
