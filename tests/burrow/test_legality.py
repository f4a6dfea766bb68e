import numpy as np
import pytest

from src.burrow.board import Amphipod, BurrowGeometry
from src.burrow.legality import LegalitySnapshot
from src.burrow.state import BurrowState

A, B, C, D = Amphipod.A, Amphipod.B, Amphipod.C, Amphipod.D


@pytest.fixture
def geometry():
    return BurrowGeometry.for_rooms(depth=2)


def with_hallway(geometry, rooms, **occupants):
    hallway = [None] * geometry.hallway_length
    for position, amphipod in occupants.items():
        hallway[int(position.lstrip("h"))] = amphipod
    return BurrowState.encode(geometry, rooms, hallway=hallway)


class TestCanPlace:
    def test_mixed_rooms_cannot_receive(self, geometry):
        state = BurrowState.encode(geometry, [[B, A], [C, D], [B, C], [D, A]])
        snapshot = LegalitySnapshot.from_state(geometry, state)
        assert snapshot.can_place.tolist() == [False, False, False, False]

    def test_rooms_holding_only_their_kind(self, geometry):
        state = with_hallway(
            geometry, [[None, A], [None, None], [B, C], [D, D]], h3=A, h5=B, h7=C, h9=B
        )
        snapshot = LegalitySnapshot.from_state(geometry, state)
        assert snapshot.can_place.tolist() == [True, True, False, True]

    def test_goal_rooms_are_all_placeable(self, geometry):
        snapshot = LegalitySnapshot.from_state(geometry, BurrowState.goal(geometry))
        assert snapshot.can_place.all()


class TestReach:
    def test_empty_hallway_reaches_everywhere(self, geometry):
        state = BurrowState.encode(geometry, [[B, A], [C, D], [B, C], [D, A]])
        snapshot = LegalitySnapshot.from_state(geometry, state)
        assert snapshot.reach.shape == (4, 11)
        assert snapshot.reach.all()

    def test_blocker_cuts_off_far_side(self, geometry):
        state = with_hallway(geometry, [[None, A], [C, D], [B, C], [D, A]], h5=B)
        snapshot = LegalitySnapshot.from_state(geometry, state)

        # From room A (entrance 2) the blocker at 5 is itself reachable,
        # everything beyond it is not.
        assert snapshot.reach[0, :6].all()
        assert not snapshot.reach[0, 6:].any()

        # From room C (entrance 6) the blocker hides positions 0..4.
        assert not snapshot.reach[2, :5].any()
        assert snapshot.reach[2, 5:].all()

    def test_blocker_next_to_entrance(self, geometry):
        state = with_hallway(geometry, [[None, A], [C, D], [B, C], [D, A]], h3=B)
        snapshot = LegalitySnapshot.from_state(geometry, state)

        assert snapshot.reach[1, 3]
        assert not snapshot.reach[1, 1]
        assert snapshot.reach[1, 5]

    def test_position_itself_is_not_counted(self, geometry):
        state = with_hallway(geometry, [[None, A], [C, D], [B, C], [D, A]], h0=B)
        snapshot = LegalitySnapshot.from_state(geometry, state)
        assert snapshot.reach[:, 0].all()


class TestOccupants:
    def test_top_occupant(self, geometry):
        state = with_hallway(geometry, [[None, B], [C, D], [B, C], [D, A]], h0=A)
        snapshot = LegalitySnapshot.from_state(geometry, state)

        assert snapshot.top_occupant(0) == geometry.cell_index(0, 1)
        assert snapshot.top_occupant(1) == geometry.cell_index(1, 0)

    def test_top_occupant_of_placeable_room_is_a_defect(self, geometry):
        snapshot = LegalitySnapshot.from_state(geometry, BurrowState.goal(geometry))
        with pytest.raises(AssertionError):
            snapshot.top_occupant(0)

    def test_destination_is_deepest_free_slot(self, geometry):
        state = with_hallway(
            geometry, [[None, A], [None, None], [C, C], [D, D]], h1=A, h3=B, h5=B
        )
        snapshot = LegalitySnapshot.from_state(geometry, state)

        assert snapshot.destination(A) == geometry.cell_index(0, 0)
        assert snapshot.destination(B) == geometry.cell_index(1, 1)

    def test_move_checks(self, geometry):
        state = with_hallway(
            geometry, [[None, A], [None, None], [C, C], [D, D]], h1=A, h3=B, h5=B
        )
        snapshot = LegalitySnapshot.from_state(geometry, state)

        assert snapshot.can_move_to_room(1, A)
        assert snapshot.can_move_to_room(3, B)
        assert snapshot.can_move_to_room(5, B)
        # Entrances and occupied cells are never stopping places.
        assert not snapshot.can_move_to_hallway(0, 2)
        assert not snapshot.can_move_to_hallway(0, 1)


class TestIdempotence:
    def test_snapshot_is_reproducible(self, geometry):
        state = with_hallway(geometry, [[None, B], [C, D], [B, C], [D, A]], h0=A, h7=None)

        first = LegalitySnapshot.from_state(geometry, state)
        second = LegalitySnapshot.from_state(geometry, state)

        assert np.array_equal(first.filled, second.filled)
        assert np.array_equal(first.can_place, second.can_place)
        assert np.array_equal(first.reach, second.reach)
        assert first.top_occupant(0) == second.top_occupant(0)

    def test_snapshot_does_not_touch_state(self, geometry):
        state = BurrowState.encode(geometry, [[B, A], [C, D], [B, C], [D, A]])
        before = state.cells
        LegalitySnapshot.from_state(geometry, state)
        assert state.cells == before
