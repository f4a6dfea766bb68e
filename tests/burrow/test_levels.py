import pytest

from src.burrow.board import Amphipod
from src.burrow.levels import BurrowConfig, parse_diagram

A, B, C, D = Amphipod.A, Amphipod.B, Amphipod.C, Amphipod.D

EXAMPLE = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""


class TestParseDiagram:
    def test_example(self):
        config = parse_diagram(EXAMPLE)

        assert config.room_count == 4
        assert config.depth == 2
        assert config.rooms == ((B, A), (C, D), (B, C), (D, A))

    def test_unfolded_diagram(self):
        text = """\
#############
#...........#
###B#C#B#D###
  #D#C#B#A#
  #D#B#A#C#
  #A#D#C#A#
  #########
"""
        config = parse_diagram(text)
        assert config.depth == 4
        assert config == parse_diagram(EXAMPLE).unfold()

    def test_two_room_burrow(self):
        text = "#########\n#.......#\n###B#A###\n  #A#B#\n  #####\n"
        config = parse_diagram(text)
        assert config.rooms == ((B, A), (A, B))

    def test_missing_hallway(self):
        with pytest.raises(ValueError, match="hallway"):
            parse_diagram("###B#C#B#D###\n  #A#D#C#A#\n")

    def test_unknown_glyph(self):
        with pytest.raises(ValueError):
            parse_diagram(EXAMPLE.replace("###B#C", "###E#C"))

    def test_empty_slot_in_input(self):
        with pytest.raises(ValueError):
            parse_diagram(EXAMPLE.replace("###B#C", "###.#C"))

    def test_wrong_counts(self):
        with pytest.raises(ValueError, match="kind"):
            parse_diagram(EXAMPLE.replace("###B#C", "###A#C"))

    def test_hallway_length_mismatch(self):
        with pytest.raises(ValueError, match="Hallway"):
            parse_diagram(EXAMPLE.replace("#...........#", "#.........#"))


class TestBurrowConfig:
    def test_from_glyphs(self):
        config = BurrowConfig.from_rooms([["B", "A"], ["A", "B"]])
        assert config.rooms == ((B, A), (A, B))
        assert config.geometry().hallway_length == 7

    def test_validate_reports_problems(self):
        assert BurrowConfig(((A, B), (B, A))).validate() == []

        errors = BurrowConfig(((A, A), (B,))).validate()
        assert errors == ["Rooms have uneven depths: [1, 2]"]

        errors = BurrowConfig(((A, A), (B, C))).validate()
        assert len(errors) == 2

        assert BurrowConfig(()).validate()

    def test_from_rooms_rejects_invalid(self):
        with pytest.raises(ValueError, match="Invalid burrow"):
            BurrowConfig.from_rooms([[A, A], [A, B]])

    def test_unfold_inserts_fixed_rows(self):
        config = parse_diagram(EXAMPLE).unfold()
        assert config.rooms == (
            (B, D, D, A),
            (C, C, B, D),
            (B, B, A, C),
            (D, A, C, A),
        )
        assert config.validate() == []

    def test_initial_state(self):
        config = parse_diagram(EXAMPLE)
        geometry = config.geometry()
        state = config.initial_state(geometry)
        assert state.room(geometry, 1) == (C, D)

    def test_dict_round_trip(self):
        config = parse_diagram(EXAMPLE)
        data = config.to_dict()
        assert data == {"rooms": [["B", "A"], ["C", "D"], ["B", "C"], ["D", "A"]]}
        assert BurrowConfig.from_dict(data) == config
