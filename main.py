#!/usr/bin/env python3
"""
Amphipod Burrow Solver

Reads a burrow diagram and prints the minimum energy needed to sort every
amphipod into its home room, for the burrow as drawn and for its unfolded,
four-deep version.
"""

import argparse
import sys

from src.burrow.levels import BurrowConfig
from src.search.puzzle import AmphipodPuzzle
from src.search.solver import NoSolution
from src.util.logger import logger, set_component_level


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r") as f:
        return f.read()


def format_answer(answer) -> str:
    if isinstance(answer, NoSolution):
        return "no solution"
    return str(answer)


def print_moves(puzzle: AmphipodPuzzle, unfold: bool) -> None:
    config: BurrowConfig = puzzle.config.unfold() if unfold else puzzle.config
    geometry = config.geometry()

    print(config.initial_state(geometry).render(geometry))
    total = 0
    for move, state in puzzle.optimal_moves(unfold=unfold):
        total += move.cost
        print()
        print(f"{move.describe(geometry)}, total {total}")
        print(state.render(geometry))
    print()


def run(path: str, part: str, show_path: bool) -> int:
    log = logger.bind(component="cli")
    try:
        puzzle = AmphipodPuzzle.from_text(read_input(path))
    except (OSError, ValueError) as e:
        log.error(f"Could not load burrow from {path}: {e}")
        return 1

    if part in ("1", "both"):
        if show_path:
            print_moves(puzzle, unfold=False)
        print(f"Part 1: {format_answer(puzzle.part_one())}")

    if part in ("2", "both"):
        if puzzle.config.room_count != 4:
            log.error("Part 2 needs a burrow with four rooms")
            return 1
        if show_path:
            print_moves(puzzle, unfold=True)
        print(f"Part 2: {format_answer(puzzle.part_two())}")

    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Amphipod Burrow Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py input.txt              # Both parts
  python main.py input.txt --part 2     # Unfolded burrow only
  python main.py - --show-path < input  # Read stdin, print every move
        """,
    )

    parser.add_argument(
        "input", nargs="?", default="-", help="Burrow diagram file, or - for stdin"
    )
    parser.add_argument(
        "--part", choices=["1", "2", "both"], default="both", help="Which part to solve"
    )
    parser.add_argument(
        "--show-path", action="store_true", help="Print the optimal move sequence"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log search progress"
    )

    args = parser.parse_args()

    if args.verbose:
        set_component_level("search", "DEBUG")

    sys.exit(run(args.input, args.part, args.show_path))


if __name__ == "__main__":
    main()
