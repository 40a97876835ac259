#!/usr/bin/env python3
"""
cube_utils.py: Terminal rendering and move applicator for the 3x3 cube.
The renderer only ever sees the 54 character color string.
"""

import argparse
import logging
import sys

import colorama
from colorama import Back, Style

from cube_model import FACE_ORDER, FACELETS_PER_FACE, CubeState, FaceName, check_color_string
from cube_moves import InvalidMoveError, apply_sequence, parse_moves
from generate_db import DB_FILE, load_db
from regular_solver import solve
from scrambler import scramble

# Define Block Style (2 spaces for a square look)
BLOCK = "  "

# NOTE: Standard terminals lack "Orange", so we use MAGENTA for it.
COLORS = {
    'w': Back.WHITE,
    'y': Back.YELLOW,
    'r': Back.RED,
    'o': Back.MAGENTA,
    'b': Back.BLUE,
    'g': Back.GREEN,
}

OFFSETS = {name: idx * FACELETS_PER_FACE for idx, name in enumerate(FACE_ORDER)}


def render_net(color_string):
    """
    Returns the lines of the unfolded cube:
           U
        L  F  R  B
           D
    """
    check_color_string(color_string)

    def b(face, row, col):
        """Returns a colored block for one facelet."""
        color = COLORS[color_string[OFFSETS[face] + row * 3 + col]]
        return f"{color}{BLOCK}{Style.RESET_ALL}"

    def face_row(face, row):
        return "".join(b(face, row, col) for col in range(3))

    # Spacer for the indentation
    S = BLOCK * 3

    lines = []
    for row in range(3):
        lines.append(S + face_row(FaceName.UP, row))
    for row in range(3):
        lines.append("".join(face_row(face, row) for face in
                             (FaceName.LEFT, FaceName.FRONT, FaceName.RIGHT, FaceName.BACK)))
    for row in range(3):
        lines.append(S + face_row(FaceName.DOWN, row))
    return lines


def visualize_cube(color_string):
    """Prints a visual representation of the cube using colorama."""
    print("\nState Visualization:")
    for line in render_net(color_string):
        print(line)
    print("")


def main(argv=None):
    parser = argparse.ArgumentParser(description="3x3 Cube Move Applicator")
    parser.add_argument("moves", nargs="*", help="Sequence of moves (e.g. R U R' F)")
    parser.add_argument("--scramble", type=int, metavar="N", help="Scramble with N random moves first")
    parser.add_argument("--seed", type=int, help="Seed for --scramble")
    parser.add_argument("--solve", action="store_true", help="Run the bounded solver on the result")
    parser.add_argument("--db", help="Halfway table for --solve")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    colorama.init(autoreset=True)

    logging.basicConfig(format="%(asctime)s - %(levelname)s - %(message)s",
                        level=logging.DEBUG if args.verbose else logging.INFO)

    # 1. Start Solved
    cube = CubeState()

    # 2. Determine Moves
    # Accepts: cube_utils.py R U R'  or  cube_utils.py "R U R'"
    try:
        moves = parse_moves(" ".join(args.moves))
    except InvalidMoveError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("Initial State:")
    visualize_cube(cube.to_color_string())

    if args.scramble:
        try:
            _, drawn = scramble(cube, args.scramble, seed=args.seed)
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)
        print(f"Scramble: {' '.join(drawn)}")

    if moves:
        print(f"Applying sequence: {' '.join(moves)}")
        apply_sequence(cube, moves)

    visualize_cube(cube.to_color_string())
    print("Final Color String:")
    print(cube.to_color_string())
    print(f"Solved: {cube.is_solved()}")

    if args.solve:
        db_path = args.db or DB_FILE
        try:
            backward_db = load_db(db_path)
        except FileNotFoundError:
            print(f"Error: {db_path} missing. Run generate_db.py first.")
            sys.exit(1)

        solution = solve(cube, backward_db)
        if solution is None:
            print("Search exhausted. No solution found within the depth budget.")
        else:
            print(f"Solution ({len(solution)} moves): {' '.join(solution)}")


if __name__ == "__main__":
    main()
