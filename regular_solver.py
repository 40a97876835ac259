#!/usr/bin/env python3
"""
regular_solver.py: Single-machine 3x3 cube solver (bounded, best effort).
Forward BFS from the scrambled state until it meets the halfway table
built by generate_db.py. Gives up once MAX_FORWARD_DEPTH levels are spent.
"""
import argparse
import logging
import sys

from cube_model import Color, CubeState, InvalidColorStringError
from cube_moves import ALL_MOVES, InvalidMoveError, apply_move, apply_sequence, get_inverse_move, parse_moves
from generate_db import DB_FILE, load_db

MAX_FORWARD_DEPTH = 6

COLOR_SYMBOLS = frozenset(c.value for c in Color)

logger = logging.getLogger(__name__)


def reconstruct_full_path(meet_key, forward_path, backward_db):
    """
    Combines the forward path (Start -> Meet)
    with the backward path (Meet -> Solved).
    """
    full_path = list(forward_path)
    curr = meet_key
    back_moves = []

    # Traceback from Meet -> Solved
    while True:
        entry = backward_db.get(curr)
        if not entry or entry[0] is None:
            break

        parent, move = entry
        back_moves.append(get_inverse_move(move))
        curr = parent

    return full_path + back_moves


def expand_frontier(tasks, backward_db, moves=ALL_MOVES):
    """
    Expands one BFS level. Returns (solution, children, explored) where
    solution is a full move list as soon as any child is in the table.
    None entries in tasks are padding and are skipped.
    """
    children = []
    explored = 0

    for task in tasks:
        if task is None:
            continue

        curr_state, curr_path = task
        for m_name in moves:
            explored += 1
            nxt = apply_move(curr_state.clone(), m_name)
            key = nxt.to_color_string()

            if key in backward_db:
                return reconstruct_full_path(key, curr_path + [m_name], backward_db), children, explored

            children.append((nxt, curr_path + [m_name]))

    return None, children, explored


def solve(state, backward_db, max_depth=MAX_FORWARD_DEPTH):
    """
    Returns a move list taking state to solved, or None if no solution
    exists within max_depth forward levels plus the table depth.
    The given state is not modified.
    """
    start = state.clone()
    start_key = start.to_color_string()

    if start_key in backward_db:
        return reconstruct_full_path(start_key, [], backward_db)

    frontier = [(start, [])]
    global_visited = {start_key}

    for step in range(max_depth):
        logger.debug("[Step %d] Frontier size: %d", step, len(frontier))
        solution, children, _ = expand_frontier(frontier, backward_db)
        if solution is not None:
            return solution

        frontier = []
        for nxt, path in children:
            key = nxt.to_color_string()
            if key not in global_visited:
                global_visited.add(key)
                frontier.append((nxt, path))

        if not frontier:
            break

    logger.info("Search exhausted after %d forward levels", max_depth)
    return None


def read_start_state(raw):
    """
    Accepts a 54 character color string or a move sequence to scramble a
    solved cube with. raw may also name a file holding either.
    """
    try:
        with open(raw, 'r') as f:
            raw = f.read().strip()
    except (OSError, ValueError):
        pass

    # move tokens are upper case, color symbols lower case
    if raw and set(raw) <= COLOR_SYMBOLS:
        return CubeState.from_color_string(raw)
    return apply_sequence(CubeState(), parse_moves(raw))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Bounded meet-in-the-middle cube solver")
    parser.add_argument("input", help="Color string, scramble sequence, or file path")
    parser.add_argument("--db", default=DB_FILE, help="Halfway table produced by generate_db.py")
    parser.add_argument("--max-depth", type=int, default=MAX_FORWARD_DEPTH, help="Forward BFS levels")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(asctime)s - %(levelname)s - %(message)s",
                        level=logging.DEBUG if args.verbose else logging.INFO)

    # --- 1. Load Database ---
    print(f"Loading {args.db}...")
    try:
        backward_db = load_db(args.db)
    except FileNotFoundError:
        print(f"Error: {args.db} missing. Run generate_db.py first.")
        sys.exit(1)
    print("Database loaded.")

    # --- 2. Setup Input ---
    try:
        start_state = read_start_state(args.input)
    except (InvalidMoveError, InvalidColorStringError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    # --- 3. Search ---
    solution = solve(start_state, backward_db, max_depth=args.max_depth)
    if solution is None:
        print("Search exhausted. No solution found within the depth budget.")
        sys.exit(1)

    print("\n" + "=" * 40)
    print("*** SOLUTION FOUND ***")
    print(f"Moves: {len(solution)}")
    print(f"Sequence: {' '.join(solution)}")
    print("=" * 40)


if __name__ == "__main__":
    main()
