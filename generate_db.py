#!/usr/bin/env python3
"""
generate_db.py: Pre-computes cube states to a fixed depth (QTM) from solved.

The table maps color string -> (parent color string, move from parent) and is
the backward half of the meet-in-the-middle search in regular_solver.py.
"""
import argparse
import logging
import pickle
from collections import deque

from cube_model import CubeState
from cube_moves import ALL_MOVES, apply_move

DEPTH_LIMIT = 5
DB_FILE = "halfway.pkl"

logger = logging.getLogger(__name__)


def generate(depth_limit=DEPTH_LIMIT, moves=ALL_MOVES):
    solved = CubeState()
    solved_key = solved.to_color_string()

    # Visited stores { State : (Parent_State, Move_From_Parent) }
    visited = {solved_key: (None, None)}
    queue = deque([(solved, 0)])

    logger.info("Generating database to depth %d...", depth_limit)

    count = 0
    depth_counts = {}

    while queue:
        curr, depth = queue.popleft()
        depth_counts[depth] = depth_counts.get(depth, 0) + 1

        if depth >= depth_limit:
            continue

        curr_key = curr.to_color_string()
        for m in moves:
            nxt = apply_move(curr.clone(), m)
            key = nxt.to_color_string()
            if key not in visited:
                visited[key] = (curr_key, m)
                queue.append((nxt, depth + 1))

        count += 1
        if count % 50000 == 0:
            logger.info("Processed %d states... current depth: %d %s", count, depth, depth_counts)

    logger.info("Generation complete. Total unique states: %d", len(visited))
    logger.info("States per depth: %s", dict(sorted(depth_counts.items())))
    return visited


def save_db(db, path=DB_FILE):
    with open(path, "wb") as f:
        pickle.dump(db, f, protocol=pickle.HIGHEST_PROTOCOL)


def load_db(path=DB_FILE):
    with open(path, "rb") as f:
        return pickle.load(f)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build the halfway table for the cube solver")
    parser.add_argument("--depth", type=int, default=DEPTH_LIMIT, help="BFS depth from solved")
    parser.add_argument("--db", default=DB_FILE, help="Output pickle path")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(asctime)s - %(levelname)s - %(message)s",
                        level=logging.DEBUG if args.verbose else logging.INFO)

    db = generate(args.depth)
    save_db(db, args.db)
    print(f"Saved {len(db)} states to {args.db}")


if __name__ == "__main__":
    main()
