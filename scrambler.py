"""
scrambler.py: Random scrambles built from the 12 quarter turns.
"""

import random

from cube_moves import ALL_MOVES, apply_sequence

DEFAULT_SCRAMBLE_LENGTH = 20


def random_moves(n, rng=None, seed=None):
    """
    Draws n tokens independently and uniformly from ALL_MOVES.
    Repeats and immediate inverses are kept as drawn.
    """
    if n < 0:
        raise ValueError(f"scramble length must be non-negative, got {n}")
    if rng is None:
        rng = random.Random(seed)
    return [rng.choice(ALL_MOVES) for _ in range(n)]


def scramble(state, n=DEFAULT_SCRAMBLE_LENGTH, rng=None, seed=None):
    moves = random_moves(n, rng=rng, seed=seed)
    apply_sequence(state, moves)
    return state, moves
