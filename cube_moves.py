"""
cube_moves.py: Quarter-turn move engine for the 3x3 cube (QTM).

A move is always two paired operations:
  1. the turning face's 9 facelets rotate in place;
  2. the 12 facelets on the four neighbouring strips cycle one strip along.
"""

from cube_model import FaceName

U, R, F, D, L, B = (FaceName.UP, FaceName.RIGHT, FaceName.FRONT,
                    FaceName.DOWN, FaceName.LEFT, FaceName.BACK)

ALL_MOVES = ('F', "F'", 'B', "B'", 'L', "L'", 'R', "R'", 'U', "U'", 'D', "D'")

# token -> (face, clockwise)
MOVE_TABLE = {m: (FaceName(m[0]), not m.endswith("'")) for m in ALL_MOVES}


def _row(face, r, reverse=False):
    cells = [(face, r, c) for c in range(3)]
    return cells[::-1] if reverse else cells


def _col(face, c, reverse=False):
    cells = [(face, r, c) for r in range(3)]
    return cells[::-1] if reverse else cells


# Strips around each face in the order a clockwise turn carries them:
# facelet k of strip i lands on facelet k of strip i+1 (the last wraps to the first).
STRIPS = {
    U: (_row(F, 0), _row(L, 0), _row(B, 0), _row(R, 0)),
    D: (_row(F, 2), _row(R, 2), _row(B, 2), _row(L, 2)),
    F: (_row(U, 2), _col(R, 0), _row(D, 0, reverse=True), _col(L, 2, reverse=True)),
    B: (_row(U, 0, reverse=True), _col(L, 0), _row(D, 2), _col(R, 2, reverse=True)),
    L: (_col(U, 0), _col(F, 0), _col(D, 0), _col(B, 2, reverse=True)),
    R: (_col(U, 2), _col(B, 0, reverse=True), _col(D, 2), _col(F, 2)),
}


class InvalidMoveError(ValueError):
    """Raised for any token outside the 12 quarter-turn moves."""


def parse_move(token):
    token = token.strip()
    if token not in MOVE_TABLE:
        raise InvalidMoveError(f"Unknown move '{token}'")
    return token


def parse_moves(text):
    """Splits a whitespace- or comma-separated move string into validated tokens."""
    return [parse_move(tok) for tok in text.replace(",", " ").split()]


def get_inverse_move(move_str):
    """Inverts a move string (e.g., U -> U', U' -> U)."""
    if "'" in move_str:
        return move_str.replace("'", "")
    return move_str + "'"


def invert_sequence(moves):
    return [get_inverse_move(m) for m in reversed(moves)]


# --- Face self-rotation ---

def rotate_face_clockwise(face):
    """Facelet at (r, c) moves to (c, 2 - r)."""
    new_face = [[None] * 3 for _ in range(3)]
    for r in range(3):
        for c in range(3):
            new_face[c][2 - r] = face[r][c]
    return new_face


def rotate_face_counter_clockwise(face):
    """Facelet at (r, c) moves to (2 - c, r)."""
    new_face = [[None] * 3 for _ in range(3)]
    for r in range(3):
        for c in range(3):
            new_face[2 - c][r] = face[r][c]
    return new_face


# --- Strip cycle ---

def _cycle_strips(state, strips, clockwise):
    order = list(strips) if clockwise else list(reversed(strips))
    values = [[state._grid(f)[r][c] for (f, r, c) in strip] for strip in order]
    # every strip takes the colors of the one before it in turning order
    for i, strip in enumerate(order):
        source = values[i - 1]
        for k, (f, r, c) in enumerate(strip):
            state._grid(f)[r][c] = source[k]


def touched_facelets(move):
    """The 21 (face, row, col) positions a move rewrites: 9 on the face, 12 on strips."""
    face, _ = MOVE_TABLE[parse_move(move)]
    cells = [(face, r, c) for r in range(3) for c in range(3)]
    for strip in STRIPS[face]:
        cells.extend(strip)
    return cells


def apply_move(state, move):
    """Turns one face a quarter turn in place and returns the same state."""
    if move not in MOVE_TABLE:
        raise InvalidMoveError(f"Unknown move '{move}'")
    face, clockwise = MOVE_TABLE[move]

    grid = state._grid(face)
    rotated = rotate_face_clockwise(grid) if clockwise else rotate_face_counter_clockwise(grid)
    for r in range(3):
        grid[r][:] = rotated[r]

    _cycle_strips(state, STRIPS[face], clockwise)
    state._record(move)
    return state


def apply_sequence(state, moves):
    for m in moves:
        apply_move(state, m)
    return state
