"""
cube_model.py: Facelet model of the 3x3 Rubik's Cube.

Every face is stored as a 3x3 grid viewed from outside the cube, laid out
on the standard net:

          U
       L  F  R  B
          D

U row 0 touches B, U row 2 touches F. F, R, B and L have row 0 against U.
D row 0 touches F. L col 0 touches B, R col 0 touches F, B col 0 touches R.

Facelets are only ever rewritten by cube_moves; everything else reads them
through the accessors below.
"""

import collections
from enum import Enum


class Color(str, Enum):
    WHITE = 'w'
    YELLOW = 'y'
    RED = 'r'
    ORANGE = 'o'
    BLUE = 'b'
    GREEN = 'g'


class FaceName(str, Enum):
    UP = 'U'
    RIGHT = 'R'
    FRONT = 'F'
    DOWN = 'D'
    LEFT = 'L'
    BACK = 'B'


# Serialization order of the color string (the renderer reads it this way)
FACE_ORDER = (FaceName.UP, FaceName.RIGHT, FaceName.FRONT,
              FaceName.DOWN, FaceName.LEFT, FaceName.BACK)

SOLVED_COLORS = {
    FaceName.UP: Color.WHITE,
    FaceName.RIGHT: Color.RED,
    FaceName.FRONT: Color.GREEN,
    FaceName.DOWN: Color.YELLOW,
    FaceName.LEFT: Color.ORANGE,
    FaceName.BACK: Color.BLUE,
}

FACELETS_PER_FACE = 9
COLOR_STRING_LENGTH = FACELETS_PER_FACE * len(FACE_ORDER)


class InvalidColorStringError(ValueError):
    """Raised when an externally supplied color string cannot describe a cube."""


_SYMBOLS = frozenset(c.value for c in Color)


def check_color_string(text):
    """Fails fast on a string of the wrong length or with unknown symbols."""
    if len(text) != COLOR_STRING_LENGTH:
        raise InvalidColorStringError(
            f"expected {COLOR_STRING_LENGTH} facelets, got {len(text)}")
    bad = sorted({ch for ch in text if ch not in _SYMBOLS})
    if bad:
        raise InvalidColorStringError(f"unknown color symbol(s): {''.join(bad)}")


def _uniform_face(color):
    return [[color] * 3 for _ in range(3)]


def _copy_face(face):
    return [row[:] for row in face]


class CubeState:
    """Six 3x3 faces keyed by FaceName plus the append-only move history. Starts solved."""

    def __init__(self):
        self.reset()

    @classmethod
    def from_color_string(cls, text):
        """
        Builds a cube from a 54 character string in U R F D L B order.
        Only structural validity is checked (symbols, counts, centers),
        not whether the pattern is reachable by turning.
        """
        check_color_string(text)
        colors = [Color(ch) for ch in text]

        counts = collections.Counter(colors)
        wrong = {c.value: counts.get(c, 0) for c in Color if counts.get(c, 0) != FACELETS_PER_FACE}
        if wrong:
            raise InvalidColorStringError(f"each color must appear 9 times, got {wrong}")

        state = cls()
        for idx, name in enumerate(FACE_ORDER):
            chunk = colors[idx * FACELETS_PER_FACE:(idx + 1) * FACELETS_PER_FACE]
            state._faces[name] = [chunk[r * 3:r * 3 + 3] for r in range(3)]

        centers = [state._faces[name][1][1] for name in FACE_ORDER]
        if len(set(centers)) != len(FACE_ORDER):
            raise InvalidColorStringError("the six centers must be distinct colors")
        return state

    def clone(self):
        """Deep copy: no row list is shared with the original."""
        copy = CubeState.__new__(CubeState)
        copy._faces = {name: _copy_face(face) for name, face in self._faces.items()}
        copy._history = list(self._history)
        return copy

    def reset(self):
        self._faces = {name: _uniform_face(SOLVED_COLORS[name]) for name in FACE_ORDER}
        self._history = []

    # --- Read accessors ---

    def facelet(self, face, row, col):
        return self._faces[FaceName(face)][row][col]

    def face(self, face):
        return _copy_face(self._faces[FaceName(face)])

    def center(self, face):
        return self._faces[FaceName(face)][1][1]

    def is_face_solved(self, face):
        grid = self._faces[FaceName(face)]
        center = grid[1][1]
        return all(color == center for row in grid for color in row)

    def is_solved(self):
        return all(self.is_face_solved(name) for name in FACE_ORDER)

    @property
    def move_history(self):
        return tuple(self._history)

    def to_color_string(self):
        """All 54 facelets, face by face in FACE_ORDER, each face row-major."""
        return ''.join(
            color.value
            for name in FACE_ORDER
            for row in self._faces[name]
            for color in row
        )

    # --- Engine hooks (used by cube_moves only) ---

    def _grid(self, face):
        return self._faces[face]

    def _record(self, move):
        self._history.append(move)

    def __eq__(self, other):
        if not isinstance(other, CubeState):
            return NotImplemented
        return self._faces == other._faces

    __hash__ = None

    def __repr__(self):
        return f"CubeState({self.to_color_string()!r})"


# --- Functional aliases ---

def create_solved():
    return CubeState()


def clone(state):
    return state.clone()


def is_solved(state):
    return state.is_solved()


def to_color_string(state):
    return state.to_color_string()


def move_history(state):
    return state.move_history


def reset(state):
    state.reset()
