import pytest

import cube_model
from cube_model import (
    COLOR_STRING_LENGTH,
    Color,
    CubeState,
    FaceName,
    InvalidColorStringError,
    check_color_string,
)
from cube_moves import apply_move, apply_sequence

SOLVED_STRING = "w" * 9 + "r" * 9 + "g" * 9 + "y" * 9 + "o" * 9 + "b" * 9


def test_new_cube_is_solved():
    cube = CubeState()
    assert cube.is_solved()
    assert cube.move_history == ()
    assert cube.to_color_string() == SOLVED_STRING


def test_centers_match_solved_colors():
    cube = CubeState()
    assert cube.center(FaceName.UP) == Color.WHITE
    assert cube.center('R') == Color.RED
    assert cube.center('F') == Color.GREEN
    assert cube.center('D') == Color.YELLOW
    assert cube.center('L') == Color.ORANGE
    assert cube.center('B') == Color.BLUE


def test_color_string_is_fixed_length():
    cube = apply_sequence(CubeState(), ["R", "U", "F'", "L", "D'", "B"])
    text = cube.to_color_string()
    assert len(text) == COLOR_STRING_LENGTH
    assert set(text) <= set("wyrobg")


def test_clone_shares_no_storage():
    original = apply_sequence(CubeState(), ["R", "U"])
    copy = original.clone()
    assert copy == original
    assert copy.move_history == original.move_history

    apply_move(copy, "F")
    assert copy != original
    assert original.move_history == ("R", "U")
    assert original.to_color_string() == apply_sequence(CubeState(), ["R", "U"]).to_color_string()


def test_face_accessor_returns_copy():
    cube = CubeState()
    grid = cube.face('U')
    grid[0][0] = Color.RED
    assert cube.facelet('U', 0, 0) == Color.WHITE


def test_reset_restores_solved_and_clears_history():
    cube = apply_sequence(CubeState(), ["R", "U", "R'", "F"])
    assert not cube.is_solved()
    cube.reset()
    assert cube.is_solved()
    assert cube.move_history == ()
    assert cube == CubeState()


def test_is_face_solved_after_single_turn():
    cube = apply_move(CubeState(), "R")
    assert cube.is_face_solved('R')
    assert cube.is_face_solved('L')
    assert not cube.is_face_solved('U')
    assert not cube.is_face_solved('F')
    assert not cube.is_solved()


def test_equality_ignores_history():
    turned = apply_sequence(CubeState(), ["U"] * 4)
    assert turned == CubeState()
    assert len(turned.move_history) == 4


def test_cube_state_is_unhashable():
    with pytest.raises(TypeError):
        hash(CubeState())


def test_from_color_string_round_trip():
    scrambled = apply_sequence(CubeState(), ["R", "U", "R'", "U'", "F", "L'", "D", "B'"])
    text = scrambled.to_color_string()
    rebuilt = CubeState.from_color_string(text)
    assert rebuilt == scrambled
    assert rebuilt.to_color_string() == text
    assert rebuilt.move_history == ()


def test_from_color_string_wrong_length():
    with pytest.raises(InvalidColorStringError):
        CubeState.from_color_string(SOLVED_STRING[:-1])


def test_from_color_string_unknown_symbol():
    with pytest.raises(InvalidColorStringError, match="x"):
        CubeState.from_color_string("x" + SOLVED_STRING[1:])


def test_from_color_string_bad_counts():
    with pytest.raises(InvalidColorStringError, match="9 times"):
        CubeState.from_color_string("r" + SOLVED_STRING[1:])


def test_from_color_string_duplicate_centers():
    chars = list(SOLVED_STRING)
    # swap the U center with an R edge facelet: counts stay at 9 each
    chars[4], chars[9] = chars[9], chars[4]
    with pytest.raises(InvalidColorStringError, match="centers"):
        CubeState.from_color_string("".join(chars))


def test_invalid_color_string_is_value_error():
    with pytest.raises(ValueError):
        check_color_string("")


def test_functional_aliases():
    cube = cube_model.create_solved()
    assert cube_model.is_solved(cube)
    apply_move(cube, "L")
    copy = cube_model.clone(cube)
    assert cube_model.to_color_string(copy) == cube.to_color_string()
    assert cube_model.move_history(cube) == ("L",)
    cube_model.reset(cube)
    assert cube_model.is_solved(cube)
    assert not cube_model.is_solved(copy)
