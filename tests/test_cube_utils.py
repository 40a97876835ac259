import pytest
from colorama import Back

import cube_utils
from cube_model import CubeState, InvalidColorStringError
from cube_moves import apply_sequence
from cube_utils import render_net


def test_render_net_layout():
    lines = render_net(CubeState().to_color_string())
    assert len(lines) == 9
    # U and D rows are indented by one face width
    for i in (0, 1, 2, 6, 7, 8):
        assert lines[i].startswith(cube_utils.BLOCK * 3)
    assert lines[0].count(Back.WHITE) == 3
    assert lines[8].count(Back.YELLOW) == 3
    # middle band reads L F R B
    band = lines[4]
    assert band.index(Back.MAGENTA) < band.index(Back.GREEN) < band.index(Back.RED) < band.index(Back.BLUE)


def test_render_net_reflects_moves():
    text = apply_sequence(CubeState(), ["R"]).to_color_string()
    lines = render_net(text)
    # U's right column now shows F's green
    assert lines[0].count(Back.GREEN) == 1
    assert lines[0].count(Back.WHITE) == 2


@pytest.mark.parametrize("bad", ["", "w" * 53, "x" * 54])
def test_render_net_rejects_malformed_string(bad):
    with pytest.raises(InvalidColorStringError):
        render_net(bad)


def test_main_applies_moves(capsys):
    cube_utils.main(["R", "U"])
    out = capsys.readouterr().out
    expected = apply_sequence(CubeState(), ["R", "U"]).to_color_string()
    assert "Applying sequence: R U" in out
    assert expected in out
    assert "Solved: False" in out


def test_main_accepts_quoted_sequence(capsys):
    cube_utils.main(["R U R' U'"])
    out = capsys.readouterr().out
    assert "Applying sequence: R U R' U'" in out


def test_main_rejects_unknown_move(capsys):
    with pytest.raises(SystemExit) as exc:
        cube_utils.main(["R", "X"])
    assert exc.value.code == 1
    assert "Unknown move 'X'" in capsys.readouterr().out


def test_main_scramble_and_solve(db_file, capsys):
    cube_utils.main(["--scramble", "2", "--seed", "3", "--solve", "--db", db_file])
    out = capsys.readouterr().out
    assert "Scramble:" in out
    assert "Solution (" in out


def test_main_rejects_negative_scramble_length(capsys):
    with pytest.raises(SystemExit) as exc:
        cube_utils.main(["--scramble", "-1"])
    assert exc.value.code == 1
    assert "Error: scramble length must be non-negative" in capsys.readouterr().out


def test_main_zero_scramble_leaves_cube_solved(capsys):
    cube_utils.main(["--scramble", "0"])
    out = capsys.readouterr().out
    assert "Scramble:" not in out
    assert "Solved: True" in out
