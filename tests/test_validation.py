import pytest

from raycube.validation import (
    ParseError,
    check_map,
    find_player_direction,
    has_bad_doors,
    has_inner_blank_line,
    has_invalid_chars,
    is_blank_line,
    touches_void,
)

CLOSED = ["111111", "100001", "10N0C1", "111111"]


@pytest.mark.parametrize(
    "line, expected",
    [("", True), ("  \t\n", True), (None, True), ("  1 ", False), ("0", False)],
)
def test_is_blank_line(line, expected):
    assert is_blank_line(line) is expected


def test_has_invalid_chars():
    assert has_invalid_chars(["111", "1X1", "111"]) is True
    assert has_invalid_chars(["1 1\t", "10N1", "1OC1"]) is False


def test_find_player_direction_single():
    assert find_player_direction(["111", "1W1", "111"]) == "W"


@pytest.mark.parametrize(
    "grid",
    [["111", "101", "111"], ["1111", "1NS1", "1111"]],
)
def test_find_player_direction_requires_exactly_one(grid):
    assert find_player_direction(grid) is None


def test_door_in_open_floor_is_bad():
    assert has_bad_doors(["11011", "10C01", "11011"]) is True


def test_two_half_open_doors_in_a_row_are_bad():
    assert has_bad_doors(["0C0C0"]) is True


def test_door_between_walls_is_fine():
    assert has_bad_doors(["111", "1C1", "111"]) is False
    assert has_bad_doors(CLOSED) is False


def test_inner_blank_line():
    assert has_inner_blank_line(["111", "", "111"]) is True
    assert has_inner_blank_line(["", "111"]) is True
    assert has_inner_blank_line(["111", "   ", "\t"]) is False


def test_touches_void_inner_cell():
    assert touches_void(["111", "101", "111"], 1, 1) is False


def test_touches_void_next_to_space():
    assert touches_void(["1111", "10 1", "1111"], 1, 1) is True


def test_touches_void_on_edges():
    assert touches_void(["101", "111"], 0, 1) is True
    assert touches_void(["111", "011", "111"], 1, 0) is True
    assert touches_void(["111", "101", "101"], 2, 1) is True


def test_touches_void_past_shorter_row():
    assert touches_void(["11", "101", "111"], 1, 1) is False
    assert touches_void(["1", "101", "111"], 1, 1) is True


def test_walls_never_touch_void():
    assert touches_void(["1"], 0, 0) is False


def test_tab_is_not_void():
    assert touches_void(["1111", "10\t1", "1111"], 1, 1) is False


def test_check_map_returns_direction():
    assert check_map(CLOSED) == "N"


@pytest.mark.parametrize(
    "grid",
    [
        ["111", "1Z1", "111"],
        ["111", "101", "111"],
        ["11011", "1NC01", "11011", "11111"],
        ["1111", "1N01", "", "1111"],
        ["1111", "1N0 ", "1111"],
        [],
    ],
)
def test_check_map_rejects(grid):
    with pytest.raises(ParseError):
        check_map(grid)