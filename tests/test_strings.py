import pytest

from raycube.strings import atoi, split_any, trim


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-7", -7),
        ("+5", 5),
        ("12abc", 12),
        ("255", 255),
        ("", 0),
        ("abc", 0),
        ("-", 0),
    ],
)
def test_atoi_reads_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_does_not_skip_whitespace():
    assert atoi(" 5") == 0


def test_atoi_missing_value_is_negative_one():
    assert atoi(None) == -1


def test_atoi_only_one_sign():
    assert atoi("--3") == 0


def test_split_any_color_line():
    assert split_any("255,0,10\n", ",\n") == ["255", "0", "10"]


def test_split_any_collapses_runs_of_delimiters():
    assert split_any("  NO \t ./a.png", " \t") == ["NO", "./a.png"]


def test_split_any_only_delimiters_gives_empty_list():
    assert split_any(" \t \t", " \t") == []


def test_split_any_empty_text():
    assert split_any("", ",") == []


def test_split_any_without_delimiters_keeps_whole_text():
    assert split_any("abc", "") == ["abc"]


def test_split_any_pieces_rejoin_to_text_without_delimiters():
    text = "a,,b\nc,d"
    assert "".join(split_any(text, ",\n")) == "abcd"


def test_trim_strips_newlines():
    assert trim("path.png\n", "\n") == "path.png"


def test_trim_both_ends_and_keeps_middle():
    assert trim("\n\na\nb\n", "\n") == "a\nb"


def test_trim_everything_gives_empty():
    assert trim("\n\n", "\n") == ""


def test_trim_none_passes_through():
    assert trim(None, "\n") is None


def test_trim_empty_set_keeps_text():
    assert trim(" x ", "") == " x "