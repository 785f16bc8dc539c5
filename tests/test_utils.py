import pytest

from platformer.utils import split


def test_default_delimiter_is_tab():
    assert split("1\t2\t3") == ["1", "2", "3"]


def test_no_delimiter_gives_single_token():
    assert split("abc") == ["abc"]


def test_empty_line_gives_one_empty_token():
    assert split("") == [""]


def test_empty_fields_are_kept():
    assert split("a,,b", ",") == ["a", "", "b"]


def test_trailing_delimiter_gives_trailing_empty_token():
    assert split("a\t") == ["a", ""]


def test_multi_character_delimiter_resumes_one_past_match():
    assert split("a::b", "::") == ["a", ":b"]


def test_empty_delimiter_rejected():
    with pytest.raises(ValueError):
        split("abc", "")


@pytest.mark.parametrize("text", ["", "x", "a\tb", "\t\t", "10\t20\t30\t"])
def test_join_round_trip_for_single_char_delimiter(text):
    assert "\t".join(split(text)) == text