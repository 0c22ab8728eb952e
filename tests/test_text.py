import pytest

from deeplib.text import WIDE_CHAR_SIZE, calc_bytes_size, calc_length


def test_length_plain():
    assert calc_length("hello") == len("hello")
    assert calc_length("") == 0


def test_length_stops_at_nul():
    assert calc_length("ab\0cd") == 2
    assert calc_length("\0abc") == 0


def test_length_counts_characters_not_bytes():
    word = "héllo"
    assert calc_length(word) == len(word)


@pytest.mark.parametrize("char_size", [1, 2, 4])
def test_bytes_size_is_length_times_char_size(char_size):
    text = "deep\0lib"
    assert calc_bytes_size(text, char_size) == calc_length(text) * char_size


def test_bytes_size_default_char_size():
    assert calc_bytes_size("abc") == 3 * WIDE_CHAR_SIZE


def test_bytes_size_empty():
    assert calc_bytes_size("", 4) == 0


@pytest.mark.parametrize("char_size", [0, -2])
def test_bytes_size_rejects_bad_char_size(char_size):
    with pytest.raises(ValueError):
        calc_bytes_size("abc", char_size)