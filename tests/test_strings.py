import pytest

from hitlanes.strings import find_char, split, strlcpy, to_lower, to_upper


def test_to_lower_ascii():
    assert to_lower("Hello World 123") == "hello world 123"


def test_case_round_trip_invariant():
    text = "MiXeD CaSe !?"
    assert to_lower(to_upper(text)) == to_lower(text)
    assert to_upper(to_lower(text)) == to_upper(text)


def test_non_ascii_untouched():
    assert to_lower("É") == "É"
    assert to_upper("é") == "é"


def test_find_char():
    assert find_char("abc", "b") is True
    assert find_char("abc", "z") is False


def test_find_char_stops_at_nul():
    assert find_char("ab\0cd", "c") is False


def test_find_char_rejects_multiple():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_strlcpy_truncates():
    assert strlcpy("hello", 3) == "he"


def test_strlcpy_fits():
    assert strlcpy("abc", 10) == "abc"


def test_strlcpy_length_bound():
    for size in range(1, 12):
        assert len(strlcpy("abcdefghij", size)) <= size - 1


def test_strlcpy_stops_at_nul():
    assert strlcpy("ab\0cd", 10) == "ab"


def test_strlcpy_zero_size():
    with pytest.raises(ValueError):
        strlcpy("abc", 0)


def test_split_drops_empty():
    assert split("a,,b,", ",") == ["a", "b"]


def test_split_empty():
    assert split("", ",") == []


def test_split_invariant():
    parts = split(",x,,yy,zzz,,", ",")
    assert all(part and "," not in part for part in parts)
    assert "".join(parts) == ",x,,yy,zzz,,".replace(",", "")