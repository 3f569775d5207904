import pytest

from tomchase.strutil import (
    atoi,
    itoa,
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -42abc", -42), ("\t\n+17", 17), ("abc", 0), ("", 0), ("--5", 0)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_pieces():
    assert split("  a b  c ", " ") == ["a", "b", "c"]


def test_split_no_words():
    assert split("    ", " ") == []


def test_split_join_round_trip():
    words = ["tom", "jerry", "house"]
    assert split(",".join(words), ",") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strchr_and_strrchr():
    text = "map.ber.ber"
    assert strchr(text, ".") == text.index(".")
    assert strrchr(text, ".") == text.rindex(".")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_strchr_nul_finds_end():
    assert strchr("abc", 0) == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_accepts_int_code():
    assert strchr("hello", ord("l")) == strchr("hello", "l")


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")
    assert strlen("hello") == len("hello")


def test_strdup_copies():
    assert strdup("tom") == "tom"


def test_strjoin():
    assert strjoin("so", "_long") == "so_long"
    assert strjoin("", "") == ""


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def upper_at(index, seq):
        seen.append(index)
        seq[index] = seq[index].upper()

    assert striteri(chars, upper_at) is None
    assert chars == ["A", "B", "C"]
    assert seen == [0, 1, 2]


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("", lambda i, c: c) == ""


def test_strlcpy_truncates():
    copied, full = strlcpy("hello", 3)
    assert copied == "he"
    assert full == len("hello")


def test_strlcpy_zero_size():
    copied, full = strlcpy("hello", 0)
    assert copied == ""
    assert full == len("hello")


def test_strlcpy_large_size_copies_all():
    assert strlcpy("hello", 100) == ("hello", len("hello"))


def test_strlcat_appends():
    result, total = strlcat("ab", "cd", 10)
    assert result == "abcd"
    assert total == len("abcd")


def test_strlcat_zero_size():
    assert strlcat("ab", "xyz", 0) == ("ab", len("xyz"))


def test_strlcat_size_not_larger_than_dst():
    result, total = strlcat("abcd", "xy", 2)
    assert result == "abcd"
    assert total == 2 + len("xy")


def test_strlcat_truncates_to_size():
    result, total = strlcat("ab", "cdef", 4)
    assert len(result) == 3
    assert result.startswith("ab")
    assert total == len("ab") + len("cdef")


def test_strncmp_sign():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


def test_strncmp_extension_check():
    assert strncmp(".ber", ".ber", 4) == 0
    assert strncmp(".bex", ".ber", 4) != 0 and strncmp(".bex", ".ber", 3) == 0


def test_strnstr():
    assert strnstr("hello world", "world", 11) == "hello world".index("world")
    assert strnstr("hello world", "world", 10) is None
    assert strnstr("hello", "", 0) == 0
    assert strnstr("hello", "he", 0) is None
    assert strnstr("hello", "xyz", 5) is None


def test_strtrim():
    assert strtrim("  xxhixx  ", " x") == "hi"
    assert strtrim("aaaa", "a") == ""
    assert strtrim("", "a") == ""
    assert strtrim("abc", "") == "abc"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 3, 100) == "lo"
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 5, 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


def test_substr_pieces_rebuild_string():
    text = "tomandjerry"
    pieces = [substr(text, start, 3) for start in range(0, len(text), 3)]
    assert "".join(pieces) == text