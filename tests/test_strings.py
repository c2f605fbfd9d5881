import pytest

from so_long.strings import (
    split,
    strchr,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strrncmp,
    strtrim,
    substr,
)


def test_split_skips_repeated_separators():
    assert split("  hello  world ", " ") == ["hello", "world"]


@pytest.mark.parametrize("text", ["", ",,,", ","])
def test_split_without_words(text):
    assert split(text, ",") == []


@pytest.mark.parametrize("text", ["a,b,,c", ",x,", "one", "1,,22,333,"])
def test_split_invariants(text):
    words = split(text, ",")
    assert all(words)
    assert all("," not in word for word in words)
    assert "".join(words) == text.replace(",", "")


@pytest.mark.parametrize("text,char", [("hello", "l"), ("abcabc", "c"), ("x", "x")])
def test_strchr_finds_first(text, char):
    index = strchr(text, char)
    assert text[index] == char
    assert char not in text[:index]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


@pytest.mark.parametrize("text,char", [("hello", "l"), ("abcabc", "a"), ("x", "x")])
def test_strrchr_finds_last(text, char):
    index = strrchr(text, char)
    assert text[index] == char
    assert char not in text[index + 1 :]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strlcpy_truncates():
    copy, total = strlcpy("hello", 3)
    assert copy == "he"
    assert total == len("hello")


def test_strlcpy_zero_and_large_sizes():
    assert strlcpy("hello", 0) == ("", len("hello"))
    assert strlcpy("hello", 100) == ("hello", len("hello"))


def test_strlcat_appends_fully():
    result, total = strlcat("ab", "cd", 10)
    assert result == "abcd"
    assert total == len("ab") + len("cd")


def test_strlcat_truncates_to_size():
    result, total = strlcat("ab", "cdef", 4)
    assert result == "abc"
    assert len(result) == 4 - 1
    assert total == len("ab") + len("cdef")


def test_strlcat_size_not_larger_than_dst():
    result, total = strlcat("abc", "de", 2)
    assert result == "abc"
    assert total == len("de") + 2


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_differences():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strrncmp_matches_extension():
    assert strrncmp("maps/level.ber", ".ber", 4) == 0
    assert strrncmp(".ber", ".ber", 4) == 0


def test_strrncmp_wrong_extension():
    assert strrncmp("map.txt", ".ber", 4) == ord("t") - ord("r")


def test_strrncmp_empty_and_zero():
    assert strrncmp("", "", 3) == 0
    assert strrncmp("abc", "xyz", 0) == 0


def test_strnstr_finds_within_length():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index : index + len("world")] == "world"


def test_strnstr_respects_length_and_empty_needle():
    assert strnstr("hello world", "world", 8) is None
    assert strnstr("hello", "", 0) == 0
    assert strnstr("hello", "xyz", 5) is None


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim(" keep ", "") == " keep "
    assert strtrim("axbxa", "a") == "xbx"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 1, 100) == "ello"
    assert substr("hello", 10, 2) == ""
    assert substr("hello", len("hello"), 2) == ""


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_mutates_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: c.upper())
    assert chars == ["A", "B", "C"]


def test_striteri_passes_index():
    chars = list("zzz")
    seen = []

    def record(index, char):
        seen.append(index)
        return char

    striteri(chars, record)
    assert seen == list(range(len(chars)))
    assert chars == list("zzz")