import pytest

from ftls.strings import (
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
    strndup,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s", ["", "a", "hello world", "tab\there"])
def test_strlen_matches_length(s):
    assert strlen(s) == len(s)


@pytest.mark.parametrize("s, c", [("hello", "l"), ("abcabc", "c"), ("xyz", "x")])
def test_strchr_finds_first(s, c):
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", 0) == len("hello")


def test_strchr_accepts_codes_and_folds_large_ones():
    assert strchr("xab", ord("b")) == strchr("xab", "b")
    assert strchr("xab", 128 + ord("a")) == strchr("xab", "a")


@pytest.mark.parametrize("s, c", [("hello", "l"), ("abcabc", "a"), ("xyz", "z")])
def test_strrchr_finds_last(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")
    assert strrchr("", 0) == 0


def test_strncmp_ordering():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strnstr_found_within_length():
    big, little = "lorem ipsum dolor", "ipsum"
    index = strnstr(big, little, len(big))
    assert big[index:index + len(little)] == little


def test_strnstr_limits_and_empty():
    assert strnstr("lorem ipsum", "ipsum", 8) is None
    assert strnstr("lorem", "", 0) == 0
    assert strnstr("aaab", "aab", 4) == strnstr("aaab", "aab", 10)


def test_strdup_and_strndup():
    assert strdup("copy me") == "copy me"
    result = strndup("hello", 3)
    assert "hello".startswith(result) and len(result) == 3
    assert strndup("hi", 10) == "hi"
    with pytest.raises(ValueError):
        strndup("hi", -1)


def test_substr():
    assert substr("hello world", 6, 5) == "world"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 3) == ""
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  spaced  ", " ") == "spaced"
    assert strtrim("aaa", "a") == ""
    assert strtrim("keep", "") == "keep"
    assert strtrim("keep", None) == "keep"


def test_split():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split(",,,", ",") == []
    assert split("single", ",") == ["single"]
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strlcpy():
    src = "hello"
    assert strlcpy(src, 10) == (src, len(src))
    copied, total = strlcpy(src, 3)
    assert total == len(src)
    assert len(copied) == 2 and src.startswith(copied)
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_fits():
    assert strlcat("foo", "bar", 20) == ("foobar", 6)


def test_strlcat_truncates():
    result, total = strlcat("foo", "barbaz", 6)
    assert len(result) == 5
    assert result.startswith("foo")
    assert total == len("foo") + len("barbaz")


def test_strlcat_destination_too_long():
    result, total = strlcat("foobar", "xyz", 4)
    assert result == "foobar"
    assert total == 4 + len("xyz")


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    indices = []
    strmapi("xyz", lambda i, c: indices.append(i) or c)
    assert indices == list(range(3))


def test_striteri_mutates_in_place():
    chars = list("abc")
    result = striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else c)
    assert chars == ["A", "b", "C"]
    assert result is chars