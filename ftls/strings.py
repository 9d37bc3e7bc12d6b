"""String search, copying, joining, trimming and splitting helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first occurrence of c in s, or None.

    Codes above 128 are folded modulo 128. Searching for NUL gives len(s).
    """
    code = _code(c)
    if code > 128:
        code %= 128
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last occurrence of c in s, or None.

    Integer arguments are truncated to a byte. Searching for NUL gives len(s).
    """
    code = _code(c)
    if isinstance(c, int):
        code &= 0xFF
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    if n <= 0:
        return 0
    for x, y in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of little within the first length characters of big, or None."""
    if not little:
        return 0
    index = big[:max(length, 0)].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    return str(s)


def strndup(s: str, n: int) -> str:
    """Return a copy of at most the first n characters of s."""
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    return s[:n]


def substr(s: str, start: int, length: int) -> str:
    """Return up to length characters of s starting at start; empty if start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str | None, b: str) -> str:
    """Concatenate a and b; a missing first string counts as empty."""
    return (a or "") + b


def strtrim(s: str, charset: str | None) -> str:
    """Remove characters found in charset from both ends of s."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, c: str) -> list[str]:
    """Split s on the separator character c, dropping empty pieces."""
    if len(c) != 1:
        raise ValueError(f"separator must be a single character, got {c!r}")
    return [word for word in s.split(c) if word]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the text that fits and the full length of src.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst in a buffer of size characters including the terminator.

    Returns the resulting text and the length it tried to create.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    used = min(len(dst), size)
    if used < size:
        room = size - used - 1
        result = dst + src[:room]
    else:
        result = dst
    return result, used + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> MutableSequence[str]:
    """Replace each element of chars in place with func(index, char)."""
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)
    return chars