"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

INT_MAX = 2_147_483_647
_POSITIVE_OVERFLOW = INT_MAX + 1

CharLike = "int | str"


def _code(c: int | str) -> int:
    """Return the code point of a one-character string, or an int unchanged."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters (space through tilde)."""
    return 31 < _code(c) < 127


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def to_lower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading spaces (only ' ') are skipped, then one optional sign, then
    digits up to the first non-digit. Text without digits gives 0.
    Positive values above INT_MAX saturate at INT_MAX + 1.
    """
    rest = text.lstrip(" ")
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]

    value = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
        if sign == 1 and value > INT_MAX:
            return _POSITIVE_OVERFLOW
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits