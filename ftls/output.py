"""Writing characters, strings and numbers to text streams, with a small printf."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from ftls.chars import itoa

_UINT_MASK = 0xFFFFFFFF
_CONVERSIONS = frozenset("cspdiuxX")
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: TextIO | None) -> int:
    _target(stream).write(text)
    return len(text)


def _as_signed_int(n: int) -> int:
    value = n & _UINT_MASK
    return value - (1 << 32) if value > 0x7FFFFFFF else value


def putchar(c: int | str, stream: TextIO | None = None) -> int:
    """Write one character (a one-character string or a code point); return 1."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return _emit(c, stream)
    if isinstance(c, int):
        return _emit(chr(c), stream)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def putstr(s: str | None, stream: TextIO | None = None) -> int:
    """Write s and return the number of characters written; None is written as "(null)"."""
    return _emit(NULL_STRING if s is None else s, stream)


def putendl(s: str, stream: TextIO | None = None) -> int:
    """Write s followed by a newline and return the number of characters written."""
    return _emit(f"{s}\n", stream)


def putnbr(n: int, stream: TextIO | None = None) -> int:
    """Write n in decimal and return the number of characters written."""
    return _emit(itoa(n), stream)


def putnbr_unsigned(n: int, stream: TextIO | None = None) -> int:
    """Write n as a 32-bit unsigned decimal number; return the characters written."""
    return _emit(str(n & _UINT_MASK), stream)


def puthex(n: int, upper: bool = False, stream: TextIO | None = None) -> int:
    """Write n as 32-bit unsigned hexadecimal; return the characters written."""
    return _emit(format(n & _UINT_MASK, "X" if upper else "x"), stream)


def put_address(n: int, stream: TextIO | None = None) -> int:
    """Write n as a "0x"-prefixed lowercase hexadecimal address; return the characters written."""
    if n < 0:
        raise ValueError(f"address must not be negative: {n}")
    return _emit(f"0x{n:x}", stream)


def _render(conversion: str, arg: Any, stream: TextIO | None) -> int:
    if conversion == "s":
        return putstr(arg, stream)
    if conversion == "c":
        return putchar(arg, stream)
    if conversion == "p":
        if arg is None or arg == 0:
            return _emit(NULL_POINTER, stream)
        return put_address(arg if isinstance(arg, int) else id(arg), stream)
    if conversion in "di":
        return putnbr(_as_signed_int(arg), stream)
    if conversion == "u":
        return putnbr_unsigned(arg, stream)
    return puthex(arg, conversion == "X", stream)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write fmt with %c %s %p %d %i %u %x %X and %% expanded; return the characters written.

    An unknown conversion character is skipped without output, and extra
    arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    remaining: Iterator[Any] = iter(args)
    written = 0
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            written += _emit(ch, stream)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        if conversion in _CONVERSIONS:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
            written += _render(conversion, arg, stream)
        elif conversion == "%":
            written += _emit("%", stream)
    return written