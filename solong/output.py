"""Formatted output with a small printf subset and simple writers."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_LOWER = "0123456789abcdef"
_UPPER = "0123456789ABCDEF"


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {value!r}")
    return value


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >> 31 else value


def format_digit(n: int, base: int, upper: bool) -> str:
    """Render n in the given base (2 to 16).

    Negative numbers get a leading '-' and their digits in upper case.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    if n < 0:
        return "-" + format_digit(-n, base, True)
    if n == 0:
        return "0"
    symbols = _UPPER if upper else _LOWER
    digits = []
    while n:
        n, rest = divmod(n, base)
        digits.append(symbols[rest])
    return "".join(reversed(digits))


def format_pointer(ptr: int | None) -> str:
    """Render an address as '0x' followed by lower-case hex digits."""
    value = 0 if ptr is None else _require_int(ptr, "p")
    return "0x" + format_digit(value & 0xFFFFFFFFFFFFFFFF, 16, False)


def _format_one(spec: str, args: list[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdixXpu":
        return ""
    if not args:
        raise TypeError(f"not enough arguments for %{spec}")
    value = args.pop(0)
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_require_int(value, spec) & 0xFF)
    if spec == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a str, got {value!r}")
        return value
    if spec == "p":
        return format_pointer(value)
    number = _require_int(value, spec)
    if spec in "di":
        return format_digit(_int32(number), 10, True)
    if spec == "u":
        return format_digit(number & 0xFFFFFFFF, 10, False)
    return format_digit(number & 0xFFFFFFFF, 16, spec == "X")


def format(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %d %i %u %x %X %p and %% in fmt.

    Unknown conversions produce nothing and take no argument; extra
    arguments are ignored.
    """
    pending = list(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_format_one(spec, pending))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of fmt to stream (stdout by default); return its length."""
    text = format(fmt, *args)
    _stream(stream).write(text)
    return len(text)


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character."""
    if not isinstance(c, str) or len(c) != 1:
        raise TypeError(f"expected a single character, got {c!r}")
    _stream(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write s; None writes nothing."""
    if s is None:
        return
    _stream(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write s followed by a newline; None writes nothing."""
    if s is None:
        return
    out = _stream(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _stream(stream).write(format_digit(_require_int(n, "d"), 10, False))