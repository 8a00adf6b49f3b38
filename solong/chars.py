"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_SPACES = " \t\r\v\n\f"


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {c!r}")
    return c


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 31 < _code(c) < 127


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; other values pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; other values pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's complement signed integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str, bits: int) -> int:
    stripped = text.lstrip(_SPACES)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not isdigit(ch):
            break
        digits.append(ch)
    number = int("".join(digits)) if digits else 0
    return _wrap(_wrap(number, bits) * sign, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a 32-bit C int would hold it.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits gives 0.
    """
    return _parse(text, 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer the way a 64-bit C long would hold it."""
    return _parse(text, 64)


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {n!r}")
    return str(n)