"""String helpers: searching, comparing, copying, slicing and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _char(c: int | str) -> str:
    """Normalise a character given as an int (taken mod 256) or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {c!r}")
    return chr(c % 256)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {value!r}")
    return value


def _code_at(s: str, i: int) -> int:
    """Code of s[i], or 0 past the end, like a terminated C string."""
    return ord(s[i]) if i < len(s) else 0


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in s.

    Searching for the NUL character gives the position of the terminator,
    len(s). None when c does not occur.
    """
    _require_str(s, "s")
    ch = _char(c)
    if ch == "\0":
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in s; NUL matches the terminator."""
    _require_str(s, "s")
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the sign of the result orders s1 and s2."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    if n < 0:
        raise ValueError(f"negative length {n}")
    for i in range(n):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the sign of the result orders s1 and s2."""
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first occurrence of little lying wholly within big[:length].

    An empty little matches at index 0.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    if length < 0:
        raise ValueError(f"negative length {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters) and len(src), the
    length that was tried. A size of 0 copies nothing.
    """
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"negative size {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length that was tried. When size is not
    larger than len(dst) nothing is appended and len(src) + size is returned.
    """
    _require_str(dst, "dst")
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"negative size {size}")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of s1 and s2."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """s without leading and trailing characters that belong to charset."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """The non-empty pieces of s between occurrences of the separator."""
    _require_str(s, "s")
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of func(index, char) for each character of s."""
    _require_str(s, "s")
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, str], str | None]) -> None:
    """Call func(index, char) on each character of s, in place.

    A result other than None replaces the character at that index.
    """
    for i, ch in enumerate(s):
        result = func(i, ch)
        if result is not None:
            s[i] = result


def strcspn(s: str, reject: str) -> int:
    """Length of the leading part of s holding no character of reject."""
    _require_str(s, "s")
    _require_str(reject, "reject")
    for i, ch in enumerate(s):
        if ch in reject:
            return i
    return len(s)


def strdup(s: str) -> str:
    """A copy of s."""
    return "".join(_require_str(s, "s"))