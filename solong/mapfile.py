"""Loading game maps from files and text."""

from __future__ import annotations

import os
from collections.abc import Sequence

from .lines import LineReader
from .strings import strcspn


class MapError(Exception):
    """A map that cannot be loaded or does not meet the game's rules."""


def _strip_newline(line: str) -> str:
    return line[:strcspn(line, "\n")]


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """The rows of the map file at path, without their newlines."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise MapError("Failure to open file map") from exc
    try:
        return [_strip_newline(line) for line in LineReader(fd)]
    finally:
        os.close(fd)


def parse_map(text: str) -> list[str]:
    """The rows of a map given as text, without their newlines."""
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    return rows


def copy_map(rows: Sequence[str]) -> list[str]:
    """An independent copy of the map rows."""
    return list(rows)