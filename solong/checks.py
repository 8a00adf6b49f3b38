"""Validation of game maps: shape, walls, objects and reachability."""

from __future__ import annotations

from collections.abc import Sequence

from .mapfile import MapError, copy_map

WALL = "1"
FILLED = "."
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"


def is_rectangular(rows: Sequence[str]) -> bool:
    """True when every row has the first row's length and rows are fewer than columns."""
    if not rows:
        return False
    columns = len(rows[0])
    if len(rows) >= columns:
        return False
    return all(len(row) == columns for row in rows)


def is_surrounded_by_walls(rows: Sequence[str]) -> bool:
    """True when the border of the map is made of walls only."""
    if not rows:
        return False
    columns = len(rows[0])
    if columns == 0:
        return False
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            if row[:columns] != WALL * columns:
                return False
        elif len(row) < columns or row[0] != WALL or row[columns - 1] != WALL:
            return False
    return True


def count_objects(rows: Sequence[str]) -> dict[str, int]:
    """How many players, collectibles and exits the map holds."""
    counts = {PLAYER: 0, COLLECTIBLE: 0, EXIT: 0}
    for row in rows:
        for ch in row:
            if ch in counts:
                counts[ch] += 1
    return counts


def has_required_objects(rows: Sequence[str]) -> bool:
    """True for exactly one player, exactly one exit and at least one collectible."""
    counts = count_objects(rows)
    return counts[PLAYER] == 1 and counts[EXIT] == 1 and counts[COLLECTIBLE] >= 1


def find_object(rows: Sequence[str], obj: str) -> tuple[int, int] | None:
    """Position (x, y) of the last occurrence of obj, scanning rows top to bottom."""
    found = None
    for y, row in enumerate(rows):
        x = row.rfind(obj)
        if x >= 0:
            found = (x, y)
    return found


def flood_fill(rows: Sequence[str], start: tuple[int, int]) -> list[str]:
    """A copy of rows with every cell reachable from start replaced by '.'.

    Movement is horizontal and vertical; walls stop the fill.
    """
    if not rows:
        return []
    width, height = len(rows[0]), len(rows)
    grid = [list(row) for row in rows]
    stack = [start]
    while stack:
        x, y = stack.pop()
        if not (0 <= x < width and 0 <= y < height) or x >= len(grid[y]):
            continue
        if grid[y][x] in (WALL, FILLED):
            continue
        grid[y][x] = FILLED
        stack.extend(((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)))
    return ["".join(row) for row in grid]


def _fill_from_player(rows: Sequence[str]) -> list[str] | None:
    player = find_object(rows, PLAYER)
    exit_pos = find_object(rows, EXIT)
    if player is None or exit_pos is None:
        return None
    filled = flood_fill(copy_map(rows), player)
    for x, y in (exit_pos, player):
        if filled[y][x] != FILLED:
            return None
    if any(COLLECTIBLE in row for row in filled):
        return None
    return filled


def has_valid_path(rows: Sequence[str]) -> bool:
    """True when the player can reach the exit and every collectible."""
    return _fill_from_player(rows) is not None


def validate_map(rows: Sequence[str]) -> list[str]:
    """Check every rule in turn and return the flood-filled copy of the map.

    Raises MapError describing the first rule that fails.
    """
    if not is_rectangular(rows):
        raise MapError("Not rectangular map or exceeds the wall")
    if not is_surrounded_by_walls(rows):
        raise MapError("The map is not surrounded by walls")
    if not has_required_objects(rows):
        raise MapError("No player, object o output")
    filled = _fill_from_player(rows)
    if filled is None:
        raise MapError("dead-end player")
    return filled