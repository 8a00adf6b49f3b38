"""Game state: the player's position, collectibles and the moves made."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .checks import COLLECTIBLE, EXIT, PLAYER, WALL, count_objects, find_object
from .mapfile import MapError

FLOOR = "0"


@dataclass(frozen=True)
class MoveResult:
    """What a single move attempt did."""

    moved: bool
    collected: bool = False
    won: bool = False
    move_number: int | None = None


class Game:
    """A running game on a map given as rows of tile characters."""

    def __init__(self, rows: Sequence[str]) -> None:
        if not rows:
            raise MapError("empty map")
        player = find_object(rows, PLAYER)
        exit_pos = find_object(rows, EXIT)
        if player is None or exit_pos is None:
            raise MapError("No player, object o output")
        self._grid = [list(row) for row in rows]
        self.player: tuple[int, int] = player
        self.exit: tuple[int, int] = exit_pos
        self.collectibles_left = count_objects(rows)[COLLECTIBLE]
        self.moves = 0
        self.finished = False

    @property
    def rows(self) -> list[str]:
        """The current map as rows of tile characters."""
        return ["".join(row) for row in self._grid]

    def tile_at(self, x: int, y: int) -> str:
        """The tile character at column x, row y."""
        if not 0 <= y < len(self._grid) or not 0 <= x < len(self._grid[y]):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self._grid[y][x]

    def is_valid_position(self, x: int, y: int) -> bool:
        """True when the player may stand at (x, y): inside the map and not a wall."""
        try:
            return self.tile_at(x, y) != WALL
        except IndexError:
            return False

    def move(self, dx: int, dy: int) -> MoveResult:
        """Try to move the player by (dx, dy)."""
        if self.finished:
            return MoveResult(moved=False)
        px, py = self.player
        nx, ny = px + dx, py + dy
        if not self.is_valid_position(nx, ny):
            return MoveResult(moved=False)
        if self._grid[py][px] != EXIT:
            self._grid[py][px] = FLOOR
        self.player = (nx, ny)
        tile = self._grid[ny][nx]
        collected = tile == COLLECTIBLE
        if collected:
            self.collectibles_left -= 1
        won = tile == EXIT and self.collectibles_left == 0
        number = self.moves
        self.moves += 1
        if won:
            self.finished = True
        return MoveResult(moved=True, collected=collected, won=won, move_number=number)