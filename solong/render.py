"""Drawing the game with tile images and driving it from the keyboard."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .checks import COLLECTIBLE, EXIT, PLAYER, WALL  # noqa: E402
from .game import FLOOR, Game, MoveResult  # noqa: E402
from .output import printf  # noqa: E402

DEFAULT_IMAGE_DIR = os.path.join("img", "game")
DEFAULT_TILE_SIZE = 64
WINDOW_TITLE = "so_long"

IMAGE_FILES = {
    "floor": "tiles.png",
    "wall": "wall.png",
    "player": "player.png",
    "collectible": "diamante.png",
    "exit": "mago.png",
}

# Order in which missing files are reported, with the name used in messages.
_OPEN_LABELS = (
    ("wall", "walls"),
    ("floor", "floor"),
    ("collectible", "collectable"),
    ("exit", "exit"),
    ("player", "player"),
)
_LOAD_LABELS = {
    "wall": "wall",
    "floor": "floor",
    "player": "player",
    "collectible": "collectable",
    "exit": "exit",
}

KEY_MOVES = {
    pygame.K_d: (1, 0),
    pygame.K_w: (0, -1),
    pygame.K_a: (-1, 0),
    pygame.K_s: (0, 1),
}

_REPEAT_DELAY_MS = 200
_REPEAT_INTERVAL_MS = 60
_FPS = 60


def load_images(image_dir: str | os.PathLike[str] = DEFAULT_IMAGE_DIR) -> dict[str, pygame.Surface]:
    """Load the five tile images from image_dir, keyed by tile name."""
    paths = {name: os.path.join(image_dir, filename) for name, filename in IMAGE_FILES.items()}
    for name, label in _OPEN_LABELS:
        if not os.path.isfile(paths[name]):
            raise FileNotFoundError(f"Failure to open file {label}")
    images = {}
    for name, path in paths.items():
        try:
            images[name] = pygame.image.load(path)
        except pygame.error as exc:
            raise OSError(f"Failure to load {_LOAD_LABELS[name]} image") from exc
    return images


class Renderer:
    """Draws a Game onto a surface and turns key presses into moves."""

    def __init__(
        self,
        game: Game,
        image_dir: str | os.PathLike[str] = DEFAULT_IMAGE_DIR,
        tile_size: int = DEFAULT_TILE_SIZE,
    ) -> None:
        if tile_size <= 0:
            raise ValueError(f"tile size must be positive, got {tile_size}")
        self.game = game
        self.tile_size = tile_size
        self.images = {
            name: pygame.transform.scale(image, (tile_size, tile_size))
            for name, image in load_images(image_dir).items()
        }
        rows = game.rows
        self.surface = pygame.Surface((len(rows[0]) * tile_size, len(rows) * tile_size))
        self.running = True

    def _blit(self, name: str, x: int, y: int) -> None:
        self.surface.blit(self.images[name], (x * self.tile_size, y * self.tile_size))

    def draw(self) -> pygame.Surface:
        """Redraw the whole map and return the surface drawn on."""
        self.surface.fill((0, 0, 0))
        for y, row in enumerate(self.game.rows):
            for x, tile in enumerate(row):
                if tile == WALL:
                    self._blit("wall", x, y)
                elif tile in (FLOOR, COLLECTIBLE, PLAYER):
                    self._blit("floor", x, y)
                if tile == COLLECTIBLE:
                    self._blit("collectible", x, y)
        ex, ey = self.game.exit
        if self.game.tile_at(ex, ey) == EXIT:
            self._blit("exit", ex, ey)
        self._blit("player", *self.game.player)
        return self.surface

    def handle_key(self, key: int) -> MoveResult | None:
        """React to one key press; movement keys are W, A, S, D and Escape quits."""
        if key == pygame.K_ESCAPE:
            self.running = False
            return None
        step = KEY_MOVES.get(key)
        if step is None:
            return None
        result = self.game.move(*step)
        if result.moved:
            printf("Nº de movements: %d\n", result.move_number)
        if result.won:
            self.running = False
        return result

    def run(self) -> bool:
        """Open a window and play until the game is won or left; True when won."""
        pygame.display.init()
        try:
            screen = pygame.display.set_mode(self.surface.get_size())
            pygame.display.set_caption(WINDOW_TITLE)
            pygame.key.set_repeat(_REPEAT_DELAY_MS, _REPEAT_INTERVAL_MS)
            clock = pygame.time.Clock()
            self.running = not self.game.finished
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(event.key)
                screen.blit(self.draw(), (0, 0))
                pygame.display.flip()
                clock.tick(_FPS)
        finally:
            pygame.display.quit()
        return self.game.finished