"""Command line entry point: check the arguments, load the map and play."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .checks import validate_map
from .game import Game
from .mapfile import MapError, read_map
from .output import put_str

RED = "\033[31;1m"
YELLOW = "\033[33;1m"
CYAN = "\033[36;1m"
RESET = "\033[0m"

MAP_EXTENSION = ".ber"


def format_error(message: str) -> str:
    """The coloured error line shown for message."""
    return f"{RED}Error: {RESET}{CYAN}{message}{RESET}\n"


def check_arguments(argv: Sequence[str]) -> str:
    """The map path from the arguments; ValueError when they are unusable."""
    if not argv:
        raise ValueError("No arguments!!")
    if len(argv) > 1:
        raise ValueError("Too many arguemnts!!")
    path = argv[0]
    if len(path) < len(MAP_EXTENSION) + 1:
        raise ValueError("Invalid file name")
    if path[-len(MAP_EXTENSION):] != MAP_EXTENSION:
        raise ValueError("Invalid extension")
    return path


def format_map(rows: Sequence[str], copy: Sequence[str]) -> str:
    """The original map and its working copy, one under the other."""
    parts = [f"{YELLOW}\nOriginal\n{RESET}"]
    parts.extend(f"{row}\n" for row in rows)
    parts.append(f"{YELLOW}\nCopia\n{RESET}")
    parts.extend(f"{row}\n" for row in copy)
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named in argv; return the exit status."""
    from .render import Renderer

    if argv is None:
        argv = sys.argv[1:]
    try:
        path = check_arguments(argv)
        rows = read_map(path)
        validate_map(rows)
        renderer = Renderer(Game(rows))
    except (ValueError, MapError, OSError) as exc:
        put_str(format_error(str(exc)), sys.stderr)
        return 1
    renderer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())