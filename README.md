# solong

A small top-down puzzle game. The player walks around a walled map,
picks up every collectable and then steps onto the exit to win.

## Installing

```
pip install .
```

## Playing

```
solong maps/level.ber
```

The command takes exactly one argument, the path of a map file ending in
`.ber`. The game looks for its tile images in `img/game/` under the current
working directory and needs these five files there:

| File           | Tile        |
|----------------|-------------|
| `tiles.png`    | floor       |
| `wall.png`     | wall        |
| `player.png`   | player      |
| `diamante.png` | collectable |
| `mago.png`     | exit        |

Each image is scaled to a 64 × 64 pixel tile.

Controls:

- `W` `A` `S` `D`: move up, left, down, right (holding a key repeats the move)
- `Esc` or closing the window: quit

Every successful move prints `Nº de movements: <n>` to the terminal,
counting from 0. Walking onto the exit after all collectables are picked up
wins and closes the window; walking onto it earlier does nothing special.

## Map files

Maps are plain text files. Each line is one row of tiles:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectable  |
| `E`  | exit         |

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

A map is accepted only if:

- every row has the same length and there are fewer rows than columns;
- its border is made of walls only;
- it has exactly one player, exactly one exit and at least one collectable;
- the exit and every collectable can be reached from the player's start,
  moving horizontally and vertically.

When the arguments or the map are rejected, or an image cannot be found or
loaded, the program writes `Error:` followed by the reason to standard error
and exits with status 1.

## Using it as a library

The map checks and game rules work without a window:

```python
from solong.mapfile import parse_map
from solong.checks import validate_map
from solong.game import Game

rows = parse_map("11111\n1PCE1\n11111\n")
validate_map(rows)          # raises solong.mapfile.MapError on a bad map
game = Game(rows)
result = game.move(1, 0)    # MoveResult(moved=True, collected=True, won=False, move_number=0)
```

- `solong.mapfile`: `read_map(path)`, `parse_map(text)`, `copy_map(rows)`
  and the `MapError` exception.
- `solong.checks`: `is_rectangular`, `is_surrounded_by_walls`,
  `count_objects`, `has_required_objects`, `find_object`, `flood_fill`,
  `has_valid_path` and `validate_map`, which returns the flood-filled copy
  of the map.
- `solong.game`: `Game` (with `move`, `tile_at`, `is_valid_position`,
  `rows`, `player`, `exit`, `collectibles_left`, `moves`, `finished`) and
  `MoveResult`.
- `solong.render`: `load_images(image_dir)` and `Renderer`, which draws a
  `Game` onto a pygame surface (`draw()`), maps key codes to moves
  (`handle_key(key)`) and runs the window loop (`run()`, returning `True`
  when the game was won).
- `solong.cli`: `main(argv=None)`, the `solong` command, plus
  `check_arguments`, `format_error` and `format_map`.

The package also carries small general helpers:

- `solong.chars`: ASCII classification and case mapping, `atoi`, `atol`, `itoa`.
- `solong.memory`: byte-buffer search, compare, fill and copy.
- `solong.strings`: C-style string searching, comparing, copying and splitting.
- `solong.linked`: a singly linked list, `LinkedList` of `Node`s.
- `solong.output`: a `printf` subset (`%c %s %d %i %u %x %X %p %%`) and
  simple writers.
- `solong.lines`: `LineReader`, reading a file descriptor line by line, and
  `LineReaderSet` for several descriptors at once.

## What it does not do

- No tile images are included; supply the five PNG files listed above in
  `img/game/`.
- The move count is only printed to the terminal; it is not drawn in the
  window.
- There are no enemies or animations, and only one map is played per run.

## Running the tests

```
pip install .[test]
pytest
```