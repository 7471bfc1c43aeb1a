# solong

A small top-down tile game. You walk across a walled map, pick up every
collectible and leave through the exit. Every step is counted, and the
running total is printed on standard output.

## Installing

```
pip install .
```

pygame is the only runtime dependency.

## Playing

```
solong maps/level.ber
```

The command takes exactly one argument: the path of a map file whose name
ends in `.ber`. The window is titled "Sonic Game" and each map cell is drawn
as a 64×64 tile.

Textures are loaded from a `textures` directory in the current working
directory, which must hold `wall.xpm`, `floor.xpm`, `exit.xpm`, `sonic.xpm`
(the player) and `ring.xpm` (collectibles). No texture images come with the
package; you supply them.

Controls:

| Key               | Action     |
|-------------------|------------|
| `W` / Up arrow    | move up    |
| `S` / Down arrow  | move down  |
| `A` / Left arrow  | move left  |
| `D` / Right arrow | move right |
| `Esc`             | quit       |

Closing the window also quits. After every step that is not blocked by a
wall, the move count is printed on its own line. Stepping onto the exit once
every collectible has been picked up prints the final move count followed by
`Congrats ! YOU WIN :)` and closes the game. Stepping onto the exit before
that is an ordinary move.

### Errors and exit status

Problems are reported on standard error:

- wrong number of arguments: `Error Args`, exit status 1;
- a name not ending in `.ber`, a file that cannot be opened, or a file with
  fewer than three lines: `Error` and a description, exit status 1;
- a map that fails validation: `Error` and the reason, exit status 0;
- a texture that cannot be loaded: `Error` and `invalid texture`, exit
  status 0.

## Map format

A map is plain text with one row per line. It may contain only these
characters:

- `1` wall
- `0` floor
- `P` player start (exactly one)
- `E` exit (exactly one)
- `C` collectible (at least one)

A map is accepted only if:

- it has at least three rows, and every row is as long as the first;
- its border is made entirely of walls;
- from the player's start, every collectible and the exit can be reached
  moving up, down, left and right through anything that is not a wall.

The checks run in that order, and the first failure is the one reported
(`Not rectangular shape`, `Invalid character or No exit`,
`MAP is not closed by Walls`, `Invalid path`).

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.gamemap import parse_map
from solong.game import Game, Direction, MoveResult

game_map = parse_map("1111111\n1P0C0E1\n1111111\n")
game_map.validate()          # raises MapError if the map is not playable

game = Game(game_map)
result = game.move(Direction.RIGHT)
assert result is MoveResult.MOVED
print(game.player, game.move_count, game.collectibles)
```

Modules:

- `solong.gamemap` — `GameMap` with its checks (`is_rectangular`,
  `has_valid_chars`, `is_enclosed`, `has_valid_counts`, `has_valid_path`,
  `validate`, `count`, `find_player`), `parse_map`, `read_map`,
  `check_file_name`, `flood_fill` and `MapError`.
- `solong.game` — `Game` (`move`, `tile_at`), `Direction` and `MoveResult`.
  `move` returns `BLOCKED`, `MOVED` or `WON`; moving after a win raises
  `RuntimeError`.
- `solong.app` — `load_textures`, `Textures`, `TextureError`, `tile_image`,
  `key_direction`, `Renderer`, `run` (the window loop) and `main` (the
  command).
- `solong.lines` — `LineReader` and `read_lines`, which read a text or binary
  stream one line at a time, keeping each line's newline.
- `solong.output` — `putchar`, `putstr`, `putendl` and `putnbr`, which write
  to a stream (standard output by default).
- `solong.chars`, `solong.strings`, `solong.memory` — small helpers for
  character classification, C-style `atoi`/`itoa`, string searching and
  slicing, and byte-buffer operations on `bytearray`.

## What it does not do

There is one map per run: no level list, no saving or loading of progress,
no enemies and no on-screen move counter — the count appears only on
standard output.

## Running the tests

```
pip install .[test]
pytest
```