# solong

A small top-down puzzle game. You walk a player around a walled map,
pick up every collectible, and then step onto the exit to win. Each
step that is not blocked prints the move count to the terminal.

## Installing

```
pip install .
```

The game window uses pygame. For the tests:

```
pip install .[test]
pytest
```

## Playing

```
solong path/to/level.ber
```

The window loads its images from a `textures` directory in the current
working directory, which must hold `player.xpm`, `exit.xpm`,
`floor.xpm`, `item.xpm` and `wall.xpm`. Each tile is drawn 64 by 64
pixels.

Controls:

- `W` / `A` / `S` / `D` move up, left, down and right
- `Esc` or closing the window quits

Walking into a wall does nothing and does not count as a move. The exit
only lets you out once every collectible has been picked up; before
that the player can stand on it like a floor tile.

## Map files

A map is a plain-text file whose name ends in `.ber`. Each line is one
row of tiles:

| Character | Meaning                     |
|-----------|-----------------------------|
| `0`       | empty floor                 |
| `1`       | wall                        |
| `C`       | collectible                 |
| `E`       | exit                        |
| `P`       | player's starting position  |

Example:

```
1111111111
1P0C000001
1000011101
10C00000E1
1111111111
```

A map is accepted only if:

- the file can be opened for reading and writing;
- it has at least three lines;
- every row has the same width;
- it is closed in by walls on all four sides;
- it uses only the characters `0`, `1`, `C`, `E` and `P`;
- it has exactly one exit, exactly one player and at least one collectible;
- every collectible and the exit can be reached from the player's start.

If a map is rejected, `solong` prints `Error` followed by the reason on
the next line and exits with status 1. Running it with anything other
than one file argument prints `Error` and a usage hint, also with
status 1. If the window or the textures cannot be set up, it prints
`Error` and the cause.

## Using it as a library

The map loading and game rules work without a window:

```python
from solong.validate import load_map
from solong.game import Direction, Game, MoveResult

game = Game(load_map("level.ber"))
result = game.move(Direction.RIGHT)   # MoveResult.BLOCKED, MOVED, COLLECTED or WON
print(game.moves, game.collected, game.rows())
```

- `solong.mapfile.load_grid(filename)` checks the file name and size
  and returns the rows; `validate_path` and `read_grid` do the two
  steps separately.
- `solong.validate.check_map(grid)` checks an in-memory grid (a list of
  row strings) and returns a `GameMap`; `load_map(filename)` does both.
  `reachable(grid, start)` returns the cells reachable from a
  `(row, column)` position.
- All of these raise `solong.mapfile.MapError`; its `report()` method
  gives the text the command prints.
- `solong.game.Game.move` raises `RuntimeError` once the game has been
  won.
- `solong.display.tiles(game)` lists what would be drawn, as
  `(texture name, x, y)`; `key_to_direction(key)` maps a W/A/S/D key
  to a `Direction`; `run(game, texture_dir)` opens the window and plays.

The package also carries small helper modules used by the game and
usable on their own: `solong.lines.LineReader` reads a stream line by
line through a fixed-size buffer; `solong.output` has a small
`printf`/`sprintf` supporting `%c %s %d %i %u %p %x %X %%`;
`solong.textops`, `solong.chars` and `solong.memory` hold C-style
string, character and byte-buffer helpers.

## What it does not do

There is no level editor, no saving of progress, no score keeping
beyond the move count printed to the terminal, and no animation: the
window is redrawn only after each move.