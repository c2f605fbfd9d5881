# so_long

The rules and data handling of a small top-down puzzle game: a character
walks a map enclosed by walls, picks up every collectible, and then leaves
through the exit. The package reads and validates levels, keeps the state of
a game in progress, decides which sprite belongs on each tile, and decodes
XPM sprite images into pixel values.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Map files

A level is a plain text file with the `.ber` extension, using only these
characters:

| Char | Meaning     |
|------|-------------|
| `1`  | Wall        |
| `0`  | Empty floor |
| `C`  | Collectible |
| `E`  | Exit        |
| `P`  | Player      |

Example:

```
1111111111
1P0C00C0E1
1000110001
1111111111
```

`so_long.mapfile.load_map(path)` reads a file and `so_long.mapfile.parse_map(text)`
reads text; both return a `GameMap` (`grid`, `width`, `height`, `player` as
`(x, y)`, `exits`, `collectibles`) or raise `MapError` when:

- the file cannot be read, or its name does not end in `.ber`;
- the map has only one line, or is not rectangular;
- it contains a character other than the five above;
- it is not enclosed by walls;
- it does not have exactly one player and exactly one exit;
- it has no collectible;
- the player cannot reach every collectible and the exit
  (see `flood_fill` and `validate_path`).

## Playing a game in code

```python
from so_long.mapfile import parse_map
from so_long.game import Game, MoveOutcome

level = parse_map("1111111\n1PC0E01\n1111111\n")
game = Game(level)

game.move(1, 0)   # MoveOutcome.MOVED, picks up the collectible
game.move(1, 0)   # MoveOutcome.MOVED
game.move(1, 0)   # MoveOutcome.WON: the exit is open
print(game.moves, game.victory)   # 2 True
```

`Game.move(dx, dy)` returns `BLOCKED` for walls and for the exit while
collectibles remain. A horizontal move turns the player sprite to face that
way. `Game.tile(row, col)` names the sprite to draw for a cell in the
current state: `mino_r`/`mino_l`, `bg` and `bg1`–`bg6`, `wall_1`/`wall_2`,
`door_c`/`door_o` and `diary`. `floor_variant`, `wall_sprite` and
`sprite_for` give the same choices for a bare grid. Tiles are `RES` (32)
pixels square.

## Sprites

`so_long.xpm.load_xpm(path)` and `parse_xpm(text)` decode XPM images into an
`XpmImage` with `width`, `height` and a flat list of `pixels`; transparent
pixels become `0xFF000000`. Colour names are resolved by
`so_long.colors.lookup_color`. `XpmError` is raised for unreadable or
malformed images.

## Helpers

- `so_long.strings`: C-style string operations (`split`, `strchr`,
  `strncmp`, `strrncmp`, `substr`, `strtrim`, ...) on Python strings.
- `so_long.chars`: ASCII classification, case conversion, `atoi` and `itoa`
  with 32-bit wrap-around.
- `so_long.printer`: `render` and `printf` for the conversions
  `c s p d i u x X %`, raising `FormatError` on anything else.

## What this package does not do

There is no window, drawing or keyboard handling, and no command to start a
game from the shell. The package supplies the level checks, the game rules
and decoded sprites; showing them on screen is left to the program that
uses it.

## Running the tests

```
pytest
```