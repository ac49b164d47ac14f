# berchk

`berchk` checks `.ber` tile maps for a small collect-and-exit puzzle game.
A map is a rectangle of characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |
| `N`  | enemy        |

A map passes when all of the following hold:

* It has at least three lines.
* Every line has the same width, not counting a trailing newline.
* The first line is all walls. In the last line, every character but the final one is a wall.
* Every middle line starts and ends with a wall and uses only the characters in the table.
* It holds exactly one player, exactly one exit, and at least one collectible.
* A flood fill from the player, which does not pass through walls, picks up every collectible before it reaches the exit.

## Installation

```
pip install .
```

## Command line

```
berchk maps/level1.ber
```

The command takes exactly one argument. The argument must name a readable file that ends in `.ber`.

When the map passes, the command prints a line of the form `maps/level1.ber: 5x3, 1 collectibles` and exits with status 0.
When the map fails, the command prints `Error` on one line and the reason on the next line, then exits with status 1.

## Library use

```python
from berchk.loader import load_map, parse_map
from berchk.mapcheck import MapError

try:
    game_map = load_map("maps/level1.ber")
except MapError as err:
    print(err)
else:
    print(game_map.width, game_map.height, game_map.player, game_map.exit)
```

`parse_map` runs the same checks on lines that are already in memory, for example `["11111\n", "1PCE1\n", "11111"]`.
It returns a frozen `GameMap` with these members:

* `rows`: the rows without their newlines.
* `player`: the player position as `(x, y)`.
* `exit`: the exit position as `(x, y)`.
* `collectibles`: the number of collectibles.
* `width` and `height`: the map size.

Each check can also be run by itself:

* `berchk.mapcheck` has `check_extension`, `check_params`, `check_rectangular` and `check_walls`. It also has the `LineKind` enum, the `ElementCounts` tally with its `count` and `validate` methods, and the `MapError` exception.
* `berchk.route.path_exists(rows, start, items)` runs the flood-fill reachability check.

### Reading lines

`berchk.linereader` reads text or bytes streams one line at a time through a fixed-size read buffer. The default buffer size is 5. Each line keeps its trailing newline.

* `LineReader(stream, buffer_size)` reads one stream. Use its `read_line()` method or iterate over it.
* `MultiLineReader(buffer_size)` keeps separate leftovers for each stream you pass to its `read_line(stream)` method.
* `read_lines(stream, buffer_size)` yields every line of a stream.

### String, memory and character helpers

* `berchk.strutil` provides the C-style search and compare functions `strlen`, `strchr`, `strrchr`, `strcmp`, `strncmp` and `strnstr`. It also provides the bounded copies `strlcpy` and `strlcat`. The bounded copies return the resulting text together with the length they wanted to produce.
* `berchk.strbuild` provides `atoi` (which wraps to 32 bits), `itoa`, `split`, `strtrim`, `substr`, `strjoin`, `strdup` and `strmapi`.
* `berchk.memutil` provides in-place `bytearray` helpers: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and `memmove`.
* `berchk.charclass` provides ASCII classification and case mapping: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and `tolower`. It also provides writers that target standard output by default: `putchar`, `putstr`, `putendl` and `putnbr`.

## What it does not do

`berchk` only checks maps. It has no game: it does not draw maps, move the player, animate enemies or count moves.

## Running the tests

```
pip install .[test]
pytest
```