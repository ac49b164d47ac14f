"""Loading and full validation of ``.ber`` game maps, with a command-line checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from berchk.linereader import read_lines
from berchk.mapcheck import (
    COLLECTIBLE,
    EXIT,
    PLAYER,
    ElementCounts,
    LineKind,
    MapError,
    check_params,
    check_rectangular,
    check_walls,
)
from berchk.route import path_exists

MIN_LINES = 3


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows without newlines and the key positions (x, y)."""

    rows: tuple[str, ...]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)


def _line_kind(index: int, total: int) -> LineKind:
    if index == 0:
        return LineKind.FIRST
    if index == total - 1:
        return LineKind.LAST
    return LineKind.MIDDLE


def _find(rows: Sequence[str], char: str) -> tuple[int, int]:
    return next(
        (x, y) for y, row in enumerate(rows) for x, cell in enumerate(row) if cell == char
    )


def parse_map(lines: Iterable[str]) -> GameMap:
    """Validate the lines of a map and return it; raise MapError if it is unplayable."""
    lines = list(lines)
    if len(lines) < MIN_LINES:
        raise MapError("Error: Map is not valid")
    check_rectangular(lines)
    counts = ElementCounts()
    for index, line in enumerate(lines):
        check_walls(line, _line_kind(index, len(lines)))
        counts.count(line)
    counts.validate()
    rows = tuple(line[:-1] if line.endswith("\n") else line for line in lines)
    player = _find(rows, PLAYER)
    if not path_exists(rows, player, counts.collectibles):
        raise MapError("Error: Map has no valid exit")
    return GameMap(
        rows=rows,
        player=player,
        exit=_find(rows, EXIT),
        collectibles=sum(row.count(COLLECTIBLE) for row in rows),
    )


def load_map(path: Union[str, Path]) -> GameMap:
    """Read the map file at ``path`` and validate it."""
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            lines = list(read_lines(stream))
    except OSError as exc:
        raise MapError("File not found") from exc
    return parse_map(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the map named on the command line; print a summary or the error."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        game_map = load_map(check_params(args))
    except MapError as exc:
        print(f"Error\n{exc}")
        return 1
    print(
        f"{args[0]}: {game_map.width}x{game_map.height}, "
        f"{game_map.collectibles} collectibles"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())