"""Validation of ``.ber`` map files: command line, shape, border walls and game elements."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from berchk.strutil import strcmp, strrchr

MAP_EXTENSION = ".ber"
WALL = "1"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
_MIDDLE_ALLOWED = frozenset("CPE01N")


class MapError(Exception):
    """A map, or the command line naming it, was rejected."""


class LineKind(Enum):
    """Where a line sits in the map, which decides the wall rule it must meet."""

    FIRST = 1
    MIDDLE = 2
    LAST = 3


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


@dataclass
class ElementCounts:
    """Running totals of players, exits and collectibles seen in a map."""

    players: int = 0
    exits: int = 0
    collectibles: int = 0

    def count(self, line: str) -> None:
        """Add the players, exits and collectibles found in ``line``."""
        self.players += line.count(PLAYER)
        self.exits += line.count(EXIT)
        self.collectibles += line.count(COLLECTIBLE)

    def validate(self) -> None:
        """Raise MapError unless there is one player, one exit and a collectible."""
        if self.players != 1:
            raise MapError("More than one player on map or not player found.")
        if self.exits != 1:
            raise MapError("More than one exit on map or not exit found.")
        if self.collectibles < 1:
            raise MapError("No collectibles on map.")


def check_extension(filename: str, extension: str) -> bool:
    """Return True if the text from the last dot of ``filename`` equals ``extension``.

    A name with no dot, or whose only dot is its first character, never matches.
    """
    dot = strrchr(filename, ".")
    if dot is None or dot == 0:
        return False
    return strcmp(filename[dot:], extension) == 0


def check_params(argv: Sequence[str]) -> Path:
    """Check the command-line arguments and return the path of the map to load.

    Exactly one argument is expected: a readable file ending in ``.ber``.
    """
    if len(argv) != 1:
        raise MapError("Wrong number of arguments")
    path = argv[0]
    if not check_extension(path, MAP_EXTENSION):
        raise MapError("Wrong file extension")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise MapError("File not found") from exc
    return Path(path)


def check_rectangular(lines: Iterable[str]) -> int:
    """Check that every line has the same width, ignoring one trailing newline.

    The width is fixed by the first line that is not empty. Returns that width.
    """
    width = 0
    for line in lines:
        length = len(_strip_newline(line))
        if width == 0:
            width = length
        elif length != width:
            raise MapError("Map is not rectangular")
    return width


def _first_line_ok(line: str) -> bool:
    return all(char == WALL for char in _strip_newline(line))


def _middle_line_ok(line: str) -> bool:
    body = _strip_newline(line)
    if not body or body[0] != WALL or body[-1] != WALL:
        return False
    return all(char in _MIDDLE_ALLOWED for char in body)


def _last_line_ok(line: str) -> bool:
    # The final character is never examined, newline or not.
    return all(char == WALL for char in line[:-1])


def check_walls(line: str, kind: LineKind) -> bool:
    """Check one map line against the wall rule for its position.

    The first and last lines must be all walls; a middle line must start and
    end with a wall and hold only map elements. Raises MapError otherwise.
    """
    if kind is LineKind.FIRST and not _first_line_ok(line):
        raise MapError("First line is not valid")
    if kind is LineKind.LAST and not _last_line_ok(line):
        raise MapError("Last line is not valid")
    if kind is LineKind.MIDDLE and not _middle_line_ok(line):
        raise MapError("Medium line is not valid")
    return True