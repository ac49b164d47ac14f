"""Reachability check for a game map: can every collectible and then the exit be reached?"""

from __future__ import annotations

from collections.abc import Sequence

WALL = "1"
COLLECTIBLE = "C"
EXIT = "E"


def path_exists(rows: Sequence[str], start: tuple[int, int], items: int) -> bool:
    """Flood-fill from ``start`` (x, y) and report whether the map can be finished.

    Cells are explored depth first, trying right, left, down and up in that
    order. The exit only counts if it is reached after all ``items``
    collectibles have been picked up along the fill. Trailing newlines on
    ``rows`` are ignored.
    """
    grid = [row.rstrip("\n") for row in rows]
    visited: set[tuple[int, int]] = set()
    items_left = items
    exit_found = False
    stack = [start]
    while stack:
        x, y = stack.pop()
        if y < 0 or y >= len(grid) or x < 0 or x >= len(grid[y]):
            continue
        if (x, y) in visited or grid[y][x] == WALL:
            continue
        visited.add((x, y))
        cell = grid[y][x]
        if cell == COLLECTIBLE:
            items_left -= 1
        if cell == EXIT and items_left == 0:
            exit_found = True
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return exit_found and items_left == 0