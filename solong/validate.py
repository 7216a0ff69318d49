"""Checking that a grid is a playable map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from .mapfile import (
    BORDERS_ERROR,
    EXIT_ERROR,
    IMPOSSIBLE_ERROR,
    INV_CHAR_ERROR,
    ITEM_ERROR,
    PLAYER_ERROR,
    MapError,
    PathLike,
    load_grid,
)

Position = Tuple[int, int]

FLOOR = "0"
WALL = "1"
EXIT = "E"
PLAYER = "P"
COLLECTIBLE = "C"
TILES = frozenset({FLOOR, WALL, EXIT, PLAYER, COLLECTIBLE})

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True)
class GameMap:
    """A checked map. Positions are (row, column)."""

    grid: Tuple[str, ...]
    player: Position
    exit: Position
    items: int

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)


def reachable(grid: Sequence[str], start: Position) -> FrozenSet[Position]:
    """All cells reachable from start by steps that avoid walls."""
    rows = list(grid)

    def is_open(row: int, col: int) -> bool:
        return 0 <= row < len(rows) and 0 <= col < len(rows[row]) and rows[row][col] != WALL

    if not is_open(*start):
        return frozenset()
    seen = {start}
    stack = [start]
    while stack:
        row, col = stack.pop()
        for d_row, d_col in _STEPS:
            cell = (row + d_row, col + d_col)
            if cell not in seen and is_open(*cell):
                seen.add(cell)
                stack.append(cell)
    return frozenset(seen)


def check_map(grid: Iterable[str]) -> GameMap:
    """Check shape, borders, tiles and solvability; return the map or raise MapError."""
    rows = list(grid)
    if not rows:
        raise MapError(BORDERS_ERROR)
    width = len(rows[0])
    top, bottom = rows[0], rows[-1]
    items = players = exits = 0
    player: Optional[Position] = None
    exit_cell: Optional[Position] = None
    for i, row in enumerate(rows):
        if len(row) != width or not row or row[0] != WALL or row[-1] != WALL:
            raise MapError(BORDERS_ERROR)
        for j, tile in enumerate(row):
            if tile not in TILES:
                raise MapError(INV_CHAR_ERROR)
            if tile == COLLECTIBLE:
                items += 1
            elif tile == PLAYER:
                player = (i, j)
                players += 1
            elif tile == EXIT:
                exit_cell = (i, j)
                exits += 1
            if top[j] != WALL or bottom[j] != WALL:
                raise MapError(BORDERS_ERROR)
    if exits != 1:
        raise MapError(EXIT_ERROR)
    if players != 1:
        raise MapError(PLAYER_ERROR)
    if items == 0:
        raise MapError(ITEM_ERROR)
    assert player is not None and exit_cell is not None
    cells = reachable(rows, player)
    collected = sum(1 for row, col in cells if rows[row][col] == COLLECTIBLE)
    if collected != items or exit_cell not in cells:
        raise MapError(IMPOSSIBLE_ERROR)
    return GameMap(grid=tuple(rows), player=player, exit=exit_cell, items=items)


def load_map(filename: PathLike) -> GameMap:
    """Read a map file and check it."""
    return check_map(load_grid(filename))