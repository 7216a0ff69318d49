"""Game state: moving the player, collecting items and reaching the exit."""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .validate import COLLECTIBLE, FLOOR, PLAYER, WALL, GameMap, Position


class Direction(Enum):
    """A step as (row change, column change)."""

    UP = (-1, 0)
    LEFT = (0, -1)
    DOWN = (1, 0)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


class MoveResult(Enum):
    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"


class Game:
    """A game in progress on a checked map."""

    def __init__(self, game_map: GameMap):
        self.map = game_map
        self._cells: List[List[str]] = [list(row) for row in game_map.grid]
        self.player: Position = game_map.player
        self.exit: Position = game_map.exit
        self.items = game_map.items
        self.collected = 0
        self.moves = 0
        self.exit_open = False
        self.finished = False

    def _tile(self, row: int, col: int) -> str:
        if 0 <= row < len(self._cells) and 0 <= col < len(self._cells[row]):
            return self._cells[row][col]
        return WALL

    def move(self, direction: Direction) -> MoveResult:
        """Step the player one cell; walls block without counting a move."""
        if self.finished:
            raise RuntimeError("the game is over")
        d_row, d_col = direction.delta
        target = (self.player[0] + d_row, self.player[1] + d_col)
        tile = self._tile(*target)
        if tile == WALL:
            return MoveResult.BLOCKED
        self.moves += 1
        result = MoveResult.MOVED
        if tile == COLLECTIBLE:
            self.collected += 1
            result = MoveResult.COLLECTED
            if self.collected == self.items:
                self.exit_open = True
        if target == self.exit and self.exit_open:
            self.finished = True
            return MoveResult.WON
        row, col = self.player
        self._cells[row][col] = FLOOR
        self._cells[target[0]][target[1]] = PLAYER
        self.player = target
        return result

    def rows(self) -> List[str]:
        """The current grid, one string per row."""
        return ["".join(row) for row in self._cells]