"""Drawing a game in a window and playing it from the keyboard."""

from __future__ import annotations

import os
from typing import Dict, List, Optional, Tuple, Union

from .game import Direction, Game, MoveResult
from .output import printf
from .validate import COLLECTIBLE, FLOOR, WALL

TILE_SIZE = 64
WINDOW_TITLE = "game"
DEFAULT_TEXTURE_DIR = "textures"

PLAYER_TEXTURE = "player.xpm"
EXIT_TEXTURE = "exit.xpm"
FLOOR_TEXTURE = "floor.xpm"
ITEM_TEXTURE = "item.xpm"
WALL_TEXTURE = "wall.xpm"

TEXTURES = (PLAYER_TEXTURE, EXIT_TEXTURE, FLOOR_TEXTURE, ITEM_TEXTURE, WALL_TEXTURE)

Tile = Tuple[str, int, int]

_ESCAPE = 27

_KEY_DIRECTIONS: Dict[int, Direction] = {
    ord("w"): Direction.UP,
    ord("W"): Direction.UP,
    ord("a"): Direction.LEFT,
    ord("A"): Direction.LEFT,
    ord("s"): Direction.DOWN,
    ord("S"): Direction.DOWN,
    ord("d"): Direction.RIGHT,
    ord("D"): Direction.RIGHT,
}

_TILE_TEXTURES = {
    FLOOR: FLOOR_TEXTURE,
    WALL: WALL_TEXTURE,
    COLLECTIBLE: ITEM_TEXTURE,
}


def key_to_direction(key: Union[int, str]) -> Optional[Direction]:
    """The direction bound to a key code or character (W A S D), else None."""
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"expected a single character, got {key!r}")
        key = ord(key)
    return _KEY_DIRECTIONS.get(key)


def tiles(game: Game) -> List[Tile]:
    """The images to draw, in order, as (texture name, x pixel, y pixel).

    Floor, wall and item cells come first, row by row; the exit and then the
    player are drawn last, over whatever lies beneath them.
    """
    drawn: List[Tile] = [
        (_TILE_TEXTURES[tile], col * TILE_SIZE, row * TILE_SIZE)
        for row, line in enumerate(game.rows())
        for col, tile in enumerate(line)
        if tile in _TILE_TEXTURES
    ]
    exit_row, exit_col = game.exit
    drawn.append((EXIT_TEXTURE, exit_col * TILE_SIZE, exit_row * TILE_SIZE))
    player_row, player_col = game.player
    drawn.append((PLAYER_TEXTURE, player_col * TILE_SIZE, player_row * TILE_SIZE))
    return drawn


def run(game: Game, texture_dir: str = DEFAULT_TEXTURE_DIR) -> bool:
    """Open a window and play until the player wins, presses Escape or closes it.

    Each move that is not blocked prints the move count. Returns True when the
    game was won.
    """
    import pygame

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(
                (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
            )
            pygame.display.set_caption(WINDOW_TITLE)
            images = {
                name: pygame.image.load(os.path.join(texture_dir, name))
                for name in TEXTURES
            }
        except (pygame.error, OSError) as exc:
            raise RuntimeError(f"cannot start the display: {exc}") from exc

        def draw() -> None:
            for name, x, y in tiles(game):
                screen.blit(images[name], (x, y))
            pygame.display.flip()

        draw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type != pygame.KEYDOWN:
                continue
            if event.key in (pygame.K_ESCAPE, _ESCAPE):
                break
            direction = key_to_direction(event.key)
            if direction is None:
                continue
            result = game.move(direction)
            if result is MoveResult.BLOCKED:
                continue
            printf("moves : %d\n", game.moves)
            if result is MoveResult.WON:
                break
            draw()
    finally:
        pygame.quit()
    return game.finished