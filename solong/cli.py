"""Command line entry point: load a map file and play it."""

from __future__ import annotations

import sys
from typing import List, Optional

from .display import DEFAULT_TEXTURE_DIR, run
from .game import Game
from .mapfile import ERROR_HEADER, MapError
from .output import printf
from .validate import load_map

FORMAT_ERROR = "wrong format, try: ./so_long filename"


def main(argv: Optional[List[str]] = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        printf("%s\n%s\n", ERROR_HEADER, FORMAT_ERROR)
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        printf("%s", exc.report())
        return 1
    try:
        run(Game(game_map), DEFAULT_TEXTURE_DIR)
    except RuntimeError as exc:
        printf("%s\n%s\n", ERROR_HEADER, str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())