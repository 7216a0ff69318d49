"""Map files: checking the path and reading the file into rows of tiles."""

from __future__ import annotations

import os
from typing import IO, List, Union

from .lines import LineReader

PathLike = Union[str, "os.PathLike[str]"]

MAP_EXTENSION = ".ber"
MIN_HEIGHT = 3

ERROR_HEADER = "Error"
FILE_ERROR = "Invalid File path or extension"
FAIL_ERROR = "Malloc Failed Try again"
SHORT_ERROR = "Map is too short"
INV_CHAR_ERROR = "Invalid characters, only 01EPC"
BORDERS_ERROR = "The Borders are not enclosed"
EXIT_ERROR = "Exit error"
PLAYER_ERROR = "Player error"
ITEM_ERROR = "Item error"
IMPOSSIBLE_ERROR = "Map is Impossible"


class MapError(Exception):
    """A map file or map grid that cannot be played."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def report(self) -> str:
        """The text shown to the user: the error header and the message."""
        return f"{ERROR_HEADER}\n{self.message}\n"


def _name(filename: PathLike) -> str:
    name = os.fspath(filename)
    if isinstance(name, bytes):
        name = os.fsdecode(name)
    return name


def _open(name: str) -> IO[str]:
    # Opened for reading and writing, so a read-only file is refused too.
    return open(name, "r+", encoding="latin-1", newline="")


def validate_path(filename: PathLike) -> int:
    """Check the name ends in '.ber' and the file opens; return its line count."""
    name = _name(filename)
    dot = name.rfind(".")
    if dot <= 0 or name[dot - 1] == "/" or name[dot:] != MAP_EXTENSION:
        raise MapError(FILE_ERROR)
    try:
        with _open(name) as stream:
            return sum(1 for _ in LineReader(stream))
    except OSError as exc:
        raise MapError(FILE_ERROR) from exc


def read_grid(filename: PathLike) -> List[str]:
    """Return the lines of the file with their trailing newline removed."""
    try:
        with _open(_name(filename)) as stream:
            return [
                line[:-1] if line.endswith("\n") else line
                for line in LineReader(stream)
            ]
    except OSError as exc:
        raise MapError(FAIL_ERROR) from exc


def load_grid(filename: PathLike) -> List[str]:
    """Check the path and size of a map file, then read its rows."""
    height = validate_path(filename)
    if height < MIN_HEIGHT:
        raise MapError(SHORT_ERROR)
    return read_grid(filename)