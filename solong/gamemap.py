"""Tile maps: loading, querying and editing the grid the game is played on."""

from __future__ import annotations

import os
from typing import Iterable

from .linereader import read_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
KNOWN_TILES = frozenset({WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE})


class MapError(Exception):
    """Raised when a map cannot be read or is not a playable map."""


class GameMap:
    """A grid of tiles built from the lines of a map file.

    ``width`` is the length of the first line including its newline, so the
    playable columns are ``width - 1``.  Rows keep the characters they were
    read with, their newline included.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._cells: list[list[str]] = [list(line) for line in lines]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "GameMap":
        """Build a map from raw lines, each normally ending in a newline."""
        return cls(lines)

    @property
    def width(self) -> int:
        return len(self._cells[0]) if self._cells else 0

    @property
    def height(self) -> int:
        return len(self._cells)

    @property
    def columns(self) -> int:
        """Number of playable columns on each row."""
        return max(self.width - 1, 0)

    @property
    def row_lengths(self) -> tuple[int, ...]:
        """Length of every row as read, newline included."""
        return tuple(len(row) for row in self._cells)

    @property
    def lines(self) -> list[str]:
        """The rows as strings, newline included."""
        return ["".join(row) for row in self._cells]

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` of row ``y``, or ``""`` outside the rows."""
        if 0 <= y < self.height:
            row = self._cells[y]
            if 0 <= x < len(row):
                return row[x]
        return ""

    def set_tile(self, x: int, y: int, tile: str) -> None:
        """Replace the tile at column ``x`` of row ``y``."""
        if len(tile) != 1:
            raise ValueError("a tile is a single character")
        if not (0 <= y < self.height and 0 <= x < len(self._cells[y])):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        self._cells[y][x] = tile

    def _playable(self) -> Iterable[tuple[int, int, str]]:
        columns = self.columns
        for y, row in enumerate(self._cells):
            for x, char in enumerate(row[:columns]):
                yield x, y, char

    def count(self, tile: str) -> int:
        """Count the occurrences of ``tile`` within the playable columns."""
        return sum(1 for _, _, char in self._playable() if char == tile)

    def find(self, tile: str) -> tuple[int, int] | None:
        """Return the first ``(x, y)`` holding ``tile``, scanning row by row."""
        return next(((x, y) for x, y, char in self._playable() if char == tile), None)

    def grid(self) -> list[list[str]]:
        """Return an independent copy of the playable area, rows of columns.

        Cells missing from short rows are ``""``.
        """
        columns = self.columns
        copy = []
        for row in self._cells:
            cells = row[:columns]
            copy.append(cells + [""] * (columns - len(cells)))
        return copy


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read the map file at ``path``.

    Raises :class:`MapError` when the file cannot be read or holds no line.
    """
    try:
        lines = read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(f"cannot read map {os.fspath(path)!r}: {exc}") from exc
    if not lines:
        raise MapError(f"map {os.fspath(path)!r} is empty")
    return GameMap.from_lines(lines)