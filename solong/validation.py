"""Checks that decide whether a map is playable."""

from __future__ import annotations

import os

from .gamemap import (
    COLLECTIBLE,
    EXIT,
    KNOWN_TILES,
    PLAYER,
    WALL,
    GameMap,
    MapError,
)

_VISITED = "V"
_BLOCKING = frozenset({WALL, _VISITED, "B"})


def is_empty(game_map: GameMap) -> bool:
    """True when the map has no rows or its first row is empty."""
    return game_map.height == 0 or game_map.width == 0


def is_surrounded_by_wall(game_map: GameMap) -> bool:
    """True when every border tile of the playable area is a wall."""
    last_row = game_map.height - 1
    last_col = game_map.width - 2
    for y in range(game_map.height):
        for x in range(game_map.columns):
            on_border = y in (0, last_row) or x in (0, last_col)
            if on_border and game_map.tile(x, y) != WALL:
                return False
    return True


def is_rectangle(game_map: GameMap) -> bool:
    """True when all rows but the last match the first row's length.

    The last row may be as long as the first or one character shorter.
    """
    lengths = game_map.row_lengths
    if not lengths:
        return False
    width = game_map.width
    *body, last = lengths
    if any(length != width for length in body):
        return False
    return last in (width, width - 1)


def has_only_known_tiles(game_map: GameMap) -> bool:
    """True when every playable cell is one of ``0 1 P E C``."""
    known = sum(1 for row in game_map.grid() for cell in row if cell in KNOWN_TILES)
    return known == game_map.columns * game_map.height


def count_players(game_map: GameMap) -> int:
    return game_map.count(PLAYER)


def count_exits(game_map: GameMap) -> int:
    return game_map.count(EXIT)


def count_collectibles(game_map: GameMap) -> int:
    return game_map.count(COLLECTIBLE)


def flood_fill(grid: list[list[str]], row: int, col: int) -> None:
    """Mark with ``V`` every cell reachable from ``(row, col)`` in place.

    Walls, already visited cells and ``B`` cells stop the fill, as do the
    edges of the grid.
    """
    pending = [(row, col)]
    while pending:
        r, c = pending.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        if grid[r][c] in _BLOCKING:
            continue
        grid[r][c] = _VISITED
        pending.extend(((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)))


def collectibles_reachable(game_map: GameMap) -> bool:
    """True when the player can walk to every collectible."""
    start = game_map.find(PLAYER)
    if start is None:
        return False
    grid = game_map.grid()
    x, y = start
    flood_fill(grid, y, x)
    return all(cell != COLLECTIBLE for row in grid for cell in row)


def validate_map(game_map: GameMap) -> tuple[int, int]:
    """Check that the map is playable and return the player's ``(x, y)``.

    Raises :class:`MapError` naming the first rule the map breaks.
    """
    if is_empty(game_map):
        raise MapError("map is empty")
    if not is_surrounded_by_wall(game_map):
        raise MapError("map is not surrounded by walls")
    if count_collectibles(game_map) < 1:
        raise MapError("map has no collectible")
    if count_exits(game_map) != 1:
        raise MapError("map must have exactly one exit")
    if not is_rectangle(game_map):
        raise MapError("map is not rectangular")
    if count_players(game_map) != 1:
        raise MapError("map must have exactly one player")
    if not has_only_known_tiles(game_map):
        raise MapError("map holds unknown tiles")
    position = game_map.find(PLAYER)
    if position is None or not collectibles_reachable(game_map):
        raise MapError("not every collectible can be reached")
    return position


def check_input_path(path: str | os.PathLike[str]) -> bool:
    """True when the map path is accepted.

    Paths shorter than four characters are accepted.  Otherwise, looking at
    the three characters after the first ``.`` (or after the end when there
    is none), the path is accepted only when the first is not ``e``, the
    second is not ``r`` and the third exists.
    """
    text = os.fspath(path)
    if len(text) < 4:
        return True
    dot = text.find(".")
    start = len(text) if dot < 0 else dot

    def at(index: int) -> str:
        return text[index] if index < len(text) else ""

    return at(start + 1) != "e" and at(start + 2) != "r" and at(start + 3) != ""