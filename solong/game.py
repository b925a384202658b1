"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

import enum
from typing import TextIO

from .gamemap import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap, MapError
from .printf import printf

KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_ESC = 65307
TILE_SIZE = 32


class Direction(enum.Enum):
    """A direction the player can move in, valued by its ``(dx, dy)`` step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Event(enum.Enum):
    """What happened as the result of one input."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    ON_EXIT = "on_exit"
    WON = "won"
    QUIT = "quit"


_KEY_DIRECTIONS = {
    ord("w"): Direction.UP,
    KEY_UP: Direction.UP,
    ord("s"): Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
    ord("a"): Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    ord("d"): Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
}


def _as_code(keycode: int | str) -> int:
    if isinstance(keycode, str):
        if len(keycode) != 1:
            raise ValueError("a key is a single character")
        return ord(keycode)
    return int(keycode)


def direction_for_key(keycode: int | str) -> Direction | None:
    """Return the direction bound to a key (WASD or arrows), or ``None``."""
    return _KEY_DIRECTIONS.get(_as_code(keycode))


class Game:
    """A running game: the map, the player, moves made and items collected."""

    def __init__(self, game_map: GameMap, out: TextIO | None = None) -> None:
        start = game_map.find(PLAYER)
        if start is None:
            raise MapError("map has no player")
        self.map = game_map
        self.x, self.y = start
        self.moves = 0
        self.collected = 0
        self.total_collectibles = game_map.count(COLLECTIBLE)
        self.facing = Direction.DOWN
        self.won = False
        self.quit = False
        self._out = out

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def finished(self) -> bool:
        return self.won or self.quit

    @property
    def all_collected(self) -> bool:
        return self.collected == self.total_collectibles

    def step(self, direction: Direction) -> Event:
        """Try to move one tile in ``direction`` and report what happened."""
        if self.finished:
            raise RuntimeError("the game is over")
        new_x, new_y = self.x + direction.dx, self.y + direction.dy
        target = self.map.tile(new_x, new_y)
        if target in (WALL, ""):
            return Event.BLOCKED

        event = Event.MOVED
        if target == COLLECTIBLE:
            self.collected += 1
            self.map.set_tile(new_x, new_y, FLOOR)
            event = Event.COLLECTED
        elif target == EXIT and self.all_collected:
            self.moves += 1
            printf("You Win in %d Moves!!\n", self.moves, stream=self._out)
            self.facing = direction
            self.x, self.y = new_x, new_y
            self.won = True
            return Event.WON

        if self.map.tile(self.x, self.y) != EXIT:
            self.map.set_tile(self.x, self.y, FLOOR)
        self.facing = direction
        self.x, self.y = new_x, new_y
        if target == EXIT:
            return Event.ON_EXIT
        self.map.set_tile(new_x, new_y, PLAYER)
        self.moves += 1
        printf("Movements: %d\n", self.moves, stream=self._out)
        return event

    def press(self, keycode: int | str) -> Event:
        """Handle a key press: a movement key, escape, or anything else."""
        code = _as_code(keycode)
        if code == KEY_ESC:
            self.quit = True
            return Event.QUIT
        direction = direction_for_key(code)
        if direction is None:
            return Event.IGNORED
        return self.step(direction)