"""The windowed game: drawing the map and running the event loop."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import (  # noqa: E402
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    TILE_SIZE,
    Direction,
    Game,
)
from .gamemap import COLLECTIBLE, EXIT, PLAYER, WALL, MapError, load_map  # noqa: E402
from .validation import check_input_path, validate_map  # noqa: E402

_TEXTURES = {
    "background": "backgroud/black.xpm",
    "wall": "wall/wall_00.xpm",
    "player_up": "player/ship_up.xpm",
    "player_down": "player/ship_down.xpm",
    "player_left": "player/ship_left.xpm",
    "player_right": "player/ship_right.xpm",
    "door": "goal/tv.xpm",
    "collectible": "rewards/reward.xpm",
}

_PLAYER_SPRITES = {
    Direction.UP: "player_up",
    Direction.DOWN: "player_down",
    Direction.LEFT: "player_left",
    Direction.RIGHT: "player_right",
}

_PYGAME_KEYS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_ESCAPE: KEY_ESC,
}


class Renderer:
    """Draws a game onto a surface using the sprites in a textures directory."""

    def __init__(self, textures_dir: str | os.PathLike[str] = "textures") -> None:
        self.textures_dir = Path(textures_dir)
        self._images: dict[str, pygame.Surface] | None = None

    def _load(self) -> dict[str, pygame.Surface]:
        if self._images is None:
            self._images = {
                name: pygame.image.load(str(self.textures_dir / relative))
                for name, relative in _TEXTURES.items()
            }
        return self._images

    def sprite_for(self, game: Game, x: int, y: int) -> tuple[str, ...]:
        """Return the names of the sprites drawn at ``(x, y)``, bottom first."""
        tile = game.map.tile(x, y)
        layers = ["background"]
        on_closed_exit = (
            tile == EXIT
            and game.position == (x, y)
            and game.collected < game.total_collectibles
        )
        if tile == WALL:
            layers.append("wall")
        elif tile == PLAYER or on_closed_exit:
            layers.append(_PLAYER_SPRITES[game.facing])
        elif tile == EXIT:
            layers.append("door")
        elif tile == COLLECTIBLE:
            layers.append("collectible")
        return tuple(layers)

    def draw(self, game: Game, surface: pygame.Surface) -> None:
        """Blit every playable tile of the game's map onto ``surface``."""
        images = self._load()
        for y in range(game.map.height):
            for x in range(game.map.columns):
                for name in self.sprite_for(game, x, y):
                    surface.blit(images[name], (x * TILE_SIZE, y * TILE_SIZE))


def load_game(path: str | os.PathLike[str]) -> Game:
    """Read and validate the map at ``path`` and start a game on it."""
    game_map = load_map(path)
    validate_map(game_map)
    return Game(game_map)


def _error() -> None:
    sys.stderr.write("Error\n")


def _run(game: Game) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.map.columns * TILE_SIZE, game.map.height * TILE_SIZE)
        )
        pygame.display.set_caption("so_long")
        renderer = Renderer()
        try:
            renderer.draw(game, screen)
        except (pygame.error, FileNotFoundError):
            _error()
            return 1
        pygame.display.flip()
        while not game.finished:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYDOWN:
                game.press(_PYGAME_KEYS.get(event.key, event.key))
                if not game.finished:
                    renderer.draw(game, screen)
                    pygame.display.flip()
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not check_input_path(args[0]):
        _error()
        return 1
    path = args[0]
    try:
        game_map = load_map(path)
    except MapError:
        _error()
        return 1
    try:
        validate_map(game_map)
    except MapError:
        _error()
        return 0
    return _run(Game(game_map))


if __name__ == "__main__":
    sys.exit(main())