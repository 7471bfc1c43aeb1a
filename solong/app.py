"""Window, textures, keyboard input and the command-line entry point."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Direction, Game, MoveResult  # noqa: E402
from solong.gamemap import (  # noqa: E402
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    MapError,
    check_file_name,
    read_map,
)
from solong.output import putchar, putnbr, putstr  # noqa: E402

TILE_SIZE = 64
WINDOW_TITLE = "Sonic Game"
DEFAULT_TEXTURES = "textures"
TEXTURE_FILES = {
    "wall": "wall.xpm",
    "floor": "floor.xpm",
    "exit": "exit.xpm",
    "player": "sonic.xpm",
    "collect": "ring.xpm",
}
WIN_MESSAGE = "\nCongrats ! YOU WIN :)\n"

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class TextureError(Exception):
    """A texture image could not be loaded."""


@dataclass
class Textures:
    """The images used to draw each kind of tile and the player."""

    wall: pygame.Surface
    floor: pygame.Surface
    exit: pygame.Surface
    player: pygame.Surface
    collect: pygame.Surface


def load_textures(directory: str | os.PathLike[str]) -> Textures:
    """Load every texture from ``directory``; raise TextureError on failure."""
    base = Path(directory)
    images = {}
    for name, filename in TEXTURE_FILES.items():
        try:
            images[name] = pygame.image.load(str(base / filename))
        except (OSError, pygame.error) as exc:
            raise TextureError("invalid texture") from exc
    return Textures(**images)


def tile_image(textures: Textures, tile: str) -> pygame.Surface | None:
    """The image drawn for ``tile``, or None for tiles that are not drawn."""
    return {
        WALL: textures.wall,
        FLOOR: textures.floor,
        EXIT: textures.exit,
        PLAYER: textures.floor,
        COLLECTIBLE: textures.collect,
    }.get(tile)


def key_direction(key: int) -> Direction | None:
    """The direction bound to a pygame key code, if any."""
    return _KEY_DIRECTIONS.get(key)


class Renderer:
    """Draws a game onto a surface, one tile-sized image per map cell."""

    def __init__(self, surface: pygame.Surface, textures: Textures) -> None:
        self.surface = surface
        self.textures = textures

    def draw(self, game: Game) -> None:
        """Draw every tile of the map and then the player on top."""
        for y, row in enumerate(game.map.rows):
            for x, tile in enumerate(row[: game.map.width]):
                image = tile_image(self.textures, tile)
                if image is not None:
                    self.surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))
        px, py = game.player
        self.surface.blit(self.textures.player, (px * TILE_SIZE, py * TILE_SIZE))


def run(game: Game, textures_dir: str | os.PathLike[str] = DEFAULT_TEXTURES) -> None:
    """Open a window and play ``game`` until it is won or closed."""
    textures = load_textures(textures_dir)
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen, textures)
        renderer.draw(game)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return
            direction = key_direction(event.key)
            if direction is None:
                continue
            result = game.move(direction)
            if result is MoveResult.WON:
                putnbr(game.move_count)
                putstr(WIN_MESSAGE)
                return
            if result is MoveResult.MOVED:
                renderer.draw(game)
                pygame.display.flip()
                putnbr(game.move_count)
                putchar("\n")
    finally:
        pygame.quit()


def _error(message: str) -> None:
    putstr(f"Error\n{message}\n", sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        putstr("Error Args\n", sys.stderr)
        return 1
    try:
        game_map = read_map(check_file_name(args[0]))
    except MapError as exc:
        _error(str(exc))
        return 1
    try:
        game_map.validate()
    except MapError as exc:
        _error(str(exc))
        return 0
    try:
        run(Game(game_map))
    except TextureError as exc:
        _error(str(exc))
    return 0