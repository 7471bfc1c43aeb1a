"""Game state: the player's position, collected items and moves."""

from __future__ import annotations

from enum import Enum

from solong.gamemap import COLLECTIBLE, EXIT, FLOOR, WALL, GameMap


class Direction(Enum):
    """A step on the grid, as ``(dx, dy)``."""

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


class MoveResult(Enum):
    """What happened when the player tried to move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


class Game:
    """A game in progress on a map.

    The player starts on the map's player tile. Walking onto a collectible
    picks it up; walking onto the exit once everything is collected wins.
    """

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.player = game_map.find_player()
        self.collectibles = game_map.count(COLLECTIBLE)
        self.move_count = 0
        self.finished = False

    def tile_at(self, x: int, y: int) -> str:
        """The tile at column ``x`` of row ``y``."""
        if y < 0 or y >= self.map.height or x < 0 or x >= len(self.map.rows[y]):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.map.rows[y][x]

    def _set_tile(self, x: int, y: int, tile: str) -> None:
        row = self.map.rows[y]
        self.map.rows[y] = row[:x] + tile + row[x + 1 :]

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one tile in ``direction``."""
        if self.finished:
            raise RuntimeError("the game is over")
        x = self.player[0] + direction.dx
        y = self.player[1] + direction.dy
        tile = self.tile_at(x, y)
        if tile == WALL:
            return MoveResult.BLOCKED
        self.player = (x, y)
        if tile == COLLECTIBLE:
            self.collectibles -= 1
            self._set_tile(x, y, FLOOR)
        self.move_count += 1
        if tile == EXIT and self.collectibles == 0:
            self.finished = True
            return MoveResult.WON
        return MoveResult.MOVED