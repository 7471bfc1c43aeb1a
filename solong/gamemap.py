"""Game maps: loading from ``.ber`` files and checking that they are playable."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass

from solong.lines import read_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
VALID_TILES = frozenset(WALL + FLOOR + PLAYER + COLLECTIBLE + EXIT)
MAP_SUFFIX = ".ber"
MIN_HEIGHT = 3


class MapError(Exception):
    """A map file cannot be read or does not describe a playable map."""


def check_file_name(name: str) -> str:
    """Return ``name`` if it ends in ``.ber``, else raise MapError."""
    if name[-len(MAP_SUFFIX) :] != MAP_SUFFIX:
        raise MapError("Wrong file name")
    return name


@dataclass
class GameMap:
    """A grid of tiles, one string per row.

    ``width`` is taken from the first row unless given.
    """

    rows: list[str]
    width: int | None = None

    def __post_init__(self) -> None:
        if self.width is None:
            self.width = len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def is_rectangular(self) -> bool:
        """True when every row is as long as the first."""
        if not self.rows:
            return True
        first = len(self.rows[0])
        return all(len(row) == first for row in self.rows)

    def has_valid_chars(self) -> bool:
        """True when every tile within the map width is a known tile."""
        return all(
            len(row) >= self.width and set(row[: self.width]) <= VALID_TILES
            for row in self.rows
        )

    def is_enclosed(self) -> bool:
        """True when every tile on the border is a wall."""
        last_row = self.height - 1
        last_col = self.width - 1
        for y, row in enumerate(self.rows):
            for x, tile in enumerate(row):
                on_border = y in (0, last_row) or x in (0, last_col)
                if on_border and tile != WALL:
                    return False
        return True

    def count(self, tile: str) -> int:
        """Number of occurrences of ``tile`` in the map."""
        return sum(row.count(tile) for row in self.rows)

    def has_valid_counts(self) -> bool:
        """Exactly one player, exactly one exit and at least one collectible."""
        return (
            self.count(PLAYER) == 1
            and self.count(EXIT) == 1
            and self.count(COLLECTIBLE) >= 1
        )

    def find_player(self) -> tuple[int, int]:
        """Position ``(x, y)`` of the last player tile; ``(0, 0)`` if none."""
        position = (0, 0)
        for y, row in enumerate(self.rows):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    position = (x, y)
        return position

    def has_valid_path(self) -> bool:
        """True when the player can reach every collectible and the exit."""
        reachable = flood_fill(self.rows, self.find_player())
        reached = [self.rows[y][x] for x, y in reachable]
        return (
            reached.count(COLLECTIBLE) == self.count(COLLECTIBLE)
            and EXIT in reached
        )

    def validate(self) -> None:
        """Raise MapError describing the first problem found, if any."""
        if not self.is_rectangular():
            raise MapError("Not rectangular shape")
        if not self.has_valid_chars() or not self.has_valid_counts():
            raise MapError("Invalid character or No exit")
        if not self.is_enclosed():
            raise MapError("MAP is not closed by Walls")
        if not self.has_valid_path():
            raise MapError("Invalid path")


def flood_fill(rows: list[str], start: tuple[int, int]) -> set[tuple[int, int]]:
    """Positions ``(x, y)`` reachable from ``start`` without crossing walls.

    Movement is in the four orthogonal directions; only wall tiles block.
    A start outside the grid or on a wall reaches nothing.
    """
    reachable: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if (x, y) in reachable:
            continue
        if y < 0 or y >= len(rows) or x < 0 or x >= len(rows[y]):
            continue
        if rows[y][x] == WALL:
            continue
        reachable.add((x, y))
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return reachable


def parse_map(text: str) -> GameMap:
    """Build a GameMap from the text of a map file.

    Each line becomes a row with its newline removed. A map needs at
    least three lines.
    """
    lines = list(read_lines(io.StringIO(text, newline="")))
    if len(lines) < MIN_HEIGHT:
        raise MapError("Map has too few lines")
    rows = [line.split("\n", 1)[0] for line in lines]
    return GameMap(rows)


def read_map(path: str | os.PathLike[str]) -> GameMap:
    """Read and parse the map file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"failed open map: {exc}") from exc
    return parse_map(text)