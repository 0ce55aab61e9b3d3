"""Tile maps of the game's worlds, and the checks that keep the hero off walls."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Union

from questrpg.geometry import Rect, Vec2

ROWS = 20
COLS = 38
TILE_SIZE = 50
SCREEN_WIDTH = 1900
SCREEN_HEIGHT = 1000
RESOURCES = "ressources/"


class Tile(IntEnum):
    """What a map cell does to whoever walks into it."""

    FLOOR = 0
    WALL = 1
    PORTAL = 2


def is_solid_block(block: str) -> Tile:
    """Classify a map character: ``M`` is a wall, ``P`` a portal, anything else floor."""
    if block == "M":
        return Tile.WALL
    if block == "P":
        return Tile.PORTAL
    return Tile.FLOOR


def tile_index(value: float) -> int:
    """The map row or column a screen coordinate falls in, truncated toward zero."""
    return int(value / TILE_SIZE)


def _digit(number: int) -> str:
    return chr(ord("0") + number)


def map_path(world: str, map_x: int, map_y: int) -> str:
    """Path of the map file for screen (``map_x``, ``map_y``) of ``world``."""
    return f"{RESOURCES}{world}/map/map{_digit(map_x)}.{_digit(map_y)}.txt"


def texture_path(world: str, tile: str) -> str:
    """Path of the texture drawn for the map character ``tile`` in ``world``."""
    if len(tile) != 1:
        raise ValueError(f"a tile is a single character, not {tile!r}")
    name = "" if tile == "\0" else tile
    return f"{RESOURCES}{world}/textures/{name}.png"


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class TileMap:
    """One screen of a world: ``ROWS`` rows of ``COLS`` map characters."""

    rows: list[list[str]]

    def __post_init__(self) -> None:
        if len(self.rows) != ROWS:
            raise ValueError(f"a map has {ROWS} rows, not {len(self.rows)}")
        for number, row in enumerate(self.rows):
            if len(row) != COLS:
                raise ValueError(f"row {number} has {len(row)} cells, not {COLS}")

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> TileMap:
        """Build a map from text lines; characters past ``COLS`` are ignored."""
        rows: list[list[str]] = []
        for number, line in enumerate(lines):
            if number >= ROWS:
                raise ValueError(f"map has more than {ROWS} rows")
            if len(line) < COLS:
                raise ValueError(f"row {number} is shorter than {COLS} characters")
            rows.append(list(line[:COLS]))
        return cls(rows)

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> TileMap:
        """Read a map file, one row per line."""
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
        return cls.from_lines(_split_lines(text))

    @staticmethod
    def _check(row: int, col: int) -> None:
        if not (0 <= row < ROWS and 0 <= col < COLS):
            raise IndexError(f"cell ({row}, {col}) is outside the map")

    def tile(self, row: int, col: int) -> str:
        """The map character at ``row``, ``col``."""
        self._check(row, col)
        return self.rows[row][col]

    def set_tile(self, row: int, col: int, value: str) -> None:
        """Replace the map character at ``row``, ``col``."""
        self._check(row, col)
        if len(value) != 1:
            raise ValueError(f"a tile is a single character, not {value!r}")
        self.rows[row][col] = value

    def cells(self) -> Iterator[tuple[Rect, str]]:
        """Every cell's screen rectangle with its character, row by row."""
        for row_number, row in enumerate(self.rows):
            for col_number, char in enumerate(row):
                yield (
                    Rect(col_number * TILE_SIZE, row_number * TILE_SIZE, TILE_SIZE, TILE_SIZE),
                    char,
                )


@dataclass(frozen=True)
class Moves:
    """Which ways the hero may step from where it stands, and whether a portal is touched."""

    left: bool
    right: bool
    top: bool
    bottom: bool
    portal: bool


def _probe(tilemap: TileMap, row: int, col: int) -> Tile:
    if 0 <= row < ROWS and 0 <= col < COLS:
        return is_solid_block(tilemap.tile(row, col))
    return Tile.FLOOR


def probe_moves(tilemap: TileMap, x: float, y: float) -> Moves:
    """Look at the cells around a hero standing at (``x``, ``y``); cells off the map are floor."""
    col = tile_index(x)
    row = tile_index(y)
    left = _probe(tilemap, row + 1, col)
    right = _probe(tilemap, row + 1, col + 2)
    top = _probe(tilemap, tile_index(y - TILE_SIZE) + 1, col + 1)
    bottom = _probe(tilemap, tile_index(y + 2 * TILE_SIZE), col + 1)
    probes = (left, right, top, bottom)
    return Moves(
        left=left is not Tile.WALL,
        right=right is not Tile.WALL,
        top=top is not Tile.WALL,
        bottom=bottom is not Tile.WALL,
        portal=Tile.PORTAL in probes,
    )


def screen_shift(x: float, y: float) -> tuple[Vec2, int, int]:
    """Wrap a hero who walked off the screen.

    Returns the new position and the changes to the map's x and y screen
    numbers. Leaving sideways changes the y number; leaving through the top
    or bottom changes the x number.
    """
    d_map_x = 0
    d_map_y = 0
    if x < 0:
        d_map_y -= 1
        x = SCREEN_WIDTH
    if x > SCREEN_WIDTH:
        d_map_y += 1
        x = 0
    if y < 0:
        d_map_x += 1
        y = SCREEN_HEIGHT
    if y > SCREEN_HEIGHT:
        d_map_x -= 1
        y = 0
    return Vec2(x, y), d_map_x, d_map_y