"""The dungeon tile map."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Sequence

import pygame

from .textures import draw

log = logging.getLogger(__name__)

MAP_SIZE = 25
TILE_SIZE = 16
TILE_SCALE = 2
TILESET_PATH = "assets/16x16DungeonTileset.png"


class Tile(IntEnum):
    EMPTY = 0
    FLOOR = 1
    WALL_FRONT = 2
    WALL_OUTER_N = 3
    WALL_OUTER_W = 4
    WALL_OUTER_E = 5
    WALL_OUTER_NW = 6
    WALL_OUTER_NE = 7


TILE_SOURCES: dict[int, tuple[int, int]] = {
    Tile.FLOOR: (32, 48),
    Tile.WALL_FRONT: (272, 16),
    Tile.WALL_OUTER_N: (272, 0),
    Tile.WALL_OUTER_W: (256, 16),
    Tile.WALL_OUTER_E: (288, 16),
    Tile.WALL_OUTER_NW: (256, 0),
    Tile.WALL_OUTER_NE: (288, 0),
}


def _room_row(left: int, fill: int, right: int) -> tuple[int, ...]:
    return (0,) * 4 + (left,) + (fill,) * 9 + (right,) + (0,) * 10


_EMPTY_ROW = (0,) * MAP_SIZE

LEVEL_1: tuple[tuple[int, ...], ...] = (
    (_EMPTY_ROW,)
    + (_room_row(Tile.WALL_OUTER_NW, Tile.WALL_OUTER_N, Tile.WALL_OUTER_NE),)
    + (_room_row(Tile.WALL_OUTER_W, Tile.WALL_FRONT, Tile.WALL_OUTER_E),)
    + (_room_row(Tile.WALL_OUTER_W, Tile.FLOOR, Tile.WALL_OUTER_E),) * 10
    + (_EMPTY_ROW,) * 12
)


class TileMap:
    """A square grid of tiles drawn from a sprite sheet."""

    def __init__(
        self,
        sprite_sheet: pygame.Surface,
        level: Sequence[Sequence[int]] = LEVEL_1,
    ) -> None:
        self.sprite_sheet = sprite_sheet
        self._grid: list[list[int]] = []
        self.load_map(level)

    @property
    def tiles(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    def load_map(self, grid: Sequence[Sequence[int]]) -> None:
        """Replace the current level with a copy of ``grid``."""
        rows = [list(row) for row in grid]
        if len(rows) != MAP_SIZE or any(len(row) != MAP_SIZE for row in rows):
            raise ValueError(f"map must be {MAP_SIZE}x{MAP_SIZE} tiles")
        self._grid = rows

    def is_walkable(self, x: int, y: int) -> bool:
        """Whether the tile at column ``x``, row ``y`` is floor."""
        if not (0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE):
            log.debug("Out of bounds: (%d, %d)", x, y)
            return False
        tile = self._grid[y][x]
        log.debug("Checking walkability at (%d, %d): %d", x, y, tile)
        return tile == Tile.FLOOR

    def draw_map(self, surface: pygame.Surface) -> None:
        size = TILE_SIZE * TILE_SCALE
        for row, tiles in enumerate(self._grid):
            for column, tile in enumerate(tiles):
                source = TILE_SOURCES.get(tile)
                if source is None:
                    continue
                src = (*source, TILE_SIZE, TILE_SIZE)
                dest = (column * size, row * size, size, size)
                draw(surface, self.sprite_sheet, src, dest)