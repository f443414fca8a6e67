import pygame
import pytest

from dungeonecs.tilemap import LEVEL_1, MAP_SIZE, Tile, TileMap

RED = pygame.Color(255, 0, 0, 255)
BLUE = pygame.Color(0, 0, 255, 255)
BLACK = pygame.Color(0, 0, 0, 255)


def _sheet():
    sheet = pygame.Surface((320, 64))
    sheet.fill(BLACK)
    sheet.fill(RED, pygame.Rect(32, 48, 16, 16))
    sheet.fill(BLUE, pygame.Rect(256, 0, 16, 16))
    return sheet


def test_loaded_level_is_square():
    tilemap = TileMap(_sheet())
    assert len(tilemap.tiles) == MAP_SIZE
    assert all(len(row) == MAP_SIZE for row in tilemap.tiles)


def test_default_level_is_loaded():
    tilemap = TileMap(_sheet())
    assert tilemap.tiles == LEVEL_1


def test_floor_is_walkable():
    tilemap = TileMap(_sheet())
    assert tilemap.is_walkable(5, 3)
    assert tilemap.is_walkable(13, 12)


def test_walls_and_empty_are_not_walkable():
    tilemap = TileMap(_sheet())
    assert not tilemap.is_walkable(4, 3)
    assert not tilemap.is_walkable(5, 2)
    assert not tilemap.is_walkable(5, 1)
    assert not tilemap.is_walkable(0, 0)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (MAP_SIZE, 0), (0, MAP_SIZE)])
def test_out_of_bounds_is_not_walkable(x, y):
    tilemap = TileMap(_sheet())
    assert not tilemap.is_walkable(x, y)


def test_load_map_replaces_level():
    grid = [[Tile.FLOOR] * MAP_SIZE for _ in range(MAP_SIZE)]
    tilemap = TileMap(_sheet())
    tilemap.load_map(grid)
    assert tilemap.is_walkable(0, 0)
    assert tilemap.tiles == tuple(tuple(row) for row in grid)


def test_load_map_copies_input():
    grid = [[Tile.FLOOR] * MAP_SIZE for _ in range(MAP_SIZE)]
    tilemap = TileMap(_sheet(), grid)
    grid[0][0] = Tile.EMPTY
    assert tilemap.is_walkable(0, 0)


@pytest.mark.parametrize(
    "grid",
    [
        [[0] * MAP_SIZE for _ in range(MAP_SIZE - 1)],
        [[0] * (MAP_SIZE + 1) for _ in range(MAP_SIZE)],
    ],
)
def test_load_map_rejects_wrong_shape(grid):
    tilemap = TileMap(_sheet())
    with pytest.raises(ValueError):
        tilemap.load_map(grid)


def test_draw_map_places_scaled_tiles():
    tilemap = TileMap(_sheet())
    screen = pygame.Surface((800, 800))
    screen.fill(BLACK)
    screen.set_at((0, 0), pygame.Color(9, 9, 9, 255))

    tilemap.draw_map(screen)

    # floor at column 5, row 3; north-west corner at column 4, row 1
    assert screen.get_at((5 * 32, 3 * 32)) == RED
    assert screen.get_at((5 * 32 + 31, 3 * 32 + 31)) == RED
    assert screen.get_at((4 * 32 + 10, 1 * 32 + 10)) == BLUE
    # empty tiles are not drawn
    assert screen.get_at((0, 0)) == pygame.Color(9, 9, 9, 255)