import shutil
from pathlib import Path
from unittest import mock

import pygame
import pytest

from dungeonecs.ecs import PositionComponent
from dungeonecs.game import CLEAR_COLOR, Game, main

GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def assets(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    characters = tmp_path / "assets" / "Characters"
    characters.mkdir(parents=True)
    fonts = tmp_path / "assets" / "Fonts"
    fonts.mkdir()

    sheet = pygame.Surface((320, 64))
    sheet.fill(GREEN)
    pygame.image.save(sheet, str(tmp_path / "assets" / "16x16DungeonTileset.png"))

    character = pygame.Surface((64, 16))
    character.fill(BLUE)
    pygame.image.save(character, str(characters / "ElfEnchanterIdleSide.png"))
    pygame.image.save(character, str(characters / "GoblinFighter.png"))

    font_source = Path(pygame.__file__).parent / pygame.font.get_default_font()
    shutil.copy(font_source, fonts / "ConnectionIi-2wj8.otf")
    yield tmp_path
    pygame.quit()


@pytest.fixture
def game(assets):
    g = Game()
    g.init("Dungeon", 800, 800, False)
    return g


def test_not_running_before_init():
    assert Game().running() is False


def test_init_builds_scene(game):
    assert game.running() is True
    assert len(game.manager) == 3
    assert pygame.display.get_caption()[0] == "Dungeon"
    position = game.player.get_component(PositionComponent)
    assert (position.x, position.y) == (160, 128)


def test_quit_event_stops_game(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.handle_events()
    assert game.running() is False


def test_update_drops_destroyed_entities(game):
    game.player.destroy()
    game.update()
    assert len(game.manager) == 2
    assert game.player not in list(game.manager)


def test_render_draws_map_and_entities(game):
    game.update()
    game.render()
    screen = pygame.display.get_surface()
    position = game.player.get_component(PositionComponent)
    assert tuple(screen.get_at((330, 330)))[:3] == GREEN
    assert tuple(screen.get_at((700, 700)))[:3] == CLEAR_COLOR
    assert tuple(screen.get_at((40, 5)))[:3] == BLUE
    assert tuple(screen.get_at((position.x + 5, position.y + 5)))[:3] == BLUE


def test_render_requires_init():
    with pytest.raises(RuntimeError):
        Game().render()


def test_clean_closes_display(game):
    game.clean()
    assert pygame.display.get_init() is False
    assert len(game.manager) == 3


def test_main_runs_until_quit(assets):
    with mock.patch(
        "pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]
    ):
        assert main([]) == 0
    assert pygame.display.get_init() is False