"""The game window, its scene and the main loop."""

from __future__ import annotations

import argparse
import logging
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .components import AnimatedSprite, InputComponent, TextComponent  # noqa: E402
from .ecs import Entity, Manager, PositionComponent  # noqa: E402
from .textures import load_texture  # noqa: E402
from .tilemap import TILESET_PATH, TileMap  # noqa: E402
from .vector2d import Vector2D  # noqa: E402

log = logging.getLogger(__name__)

FPS = 60
FRAME_DELAY = 1000 // FPS
CLEAR_COLOR = (10, 10, 10)
FONT_PATH = "assets/Fonts/ConnectionIi-2wj8.otf"
PLAYER_TEXTURE = "assets/Characters/ElfEnchanterIdleSide.png"
ENEMY_TEXTURE = "assets/Characters/GoblinFighter.png"


class Game:
    """Owns the window, the tile map and the entities of the scene."""

    def __init__(self) -> None:
        self._running = False
        self.screen: pygame.Surface | None = None
        self.level: TileMap | None = None
        self.manager = Manager()
        self.player: Entity | None = None

    def init(self, title: str, width: int, height: int, fullscreen: bool) -> None:
        """Open the window and build the scene."""
        flags = pygame.FULLSCREEN if fullscreen else 0
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        try:
            pygame.init()
            log.info("Subsystem Initialised...")
            self.screen = pygame.display.set_mode((width, height), flags)
            pygame.display.set_caption(title)
        except pygame.error as exc:
            log.error("Failed to create window: %s", exc)
            self._running = False
            return
        log.info("Window created!")

        self._running = True
        self.level = TileMap(load_texture(TILESET_PATH))

        text = self.manager.create_entity()
        text.add_component(PositionComponent(Vector2D(192, 128)))
        text.add_component(
            TextComponent(FONT_PATH, 255, 255, 255, 255, 10, "YA MANO")
        )

        player = self.manager.create_entity()
        player.add_component(PositionComponent(Vector2D(160, 128)))
        player.add_component(AnimatedSprite(PLAYER_TEXTURE, 0, 0, 16, 16, 4, 4))
        player.add_component(InputComponent(self.level))
        self.player = player

        enemy = self.manager.create_entity()
        enemy.add_component(PositionComponent(Vector2D(32, 0)))
        enemy.add_component(AnimatedSprite(ENEMY_TEXTURE, 0, 0, 16, 16, 4, 3))

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

    def update(self) -> None:
        self.manager.refresh()
        self.manager.update()

    def render(self) -> None:
        if self.screen is None or self.level is None:
            raise RuntimeError("game is not initialised")
        self.screen.fill(CLEAR_COLOR)
        self.level.draw_map(self.screen)
        self.manager.draw(self.screen)
        pygame.display.flip()

    def clean(self) -> None:
        pygame.quit()
        self.screen = None
        log.info("Game cleaned")

    def running(self) -> bool:
        return self._running


def main(argv: list[str] | None = None) -> int:
    """Run the game until its window is closed."""
    parser = argparse.ArgumentParser(
        prog="dungeonecs", description="Walk a small dungeon room."
    )
    parser.parse_args(argv)

    game = Game()
    game.init("Game", 800, 800, False)

    while game.running():
        frame_start = pygame.time.get_ticks()

        game.handle_events()
        game.update()
        game.render()

        frame_time = pygame.time.get_ticks() - frame_start
        if FRAME_DELAY > frame_time:
            pygame.time.delay(FRAME_DELAY - frame_time)

    game.clean()
    return 0