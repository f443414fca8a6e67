"""Drawable and controllable components for entities."""

from __future__ import annotations

import math
from typing import Callable, Mapping

import pygame

from .ecs import Component, PositionComponent
from .textures import draw, load_font_texture, load_texture
from .tilemap import TILE_SCALE, TILE_SIZE, TileMap

SPRITE_SIZE = TILE_SIZE * TILE_SCALE
STEP = TILE_SIZE * TILE_SCALE

KeyState = Callable[[], Mapping[int, bool]]

_MOVES: tuple[tuple[int, tuple[int, int]], ...] = (
    (pygame.K_UP, (0, -STEP)),
    (pygame.K_DOWN, (0, STEP)),
    (pygame.K_LEFT, (-STEP, 0)),
    (pygame.K_RIGHT, (STEP, 0)),
)


def _position_of(component: Component) -> PositionComponent:
    entity = component.entity
    position = entity.get_component(PositionComponent) if entity else None
    if position is None:
        raise LookupError(
            f"{type(component).__name__} needs an entity with a PositionComponent"
        )
    return position


class _SpriteBase(Component):
    """Shared state of components that draw a region of an image file."""

    def __init__(
        self, texture_path: str, src_x: int, src_y: int, src_w: int, src_h: int
    ) -> None:
        self.texture_path = texture_path
        self.src_rect = pygame.Rect(src_x, src_y, src_w, src_h)
        self.dest_rect = pygame.Rect(0, 0, SPRITE_SIZE, SPRITE_SIZE)
        self.texture: pygame.Surface | None = None
        self._position: PositionComponent | None = None

    def init(self) -> None:
        self._position = _position_of(self)
        self.dest_rect = pygame.Rect(
            self._position.x, self._position.y, SPRITE_SIZE, SPRITE_SIZE
        )
        self.texture = load_texture(self.texture_path)

    def update(self) -> None:
        self.dest_rect.topleft = (self._position.x, self._position.y)


class SpriteComponent(_SpriteBase):
    """Draws a fixed region of an image at the entity's position."""

    def __init__(
        self, texture_path: str, src_x: int, src_y: int, src_w: int, src_h: int
    ) -> None:
        super().__init__(texture_path, src_x, src_y, src_w, src_h)

    def init(self) -> None:
        super().init()

    def update(self) -> None:
        super().update()

    def draw(self, surface: pygame.Surface) -> None:
        draw(surface, self.texture, self.src_rect, self.dest_rect)


class AnimatedSprite(_SpriteBase):
    """Cycles through horizontally laid out frames of a sprite sheet."""

    def __init__(
        self,
        texture_path: str,
        src_x: int,
        src_y: int,
        src_w: int,
        src_h: int,
        frames: int,
        fps: int,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        super().__init__(texture_path, src_x, src_y, src_w, src_h)
        self.frames = frames
        self.fps = fps
        self.frame_delay = 1000 // fps
        self.frame = 0
        self._last_update = 0
        self._clock = clock or pygame.time.get_ticks

    def init(self) -> None:
        super().init()

    def update(self) -> None:
        super().update()

    def draw(self, surface: pygame.Surface) -> None:
        now = self._clock()
        if now - self._last_update >= self.frame_delay:
            if self.frame < self.frames - 1:
                self.frame += 1
                self.src_rect.x += self.src_rect.w
            else:
                self.frame = 0
                self.src_rect.x = 0
            self._last_update = now
        draw(surface, self.texture, self.src_rect, self.dest_rect)


class TextComponent(Component):
    """Renders a line of text at the entity's position."""

    def __init__(
        self,
        font_path: str | None,
        r: int,
        g: int,
        b: int,
        a: int,
        font_size: int,
        text: str,
    ) -> None:
        self.font_path = font_path
        self.color = (r, g, b, a)
        self.font_size = font_size
        self.text = text
        self.texture: pygame.Surface | None = None
        self.dest_rect = pygame.Rect(0, 0, 0, 0)
        self._position: PositionComponent | None = None

    def init(self) -> None:
        self._position = _position_of(self)
        self.texture = load_font_texture(
            self.font_path, self.font_size, *self.color, self.text
        )

    def update(self) -> None:
        self.dest_rect.topleft = (self._position.x, self._position.y)

    def draw(self, surface: pygame.Surface) -> None:
        if self.texture is None:
            return
        width, height = self.texture.get_size()
        self.dest_rect = pygame.Rect(self._position.x, self._position.y, width, height)
        draw(surface, self.texture, (0, 0, width, height), self.dest_rect)


class InputComponent(Component):
    """Moves the entity one tile per key press along walkable tiles."""

    def __init__(self, tilemap: TileMap, key_state: KeyState | None = None) -> None:
        self.tilemap = tilemap
        self._key_state = key_state or pygame.key.get_pressed
        self.can_move = True
        self._position: PositionComponent | None = None

    def init(self) -> None:
        self._position = self.entity.get_component(PositionComponent)

    def is_move_valid(self, x: int, y: int) -> bool:
        """Whether the pixel position ``(x, y)`` lies on a walkable tile."""
        return self.tilemap.is_walkable(math.trunc(x / STEP), math.trunc(y / STEP))

    def update(self) -> None:
        if self._position is None:
            return
        pressed = self._key_state()

        if self.can_move:
            step = next((delta for key, delta in _MOVES if pressed[key]), None)
            if step is not None:
                self.can_move = False
                new_x = self._position.x + step[0]
                new_y = self._position.y + step[1]
                if self.is_move_valid(new_x, new_y):
                    self._position.set_pos(new_x, new_y)

        if not any(pressed[key] for key, _ in _MOVES):
            self.can_move = True