"""A stand-alone textured object drawn at double size."""

from __future__ import annotations

import pygame

from .textures import draw, load_texture

SCALE = 2


class GameObject:
    """An image region drawn at a pixel position, scaled up by two."""

    def __init__(
        self,
        texture_sheet: str,
        x: int,
        y: int,
        src_x: int,
        src_y: int,
        src_w: int,
        src_h: int,
    ) -> None:
        self.texture = load_texture(texture_sheet)
        self.x = x
        self.y = y
        self.src_rect = pygame.Rect(0, 0, 0, 0)
        self.dest_rect = pygame.Rect(0, 0, 0, 0)
        self.set_source_rect(src_x, src_y, src_w, src_h)

    def set_source_rect(self, x: int, y: int, w: int, h: int) -> None:
        self.src_rect = pygame.Rect(x, y, w, h)

    def update(self) -> None:
        self.dest_rect = pygame.Rect(
            self.x, self.y, self.src_rect.w * SCALE, self.src_rect.h * SCALE
        )

    def render(self, surface: pygame.Surface) -> None:
        draw(surface, self.texture, self.src_rect, self.dest_rect)