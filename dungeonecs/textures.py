"""Loading textures and fonts, and drawing texture regions."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

RectLike = "pygame.Rect | tuple[int, int, int, int]"


class TextureError(Exception):
    """Raised when an image or font cannot be turned into a texture."""


def load_texture(filename: str | os.PathLike) -> pygame.Surface:
    """Load an image file as a surface."""
    try:
        return pygame.image.load(os.fspath(filename))
    except (pygame.error, OSError) as exc:
        raise TextureError(f"Failed to load image: {exc}") from exc


def load_font_texture(
    filename: str | os.PathLike | None,
    font_size: int,
    r: int,
    g: int,
    b: int,
    a: int,
    text: str,
) -> pygame.Surface:
    """Render ``text`` with the given font file, size and colour."""
    try:
        pygame.font.init()
    except pygame.error as exc:
        raise TextureError(f"Failed to initialize fonts: {exc}") from exc

    path = None if filename is None else os.fspath(filename)
    try:
        font = pygame.font.Font(path, font_size)
    except (pygame.error, OSError) as exc:
        raise TextureError(f"Failed to load font: {exc}") from exc

    try:
        rendered = font.render(text, True, (r, g, b))
    except pygame.error as exc:
        raise TextureError(f"Failed to create text surface: {exc}") from exc

    if a < 255:
        rendered.set_alpha(a)
    return rendered


def draw(
    surface: pygame.Surface,
    texture: pygame.Surface,
    src,
    dest,
) -> None:
    """Copy the ``src`` region of ``texture`` onto ``surface``, scaled to ``dest``."""
    src_rect = pygame.Rect(src)
    dest_rect = pygame.Rect(dest)
    if src_rect.width <= 0 or src_rect.height <= 0:
        return
    if dest_rect.width <= 0 or dest_rect.height <= 0:
        return

    piece = pygame.Surface(src_rect.size, pygame.SRCALPHA)
    piece.blit(texture, (0, 0), src_rect)
    if src_rect.size != dest_rect.size:
        piece = pygame.transform.scale(piece, dest_rect.size)
    surface.blit(piece, dest_rect.topleft)