"""Bitmap-backed scene component, optionally animated as a sprite strip."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

import pygame

from tileengine.component import SceneComponent
from tileengine.engine import Engine
from tileengine.renderer import Renderer

TILE_SIZE = 30
SPRITE_FRAMES = 5

Color = tuple[int, int, int, int]

_log = logging.getLogger(__name__)


class PaperFlipbookComponent(SceneComponent):
    """Draws a bitmap on the owner's tile; sprites cycle through five frames."""

    data_dir: ClassVar[Path] = Path("data")
    frame_index: ClassVar[int] = 0

    def __init__(self) -> None:
        super().__init__()
        self.shape = " "
        self.color: Color = (0, 0, 0, 0)
        self.color_key: Color = (255, 255, 255, 255)
        self.filename = ""
        self.surface: pygame.Surface | None = None
        self.texture: pygame.Surface | None = None
        self.is_sprite = False
        self.process_time = 0.25
        self.elapsed_time = 0.0

    def load(self) -> None:
        """Load ``filename`` from the data directory and apply the colour key."""
        if not self.filename:
            return
        surface = pygame.image.load(str(self.data_dir / self.filename))
        key = self.color_key[:3]
        surface.set_colorkey(key)
        texture = surface.copy()
        texture.set_colorkey(key)
        self.surface = surface
        self.texture = texture

    def render(self) -> None:
        """Draw onto the shared renderer and advance the sprite animation."""
        target = Renderer.get_instance().surface
        location = self.owner.location
        dest = pygame.Rect(location.x * TILE_SIZE, location.y * TILE_SIZE, TILE_SIZE, TILE_SIZE)

        if not self.is_sprite:
            self._draw(target, None, dest)
            return

        flipbook = PaperFlipbookComponent
        if self.texture is not None:
            frame_width = self.texture.get_width() // SPRITE_FRAMES
            frame_height = self.texture.get_height() // SPRITE_FRAMES
            source = pygame.Rect(frame_width * flipbook.frame_index, 0, frame_width, frame_height)
            self._draw(target, source, dest)
        if self.elapsed_time >= self.process_time:
            self.elapsed_time = 0.0
            flipbook.frame_index = (flipbook.frame_index + 1) % SPRITE_FRAMES
        delta = Engine.world_delta_seconds()
        self.elapsed_time += delta
        _log.debug("%f", delta)

    def _draw(
        self,
        target: pygame.Surface | None,
        source: pygame.Rect | None,
        dest: pygame.Rect,
    ) -> None:
        if target is None or self.texture is None:
            return
        image = self.texture
        if source is not None:
            area = source.clip(image.get_rect())
            if area.width == 0 or area.height == 0:
                return
            image = image.subsurface(area)
        if image.get_size() != dest.size:
            image = pygame.transform.scale(image, dest.size)
        target.blit(image, dest)