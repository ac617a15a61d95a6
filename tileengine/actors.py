"""The tile actors that a map can contain."""

from __future__ import annotations

from typing import ClassVar

import pygame

from tileengine.actor import Actor
from tileengine.engine import Engine
from tileengine.flipbook import Color, PaperFlipbookComponent
from tileengine.vector import Vector2D

WHITE: Color = (255, 255, 255, 255)


class _TileActor(Actor):
    shape: ClassVar[str]
    render_order: ClassVar[int]
    color: ClassVar[Color]
    color_key: ClassVar[Color] = WHITE
    filename: ClassVar[str]
    is_sprite: ClassVar[bool] = False

    def __init__(self, location: Vector2D | None = None) -> None:
        super().__init__(location)
        flipbook = self.create_default_subobject(PaperFlipbookComponent())
        flipbook.shape = self.shape
        flipbook.render_order = self.render_order
        flipbook.color = self.color
        flipbook.color_key = self.color_key
        flipbook.filename = self.filename
        flipbook.is_sprite = self.is_sprite
        flipbook.load()
        self.flipbook = flipbook


_MOVES = {
    pygame.K_w: Vector2D(0, -1),
    pygame.K_UP: Vector2D(0, -1),
    pygame.K_s: Vector2D(0, 1),
    pygame.K_DOWN: Vector2D(0, 1),
    pygame.K_a: Vector2D(-1, 0),
    pygame.K_LEFT: Vector2D(-1, 0),
    pygame.K_d: Vector2D(1, 0),
    pygame.K_RIGHT: Vector2D(1, 0),
}


class Player(_TileActor):
    """The animated player, moved one tile per frame by the arrow or WASD keys."""

    shape = "P"
    render_order = 7
    color = (255, 0, 0, 0)
    color_key = (255, 0, 255, 255)
    filename = "player.bmp"
    is_sprite = True

    def tick(self) -> None:
        """Move according to the engine's current key-down event."""
        event = Engine.get_instance().event
        if event.type != pygame.KEYDOWN:
            return
        offset = _MOVES.get(getattr(event, "key", None))
        if offset is not None:
            self.add_actor_world_offset(offset)


class Wall(_TileActor):
    """An impassable wall tile."""

    shape = "0"
    render_order = 9
    color = (255, 255, 255, 0)
    filename = "wall.bmp"


class Floor(_TileActor):
    """Background floor drawn beneath every map cell."""

    shape = " "
    render_order = 10
    color = (255, 255, 255, 0)
    filename = "floor.bmp"


class Goal(_TileActor):
    """The goal tile."""

    shape = "G"
    render_order = 6
    color = (0, 255, 0, 0)
    filename = "goal.bmp"


class Monster(_TileActor):
    """A monster tile."""

    shape = "M"
    render_order = 6
    color = (255, 0, 0, 0)
    filename = "monster.bmp"