"""Frame renderer: clears, draws and presents each frame."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import pygame

if TYPE_CHECKING:
    from tileengine.actor import Actor

CONSOLE_COLUMNS = 100
CONSOLE_ROWS = 40
CLEAR_COLOR = (0, 0, 0, 0)


def _blank_buffer() -> list[str]:
    return [" " * CONSOLE_COLUMNS for _ in range(CONSOLE_ROWS)]


class Renderer:
    """Shared drawing target with a pair of alternating text screen buffers."""

    _instance: ClassVar[Renderer | None] = None

    def __init__(self, surface: pygame.Surface | None = None) -> None:
        self.surface = surface
        self.screen_buffers: list[list[str]] = [_blank_buffer(), _blank_buffer()]
        self.current_index = 0
        self.active_index: int | None = None

    @classmethod
    def get_instance(cls) -> Renderer:
        """Return the shared renderer, creating it on the current display if needed."""
        if cls._instance is None:
            surface = pygame.display.get_surface() if pygame.display.get_init() else None
            cls._instance = cls(surface)
        return cls._instance

    def clear(self) -> None:
        """Blank the back text buffer and fill the drawing surface with black."""
        self.screen_buffers[self.current_index] = _blank_buffer()
        if self.surface is not None:
            self.surface.fill(CLEAR_COLOR)

    def render(self, actor: Actor) -> None:
        """Draw ``actor`` through its scene components."""
        actor.render()

    def present(self) -> None:
        """Show the back buffer and swap buffers."""
        self.active_index = self.current_index
        self.current_index = (self.current_index + 1) % len(self.screen_buffers)
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()