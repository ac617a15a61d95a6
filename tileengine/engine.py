"""The engine: window, main loop and the command that starts a level."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar

import pygame

from tileengine.input import Input
from tileengine.renderer import Renderer
from tileengine.timer import Timer

if TYPE_CHECKING:
    from tileengine.world import World

DEFAULT_MAP = "level01.map"
WINDOW_TITLE = "Engine"
WINDOW_SIZE = (800, 600)


class Engine:
    """Shared engine owning the window, the world, input and the frame timer."""

    _instance: ClassVar[Engine | None] = None

    def __init__(self) -> None:
        self.world: World | None = None
        self.input_device: Input | None = None
        self.window: pygame.Surface | None = None
        self.event = pygame.event.Event(pygame.NOEVENT)
        self.is_running = False
        self.timer = Timer()

    @classmethod
    def get_instance(cls) -> Engine:
        """Return the shared engine, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def initialize(self, filename: str = DEFAULT_MAP) -> None:
        """Open the window and load the level from ``filename``."""
        from tileengine.world import World

        self.is_running = True
        pygame.init()
        self.window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.input_device = Input()
        self.world = World()
        self.world.load(filename)
        Renderer.get_instance()

    def run(self) -> None:
        """Run frames until a quit event arrives."""
        while self.is_running:
            self.timer.tick()
            polled = pygame.event.poll()
            if polled.type != pygame.NOEVENT:
                self.event = polled
            if self.event.type == pygame.QUIT:
                self.is_running = False
            self._input()
            self._tick()
            self._render()

    def terminate(self) -> None:
        """Release the world and input and close the window."""
        self.world = None
        self.input_device = None
        self.window = None
        pygame.quit()

    @classmethod
    def world_delta_seconds(cls) -> float:
        """Seconds elapsed during the last frame."""
        return cls.get_instance().timer.delta_seconds

    def _input(self) -> None:
        if self.input_device is not None:
            self.input_device.tick()

    def _tick(self) -> None:
        if self.world is not None:
            self.world.tick()

    def _render(self) -> None:
        if self.world is not None:
            self.world.render()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the engine on a map file and run until the window is closed."""
    parser = argparse.ArgumentParser(prog="tileengine", description="Run a tile map level.")
    parser.add_argument("map", nargs="?", default=DEFAULT_MAP, help="map file to load")
    args = parser.parse_args(argv)

    engine = Engine.get_instance()
    try:
        engine.initialize(args.map)
        engine.run()
    finally:
        engine.terminate()
    return 0