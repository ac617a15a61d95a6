"""The world: the actors of one level, loaded from a text map."""

from __future__ import annotations

from os import PathLike

from tileengine.actor import Actor
from tileengine.actors import Floor, Goal, Monster, Player, Wall
from tileengine.component import SceneComponent
from tileengine.renderer import Renderer
from tileengine.vector import Vector2D

MAX_LINE_LENGTH = 99

_SPAWNS: dict[str, type[Actor]] = {
    "*": Wall,
    "M": Monster,
    "G": Goal,
    "P": Player,
}


def _render_order(actor: Actor) -> int:
    last = actor.components[-1] if actor.components else None
    return last.render_order if isinstance(last, SceneComponent) else 0


class World:
    """Owns the actors of the level and drives their tick and render."""

    def __init__(self) -> None:
        self.actors: list[Actor] = []

    def tick(self) -> None:
        """Tick every actor."""
        for actor in list(self.actors):
            actor.tick()

    def render(self) -> None:
        """Clear the screen, draw every actor in order and present the frame."""
        renderer = Renderer.get_instance()
        renderer.clear()
        for actor in self.actors:
            actor.render()
        renderer.present()

    def load(self, filename: str | PathLike[str]) -> None:
        """Spawn actors from a map file and sort them by descending render order.

        ``*`` is a wall, ``M`` a monster, ``G`` the goal and ``P`` the player;
        every cell also gets a floor beneath it.
        """
        with open(filename, encoding="latin-1") as map_file:
            for y, line in enumerate(map_file):
                row = line.rstrip("\n").split("\0", 1)[0]
                if len(row) > MAX_LINE_LENGTH:
                    raise ValueError(
                        f"map line {y + 1} is longer than {MAX_LINE_LENGTH} characters"
                    )
                for x, cell in enumerate(row):
                    kind = _SPAWNS.get(cell)
                    if kind is not None:
                        self.spawn_actor(kind(Vector2D(x, y)))
                    self.spawn_actor(Floor(Vector2D(x, y)))
        self.actors.sort(key=_render_order, reverse=True)

    def spawn_actor(self, actor: Actor) -> None:
        """Add ``actor`` to the world."""
        self.actors.append(actor)

    def destroy_actor(self, actor: Actor) -> None:
        """Remove ``actor``; raises ValueError if it is not in the world."""
        self.actors.remove(actor)