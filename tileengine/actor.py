"""Actors: objects placed in the world that own components."""

from __future__ import annotations

from typing import TypeVar

from tileengine.component import Component, SceneComponent
from tileengine.vector import Vector2D

C = TypeVar("C", bound=Component)


class Actor:
    """An object in the world with a grid location and a list of components."""

    def __init__(self, location: Vector2D | None = None) -> None:
        self.location = Vector2D() if location is None else Vector2D(location.x, location.y)
        self.components: list[Component] = []

    def add_actor_world_offset(self, offset: Vector2D) -> None:
        """Move the actor by ``offset`` grid cells."""
        self.location = self.location + offset

    def tick(self) -> None:
        """Advance the actor by one frame by ticking every component it owns."""
        for component in self.components:
            component.tick()

    def render(self) -> None:
        """Render every scene component the actor owns, in order of attachment."""
        for component in self.components:
            if isinstance(component, SceneComponent):
                component.render()

    def create_default_subobject(self, component: C) -> C:
        """Attach ``component`` to this actor and return it."""
        component.owner = self
        self.components.append(component)
        return component