"""Components that can be attached to actors."""

from __future__ import annotations

from typing import Any


class Component:
    """Base of everything an actor can own."""

    def __init__(self) -> None:
        self.owner: Any = None
        self.tick_count: int = 0

    def tick(self) -> None:
        """Advance the component by one frame, counting the frames seen."""
        self.tick_count += 1


class ActorComponent(Component):
    """A component that adds behaviour to an actor but has no placement."""


class SceneComponent(ActorComponent):
    """A component that is drawn, ordered by ``render_order``."""

    def __init__(self) -> None:
        super().__init__()
        self.render_order: int = 0
        self.render_count: int = 0

    def render(self) -> None:
        """Draw the component; the base draws nothing but counts the frames."""
        self.render_count += 1