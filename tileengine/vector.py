"""Integer two-dimensional grid vector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Vector2D:
    """A position or offset on the tile grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)