"""Size of a plane whose edges wrap around (a torus)."""

from __future__ import annotations

from dataclasses import dataclass

from .vec2 import Vector2D


def _fold(coord: float, size: float) -> float:
    wrapped = coord % size
    # A tiny negative coord rounds up to exactly ``size``.
    return 0.0 if wrapped == size else wrapped


@dataclass(frozen=True)
class Dimensions:
    """Width and height of a wrapping plane, in the same units as the points on it."""

    width: float
    height: float

    def half(self) -> tuple[float, float]:
        return self.width * 0.5, self.height * 0.5

    def wrap(self, point: Vector2D) -> Vector2D:
        """Return a copy of ``point`` folded back onto ``[0, width) x [0, height)``."""
        return Vector2D(_fold(point.x, self.width), _fold(point.y, self.height))
