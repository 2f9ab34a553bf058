"""Non-mutating counterparts of the chainable :class:`Vector2D` methods.

Each function copies its first argument before applying the in-place method,
so neither argument is modified.
"""

from __future__ import annotations

import random as _random
from typing import Any, Callable, TypeVar

from .vec2 import Vector2D

R = TypeVar("R")


def _duplicating(method: Callable[[Vector2D, Any], R]) -> Callable[[Vector2D, Any], R]:
    def op(a: Vector2D, b: Any) -> R:
        return method(a.duplicate(), b)

    op.__name__ = method.__name__
    op.__doc__ = f"Apply ``Vector2D.{method.__name__}`` to a copy of ``a``."
    return op


add = _duplicating(Vector2D.add)
subtract = _duplicating(Vector2D.subtract)
multiply = _duplicating(Vector2D.multiply)
divide = _duplicating(Vector2D.divide)
dot = _duplicating(Vector2D.dot)


def lerp(a: Vector2D, b: Vector2D, t: float) -> Vector2D:
    """Linear interpolation from ``a`` to ``b``, computed as ``(b - a) * t + a``."""
    return b.duplicate().subtract(a).multiply(t).add(a)


def from_angle(a: float) -> Vector2D:
    return Vector2D.from_angle(a)


def random(rng: _random.Random | None = None) -> Vector2D:
    return Vector2D.random(rng)
