"""Mutable 2D vector that doubles as a point.

Instance methods that change the vector return ``self`` so calls can be
chained. Use :meth:`Vector2D.duplicate` (or the functions in
:mod:`vector2d.math.ops`) when the original must stay untouched.
"""

from __future__ import annotations

import logging
import math
import random as _random
from dataclasses import dataclass
from typing import Any, Iterator

logger = logging.getLogger(__name__)

# Axis name -> dimension attribute used by the wrap-around helpers.
_AXES = (("x", "width"), ("y", "height"))


def _ieee_div(a: float, b: float) -> float:
    """Float division that follows IEEE-754 instead of raising on zero."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(eq=False)
class Vector2D:
    """2D vector or point with chainable in-place arithmetic."""

    x: float = 0
    y: float = 0

    def __post_init__(self) -> None:
        if self.x is None:
            self.x = 0
        if self.y is None:
            self.y = 0

    @classmethod
    def from_angle(cls, a: float) -> "Vector2D":
        return cls(math.cos(a), math.sin(a))

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> "Vector2D":
        """Unit vector pointing at a whole-radian angle between 0 and 7.

        The angle is ``floor(r * (2*pi + 1))`` for ``r`` in ``[0, 1)``.
        """
        r = (rng or _random).random()
        return cls.from_angle(math.floor(r * (math.pi * 2 + 1)))

    def duplicate(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    clone = duplicate

    # -- in place ---------------------------------------------------------

    def zero(self) -> "Vector2D":
        self.x = self.y = 0
        return self

    def abs(self) -> "Vector2D":
        self.x = abs(self.x)
        self.y = abs(self.y)
        return self

    def negative(self) -> "Vector2D":
        return self.multiply(-1)

    reverse = negative

    def normalize(self) -> "Vector2D":
        m = self.magnitude()
        if m > 0:
            self.divide(m)
        return self

    unit = normalize

    def limit(self, max: float) -> "Vector2D":
        if self.magnitude() > max:
            self.normalize()
            return self.multiply(max)
        return self

    def add(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def subtract(self, other: "Vector2D") -> "Vector2D":
        self.x -= other.x
        self.y -= other.y
        return self

    def multiply(self, n: float) -> "Vector2D":
        self.x = self.x * n
        self.y = self.y * n
        return self

    def divide(self, n: float) -> "Vector2D":
        """Divide both components by ``n``.

        Dividing by zero does not raise: the components become ``inf`` or
        ``nan`` and :meth:`invalid` reports the result.
        """
        if n == 0:
            logger.debug("dividing %r by zero", self)
        self.x = _ieee_div(self.x, n)
        self.y = _ieee_div(self.y, n)
        return self

    def lerp(self, other: "Vector2D", t: float) -> "Vector2D":
        self.x = self.x + t * (other.x - self.x)
        self.y = self.y + t * (other.y - self.y)
        return self

    # -- queries ----------------------------------------------------------

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    length = magnitude

    def heading(self) -> float:
        """Angle from the positive x axis in radians."""
        return -1 * math.atan2(-1 * self.y, self.x)

    def eucl_distance(self, other: "Vector2D") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def distance(self, other: "Vector2D", dimensions: Any = None) -> float:
        """Distance to ``other``, optionally on a plane that wraps at its edges.

        ``dimensions`` is anything with ``width`` and ``height``. When given,
        each axis uses the shorter way around.
        """
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)

        if dimensions is not None:
            dx = dx if dx < dimensions.width / 2 else dimensions.width - dx
            dy = dy if dy < dimensions.height / 2 else dimensions.height - dy

        return math.sqrt(dx * dx + dy * dy)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def scaled_by_dot(self, other: "Vector2D") -> "Vector2D":
        """Return ``other`` scaled by ``self . other``.

        This is not a projection unless ``other`` is a unit vector; see
        :meth:`project_onto`.
        """
        return other.duplicate().multiply(self.dot(other))

    def project_onto(self, other: "Vector2D") -> "Vector2D":
        """Vector projection of ``self`` onto ``other``."""
        return other.duplicate().multiply(_ieee_div(self.dot(other), other.dot(other)))

    def wrap_relative_to(self, position: "Vector2D", dimensions: Any) -> "Vector2D":
        """Re-express this point on the short side of a wrapping plane.

        For each axis where the point is more than half the plane away from
        ``position``, it is moved one plane-width towards ``position``.
        """
        v = self.duplicate()
        for axis, key in _AXES:
            coord = getattr(self, axis)
            d = coord - getattr(position, axis)
            map_d = getattr(dimensions, key)
            if abs(d) > map_d / 2:
                if d > 0:
                    setattr(v, axis, (map_d - coord) * -1)
                else:
                    setattr(v, axis, coord + map_d)
        return v

    def equals(self, other: "Vector2D") -> bool:
        return self.x == other.x and self.y == other.y

    def invalid(self) -> bool:
        # -inf is deliberately not reported.
        return (
            self.x == math.inf
            or math.isnan(self.x)
            or self.y == math.inf
            or math.isnan(self.y)
        )

    # -- operators (never mutate) -----------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return self.duplicate().add(other)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return self.duplicate().subtract(other)

    def __mul__(self, scalar: float) -> "Vector2D":
        return self.duplicate().multiply(scalar)

    def __rmul__(self, scalar: float) -> "Vector2D":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2D":
        return self.duplicate().divide(scalar)

    def __neg__(self) -> "Vector2D":
        return self.duplicate().negative()

    def __abs__(self) -> float:
        return self.magnitude()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
