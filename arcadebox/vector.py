"""Two-dimensional vectors and grid units."""

from __future__ import annotations

import math
from dataclasses import dataclass

PIXELS_PER_UNIT = 8.0


@dataclass
class Vector:
    """A mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector:
        """Scale the vector to unit length in place; a zero vector is left as is."""
        mag = self.magnitude()
        if mag > 0:
            self.x /= mag
            self.y /= mag
        return self

    def dot(self, other: Vector) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def copy(self) -> Vector:
        """Return an independent copy of the vector."""
        return Vector(self.x, self.y)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vector) -> Vector:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector) -> Vector:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> Vector:
        self.x *= scalar
        self.y *= scalar
        return self


@dataclass
class Unit:
    """A length measured in grid units, convertible to pixels."""

    value: int
    pixel: float = PIXELS_PER_UNIT

    def to_pixel(self) -> int:
        """Return the length in whole pixels, truncated toward zero."""
        return int(self.value * self.pixel)

    def to_float_pixel(self) -> float:
        """Return the length in pixels as a float."""
        return float(self.value) * self.pixel

    @property
    def float_value(self) -> float:
        """The unit count as a float."""
        return float(self.value)