"""Screen and world geometry primitives used by the viewer."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Pos2", "Vec2", "Rect", "WorldBBox", "TSTransform"]


@dataclass(frozen=True)
class Vec2:
    """A 2D vector in screen space."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Pos2:
    """A 2D position in screen space."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Pos2:
        return Pos2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pos2 | Vec2) -> Vec2 | Pos2:
        if isinstance(other, Pos2):
            return Vec2(self.x - other.x, self.y - other.y)
        return Pos2(self.x - other.x, self.y - other.y)

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned screen rectangle given by its minimum and maximum corners."""

    min: Pos2
    max: Pos2

    @classmethod
    def from_min_size(cls, min_pos: Pos2, size: Vec2) -> Rect:
        """Build a rectangle from its top-left corner and its size."""
        return cls(min_pos, min_pos + size)

    @classmethod
    def from_two_pos(cls, a: Pos2, b: Pos2) -> Rect:
        """Build the smallest rectangle containing both positions."""
        return cls(
            Pos2(min(a.x, b.x), min(a.y, b.y)),
            Pos2(max(a.x, b.x), max(a.y, b.y)),
        )

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def center(self) -> Pos2:
        return Pos2((self.min.x + self.max.x) / 2.0, (self.min.y + self.max.y) / 2.0)

    def contains(self, pos: Pos2) -> bool:
        return self.min.x <= pos.x <= self.max.x and self.min.y <= pos.y <= self.max.y


@dataclass(frozen=True)
class WorldBBox:
    """An axis-aligned bounding box in world coordinates (metres)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def merge(self, other: WorldBBox) -> WorldBBox:
        """Return the smallest box containing both boxes."""
        return WorldBBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def overlaps(self, other: WorldBBox) -> bool:
        """True if the boxes intersect; touching edges count as overlapping."""
        return (
            self.min_x <= other.max_x
            and self.max_x >= other.min_x
            and self.min_y <= other.max_y
            and self.max_y >= other.min_y
        )


@dataclass(frozen=True)
class TSTransform:
    """A uniform scale followed by a translation: ``p -> p * scaling + translation``."""

    translation: Vec2 = Vec2(0.0, 0.0)
    scaling: float = 1.0

    def apply(self, pos: Pos2) -> Pos2:
        """Map a screen position through the transform."""
        return Pos2(
            pos.x * self.scaling + self.translation.x,
            pos.y * self.scaling + self.translation.y,
        )

    def __mul__(self, pos: Pos2) -> Pos2:
        return self.apply(pos)