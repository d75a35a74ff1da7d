"""Positions and displacements on the grid plane.

Point and Vector share a coordinate pair but mean different things: a Point is a
location, a Vector is a direction with magnitude. They are separate types and
convert explicitly with ``Point.to_vector`` / ``Vector.to_point``.

Python ``==`` on both types is exact. Fuzzy matching under ``GRANULARITY`` is
always requested explicitly through ``points_equal`` or ``Point.coincides``.
"""

import math
from dataclasses import dataclass
from typing import Any

# Coordinates closer than this on both axes denote the same position.
# Shared by equality, containment, parallelism and intersection tests.
GRANULARITY = 0.01


@dataclass(frozen=True, slots=True)
class Point:
    """A position in grid units.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate (grows downwards on the drawing surface)
    """

    x: float
    y: float

    def coincides(self, other: "Point") -> bool:
        """Check tolerance-based equality with another point."""
        return points_equal(self, other)

    def move(self, vector: "Vector") -> "Point":
        """Return this point displaced by ``vector``."""
        return Point(self.x + vector.x, self.y + vector.y)

    def is_in_area(self, left: float, top: float, right: float, bottom: float) -> bool:
        """Check whether the point lies inside a rectangle, edges inclusive."""
        return left <= self.x <= right and top <= self.y <= bottom

    def to_vector(self) -> "Vector":
        """Displacement from the origin to this point."""
        return Vector(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]))

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


def points_equal(a: Point, b: Point) -> bool:
    """Tolerance-based position equality.

    Two points are equal iff both coordinate differences are strictly smaller
    than ``GRANULARITY``.

    Examples:
        >>> points_equal(Point(1.0, 1.0), Point(1.005, 0.999))
        True
        >>> points_equal(Point(1.0, 1.0), Point(1.01, 1.0))
        False
    """
    return abs(a.x - b.x) < GRANULARITY and abs(a.y - b.y) < GRANULARITY


@dataclass(frozen=True, slots=True)
class Vector:
    """A displacement in grid units."""

    x: float
    y: float

    @classmethod
    def between(cls, origin: Point, tip: Point) -> "Vector":
        """Displacement leading from ``origin`` to ``tip``."""
        return cls(tip.x - origin.x, tip.y - origin.y)

    @classmethod
    def from_point(cls, point: Point) -> "Vector":
        """Displacement from the origin to ``point``."""
        return cls(point.x, point.y)

    def to_point(self) -> Point:
        """Position reached when applying this displacement to the origin."""
        return Point(self.x, self.y)

    def cross(self, other: "Vector") -> float:
        """Z component of the cross product."""
        return self.x * other.y - other.x * self.y

    def is_parallel(self, other: "Vector") -> bool:
        """Check whether two vectors are parallel within ``GRANULARITY**2``."""
        span = self.cross(other)
        tolerance = GRANULARITY * GRANULARITY
        return -tolerance < span < tolerance

    def same_orientation(self, other: "Vector") -> bool:
        """Check whether ``other`` is parallel and not pointing backwards.

        The sign test is done on the dominant axis of this vector. A vector
        shorter than ``GRANULARITY`` on both axes matches any parallel vector.
        """
        if not self.is_parallel(other):
            return False

        if self.x < -GRANULARITY:
            return other.x <= GRANULARITY
        if self.x > GRANULARITY:
            return other.x >= -GRANULARITY
        if self.y < -GRANULARITY:
            return other.y <= GRANULARITY
        if self.y > GRANULARITY:
            return other.y >= -GRANULARITY
        return True

    def scale(self, factor: float) -> "Vector":
        """Return this vector multiplied by ``factor``."""
        return Vector(self.x * factor, self.y * factor)

    def reversed(self) -> "Vector":
        """Return the opposite vector."""
        return Vector(-self.x, -self.y)

    def manhattan_length(self) -> float:
        """Sum of absolute coordinates, the length metric used for containment."""
        return abs(self.x) + abs(self.y)

    def angle(self) -> float:
        """Polar angle in radians, in ``[-pi, pi]``."""
        return math.atan2(self.y, self.x)

    def __str__(self) -> str:
        return f"<{self.x:g}, {self.y:g}>"
