"""Directed straight line segments.

Lengths along a line are measured with the Manhattan metric throughout:
containment, fragment splitting and eraser remainders all compare
``Vector.manhattan_length`` values. For points already known to be collinear
with the line this ranks positions exactly like the Euclidean distance.
"""

from dataclasses import dataclass, field
from typing import Any

from gridpolygons.domain.primitives import GRANULARITY, Point, Vector, points_equal


@dataclass(frozen=True, slots=True)
class Line:
    """A segment traversed from ``start`` to ``end``.

    Equality is exact on the ordered endpoints, so a line and its reverse are
    different values.

    Attributes:
        start: First endpoint
        end: Second endpoint
        vector: Displacement from start to end (derived)
    """

    start: Point
    end: Point
    vector: Vector = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "vector", Vector.between(self.start, self.end))

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> "Line":
        """Build a line from raw endpoint coordinates."""
        return cls(Point(x1, y1), Point(x2, y2))

    def reversed(self) -> "Line":
        """The same segment traversed the other way."""
        return Line(self.end, self.start)

    def length(self) -> float:
        """Manhattan length of the segment."""
        return self.vector.manhattan_length()

    def is_degenerate(self) -> bool:
        """Check whether both endpoints denote the same position."""
        return points_equal(self.start, self.end)

    def has_endpoint(self, point: Point) -> bool:
        """Check whether ``point`` coincides with either endpoint."""
        return points_equal(point, self.start) or points_equal(point, self.end)

    def contains(self, point: Point, including_edges: bool = True) -> bool:
        """Check whether ``point`` lies on the segment.

        The offset from ``start`` to ``point`` must have the same orientation
        as the line and must not be longer than the line.

        Args:
            point: Point to test
            including_edges: Whether points coinciding with an endpoint count

        Returns:
            True if the point is on the segment
        """
        offset = Vector.between(self.start, point)
        if not self.vector.same_orientation(offset):
            return False

        if offset.manhattan_length() > self.length() + GRANULARITY:
            return False

        if including_edges:
            return True
        return not self.has_endpoint(point)

    def overlap(self, other: "Line") -> bool:
        """Check whether the two segments share more than one point."""
        shared_points = 0
        if self.contains(other.start, True):
            shared_points += 1
        if self.contains(other.end, True):
            shared_points += 1
        if shared_points == 2:
            return True

        if other.contains(self.start, False):
            shared_points += 1
        if shared_points == 2:
            return True

        if other.contains(self.end, False):
            shared_points += 1
        return shared_points > 1

    def intersection(self, other: "Line", including_edges: bool = True) -> Point | None:
        """Find the single crossing point of two segments.

        Solves both parametric line equations with the determinant of the two
        direction vectors. The point is computed on this line's
        parametrisation, so splitting both segments at the returned point
        gives them an exactly shared endpoint.

        Args:
            other: Segment to intersect with
            including_edges: Whether crossings at endpoints (T and V
                junctions) are reported

        Returns:
            The crossing point, or None for parallel, coincident or
            non-touching segments
        """
        if self.vector.is_parallel(other.vector):
            return None

        div = other.vector.y * self.vector.x - other.vector.x * self.vector.y
        offset = Vector.between(self.start, other.start)
        ua = (other.vector.y * offset.x - other.vector.x * offset.y) / div
        point = self.start.move(self.vector.scale(ua))

        if self.contains(point, including_edges) and other.contains(point, including_edges):
            return point
        return None

    def split(self, point: Point) -> tuple["Line", "Line"]:
        """Cut the segment in two at ``point``."""
        return Line(self.start, point), Line(point, self.end)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Line":
        """Deserialize from dictionary."""
        return cls(Point.from_dict(data["start"]), Point.from_dict(data["end"]))

    def __str__(self) -> str:
        return f"{self.start}->{self.end}"
