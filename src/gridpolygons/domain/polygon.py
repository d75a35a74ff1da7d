"""Half-edges and the closed polygons built from them.

This module defines:
- HalfEdge: One directed traversal of an undirected fragment
- Polygon: A cycle of half-edges with its reduced border
- WindingDirection: Enum for border winding direction
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from gridpolygons.domain.line import Line
from gridpolygons.domain.primitives import Point, Vector, points_equal
from gridpolygons.exceptions import PolygonError


class WindingDirection(Enum):
    """Border winding direction, by the sign of the shoelace area.

    Grid coordinates grow downwards, so COUNTER_CLOCKWISE in the mathematical
    sense appears clockwise on screen.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(eq=False)
class HalfEdge:
    """A directed side of a fragment.

    Every fragment yields two twin half-edges. Each is registered at the node
    it leaves and is consumed by exactly one polygon.

    Attributes:
        line: The fragment, oriented in traversal direction
        origin: Index of the node the half-edge leaves
        destination: Index of the node the half-edge arrives at
        twin: The same fragment traversed in reverse
        polygon: Polygon that consumed this half-edge, once attached
    """

    line: Line
    origin: int = -1
    destination: int = -1
    twin: "HalfEdge | None" = field(default=None, repr=False)
    polygon: "Polygon | None" = field(default=None, repr=False)

    @classmethod
    def pair(cls, line: Line, origin: int, destination: int) -> tuple["HalfEdge", "HalfEdge"]:
        """Create the two twin half-edges of ``line``.

        Returns:
            Tuple of (forward half-edge, reverse half-edge)
        """
        forward = cls(line=line, origin=origin, destination=destination)
        reverse = cls(line=line.reversed(), origin=destination, destination=origin)
        forward.twin = reverse
        reverse.twin = forward
        return forward, reverse

    @property
    def start(self) -> Point:
        return self.line.start

    @property
    def end(self) -> Point:
        return self.line.end

    @property
    def direction(self) -> Vector:
        return self.line.vector

    def attach(self, polygon: "Polygon") -> None:
        """Record the polygon consuming this half-edge.

        Raises:
            PolygonError: If the half-edge already belongs to a polygon
        """
        if self.polygon is not None:
            raise PolygonError(f"Half-edge {self.line} is already part of a polygon")
        self.polygon = polygon


class Polygon:
    """A closed cycle of half-edges.

    Sides are appended one at a time; each must start where the previous one
    ended. The polygon completes when a side ends at the first side's start,
    at which point the reduced border is derived and the polygon no longer
    accepts sides.
    """

    def __init__(self) -> None:
        self._sides: list[HalfEdge] = []
        self._complete = False
        self._borders: tuple[Point, ...] = ()

    def add_side(self, side: HalfEdge) -> None:
        """Append a half-edge to the cycle.

        Args:
            side: Half-edge continuing from the last side's end

        Raises:
            PolygonError: If the polygon is complete, the side does not
                continue the cycle, or the side belongs to another polygon
        """
        if self._complete:
            raise PolygonError("Cannot add a side to a complete polygon")
        if self._sides and not points_equal(self._sides[-1].end, side.start):
            raise PolygonError(
                f"Side {side.line} does not continue from {self._sides[-1].end}"
            )

        side.attach(self)
        self._sides.append(side)

        self._complete = points_equal(self._sides[0].start, side.end)
        if self._complete:
            self._borders = self._reduce_borders()

    def _reduce_borders(self) -> tuple[Point, ...]:
        # A corner is kept only where the direction changes.
        points: list[Point] = []
        previous = self._sides[-1].line
        for side in self._sides:
            current = side.line
            if not previous.vector.same_orientation(current.vector):
                points.append(current.start)
            previous = current
        return tuple(points)

    @property
    def is_complete(self) -> bool:
        """Whether the cycle is closed."""
        return self._complete

    @property
    def sides(self) -> tuple[HalfEdge, ...]:
        """Half-edges in traversal order."""
        return tuple(self._sides)

    def get_borders(self) -> tuple[Point, ...]:
        """Corners of the closed polygon, collinear runs merged.

        Returns:
            Border points in traversal order

        Raises:
            PolygonError: If the polygon is not complete
        """
        if not self._complete:
            raise PolygonError("Polygon is not complete")
        return self._borders

    def signed_area(self) -> float:
        """Shoelace area of the border; its sign gives the winding."""
        points = self.get_borders()
        n = len(points)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += points[i].x * points[j].y
            area -= points[j].x * points[i].y
        return area / 2.0

    def winding_direction(self) -> WindingDirection | None:
        """Winding of the border, None for a zero-area polygon."""
        area = self.signed_area()
        if area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        if area < 0:
            return WindingDirection.CLOCKWISE
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the border and its derived values."""
        direction = self.winding_direction()
        return {
            "border": [point.to_dict() for point in self.get_borders()],
            "sides": len(self._sides),
            "signed_area": self.signed_area(),
            "winding": direction.name.lower() if direction else None,
        }

    def __repr__(self) -> str:
        state = "complete" if self._complete else "open"
        return f"Polygon({len(self._sides)} sides, {state})"
