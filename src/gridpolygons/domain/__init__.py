"""Domain models for gridpolygons.

This module contains the value types the polygonisation pipeline works on.
Models are:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Free of any rendering or input-handling concerns

Key classes:
- Point, Vector: Positions and displacements with explicit tolerance equality
- Line: A directed segment with containment and intersection queries
- Grid: The frame rectangle plus user-drawn lines
- HalfEdge: One directed side of an arrangement fragment
- Polygon: A closed cycle of half-edges with its reduced border
"""

from gridpolygons.domain.grid import Grid
from gridpolygons.domain.line import Line
from gridpolygons.domain.polygon import HalfEdge, Polygon, WindingDirection
from gridpolygons.domain.primitives import GRANULARITY, Point, Vector, points_equal

__all__: list[str] = [
    # Constants
    "GRANULARITY",
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Vector",
    "Line",
    "Grid",
    "HalfEdge",
    "Polygon",
    # Functions
    "points_equal",
]
