"""Exception hierarchy for gridpolygons."""

from typing import Any


class GridPolygonsError(Exception):
    """Base exception for all gridpolygons errors."""

    pass


class GridError(GridPolygonsError):
    """Errors related to grid definition, loading or saving."""

    pass


class InvalidGridError(GridError):
    """Grid dimensions cannot define a frame rectangle."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Invalid grid size {width}x{height}: width and height must be positive"
        )


class GridLoadError(GridError):
    """Error loading a grid file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load grid '{path}': {reason}")


class PolygonSaveError(GridError):
    """Error saving extracted polygons."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save polygons '{path}': {reason}")


class GeometryError(GridPolygonsError):
    """Errors in geometric calculations."""

    pass


class DegenerateInputError(GeometryError):
    """A line collapses to a single point under the coordinate granularity."""

    def __init__(self, line: Any, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Degenerate line {line}: {reason}")


class PolygonError(GeometryError):
    """Error with polygon construction."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MalformedArrangementError(GeometryError):
    """Face traversal reached a junction with no way to continue.

    Every junction of a well-formed arrangement has as many leaving as
    arriving half-edges, so this means the arrangement itself is broken.
    """

    def __init__(self, position: Any, polygon_sides: int) -> None:
        self.position = position
        self.polygon_sides = polygon_sides
        super().__init__(
            f"No continuing half-edge at {position} after {polygon_sides} "
            "sides; polygon cannot be closed"
        )
