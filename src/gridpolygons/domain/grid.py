"""The drawing surface: a frame rectangle plus user-drawn lines."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from gridpolygons.domain.line import Line
from gridpolygons.domain.primitives import Point
from gridpolygons.exceptions import InvalidGridError


@dataclass
class Grid:
    """Set of lines on a bounded 2D grid.

    The frame has its corners at (0, 0) and (width, height). Lines may cross,
    overlap, touch or extend each other in any way; the frame edges are not
    stored and are produced by ``frame_lines``.

    Attributes:
        width: Width of the frame in grid units
        height: Height of the frame in grid units
    """

    width: float
    height: float
    _lines: list[Line] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not (self.width > 0 and self.height > 0):
            raise InvalidGridError(self.width, self.height)
        self._lines = list(self._lines)

    @classmethod
    def with_lines(cls, width: float, height: float, lines: Iterable[Line]) -> "Grid":
        """Create a grid already holding ``lines``."""
        return cls(width=width, height=height, _lines=list(lines))

    @property
    def lines(self) -> tuple[Line, ...]:
        """User lines in the order they were added."""
        return tuple(self._lines)

    def add_line(self, line: Line) -> None:
        """Append a user line."""
        self._lines.append(line)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Frame corners as (top-left, top-right, bottom-left, bottom-right)."""
        return (
            Point(0.0, 0.0),
            Point(self.width, 0.0),
            Point(0.0, self.height),
            Point(self.width, self.height),
        )

    def frame_lines(self) -> list[Line]:
        """Frame edges in top, left, bottom, right order."""
        tl, tr, bl, br = self.corners()
        return [
            Line(tl, tr),
            Line(tl, bl),
            Line(br, bl),
            Line(br, tr),
        ]

    def erase(self, rubber: Line) -> bool:
        """Remove every line overlapped by an eraser stroke.

        A partially erased line keeps the piece around each of its endpoints
        that the rubber does not cover. That piece runs up to whichever rubber
        endpoint is nearer.

        Args:
            rubber: The eraser stroke

        Returns:
            True if any line was removed or shortened
        """
        kept: list[Line] = []
        remainders: list[Line] = []

        for line in self._lines:
            if not line.overlap(rubber):
                kept.append(line)
                continue

            for endpoint in (line.start, line.end):
                if rubber.contains(endpoint, True):
                    continue
                to_start = Line(endpoint, rubber.start)
                to_end = Line(endpoint, rubber.end)
                if to_start.length() < to_end.length():
                    remainders.append(to_start)
                else:
                    remainders.append(to_end)

        changed = len(kept) != len(self._lines)
        if changed:
            self._lines = kept + remainders
        return changed

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "lines": [line.to_dict() for line in self._lines],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Grid":
        """Deserialize from dictionary."""
        return cls.with_lines(
            width=float(data["width"]),
            height=float(data["height"]),
            lines=[Line.from_dict(line) for line in data.get("lines", [])],
        )
