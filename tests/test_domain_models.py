"""Tests for domain models to verify they work correctly."""

import math

import pytest

from gridpolygons.domain import (
    GRANULARITY,
    Grid,
    HalfEdge,
    Line,
    Point,
    Polygon,
    Vector,
    WindingDirection,
    points_equal,
)
from gridpolygons.exceptions import InvalidGridError, PolygonError


def chain(*coords: tuple[float, float]) -> list[HalfEdge]:
    """Build connected half-edges through the given points."""
    points = [Point(x, y) for x, y in coords]
    return [HalfEdge(Line(a, b)) for a, b in zip(points, points[1:])]


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(3.0, 4.0)
        assert p.x == 3.0
        assert p.y == 4.0

    def test_exact_equality(self) -> None:
        """Test that == compares coordinates exactly."""
        assert Point(1.0, 1.0) == Point(1.0, 1.0)
        assert Point(1.0, 1.0) != Point(1.001, 1.0)

    def test_tolerance_equality(self) -> None:
        """Test granularity-based equality."""
        assert points_equal(Point(1.0, 1.0), Point(1.005, 0.999))
        assert Point(1.0, 1.0).coincides(Point(0.995, 1.005))

    def test_tolerance_is_strict(self) -> None:
        """Test that a full granularity step is a different position."""
        assert not points_equal(Point(1.0, 1.0), Point(1.0 + 2 * GRANULARITY, 1.0))
        assert not points_equal(Point(1.0, 1.0), Point(1.0, 1.02))

    def test_move(self) -> None:
        """Test displacing a point."""
        assert Point(1.0, 2.0).move(Vector(3.0, -1.0)) == Point(4.0, 1.0)

    def test_is_in_area(self) -> None:
        """Test rectangle hit testing with inclusive edges."""
        assert Point(0.0, 5.0).is_in_area(0, 0, 10, 10)
        assert not Point(11.0, 5.0).is_in_area(0, 0, 10, 10)

    def test_vector_conversion(self) -> None:
        """Test explicit position/displacement conversion."""
        p = Point(2.0, 3.0)
        assert p.to_vector() == Vector(2.0, 3.0)
        assert Vector(2.0, 3.0).to_point() == p
        assert Vector.from_point(p) == Vector(2.0, 3.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p = Point(1.5, 2.5)
        assert Point.from_dict(p.to_dict()) == p

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore


class TestVector:
    """Tests for Vector class."""

    def test_between(self) -> None:
        """Test displacement between two points."""
        assert Vector.between(Point(1, 1), Point(4, -1)) == Vector(3, -2)

    def test_parallel(self) -> None:
        """Test parallelism in both orientations."""
        assert Vector(2, 0).is_parallel(Vector(5, 0))
        assert Vector(1, 1).is_parallel(Vector(-3, -3))
        assert not Vector(1, 0).is_parallel(Vector(0, 1))

    def test_same_orientation(self) -> None:
        """Test orientation along the dominant axis."""
        assert Vector(1, 0).same_orientation(Vector(3, 0))
        assert not Vector(1, 0).same_orientation(Vector(-1, 0))
        assert Vector(0, 1).same_orientation(Vector(0, 2))
        assert not Vector(0, -1).same_orientation(Vector(0, 2))
        assert not Vector(1, 0).same_orientation(Vector(0, 1))

    def test_zero_vector_matches_parallel(self) -> None:
        """Test that a vanishing vector has no orientation to violate."""
        assert Vector(0, 0).same_orientation(Vector(1, 1))

    def test_scale(self) -> None:
        """Test scaling."""
        assert Vector(1.0, -2.0).scale(2.5) == Vector(2.5, -5.0)

    def test_manhattan_length(self) -> None:
        """Test Manhattan length."""
        assert Vector(3, -4).manhattan_length() == 7

    def test_angle(self) -> None:
        """Test polar angle."""
        assert Vector(1, 0).angle() == 0.0
        assert math.isclose(Vector(0, 1).angle(), math.pi / 2)
        assert math.isclose(Vector(-1, 0).angle(), math.pi)


class TestLine:
    """Tests for Line class."""

    def test_direction_matters_for_equality(self) -> None:
        """Test that a line differs from its reverse."""
        a, b = Point(0, 0), Point(1, 1)
        assert Line(a, b) == Line(a, b)
        assert Line(a, b) != Line(b, a)
        assert Line(a, b).reversed() == Line(b, a)

    def test_vector_derived(self) -> None:
        """Test direction vector derived from endpoints."""
        assert Line.from_coords(1, 1, 4, 5).vector == Vector(3, 4)

    def test_contains(self) -> None:
        """Test point containment."""
        line = Line.from_coords(0, 0, 10, 0)
        assert line.contains(Point(5, 0))
        assert line.contains(Point(10, 0), True)
        assert not line.contains(Point(10, 0), False)
        assert not line.contains(Point(0.005, 0), False)
        assert not line.contains(Point(11, 0))
        assert not line.contains(Point(-1, 0))
        assert not line.contains(Point(5, 1))

    def test_intersection_crossing(self) -> None:
        """Test crossing diagonals."""
        a = Line.from_coords(0, 0, 10, 10)
        b = Line.from_coords(0, 10, 10, 0)
        assert a.intersection(b) == Point(5, 5)
        assert a.intersection(b, False) == Point(5, 5)

    def test_intersection_parallel(self) -> None:
        """Test that parallel and coincident lines do not intersect."""
        a = Line.from_coords(0, 0, 10, 0)
        assert a.intersection(Line.from_coords(0, 1, 10, 1)) is None
        assert a.intersection(Line.from_coords(5, 0, 15, 0)) is None

    def test_intersection_out_of_reach(self) -> None:
        """Test segments whose extensions cross outside them."""
        a = Line.from_coords(0, 0, 1, 0)
        b = Line.from_coords(5, -1, 5, 1)
        assert a.intersection(b) is None

    def test_intersection_t_junction(self) -> None:
        """Test that touching at an endpoint depends on edge inclusion."""
        a = Line.from_coords(0, 5, 10, 5)
        b = Line.from_coords(5, 5, 5, 10)
        assert a.intersection(b, True) == Point(5, 5)
        assert a.intersection(b, False) is None

    def test_overlap(self) -> None:
        """Test collinear overlap."""
        a = Line.from_coords(0, 0, 10, 0)
        assert a.overlap(Line.from_coords(5, 0, 15, 0))
        assert a.overlap(Line.from_coords(2, 0, 4, 0))
        assert not a.overlap(Line.from_coords(10, 0, 20, 0))
        assert not a.overlap(Line.from_coords(5, -5, 5, 5))

    def test_split(self) -> None:
        """Test splitting at a point."""
        head, tail = Line.from_coords(0, 0, 10, 0).split(Point(4, 0))
        assert head == Line.from_coords(0, 0, 4, 0)
        assert tail == Line.from_coords(4, 0, 10, 0)

    def test_degenerate(self) -> None:
        """Test zero-length detection."""
        assert Line.from_coords(3, 3, 3.005, 3.005).is_degenerate()
        assert not Line.from_coords(3, 3, 3.5, 3).is_degenerate()


class TestGrid:
    """Tests for Grid class."""

    def test_invalid_size(self) -> None:
        """Test that the frame needs a positive size."""
        with pytest.raises(InvalidGridError):
            Grid(0, 10)
        with pytest.raises(InvalidGridError):
            Grid(10, -1)

    def test_add_line_keeps_order(self) -> None:
        """Test that lines keep insertion order."""
        grid = Grid(10, 10)
        first = Line.from_coords(0, 5, 10, 5)
        second = Line.from_coords(5, 0, 5, 10)
        grid.add_line(first)
        grid.add_line(second)
        assert grid.lines == (first, second)

    def test_frame_lines(self) -> None:
        """Test frame edges in top, left, bottom, right order."""
        frame = Grid(10, 6).frame_lines()
        assert frame == [
            Line.from_coords(0, 0, 10, 0),
            Line.from_coords(0, 0, 0, 6),
            Line.from_coords(10, 6, 0, 6),
            Line.from_coords(10, 6, 10, 0),
        ]

    def test_erase_keeps_remainders(self) -> None:
        """Test that a partially erased line keeps its uncovered ends."""
        grid = Grid.with_lines(10, 10, [Line.from_coords(0, 5, 10, 5)])
        assert grid.erase(Line.from_coords(3, 5, 6, 5))
        assert grid.lines == (
            Line.from_coords(0, 5, 3, 5),
            Line.from_coords(10, 5, 6, 5),
        )

    def test_erase_whole_line(self) -> None:
        """Test that a fully covered line disappears."""
        grid = Grid.with_lines(10, 10, [Line.from_coords(2, 5, 4, 5)])
        assert grid.erase(Line.from_coords(0, 5, 10, 5))
        assert grid.lines == ()

    def test_erase_untouched(self) -> None:
        """Test that crossing lines are not erased."""
        line = Line.from_coords(0, 5, 10, 5)
        grid = Grid.with_lines(10, 10, [line])
        assert not grid.erase(Line.from_coords(5, 0, 5, 10))
        assert grid.lines == (line,)

    def test_grid_serialization(self) -> None:
        """Test grid serialization and deserialization."""
        grid = Grid.with_lines(8, 4, [Line.from_coords(0, 2, 8, 2)])
        restored = Grid.from_dict(grid.to_dict())
        assert restored.width == 8
        assert restored.height == 4
        assert restored.lines == grid.lines


class TestHalfEdge:
    """Tests for HalfEdge class."""

    def test_pair(self) -> None:
        """Test twin construction."""
        line = Line.from_coords(0, 0, 5, 0)
        forward, reverse = HalfEdge.pair(line, 0, 1)
        assert forward.twin is reverse
        assert reverse.twin is forward
        assert reverse.line == line.reversed()
        assert (forward.origin, forward.destination) == (0, 1)
        assert (reverse.origin, reverse.destination) == (1, 0)

    def test_attach_once(self) -> None:
        """Test that a half-edge belongs to one polygon only."""
        edge = HalfEdge(Line.from_coords(0, 0, 1, 0))
        edge.attach(Polygon())
        with pytest.raises(PolygonError):
            edge.attach(Polygon())


class TestPolygon:
    """Tests for Polygon class."""

    def test_square_closes(self) -> None:
        """Test that a cycle completes on returning to its start."""
        polygon = Polygon()
        sides = chain((0, 0), (10, 0), (10, 10), (0, 10), (0, 0))
        for side in sides[:-1]:
            polygon.add_side(side)
            assert not polygon.is_complete
        polygon.add_side(sides[-1])
        assert polygon.is_complete
        assert all(side.polygon is polygon for side in sides)

    def test_collinear_sides_merged(self) -> None:
        """Test that the border skips points on straight runs."""
        polygon = Polygon()
        for side in chain((0, 0), (5, 0), (10, 0), (10, 10), (0, 10), (0, 5), (0, 0)):
            polygon.add_side(side)
        assert polygon.get_borders() == (
            Point(0, 0),
            Point(10, 0),
            Point(10, 10),
            Point(0, 10),
        )
        assert len(polygon.sides) == 6

    def test_signed_area_and_winding(self) -> None:
        """Test area sign for both traversal directions."""
        forward = Polygon()
        for side in chain((0, 0), (10, 0), (10, 10), (0, 10), (0, 0)):
            forward.add_side(side)
        backward = Polygon()
        for side in chain((0, 0), (0, 10), (10, 10), (10, 0), (0, 0)):
            backward.add_side(side)

        assert forward.signed_area() == 100.0
        assert forward.winding_direction() == WindingDirection.COUNTER_CLOCKWISE
        assert backward.signed_area() == -100.0
        assert backward.winding_direction() == WindingDirection.CLOCKWISE

    def test_discontinuous_side_rejected(self) -> None:
        """Test that sides must connect."""
        polygon = Polygon()
        polygon.add_side(HalfEdge(Line.from_coords(0, 0, 1, 0)))
        with pytest.raises(PolygonError):
            polygon.add_side(HalfEdge(Line.from_coords(2, 0, 2, 1)))

    def test_complete_polygon_rejects_sides(self) -> None:
        """Test that a closed polygon is final."""
        polygon = Polygon()
        for side in chain((0, 0), (1, 0), (0, 1), (0, 0)):
            polygon.add_side(side)
        with pytest.raises(PolygonError):
            polygon.add_side(HalfEdge(Line.from_coords(0, 0, 1, 0)))

    def test_borders_of_open_polygon(self) -> None:
        """Test that an open polygon has no border yet."""
        polygon = Polygon()
        polygon.add_side(HalfEdge(Line.from_coords(0, 0, 1, 0)))
        with pytest.raises(PolygonError):
            polygon.get_borders()

    def test_to_dict(self) -> None:
        """Test polygon serialization."""
        polygon = Polygon()
        for side in chain((0, 0), (4, 0), (0, 3), (0, 0)):
            polygon.add_side(side)
        data = polygon.to_dict()
        assert data["border"] == [{"x": 0, "y": 0}, {"x": 4, "y": 0}, {"x": 0, "y": 3}]
        assert data["sides"] == 3
        assert data["signed_area"] == 6.0
        assert data["winding"] == "counter_clockwise"
