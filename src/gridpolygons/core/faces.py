"""Face extraction by leftmost-turn traversal."""

import logging

from gridpolygons.core.graph import PlanarGraph
from gridpolygons.domain import Polygon
from gridpolygons.exceptions import MalformedArrangementError

logger = logging.getLogger(__name__)


def nodes_to_polygons(graph: PlanarGraph) -> list[Polygon]:
    """Peel every face off the graph.

    Starting from any remaining half-edge, the walk keeps taking the leftmost
    turn until it returns to its starting point. Each walk consumes its
    half-edges, so repeating until all nodes are cleared covers every
    half-edge exactly once: the bounded cells and the loop around the outside
    of the frame alike.

    Args:
        graph: Freshly built graph; it is consumed by the traversal

    Returns:
        Complete polygons in extraction order

    Raises:
        MalformedArrangementError: If a walk reaches a node with no way on
    """
    pending = graph.active_nodes()
    polygons: list[Polygon] = []

    while pending:
        node = pending[0]
        polygon = Polygon()

        edge = node.walk_anywhere()
        if edge is None:
            raise MalformedArrangementError(node.position, 0)
        polygon.add_side(edge)
        if node.is_cleared():
            pending.remove(node)

        while not polygon.is_complete:
            node = graph.nodes[edge.destination]
            edge = node.walk_left(edge.direction)
            if edge is None:
                raise MalformedArrangementError(node.position, len(polygon.sides))
            polygon.add_side(edge)
            if node.is_cleared():
                pending.remove(node)

        logger.debug("Polygon closed with %d sides", len(polygon.sides))
        polygons.append(polygon)

    return polygons


def find_outer_polygon(polygons: list[Polygon]) -> Polygon | None:
    """Find the face running around the outside of the frame.

    Bounded cells all wind the same way and the outside loop winds the other
    way around the largest area, so it has the most negative signed area.

    Returns:
        The outside loop, or None if no polygon has negative area
    """
    outer: Polygon | None = None
    smallest = 0.0
    for polygon in polygons:
        area = polygon.signed_area()
        if area < smallest:
            smallest = area
            outer = polygon
    return outer
