"""Planar graph of junction nodes linked by half-edges.

Nodes live in a list owned by ``PlanarGraph`` and half-edges refer to their
endpoints by index into that list.
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from gridpolygons.domain import HalfEdge, Line, Point, Vector, points_equal
from gridpolygons.exceptions import DegenerateInputError

logger = logging.getLogger(__name__)

# Turns this close to a full reversal still count as going back the same way.
REVERSE_TURN_EPSILON = 0.001


@dataclass(eq=False)
class Node:
    """A junction and its not yet traversed outgoing half-edges.

    Attributes:
        index: Position of the node in its graph
        position: Location of the junction
        outgoing: Half-edges leaving this node that no polygon has consumed
    """

    index: int
    position: Point
    outgoing: list[HalfEdge] = field(default_factory=list)

    def is_cleared(self) -> bool:
        """Check whether every outgoing half-edge has been consumed."""
        return not self.outgoing

    def walk_anywhere(self) -> HalfEdge | None:
        """Consume the first remaining half-edge."""
        if not self.outgoing:
            return None
        return self.outgoing.pop(0)

    def walk_left(self, incoming: Vector) -> HalfEdge | None:
        """Consume the half-edge turning furthest left.

        Angles of the remaining half-edges are measured counter-clockwise from
        the direction pointing back along ``incoming``. The largest one wins,
        so going straight back is chosen only when nothing else is left.

        Args:
            incoming: Direction of the half-edge that arrived at this node

        Returns:
            The consumed half-edge, or None if the node is cleared
        """
        reference = incoming.angle() + math.pi
        if reference > math.pi:
            reference -= 2 * math.pi

        best_index = -1
        best_angle = -1.0
        for index, edge in enumerate(self.outgoing):
            angle = edge.direction.angle() - reference
            if angle <= -REVERSE_TURN_EPSILON:
                angle += 2 * math.pi
            if angle > best_angle:
                best_angle = angle
                best_index = index

        if best_index == -1:
            return None
        return self.outgoing.pop(best_index)

    def __str__(self) -> str:
        targets = ", ".join(str(edge.end) for edge in self.outgoing)
        return f"{self.position} -> {{{targets}}}"


class PlanarGraph:
    """Nodes and half-edges built from an arrangement."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self.fragment_count = 0
        self.collapsed_count = 0

    def find_node(self, point: Point) -> Node | None:
        """Find the node at ``point`` under tolerance equality."""
        for node in self.nodes:
            if points_equal(node.position, point):
                return node
        return None

    def node_at(self, point: Point) -> Node:
        """Find or create the node at ``point``."""
        node = self.find_node(point)
        if node is None:
            node = Node(index=len(self.nodes), position=point)
            self.nodes.append(node)
        return node

    def collapses(self, line: Line) -> bool:
        """Check whether both ends of ``line`` would resolve to one node."""
        start = self.find_node(line.start)
        if start is None:
            return self.find_node(line.end) is None and points_equal(line.start, line.end)
        return self.find_node(line.end) is start

    def connect(self, line: Line) -> tuple[HalfEdge, HalfEdge]:
        """Register both half-edges of a fragment.

        Raises:
            DegenerateInputError: If both endpoints resolve to the same node;
                the graph is left unchanged
        """
        if self.collapses(line):
            raise DegenerateInputError(line, "fragment would form a self-loop")

        start = self.node_at(line.start)
        end = self.node_at(line.end)

        forward, reverse = HalfEdge.pair(line, start.index, end.index)
        start.outgoing.append(forward)
        end.outgoing.append(reverse)
        self.fragment_count += 1
        return forward, reverse

    @property
    def half_edge_count(self) -> int:
        """Number of outgoing half-edges not yet consumed."""
        return sum(len(node.outgoing) for node in self.nodes)

    def active_nodes(self) -> list[Node]:
        """Nodes that still have outgoing half-edges, in creation order."""
        return [node for node in self.nodes if not node.is_cleared()]


def lines_to_nodes(fragments: Iterable[Line], strict: bool = False) -> PlanarGraph:
    """Convert arrangement fragments into a planar graph.

    Every fragment contributes one pair of half-edges, so the graph starts
    with twice as many half-edges as there are connected fragments. A short
    fragment whose ends both snap to the same junction is skipped with a
    warning and counted in ``collapsed_count``.

    Args:
        fragments: Lines crossing only at shared endpoints
        strict: Raise instead of skipping collapsed fragments

    Returns:
        Graph holding one node per distinct fragment endpoint

    Raises:
        DegenerateInputError: If ``strict`` and a fragment collapses
    """
    graph = PlanarGraph()
    for fragment in fragments:
        if graph.collapses(fragment):
            if strict:
                raise DegenerateInputError(fragment, "fragment would form a self-loop")
            logger.warning("Skipping fragment %s collapsed onto one junction", fragment)
            graph.collapsed_count += 1
            continue
        graph.connect(fragment)

    logger.debug(
        "Graph built with %d nodes and %d half-edges",
        len(graph.nodes),
        graph.half_edge_count,
    )
    return graph
