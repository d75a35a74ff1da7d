"""Core processing algorithms for gridpolygons.

This module contains the three pipeline stages:

- Arrangement construction (splitting crossing lines into fragments)
- Planar graph construction (junction nodes and twin half-edges)
- Face extraction (leftmost-turn traversal into closed polygons)

All stages are:
- Synchronous and single-threaded
- Free of state shared between calls (each call builds its own graph)

Key functions:
- decompose_grid: Frame plus user lines to non-crossing fragments
- lines_to_nodes: Fragments to a planar graph
- nodes_to_polygons: Planar graph to closed polygons
- grid_to_polygons: The whole pipeline

Key classes:
- PlanarGraph, Node: The transient graph
- Polygoniser: Pipeline runner with logging and statistics
"""

from gridpolygons.core.arrangement import (
    decompose_grid,
    decompose_lines,
    filter_degenerate_lines,
)
from gridpolygons.core.faces import find_outer_polygon, nodes_to_polygons
from gridpolygons.core.graph import REVERSE_TURN_EPSILON, Node, PlanarGraph, lines_to_nodes
from gridpolygons.core.polygoniser import (
    Polygoniser,
    PolygonisationResult,
    grid_to_polygons,
)

__all__ = [
    "REVERSE_TURN_EPSILON",
    # Graph classes
    "Node",
    "PlanarGraph",
    # Pipeline classes
    "PolygonisationResult",
    "Polygoniser",
    # Stage functions
    "decompose_grid",
    "decompose_lines",
    "filter_degenerate_lines",
    "find_outer_polygon",
    "grid_to_polygons",
    "lines_to_nodes",
    "nodes_to_polygons",
]
