"""Pipeline orchestration: grid in, polygons out.

This module chains the three stages of polygonisation:
decompose_grid -> lines_to_nodes -> nodes_to_polygons

Key components:
- grid_to_polygons: Plain function running the whole pipeline
- Polygoniser: Orchestrator with settings, structured logging and statistics
"""

import time
from dataclasses import dataclass, field
from pathlib import Path

from gridpolygons.config import GridPolygonsSettings
from gridpolygons.core.arrangement import decompose_grid, decompose_lines, filter_degenerate_lines
from gridpolygons.core.faces import find_outer_polygon, nodes_to_polygons
from gridpolygons.core.graph import lines_to_nodes
from gridpolygons.domain import Grid, Polygon
from gridpolygons.exceptions import GridPolygonsError
from gridpolygons.io import GridReader, PolygonWriter
from gridpolygons.utils import PolygonisationLogger, PolygonisationStats, configure_logging


def _drop_outer(polygons: list[Polygon]) -> list[Polygon]:
    outer = find_outer_polygon(polygons)
    return [polygon for polygon in polygons if polygon is not outer]


def grid_to_polygons(
    grid: Grid,
    include_outer: bool = False,
    strict: bool = False,
) -> list[Polygon]:
    """Convert a grid into the polygons tiling its frame.

    Every call builds its own arrangement and graph, so repeated calls on the
    same grid are independent and give identical borders.

    Args:
        grid: Grid with frame size and user lines
        include_outer: Also return the loop around the outside of the frame
        strict: Fail on zero-length lines and collapsed fragments instead
            of skipping them

    Returns:
        Complete polygons in extraction order

    Raises:
        DegenerateInputError: If ``strict`` and a zero-length line or a
            collapsed fragment is present
        MalformedArrangementError: If a face cannot be closed

    Examples:
        >>> grid = Grid(10, 10)
        >>> [len(p.get_borders()) for p in grid_to_polygons(grid)]
        [4]
    """
    fragments = decompose_grid(grid, strict=strict)
    polygons = nodes_to_polygons(lines_to_nodes(fragments, strict=strict))
    if include_outer:
        return polygons
    return _drop_outer(polygons)


@dataclass
class PolygonisationResult:
    """Polygons produced by one run and the statistics gathered on the way."""

    polygons: list[Polygon] = field(default_factory=list)
    stats: PolygonisationStats = field(default_factory=PolygonisationStats)


class Polygoniser:
    """Runs the polygonisation pipeline with logging and statistics.

    Example:
        settings = GridPolygonsSettings()
        polygoniser = Polygoniser(settings)
        result = polygoniser.run(grid)
        print(result.stats.polygons)
    """

    def __init__(self, config: GridPolygonsSettings, quiet: bool = False) -> None:
        """Initialize the polygoniser with configuration.

        Args:
            config: Settings for the pipeline and logging
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.polygonisation_logger = PolygonisationLogger(self.logger)

    def run(self, grid: Grid) -> PolygonisationResult:
        """Polygonise a grid.

        Args:
            grid: Grid to convert

        Returns:
            PolygonisationResult with polygons and stage statistics

        Raises:
            GridPolygonsError: If the grid cannot be polygonised; no partial
                polygon list is returned
        """
        options = self.config.polygonisation
        tracker = self.polygonisation_logger
        tracker.reset()
        stats = tracker.stats
        stats.start_time = time.time()

        tracker.log_input(grid.width, grid.height, len(grid.lines))

        try:
            lines = filter_degenerate_lines(grid.lines, strict=options.strict_degenerate)
            tracker.log_degenerate(len(grid.lines) - len(lines))

            fragments = decompose_lines(grid.frame_lines(), lines)
            tracker.log_arrangement(len(fragments))

            graph = lines_to_nodes(fragments, strict=options.strict_degenerate)
            tracker.log_graph(len(graph.nodes), graph.half_edge_count, graph.collapsed_count)

            faces_start = time.time()
            faces = nodes_to_polygons(graph)
            polygons = faces if options.include_outer_face else _drop_outer(faces)
            tracker.log_faces(
                len(faces), len(polygons), (time.time() - faces_start) * 1000
            )
        except GridPolygonsError as e:
            tracker.log_failure(e)
            raise

        stats.end_time = time.time()
        return PolygonisationResult(polygons=polygons, stats=stats)

    def process(self, grid_path: Path, output_path: Path | None = None) -> PolygonisationResult:
        """Polygonise a grid file and write the polygons next to it.

        Args:
            grid_path: Path to a JSON grid description
            output_path: Path for the polygon JSON (auto-generated if None)

        Returns:
            PolygonisationResult of the run

        Raises:
            GridLoadError: If the grid file cannot be read
            PolygonSaveError: If the output cannot be written
        """
        if output_path is None:
            output_path = PolygonWriter.get_output_path(grid_path)

        self.logger.info("Processing grid file", input=str(grid_path), output=str(output_path))

        grid = GridReader(grid_path).load()
        result = self.run(grid)
        PolygonWriter(output_path).write(result.polygons)

        self.logger.info("Polygons written", output=str(output_path), count=len(result.polygons))
        return result
