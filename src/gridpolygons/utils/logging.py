"""Logging utilities for gridpolygons."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration.
_installed_handlers: list[logging.Handler] = []


@dataclass
class PolygonisationStats:
    """Statistics from one polygonisation run."""

    input_lines: int = 0
    degenerate_lines: int = 0
    collapsed_fragments: int = 0
    fragments: int = 0
    nodes: int = 0
    half_edges: int = 0
    faces: int = 0
    polygons: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        _installed_handlers.append(console_handler)

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("gridpolygons")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PolygonisationLogger:
    """Logger for tracking pipeline stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = PolygonisationStats()

    def reset(self) -> None:
        """Start statistics for a new run."""
        self._stats = PolygonisationStats()

    def log_input(self, width: float, height: float, line_count: int) -> None:
        """Log the grid handed to the pipeline."""
        self._logger.info("Polygonising grid", width=width, height=height, lines=line_count)
        self._stats.input_lines = line_count

    def log_degenerate(self, skipped: int) -> None:
        """Log zero-length lines dropped before decomposition."""
        if skipped:
            self._logger.warning("Degenerate lines skipped", count=skipped)
        self._stats.degenerate_lines = skipped

    def log_arrangement(self, fragment_count: int) -> None:
        """Log arrangement construction results."""
        self._logger.debug("Arrangement built", fragments=fragment_count)
        self._stats.fragments = fragment_count

    def log_graph(self, node_count: int, half_edge_count: int, collapsed_count: int = 0) -> None:
        """Log planar graph construction results."""
        if collapsed_count:
            self._logger.warning("Collapsed fragments skipped", count=collapsed_count)
        self._logger.debug("Graph built", nodes=node_count, half_edges=half_edge_count)
        self._stats.nodes = node_count
        self._stats.half_edges = half_edge_count
        self._stats.collapsed_fragments = collapsed_count

    def log_faces(self, face_count: int, returned_count: int, duration_ms: float) -> None:
        """Log face extraction results."""
        self._logger.info(
            "Polygons extracted",
            faces=face_count,
            returned=returned_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.faces = face_count
        self._stats.polygons = returned_count

    def log_failure(self, error: Exception) -> None:
        """Log a failed run."""
        self._logger.error(
            "Polygonisation failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> PolygonisationStats:
        """Get current run statistics."""
        return self._stats
