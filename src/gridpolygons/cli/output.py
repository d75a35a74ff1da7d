"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gridpolygons.domain import Polygon
from gridpolygons.utils import PolygonisationStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]gridpolygons[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_grid_info(grid_path: str, width: float, height: float, line_count: int) -> None:
    """Print grid information.

    Args:
        grid_path: Path to the grid file
        width: Frame width in grid units
        height: Frame height in grid units
        line_count: Number of user lines
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(grid_path)
    console.print(line1)
    console.print(f"  {width:g} x {height:g} frame {SYM_DOT} {line_count:,} lines")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_stats(stats: PolygonisationStats) -> None:
    """Print per-stage counts of a run."""
    console.print(
        f"  {stats.fragments} fragments {SYM_DOT} {stats.nodes} nodes {SYM_DOT} "
        f"{stats.half_edges} half-edges"
    )
    if stats.degenerate_lines:
        console.print(f"  [yellow]{stats.degenerate_lines} zero-length lines skipped[/yellow]")
    if stats.collapsed_fragments:
        console.print(
            f"  [yellow]{stats.collapsed_fragments} collapsed fragments skipped[/yellow]"
        )


def print_polygon_table(polygons: Sequence[Polygon]) -> None:
    """Print one row per polygon with its corners and area."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Corners", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Border")

    for index, polygon in enumerate(polygons):
        border = polygon.get_borders()
        preview = " ".join(str(point) for point in border[:6])
        if len(border) > 6:
            preview += f" {SYM_DOT}{SYM_DOT}{SYM_DOT}"
        table.add_row(
            str(index),
            str(len(border)),
            f"{polygon.signed_area():g}",
            preview,
        )

    console.print(table)


def print_success(
    output_path: str | None,
    total_time_s: float,
    polygons: int,
    faces: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file, None if nothing was written
        total_time_s: Total processing time in seconds
        polygons: Number of polygons returned
        faces: Number of faces traversed, outer loop included
    """
    time_str = _format_time(total_time_s)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(f"  {polygons} polygons {SYM_DOT} {faces} faces traversed")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
