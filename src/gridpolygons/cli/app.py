"""CLI application entry point for gridpolygons.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from gridpolygons import __version__
from gridpolygons.cli.output import (
    console,
    print_error,
    print_grid_info,
    print_header,
    print_polygon_table,
    print_stats,
    print_step,
    print_success,
)
from gridpolygons.config import GridPolygonsSettings, LoggingConfig, PolygonisationConfig
from gridpolygons.core import Polygoniser
from gridpolygons.exceptions import (
    GridLoadError,
    GridPolygonsError,
    MalformedArrangementError,
    PolygonSaveError,
)
from gridpolygons.io import GridReader, PolygonWriter

# Create the Typer app
app = typer.Typer(
    name="gridpolygons",
    help="Convert lines drawn on a grid into the polygons they enclose.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]gridpolygons[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def polygonise(
    grid_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON grid description",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-polygons.json)",
        ),
    ] = None,
    include_outer: Annotated[
        bool,
        typer.Option(
            "--include-outer",
            help="Also output the loop around the outside of the frame",
        ),
    ] = False,
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on zero-length lines instead of skipping them",
        ),
    ] = False,
    list_polygons: Annotated[
        bool,
        typer.Option(
            "--list-polygons",
            help="Print the polygons and exit without writing a file",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert the lines of a grid into the polygons they enclose.

    The frame and all lines are split at every crossing, the resulting
    arrangement is walked face by face and each enclosed region is written
    out as a closed border.

    Example:
        gridpolygons rooms.json

    This will create rooms-polygons.json next to the input.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not grid_file.is_file():
        print_error(
            f"Input file not found: {grid_file}",
            details=f"The file '{grid_file}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = GridPolygonsSettings(
        polygonisation=PolygonisationConfig(
            include_outer_face=include_outer,
            strict_degenerate=strict,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    try:
        if not quiet:
            print_step("Loading grid")

        grid = GridReader(grid_file).load()

        if not quiet:
            print_grid_info(str(grid_file), grid.width, grid.height, len(grid.lines))
            print_step("Polygonising")

        polygoniser = Polygoniser(settings, quiet=quiet)

        if list_polygons:
            result = polygoniser.run(grid)
            if not quiet and verbose:
                print_stats(result.stats)
            print_polygon_table(result.polygons)
            raise typer.Exit(code=0)

        output_path = output if output is not None else PolygonWriter.get_output_path(grid_file)
        result = polygoniser.process(grid_file, output_path)

        if not quiet and verbose:
            print_stats(result.stats)

        if not quiet:
            if verbose:
                print_polygon_table(result.polygons)
            print_success(
                output_path=str(output_path),
                total_time_s=result.stats.duration_seconds,
                polygons=result.stats.polygons,
                faces=result.stats.faces,
            )

    except GridLoadError as e:
        print_error(f"Could not load grid: {e.reason}")
        raise typer.Exit(code=1)
    except PolygonSaveError as e:
        print_error(f"Could not save polygons: {e.reason}")
        raise typer.Exit(code=1)
    except MalformedArrangementError as e:
        print_error("Line arrangement is malformed", details=str(e))
        raise typer.Exit(code=1)
    except GridPolygonsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
