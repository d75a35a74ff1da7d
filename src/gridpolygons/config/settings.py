"""Configuration settings for gridpolygons."""

from pathlib import Path

from pydantic import BaseModel, Field


class PolygonisationConfig(BaseModel):
    """Configuration for turning a grid into polygons.

    Coordinate tolerances are fixed constants of the geometry layer.
    """

    include_outer_face: bool = Field(
        default=False,
        description="Also return the face running around the outside of the frame",
    )
    strict_degenerate: bool = Field(
        default=False,
        description="Fail on zero-length lines instead of skipping them with a warning",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GridPolygonsSettings(BaseModel):
    """Main application settings."""

    polygonisation: PolygonisationConfig = Field(default_factory=PolygonisationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GridPolygonsSettings:
    """Get default application settings."""
    return GridPolygonsSettings()
