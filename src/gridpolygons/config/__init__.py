"""Configuration management for gridpolygons.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PolygonisationConfig: Pipeline behaviour settings
- LoggingConfig: Logging settings
- GridPolygonsSettings: Main application settings
"""

from gridpolygons.config.settings import (
    GridPolygonsSettings,
    LoggingConfig,
    PolygonisationConfig,
    get_default_settings,
)

__all__ = [
    "GridPolygonsSettings",
    "LoggingConfig",
    "PolygonisationConfig",
    "get_default_settings",
]
