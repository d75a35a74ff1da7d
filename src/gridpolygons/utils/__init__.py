"""Utility functions for gridpolygons.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics collection
"""

from gridpolygons.utils.logging import (
    PolygonisationLogger,
    PolygonisationStats,
    configure_logging,
)

__all__ = [
    "PolygonisationLogger",
    "PolygonisationStats",
    "configure_logging",
]
