"""Grid and polygon I/O for gridpolygons.

This module reads grid descriptions and writes extracted polygons as JSON.
It keeps file handling out of the domain models and the pipeline.

Key classes:
- GridReader: Load a grid from a JSON file
- PolygonWriter: Save polygons as JSON
"""

from gridpolygons.io.reader import GridReader
from gridpolygons.io.writer import PolygonWriter, polygons_to_dict

__all__ = [
    "GridReader",
    "PolygonWriter",
    "polygons_to_dict",
]
