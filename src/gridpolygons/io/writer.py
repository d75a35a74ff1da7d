"""Polygon writer for exporting extracted faces.

The output is the hand-off format for a triangulator or renderer: every
polygon's reduced border plus its signed area and winding.
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from gridpolygons import __version__
from gridpolygons.domain import Polygon
from gridpolygons.exceptions import PolygonSaveError


def polygons_to_dict(polygons: Sequence[Polygon]) -> dict[str, Any]:
    """Serialize polygons into the output document."""
    return {
        "generator": f"gridpolygons {__version__}",
        "polygons": [polygon.to_dict() for polygon in polygons],
    }


class PolygonWriter:
    """Saves polygons as JSON.

    Example:
        writer = PolygonWriter(Path("grid-polygons.json"))
        writer.write(polygons)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the polygon writer.

        Args:
            output_path: Path of the JSON file to create
        """
        self._output_path = output_path

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate output path next to the input grid.

        Examples:
            >>> PolygonWriter.get_output_path(Path("rooms.json"))
            PosixPath('rooms-polygons.json')
        """
        return input_path.with_name(f"{input_path.stem}-polygons.json")

    def write(self, polygons: Sequence[Polygon]) -> None:
        """Write polygons to the output path.

        Raises:
            PolygonSaveError: If the file cannot be written
        """
        document = polygons_to_dict(polygons)
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as e:
            raise PolygonSaveError(str(self._output_path), str(e)) from e
