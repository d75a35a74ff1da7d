"""Grid reader for loading JSON grid descriptions.

Accepted layout::

    {
        "width": 10,
        "height": 10,
        "lines": [[0, 5, 10, 5], {"start": {"x": 7, "y": 3}, "end": {"x": 7, "y": 10}}]
    }

Each line is either a flat ``[x1, y1, x2, y2]`` list or a start/end object.
"""

import json
from pathlib import Path
from typing import Any

from gridpolygons.domain import Grid, Line
from gridpolygons.exceptions import GridError, GridLoadError


def _parse_line(raw: Any) -> Line:
    if isinstance(raw, dict):
        return Line.from_dict(raw)
    if isinstance(raw, list | tuple) and len(raw) == 4:
        x1, y1, x2, y2 = (float(value) for value in raw)
        return Line.from_coords(x1, y1, x2, y2)
    raise ValueError(f"unrecognised line entry {raw!r}")


class GridReader:
    """Loads a grid from a JSON file.

    Example:
        grid = GridReader(Path("grid.json")).load()
        print(grid.width, len(grid.lines))
    """

    def __init__(self, grid_path: Path) -> None:
        """Initialize the grid reader.

        Args:
            grid_path: Path to the JSON grid file
        """
        self._grid_path = grid_path

    @property
    def path(self) -> Path:
        return self._grid_path

    def load(self) -> Grid:
        """Read and validate the grid file.

        Returns:
            Grid described by the file

        Raises:
            GridLoadError: If the file is missing, not JSON, or malformed
        """
        if not self._grid_path.exists():
            raise GridLoadError(str(self._grid_path), "file not found")

        try:
            data = json.loads(self._grid_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise GridLoadError(str(self._grid_path), str(e)) from e

        return self.parse(data)

    def parse(self, data: Any) -> Grid:
        """Build a grid from already decoded JSON data.

        Raises:
            GridLoadError: If required fields are missing or invalid
        """
        if not isinstance(data, dict):
            raise GridLoadError(str(self._grid_path), "top-level value must be an object")

        try:
            width = float(data["width"])
            height = float(data["height"])
            lines = [_parse_line(raw) for raw in data.get("lines", [])]
            return Grid.with_lines(width, height, lines)
        except KeyError as e:
            raise GridLoadError(str(self._grid_path), f"missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise GridLoadError(str(self._grid_path), str(e)) from e
        except GridError as e:
            raise GridLoadError(str(self._grid_path), str(e)) from e
