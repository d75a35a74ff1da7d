"""gridpolygons - Turn lines drawn on a grid into the polygons they enclose.

Straight lines drawn inside a rectangular frame may cross, touch and overlap
freely. gridpolygons cuts them into a planar arrangement, builds the junction
graph and walks it face by face, returning simple closed polygons ready for
triangulation and extrusion.

Example:
    $ gridpolygons rooms.json

This will create rooms-polygons.json with the border of every enclosed region.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
