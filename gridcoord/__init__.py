"""gridcoord: a generic 2D coordinate value type for grid-based programs.

Core Objects: Coord
"""

from gridcoord.coord import Coord
from gridcoord.exceptions import CapabilityError, ConversionError, GridCoordError
from gridcoord.protocols import CoordLike, SupportsDistance, SupportsOffset

__all__ = [
    "CapabilityError",
    "ConversionError",
    "Coord",
    "CoordLike",
    "GridCoordError",
    "SupportsDistance",
    "SupportsOffset",
]

__title__ = "gridcoord"
__version__ = "0.1.0"
