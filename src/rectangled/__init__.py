"""rectangled: exact-integer geometry for labeled axis-aligned rectangles."""

from ._version import __version__
from .edge import Edge
from .errors import BadPointsError, RectangleValidationError, ZeroAreaError
from .geometry import EdgeCoordinates, Rectangle
from .pairwise import corners_array, overlap_matrix, overlapping_pairs

__all__ = [
    "__version__",
    "Edge",
    "EdgeCoordinates",
    "Rectangle",
    "RectangleValidationError",
    "ZeroAreaError",
    "BadPointsError",
    "corners_array",
    "overlap_matrix",
    "overlapping_pairs",
]
