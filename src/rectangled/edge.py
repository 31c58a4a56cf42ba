"""The four sides of an axis-aligned rectangle."""

from __future__ import annotations

from enum import Enum


class Edge(Enum):
    """A rectangle side, in canonical order: top, right, bottom, left."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    @property
    def opposite(self) -> Edge:
        """The facing side of a neighbour touching on this edge."""
        return _OPPOSITES[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Edge.TOP, Edge.BOTTOM)


_OPPOSITES = {
    Edge.TOP: Edge.BOTTOM,
    Edge.RIGHT: Edge.LEFT,
    Edge.BOTTOM: Edge.TOP,
    Edge.LEFT: Edge.RIGHT,
}
