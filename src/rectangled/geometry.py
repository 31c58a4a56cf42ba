"""Labeled axis-aligned rectangles over exact integer coordinates.

A rectangle is stored as the two corners it was built from, in whatever
order the caller supplied them. Every geometric query works on the
normalized sides (``left``/``right``/``top``/``bottom``), so a rectangle and
its corner-swapped twin behave identically everywhere except ``validate``.

y grows downward: ``top`` is the smaller y.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .edge import Edge
from .errors import BadPointsError, RectangleValidationError, ZeroAreaError

IdT = TypeVar("IdT")


def _spans_share_length(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """True if two closed spans share a stretch of positive length."""
    return max(a_start, b_start) < min(a_end, b_end)


@dataclass(frozen=True)
class EdgeCoordinates(Generic[IdT]):
    """A boundary segment shared by two touching rectangles.

    ``id`` names the rectangle the segment was found against (the neighbour),
    and the corners describe a degenerate rectangle lying on the shared line.
    """

    id: IdT
    x: int
    y: int
    w: int
    z: int

    @property
    def length(self) -> int:
        """Extent of the segment along its line."""
        return abs(self.w - self.x) + abs(self.z - self.y)


@dataclass(frozen=True)
class Rectangle(Generic[IdT]):
    """An axis-aligned box between corners ``(x, y)`` and ``(w, z)``.

    No validation happens on construction; call ``validate()`` explicitly.
    """

    id: IdT
    x: int
    y: int
    w: int
    z: int

    @property
    def left(self) -> int:
        return min(self.x, self.w)

    @property
    def right(self) -> int:
        return max(self.x, self.w)

    @property
    def top(self) -> int:
        return min(self.y, self.z)

    @property
    def bottom(self) -> int:
        return max(self.y, self.z)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_valid(self) -> bool:
        return self.validate() is None

    def validate(self) -> RectangleValidationError | None:
        """Check the rectangle is usable, returning the problem if not.

        A degenerate rectangle reports ``ZeroAreaError`` even when its corners
        are also reversed. ``BadPointsError`` is judged on the raw corners.
        """
        if self.width == 0 or self.height == 0:
            return ZeroAreaError(
                f"Rectangle {self.id!r} has zero area: "
                f"width={self.width}, height={self.height}."
            )
        if self.x > self.w or self.y > self.z:
            return BadPointsError(
                f"Rectangle {self.id!r} has corners given backwards: "
                f"({self.x}, {self.y}) -> ({self.w}, {self.z}). "
                "The first corner must be the top-left one."
            )
        return None

    def contains(self, px: int, py: int) -> bool:
        """Inclusive point containment."""
        return self.left <= px <= self.right and self.top <= py <= self.bottom

    def offset(self, target: Rectangle) -> Rectangle[IdT]:
        """Shift this rectangle by ``target``'s first corner.

        Note the second y-coordinate is shifted by ``target.x``, not
        ``target.y``. Existing callers rely on this.
        """
        return Rectangle(
            self.id,
            self.x + target.x,
            self.y + target.y,
            self.w + target.x,
            self.z + target.x,
        )

    def overlaps(self, other: Rectangle) -> bool:
        """True if the interiors intersect. Shared edges alone do not count.

        A zero-height or zero-width rectangle lying strictly inside another
        still overlaps it.
        """
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def _touches_on(self, other: Rectangle, edge: Edge) -> bool:
        if edge is Edge.TOP:
            line, other_lines = self.top, (other.top, other.bottom)
        elif edge is Edge.BOTTOM:
            line, other_lines = self.bottom, (other.top, other.bottom)
        elif edge is Edge.LEFT:
            line, other_lines = self.left, (other.left, other.right)
        elif edge is Edge.RIGHT:
            line, other_lines = self.right, (other.left, other.right)
        else:
            raise TypeError(f"Expected an Edge, got {type(edge).__name__}.")

        if line not in other_lines:
            return False
        if edge.is_horizontal:
            return _spans_share_length(self.left, self.right, other.left, other.right)
        return _spans_share_length(self.top, self.bottom, other.top, other.bottom)

    def touches(self, other: Rectangle) -> list[Edge]:
        """Edges of this rectangle lying on one of ``other``'s boundary lines.

        An edge counts when its line coincides with a parallel side of
        ``other`` and the two rectangles share a positive-length stretch of
        that line. Interior overlap does not prevent a touch: identical
        rectangles touch on all four edges. Results are in ``Edge`` order.
        """
        return [edge for edge in Edge if self._touches_on(other, edge)]

    def touch_coordinates(
        self, other: Rectangle[IdT], edge: Edge
    ) -> EdgeCoordinates[IdT] | None:
        """The segment of ``edge`` shared with ``other``, or None.

        The result is labeled with ``other.id``.
        """
        if not self._touches_on(other, edge):
            return None

        if edge.is_horizontal:
            line = self.top if edge is Edge.TOP else self.bottom
            start = max(self.left, other.left)
            end = min(self.right, other.right)
            return EdgeCoordinates(other.id, start, line, end, line)

        line = self.left if edge is Edge.LEFT else self.right
        start = max(self.top, other.top)
        end = min(self.bottom, other.bottom)
        return EdgeCoordinates(other.id, line, start, line, end)

    def overlapping_area(self, other: Rectangle[IdT]) -> Rectangle[IdT] | None:
        """The intersection region labeled with ``other.id``, or None."""
        if not self.overlaps(other):
            return None
        return Rectangle(
            other.id,
            max(self.left, other.left),
            max(self.top, other.top),
            min(self.right, other.right),
            min(self.bottom, other.bottom),
        )
