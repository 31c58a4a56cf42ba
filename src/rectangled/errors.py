"""Validation errors for rectangles.

These are returned by ``Rectangle.validate()`` rather than raised, so callers
can decide whether to reject, report or ignore a malformed rectangle.
"""

from __future__ import annotations


class RectangleValidationError(ValueError):
    """Base class for the ways a rectangle can fail validation."""


class ZeroAreaError(RectangleValidationError):
    """The rectangle has zero width or zero height."""


class BadPointsError(RectangleValidationError):
    """The corners were given backwards (x > w or y > z)."""
