"""Apply the pairwise predicates across a small collection of rectangles.

This is brute force over every pair, vectorized with numpy. It gives the
same answers as calling ``Rectangle.overlaps`` on each pair.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .geometry import IdT, Rectangle


def corners_array(rects: Sequence[Rectangle]) -> np.ndarray:
    """Normalized ``(left, top, right, bottom)`` rows, one per rectangle."""
    if len(rects) == 0:
        return np.empty((0, 4), dtype=np.int64)
    return np.array(
        [(r.left, r.top, r.right, r.bottom) for r in rects],
        dtype=np.int64,
    )


def overlap_matrix(rects: Sequence[Rectangle]) -> np.ndarray:
    """Boolean ``(n, n)`` matrix where ``[i, j]`` is ``rects[i].overlaps(rects[j])``.

    The matrix is symmetric. The diagonal is False for zero-area rectangles,
    but a zero-height or zero-width rectangle lying strictly inside a
    different box still overlaps it off the diagonal.
    """
    corners = corners_array(rects)
    left, top, right, bottom = (corners[:, i] for i in range(4))
    # Broadcast row i against column j
    horizontal = (left[:, None] < right[None, :]) & (left[None, :] < right[:, None])
    vertical = (top[:, None] < bottom[None, :]) & (top[None, :] < bottom[:, None])
    return horizontal & vertical


def overlapping_pairs(rects: Sequence[Rectangle[IdT]]) -> list[tuple[IdT, IdT]]:
    """Ids of every overlapping pair ``(rects[i].id, rects[j].id)`` with ``i < j``."""
    rows, cols = np.nonzero(np.triu(overlap_matrix(rects), k=1))
    return [(rects[i].id, rects[j].id) for i, j in zip(rows.tolist(), cols.tolist())]
