"""Shared test fixtures for rectangled."""

import pytest

from rectangled import Rectangle


@pytest.fixture
def square():
    """10x10 square at the origin."""
    return Rectangle("square", 0, 0, 10, 10)


@pytest.fixture
def flipped_square():
    """The same square with its corners given backwards."""
    return Rectangle("flipped", 10, 10, 0, 0)


@pytest.fixture
def scattered():
    """A few rectangles: two overlapping, one adjacent, one far away."""
    return [
        Rectangle("a", 0, 0, 10, 10),
        Rectangle("b", 5, 5, 15, 15),
        Rectangle("c", 10, 0, 20, 5),
        Rectangle("d", 100, 100, 110, 110),
    ]
