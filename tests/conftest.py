"""Pytest configuration and shared fixtures."""

import random

import pytest

from accessible_colors.models.color import BLACK, DARK_BACKGROUND, WHITE, RGBColor


@pytest.fixture
def white() -> RGBColor:
    return WHITE


@pytest.fixture
def black() -> RGBColor:
    return BLACK


@pytest.fixture
def dark_background() -> RGBColor:
    """Background used by dark-mode ramps."""
    return DARK_BACKGROUND


@pytest.fixture
def accent_blue() -> RGBColor:
    """A saturated mid-lightness blue that fails 4.5:1 on the dark background."""
    return RGBColor(0, 120, 215)


@pytest.fixture
def random_colors() -> list[RGBColor]:
    """1000 reproducible random colors."""
    rnd = random.Random(0)  # Fixed seed for reproducibility
    return [RGBColor(rnd.randrange(256), rnd.randrange(256), rnd.randrange(256)) for _ in range(1000)]


def color_distance(c1: RGBColor, c2: RGBColor) -> float:
    """Euclidean distance in 8-bit RGB; rough, but enough for assertions."""
    return ((c1.red - c2.red) ** 2 + (c1.green - c2.green) ** 2 + (c1.blue - c2.blue) ** 2) ** 0.5


@pytest.fixture
def distance():
    return color_distance
