"""Shared fixtures for distance tests."""

import numpy as np
import pytest

from common.types import Coordinate


@pytest.fixture
def flinders_peak():
    """Start point of the Geoscience Australia Vincenty test case."""
    return Coordinate(-37.57037203, 144.25295244)


@pytest.fixture
def buninyong():
    """End point of the Geoscience Australia Vincenty test case."""
    return Coordinate(-37.39101561, 143.55353839)


@pytest.fixture
def random_pairs():
    """Reproducible point pairs well away from antipodal configurations."""
    rng = np.random.default_rng(20240917)
    lats = rng.uniform(-70, 70, size=(40, 2))
    lons = rng.uniform(-60, 60, size=(40, 2))
    return [
        (Coordinate(float(lats[i, 0]), float(lons[i, 0])),
         Coordinate(float(lats[i, 1]), float(lons[i, 1])))
        for i in range(len(lats))
    ]
