"""
conftest.py: Shared pytest fixtures for the ISEA projection test suite
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure repository root is on sys.path so tests can import the packages.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from common.types import GeoCoordinate
from geospatial.projections import ISEAProjection


def angular_difference(a, b):
    """Signed difference a - b of two longitudes, wrapped into [-180, 180)."""
    return (a - b + 180.0) % 360.0 - 180.0


@pytest.fixture
def projection():
    """Projection with the default orientation (vertices at the poles)."""
    return ISEAProjection()


@pytest.fixture
def symmetric_projection():
    """Projection with both poles on edge midpoints."""
    p = ISEAProjection()
    p.set_orientation_symmetric_equator()
    return p


@pytest.fixture
def oriented_projection():
    """Projection with an arbitrary orientation."""
    p = ISEAProjection()
    p.set_orientation(23.5, -47.25)
    return p


@pytest.fixture(params=["default", "symmetric", "oriented"])
def any_projection(request, projection, symmetric_projection, oriented_projection):
    return {
        "default": projection,
        "symmetric": symmetric_projection,
        "oriented": oriented_projection,
    }[request.param]


@pytest.fixture
def global_points():
    """Grid of geographic coordinates away from the poles."""
    return [
        GeoCoordinate(float(lat), float(lon))
        for lat in np.arange(-85.0, 86.0, 10.0)
        for lon in np.arange(-175.0, 180.0, 15.0)
    ]
