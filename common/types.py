"""
Value Types for the ISEA Projection.

This module defines the immutable dataclasses exchanged between the
projection engine and its callers: geographic coordinates on the sphere,
planar coordinates on a face of the icosahedron, and lat/lon bounding
boxes.

Design Rationale
----------------
Using typed dataclasses instead of raw tuples provides:
1. Self-documenting code - field names describe the data
2. Runtime validation of ranges at construction
3. Clear unit expectations in docstrings
4. Hashable, immutable values that are safe to share between threads
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from common.exceptions import InvalidFaceError
from common.units import AngleLike, as_degrees

NUMBER_OF_FACES = 20

# Latitudes beyond +-90 by less than this are rounding noise and get clamped
_LATITUDE_SLACK = 1e-9


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude into [-180, 180].

    Values already inside the range are returned unchanged.
    """
    if -180.0 <= lon <= 180.0:
        return lon
    return (lon + 180.0) % 360.0 - 180.0


@dataclass(frozen=True)
class GeoCoordinate:
    """A geographic coordinate on the sphere.

    Attributes
    ----------
    lat : float
        Latitude in DEGREES. Range: [-90, 90].
    lon : float
        Longitude in DEGREES. Normalized to [-180, 180].

    Notes
    -----
    - Latitude is positive north, negative south.
    - Longitude is positive east, negative west.
    - Degrees are the convention of the whole engine; use `to_radians()`
      or `from_radians()` at the boundary to radian-based code.

    Examples
    --------
    >>> c = GeoCoordinate(lat=52.5, lon=190.0)
    >>> c.lon
    -170.0
    """
    lat: float  # degrees
    lon: float  # degrees

    def __post_init__(self):
        """Validate latitude and normalize longitude."""
        lat = float(self.lat)
        if not -90.0 - _LATITUDE_SLACK <= lat <= 90.0 + _LATITUDE_SLACK:
            raise ValueError(
                f"Latitude {self.lat} out of range [-90, 90]. "
                f"Did you pass radians or swap lat and lon?"
            )
        object.__setattr__(self, "lat", min(90.0, max(-90.0, lat)))
        object.__setattr__(self, "lon", normalize_longitude(float(self.lon)))

    def to_radians(self) -> Tuple[float, float]:
        """Convert to radians.

        Returns
        -------
        Tuple[float, float]
            (latitude_radians, longitude_radians)
        """
        return float(np.radians(self.lat)), float(np.radians(self.lon))

    @classmethod
    def from_radians(cls, lat_rad: float, lon_rad: float) -> 'GeoCoordinate':
        """Create coordinate from radians."""
        return cls(lat=float(np.degrees(lat_rad)), lon=float(np.degrees(lon_rad)))

    @classmethod
    def from_quantities(cls, lat: AngleLike, lon: AngleLike) -> 'GeoCoordinate':
        """Create coordinate from pint angle quantities (or bare degrees).

        Parameters
        ----------
        lat, lon : float or pint.Quantity
            Latitude and longitude.

        Returns
        -------
        GeoCoordinate
            Coordinate in degrees.
        """
        return cls(lat=as_degrees(lat), lon=as_degrees(lon))


@dataclass(frozen=True)
class FaceCoordinate:
    """A planar coordinate on one face of the icosahedron.

    Attributes
    ----------
    face : int
        Face index in [0, 19].
    x : float
        Easting relative to the face center, in the linear unit of the
        sphere radius (KILOMETRES by default).
    y : float
        Northing relative to the face center, same unit as `x`.
    """
    face: int
    x: float
    y: float

    def __post_init__(self):
        if not 0 <= self.face < NUMBER_OF_FACES:
            raise InvalidFaceError(self.face, NUMBER_OF_FACES)

    @property
    def rho(self) -> float:
        """Distance from the face center."""
        return float(np.hypot(self.x, self.y))


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned lat/lon rectangle in degrees.

    Attributes
    ----------
    lat_min, lat_max : float
        Latitude range, lat_min <= lat_max.
    lon_min, lon_max : float
        Longitude range, lon_min <= lon_max (boxes crossing the
        antimeridian are represented as two boxes).
    """
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    @property
    def is_global(self) -> bool:
        """Whether the box covers the whole sphere."""
        return (
            self.lat_min <= -90.0 and self.lat_max >= 90.0
            and self.lon_min <= -180.0 and self.lon_max >= 180.0
        )

    def contains(self, c: GeoCoordinate, tolerance: float = 0.0) -> bool:
        """Check whether a coordinate lies inside the box.

        Parameters
        ----------
        c : GeoCoordinate
            The coordinate to test.
        tolerance : float
            Slack in degrees applied to every side.

        Returns
        -------
        bool
            True if the coordinate is inside (boundary included).
        """
        if not self.lat_min - tolerance <= c.lat <= self.lat_max + tolerance:
            return False
        if self.lon_min <= -180.0 and self.lon_max >= 180.0:
            return True
        # -180 and 180 are the same meridian
        lons = (-180.0, 180.0) if abs(c.lon) == 180.0 else (c.lon,)
        return any(self.lon_min - tolerance <= lon <= self.lon_max + tolerance for lon in lons)


FULL_SPHERE = BoundingBox(-90.0, 90.0, -180.0, 180.0)
