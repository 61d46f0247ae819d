"""
Orientation of the Icosahedron Relative to the Sphere.

By default one vertex of the icosahedron points to the north pole and one
to the south pole. An orientation ``(lat, lon)`` rotates every location by
``lon`` in the direction of positive longitude, then by ``lat`` in the
direction of positive latitude. The projection formulas always work in the
rotated ("canonical") frame; this module moves coordinates and lat/lon
bounding boxes into and out of it.

Notes
-----
The bounding-box transform is conservative rather than tight: the returned
boxes always contain the rotated corners and edge midpoints of the input
box, and are widened to a full polar cap when a pole may lie inside. The
pole test combines a sign-change heuristic on the rotated latitude at the
most central longitude, which may report a pole that is not there, with an
exact test on the pre-image of each pole. Rotated longitudes are sampled
along the box perimeter and unwrapped, so a box that ends up across the
canonical antimeridian is returned as two boxes.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from common.types import FULL_SPHERE, BoundingBox, GeoCoordinate
from geospatial import trigonometric as trig

# points per box edge when sampling the perimeter; odd so the midpoint is one
_EDGE_SAMPLES = 33


@dataclass(frozen=True)
class Orientation:
    """Rotation of the icosahedron, in degrees.

    Attributes
    ----------
    lat : float
        Rotation towards positive latitude, applied second.
    lon : float
        Rotation towards positive longitude, applied first.
    """
    lat: float = 0.0
    lon: float = 0.0

    @property
    def is_identity(self) -> bool:
        return self.lat == 0 and self.lon == 0

    @classmethod
    def symmetric_equator(cls, E: float, F: float) -> 'Orientation':
        """Orientation mapping both poles to edge midpoints.

        The equator is then mapped symmetrically onto the icosahedron.
        """
        return cls(lat=(E + F) / 2., lon=-11.25)


DEFAULT_ORIENTATION = Orientation()


def change_orientation(c: GeoCoordinate, orientation: Orientation) -> GeoCoordinate:
    """Rotate a geographic coordinate into the canonical frame.

    Parameters
    ----------
    c : GeoCoordinate
        Geographic coordinate.
    orientation : Orientation
        Orientation of the icosahedron.

    Returns
    -------
    GeoCoordinate
        The coordinate in the frame of the icosahedron. The input object
        itself when the orientation is the identity.
    """
    if orientation.is_identity:
        return c
    sin_o = trig.sin(orientation.lat)
    cos_o = trig.cos(orientation.lat)
    sin_lat1 = trig.sin(c.lat)
    cos_lat1 = trig.cos(c.lat)
    lon1 = c.lon + orientation.lon
    sin_lon1 = trig.sin(lon1)
    cos_lon1 = trig.cos(lon1)
    lat2 = trig.asin(sin_lat1 * cos_o + cos_lon1 * cos_lat1 * sin_o)
    lon2 = trig.atan2(sin_lon1 * cos_lat1, cos_lon1 * cos_lat1 * cos_o - sin_lat1 * sin_o)
    return GeoCoordinate(float(lat2), float(lon2))


def revert_orientation(c: GeoCoordinate, orientation: Orientation) -> GeoCoordinate:
    """Rotate a canonical coordinate back to geographic coordinates.

    Exact inverse of `change_orientation`: the latitude rotation is undone
    first, then the longitude offset.
    """
    if orientation.is_identity:
        return c
    sin_o = trig.sin(-orientation.lat)
    cos_o = trig.cos(orientation.lat)
    sin_lat1 = trig.sin(c.lat)
    cos_lat1 = trig.cos(c.lat)
    sin_lon1 = trig.sin(c.lon)
    cos_lon1 = trig.cos(c.lon)
    lat2 = trig.asin(sin_lat1 * cos_o + cos_lon1 * cos_lat1 * sin_o)
    lon2 = trig.atan2(sin_lon1 * cos_lat1, cos_lon1 * cos_lat1 * cos_o - sin_lat1 * sin_o)
    return GeoCoordinate(float(lat2), float(lon2) - orientation.lon)


def _rotated_sin_latitude(lat: float, lon: float, orientation: Orientation) -> float:
    """Sine of the rotated latitude of (lat, lon)."""
    return float(
        trig.sin(lat) * trig.cos(orientation.lat)
        + trig.cos(lon + orientation.lon) * trig.cos(lat) * trig.sin(orientation.lat)
    )


def _pole_preimage_inside(
    pole_lat: float,
    lat0: float,
    lat1: float,
    lon0: float,
    lon1: float,
    orientation: Orientation
) -> bool:
    """Whether the canonical pole at `pole_lat` comes from inside the box."""
    p = revert_orientation(GeoCoordinate(pole_lat, 0.0), orientation)
    if not lat0 <= p.lat <= lat1:
        return False
    # at a geographic pole every longitude is inside
    return abs(p.lat) == 90.0 or lon0 <= p.lon <= lon1


def _perimeter(lat0: float, lat1: float, lon0: float, lon1: float) -> List[GeoCoordinate]:
    """Closed walk around the box: south edge, east edge, north edge, west edge.

    Every edge holds its end points and its midpoint.
    """
    lons = np.linspace(lon0, lon1, _EDGE_SAMPLES)
    lats = np.linspace(lat0, lat1, _EDGE_SAMPLES)
    walk = (
        [(lat0, lon) for lon in lons]
        + [(lat, lon1) for lat in lats[1:]]
        + [(lat1, lon) for lon in lons[-2::-1]]
        + [(lat, lon0) for lat in lats[-2:0:-1]]
    )
    return [GeoCoordinate(float(lat), float(lon)) for lat, lon in walk]


def _longitude_boxes(lat_min: float, lat_max: float, lons: List[float]) -> List[BoundingBox]:
    """Boxes covering a connected run of rotated longitudes.

    The longitudes are unwrapped along the walk, so a run crossing the
    antimeridian yields two boxes instead of the complement of its range.
    """
    unwrapped = np.unwrap(np.asarray(lons), period=360.0)
    lo = float(unwrapped.min())
    hi = float(unwrapped.max())
    if hi - lo >= 360:
        return [BoundingBox(lat_min, lat_max, -180.0, 180.0)]
    shift = 360.0 * np.floor((lo + 180.0) / 360.0)
    lo -= shift
    hi -= shift
    if hi <= 180:
        return [BoundingBox(lat_min, lat_max, lo, hi)]
    return [
        BoundingBox(lat_min, lat_max, lo, 180.0),
        BoundingBox(lat_min, lat_max, -180.0, hi - 360.0),
    ]


def _change_orientation_single(
    lat0: float,
    lat1: float,
    lon0: float,
    lon1: float,
    orientation: Orientation
) -> List[BoundingBox]:
    """Rotate a box that does not cross the antimeridian."""
    if lon1 - lon0 >= 360 and lat1 - lat0 >= 180:
        return [FULL_SPHERE]

    corners = [
        change_orientation(GeoCoordinate(lat, lon), orientation)
        for lat, lon in ((lat0, lon0), (lat1, lon0), (lat0, lon1), (lat1, lon1))
    ]
    points = [change_orientation(c, orientation) for c in _perimeter(lat0, lat1, lon0, lon1)]

    lat_min = min(p.lat for p in points)
    lat_max = max(p.lat for p in points)

    # sign-change test at the most central longitude of the rotated corners
    corner_lon_min = min(p.lon for p in corners)
    corner_lon_max = max(p.lon for p in corners)
    lon_most_central = 0.0
    if corner_lon_min * corner_lon_max > 0:
        lon_most_central = min(abs(corner_lon_min), abs(corner_lon_max))
    s0 = _rotated_sin_latitude(lat0, lon_most_central, orientation)
    s1 = _rotated_sin_latitude(lat1, lon_most_central, orientation)
    exceeds_north = s0 < 0 < s1
    exceeds_south = s1 < 0 < s0

    exceeds_north = exceeds_north or _pole_preimage_inside(90.0, lat0, lat1, lon0, lon1, orientation)
    exceeds_south = exceeds_south or _pole_preimage_inside(-90.0, lat0, lat1, lon0, lon1, orientation)

    if exceeds_north and exceeds_south:
        return [FULL_SPHERE]
    if exceeds_north:
        return [BoundingBox(lat_min, 90.0, -180.0, 180.0)]
    if exceeds_south:
        return [BoundingBox(-90.0, lat_max, -180.0, 180.0)]
    return _longitude_boxes(lat_min, lat_max, [p.lon for p in points])


def change_orientation_bbox(
    lat0: float,
    lat1: float,
    lon0: float,
    lon1: float,
    orientation: Orientation
) -> List[BoundingBox]:
    """Rotate a lat/lon bounding box into the canonical frame.

    Parameters
    ----------
    lat0, lat1 : float
        Latitude range in degrees, lat0 <= lat1.
    lon0, lon1 : float
        Longitude range in degrees. ``lon0 > lon1`` denotes a box crossing
        the antimeridian.
    orientation : Orientation
        Orientation of the icosahedron.

    Returns
    -------
    List[BoundingBox]
        Boxes whose union covers the rotated input. An input crossing the
        antimeridian is first split into ``[lon0, 180]`` and
        ``[-180, lon1]``; a rotated part crossing the canonical
        antimeridian is split again.
    """
    if lon0 <= lon1:
        return _change_orientation_single(lat0, lat1, lon0, lon1, orientation)
    return (
        _change_orientation_single(lat0, lat1, lon0, 180.0, orientation)
        + _change_orientation_single(lat0, lat1, -180.0, lon1, orientation)
    )
