"""
Faces of the Icosahedron.

Face bookkeeping shared by the forward and inverse projections:

- `Face`: one face bound to one point, with lazily computed trigonometric
  quantities (each evaluated at most once per instance);
- `select_face`: which of the twenty faces a canonical coordinate
  belongs to;
- face parity and the lat/lon extent of each face.

Face Layout
-----------
Faces 0-4 surround the north pole, 5-9 and 10-14 form the equatorial
belt, 15-19 surround the south pole. Faces 0-4 and 10-14 are upright
triangles, 5-9 and 15-19 are inverted.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Sequence, Union

from common.exceptions import InvalidFaceError
from common.types import NUMBER_OF_FACES, FaceCoordinate, GeoCoordinate
from geospatial import trigonometric as trig
from geospatial.isea_constants import LON_STEP, ISEAConstants

# Candidate belt faces per 36-degree longitude sector, starting at -180
_BELT_SECTOR_FACES = (
    (5, 14), (5, 10), (6, 10), (6, 11), (7, 11),
    (7, 12), (8, 12), (8, 13), (9, 13), (9, 14),
)
_NORTH_CAP_BOUNDARIES = (-108, -36, 36, 108)
_NORTH_CAP_FACES = (0, 1, 2, 3, 4)
_SOUTH_CAP_BOUNDARIES = (-144, -72, 0, 72, 144)
_SOUTH_CAP_FACES = (19, 15, 16, 17, 18, 19)
_BELT_BOUNDARIES = (-144, -108, -72, -36, 0, 36, 72, 108, 144)


def validate_face(face: int) -> int:
    """Return `face` if it is a valid face index.

    Raises
    ------
    InvalidFaceError
        If the index is outside [0, 19].
    """
    if not 0 <= face < NUMBER_OF_FACES:
        raise InvalidFaceError(face, NUMBER_OF_FACES)
    return face


def face_orientation(face: Union[int, FaceCoordinate]) -> int:
    """Orientation of a face.

    Parameters
    ----------
    face : int or FaceCoordinate
        Face index, or a coordinate on the face.

    Returns
    -------
    int
        1 for upright faces, -1 for inverted ones.
    """
    if isinstance(face, FaceCoordinate):
        face = face.face
    validate_face(face)
    return 1 if face <= 4 or 10 <= face <= 14 else -1


@dataclass(frozen=True)
class Face:
    """A face of the icosahedron bound to one point.

    Attributes
    ----------
    face : int
        Face index.
    c : GeoCoordinate
        The point, in the canonical frame.
    lat0, lon0 : float
        Center of the face in degrees.
    """
    face: int
    c: GeoCoordinate
    lat0: float
    lon0: float

    @classmethod
    def of(cls, face: int, c: GeoCoordinate, constants: ISEAConstants) -> 'Face':
        validate_face(face)
        return cls(face, c, constants.lats[face], constants.lons[face])

    @cached_property
    def z(self) -> float:
        """Great-circle distance from the face center to the point, in degrees."""
        return float(trig.acos(
            self.sin_lat0 * self.sin_lat + self.cos_lat0 * self.cos_lat * self.cos_lon_lon0
        ))

    @cached_property
    def sin_lat(self) -> float:
        return float(trig.sin(self.c.lat))

    @cached_property
    def cos_lat(self) -> float:
        return float(trig.cos(self.c.lat))

    @cached_property
    def sin_lat0(self) -> float:
        return float(trig.sin(self.lat0))

    @cached_property
    def cos_lat0(self) -> float:
        return float(trig.cos(self.lat0))

    @cached_property
    def sin_lon_lon0(self) -> float:
        return float(trig.sin(self.c.lon - self.lon0))

    @cached_property
    def cos_lon_lon0(self) -> float:
        return float(trig.cos(self.c.lon - self.lon0))


def _pick(lon: float, boundaries: Sequence[float], faces: Sequence[int]) -> int:
    for boundary, face in zip(boundaries, faces):
        if lon < boundary:
            return face
    return faces[len(boundaries)]


def _nearest(c: GeoCoordinate, candidates: Sequence[int], constants: ISEAConstants) -> Face:
    """The candidate face whose center is closest to `c` (first wins ties)."""
    best = None
    for face in candidates:
        f = Face.of(face, c, constants)
        if best is None or f.z < best.z:
            best = f
    return best


def select_face_of(c: GeoCoordinate, constants: ISEAConstants) -> Face:
    """Select the face containing a canonical coordinate.

    Parameters
    ----------
    c : GeoCoordinate
        Coordinate in the canonical frame of the icosahedron.
    constants : ISEAConstants
        Projection constants.

    Returns
    -------
    Face
        The containing face, bound to `c`.

    Notes
    -----
    Above ``E - F`` (and below ``-(E - F)``) the faces around the pole are
    separated by meridians, so longitude alone decides. In the belt each
    36-degree sector touches two belt faces; the cap faces above and below
    the sector reach into the belt near their base edges, so they compete
    as well, and the face with the nearest center wins.
    """
    north = _pick(c.lon, _NORTH_CAP_BOUNDARIES, _NORTH_CAP_FACES)
    south = _pick(c.lon, _SOUTH_CAP_BOUNDARIES, _SOUTH_CAP_FACES)
    if c.lat > constants.EF:
        return Face.of(north, c, constants)
    if c.lat < -constants.EF:
        return Face.of(south, c, constants)
    belt = _pick(c.lon, _BELT_BOUNDARIES, _BELT_SECTOR_FACES)
    return _nearest(c, belt + (north, south), constants)


def select_face(c: GeoCoordinate, constants: ISEAConstants) -> int:
    """Index of the face containing a canonical coordinate."""
    return select_face_of(c, constants).face


def lat_min(face: int, constants: ISEAConstants) -> float:
    """Minimum latitude of a face, in the canonical frame."""
    d = face_orientation(face)
    return _lat_far(face, d, constants) if d > 0 else _lat_near(face, d, constants)


def lat_max(face: int, constants: ISEAConstants) -> float:
    """Maximum latitude of a face, in the canonical frame."""
    d = face_orientation(face)
    return _lat_near(face, d, constants) if d > 0 else _lat_far(face, d, constants)


def _lat_far(face: int, upright: int, constants: ISEAConstants) -> float:
    # latitude of the base edge's vertices
    return constants.lats[face] - upright * (constants.E + constants.F - constants.g)


def _lat_near(face: int, upright: int, constants: ISEAConstants) -> float:
    # latitude of the apex
    lat = constants.lats[face] + upright * constants.g
    return min(90.0, max(-90.0, lat))


def lon_min(face: int, constants: ISEAConstants) -> float:
    """Minimum longitude of a face, wrapped into [-180, 180]."""
    lon = constants.lons[validate_face(face)] - LON_STEP
    if lon < -180:
        lon += 360
    return float(lon)


def lon_max(face: int, constants: ISEAConstants) -> float:
    """Maximum longitude of a face, wrapped into [-180, 180].

    For face 19 (centered on the antimeridian) this is smaller than
    `lon_min`.
    """
    lon = constants.lons[validate_face(face)] + LON_STEP
    if lon > 180:
        lon -= 360
    return float(lon)
