"""
Icosahedral Snyder Equal-Area (ISEA) Projection.

This module provides the projection facade: a sphere is projected onto the
twenty faces of a circumscribed icosahedron such that areas are preserved.
Angles and distances are slightly distorted: the angular distortion stays
below 17.27 degrees, the scale variation below 16.3 per cent.

Scientific Context
------------------
Domain: Cartography, discrete global grid systems
Model: Equal-area polyhedral projection (Snyder 1992)

Why Projection Awareness Matters
--------------------------------
1. No flat map can perfectly represent a curved surface.
2. Grid systems built on the icosahedron need cells of equal area, so
   the projection must be equal-area; shapes are distorted instead.
3. The distortion can be measured with Tissot's indicatrix, which this
   module computes numerically for any point.

Thread Safety
-------------
All projection methods only read the instance. The orientation is the only
mutable state: `set_orientation` replaces it with a new immutable value and
must not run concurrently with projection calls.

References
----------
- Snyder, J.P. (1992). An equal-area map projection for polyhedral globes.
  Cartographica, 29(1), 10-21. doi:10.3138/27H7-8K88-4882-1752
- Harrison, E., Mahdavi-Amiri, A., Samavati, F. (2012). Analysis of inverse
  Snyder optimizations. Transactions on Computational Science XVI,
  134-148. doi:10.1007/978-3-642-32663-9_8
- Tissot, A. (1859). Mémoire sur la représentation des surfaces.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from common.logging_config import get_logger
from common.types import NUMBER_OF_FACES, BoundingBox, FaceCoordinate, GeoCoordinate
from common.units import AngleLike, LengthLike, Q_, as_degrees, as_kilometres
from geospatial import faces, snyder
from geospatial.coordinate_models import EllipsoidParameters, WGS84Ellipsoid
from geospatial.isea_constants import ISEAConstants
from geospatial.orientation import (
    DEFAULT_ORIENTATION,
    Orientation,
    change_orientation,
    change_orientation_bbox,
    revert_orientation,
)

logger = get_logger(__name__)


def authalic_radius_km(ellipsoid: EllipsoidParameters = WGS84Ellipsoid) -> float:
    """Authalic radius of an ellipsoid, in kilometres."""
    return as_kilometres(Q_(ellipsoid.authalic_radius, "m"))


class ISEAProjection:
    """Icosahedral Snyder Equal-Area projection.

    Parameters
    ----------
    radius : float or pint.Quantity, optional
        Radius of the projected sphere. Bare numbers are kilometres.
        Defaults to the authalic radius of WGS84 (about 6371.0072 km).
    precision : float
        Convergence threshold, in degrees, of the iterative inverse.
    max_iterations : int
        Iteration cap of the iterative inverse.
    orientation : Orientation, optional
        Initial orientation of the icosahedron. Defaults to vertices at
        the poles.

    Examples
    --------
    >>> p = ISEAProjection()
    >>> fc = p.sphere_to_icosahedron(GeoCoordinate(48.86, 2.35))
    >>> c = p.icosahedron_to_sphere(fc)
    """

    def __init__(
        self,
        radius: Optional[LengthLike] = None,
        precision: float = snyder.DEFAULT_PRECISION,
        max_iterations: int = snyder.DEFAULT_MAX_ITERATIONS,
        orientation: Orientation = DEFAULT_ORIENTATION
    ):
        if radius is None:
            radius = authalic_radius_km()
        if not precision > 0:
            raise ValueError(f"Precision must be positive, got {precision}")
        if max_iterations < 1:
            raise ValueError(f"At least one iteration is required, got {max_iterations}")
        self._constants = ISEAConstants.from_radius(as_kilometres(radius))
        self._precision = precision
        self._max_iterations = max_iterations
        self._orientation = orientation

    @classmethod
    def from_ellipsoid(cls, name: str, **kwargs) -> 'ISEAProjection':
        """Projection on the authalic sphere of a named ellipsoid.

        Parameters
        ----------
        name : str
            PROJ ellipsoid identifier, e.g. "WGS84" or "GRS80".
        **kwargs
            Further arguments for the constructor.
        """
        ellipsoid = EllipsoidParameters.from_name(name)
        return cls(radius=authalic_radius_km(ellipsoid), **kwargs)

    # =========================================================================
    # Description
    # =========================================================================

    @property
    def name(self) -> str:
        return "Icosahedral Snyder Equal-Area (ISEA)"

    @property
    def preserves_angles(self) -> bool:
        return False

    @property
    def preserves_area(self) -> bool:
        return True

    @property
    def constants(self) -> ISEAConstants:
        return self._constants

    @property
    def radius(self) -> float:
        """Radius of the projected sphere, in kilometres."""
        return self._constants.radius

    @property
    def number_of_faces(self) -> int:
        return NUMBER_OF_FACES

    @property
    def maximum_angular_distortion(self) -> float:
        """Maximum angular distortion, in degrees."""
        return self._constants.max_angular_distortion

    @property
    def maximum_scale_variation(self) -> float:
        return self._constants.max_scale_variation

    @property
    def minimum_scale_variation(self) -> float:
        return self._constants.min_scale_variation

    @property
    def length_of_triangle_base(self) -> float:
        """Length of the edges of the face triangles, in kilometres."""
        return 2 * self._constants.half_base

    # =========================================================================
    # Orientation
    # =========================================================================

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def orientation_lat(self) -> float:
        return self._orientation.lat

    @property
    def orientation_lon(self) -> float:
        return self._orientation.lon

    def set_orientation(self, orientation_lat: AngleLike, orientation_lon: AngleLike) -> None:
        """Set the orientation of the icosahedron.

        The orientation is relative to the default one (vertices at the
        poles): every location is shifted by `orientation_lon` towards
        positive longitude, thereafter by `orientation_lat` towards positive
        latitude.

        Parameters
        ----------
        orientation_lat, orientation_lon : float or pint.Quantity
            Angles, bare numbers in degrees.
        """
        self._orientation = Orientation(as_degrees(orientation_lat), as_degrees(orientation_lon))
        logger.debug(f"Orientation set to {self._orientation}")

    def set_orientation_symmetric_equator(self) -> None:
        """Map both poles to edge midpoints of the icosahedron.

        The equator is then mapped symmetrically.
        """
        o = Orientation.symmetric_equator(self._constants.E, self._constants.F)
        self.set_orientation(o.lat, o.lon)

    def change_orientation(self, c: GeoCoordinate) -> GeoCoordinate:
        """Rotate geographic coordinates into the frame of the icosahedron."""
        return change_orientation(c, self._orientation)

    def revert_orientation(self, c: GeoCoordinate) -> GeoCoordinate:
        """Inverse of `change_orientation`."""
        return revert_orientation(c, self._orientation)

    def change_orientation_bbox(
        self,
        lat0: float,
        lat1: float,
        lon0: float,
        lon1: float
    ) -> List[BoundingBox]:
        """Rotate a lat/lon bounding box into the frame of the icosahedron.

        See `geospatial.orientation.change_orientation_bbox`.
        """
        return change_orientation_bbox(lat0, lat1, lon0, lon1, self._orientation)

    # =========================================================================
    # Projection
    # =========================================================================

    def sphere_to_icosahedron(self, c: GeoCoordinate) -> FaceCoordinate:
        """Project geographic coordinates onto the icosahedron.

        Parameters
        ----------
        c : GeoCoordinate
            Geographic coordinate.

        Returns
        -------
        FaceCoordinate
            Face containing the point and the planar coordinate on it.
        """
        c = self.change_orientation(c)
        face = faces.select_face_of(c, self._constants)
        return snyder.forward(face, self._constants)

    def sphere_to_face(self, c: GeoCoordinate) -> int:
        """Index of the face that geographic coordinates belong to."""
        return faces.select_face(self.change_orientation(c), self._constants)

    def sphere_to_face_plane(self, face: int, c: GeoCoordinate) -> FaceCoordinate:
        """Project geographic coordinates onto the plane of a given face.

        CAUTION: the result may lie outside the face triangle, on its plane
        only. If `face` is the face the point belongs to, the result equals
        `sphere_to_icosahedron(c)`. Useful for computing the overlap of
        bounding boxes or areas with a face.
        """
        return self.sphere_to_face_plane_canonical(face, self.change_orientation(c))

    def sphere_to_face_plane_canonical(self, face: int, c: GeoCoordinate) -> FaceCoordinate:
        """Same as `sphere_to_face_plane` for coordinates already in the
        frame of the icosahedron."""
        return snyder.forward(faces.Face.of(face, c, self._constants), self._constants)

    def icosahedron_to_sphere(self, c: FaceCoordinate) -> GeoCoordinate:
        """Map coordinates on the icosahedron back to geographic coordinates.

        Raises
        ------
        ConvergenceError
            If the iterative inverse fails.
        ProjectionError
            If the planar point is not the image of any point.
        """
        c2 = snyder.inverse(c, self._constants, self._precision, self._max_iterations)
        return self.revert_orientation(c2)

    # =========================================================================
    # Faces
    # =========================================================================

    def face_orientation(self, face: Union[int, FaceCoordinate]) -> int:
        """1 for upright faces, -1 for inverted faces."""
        return faces.face_orientation(face)

    def get_lat(self, face: int) -> float:
        """Latitude of the center of a face."""
        return self._constants.lats[faces.validate_face(face)]

    def get_lon(self, face: int) -> float:
        """Longitude of the center of a face."""
        return float(self._constants.lons[faces.validate_face(face)])

    def get_lat_min(self, face: int) -> float:
        return faces.lat_min(face, self._constants)

    def get_lat_max(self, face: int) -> float:
        return faces.lat_max(face, self._constants)

    def get_lon_min(self, face: int) -> float:
        return faces.lon_min(face, self._constants)

    def get_lon_max(self, face: int) -> float:
        return faces.lon_max(face, self._constants)

    # =========================================================================
    # Batch
    # =========================================================================

    def sphere_to_icosahedron_batch(
        self,
        lats: NDArray[np.float64],
        lons: NDArray[np.float64]
    ) -> Tuple[NDArray[np.int64], NDArray[np.float64], NDArray[np.float64]]:
        """Project arrays of coordinates.

        Parameters
        ----------
        lats, lons : ndarray
            Coordinates in degrees, of equal shape.

        Returns
        -------
        Tuple[ndarray, ndarray, ndarray]
            (faces, x, y), each of the input shape.
        """
        lats = np.asarray(lats, dtype=np.float64)
        lons = np.asarray(lons, dtype=np.float64)
        if lats.shape != lons.shape:
            raise ValueError(f"Shape mismatch: lats {lats.shape} vs lons {lons.shape}")

        face_idx = np.empty(lats.shape, dtype=np.int64)
        xs = np.empty(lats.shape, dtype=np.float64)
        ys = np.empty(lats.shape, dtype=np.float64)
        for i in np.ndindex(lats.shape):
            fc = self.sphere_to_icosahedron(GeoCoordinate(lats[i], lons[i]))
            face_idx[i], xs[i], ys[i] = fc.face, fc.x, fc.y
        return face_idx, xs, ys

    def icosahedron_to_sphere_batch(
        self,
        face_idx: NDArray[np.int64],
        xs: NDArray[np.float64],
        ys: NDArray[np.float64]
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Map arrays of face coordinates back to the sphere.

        Returns
        -------
        Tuple[ndarray, ndarray]
            (lats, lons) in degrees.
        """
        face_idx = np.asarray(face_idx)
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        if not face_idx.shape == xs.shape == ys.shape:
            raise ValueError(
                f"Shape mismatch: faces {face_idx.shape}, x {xs.shape}, y {ys.shape}"
            )

        lats = np.empty(xs.shape, dtype=np.float64)
        lons = np.empty(xs.shape, dtype=np.float64)
        for i in np.ndindex(xs.shape):
            c = self.icosahedron_to_sphere(FaceCoordinate(int(face_idx[i]), xs[i], ys[i]))
            lats[i], lons[i] = c.lat, c.lon
        return lats, lons


@dataclass
class TissotIndicatrix:
    """Tissot's indicatrix describing local distortion at a point.

    The Tissot indicatrix shows how an infinitesimally small circle
    on the sphere is distorted into an ellipse on the face plane.

    Attributes
    ----------
    semi_major : float
        Maximum scale factor.
    semi_minor : float
        Minimum scale factor.
    orientation_deg : float
        Orientation of the major axis on the plane, degrees from the x axis,
        in [-180, 180].
    area_scale : float
        Area distortion factor (semi_major * semi_minor).
    angular_distortion_deg : float
        Maximum angular distortion in degrees.

    Notes
    -----
    - For a conformal projection: semi_major = semi_minor (circle, no angular distortion)
    - For an equal-area projection: area_scale = 1.0 (but shapes are distorted)
    """
    semi_major: float
    semi_minor: float
    orientation_deg: float
    area_scale: float
    angular_distortion_deg: float

    @property
    def is_conformal(self) -> bool:
        """Check if projection is locally conformal (circle, no angular distortion)."""
        return np.abs(self.semi_major - self.semi_minor) < 1e-6

    @property
    def is_equal_area(self) -> bool:
        """Check if projection is locally equal-area."""
        return np.abs(self.area_scale - 1.0) < 1e-6


def compute_tissot_indicatrix(
    projection: ISEAProjection,
    c: GeoCoordinate,
    delta: float = 1e-5
) -> TissotIndicatrix:
    """Compute Tissot's indicatrix numerically.

    The partial derivatives of the planar coordinates are taken by central
    differences on the plane of the face containing `c`, so the point
    should not lie on a face edge or on the line from the face center to
    one of its vertices, where the projection is not differentiable.

    Parameters
    ----------
    projection : ISEAProjection
        The projection to analyze.
    c : GeoCoordinate
        Location in geographic coordinates. Must not be a pole.
    delta : float
        Angular offset for numerical differentiation, in degrees.

    Returns
    -------
    TissotIndicatrix
        Local distortion characteristics.
    """
    face = projection.sphere_to_face(c)

    def xy(lat: float, lon: float) -> NDArray[np.float64]:
        fc = projection.sphere_to_face_plane(face, GeoCoordinate(lat, lon))
        return np.array([fc.x, fc.y])

    step = np.radians(delta)
    # ∂(x, y)/∂φ and ∂(x, y)/∂λ per radian
    d_lat = (xy(c.lat + delta, c.lon) - xy(c.lat - delta, c.lon)) / (2 * step)
    d_lon = (xy(c.lat, c.lon + delta) - xy(c.lat, c.lon - delta)) / (2 * step)

    # Scale with respect to unit steps north and east on the sphere
    R = projection.radius
    jacobian = np.column_stack([d_lon / (R * np.cos(np.radians(c.lat))), d_lat / R])

    u, s, _ = np.linalg.svd(jacobian)
    a, b = float(s[0]), float(s[1])
    omega = 2 * np.degrees(np.arcsin((a - b) / (a + b)))

    return TissotIndicatrix(
        semi_major=a,
        semi_minor=b,
        orientation_deg=float(np.degrees(np.arctan2(u[1, 0], u[0, 0]))),
        area_scale=a * b,
        angular_distortion_deg=float(omega)
    )
