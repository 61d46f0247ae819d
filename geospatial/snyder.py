"""
Snyder's Equal-Area Transform Between a Sphere and an Icosahedron Face.

Each face is split into three congruent triangles, one per edge, meeting at
the face center. A point is located by its azimuth from the face center
(Az on the sphere, Az' on the plane) and its distance from it (z on the
sphere, rho on the plane). Within each sub-triangle the azimuth is chosen
so that the spherical area swept from the reference vertex direction
equals the planar area, which makes the whole mapping equal-area.

Azimuths are reduced into the sub-triangle range [0, 2 (90 - theta)] before
the formulas are applied, and the reduction is undone afterwards. For
inverted faces the azimuth is first turned by 180 degrees so that both
parities share the same formulas.

The forward direction is closed-form. The inverse recovers Az from Az' by
solving the implicit area equation with Newton-Raphson.

Scientific Context
------------------
Domain: Cartography, polyhedral globes
Model: Spherical triangle areas, Snyder (1992) equal-area construction

References
----------
- Snyder, J.P. (1992). An equal-area map projection for polyhedral globes.
  Cartographica, 29(1), 10-21. doi:10.3138/27H7-8K88-4882-1752
- Harrison, E., Mahdavi-Amiri, A., Samavati, F. (2011). Optimization of
  inverse Snyder polyhedral projection. International Conference on
  Cyberworlds. doi:10.1109/CW.2011.36
"""

from typing import Tuple

import numpy as np

from common.exceptions import ConvergenceError, ProjectionError
from common.logging_config import get_logger
from common.types import FaceCoordinate, GeoCoordinate
from geospatial import trigonometric as trig
from geospatial.faces import Face, face_orientation
from geospatial.isea_constants import ISEAConstants

logger = get_logger(__name__)

DEFAULT_PRECISION = 1e-9
DEFAULT_MAX_ITERATIONS = 100

# |sin H| below this leaves the Newton derivative undefined
_SINGULAR_SIN_H = 1e-12
# slack for rho / (2 R' f) exceeding 1 through rounding
_ASIN_SLACK = 1e-12


def _reduce_azimuth(az: float, face: int, az_max: float) -> Tuple[float, float]:
    """Reduce an azimuth into [0, az_max].

    Returns
    -------
    Tuple[float, float]
        (reduced azimuth, total adjustment added to it)
    """
    adjustment = 0.0 if face_orientation(face) > 0 else 180.0
    az += adjustment
    while az < 0:
        adjustment += az_max
        az += az_max
    while az > az_max:
        adjustment -= az_max
        az -= az_max
    return az, adjustment


def _compute_H(sin_az_earth: float, cos_az_earth: float, k: ISEAConstants) -> float:
    """Spherical angle H of the sub-triangle for azimuth Az."""
    return float(trig.acos(sin_az_earth * k.sinG_cos_g - cos_az_earth * k.cos_G))


def _compute_d(sin_az: float, cos_az: float, k: ISEAConstants) -> float:
    """Planar distance d' from the face center to the edge at azimuth Az'."""
    return k.R_tan_g / (cos_az + sin_az * k.cot_theta)


def _compute_q(sin_az_earth: float, cos_az_earth: float, k: ISEAConstants) -> float:
    """Spherical distance q from the face center to the edge at azimuth Az."""
    return float(trig.atan2(k.tan_g, cos_az_earth + sin_az_earth * k.cot_theta))


def _compute_f(
    sin_az: float,
    cos_az: float,
    sin_az_earth: float,
    cos_az_earth: float,
    k: ISEAConstants
) -> float:
    """Radial scale f relating the chord 2 R' sin(z/2) to rho."""
    q = _compute_q(sin_az_earth, cos_az_earth, k)
    return _compute_d(sin_az, cos_az, k) / (k.two_R * float(trig.sin(q / 2.)))


def forward(face: Face, k: ISEAConstants) -> FaceCoordinate:
    """Project a point onto the plane of a face.

    Parameters
    ----------
    face : Face
        The face, bound to the point in the canonical frame. The point
        need not lie on the face; the result then lies outside the face
        triangle but on its plane.
    k : ISEAConstants
        Projection constants.

    Returns
    -------
    FaceCoordinate
        Planar coordinate relative to the face center.

    Notes
    -----
    At the face center z = 0, so rho = 0 and the result is (0, 0); no
    auxiliary formula divides by a quantity vanishing there.
    """
    az_earth = float(trig.atan2(
        face.cos_lat * face.sin_lon_lon0,
        face.cos_lat0 * face.sin_lat - face.sin_lat0 * face.cos_lat * face.cos_lon_lon0
    ))
    az_earth, adjustment = _reduce_azimuth(az_earth, face.face, k.az_max)
    sin_az_earth = float(trig.sin(az_earth))
    cos_az_earth = float(trig.cos(az_earth))
    H = _compute_H(sin_az_earth, cos_az_earth, k)
    area = (az_earth + k.G_180 + H) * k.pi_R_earth2_180
    az = float(trig.atan2(2 * area, k.R_tan_g_2 - area * k.two_cot_theta))
    sin_az = float(trig.sin(az))
    cos_az = float(trig.cos(az))
    f = _compute_f(sin_az, cos_az, sin_az_earth, cos_az_earth, k)
    rho = k.two_R * f * float(trig.sin(face.z / 2.))
    az -= adjustment
    x = rho * float(trig.sin(az))
    y = rho * float(trig.cos(az))
    return FaceCoordinate(face.face, x, y)


def _solve_azimuth(
    area: float,
    az_initial: float,
    k: ISEAConstants,
    precision: float,
    max_iterations: int
) -> float:
    """Solve the area equation for the spherical azimuth Az.

    Newton-Raphson on F(Az) = A / (pi R^2 / 180) - (G - 180) - H(Az) - Az.
    """
    target = area / k.pi_R_earth2_180 - k.G_180
    az_earth = az_initial
    for iteration in range(1, max_iterations + 1):
        sin_az_earth = float(trig.sin(az_earth))
        cos_az_earth = float(trig.cos(az_earth))
        H = _compute_H(sin_az_earth, cos_az_earth, k)
        sin_H = float(trig.sin(H))
        F_az = target - H - az_earth
        if abs(sin_H) < _SINGULAR_SIN_H:
            logger.warning(
                f"Inverse projection: derivative undefined at Az={az_earth!r} (sin H={sin_H!r})"
            )
            raise ConvergenceError(
                f"Derivative of the azimuth equation is undefined at Az={az_earth!r}",
                iterations=iteration,
                residual=F_az,
            )
        dF_az = (cos_az_earth * k.sinG_cos_g + sin_az_earth * k.cos_G) / sin_H - 1
        delta = -F_az / dF_az
        az_earth += delta
        if abs(delta) <= precision:
            logger.debug(f"Inverse projection: Az converged after {iteration} iteration(s)")
            return az_earth

    logger.warning(
        f"Inverse projection: no convergence within {max_iterations} iterations "
        f"(last step {delta!r})"
    )
    raise ConvergenceError(
        f"Newton-Raphson did not converge within {max_iterations} iterations",
        iterations=max_iterations,
        residual=delta,
    )


def inverse(
    c: FaceCoordinate,
    k: ISEAConstants,
    precision: float = DEFAULT_PRECISION,
    max_iterations: int = DEFAULT_MAX_ITERATIONS
) -> GeoCoordinate:
    """Map a planar face coordinate back onto the sphere.

    Parameters
    ----------
    c : FaceCoordinate
        Planar coordinate relative to the center of face `c.face`.
    k : ISEAConstants
        Projection constants.
    precision : float
        Convergence threshold of Newton-Raphson on Az, in degrees.
    max_iterations : int
        Iteration cap of Newton-Raphson.

    Returns
    -------
    GeoCoordinate
        The point in the canonical frame.

    Raises
    ------
    ConvergenceError
        If Newton-Raphson does not converge or meets sin H = 0.
    ProjectionError
        If the planar point is too far from the face center to be the
        image of any point of the sphere.
    """
    lat0 = k.lats[c.face]
    lon0 = k.lons[c.face]
    rho = float(np.hypot(c.x, c.y))
    if rho == 0.0:
        return GeoCoordinate(lat0, lon0)

    az, adjustment = _reduce_azimuth(float(trig.atan2(c.x, c.y)), c.face, k.az_max)
    sin_az = float(trig.sin(az))
    cos_az = float(trig.cos(az))
    # (R' tan g)^2 / (2 (cot Az' + cot theta)), multiplied through by sin Az'
    area = k.R_tan_g_2 * sin_az / (2 * (cos_az + sin_az * k.cot_theta))
    az_earth = _solve_azimuth(area, az, k, precision, max_iterations)

    sin_az_earth = float(trig.sin(az_earth))
    cos_az_earth = float(trig.cos(az_earth))
    f = _compute_f(sin_az, cos_az, sin_az_earth, cos_az_earth, k)
    ratio = rho / (k.two_R * f)
    if ratio > 1 + _ASIN_SLACK:
        logger.warning(f"Inverse projection: {c} lies outside the domain of face {c.face}")
        raise ProjectionError(
            f"Planar point ({c.x}, {c.y}) is not the image of any point on face {c.face}"
        )
    z = 2 * float(trig.asin(ratio))
    az_earth -= adjustment

    sin_lat0 = float(trig.sin(lat0))
    cos_lat0 = float(trig.cos(lat0))
    sin_z = float(trig.sin(z))
    cos_z = float(trig.cos(z))
    lat = float(trig.asin(sin_lat0 * cos_z + cos_lat0 * sin_z * float(trig.cos(az_earth))))
    lon = lon0 + float(trig.atan2(
        float(trig.sin(az_earth)) * sin_z * cos_lat0,
        cos_z - sin_lat0 * float(trig.sin(lat))
    ))
    return GeoCoordinate(lat, lon)
