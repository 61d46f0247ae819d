"""
Geometry Constants of the ISEA Projection.

All constants of the projection follow from the combinatorics of the
icosahedron (the golden ratio and the 30/36 degree structural angles) and
from the radius of the sphere. They are computed once and frozen.

Notation (Snyder 1992)
----------------------
g : float
    Spherical distance from a face center to one of its vertices.
G : int
    Half the angle at a vertex of the spherical face triangle (36).
theta : int
    Half the angle at a vertex of the planar face triangle (30).
E, F : float
    Latitudes of the centers of the polar and of the equatorial faces.
R' / R : float
    Ratio of the radius of the sphere inscribing the icosahedron to the
    radius of the projected sphere, chosen so that every face has exactly
    1/20 of the sphere's area.

Notes
-----
The half base of a face triangle, ``R' tan g * sqrt(3) / 2``, uses R' and
not R as printed in Snyder's paper.

References
----------
- Snyder, J.P. (1992). An equal-area map projection for polyhedral globes.
  Cartographica, 29(1), 10-21.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from common.constants import GeodeticConstants
from common.logging_config import get_logger
from geospatial import trigonometric as trig

logger = get_logger(__name__)

GOLDEN_RATIO = (1 + np.sqrt(5)) / 2.
SPHERICAL_HALF_ANGLE = 36  # G
PLANAR_HALF_ANGLE = 30  # theta
LON_STEP = 36  # half the longitude difference between adjacent faces of one ring


@dataclass(frozen=True)
class ISEAConstants:
    """Frozen bundle of projection constants for one sphere radius.

    Angles are in degrees; lengths in the unit of `radius`.
    """
    radius: float  # R
    golden_ratio: float
    g: float
    G: int
    theta: int
    E: float
    F: float
    EF: float  # E - F
    radius_ratio: float  # R' / R
    R: float  # R'
    half_base: float  # R' tan g sqrt(3) / 2
    az_max: int  # 2 (90 - theta)
    two_R: float  # 2 R'
    tan_g: float
    cos_G: float
    cot_theta: float
    two_cot_theta: float
    pi_R_earth2_180: float  # pi R^2 / 180
    R_tan_g: float  # R' tan g
    R_tan_g_2: float  # (R' tan g)^2
    sinG_cos_g: float  # sin G cos g
    G_180: int  # G - 180
    lats: Tuple[float, ...]
    lons: Tuple[int, ...]
    max_angular_distortion: float
    max_scale_variation: float
    min_scale_variation: float

    @classmethod
    def from_radius(cls, radius: float) -> 'ISEAConstants':
        """Derive all constants for a sphere of the given radius.

        Parameters
        ----------
        radius : float
            Radius of the (authalic) sphere. Planar coordinates are
            produced in the same unit.

        Returns
        -------
        ISEAConstants
            The frozen constants.
        """
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")

        G = SPHERICAL_HALF_ANGLE
        theta = PLANAR_HALF_ANGLE
        F = float(trig.atan(1 / (2 * GOLDEN_RATIO ** 2)))
        # equivalently F = 90 + g - 2 atan(phi), from the vertex coordinates
        g = float(F + 2 * trig.atan(GOLDEN_RATIO) - 90)
        E = 90 - g
        tan_g = float(trig.tan(g))
        radius_ratio = float(
            np.sqrt((G - theta) * np.pi / (45 * trig.sin(2 * theta))) / tan_g
        )
        R = radius_ratio * radius
        cot_theta = float(trig.cot(theta))

        X = LON_STEP
        lats = (E,) * 5 + (F,) * 5 + (-F,) * 5 + (-E,) * 5
        upper_ring = (-4 * X, -2 * X, 0, 2 * X, 4 * X)
        lower_ring = (-3 * X, -X, X, 3 * X, 5 * X)
        lons = upper_ring + upper_ring + lower_ring + lower_ring

        constants = cls(
            radius=float(radius),
            golden_ratio=float(GOLDEN_RATIO),
            g=g,
            G=G,
            theta=theta,
            E=E,
            F=F,
            EF=E - F,
            radius_ratio=radius_ratio,
            R=R,
            half_base=R * tan_g * np.sqrt(3) / 2.,
            az_max=2 * (90 - theta),
            two_R=2 * R,
            tan_g=tan_g,
            cos_G=float(trig.cos(G)),
            cot_theta=cot_theta,
            two_cot_theta=2 * cot_theta,
            pi_R_earth2_180=np.pi * radius ** 2 / 180,
            R_tan_g=R * tan_g,
            R_tan_g_2=(R * tan_g) ** 2,
            sinG_cos_g=float(trig.sin(G) * trig.cos(g)),
            G_180=G - 180,
            lats=lats,
            lons=lons,
            max_angular_distortion=GeodeticConstants.ISEA_MAX_ANGULAR_DISTORTION.value,
            max_scale_variation=GeodeticConstants.ISEA_MAX_SCALE_VARIATION.value,
            min_scale_variation=GeodeticConstants.ISEA_MIN_SCALE_VARIATION.value,
        )
        logger.debug(
            f"ISEA constants for R={radius}: g={g:.10f}, E={E:.10f}, "
            f"F={F:.10f}, R'/R={radius_ratio:.10f}"
        )
        return constants
