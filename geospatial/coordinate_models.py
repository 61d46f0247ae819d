"""
Reference Ellipsoids and the Authalic Sphere.

The ISEA projection is defined on a sphere. To keep areas on the
icosahedron equal to areas on the Earth, the sphere used is the authalic
sphere of the reference ellipsoid: the sphere with the same surface area.

Scientific Context
------------------
Domain: Geodesy
Model: Oblate ellipsoid of revolution, reduced to its authalic sphere

The authalic radius is

    R_q = a * sqrt(q_p / 2),   q_p = 1 + (1 - e^2) / e * artanh(e)

which for WGS84 is 6 371 007.1809 m.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof.
  Paper 1395, eq. 3-11 and 3-12.
"""

from dataclasses import dataclass

import numpy as np
from pyproj import Geod

from common.constants import GeodeticConstants


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    authalic_radius : float
        Radius of the sphere of equal surface area, in meters.
    """
    a: float
    f: float
    name: str

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @property
    def e(self) -> float:
        """First eccentricity."""
        return float(np.sqrt(self.e2))

    @property
    def authalic_radius(self) -> float:
        """Radius of the authalic sphere in meters.

        Notes
        -----
        For a sphere (e = 0) this is the semi-major axis.
        """
        e = self.e
        if e == 0.0:
            return self.a
        q_p = 1.0 + (1.0 - self.e2) / e * np.arctanh(e)
        return float(self.a * np.sqrt(q_p / 2.0))

    @classmethod
    def from_name(cls, name: str) -> 'EllipsoidParameters':
        """Look up an ellipsoid known to PROJ.

        Parameters
        ----------
        name : str
            PROJ ellipsoid identifier, e.g. "WGS84", "GRS80", "intl".

        Returns
        -------
        EllipsoidParameters
            Parameters of the named ellipsoid.
        """
        geod = Geod(ellps=name)
        return cls(a=float(geod.a), f=float(geod.f), name=name)


# WGS84 ellipsoid - the default reference for this system
WGS84Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.EARTH_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.EARTH_FLATTENING.value,
    name="WGS84"
)
