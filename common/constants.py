"""
Geodetic and Cartographic Constants for the ISEA Projection.

This module provides constants with their uncertainty bounds and sources.
Ellipsoid parameters are in SI units; angular constants are in degrees,
the convention used throughout the projection engine.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- Snyder, J.P. (1992). An equal-area map projection for polyhedral globes.
  Cartographica, 29(1), 10-21. doi:10.3138/27H7-8K88-4882-1752
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant. For values
        quoted to a fixed number of digits this is half the last digit.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of constants used throughout the system.

    All constants are class attributes with full metadata including
    uncertainty bounds and authoritative sources.

    Earth Geometry (WGS84)
    ----------------------
    These constants define the default reference ellipsoid. The projection
    itself works on a sphere; its radius is the authalic radius of this
    ellipsoid (see `geospatial.coordinate_models`).

    ISEA Distortion
    ---------------
    Published bounds of the distortion introduced by the projection. They
    are quoted values, not recomputed.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    EARTH_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    EARTH_SEMI_MINOR_AXIS: Final[Constant] = Constant(
        value=6_356_752.314245,
        uncertainty=0.0001,
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-minor axis (polar radius) of WGS84 ellipsoid"
    )

    EARTH_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    EARTH_AUTHALIC_RADIUS: Final[Constant] = Constant(
        value=6_371_007.1809,
        uncertainty=0.0001,
        unit="m",
        source="WGS84, NIMA TR8350.2 (derived)",
        description="Radius of the sphere with the same surface area as WGS84"
    )

    # =========================================================================
    # ISEA Distortion Bounds
    # Reference: Snyder (1992), Cartographica 29(1)
    # =========================================================================

    ISEA_MAX_ANGULAR_DISTORTION: Final[Constant] = Constant(
        value=17.27,
        uncertainty=0.005,
        unit="degree",
        source="Snyder (1992)",
        description="Maximum angular distortion of the ISEA projection"
    )

    ISEA_MAX_SCALE_VARIATION: Final[Constant] = Constant(
        value=1.163,
        uncertainty=0.0005,
        unit="dimensionless",
        source="Snyder (1992)",
        description="Maximum scale factor of the ISEA projection"
    )

    ISEA_MIN_SCALE_VARIATION: Final[Constant] = Constant(
        value=0.860,
        uncertainty=0.0005,
        unit="dimensionless",
        source="Snyder (1992)",
        description="Minimum scale factor of the ISEA projection"
    )
