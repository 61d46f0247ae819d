"""
Geospatial Module: the ISEA Projection Engine.

This module provides:
- Degree-based trigonometry
- Reference ellipsoids and their authalic spheres
- The geometry constants of the icosahedron
- Orientation of the icosahedron relative to the sphere
- Face selection and face bookkeeping
- Snyder's forward and inverse equal-area transforms
- The `ISEAProjection` facade with distortion analysis
"""

from geospatial.coordinate_models import (
    EllipsoidParameters,
    WGS84Ellipsoid,
)

from geospatial.isea_constants import ISEAConstants

from geospatial.orientation import (
    DEFAULT_ORIENTATION,
    Orientation,
    change_orientation,
    change_orientation_bbox,
    revert_orientation,
)

from geospatial.faces import (
    Face,
    face_orientation,
    select_face,
)

from geospatial.projections import (
    ISEAProjection,
    TissotIndicatrix,
    authalic_radius_km,
    compute_tissot_indicatrix,
)

__all__ = [
    # Ellipsoids
    "EllipsoidParameters",
    "WGS84Ellipsoid",
    # Constants
    "ISEAConstants",
    # Orientation
    "DEFAULT_ORIENTATION",
    "Orientation",
    "change_orientation",
    "change_orientation_bbox",
    "revert_orientation",
    # Faces
    "Face",
    "face_orientation",
    "select_face",
    # Projection
    "ISEAProjection",
    "TissotIndicatrix",
    "authalic_radius_km",
    "compute_tissot_indicatrix",
]
