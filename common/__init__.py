"""
Common utilities and infrastructure for the ISEA projection engine.

This package provides foundational components used across all modules:
- Constants with uncertainty bounds and sources
- Unit registry for angle and length conversion
- Value types (geographic, face and bounding-box coordinates)
- Error taxonomy
- Logging infrastructure
"""

from common.constants import Constant, GeodeticConstants
from common.exceptions import ConvergenceError, InvalidFaceError, ProjectionError
from common.units import Q_, as_degrees, as_kilometres, ureg
from common.types import (
    BoundingBox,
    FaceCoordinate,
    GeoCoordinate,
    NUMBER_OF_FACES,
)
from common.logging_config import get_logger

__all__ = [
    "Constant",
    "GeodeticConstants",
    "ConvergenceError",
    "InvalidFaceError",
    "ProjectionError",
    "Q_",
    "as_degrees",
    "as_kilometres",
    "ureg",
    "BoundingBox",
    "FaceCoordinate",
    "GeoCoordinate",
    "NUMBER_OF_FACES",
    "get_logger",
]
