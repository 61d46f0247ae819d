"""
Unit Registry for Angles and Lengths.

The projection engine works in plain floats: angles in DEGREES and lengths
in KILOMETRES. This module provides a centralized `pint` registry so
callers can also hand in explicit quantities (radians, metres, ...), which
are converted at the API boundary. Bare numbers are taken to already be in
the system convention.

Example Usage
-------------
>>> from common.units import Q_, as_degrees, as_kilometres
>>> as_degrees(Q_(0.5, 'radian'))
28.64788975654116
>>> as_kilometres(Q_(6_371_007.1809, 'm'))
6371.0071809
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

AngleLike = Union[float, pint.Quantity]
LengthLike = Union[float, pint.Quantity]

# Standard unit definitions for the system
STANDARD_UNITS = {
    "latitude": "degree",
    "radius": "kilometer",
}


def _convert(value: Union[float, pint.Quantity], unit: str, what: str) -> float:
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(unit).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(
                f"{what} has incompatible units. Expected {unit}, got {value.units}"
            ) from e
    return float(value)


def as_degrees(value: AngleLike) -> float:
    """Convert an angle to degrees.

    Parameters
    ----------
    value : float or pint.Quantity
        A bare number (already in degrees) or an angle quantity.

    Returns
    -------
    float
        The angle in degrees.

    Raises
    ------
    ValueError
        If a quantity with a non-angular dimensionality is given.
    """
    return _convert(value, STANDARD_UNITS["latitude"], "Angle")


def as_kilometres(value: LengthLike) -> float:
    """Convert a length to kilometres.

    Parameters
    ----------
    value : float or pint.Quantity
        A bare number (already in kilometres) or a length quantity.

    Returns
    -------
    float
        The length in kilometres.
    """
    return _convert(value, STANDARD_UNITS["radius"], "Length")
