"""
Trigonometric functions on angles in degrees.

Thin numpy wrappers: every angle argument and every returned angle is in
DEGREES. The inverse functions clip their argument to [-1, 1] so that
rounding noise (e.g. 1.0000000000000002) yields +-90 / 0 / 180 instead of
NaN. All functions accept scalars or arrays.
"""

import numpy as np


def sin(x):
    return np.sin(np.radians(x))


def cos(x):
    return np.cos(np.radians(x))


def tan(x):
    return np.tan(np.radians(x))


def cot(x):
    return 1.0 / np.tan(np.radians(x))


def asin(x):
    return np.degrees(np.arcsin(np.clip(x, -1.0, 1.0)))


def acos(x):
    return np.degrees(np.arccos(np.clip(x, -1.0, 1.0)))


def atan(x):
    return np.degrees(np.arctan(x))


def atan2(y, x):
    """Four-quadrant arctangent of y / x, in (-180, 180]."""
    return np.degrees(np.arctan2(y, x))
