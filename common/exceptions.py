"""
Error taxonomy for the projection engine.

Inputs are plain numeric angles and coordinates, so the only failures are
invalid face indices and numerical breakdowns of the iterative inverse.
Malformed value types (latitude out of range, negative radius) raise the
builtin `ValueError`.
"""


class InvalidFaceError(IndexError):
    """A face index outside [0, 19] was passed to a face-indexed operation."""

    def __init__(self, face, number_of_faces: int = 20):
        self.face = face
        super().__init__(
            f"Face index {face!r} out of range [0, {number_of_faces - 1}]"
        )


class ProjectionError(RuntimeError):
    """A projection computation could not produce a valid result."""


class ConvergenceError(ProjectionError):
    """The Newton-Raphson solve of the inverse projection failed.

    Raised when the iteration cap is exceeded or the derivative of the
    implicit azimuth equation is undefined (sin H = 0).
    """

    def __init__(self, message: str, iterations: int = 0, residual: float = float("nan")):
        self.iterations = iterations
        self.residual = residual
        super().__init__(message)
