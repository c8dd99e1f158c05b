class TrajectoryException(Exception):
    """Base class for exceptions raised by trackman_trajectory."""


class FrameMismatchError(TrajectoryException):
    """Raised when a curve or point is used in a coordinate frame it does not belong to."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected a curve in the '{expected}' frame, got '{actual}'")
