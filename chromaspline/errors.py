"""Exceptions and warnings raised by the gradient engine."""


class ChromasplineError(Exception):
    """Base class for all engine errors."""


class InvalidPosition(ChromasplineError, ValueError):
    """A position outside [0, 1] was given while constrain is off."""

    def __init__(self, position: float):
        self.position = position
        super().__init__(f"Position {position!r} is outside [0, 1]")


class IndexOutOfBounds(ChromasplineError, IndexError):
    """A point index does not exist in the control point set."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Control point index {index} out of range for set of size {size}")


class EmptyControlSet(ChromasplineError, ValueError):
    """Evaluation was requested on a set with no points."""

    def __init__(self):
        super().__init__("Cannot evaluate a gradient with no control points")


class PresetInvalid(ChromasplineError, ValueError):
    """Preset data could not be turned into a control point set."""


class DegenerateSegmentWarning(UserWarning):
    """Two consecutive points share a position; the segment renders flat."""


class PolynomialModeWarning(UserWarning):
    """Polynomial mode was used with enough points to ring badly."""
