from enum import Enum
from typing import Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
HSVTuple = Tuple[float, float, float]
ColorElement = Union[Scalar, ScalarVector]
ColorValue = Union[ColorElement, ndarray]


class ColorSpace(str, Enum):
    """HSV is where gradients are built; RGB is what gets displayed."""
    RGB = "rgb"
    HSV = "hsv"


# spaces whose first channel is a hue angle
HUE_SPACES = frozenset({ColorSpace.HSV})


def element_to_array(element: ColorValue) -> np.ndarray:
    """Float64 array view of a scalar, a channel tuple or an array."""
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.atleast_1d(np.asarray(element, dtype=np.float64))
