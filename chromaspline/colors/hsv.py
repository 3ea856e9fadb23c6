from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class UnitHSV(ColorBase):
    """
    Working color of the gradient engine.

    Hue in degrees [0, 360), saturation and value in [0, 1]. Scalar values
    are (h, s, v) tuples of floats; arrays have shape (..., 3).
    """
    mode:        ClassVar[ColorSpace] = ColorSpace.HSV
    maxima:      ClassVar[Tuple[float, float, float]] = (360.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    @property
    def hue(self):
        return self._value[..., 0] if self.is_array else self._value[0]

    @property
    def saturation(self):
        return self._value[..., 1] if self.is_array else self._value[1]

    @property
    def brightness(self):
        return self._value[..., 2] if self.is_array else self._value[2]
