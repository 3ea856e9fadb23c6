from typing import ClassVar, Tuple
import numpy as np
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from .color_base import ColorBase


class ColorRGBINT(ColorBase):
    """8-bit RGB, the format previews and exported pixels use."""
    mode:        ClassVar[ColorSpace] = ColorSpace.RGB
    maxima:      ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT

    def to_uint8(self) -> np.ndarray:
        """Channels as a uint8 array of shape (..., 3)."""
        return np.asarray(self._value, dtype=np.uint8)


class ColorUnitRGB(ColorBase):
    mode:        ClassVar[ColorSpace] = ColorSpace.RGB
    maxima:      ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT
