"""
Chromaspline Color Classes
==========================

Immutable color values used by control points and samplers.

- Instances are frozen after initialization
- Scalar colors hold a tuple, color arrays hold a read-only ndarray (..., 3)
- Hue channels wrap cyclically into [0, 360); every other channel is clamped
- ``convert`` moves between HSV and RGB and between formats

>>> from chromaspline.colors import UnitHSV
>>> UnitHSV((370.0, 1.5, 0.5)).value
(10.0, 1.0, 0.5)
>>> UnitHSV((0.0, 1.0, 1.0)).convert("rgb", "int").value
(255, 0, 0)
"""

from .color_base import ColorBase
from .hsv import UnitHSV
from .rgb import ColorRGBINT, ColorUnitRGB
from .color import color_convert, get_color_class

__all__ = [
    'ColorBase',
    'UnitHSV',
    'ColorRGBINT',
    'ColorUnitRGB',
    'color_convert',
    'get_color_class',
]
