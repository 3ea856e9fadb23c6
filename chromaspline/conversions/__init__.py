"""
Chromaspline Color Space Conversions
====================================

HSV is the working space of the gradient engine; RGB is what previews and
exports consume.

Conversion Functions
-------------------
    hsv_to_unit_rgb(h, s, v)        Scalar HSV to RGB
    unit_rgb_to_hsv(r, g, b)        Scalar RGB to HSV
    np_hsv_to_unit_rgb(h, s, v)     Vectorized HSV to RGB
    np_unit_rgb_to_hsv(r, g, b)     Vectorized RGB to HSV

High-Level API
-------------
    convert(color, from_space, to_space, input_type, output_type)
    np_convert(color, from_space, to_space, input_type, output_type)

Formatting
----------
    format_color(hsv, fmt)          Text for clipboard interop

Examples
--------
>>> from chromaspline.conversions import hsv_to_unit_rgb, convert
>>> hsv_to_unit_rgb(120.0, 1.0, 1.0)
(0.0, 1.0, 0.0)
>>> convert((0.0, 1.0, 1.0), "hsv", "rgb", "float", "int")
(255, 0, 0)
"""

from .hsv_rgb import (
    hsv_to_unit_rgb,
    unit_rgb_to_hsv,
    np_hsv_to_unit_rgb,
    np_unit_rgb_to_hsv,
)
from .wrapper import convert, np_convert
from .formatting import ColorStringFormat, format_color
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    'hsv_to_unit_rgb',
    'unit_rgb_to_hsv',
    'np_hsv_to_unit_rgb',
    'np_unit_rgb_to_hsv',
    'convert',
    'np_convert',
    'ColorStringFormat',
    'format_color',
    'FormatType',
    'ColorSpace',
]
