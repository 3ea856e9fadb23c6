"""
Chromaspline
============

Spline-based color gradient engine. A gradient is an ordered set of HSV
control points on [0, 1]; a spline mode decides how colors are blended
between them.

>>> from chromaspline import EditingSession, SplineMode
>>> session = EditingSession(SplineMode.LINEAR)
>>> session.insert_point(0.0, (0.0, 1.0, 1.0))
0
>>> session.insert_point(1.0, (120.0, 1.0, 1.0))
1
>>> session.sample_point(0.5).value
(60.0, 1.0, 1.0)
"""

__version__ = "0.1.0"

from .types.spline_types import SplineMode, InsertDirection, HueMode
from .types.format_type import FormatType
from .types.color_types import ColorSpace
from .colors import UnitHSV, ColorUnitRGB, ColorRGBINT
from .control_points import ColorSpacePoint, ControlPointSet, PointDelta, Tangent
from .splines import SplineEvaluator
from .sampler import GradientSampler
from .auto_hue import AutoHueAssigner
from .options import SessionOptions
from .preset import PresetData
from .session import EditingSession
from .conversions import ColorStringFormat, format_color
from .export import strip_to_pixels, strip_to_image
from .errors import (
    ChromasplineError,
    InvalidPosition,
    IndexOutOfBounds,
    EmptyControlSet,
    PresetInvalid,
    DegenerateSegmentWarning,
    PolynomialModeWarning,
)

__all__ = [
    "__version__",
    "SplineMode",
    "InsertDirection",
    "HueMode",
    "FormatType",
    "ColorSpace",
    "UnitHSV",
    "ColorUnitRGB",
    "ColorRGBINT",
    "ColorSpacePoint",
    "ControlPointSet",
    "PointDelta",
    "Tangent",
    "SplineEvaluator",
    "GradientSampler",
    "AutoHueAssigner",
    "SessionOptions",
    "PresetData",
    "EditingSession",
    "ColorStringFormat",
    "format_color",
    "strip_to_pixels",
    "strip_to_image",
    "ChromasplineError",
    "InvalidPosition",
    "IndexOutOfBounds",
    "EmptyControlSet",
    "PresetInvalid",
    "DegenerateSegmentWarning",
    "PolynomialModeWarning",
]
