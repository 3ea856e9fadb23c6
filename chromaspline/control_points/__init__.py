from .point import ColorSpacePoint, Tangent, PointDelta, as_unit_hsv
from .point_set import ControlPointSet

__all__ = [
    "ColorSpacePoint",
    "Tangent",
    "PointDelta",
    "ControlPointSet",
    "as_unit_hsv",
]
