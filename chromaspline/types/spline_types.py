from enum import Enum, IntEnum


class SplineMode(str, Enum):
    """
    Interpolation algorithm used between control points.

    LINEAR:         per-channel lerp between neighbours
    HERMITE:        cubic Hermite, Catmull-Rom tangents unless set explicitly
    HERMITE_BEZIER: cubic Bezier whose handles are the points' tangents
    POLYNOMIAL:     global Lagrange polynomial through every point (best effort)
    """
    LINEAR = "linear"
    HERMITE = "hermite"
    HERMITE_BEZIER = "hermite_bezier"
    POLYNOMIAL = "polynomial"


class InsertDirection(str, Enum):
    """Where a new point goes when its position ties with existing points."""
    BEFORE = "before"
    AFTER = "after"


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color space.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (<=180 degree arc) - most common
    LONGEST:  Longest path (>=180 degree arc)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3
