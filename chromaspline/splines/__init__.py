"""
Chromaspline Spline Evaluation
==============================

    SplineEvaluator(points, mode, hue_mode)   Build once per snapshot
    evaluator.evaluate(t)                     Single UnitHSV color
    evaluator.evaluate_many(ts)               (R, 3) float64 array

Modes
-----
    LINEAR          Per-channel lerp
    HERMITE         Cubic Hermite, Catmull-Rom slopes by default
    HERMITE_BEZIER  Cubic Bezier with tangent handles
    POLYNOMIAL      Global Lagrange polynomial

Hues are unwrapped along the chosen HueMode before blending and wrapped back
into [0, 360) afterwards.
"""

from .evaluator import SplineEvaluator
from .basis import lerp, hermite, cubic_bezier, barycentric_weights, barycentric_eval
from .segments import locate_segments
from .tangents import catmull_rom_slopes

__all__ = [
    "SplineEvaluator",
    "lerp",
    "hermite",
    "cubic_bezier",
    "barycentric_weights",
    "barycentric_eval",
    "locate_segments",
    "catmull_rom_slopes",
]
