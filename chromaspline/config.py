"""Centralized configuration knobs for chromaspline."""

from .types.spline_types import SplineMode, InsertDirection, HueMode

# Two positions closer than this are treated as the same position when
# resolving insert ties.
POSITION_EPSILON: float = 1e-6

# Default number of samples for rendered strips and exports.
DEFAULT_RESOLUTION: int = 256

# Pixel height used when a strip is expanded into an image.
DEFAULT_EXPORT_HEIGHT: int = 32

DEFAULT_SPLINE_MODE: SplineMode = SplineMode.LINEAR
DEFAULT_INSERT_DIRECTION: InsertDirection = InsertDirection.AFTER
DEFAULT_HUE_MODE: HueMode = HueMode.SHORTEST

# Newton steps used to invert the position polynomial of a Bezier segment.
# Each step is bisection-guarded, so the count bounds the cost per sample.
BEZIER_SOLVER_ITERATIONS: int = 24
BEZIER_SOLVER_TOLERANCE: float = 1e-12

# Above this many points a global polynomial is almost always ringing.
POLYNOMIAL_WARN_POINTS: int = 8

PRESET_SCHEMA_VERSION: str = "1.0"
