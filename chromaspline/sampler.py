"""
Point and strip sampling with a per-revision evaluator cache.
"""
from __future__ import annotations
from logging import getLogger
from typing import Tuple
from weakref import WeakKeyDictionary

import numpy as np
from unitfield import flat_1d_upbm

from . import config
from .colors import UnitHSV, ColorUnitRGB, ColorRGBINT
from .control_points import ControlPointSet
from .conversions import np_convert
from .splines import SplineEvaluator
from .types.color_types import ColorSpace
from .types.format_type import FormatType
from .types.spline_types import HueMode, SplineMode

logger = getLogger(__name__)

_CacheKey = Tuple[int, SplineMode, HueMode]


def strip_positions(resolution: int) -> np.ndarray:
    """Evenly spaced t values covering [0, 1] inclusively."""
    if resolution < 1:
        raise ValueError(f"Strip resolution must be at least 1, got {resolution}")
    if resolution == 1:
        return np.zeros(1, dtype=np.float64)
    return np.asarray(flat_1d_upbm(resolution), dtype=np.float64)


class GradientSampler:
    """
    Samples colors from a ControlPointSet.

    The evaluator built for a set is reused until the set's revision, the
    spline mode or the hue mode changes.
    """

    def __init__(self, hue_mode: HueMode = config.DEFAULT_HUE_MODE) -> None:
        self.hue_mode = HueMode(hue_mode)
        # keyed on the set itself; entries go away with their set
        self._cache: WeakKeyDictionary[ControlPointSet, Tuple[_CacheKey, SplineEvaluator]] = WeakKeyDictionary()

    def evaluator(self, point_set: ControlPointSet, mode: SplineMode) -> SplineEvaluator:
        key = (point_set.revision, SplineMode(mode), self.hue_mode)
        cached = self._cache.get(point_set)
        if cached is not None and cached[0] == key:
            logger.debug("Evaluator cache hit for revision %d", point_set.revision)
            return cached[1]
        evaluator = SplineEvaluator(point_set.snapshot(), key[1], self.hue_mode)
        self._cache[point_set] = (key, evaluator)
        return evaluator

    def sample_point(self, point_set: ControlPointSet, mode: SplineMode, t: float) -> UnitHSV:
        """Color at position t."""
        return self.evaluator(point_set, mode).evaluate(t)

    def sample_strip(
        self,
        point_set: ControlPointSet,
        mode: SplineMode,
        resolution: int = config.DEFAULT_RESOLUTION,
    ) -> UnitHSV:
        """
        Evenly spaced colors over [0, 1].

        Returns:
            UnitHSV array color of shape (resolution, 3); the first and last
            rows equal sample_point at t = 0 and t = 1.

        Raises:
            ValueError: if resolution < 1
            EmptyControlSet: if the set has no points
        """
        ts = strip_positions(resolution)
        return UnitHSV(self.evaluator(point_set, mode).evaluate_many(ts))

    def sample_strip_rgb(
        self,
        point_set: ControlPointSet,
        mode: SplineMode,
        resolution: int = config.DEFAULT_RESOLUTION,
        format_type: FormatType = FormatType.FLOAT,
    ):
        """Strip converted to RGB, as unit floats or 8-bit integers."""
        hsv = self.sample_strip(point_set, mode, resolution)
        rgb = np_convert(hsv.value, ColorSpace.HSV, ColorSpace.RGB, FormatType.FLOAT, format_type)
        if FormatType(format_type) == FormatType.INT:
            return ColorRGBINT(rgb)
        return ColorUnitRGB(rgb)

    def control_point_colors(self, point_set: ControlPointSet, mode: SplineMode) -> UnitHSV:
        """Colors the gradient takes at each control point position."""
        positions = np.asarray(point_set.positions, dtype=np.float64)
        return UnitHSV(self.evaluator(point_set, mode).evaluate_many(positions))
