"""
Automatic hue assignment across a control point set.

The first point anchors the hue. The last point either keeps its own hue or,
when a hue span is configured, is placed ``hue_span`` degrees after the
first. Every interior point takes the shortest-arc blend of the two end hues
at its normalized position. Saturation and value are never touched, and
running the pass twice changes nothing the second time.
"""
from __future__ import annotations
from logging import getLogger
from typing import List, Optional

import numpy as np

from .control_points import ControlPointSet
from .types.spline_types import HueMode
from .utils.hue import hue_lerp, wrap_hue

logger = getLogger(__name__)


class AutoHueAssigner:
    def __init__(self, hue_span: Optional[float] = None) -> None:
        self.hue_span = hue_span

    def compute_hues(self, point_set: ControlPointSet) -> List[float]:
        """Hues the pass would assign, in point order."""
        points = point_set.snapshot()
        n = len(points)
        hues = [p.hsv[0] for p in points]
        if n < 2:
            return hues

        first = hues[0]
        last = wrap_hue(first + self.hue_span) if self.hue_span is not None else hues[-1]

        positions = np.array([p.position for p in points], dtype=np.float64)
        extent = positions[-1] - positions[0]
        if extent > 0.0:
            fractions = (positions - positions[0]) / extent
        else:
            fractions = np.arange(n, dtype=np.float64) / (n - 1)

        interior = hue_lerp(first, last, fractions[1:-1], HueMode.SHORTEST)
        return [first, *(float(h) for h in np.atleast_1d(interior)), last]

    def apply(self, point_set: ControlPointSet) -> bool:
        """
        Rewrite the hues of point_set in place.

        Returns:
            True if any hue changed
        """
        if len(point_set) < 2:
            return False
        hues = self.compute_hues(point_set)
        current = [p.hsv[0] for p in point_set]
        if hues == current:
            return False
        point_set.set_hues(hues)
        logger.debug("Auto hue reassigned %d points", len(hues))
        return True
