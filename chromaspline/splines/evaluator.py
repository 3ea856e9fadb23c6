"""
Spline evaluation over an immutable snapshot of control points.

A SplineEvaluator is built once per (snapshot, mode, hue mode) and is pure
afterwards: evaluate(t) and evaluate_many(ts) share one vectorized code
path, so a single sample and a strip sample at the same t agree exactly.
"""
from __future__ import annotations
from logging import getLogger
from typing import Callable, Dict, Sequence, Union
import warnings

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from .. import config
from ..colors import UnitHSV
from ..control_points.point import ColorSpacePoint
from ..errors import DegenerateSegmentWarning, EmptyControlSet, PolynomialModeWarning
from ..types.spline_types import HueMode, SplineMode
from ..utils.hue import unwrap_hues, wrap_hue
from .basis import barycentric_eval, barycentric_weights, cubic_bezier, hermite, lerp, solve_bezier_parameter
from .segments import locate_segments
from .tangents import bezier_handles, catmull_rom_slopes, resolve_slopes

logger = getLogger(__name__)

_clamp_unit = bound_type_to_np_function[BoundType.CLAMP]


class SplineEvaluator:
    """
    Maps t in [0, 1] to an HSV color through the given control points.

    Args:
        points: Control points sorted by position
        mode: Interpolation algorithm
        hue_mode: Direction hue travels between consecutive points

    Raises:
        EmptyControlSet: if points is empty
    """

    def __init__(
        self,
        points: Sequence[ColorSpacePoint],
        mode: SplineMode = config.DEFAULT_SPLINE_MODE,
        hue_mode: HueMode = config.DEFAULT_HUE_MODE,
    ) -> None:
        self.points = tuple(points)
        if not self.points:
            raise EmptyControlSet()
        self.mode = SplineMode(mode)
        self.hue_mode = HueMode(hue_mode)

        self._x = np.array([p.position for p in self.points], dtype=np.float64)
        self._stored = np.array([p.hsv for p in self.points], dtype=np.float64)
        self._c = self._stored.copy()
        self._c[:, 0] = unwrap_hues(self._stored[:, 0], self.hue_mode)

        if len(self.points) > 1 and np.any(np.diff(self._x) <= 0.0):
            warnings.warn(
                "Control points share a position; the zero-length segment renders "
                "as the left point's color",
                DegenerateSegmentWarning,
                stacklevel=2,
            )
        if len(self.points) > 1:
            _PREPARE[self.mode](self)
        logger.debug(
            "Built %s evaluator over %d points (hue mode %s)",
            self.mode.value, len(self.points), self.hue_mode.name,
        )

    def __len__(self) -> int:
        return len(self.points)

    def evaluate(self, t: float) -> UnitHSV:
        """Color at a single position; t outside [0, 1] is clamped."""
        row = self.evaluate_many(np.array([t], dtype=np.float64))[0]
        return UnitHSV(tuple(float(v) for v in row))

    def evaluate_many(self, ts: Union[Sequence[float], np.ndarray]) -> np.ndarray:
        """
        Colors at many positions.

        Returns:
            float64 array of shape (R, 3) holding (h, s, v) rows
        """
        t = np.clip(np.asarray(ts, dtype=np.float64).ravel(), 0.0, 1.0)
        if len(self.points) == 1:
            return np.repeat(self._stored, t.shape[0], axis=0)

        t = np.clip(t, self._x[0], self._x[-1])
        index, u, degenerate = locate_segments(self._x, t)
        raw = _INTERPOLATE[self.mode](self, t, index, u)

        out = np.empty_like(raw)
        out[:, 0] = wrap_hue(raw[:, 0])
        out[:, 1:] = _clamp_unit(raw[:, 1:], 0.0, 1.0)

        # stored colors are returned untouched at the control points
        on_left = degenerate | (u == 0.0)
        on_right = ~degenerate & (u == 1.0)
        out = np.where(on_left[:, None], self._stored[index], out)
        out = np.where(on_right[:, None], self._stored[index + 1], out)
        return out

    # ------------------ PER-MODE PREPARATION ------------------
    def _prepare_hermite(self) -> None:
        auto = catmull_rom_slopes(self._x, self._c)
        self._slope_in, self._slope_out = resolve_slopes(self.points, auto)

    def _prepare_bezier(self) -> None:
        auto = catmull_rom_slopes(self._x, self._c)
        self._handle_out, self._handle_in = bezier_handles(self.points, self._x, self._c, auto)

    def _prepare_polynomial(self) -> None:
        if len(self.points) > config.POLYNOMIAL_WARN_POINTS:
            warnings.warn(
                f"Polynomial interpolation through {len(self.points)} points is likely "
                "to oscillate between them",
                PolynomialModeWarning,
                stacklevel=3,
            )
        # tied positions keep only the last point
        keep = np.append(self._x[1:] != self._x[:-1], True)
        self._nodes = self._x[keep]
        self._node_values = self._c[keep]
        self._weights = barycentric_weights(self._nodes)


# ------------------ PER-MODE INTERPOLATION ------------------
def _interpolate_linear(ev: SplineEvaluator, t, index, u) -> np.ndarray:
    return lerp(ev._c[index], ev._c[index + 1], u[:, None])


def _interpolate_hermite(ev: SplineEvaluator, t, index, u) -> np.ndarray:
    length = (ev._x[index + 1] - ev._x[index])[:, None]
    m0 = ev._slope_out[index] * length
    m1 = ev._slope_in[index + 1] * length
    return hermite(ev._c[index], ev._c[index + 1], m0, m1, u[:, None])


def _interpolate_bezier(ev: SplineEvaluator, t, index, u) -> np.ndarray:
    h_out = ev._handle_out[index]
    h_in = ev._handle_in[index]
    s = solve_bezier_parameter(
        ev._x[index], h_out[:, 0], h_in[:, 0], ev._x[index + 1], t,
        config.BEZIER_SOLVER_ITERATIONS, config.BEZIER_SOLVER_TOLERANCE,
    )
    return cubic_bezier(ev._c[index], h_out[:, 1:], h_in[:, 1:], ev._c[index + 1], s[:, None])


def _interpolate_polynomial(ev: SplineEvaluator, t, index, u) -> np.ndarray:
    if ev._nodes.shape[0] == 1:
        return np.repeat(ev._node_values, t.shape[0], axis=0)
    return barycentric_eval(ev._nodes, ev._weights, ev._node_values, t)


_PREPARE: Dict[SplineMode, Callable[[SplineEvaluator], None]] = {
    SplineMode.LINEAR: lambda ev: None,
    SplineMode.HERMITE: SplineEvaluator._prepare_hermite,
    SplineMode.HERMITE_BEZIER: SplineEvaluator._prepare_bezier,
    SplineMode.POLYNOMIAL: SplineEvaluator._prepare_polynomial,
}

_INTERPOLATE = {
    SplineMode.LINEAR: _interpolate_linear,
    SplineMode.HERMITE: _interpolate_hermite,
    SplineMode.HERMITE_BEZIER: _interpolate_bezier,
    SplineMode.POLYNOMIAL: _interpolate_polynomial,
}
