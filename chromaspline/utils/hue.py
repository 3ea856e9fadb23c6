"""
Hue arithmetic on the [0, 360) circle.

Every cubic and polynomial spline works on *unwrapped* hues: consecutive
control point hues are re-expressed so that the step between them follows the
selected HueMode (shortest arc by default), the curve is evaluated on those
continuous values, and the result is wrapped back onto the circle.
"""
from __future__ import annotations
from typing import Sequence, Union
import numpy as np
from boundednumbers.functions import cyclic_wrap_float

from ..types.format_type import HUE_360
from ..types.spline_types import HueMode

ArrayOrFloat = Union[float, np.ndarray]


def wrap_hue(hue: ArrayOrFloat) -> ArrayOrFloat:
    """Wrap hue(s) into [0, 360)."""
    wrapped = cyclic_wrap_float(hue, 0.0, HUE_360)
    # float modulo can land exactly on the modulus for tiny negatives
    if isinstance(wrapped, np.ndarray):
        return np.where(wrapped >= HUE_360, 0.0, wrapped)
    wrapped = float(wrapped)
    return 0.0 if wrapped >= HUE_360 else wrapped


def hue_delta(h0: ArrayOrFloat, h1: ArrayOrFloat, mode: HueMode = HueMode.SHORTEST) -> ArrayOrFloat:
    """
    Signed step from h0 to h1 following the given direction.

    SHORTEST: in (-180, 180]; a difference of exactly 180 keeps its sign
    LONGEST:  the complementary arc of SHORTEST
    CW:       in [0, 360)
    CCW:      in (-360, 0]
    """
    raw = np.asarray(h1, dtype=float) - np.asarray(h0, dtype=float)
    ccw_free = np.mod(raw, HUE_360)
    ccw_free = np.where(ccw_free >= HUE_360, 0.0, ccw_free)

    if mode == HueMode.CW:
        delta = ccw_free
    elif mode == HueMode.CCW:
        delta = np.where(ccw_free == 0.0, 0.0, ccw_free - HUE_360)
    else:
        shortest = np.where(np.abs(raw) <= 180.0, raw, np.where(ccw_free > 180.0, ccw_free - HUE_360, ccw_free))
        if mode == HueMode.SHORTEST:
            delta = shortest
        elif mode == HueMode.LONGEST:
            delta = np.where(shortest == 0.0, 0.0, shortest - np.sign(shortest) * HUE_360)
        else:
            raise ValueError(f"Invalid hue mode: {mode}")

    if np.ndim(delta) == 0:
        return float(delta)
    return delta


def hue_lerp(h0: ArrayOrFloat, h1: ArrayOrFloat, u: ArrayOrFloat, mode: HueMode = HueMode.SHORTEST) -> ArrayOrFloat:
    """
    Interpolate hue values with wrapping support.

    Args:
        h0: Start hue(s) in degrees
        h1: End hue(s) in degrees
        u: Interpolation coefficients in [0, 1]
        mode: Direction around the circle

    Returns:
        Interpolated hue values in [0, 360)
    """
    return wrap_hue(np.asarray(h0, dtype=float) + hue_delta(h0, h1, mode) * np.asarray(u, dtype=float))


def unwrap_hues(hues: Sequence[float], mode: HueMode = HueMode.SHORTEST) -> np.ndarray:
    """
    Re-express a hue sequence as continuous values.

    The first hue is kept as is; every following hue becomes the previous
    unwrapped hue plus hue_delta(previous, current, mode).
    """
    hues = np.asarray(hues, dtype=float)
    if hues.size == 0:
        return hues.copy()
    steps = hue_delta(hues[:-1], hues[1:], mode)
    return np.concatenate(([hues[0]], hues[0] + np.cumsum(steps)))


def hue_distance(h0: ArrayOrFloat, h1: ArrayOrFloat) -> ArrayOrFloat:
    """Absolute angular distance in [0, 180]."""
    return np.abs(hue_delta(h0, h1, HueMode.SHORTEST))
