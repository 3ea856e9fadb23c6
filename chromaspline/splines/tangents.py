"""
Slope estimation for the cubic spline modes.

Slopes are derivatives of color with respect to position (dcolor/dx),
computed on unwrapped hues. Explicit tangents override the automatic
estimate on the side they belong to.
"""
from typing import Optional, Sequence, Tuple
import numpy as np

from ..control_points.point import ColorSpacePoint, Tangent


def _safe_div(num: np.ndarray, den: np.ndarray) -> np.ndarray:
    den = den[:, None]
    return np.where(den > 0.0, num / np.where(den > 0.0, den, 1.0), 0.0)


def catmull_rom_slopes(x: np.ndarray, c: np.ndarray) -> np.ndarray:
    """
    Non-uniform Catmull-Rom slopes.

    m_i = (c[i+1] - c[i-1]) / (x[i+1] - x[i-1]) for interior points and a
    one-sided difference at both ends. Zero-width spans give a flat slope.

    Args:
        x: Positions, shape (N,)
        c: Channel values, shape (N, C)
    """
    n = x.shape[0]
    slopes = np.zeros_like(c)
    if n < 2:
        return slopes
    slopes[0] = _safe_div(c[1:2] - c[0:1], x[1:2] - x[0:1])[0]
    slopes[-1] = _safe_div(c[-1:] - c[-2:-1], x[-1:] - x[-2:-1])[0]
    if n > 2:
        slopes[1:-1] = _safe_div(c[2:] - c[:-2], x[2:] - x[:-2])
    return slopes


def _explicit_slope(tangent: Optional[Tangent]) -> Optional[Tuple[float, float, float]]:
    if tangent is None:
        return None
    return tangent.slope()


def resolve_slopes(points: Sequence[ColorSpacePoint], auto: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Per-point incoming and outgoing slopes.

    A tangent with zero dposition has no usable slope and falls back to the
    automatic one.

    Returns:
        (slope_in, slope_out), each shaped like auto
    """
    slope_in = auto.copy()
    slope_out = auto.copy()
    for i, point in enumerate(points):
        s_in = _explicit_slope(point.tangent_in)
        s_out = _explicit_slope(point.tangent_out)
        if s_in is not None:
            slope_in[i] = s_in
        if s_out is not None:
            slope_out[i] = s_out
    return slope_in, slope_out


def bezier_handles(
    points: Sequence[ColorSpacePoint],
    x: np.ndarray,
    c: np.ndarray,
    auto: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Absolute Bezier handles for every segment in the (position, color) plane.

    Missing tangents default to a third of the segment along the automatic
    slope, which reproduces the Hermite curve exactly. Handle positions are
    clamped into their segment so the curve stays a function of position.

    Returns:
        (outgoing, incoming), each of shape (N-1, 1 + C): the handle after
        the left point and the handle before the right point of each segment.
    """
    n = x.shape[0]
    channels = c.shape[1]
    outgoing = np.empty((n - 1, 1 + channels))
    incoming = np.empty((n - 1, 1 + channels))

    for i in range(n - 1):
        length = x[i + 1] - x[i]
        t_out = points[i].tangent_out
        t_in = points[i + 1].tangent_in

        if t_out is not None:
            d_out = np.array((t_out.dposition, *t_out.dcolor))
        else:
            d_out = np.concatenate(([length / 3.0], auto[i] * length / 3.0))
        if t_in is not None:
            d_in = np.array((t_in.dposition, *t_in.dcolor))
        else:
            d_in = np.concatenate(([-length / 3.0], -auto[i + 1] * length / 3.0))

        outgoing[i, 0] = x[i] + d_out[0]
        outgoing[i, 1:] = c[i] + d_out[1:]
        incoming[i, 0] = x[i + 1] + d_in[0]
        incoming[i, 1:] = c[i + 1] + d_in[1:]

    outgoing[:, 0] = np.clip(outgoing[:, 0], x[:-1], x[1:])
    incoming[:, 0] = np.clip(incoming[:, 0], x[:-1], x[1:])
    return outgoing, incoming
