"""
Scalar-per-sample curve bases.

Every function broadcasts: u has shape (R,) or (R, 1) and the control
values have shape (R, C), so one call evaluates R samples at once.
"""
import numpy as np


def lerp(c0: np.ndarray, c1: np.ndarray, u: np.ndarray) -> np.ndarray:
    return c0 + (c1 - c0) * u


def hermite(c0: np.ndarray, c1: np.ndarray, m0: np.ndarray, m1: np.ndarray, u: np.ndarray) -> np.ndarray:
    """
    Cubic Hermite segment.

    m0 and m1 are the end slopes already scaled to the segment's length,
    i.e. derivatives with respect to u.
    """
    u2 = u * u
    u3 = u2 * u
    h00 = 2.0 * u3 - 3.0 * u2 + 1.0
    h10 = u3 - 2.0 * u2 + u
    h01 = -2.0 * u3 + 3.0 * u2
    h11 = u3 - u2
    return h00 * c0 + h10 * m0 + h01 * c1 + h11 * m1


def cubic_bezier(p0, p1, p2, p3, s):
    s1 = 1.0 - s
    return s1 * s1 * s1 * p0 + 3.0 * s1 * s1 * s * p1 + 3.0 * s1 * s * s * p2 + s * s * s * p3


def cubic_bezier_derivative(p0, p1, p2, p3, s):
    s1 = 1.0 - s
    return 3.0 * (s1 * s1 * (p1 - p0) + 2.0 * s1 * s * (p2 - p1) + s * s * (p3 - p2))


def solve_bezier_parameter(
    x0: np.ndarray,
    x1: np.ndarray,
    x2: np.ndarray,
    x3: np.ndarray,
    t: np.ndarray,
    iterations: int,
    tolerance: float,
) -> np.ndarray:
    """
    Find s in [0, 1] with cubic_bezier(x0, x1, x2, x3, s) == t.

    Requires x0 <= t <= x3. Newton steps that leave the current bracket, or
    hit a flat derivative, fall back to bisection, so the result always
    stays inside [0, 1].
    """
    span = x3 - x0
    safe_span = np.where(span > 0.0, span, 1.0)
    s = np.clip((t - x0) / safe_span, 0.0, 1.0)
    lo = np.zeros_like(s)
    hi = np.ones_like(s)

    for _ in range(iterations):
        err = cubic_bezier(x0, x1, x2, x3, s) - t
        if np.all(np.abs(err) <= tolerance):
            break
        lo = np.where(err < 0.0, s, lo)
        hi = np.where(err > 0.0, s, hi)
        d = cubic_bezier_derivative(x0, x1, x2, x3, s)
        safe_d = np.where(np.abs(d) > 1e-14, d, 1.0)
        newton = s - err / safe_d
        inside = (np.abs(d) > 1e-14) & (newton > lo) & (newton < hi)
        s = np.where(np.abs(err) <= tolerance, s, np.where(inside, newton, 0.5 * (lo + hi)))

    return s


def barycentric_weights(x: np.ndarray) -> np.ndarray:
    """Weights of the second barycentric form for distinct nodes x."""
    diff = x[:, None] - x[None, :]
    np.fill_diagonal(diff, 1.0)
    return 1.0 / np.prod(diff, axis=1)


def barycentric_eval(x: np.ndarray, w: np.ndarray, y: np.ndarray, t: np.ndarray) -> np.ndarray:
    """
    Evaluate the interpolating polynomial through (x, y) at t.

    Args:
        x: Distinct nodes, shape (N,)
        w: barycentric_weights(x)
        y: Node values, shape (N, C)
        t: Query positions, shape (R,)

    Returns:
        Array of shape (R, C)
    """
    diff = t[:, None] - x[None, :]
    exact = diff == 0.0
    safe = np.where(exact, 1.0, diff)
    k = w[None, :] / safe

    # accumulate node by node so a row's result does not depend on R
    num = np.zeros((t.shape[0], y.shape[1]))
    den = np.zeros((t.shape[0], 1))
    for j in range(x.shape[0]):
        num += k[:, j:j + 1] * y[j]
        den += k[:, j:j + 1]

    # rows sitting on a node are overwritten below, so keep their divisor finite
    hit_rows = np.any(exact, axis=1)
    out = num / np.where(hit_rows[:, None], 1.0, den)
    if np.any(hit_rows):
        out[hit_rows] = y[np.argmax(exact[hit_rows], axis=1)]
    return out
