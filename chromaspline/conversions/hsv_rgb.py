import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import cyclic_wrap_float


def hsv_to_unit_rgb(h: float, s: float, v: float):
    """
    Convert HSV to nonlinear sRGB (0..1).

    Input:
        h in degrees, wrapped into [0, 360)
        s, v in [0, 1]

    Output:
        (r, g, b) in [0, 1]
    """
    h = cyclic_wrap_float(h, 0.0, 360.0)
    if s == 0.0:
        return v, v, v

    sector = h / 60.0
    i = int(sector) % 6
    f = sector - int(sector)
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def unit_rgb_to_hsv(r: float, g: float, b: float):
    """
    Convert nonlinear sRGB (0..1) to HSV.

    Output:
        h in [0, 360), achromatic colors get hue 0
        s, v in [0, 1]
    """
    V = max(r, g, b)
    m = min(r, g, b)
    delta = V - m

    if delta == 0:
        h = 0.0
    elif V == r:
        h = 60.0 * (((g - b) / delta) % 6)
    elif V == g:
        h = 60.0 * ((b - r) / delta + 2)
    else:
        h = 60.0 * ((r - g) / delta + 4)

    S = 0.0 if V == 0 else delta / V
    return h % 360.0, S, V


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to nonlinear sRGB (0..1).

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, [0,1] saturation
        v: array-like or scalar, [0,1] value

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    sector = np.mod(h, 360.0) / 60.0
    i = np.floor(sector).astype(int) % 6
    f = sector - np.floor(sector)
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    r = np.choose(i, [v, q, p, p, t, v])
    g = np.choose(i, [t, v, v, q, p, p])
    b = np.choose(i, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert nonlinear sRGB (0..1) to HSV.

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    V = np.maximum.reduce([r, g, b])
    m = np.minimum.reduce([r, g, b])
    delta = V - m
    safe_delta = np.where(delta == 0, 1.0, delta)

    h = np.where(
        V == r,
        60.0 * np.mod((g - b) / safe_delta, 6),
        np.where(
            V == g,
            60.0 * ((b - r) / safe_delta + 2),
            60.0 * ((r - g) / safe_delta + 4),
        ),
    )
    h = np.where(delta == 0, 0.0, np.mod(h, 360.0))

    S = np.where(V > 0, delta / np.where(V > 0, V, 1.0), 0.0)

    return np.stack([h, S, V], axis=-1)
