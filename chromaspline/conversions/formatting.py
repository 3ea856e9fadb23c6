"""
Color string formatting for clipboard interop.

The engine only supplies the text; putting it on a clipboard is the
application's job.
"""
from __future__ import annotations
from enum import Enum
from typing import Sequence

from boundednumbers import clamp

from .hsv_rgb import hsv_to_unit_rgb


class ColorStringFormat(str, Enum):
    HEX = "hex"          # AARRGGBB, alpha first
    HEXNOA = "hexnoa"    # RRGGBB
    RGB = "rgb"
    RGBA = "rgba"
    HSV = "hsv"
    HSVA = "hsva"
    FLOAT = "float"


def _to_byte(channel: float) -> int:
    return int(round(clamp(channel, 0.0, 1.0) * 255))


def format_color(
    hsv: Sequence[float],
    fmt: ColorStringFormat | str = ColorStringFormat.HEXNOA,
    alpha: float = 1.0,
) -> str:
    """
    Format an HSV color (hue in degrees, s/v in [0, 1]) as text.

    Args:
        hsv: (h, s, v) triple
        fmt: Output format
        alpha: Alpha in [0, 1], used by the formats that carry one

    Returns:
        Formatted string. Hex output is upper case.
    """
    fmt = ColorStringFormat(fmt)
    h, s, v = (float(c) for c in hsv)
    r, g, b = hsv_to_unit_rgb(h, s, v)
    rb, gb, bb, ab = _to_byte(r), _to_byte(g), _to_byte(b), _to_byte(alpha)

    if fmt == ColorStringFormat.HEX:
        return f"{ab:02x}{rb:02x}{gb:02x}{bb:02x}".upper()
    if fmt == ColorStringFormat.HEXNOA:
        return f"{rb:02x}{gb:02x}{bb:02x}".upper()
    if fmt == ColorStringFormat.RGB:
        return f"rgb({rb}, {gb}, {bb})"
    if fmt == ColorStringFormat.RGBA:
        return f"rgba({rb}, {gb}, {bb}, {ab})"
    if fmt == ColorStringFormat.HSV:
        return f"hsv({h:.0f}, {s * 100:.0f}%, {v * 100:.0f}%)"
    if fmt == ColorStringFormat.HSVA:
        return f"hsva({h:.0f}, {s * 100:.0f}%, {v * 100:.0f}%, {alpha:.2f})"
    return f"{r:.3f}, {g:.3f}, {b:.3f}"
