"""
Turning sampled strips into pixel data.

Only in-memory results are produced; encoding to a file format is left to
the caller (e.g. ``strip_to_image(...).save("strip.png")``).
"""
from typing import Union
import numpy as np
from PIL import Image

from . import config
from .colors import ColorBase, UnitHSV
from .types.color_types import ColorSpace
from .types.format_type import FormatType


def _strip_to_rgb8(colors: Union[ColorBase, np.ndarray]) -> np.ndarray:
    if not isinstance(colors, ColorBase):
        # bare arrays are unit HSV rows as returned by SplineEvaluator.evaluate_many
        colors = UnitHSV(np.asarray(colors, dtype=np.float64))
    return colors.convert(ColorSpace.RGB, FormatType.INT).to_uint8()


def strip_to_pixels(colors: Union[ColorBase, np.ndarray], height: int = config.DEFAULT_EXPORT_HEIGHT) -> np.ndarray:
    """
    Repeat a strip of R colors into an image array.

    Returns:
        uint8 array of shape (height, R, 3)
    """
    if height < 1:
        raise ValueError(f"Export height must be at least 1, got {height}")
    rgb = _strip_to_rgb8(colors)
    if rgb.ndim != 2 or rgb.shape[-1] != 3:
        raise ValueError(f"Expected a strip of shape (R, 3), got {rgb.shape}")
    return np.ascontiguousarray(np.broadcast_to(rgb[None, :, :], (height, rgb.shape[0], 3)))


def strip_to_image(colors: Union[ColorBase, np.ndarray], height: int = config.DEFAULT_EXPORT_HEIGHT) -> Image.Image:
    return Image.fromarray(strip_to_pixels(colors, height))
