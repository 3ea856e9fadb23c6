from __future__ import annotations
import numpy as np
from typing import Callable, cast

from ..types.format_type import FormatType, FORMAT_INFO
from ..types.color_types import ColorElement, ColorSpace, element_to_array
from .hsv_rgb import np_hsv_to_unit_rgb, np_unit_rgb_to_hsv

CONVERT_NUMPY: dict[tuple[ColorSpace, ColorSpace], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    (ColorSpace.RGB, ColorSpace.HSV): np_unit_rgb_to_hsv,
    (ColorSpace.HSV, ColorSpace.RGB): np_hsv_to_unit_rgb,
}


def normalize(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    maxval = FORMAT_INFO[fmt].channel_max

    if space == ColorSpace.RGB:
        return color / maxval

    if space == ColorSpace.HSV:
        h = color[..., 0]
        s = color[..., 1] / maxval
        v = color[..., 2] / maxval
        return np.stack([h, s, v], axis=-1)

    raise ValueError(f"Unknown space: {space}")


def scale(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    maxval = FORMAT_INFO[fmt].channel_max

    if space == ColorSpace.RGB:
        scaled = color * maxval
        return np.round(scaled).astype(int) if fmt == FormatType.INT else scaled

    if space == ColorSpace.HSV:
        h = color[..., 0]
        s = color[..., 1] * maxval
        v = color[..., 2] * maxval

        if fmt == FormatType.INT:
            # 360 would round back onto 0
            h_int = np.mod(np.round(h), 360)
            return np.stack([h_int, np.round(s), np.round(v)], axis=-1).astype(int)

        return np.stack([h, s, v], axis=-1)

    raise ValueError(f"Unknown space: {space}")


def _convert_core(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    # normalize -> convert -> scale
    base_norm = normalize(color, from_space, input_fmt)

    if from_space == to_space:
        converted = base_norm
    else:
        converted = CONVERT_NUMPY[(from_space, to_space)](
            base_norm[..., 0],
            base_norm[..., 1],
            base_norm[..., 2],
        )

    return scale(converted, to_space, output_fmt)


def convert(
    color: ColorElement,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    input_type: FormatType | str = FormatType.FLOAT,
    output_type: FormatType | str = FormatType.FLOAT,
) -> ColorElement:
    from_space, to_space = ColorSpace(from_space), ColorSpace(to_space)
    input_type, output_type = FormatType(input_type), FormatType(output_type)
    if from_space == to_space and input_type == output_type:
        return color  # No conversion needed
    result = _convert_core(
        element_to_array(color),
        from_space,
        to_space,
        input_type,
        output_type,
    )
    # Convert back to tuple for scalar output
    return tuple(v.item() for v in result.flat) if result.ndim == 1 else cast(ColorElement, result)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
    input_type: FormatType | str = FormatType.FLOAT,
    output_type: FormatType | str = FormatType.FLOAT,
) -> np.ndarray:
    from_space, to_space = ColorSpace(from_space), ColorSpace(to_space)
    input_type, output_type = FormatType(input_type), FormatType(output_type)
    if from_space == to_space and input_type == output_type:
        return color  # No conversion needed
    return _convert_core(
        np.asarray(color, dtype=float),
        from_space,
        to_space,
        input_type,
        output_type,
    )
