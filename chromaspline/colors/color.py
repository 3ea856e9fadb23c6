from __future__ import annotations
from numpy import ndarray

from .color_base import ColorBase
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace
from ..conversions import convert, np_convert


def get_color_class(color_space: ColorSpace | str, format_type: FormatType | str) -> type[ColorBase]:
    color_class = ColorBase.registry.get((ColorSpace(color_space), FormatType(format_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{format_type}"
        )
    return color_class


def color_convert(self: ColorBase, to_space: ColorSpace | str | None = None, to_format: FormatType | str | None = None) -> ColorBase:
    """
    Convert to another color space and/or format.

    Missing arguments keep the current space or format. Array colors stay
    arrays and scalar colors stay tuples.
    """
    to_space = ColorSpace(to_space) if to_space is not None else self.mode
    to_format = FormatType(to_format) if to_format is not None else self.format_type

    convert_fn = np_convert if isinstance(self.value, ndarray) else convert
    result = convert_fn(self.value, self.mode, to_space, self.format_type, to_format)
    return get_color_class(to_space, to_format)(result)


ColorBase.convert = color_convert
