from __future__ import annotations
from typing import Any, ClassVar, Dict, Tuple, cast
from numpy import ndarray
import numpy as np
from boundednumbers import clamp

from ..types.format_type import FormatType, FORMAT_INFO
from ..types.color_types import ColorSpace, ColorValue, Scalar, HUE_SPACES
from ..utils.hue import wrap_hue


class ColorBase:
    __slots__ = ('_value',)

    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace]
    maxima:      ClassVar[Tuple[Scalar, ...]]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # instances flip their own copy at the end of __init__

    # (mode, format_type) -> concrete class, filled as subclasses are defined
    registry: ClassVar[Dict[Tuple[ColorSpace, FormatType], type]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        ColorBase.registry[(cls.mode, cls.format_type)] = cls

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue) -> None:
        if isinstance(value, ColorBase):
            value = value.convert(self.mode, self.format_type).value

        if isinstance(value, ndarray):
            value = self._coerce_array(value)
        else:
            value = self._coerce_tuple(value)

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # no more writes after this point
        super().__setattr__('_is_frozen', True)

    # ------------------ COERCION ------------------
    def _coerce_array(self, arr: ndarray) -> ndarray:
        valid_types = FORMAT_INFO[self.format_type].accepts
        if not isinstance(arr.dtype.type(0), valid_types):
            raise TypeError(
                f"{self.mode} with format {self.format_type} expects dtype compatible with {valid_types}, "
                f"got {arr.dtype}"
            )
        if arr.shape[-1] != self.num_channels:
            raise ValueError(
                f"{self.mode} expects last dimension to be {self.num_channels}, "
                f"got shape {arr.shape}"
            )
        arr = arr.astype(FORMAT_INFO[self.format_type].dtype, copy=True)
        maxima = np.array(self.maxima, dtype=arr.dtype)
        if self.has_hue:
            arr[..., 0] = wrap_hue(arr[..., 0])
            arr[..., 1:] = np.clip(arr[..., 1:], 0, maxima[1:])
        else:
            arr = np.clip(arr, 0, maxima)
        arr.setflags(write=False)
        return arr

    def _coerce_tuple(self, value: Any) -> Tuple[Scalar, ...]:
        values = tuple(cast(Tuple[Scalar, ...], value))
        if len(values) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels}-channel value, got {value!r}")
        cast_to = FORMAT_INFO[self.format_type].scalar
        out = []
        for i, (v, m) in enumerate(zip(values, self.maxima)):
            v = float(v)
            if not np.isfinite(v):
                raise ValueError(f"{self.mode} channel {i} is not finite: {v!r}")
            if i == 0 and self.has_hue:
                v = wrap_hue(v)
            else:
                v = clamp(v, 0.0, float(m))
                if self.format_type == FormatType.INT:
                    v = round(v)
            out.append(cast_to(v))
        return tuple(out)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def __len__(self) -> int:
        if isinstance(self._value, ndarray):
            return self._value.shape[0]
        return self.num_channels

    def __iter__(self):
        return iter(self._value)

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if type(self) is not type(other):
            return False
        if self.is_array or other.is_array:
            return bool(self.is_array and other.is_array and np.array_equal(self._value, other._value))
        return self._value == other._value

    def __hash__(self) -> int:
        if isinstance(self._value, ndarray):
            return hash((type(self), self._value.tobytes()))
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        if isinstance(self._value, ndarray):
            return f"{self.__class__.__name__}(shape={self._value.shape})"
        return f"{self.__class__.__name__}({self._value!r})"

    def convert(self, to_space: ColorSpace | str | None = None, to_format: FormatType | str | None = None) -> ColorBase:
        # Bound in .color to avoid an import cycle
        raise NotImplementedError
