from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union
import math

from ..colors import UnitHSV, ColorBase
from ..types.color_types import HSVTuple

ColorLike = Union[UnitHSV, ColorBase, Tuple[float, float, float]]


def as_unit_hsv(color: ColorLike) -> UnitHSV:
    """Coerce a color or an (h, s, v) triple into a UnitHSV."""
    if isinstance(color, UnitHSV):
        return color
    return UnitHSV(color)


@dataclass(frozen=True)
class Tangent:
    """
    Offset from a control point to one of its curve handles.

    dposition is measured along the gradient axis; dcolor is (dh, ds, dv)
    with dh in degrees. A point's incoming tangent normally has
    dposition <= 0 and its outgoing tangent dposition >= 0.
    """
    dposition: float = 0.0
    dcolor: HSVTuple = (0.0, 0.0, 0.0)

    def __post_init__(self):
        dcolor = tuple(float(c) for c in self.dcolor)
        if len(dcolor) != 3:
            raise ValueError(f"Tangent dcolor needs 3 channels, got {self.dcolor!r}")
        if not all(math.isfinite(c) for c in (self.dposition, *dcolor)):
            raise ValueError("Tangent components must be finite")
        object.__setattr__(self, "dposition", float(self.dposition))
        object.__setattr__(self, "dcolor", dcolor)

    def slope(self) -> Optional[HSVTuple]:
        """dcolor / dposition, or None when the handle is vertical."""
        if abs(self.dposition) < 1e-12:
            return None
        return tuple(c / self.dposition for c in self.dcolor)

    def flipped(self) -> Tangent:
        """The same handle mirrored through its control point."""
        return Tangent(-self.dposition, tuple(-c for c in self.dcolor))


@dataclass(frozen=True)
class PointDelta:
    """A relative edit applied to a point's position and color."""
    dposition: float = 0.0
    dhue: float = 0.0
    dsaturation: float = 0.0
    dvalue: float = 0.0

    @classmethod
    def coerce(cls, delta: Union[PointDelta, float, int]) -> PointDelta:
        if isinstance(delta, PointDelta):
            return delta
        return cls(dposition=float(delta))

    @property
    def moves_position(self) -> bool:
        return self.dposition != 0.0


@dataclass(frozen=True)
class ColorSpacePoint:
    """
    A control point: where it sits on the gradient and which color it pins.

    Instances are immutable; ControlPointSet replaces them on edit.
    """
    position: float
    color: UnitHSV = field(default_factory=lambda: UnitHSV((0.0, 0.0, 0.0)))
    tangent_in: Optional[Tangent] = None
    tangent_out: Optional[Tangent] = None

    def __post_init__(self):
        position = float(self.position)
        if not math.isfinite(position):
            raise ValueError(f"Position must be finite, got {self.position!r}")
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "color", as_unit_hsv(self.color))

    @property
    def hsv(self) -> HSVTuple:
        return self.color.value

    @property
    def has_tangents(self) -> bool:
        return self.tangent_in is not None or self.tangent_out is not None

    def with_position(self, position: float) -> ColorSpacePoint:
        return replace(self, position=position)

    def with_color(self, color: ColorLike) -> ColorSpacePoint:
        return replace(self, color=as_unit_hsv(color))

    def with_hue(self, hue: float) -> ColorSpacePoint:
        _, s, v = self.hsv
        return replace(self, color=UnitHSV((hue, s, v)))

    def with_tangents(self, tangent_in: Optional[Tangent], tangent_out: Optional[Tangent]) -> ColorSpacePoint:
        return replace(self, tangent_in=tangent_in, tangent_out=tangent_out)
