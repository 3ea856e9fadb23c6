"""
Serializable snapshot of a gradient: points, spline and hue modes, and options.

Presets are plain data. Storing them on disk is left to the caller;
to_json/from_json only produce and parse the text.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from logging import getLogger
from typing import Any, Dict, Mapping, Optional, Tuple
import json
import math

from . import config
from .colors import UnitHSV
from .control_points import ColorSpacePoint, Tangent
from .errors import PresetInvalid
from .options import SessionOptions
from .types.spline_types import HueMode, SplineMode

logger = getLogger(__name__)


def _number(data: Mapping[str, Any], key: str, where: str) -> float:
    if key not in data:
        raise PresetInvalid(f"{where}: missing key {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PresetInvalid(f"{where}: {key!r} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise PresetInvalid(f"{where}: {key!r} must be finite, got {value!r}")
    return float(value)


def _tangent_to_dict(tangent: Optional[Tangent]) -> Optional[Dict[str, float]]:
    if tangent is None:
        return None
    dh, ds, dv = tangent.dcolor
    return {"dposition": tangent.dposition, "dhue": dh, "dsaturation": ds, "dvalue": dv}


def _tangent_from_dict(data: Any, where: str) -> Optional[Tangent]:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise PresetInvalid(f"{where}: tangent must be an object, got {data!r}")
    return Tangent(
        _number(data, "dposition", where),
        (_number(data, "dhue", where), _number(data, "dsaturation", where), _number(data, "dvalue", where)),
    )


def _point_to_dict(point: ColorSpacePoint) -> Dict[str, Any]:
    h, s, v = point.hsv
    out: Dict[str, Any] = {"position": point.position, "hue": h, "saturation": s, "value": v}
    if point.tangent_in is not None:
        out["tangent_in"] = _tangent_to_dict(point.tangent_in)
    if point.tangent_out is not None:
        out["tangent_out"] = _tangent_to_dict(point.tangent_out)
    return out


def _point_from_dict(data: Any, index: int) -> ColorSpacePoint:
    where = f"control_points[{index}]"
    if not isinstance(data, Mapping):
        raise PresetInvalid(f"{where}: expected an object, got {data!r}")
    position = _number(data, "position", where)
    if not 0.0 <= position <= 1.0:
        raise PresetInvalid(f"{where}: position {position} is outside [0, 1]")
    color = UnitHSV((
        _number(data, "hue", where),
        _number(data, "saturation", where),
        _number(data, "value", where),
    ))
    return ColorSpacePoint(
        position,
        color,
        _tangent_from_dict(data.get("tangent_in"), where),
        _tangent_from_dict(data.get("tangent_out"), where),
    )


def _options_from_dict(data: Any) -> SessionOptions:
    if data is None:
        return SessionOptions()
    if not isinstance(data, Mapping):
        raise PresetInvalid(f"options must be an object, got {data!r}")
    try:
        return SessionOptions(
            lock=data.get("lock", False),
            auto_hue=data.get("auto_hue", False),
            insert_direction=data.get("insert_direction", config.DEFAULT_INSERT_DIRECTION),
            constrain=data.get("constrain", False),
        )
    except (TypeError, ValueError) as e:
        raise PresetInvalid(f"Invalid options: {e}") from e


@dataclass(frozen=True)
class PresetData:
    name: str
    spline_mode: SplineMode = config.DEFAULT_SPLINE_MODE
    points: Tuple[ColorSpacePoint, ...] = ()
    options: SessionOptions = field(default_factory=SessionOptions)
    hue_mode: HueMode = config.DEFAULT_HUE_MODE

    def __post_init__(self):
        object.__setattr__(self, "spline_mode", SplineMode(self.spline_mode))
        object.__setattr__(self, "hue_mode", HueMode(self.hue_mode))
        # stable sort keeps the stored order of tied points
        object.__setattr__(self, "points", tuple(sorted(self.points, key=lambda p: p.position)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "schema_version": config.PRESET_SCHEMA_VERSION,
            "spline_mode": self.spline_mode.value,
            "hue_mode": self.hue_mode.name.lower(),
            "options": {
                "lock": self.options.lock,
                "auto_hue": self.options.auto_hue,
                "insert_direction": self.options.insert_direction.value,
                "constrain": self.options.constrain,
            },
            "control_points": [_point_to_dict(p) for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: Any) -> PresetData:
        """
        Build a preset from its dict form.

        Raises:
            PresetInvalid: on missing keys, wrong types, an unknown spline
                or hue mode, non-finite numbers or positions outside [0, 1]
        """
        if not isinstance(data, Mapping):
            raise PresetInvalid(f"Preset must be an object, got {type(data).__name__}")
        name = data.get("name", "untitled")
        if not isinstance(name, str):
            raise PresetInvalid(f"Preset name must be a string, got {name!r}")

        version = data.get("schema_version", config.PRESET_SCHEMA_VERSION)
        if version != config.PRESET_SCHEMA_VERSION:
            logger.warning("Preset %r has schema version %r, expected %r", name, version, config.PRESET_SCHEMA_VERSION)

        if "spline_mode" not in data:
            raise PresetInvalid("Preset is missing 'spline_mode'")
        try:
            mode = SplineMode(data["spline_mode"])
        except ValueError as e:
            raise PresetInvalid(f"Unknown spline mode {data['spline_mode']!r}") from e

        raw_hue_mode = data.get("hue_mode", config.DEFAULT_HUE_MODE.name.lower())
        if not isinstance(raw_hue_mode, str) or raw_hue_mode.upper() not in HueMode.__members__:
            raise PresetInvalid(f"Unknown hue mode {raw_hue_mode!r}")
        hue_mode = HueMode[raw_hue_mode.upper()]

        raw_points = data.get("control_points")
        if not isinstance(raw_points, (list, tuple)):
            raise PresetInvalid("Preset 'control_points' must be a list")
        points = tuple(_point_from_dict(p, i) for i, p in enumerate(raw_points))

        return cls(name, mode, points, _options_from_dict(data.get("options")), hue_mode)

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_json(cls, text: str) -> PresetData:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PresetInvalid(f"Preset is not valid JSON: {e}") from e
        return cls.from_dict(data)
