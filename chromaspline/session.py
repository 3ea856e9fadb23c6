"""
Editing session: the object a gradient editor UI talks to.

A session owns one ControlPointSet together with the selected spline mode,
the editing options, a sampler and an auto-hue pass. Edits that fail raise
before anything changes, so neither the points nor their hues are left
half-updated.
"""
from __future__ import annotations
from dataclasses import replace
from logging import getLogger
from typing import Optional, Union

from . import config
from .auto_hue import AutoHueAssigner
from .colors import UnitHSV
from .control_points import ColorSpacePoint, ControlPointSet, PointDelta, Tangent
from .control_points.point import ColorLike
from .conversions.formatting import ColorStringFormat, format_color
from .options import SessionOptions
from .preset import PresetData
from .sampler import GradientSampler
from .types.format_type import FormatType
from .types.spline_types import HueMode, SplineMode

logger = getLogger(__name__)


class EditingSession:
    """
    One gradient being edited.

    Args:
        mode: Spline mode used for sampling
        options: Editing options; defaults to SessionOptions()
        hue_mode: Direction hue travels between consecutive points
        hue_span: Span handed to the auto-hue pass
    """

    def __init__(
        self,
        mode: SplineMode = config.DEFAULT_SPLINE_MODE,
        options: Optional[SessionOptions] = None,
        hue_mode: HueMode = config.DEFAULT_HUE_MODE,
        hue_span: Optional[float] = None,
    ) -> None:
        self.mode = SplineMode(mode)
        self.options = options if options is not None else SessionOptions()
        self.sampler = GradientSampler(hue_mode)
        self.auto_hue = AutoHueAssigner(hue_span)
        self.points = self._new_point_set()

    def _new_point_set(self, points=None) -> ControlPointSet:
        return ControlPointSet(
            points,
            locked=self.options.lock,
            constrained=self.options.constrain,
            insert_direction=self.options.insert_direction,
        )

    def _after_edit(self) -> None:
        if self.options.auto_hue:
            self.auto_hue.apply(self.points)

    @property
    def hue_mode(self) -> HueMode:
        return self.sampler.hue_mode

    def __len__(self) -> int:
        return len(self.points)

    # ------------------ EDITS ------------------
    def insert_point(
        self,
        position: float,
        color: ColorLike,
        tangent_in: Optional[Tangent] = None,
        tangent_out: Optional[Tangent] = None,
    ) -> int:
        index = self.points.insert(position, color, tangent_in, tangent_out)
        self._after_edit()
        return index

    def remove_point(self, index: int) -> ColorSpacePoint:
        removed = self.points.remove(index)
        self._after_edit()
        return removed

    def translate_point(self, index: int, delta: Union[PointDelta, float]) -> int:
        new_index = self.points.translate(index, delta)
        self._after_edit()
        return new_index

    def move_point(self, index: int, position: float) -> int:
        new_index = self.points.move_to(index, position)
        self._after_edit()
        return new_index

    def set_point_color(self, index: int, color: ColorLike) -> None:
        self.points.set_color(index, color)
        self._after_edit()

    def set_point_tangents(self, index: int, tangent_in: Optional[Tangent], tangent_out: Optional[Tangent]) -> None:
        self.points.set_tangents(index, tangent_in, tangent_out)

    def flip_point_tangents(self, index: int) -> None:
        self.points.flip_tangents(index)

    def set_mode(self, mode: SplineMode) -> None:
        self.mode = SplineMode(mode)
        logger.debug("Spline mode set to %s", self.mode.value)

    def set_hue_mode(self, hue_mode: HueMode) -> None:
        self.sampler.hue_mode = HueMode(hue_mode)

    def set_options(self, options: Optional[SessionOptions] = None, **changes) -> SessionOptions:
        """
        Replace the options, or update some of them by keyword.

        Turning auto_hue on immediately reassigns hues.
        """
        new = options if options is not None else replace(self.options, **changes)
        self.options = new
        self.points.locked = new.lock
        self.points.constrained = new.constrain
        self.points.insert_direction = new.insert_direction
        self._after_edit()
        return new

    # ------------------ SAMPLING ------------------
    def sample_point(self, t: float) -> UnitHSV:
        return self.sampler.sample_point(self.points, self.mode, t)

    def sample_strip(self, resolution: int = config.DEFAULT_RESOLUTION) -> UnitHSV:
        return self.sampler.sample_strip(self.points, self.mode, resolution)

    def sample_strip_rgb(self, resolution: int = config.DEFAULT_RESOLUTION, format_type: FormatType = FormatType.FLOAT):
        return self.sampler.sample_strip_rgb(self.points, self.mode, resolution, format_type)

    def color_string(self, t: float, fmt: ColorStringFormat = ColorStringFormat.HEXNOA) -> str:
        """Color at t as text for the clipboard."""
        return format_color(self.sample_point(t), fmt)

    # ------------------ PRESETS ------------------
    def to_preset(self, name: str = "untitled") -> PresetData:
        return PresetData(name, self.mode, self.points.snapshot(), self.options, self.hue_mode)

    @classmethod
    def from_preset(cls, preset: PresetData) -> EditingSession:
        session = cls(preset.spline_mode, preset.options, hue_mode=preset.hue_mode)
        session.load_preset(preset)
        return session

    def load_preset(self, preset: PresetData) -> None:
        """Replace the current points, modes and options with the preset's."""
        self.mode = preset.spline_mode
        self.sampler.hue_mode = preset.hue_mode
        self.options = preset.options
        self.points = self._new_point_set(preset.points)
        logger.info("Loaded preset %r with %d points", preset.name, len(self.points))
