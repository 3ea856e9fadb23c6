from __future__ import annotations
from dataclasses import dataclass

from . import config
from .types.spline_types import InsertDirection


@dataclass(frozen=True)
class SessionOptions:
    """
    Editing options of a session.

    lock:             translating one point moves all of them
    auto_hue:         hues are reassigned after every edit
    insert_direction: placement of a new point tied with existing ones
    constrain:        clamp out-of-range edits instead of rejecting them
    """
    lock: bool = False
    auto_hue: bool = False
    insert_direction: InsertDirection = config.DEFAULT_INSERT_DIRECTION
    constrain: bool = False

    def __post_init__(self):
        object.__setattr__(self, "insert_direction", InsertDirection(self.insert_direction))
        for name in ("lock", "auto_hue", "constrain"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"Option {name} must be a bool, got {getattr(self, name)!r}")
