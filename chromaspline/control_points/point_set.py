"""
Ordered, mutable collection of control points.

Points stay sorted by position. Equal positions are allowed and keep the
order in which they were stored. Every mutating method validates its input
before touching the list, so a raised error leaves the set unchanged.
"""
from __future__ import annotations
from bisect import bisect_left, bisect_right
from numbers import Integral
from logging import getLogger
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from boundednumbers import clamp

from .. import config
from ..errors import IndexOutOfBounds, InvalidPosition
from ..types.spline_types import InsertDirection
from ..colors import UnitHSV
from .point import ColorLike, ColorSpacePoint, PointDelta, Tangent, as_unit_hsv

logger = getLogger(__name__)


class ControlPointSet:
    """
    Control points ordered by ascending position.

    Options:
        locked:           translate() moves every point by the same delta
        constrained:      out-of-range coordinates are clamped instead of rejected
        insert_direction: side on which insert() places a point that ties
                          with existing points
    """

    def __init__(
        self,
        points: Optional[Sequence[ColorSpacePoint]] = None,
        *,
        locked: bool = False,
        constrained: bool = False,
        insert_direction: InsertDirection = config.DEFAULT_INSERT_DIRECTION,
        epsilon: float = config.POSITION_EPSILON,
    ) -> None:
        self.locked = locked
        self.constrained = constrained
        self.insert_direction = InsertDirection(insert_direction)
        self.epsilon = epsilon
        self._points: List[ColorSpacePoint] = []
        self._revision = 0
        if points:
            points = [p.with_position(self._check_position(p.position)) for p in points]
            # sorted() is stable, so ties keep the given order
            self._points = sorted(points, key=lambda p: p.position)

    # ------------------ READ ACCESS ------------------
    @property
    def revision(self) -> int:
        """Incremented by every successful mutation."""
        return self._revision

    @property
    def points(self) -> Tuple[ColorSpacePoint, ...]:
        return tuple(self._points)

    @property
    def positions(self) -> List[float]:
        return [p.position for p in self._points]

    def snapshot(self) -> Tuple[ColorSpacePoint, ...]:
        """Immutable view of the current points, safe to hand to evaluators."""
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ColorSpacePoint]:
        return iter(tuple(self._points))

    def __getitem__(self, index: int) -> ColorSpacePoint:
        self._check_index(index)
        return self._points[index]

    def __repr__(self) -> str:
        return (
            f"ControlPointSet(n={len(self._points)}, locked={self.locked}, "
            f"constrained={self.constrained}, insert_direction={self.insert_direction.value})"
        )

    # ------------------ VALIDATION ------------------
    def _check_index(self, index: int) -> None:
        if not isinstance(index, Integral) or index < 0 or index >= len(self._points):
            raise IndexOutOfBounds(index, len(self._points))

    def _check_position(self, position: float) -> float:
        if self.constrained:
            return clamp(float(position), 0.0, 1.0)
        if not 0.0 <= position <= 1.0:
            raise InvalidPosition(position)
        return float(position)

    def _commit(self, points: List[ColorSpacePoint]) -> None:
        self._points = points
        self._revision += 1

    # ------------------ MUTATIONS ------------------
    def insert(
        self,
        position: float,
        color: ColorLike,
        tangent_in: Optional[Tangent] = None,
        tangent_out: Optional[Tangent] = None,
    ) -> int:
        """
        Insert a point keeping ascending order.

        Returns:
            Index of the new point.

        Raises:
            InvalidPosition: position outside [0, 1] and constrain is off
        """
        index, position = self._insert_index(self._check_position(position))
        point = ColorSpacePoint(position, as_unit_hsv(color), tangent_in, tangent_out)

        points = list(self._points)
        points.insert(index, point)
        self._commit(points)
        logger.debug("Inserted control point #%d at %.6f (%s)", index, position, point.hsv)
        return index

    def _insert_index(self, position: float) -> Tuple[int, float]:
        """
        Index for a new point at position, and the position it is stored at.

        A position within epsilon of existing points snaps to the nearest
        end of that run, so the order stays non-decreasing.
        """
        positions = self.positions
        lo = bisect_left(positions, position - self.epsilon)
        hi = bisect_right(positions, position + self.epsilon)
        if lo == hi:
            return lo, position
        if self.insert_direction == InsertDirection.BEFORE:
            return lo, positions[lo]
        return hi, positions[hi - 1]

    def remove(self, index: int) -> ColorSpacePoint:
        """Remove and return the point at index. Positions are not renormalized."""
        self._check_index(index)
        points = list(self._points)
        removed = points.pop(index)
        self._commit(points)
        logger.debug("Removed control point #%d, %d left", index, len(points))
        return removed

    def clear(self) -> None:
        self._commit([])

    def translate(self, index: int, delta: Union[PointDelta, float]) -> int:
        """
        Apply delta to the point at index, or to every point when locked.

        Hue always wraps around the circle. When constrained, position,
        saturation and value are clamped per point, which can squash the
        spacing between points; that deformation is kept. When not
        constrained, a position leaving [0, 1] raises InvalidPosition.

        Returns:
            The targeted point's index after re-sorting.
        """
        self._check_index(index)
        delta = PointDelta.coerce(delta)
        targets = range(len(self._points)) if self.locked else (index,)

        points = list(self._points)
        for i in targets:
            points[i] = self._shifted(points[i], delta)

        return self._commit_reordered(points, index)

    def _shifted(self, point: ColorSpacePoint, delta: PointDelta) -> ColorSpacePoint:
        position = self._check_position(point.position + delta.dposition)
        h, s, v = point.hsv
        # UnitHSV wraps hue and clamps saturation/value on construction
        color = UnitHSV((h + delta.dhue, s + delta.dsaturation, v + delta.dvalue))
        return ColorSpacePoint(position, color, point.tangent_in, point.tangent_out)

    def move_to(self, index: int, position: float) -> int:
        """Set the absolute position of one point and return its new index."""
        self._check_index(index)
        position = self._check_position(position)
        points = list(self._points)
        points[index] = points[index].with_position(position)
        return self._commit_reordered(points, index)

    def set_color(self, index: int, color: ColorLike) -> None:
        self._check_index(index)
        points = list(self._points)
        points[index] = points[index].with_color(color)
        self._commit(points)

    def set_hues(self, hues: Sequence[float]) -> None:
        """Replace every point's hue at once."""
        if len(hues) != len(self._points):
            raise ValueError(f"Expected {len(self._points)} hues, got {len(hues)}")
        points = [p.with_hue(h) for p, h in zip(self._points, hues)]
        self._commit(points)

    def set_tangents(self, index: int, tangent_in: Optional[Tangent], tangent_out: Optional[Tangent]) -> None:
        self._check_index(index)
        points = list(self._points)
        points[index] = points[index].with_tangents(tangent_in, tangent_out)
        self._commit(points)

    def flip_tangents(self, index: int) -> None:
        """Swap a point's incoming and outgoing handles, mirroring each through the point."""
        self._check_index(index)
        point = self._points[index]
        flip = lambda t: t.flipped() if t is not None else None
        self.set_tangents(index, flip(point.tangent_out), flip(point.tangent_in))

    def reorder_on_move(self, index: int) -> int:
        """
        Re-sort after a position change and return the point's new index.

        Points that did not cross each other keep their relative order.
        """
        self._check_index(index)
        return self._commit_reordered(list(self._points), index)

    def _commit_reordered(self, points: List[ColorSpacePoint], index: int) -> int:
        order = sorted(range(len(points)), key=lambda i: points[i].position)
        self._commit([points[i] for i in order])
        new_index = order.index(index)
        if new_index != index:
            logger.debug("Control point #%d moved to #%d", index, new_index)
        return new_index

    def copy(self) -> ControlPointSet:
        clone = ControlPointSet(
            locked=self.locked,
            constrained=self.constrained,
            insert_direction=self.insert_direction,
            epsilon=self.epsilon,
        )
        clone._points = list(self._points)
        return clone
