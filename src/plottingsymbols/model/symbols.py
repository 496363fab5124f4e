"""Concrete multi-line plotting symbols."""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from plottingsymbols import config
from plottingsymbols.errors import InvalidGeometryInput
from plottingsymbols.model.geometry_primitives import Point, LinePart
from plottingsymbols.model.geometry_utils import arrow_barbs, third_vertex_from_base_angles
from plottingsymbols.model.plotting import MultiLinePlotting


def _require_points(symbol: MultiLinePlotting, control_points: Sequence[Point], minimum: int) -> None:
    if len(control_points) < minimum:
        raise InvalidGeometryInput(
            f"{symbol.__class__.__name__} needs at least {minimum} control points, got {len(control_points)}."
        )


class _ArrowSymbol(MultiLinePlotting):
    """Shared arrow head settings."""

    def __init__(
        self,
        points: Optional[Iterable[Point]] = None,
        arrow_ratio: float = config.DEFAULT_ARROW_RATIO,
        arrow_angle: float = config.DEFAULT_ARROW_ANGLE,
    ) -> None:
        # Must be set before the base class derives the parts
        self.arrow_ratio = arrow_ratio
        self.arrow_angle = arrow_angle
        super().__init__(points)

    def _head(self, start: Point, end: Point) -> List[LinePart]:
        left, right = arrow_barbs(start, end, self.arrow_ratio, self.arrow_angle)
        return [left.to_part(), right.to_part()]


class LineArrow(_ArrowSymbol):
    """Straight arrow from the first to the second control point."""

    def derive_parts(self, control_points: Sequence[Point]) -> List[LinePart]:
        _require_points(self, control_points, 2)
        start, end = control_points[0], control_points[1]
        return [LinePart([start, end])] + self._head(start, end)


class PolylineArrow(_ArrowSymbol):
    """Polyline through every control point with a head on the last leg."""

    def derive_parts(self, control_points: Sequence[Point]) -> List[LinePart]:
        _require_points(self, control_points, 2)
        return [LinePart(list(control_points))] + self._head(control_points[-2], control_points[-1])


class ParallelSearch(_ArrowSymbol):
    """Search route: a polyline with an arrow head at the end of every leg."""

    def derive_parts(self, control_points: Sequence[Point]) -> List[LinePart]:
        _require_points(self, control_points, 2)
        parts = [LinePart(list(control_points))]
        for start, end in zip(control_points[:-1], control_points[1:]):
            parts.extend(self._head(start, end))
        return parts


class TriangleFlag(MultiLinePlotting):
    """
    Closed triangle standing on the base between the first two control points.
    The apex lies to the left of the base direction.
    """

    def __init__(
        self,
        points: Optional[Iterable[Point]] = None,
        base_angle: float = config.DEFAULT_BASE_ANGLE,
    ) -> None:
        self.base_angle = base_angle
        super().__init__(points)

    def derive_parts(self, control_points: Sequence[Point]) -> List[LinePart]:
        _require_points(self, control_points, 2)
        p_s, p_e = control_points[0], control_points[1]
        if p_s == p_e:
            raise InvalidGeometryInput("TriangleFlag base has zero length.")
        apex, _ = third_vertex_from_base_angles(p_s, p_e, self.base_angle, self.base_angle)
        ring = LinePart([p_s, p_e, apex])
        ring.close()
        return [ring]
