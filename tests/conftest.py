"""Shared fixtures for plottingsymbols tests."""
import pytest

from plottingsymbols.model.geometry_primitives import Point, LinePart


class NestedSquaresDeriver:
    """Axis-aligned squares centred on the first control point.

    The first square is counter-clockwise, the following ones clockwise.
    """

    def __init__(self, sides=(4.0, 2.0)):
        self.sides = sides
        self.calls = 0

    def derive_parts(self, control_points):
        self.calls += 1
        c = control_points[0]
        parts = []
        for i, side in enumerate(self.sides):
            h = side / 2
            ring = [Point(c.x - h, c.y - h), Point(c.x + h, c.y - h),
                    Point(c.x + h, c.y + h), Point(c.x - h, c.y + h)]
            if i > 0:
                ring.reverse()
            parts.append(LinePart(ring))
        return parts


@pytest.fixture
def squares_deriver():
    return NestedSquaresDeriver()


@pytest.fixture
def control_points():
    return [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0)]
