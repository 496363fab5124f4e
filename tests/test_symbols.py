"""Tests for model/symbols.py concrete plotting symbols."""
import math
import pytest

from plottingsymbols.errors import InvalidGeometryInput
from plottingsymbols.model.geometry_primitives import Point
from plottingsymbols.model.symbols import LineArrow, PolylineArrow, ParallelSearch, TriangleFlag


def _assert_barbs(parts, head, length):
    for barb in parts:
        assert len(barb) == 2
        assert barb.points[0] == head
        assert barb.length == pytest.approx(length)


class TestLineArrow:
    def test_parts(self):
        arrow = LineArrow([Point(0.0, 0.0), Point(10.0, 0.0)])
        shaft, *barbs = arrow.parts
        assert shaft.points == [Point(0.0, 0.0), Point(10.0, 0.0)]
        _assert_barbs(barbs, Point(10.0, 0.0), 1.0)
        ys = sorted(b.points[1].y for b in barbs)
        assert ys == pytest.approx([-0.5, 0.5])

    def test_uses_first_two_points(self):
        arrow = LineArrow([Point(0.0, 0.0), Point(0.0, 4.0), Point(9.0, 9.0)])
        assert arrow.parts[0].points == [Point(0.0, 0.0), Point(0.0, 4.0)]

    def test_custom_ratio(self):
        arrow = LineArrow([Point(0.0, 0.0), Point(10.0, 0.0)], arrow_ratio=5.0, arrow_angle=math.pi / 4)
        _assert_barbs(arrow.parts[1:], Point(10.0, 0.0), 2.0)

    def test_coincident_points_raise(self):
        with pytest.raises(InvalidGeometryInput):
            LineArrow([Point(1.0, 1.0), Point(1.0, 1.0)])

    def test_open_symbol_has_no_area(self):
        assert LineArrow([Point(0.0, 0.0), Point(10.0, 0.0)]).area() == 0.0


class TestPolylineArrow:
    def test_parts(self, control_points):
        arrow = PolylineArrow(control_points)
        shaft, *barbs = arrow.parts
        assert shaft.points == control_points
        assert len(barbs) == 2
        _assert_barbs(barbs, Point(10.0, 10.0), 1.0)
        for barb in barbs:
            assert barb.points[1].y < 10.0


class TestParallelSearch:
    def test_head_on_every_leg(self, control_points):
        search = ParallelSearch(control_points)
        assert len(search.parts) == 1 + 2 * 2
        _assert_barbs(search.parts[1:3], Point(10.0, 0.0), 1.0)
        _assert_barbs(search.parts[3:5], Point(10.0, 10.0), 1.0)

    def test_recomputes_on_update(self, control_points):
        search = ParallelSearch(control_points)
        search.set_control_points(control_points + [Point(0.0, 10.0)])
        assert len(search.parts) == 1 + 3 * 2


class TestTriangleFlag:
    def test_ring(self):
        marker = TriangleFlag([Point(0.0, 0.0), Point(4.0, 0.0)])
        (ring,) = marker.parts
        assert ring.is_closed
        assert len(ring) == 4
        assert ring.points[2].is_close(Point(2.0, 2.0))
        assert marker.area() == pytest.approx(4.0)

    def test_base_angle(self):
        marker = TriangleFlag([Point(0.0, 0.0), Point(2.0, 0.0)], base_angle=math.pi / 3)
        apex = marker.parts[0].points[2]
        assert apex.is_close(Point(1.0, math.sqrt(3)))

    def test_apex_left_of_base(self):
        marker = TriangleFlag([Point(0.0, 0.0), Point(0.0, 4.0)])
        assert marker.parts[0].points[2].is_close(Point(-2.0, 2.0))

    def test_zero_base_raises(self):
        with pytest.raises(InvalidGeometryInput, match="zero length"):
            TriangleFlag([Point(1.0, 1.0), Point(1.0, 1.0)])


@pytest.mark.parametrize("cls", [LineArrow, PolylineArrow, ParallelSearch, TriangleFlag])
def test_too_few_points_raise(cls):
    with pytest.raises(InvalidGeometryInput, match="at least 2 control points"):
        cls([Point(0.0, 0.0)])


@pytest.mark.parametrize("cls", [LineArrow, PolylineArrow, ParallelSearch, TriangleFlag])
def test_empty_symbol_is_legal(cls):
    symbol = cls()
    assert symbol.parts == ()
    assert symbol.area() == 0.0
