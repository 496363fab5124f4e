from __future__ import annotations

import logging
from math import sqrt, cos, pi
from typing import Iterable, Optional

from plottingsymbols import config
from plottingsymbols.errors import InfeasibleConstraint, InvalidGeometryInput
from plottingsymbols.model.geometry_primitives import Point, Vector, Line

logger = logging.getLogger(__name__)


def distance(a: Point, b: Point) -> float:
    return sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def to_vector(a: Point, b: Point) -> Vector:
    """Vector from `b` to `a`, i.e. (a.x - b.x, a.y - b.y)."""
    return Vector(a.x - b.x, a.y - b.y)


def clone_points(points: Iterable[Point]) -> list[Point]:
    return [p.clone() for p in points]


def rotate_to_length(
    v: Vector,
    angle: Optional[float] = None,
    length: Optional[float] = None,
) -> tuple[Vector, Vector]:
    """
    Compute the two vectors of a given length that make a given angle with `v`.

    Args:
        v: The base vector (must be non-zero).
        angle: Angle between the base vector and the results, in radians.
            Falsy values fall back to pi/2.
        length: Magnitude of the results. Falsy values fall back to 1.

    Returns:
        (left, right) pair. "Left" lies counter-clockwise of `v`.

    Raises:
        InvalidGeometryInput: If `v` has zero length.
        InfeasibleConstraint: If the angle/length combination has no real solution.

    Notes:
        Solves v·u = |v| * length * cos(angle) together with |u| = length.
        For v.y != 0 the first equation is rewritten as y = n*x + m and
        substituted into x^2 + y^2 = length^2:
          a = 1 + n^2
          b = 2 n m
          c = m^2 - length^2
    """
    if not angle:
        angle = config.DEFAULT_ROTATION_ANGLE
    if not length:
        length = config.DEFAULT_ROTATION_LENGTH

    d_v = v.magnitude
    if d_v == 0.0:
        raise InvalidGeometryInput("Cannot rotate relative to a zero-length vector.")

    # Horizontal base vector: y cannot be used as a divisor
    if v.y == 0:
        x = d_v * length * cos(angle) / v.x
        y_sq = length * length - x * x
        if y_sq < -config.DISCRIMINANT_TOLERANCE * length * length:
            raise InfeasibleConstraint(f"No vector of length {length} at angle {angle}: y^2={y_sq:.6e}")
        y = sqrt(max(0.0, y_sq))
        if v.x > 0:
            return Vector(x, y), Vector(x, -y)
        return Vector(x, -y), Vector(x, y)

    n = -v.x / v.y
    m = length * d_v * cos(angle) / v.y
    a = 1 + n * n
    b = 2 * n * m
    c = m * m - length * length
    disc = b * b - 4 * a * c
    if disc < -config.DISCRIMINANT_TOLERANCE * 4 * a * length * length:
        raise InfeasibleConstraint(f"No vector of length {length} at angle {angle}: disc={disc:.6e}")
    sqrt_disc = sqrt(max(0.0, disc))

    x_1 = (-b - sqrt_disc) / (2 * a)
    x_2 = (-b + sqrt_disc) / (2 * a)
    v_1 = Vector(x_1, n * x_1 + m)
    v_2 = Vector(x_2, n * x_2 + m)

    # Base vector pointing down swaps left and right
    if v.y < 0:
        return v_2, v_1
    return v_1, v_2


def arrow_barbs(
    start: Point,
    end: Point,
    ratio: Optional[float] = None,
    angle: Optional[float] = None,
) -> tuple[Line, Line]:
    """
    Arrow head barbs at `end` for the shaft running from `start` to `end`.

    Args:
        start: Tail of the shaft.
        end: Head of the shaft, where both barbs start.
        ratio: Shaft length divided by barb length. Defaults to 10.
        angle: Angle between each barb and the reversed shaft, in (0, pi).
            Defaults to pi/6.

    Returns:
        (left, right) barb segments, each starting at `end`.
    """
    if not ratio:
        ratio = config.DEFAULT_ARROW_RATIO
    if not angle:
        angle = config.DEFAULT_ARROW_ANGLE

    shaft_length = distance(start, end)
    back = to_vector(start, end)
    v_l, v_r = rotate_to_length(back, angle, shaft_length / ratio)
    return Line(end, end + v_l), Line(end, end + v_r)


def line_intersection(
    v_1: Vector,
    v_2: Vector,
    point1: Point,
    point2: Point,
    *,
    eps: float = config.PARALLEL_TOLERANCE,
) -> Point:
    """
    Intersection of two infinite lines given in point + direction form.

    Args:
        v_1: Direction of line 1.
        v_2: Direction of line 2.
        point1: Any point on line 1.
        point2: Any point on line 2.
        eps: The lines count as parallel when |v_1.y*v_2.x - v_1.x*v_2.y| <= eps.
            The default of 0.0 only treats exactly parallel directions as parallel.

    Returns:
        The intersection point. Parallel lines have no intersection; for them
        the midpoint of point1 and point2 is returned when the directions agree,
        and point2 itself when they are opposed.
    """
    det = v_1.y * v_2.x - v_1.x * v_2.y
    if abs(det) <= eps:
        if v_1.x * v_2.x > 0 or v_1.y * v_2.y > 0:
            return midpoint(point1, point2)
        return Point(point2.x, point2.y)

    x = (v_1.x * v_2.x * (point2.y - point1.y)
         + point1.x * v_1.y * v_2.x
         - point2.x * v_2.y * v_1.x) / det
    if v_1.x != 0:
        y = (x - point1.x) * v_1.y / v_1.x + point1.y
    else:
        # v_1 vertical, so v_2.x != 0 or the lines would be parallel
        y = (x - point2.x) * v_2.y / v_2.x + point2.y
    return Point(x, y)


def angular_bisector(v1: Vector, v2: Vector) -> Vector:
    """Bisector direction of two vectors: the sum of their unit vectors."""
    if v1.magnitude == 0.0 or v2.magnitude == 0.0:
        raise InvalidGeometryInput("Angular bisector needs two non-zero vectors.")
    return v1.normalize() + v2.normalize()


def third_vertex_from_base_angles(
    point_s: Point,
    point_e: Point,
    angle_s: Optional[float] = None,
    angle_e: Optional[float] = None,
    *,
    use_end_angle: bool = False,
) -> tuple[Point, Point]:
    """
    Apex of a triangle given its base and the two base angles.

    Args:
        point_s: First base point.
        point_e: Second base point.
        angle_s: Angle at `point_s` between the base and the other side. Defaults to pi/4.
        angle_e: Angle at `point_e`. Defaults to pi/4.
        use_end_angle: Historically `angle_s` is used at both ends and `angle_e`
            is ignored. Set to True to use `angle_e` at `point_e`.

    Returns:
        (left, right) apex candidates on either side of the base.
    """
    if not angle_s:
        angle_s = config.DEFAULT_BASE_ANGLE
    if not angle_e:
        angle_e = config.DEFAULT_BASE_ANGLE

    v_se = point_e - point_s
    v_si_l, v_si_r = rotate_to_length(v_se, angle_s, 1)

    end_angle = angle_e if use_end_angle else angle_s
    v_ei_l, v_ei_r = rotate_to_length(v_se, pi - end_angle, 1)

    apex_l = line_intersection(v_si_l, v_ei_l, point_s, point_e)
    apex_r = line_intersection(v_si_r, v_ei_r, point_s, point_e)
    logger.debug(f"Apex candidates for base {point_s} -> {point_e}: {apex_l}, {apex_r}")
    return apex_l, apex_r
