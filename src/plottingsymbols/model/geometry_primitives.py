"""
Geometric Primitives for plotting symbols.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Union, TYPE_CHECKING
import numpy as np
import math

from plottingsymbols.config import POINT_TOLERANCE
from plottingsymbols.errors import InvalidGeometryInput

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in the plane representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0:
            raise InvalidGeometryInput("Cannot normalize a zero-length vector.")
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def angle_to(self, other: Vector) -> float:
        """Returns the unsigned angle in radians between this vector and another."""
        return math.atan2(abs(self.cross(other)), self.dot(other))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class Point:
    """A simple geometric point in the plane."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def is_close(self, other: Point, tol: float = POINT_TOLERANCE) -> bool:
        return math.isclose(self.x, other.x, abs_tol=tol) and math.isclose(self.y, other.y, abs_tol=tol)

    def clone(self) -> Point:
        return Point(self.x, self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Point:
        return Point(x=float(data["x"]), y=float(data["y"]))


@dataclass
class Line:
    """A straight line segment between two points."""
    start: Point
    end: Point

    def reverse(self) -> Line:
        return Line(start=self.end, end=self.start)

    def to_vector(self) -> Vector:
        return self.end - self.start

    def to_part(self) -> LinePart:
        return LinePart([self.start, self.end])

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass
class LinePart:
    """
    One connected polyline of a multi-line symbol.
    Used as an area boundary it is treated as implicitly closed.
    """
    points: List[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def add_points(self, new_points: Iterable[Point]) -> None:
        self.points.extend(new_points)

    @property
    def is_closed(self) -> bool:
        return len(self.points) > 2 and self.points[0] == self.points[-1]

    def close(self) -> None:
        """
        Appends the first point to the end of the part
        if the part is not already closed.
        """
        if len(self.points) > 2 and not self.is_closed:
            self.points.append(self.points[0])

    @property
    def length(self) -> float:
        return sum(p1.distance_to(p2) for p1, p2 in zip(self.points[:-1], self.points[1:]))

    def signed_area(self) -> float:
        """Shoelace area; positive for counter-clockwise rings."""
        if len(self.points) < 3:
            return 0.0
        pts = self.to_array()
        x, y = pts[:, 0], pts[:, 1]
        return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))

    def area(self) -> float:
        return abs(self.signed_area())

    def clone(self) -> LinePart:
        return LinePart([p.clone() for p in self.points])

    def to_array(self) -> npt.NDArray[np.float64]:
        if not self.points:
            return np.empty((0, 2))
        return np.array([[p.x, p.y] for p in self.points])
