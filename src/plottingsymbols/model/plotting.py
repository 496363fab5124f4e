"""
Multi-Line Plotting Symbols
===========================
Base class for plotting symbols drawn as several line parts.

Why is this file needed?
------------------------
1. State Management: A symbol owns its control points and keeps the derived
   parts in sync with them. Parts are never patched, only recomputed.
2. Extension Point: Concrete symbols (arrows, search patterns, ...) only
   describe how parts follow from control points, either by overriding
   `derive_parts()` or by composing a `ShapeDeriver`.
3. Persistence: Control points round-trip through JSON text.

Classes:
    ShapeDeriver: Protocol for pluggable part derivation.
    MultiLinePlotting: The symbol container.
"""
from __future__ import annotations

import logging
from copy import deepcopy
from typing import Iterable, List, Optional, Protocol, Sequence

from plottingsymbols.model.geometry_primitives import Point, LinePart
from plottingsymbols.model.geometry_utils import clone_points
from plottingsymbols.model.io import control_points_to_json, get_control_points_from_json

logger = logging.getLogger(__name__)


class ShapeDeriver(Protocol):
    def derive_parts(self, control_points: Sequence[Point]) -> List[LinePart]: ...


class MultiLinePlotting:
    """
    A plotting symbol made of several line parts derived from control points.

    The first part is the outer boundary, the following parts are holes.
    The base class derives no geometry unless a `deriver` is supplied;
    subclasses override `derive_parts()`.
    """

    # Renderers use this to tell composite symbols from single-line ones
    is_composite: bool = True

    def __init__(
        self,
        points: Optional[Iterable[Point]] = None,
        deriver: Optional[ShapeDeriver] = None,
    ) -> None:
        self._deriver = deriver
        self._control_points: List[Point] = clone_points(points) if points is not None else []
        self._parts: List[LinePart] = []

        if self._control_points:
            self.calculate_parts()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(control_points={len(self._control_points)}, parts={len(self._parts)})"

    @property
    def control_points(self) -> tuple[Point, ...]:
        return tuple(self._control_points)

    @property
    def parts(self) -> tuple[LinePart, ...]:
        return tuple(part.clone() for part in self._parts)

    @property
    def deriver(self) -> Optional[ShapeDeriver]:
        return self._deriver

    def get_control_points(self) -> tuple[Point, ...]:
        return self.control_points

    def set_control_points(self, points: Optional[Iterable[Point]]) -> None:
        """
        Replace all control points and recompute the parts.
        None or an empty sequence is ignored.
        """
        if points is None:
            return
        new_points = clone_points(points)
        if not new_points:
            return

        # Derive first so a failing derivation leaves the symbol untouched
        parts = self.derive_parts(new_points)
        self._control_points = new_points
        self._parts = list(parts)
        logger.debug(f"{self!r} updated.")

    def calculate_parts(self) -> None:
        """Recompute every part from the current control points."""
        if not self._control_points:
            self._parts = []
            return
        self._parts = list(self.derive_parts(self._control_points))
        logger.debug(f"{self!r} derived.")

    def derive_parts(self, control_points: Sequence[Point]) -> List[LinePart]:
        """Compute the parts for the given control points. Override in subclasses."""
        if self._deriver is not None:
            return self._deriver.derive_parts(control_points)
        return []

    def area(self) -> float:
        """Area of the outer part minus the area of every following part."""
        if not self._parts:
            return 0.0
        outer, *holes = self._parts
        return outer.area() - sum(hole.area() for hole in holes)

    def clone(self) -> MultiLinePlotting:
        """
        Deep copy sharing no mutable state with this symbol.
        Subclass attributes are deep-copied; the composed deriver is shared.
        """
        clone = self.__class__.__new__(self.__class__)
        attributes = {key: value for key, value in self.__dict__.items() if key != "_deriver"}
        clone.__dict__.update(deepcopy(attributes))
        clone._deriver = self._deriver
        return clone

    def to_json(self) -> Optional[str]:
        return control_points_to_json(self._control_points)

    @classmethod
    def from_json(cls, text: str, **kwargs) -> MultiLinePlotting:
        return cls(get_control_points_from_json(text), **kwargs)

    @staticmethod
    def get_control_points_from_json(text: str) -> list[Point]:
        return get_control_points_from_json(text)
