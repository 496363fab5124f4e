"""
The MODEL layer contains pure data structures and geometry logic.
It has NO knowledge of rendering, styling or user interaction.
It deals with control points, derived line parts and their text form.
"""
from plottingsymbols.model.geometry_primitives import Point, Vector, Line, LinePart
from plottingsymbols.model.plotting import MultiLinePlotting, ShapeDeriver
from plottingsymbols.model.symbols import LineArrow, PolylineArrow, ParallelSearch, TriangleFlag
