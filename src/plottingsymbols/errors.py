"""Exceptions raised by the plotting symbol kernel."""


class PlottingError(ValueError):
    """Base class for every error raised by plottingsymbols."""


class InvalidGeometryInput(PlottingError):
    """Too few control points, or a degenerate (zero-length) vector."""


class InfeasibleConstraint(PlottingError):
    """An angle/length combination has no real solution."""


class MalformedControlPointText(PlottingError):
    """Serialized control point text could not be parsed."""
