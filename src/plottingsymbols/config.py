"""
Configuration & Numeric Defaults
================================
This module serves as the central registry for tolerances and default
parameters used by the geometry kernel.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (arrow ratios, angles, epsilons)
   scattered throughout the primitives and symbols.
2. Tuning: Tolerances that change observable behaviour near degenerate
   inputs are kept in one place and can be overridden per call.

Exports:
    PARALLEL_TOLERANCE (float): |cross| at or below which two directions are parallel.
    DISCRIMINANT_TOLERANCE (float): Relative slack for rounding in quadratic solves.
    POINT_TOLERANCE (float): Default absolute tolerance for Point.is_close().
"""
from math import pi

# Exact zero reproduces the historical behaviour of the parallel test.
PARALLEL_TOLERANCE: float = 0.0

DISCRIMINANT_TOLERANCE: float = 1e-9

POINT_TOLERANCE: float = 1e-9

# Arrow head: barb length is shaft length / ratio
DEFAULT_ARROW_RATIO: float = 10.0
DEFAULT_ARROW_ANGLE: float = pi / 6

DEFAULT_ROTATION_ANGLE: float = pi / 2
DEFAULT_ROTATION_LENGTH: float = 1.0

DEFAULT_BASE_ANGLE: float = pi / 4
