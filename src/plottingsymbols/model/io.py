"""
Control Point Interchange (JSON text)
Serializes the control points of a plotting symbol and parses them back.
Only the control points are persisted; parts are always re-derived.
"""
from __future__ import annotations

import json
import logging
import re
from numbers import Real
from typing import Any, Iterable, Optional

from plottingsymbols.errors import MalformedControlPointText
from plottingsymbols.model.geometry_primitives import Point

# Get module logger
logger = logging.getLogger(__name__)

# Innermost {...} objects, i.e. no nested braces
_FRAGMENT_RE = re.compile(r"\{[^{}]*\}")
# Bare JavaScript object keys, e.g. {x: 1, y: 2}
_BARE_KEY_RE = re.compile(r"([{,]\s*)([A-Za-z_]\w*)(\s*:)")

_SEPARATORS = (",", ":")


def control_point_to_json(point: Point) -> str:
    return json.dumps(point.to_dict(), separators=_SEPARATORS)


def control_points_to_json(points: Optional[Iterable[Point]]) -> Optional[str]:
    """
    Serialize control points as {"controlPoints":[{"x":..,"y":..},...]}.
    Returns None when no control point sequence is given.
    """
    if points is None:
        return None
    payload = {"controlPoints": [p.to_dict() for p in points]}
    return json.dumps(payload, separators=_SEPARATORS)


def _point_from_record(record: Any, source: str) -> Point:
    if not isinstance(record, dict):
        raise MalformedControlPointText(f"Control point '{source}' is not an object.")
    x, y = record.get("x"), record.get("y")
    for name, value in (("x", x), ("y", y)):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise MalformedControlPointText(f"Control point '{source}' has no numeric '{name}'.")
    try:
        return Point(float(x), float(y))
    except OverflowError as e:
        raise MalformedControlPointText(f"Control point '{source}' is out of range: {e}") from e


def _parse_fragment(fragment: str) -> Point:
    try:
        record = json.loads(fragment)
    except ValueError:
        try:
            record = json.loads(_BARE_KEY_RE.sub(r'\1"\2"\3', fragment))
        except ValueError as e:
            raise MalformedControlPointText(f"Cannot parse control point '{fragment}': {e}") from e
    return _point_from_record(record, fragment)


def _parse(text: str) -> list[Point]:
    try:
        document = json.loads(text)
    except ValueError:
        document = None

    if isinstance(document, dict) and "controlPoints" in document:
        document = document["controlPoints"]
    if isinstance(document, list):
        return [_point_from_record(record, json.dumps(record)) for record in document]

    # Not a JSON document: read the {...} fragments one by one
    return [_parse_fragment(fragment) for fragment in _FRAGMENT_RE.findall(text)]


def get_control_points_from_json(text: str) -> list[Point]:
    """
    Parse control points out of serialized text.

    A {"controlPoints":[...]} document or a bare "[{...},{...}]" array is
    read as JSON. Any other text is scanned for single-level brace-delimited
    objects, each read as one {"x": .., "y": ..} record in order of
    appearance (bare keys such as {x: 1, y: 2} are accepted). Text without
    any such object yields an empty list.

    Raises:
        MalformedControlPointText: If `text` is not a string or a record is
            not a well-formed coordinate object.
    """
    if not isinstance(text, str):
        raise MalformedControlPointText(f"Expected text, got {type(text).__name__}.")

    try:
        points = _parse(text)
    except MalformedControlPointText as e:
        logger.error(f"Failed to read control points: {e}")
        raise

    logger.debug(f"Read {len(points)} control points.")
    return points
