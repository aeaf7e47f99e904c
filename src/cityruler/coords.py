"""
coords.py

Coercion of caller-supplied coordinates into the plain tuples the ruler
works on. Points may be any length-2 sequence (tuple, list, numpy array) or a
`shapely.geometry.Point`; lines may be sequences of points, `(N, 2)` numpy
arrays, or shapely `LineString`/`LinearRing`; polygons may be sequences of
rings or a shapely `Polygon`. Shapely coordinates carrying a z value are
reduced to (x, y).

Everything returned is freshly allocated, so the ruler never holds on to a
caller's objects.
"""
import logging
from typing import List, Tuple

import numpy as np
from shapely.geometry import LinearRing, LineString, Point as ShapelyPoint, Polygon as ShapelyPolygon

from cityruler.errors import InvalidInput

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Line = List[Point]
Polygon = List[Line]
BBox = Tuple[float, float, float, float]


def as_point(p) -> Point:
    """Return `p` as an `(x, y)` tuple of floats."""
    if isinstance(p, ShapelyPoint):
        if p.is_empty:
            raise InvalidInput("Empty shapely Point has no coordinates")
        return (float(p.x), float(p.y))
    if isinstance(p, (str, bytes)):
        logger.debug('rejecting malformed point %r', p)
        raise InvalidInput(f"Point must be a pair of numbers (x, y), got {p!r}")
    try:
        x, y = p
        return (float(x), float(y))
    except (TypeError, ValueError):
        logger.debug('rejecting malformed point %r', p)
        raise InvalidInput(f"Point must be a pair of numbers (x, y), got {p!r}") from None


def as_line(line) -> Line:
    """Return `line` as a list of `(x, y)` tuples."""
    if isinstance(line, (LineString, LinearRing)):
        return [(float(c[0]), float(c[1])) for c in line.coords]
    if isinstance(line, np.ndarray):
        if line.size == 0:
            return []
        if line.ndim != 2 or line.shape[1] != 2:
            raise InvalidInput(f"Line array must have shape (N, 2), got {line.shape}")
        return [(x, y) for x, y in line.astype(float).tolist()]
    if isinstance(line, (str, bytes)) or isinstance(line, ShapelyPoint):
        raise InvalidInput(f"Line must be a sequence of points, got {line!r}")
    try:
        return [as_point(p) for p in line]
    except TypeError:
        raise InvalidInput(f"Line must be a sequence of points, got {line!r}") from None


def as_polygon(polygon) -> Polygon:
    """Return `polygon` as a list of rings, the outer ring first."""
    if isinstance(polygon, ShapelyPolygon):
        if polygon.is_empty:
            return []
        return [as_line(polygon.exterior)] + [as_line(r) for r in polygon.interiors]
    try:
        return [as_line(ring) for ring in polygon]
    except TypeError:
        raise InvalidInput(f"Polygon must be a sequence of rings, got {polygon!r}") from None


def as_bbox(box) -> BBox:
    """Return `box` as `(min_x, min_y, max_x, max_y)`, swapping inverted axes."""
    try:
        x0, y0, x1, y1 = (float(v) for v in box)
    except (TypeError, ValueError):
        logger.debug('rejecting malformed bbox %r', box)
        raise InvalidInput(f"Bounding box must be four numbers (min_x, min_y, max_x, max_y), got {box!r}") from None
    return (min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))
