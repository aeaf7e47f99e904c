"""
ruler.py

The measurement engine. A `Ruler` is bound to one reference latitude and one
unit system; it stores the two scale factors derived there and answers every
query with planar arithmetic on longitude/latitude offsets multiplied by
those factors. Accuracy is best near the reference latitude and degrades with
distance from it, so build a new ruler when the area of interest moves.

Rulers are immutable once constructed and can be shared freely between
threads.

Public API:
- `create(lat, units='meters')` -> Ruler
- `from_tile(y, z, units='meters')` -> Ruler
- `Ruler` methods: distance, bearing, destination, offset, line_distance,
  along, point_on_line, line_slice, line_slice_along,
  point_to_segment_distance, area, signed_area, bbox, inside_bbox,
  buffer_point, buffer_bbox, equals, interpolate
"""
import logging
import math
from typing import List, NamedTuple

from cityruler.angle_utils import bearing_deg, bearing_components
from cityruler.config import DEFAULT_UNITS
from cityruler.coords import BBox, Line, Point, as_bbox, as_line, as_point, as_polygon
from cityruler.errors import InvalidInput
from cityruler.geometry import interpolate, project_onto_segment, ring_twice_area
from cityruler.scale import scale_factors, tile_latitude

logger = logging.getLogger(__name__)


class PointOnLine(NamedTuple):
    """Closest point on a line, the index of the segment it lies on, and its position `t` in [0, 1] on that segment."""
    point: Point
    index: int
    t: float


class Ruler:
    """Fast local approximations of geodesic measurements around latitude `lat`.

    Parameters:
    - lat: reference latitude in degrees, within [-90, 90]
    - units: unit name from `cityruler.config.UNITS` (default 'meters')

    Attributes `kx` and `ky` hold the distance in `units` covered by one
    degree of longitude and of latitude at `lat`. Points are (longitude,
    latitude) pairs in degrees.
    """

    __slots__ = ('lat', 'units', 'kx', 'ky')

    def __init__(self, lat: float, units: str = DEFAULT_UNITS):
        kx, ky = scale_factors(lat, units)
        object.__setattr__(self, 'lat', float(lat))
        object.__setattr__(self, 'units', units)
        object.__setattr__(self, 'kx', kx)
        object.__setattr__(self, 'ky', ky)
        logger.debug('ruler at lat=%.6f units=%s: kx=%.9g ky=%.9g', self.lat, units, kx, ky)

    def __setattr__(self, name, value):
        raise AttributeError(f"Ruler is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Ruler is immutable; cannot delete {name!r}")

    def __repr__(self):
        return f"Ruler(lat={self.lat!r}, units={self.units!r})"

    def __reduce__(self):
        # rebuild through the constructor; slot state cannot be restored via setattr
        return (Ruler, (self.lat, self.units))

    # ------------------------------------------------------------------
    # point pairs
    # ------------------------------------------------------------------
    def _distance(self, a: Point, b: Point) -> float:
        return math.hypot((a[0] - b[0]) * self.kx, (a[1] - b[1]) * self.ky)

    def distance(self, a, b) -> float:
        """Distance between two points."""
        return self._distance(as_point(a), as_point(b))

    def bearing(self, a, b) -> float:
        """Bearing from `a` to `b` in degrees clockwise from north, within (-180, 180].

        Coincident points have bearing 0.
        """
        a = as_point(a)
        b = as_point(b)
        return float(bearing_deg((b[0] - a[0]) * self.kx, (b[1] - a[1]) * self.ky))

    def destination(self, p, dist: float, bearing: float) -> Point:
        """Point `dist` units away from `p` in direction `bearing` (degrees)."""
        east, north = bearing_components(bearing)
        return self.offset(p, east * dist, north * dist)

    def offset(self, p, dx: float, dy: float) -> Point:
        """Translate `p` by `dx` units east and `dy` units north."""
        x, y = as_point(p)
        return (x + dx / self.kx, y + dy / self.ky)

    # ------------------------------------------------------------------
    # lines
    # ------------------------------------------------------------------
    def _line_distance(self, pts: Line) -> float:
        # accumulate in walk order so `_along` and the slices end exactly on the total
        total = 0.0
        for p0, p1 in zip(pts, pts[1:]):
            total += self._distance(p0, p1)
        return total

    def line_distance(self, line) -> float:
        """Total length of a line; 0 for fewer than two points."""
        return self._line_distance(as_line(line))

    def _along(self, pts: Line, dist: float) -> Point:
        if dist <= 0:
            return pts[0]
        walked = 0.0
        for p0, p1 in zip(pts, pts[1:]):
            d = self._distance(p0, p1)
            walked += d
            # zero-length segments never trigger this, so d > 0 here
            if walked > dist:
                return interpolate(p0, p1, (dist - (walked - d)) / d)
        return pts[-1]

    def along(self, line, dist: float) -> Point:
        """Point reached after walking `dist` units along `line` from its start.

        Distances below 0 return the first point, distances beyond the line's
        length return the last point.
        """
        pts = _non_empty(as_line(line), 'walk along')
        return self._along(pts, float(dist))

    def _point_on_line(self, pts: Line, p: Point) -> PointOnLine:
        if len(pts) == 1:
            return PointOnLine(pts[0], 0, 0.0)
        best = None
        best_index = 0
        for i in range(len(pts) - 1):
            proj = project_onto_segment(p, pts[i], pts[i + 1], self.kx, self.ky)
            # strict comparison: the earliest segment wins ties
            if best is None or proj.sq_dist < best.sq_dist:
                best = proj
                best_index = i
        return PointOnLine(best.point, best_index, best.t)

    def point_on_line(self, line, p) -> PointOnLine:
        """Closest point on `line` to `p`, with its segment index and position `t`."""
        pts = _non_empty(as_line(line), 'project onto')
        return self._point_on_line(pts, as_point(p))

    def line_slice(self, start, stop, line) -> List[Point]:
        """Part of `line` between the points on it closest to `start` and `stop`.

        The slice always runs in the line's own direction, whichever order
        `start` and `stop` are given in.
        """
        pts = _non_empty(as_line(line), 'slice')
        p1 = self._point_on_line(pts, as_point(start))
        p2 = self._point_on_line(pts, as_point(stop))
        if (p1.index, p1.t) > (p2.index, p2.t):
            p1, p2 = p2, p1

        out = [p1.point]
        left = p1.index + 1
        right = p2.index
        if left <= right and pts[left] != out[0]:
            out.append(pts[left])
        out.extend(pts[left + 1:right + 1])
        if pts[right] != p2.point:
            out.append(p2.point)
        return out

    def line_slice_along(self, start: float, stop: float, line) -> List[Point]:
        """Part of `line` between distances `start` and `stop` along it.

        Both distances are clamped to [0, line length]. Returns an empty list
        when `stop < start`.
        """
        pts = _non_empty(as_line(line), 'slice')
        start = float(start)
        stop = float(stop)
        if stop < start:
            return []
        total = self._line_distance(pts)
        start = min(max(start, 0.0), total)
        stop = min(max(stop, 0.0), total)

        out = [self._along(pts, start)]
        walked = 0.0
        # interior vertices only; the last point is reached through `_along`
        for p0, p1 in zip(pts, pts[1:-1]):
            walked += self._distance(p0, p1)
            if walked >= stop:
                break
            if walked > start:
                out.append(p1)
        out.append(self._along(pts, stop))
        return out

    def point_to_segment_distance(self, p, a, b) -> float:
        """Distance from `p` to the closest point of segment `a`-`b`."""
        proj = project_onto_segment(as_point(p), as_point(a), as_point(b), self.kx, self.ky)
        return math.sqrt(proj.sq_dist)

    # ------------------------------------------------------------------
    # polygons
    # ------------------------------------------------------------------
    def _twice_signed_area(self, polygon) -> float:
        rings = as_polygon(polygon)
        if not rings:
            return 0.0
        outer = ring_twice_area(rings[0])
        sign = -1.0 if outer < 0 else 1.0
        total = outer
        for ring in rings[1:]:
            total -= sign * abs(ring_twice_area(ring))
        return total * self.kx * self.ky

    def area(self, polygon) -> float:
        """Area of a polygon (outer ring then holes) in squared units.

        Ring orientation does not matter: holes are always subtracted from
        the outer ring.
        """
        return abs(self._twice_signed_area(polygon)) / 2.0

    def signed_area(self, polygon) -> float:
        """Area of a polygon carrying the outer ring's orientation: positive when counter-clockwise."""
        return self._twice_signed_area(polygon) / 2.0

    # ------------------------------------------------------------------
    # bounding boxes
    # ------------------------------------------------------------------
    def bbox(self, line) -> BBox:
        """Bounding box `(min_x, min_y, max_x, max_y)` of a line."""
        pts = _non_empty(as_line(line), 'bound')
        xs, ys = zip(*pts)
        return (min(xs), min(ys), max(xs), max(ys))

    def inside_bbox(self, p, box) -> bool:
        """True if `p` lies inside `box`, edges included."""
        x, y = as_point(p)
        min_x, min_y, max_x, max_y = as_bbox(box)
        return min_x <= x <= max_x and min_y <= y <= max_y

    def buffer_point(self, p, buffer: float) -> BBox:
        """Box around `p` extending `buffer` units in each direction."""
        x, y = as_point(p)
        h = abs(buffer) / self.kx
        v = abs(buffer) / self.ky
        return (x - h, y - v, x + h, y + v)

    def buffer_bbox(self, box, buffer: float) -> BBox:
        """Grow `box` by `buffer` units on every side.

        A negative buffer shrinks the box; an axis that would invert
        collapses to its midpoint.
        """
        min_x, min_y, max_x, max_y = as_bbox(box)
        h = buffer / self.kx
        v = buffer / self.ky
        min_x, max_x = _expand(min_x, max_x, h)
        min_y, max_y = _expand(min_y, max_y, v)
        return (min_x, min_y, max_x, max_y)

    # ------------------------------------------------------------------
    # plain helpers
    # ------------------------------------------------------------------
    @staticmethod
    def equals(a, b) -> bool:
        """Exact coordinate equality, no tolerance."""
        return as_point(a) == as_point(b)

    @staticmethod
    def interpolate(a, b, t: float) -> Point:
        """Point at fraction `t` of the way from `a` to `b`."""
        return interpolate(as_point(a), as_point(b), float(t))


def _non_empty(pts: Line, action: str) -> Line:
    if not pts:
        logger.debug('rejecting empty line (%s)', action)
        raise InvalidInput(f"Cannot {action} an empty line")
    return pts


def _expand(lo: float, hi: float, by: float):
    lo, hi = lo - by, hi + by
    if lo > hi:
        mid = (lo + hi) / 2.0
        return mid, mid
    return lo, hi


def create(lat: float, units: str = DEFAULT_UNITS) -> Ruler:
    """Create a ruler for measurements around latitude `lat`."""
    return Ruler(lat, units)


def from_tile(y: int, z: int, units: str = DEFAULT_UNITS) -> Ruler:
    """Create a ruler from slippy-map tile row `y` at zoom `z`, centred on the tile."""
    return Ruler(tile_latitude(y, z), units)
