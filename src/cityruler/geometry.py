"""
geometry.py

Planar helpers shared by the ruler's line and polygon operations. All
arithmetic happens in degree space, with the ruler's `kx`/`ky` passed in
wherever distances or angles matter so that segment projection is done in
scaled (locally isotropic) space.

Public functions:
- `interpolate(a, b, t)` -> point
- `project_onto_segment(p, a, b, kx, ky)` -> SegmentProjection
- `ring_twice_area(ring)` -> float
"""
from typing import NamedTuple, Sequence, Tuple

Point = Tuple[float, float]


class SegmentProjection(NamedTuple):
    point: Point
    t: float
    sq_dist: float


def interpolate(a: Point, b: Point, t: float) -> Point:
    """Point at fraction `t` of the way from `a` to `b` (not clamped)."""
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def project_onto_segment(p: Point, a: Point, b: Point, kx: float, ky: float) -> SegmentProjection:
    """Closest point to `p` on segment `a`-`b`, measured in scaled space.

    The projection parameter is clamped to [0, 1], so a point beyond either
    end projects onto that endpoint. A zero-length segment has `t = 0` and
    projects everything onto `a`.

    Returns: `SegmentProjection(point, t, sq_dist)` where `sq_dist` is the
    squared scaled distance from `p` to `point`.
    """
    x, y = a
    dx = (b[0] - x) * kx
    dy = (b[1] - y) * ky
    t = 0.0
    if dx != 0 or dy != 0:
        t = ((p[0] - x) * kx * dx + (p[1] - y) * ky * dy) / (dx * dx + dy * dy)
        if t > 1.0:
            t = 1.0
            x, y = b
        elif t > 0.0:
            x += dx / kx * t
            y += dy / ky * t
        else:
            t = 0.0
    ex = (p[0] - x) * kx
    ey = (p[1] - y) * ky
    return SegmentProjection((x, y), t, ex * ex + ey * ey)


def ring_twice_area(ring: Sequence[Point]) -> float:
    """Twice the signed area of `ring` in squared degrees, positive when counter-clockwise.

    The ring is closed implicitly; a repeated closing vertex adds nothing.
    Rings with fewer than 3 points return 0.
    """
    n = len(ring)
    if n < 3:
        return 0.0
    # offsetting by the first vertex keeps the products small
    y0 = ring[0][1]
    total = 0.0
    xk, yk = ring[-1]
    for xj, yj in ring:
        total += (xk - xj) * (yj + yk - 2.0 * y0)
        xk, yk = xj, yj
    return total
