"""
batch.py

Numpy-vectorized counterparts of the ruler's per-point methods, for pipelines
that measure many points against one ruler at once. Results agree with the
scalar `Ruler` methods, including their clamping, degenerate-segment and
tie-breaking rules.

Public functions:
- `pairwise_distances(ruler, a, b)` -> (N,) distances
- `distances_from(ruler, origin, points)` -> (N,) distances
- `bearings_from(ruler, origin, points)` -> (N,) bearings
- `project_points_onto_line(ruler, line, points)` -> LineProjection
"""
from typing import NamedTuple

import numpy as np

from cityruler.angle_utils import bearing_deg
from cityruler.coords import as_line, as_point
from cityruler.errors import InvalidInput


class LineProjection(NamedTuple):
    points: np.ndarray
    index: np.ndarray
    t: np.ndarray
    distance_along: np.ndarray


def _as_points_array(points, name='points') -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2), dtype=float)
    if arr.ndim == 1 and arr.shape[0] == 2:
        arr = arr[None, :]
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidInput(f"{name} must have shape (N, 2), got {arr.shape}")
    return arr


def pairwise_distances(ruler, a, b) -> np.ndarray:
    """Distance between each row of `a` and the matching row of `b`."""
    a = _as_points_array(a, 'a')
    b = _as_points_array(b, 'b')
    if a.shape != b.shape:
        raise InvalidInput(f"a and b must have the same shape, got {a.shape} and {b.shape}")
    return np.hypot((a[:, 0] - b[:, 0]) * ruler.kx, (a[:, 1] - b[:, 1]) * ruler.ky)


def distances_from(ruler, origin, points) -> np.ndarray:
    """Distance from `origin` to every point in `points`."""
    ox, oy = as_point(origin)
    pts = _as_points_array(points)
    return np.hypot((pts[:, 0] - ox) * ruler.kx, (pts[:, 1] - oy) * ruler.ky)


def bearings_from(ruler, origin, points) -> np.ndarray:
    """Bearing from `origin` to every point in `points`, within (-180, 180]."""
    ox, oy = as_point(origin)
    pts = _as_points_array(points)
    return bearing_deg((pts[:, 0] - ox) * ruler.kx, (pts[:, 1] - oy) * ruler.ky)


def project_points_onto_line(ruler, line, points) -> LineProjection:
    """Project many points onto a polyline at once.

    Returns a `LineProjection` with, per input point, the closest point on the
    line, the index of its segment, the position `t` on that segment and the
    distance travelled along the line to reach it.
    """
    pts_line = as_line(line)
    if not pts_line:
        raise InvalidInput("Cannot project onto an empty line")
    px = _as_points_array(points)
    M = px.shape[0]
    L = np.asarray(pts_line, dtype=float)

    if L.shape[0] == 1 or M == 0:
        return LineProjection(
            np.repeat(L[:1], M, axis=0),
            np.zeros(M, dtype=int),
            np.zeros(M, dtype=float),
            np.zeros(M, dtype=float),
        )

    kx, ky = ruler.kx, ruler.ky
    x0 = L[:-1, 0][None, :]
    y0 = L[:-1, 1][None, :]
    x1 = L[1:, 0][None, :]
    y1 = L[1:, 1][None, :]
    vx = (x1 - x0) * kx
    vy = (y1 - y0) * ky
    seg_len = np.hypot(vx, vy)[0]
    cumlen = np.concatenate([[0.0], np.cumsum(seg_len)])

    # Broadcast shapes: M x S. The arithmetic mirrors
    # geometry.project_onto_segment so ties resolve identically.
    px_e = px[:, 0][:, None]
    py_e = px[:, 1][:, None]
    denom = vx * vx + vy * vy
    degenerate = denom == 0
    t = ((px_e - x0) * kx * vx + (py_e - y0) * ky * vy) / np.where(degenerate, 1.0, denom)
    t = np.where(degenerate, 0.0, t)
    cx = np.where(t > 1.0, x1, np.where(t > 0.0, x0 + vx / kx * t, x0))
    cy = np.where(t > 1.0, y1, np.where(t > 0.0, y0 + vy / ky * t, y0))
    t = np.clip(t, 0.0, 1.0)
    ex = (px_e - cx) * kx
    ey = (py_e - cy) * ky
    d2 = ex * ex + ey * ey
    # argmin returns the first minimum, matching the scalar tie rule
    idx = np.argmin(d2, axis=1)
    rows = np.arange(M)
    chosen_t = t[rows, idx]
    proj = np.column_stack((cx[rows, idx], cy[rows, idx]))
    distance_along = cumlen[idx] + chosen_t * seg_len[idx]
    return LineProjection(proj, idx, chosen_t, distance_along)
