"""Small utilities for bearing wrapping and bearing components.

Keep these dependency-light so the scalar ruler and the numpy batch helpers
share one definition of the bearing range.
"""
import math
import numpy as np


def wrap_deg(x):
    """Wrap degrees to (-180, 180].

    Accepts scalars or numpy arrays; returns same-shaped output.
    """
    x_arr = np.asarray(x, dtype=float)
    return 180.0 - (180.0 - x_arr) % 360.0


def bearing_deg(dx, dy):
    """Bearing clockwise from north, in degrees, of the easting/northing vector (dx, dy).

    The result lies in (-180, 180]. A zero vector has bearing 0.
    """
    dx_a = np.asarray(dx, dtype=float)
    dy_a = np.asarray(dy, dtype=float)
    b = wrap_deg(np.degrees(np.arctan2(dx_a, dy_a)))
    return np.where((dx_a == 0) & (dy_a == 0), 0.0, b)


def bearing_components(bearing: float):
    """Return (sin, cos) of a bearing given in degrees: the east and north unit components."""
    a = math.radians(bearing)
    return math.sin(a), math.cos(a)
