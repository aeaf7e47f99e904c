"""
scale.py

Scale-factor derivation for a ruler. A ruler converts degree offsets into
linear distance with two multipliers computed once at a reference latitude:

- `kx`: distance covered by one degree of longitude along the parallel
- `ky`: distance covered by one degree of latitude along the meridian

Both come from the WGS84 ellipsoid: `kx` uses the prime vertical radius of
curvature projected onto the parallel, `ky` the meridional radius of
curvature. Everything here is a pure function of its arguments.

Public functions:
- `unit_factor(units)` -> float
- `scale_factors(lat, units)` -> ScaleFactors
- `tile_latitude(y, z)` -> float
"""
import logging
import math
import numbers
from typing import NamedTuple

from cityruler.config import E2, RAD, RE, UNITS, DEFAULT_UNITS
from cityruler.errors import InvalidInput

logger = logging.getLogger(__name__)


class ScaleFactors(NamedTuple):
    kx: float
    ky: float


def unit_factor(units: str) -> float:
    """Return the number of `units` in one meter.

    Unit names are case-sensitive; see `cityruler.config.UNITS`.
    """
    try:
        return UNITS[units]
    except (KeyError, TypeError):
        logger.debug('rejecting unknown unit %r', units)
        raise InvalidInput(f"Unknown unit {units!r}; expected one of {sorted(UNITS)}") from None


def check_latitude(lat) -> float:
    """Return `lat` as a float, raising `InvalidInput` unless it lies in [-90, 90]."""
    try:
        value = float(lat)
    except (TypeError, ValueError):
        logger.debug('rejecting non-numeric latitude %r', lat)
        raise InvalidInput(f"Latitude must be a number, got {lat!r}") from None
    # NaN fails both comparisons
    if not -90.0 <= value <= 90.0:
        logger.debug('rejecting out-of-range latitude %r', lat)
        raise InvalidInput(f"Latitude must be within [-90, 90], got {lat!r}")
    return value


def scale_factors(lat: float, units: str = DEFAULT_UNITS) -> ScaleFactors:
    """Compute the longitude and latitude multipliers at `lat` in `units`.

    Parameters:
    - lat: reference latitude in degrees, within [-90, 90]
    - units: unit name from `cityruler.config.UNITS`

    Returns: `ScaleFactors(kx, ky)`, distance in `units` per degree.
    """
    lat = check_latitude(lat)
    m = RAD * RE * unit_factor(units)
    coslat = math.cos(lat * RAD)
    w2 = 1.0 / (1.0 - E2 * (1.0 - coslat * coslat))
    w = math.sqrt(w2)
    return ScaleFactors(kx=m * w * coslat, ky=m * w * w2 * (1.0 - E2))


def tile_latitude(y: int, z: int) -> float:
    """Latitude in degrees at the vertical center of slippy-map tile row `y` at zoom `z`."""
    if not isinstance(z, numbers.Integral) or isinstance(z, bool) or z < 0:
        logger.debug('rejecting tile zoom %r', z)
        raise InvalidInput(f"Tile zoom must be a non-negative integer, got {z!r}")
    if not isinstance(y, numbers.Integral) or isinstance(y, bool) or not 0 <= y < 2 ** z:
        logger.debug('rejecting tile row %r at zoom %r', y, z)
        raise InvalidInput(f"Tile row must be an integer in [0, {2 ** z}), got {y!r}")
    n = math.pi * (1.0 - 2.0 * (y + 0.5) / 2 ** z)
    return math.degrees(math.atan(math.sinh(n)))
