# -*- coding: utf-8 -*-

"""
cityruler/config.py

This module centralizes the constants used by the measurement engine. Keeping
the ellipsoid parameters and the unit table in one place makes sure every
ruler, helper and test derives its scale factors from the same numbers.

Contents:
---------
1. ELLIPSOID:
   - Name, equatorial radius and flattening of the reference ellipsoid.
   - Values are read from PROJ through `pyproj.Geod` rather than typed in, so
     they always match the WGS84 definition PROJ ships with.

2. E2, RAD:
   - Eccentricity squared derived from the flattening, and the degree to
     radian factor.

3. UNITS:
   - Linear distance units a ruler can report in, as a factor per meter.
   - `radians` expresses distance as an angle subtended at the equatorial
     radius.

4. DEFAULT_UNITS:
   - Units used when a ruler is created without an explicit unit name.

Usage:
------
    from cityruler.config import UNITS, DEFAULT_UNITS

    UNITS["miles"]      # miles per meter
"""
import math
from types import MappingProxyType

from pyproj import Geod

# ───────────────────────────────────────────────────────────────────────────────
# 1) REFERENCE ELLIPSOID
# ───────────────────────────────────────────────────────────────────────────────
_WGS84 = Geod(ellps="WGS84")

ELLIPSOID = MappingProxyType({
    'name': 'WGS84',
    'a': float(_WGS84.a),       # equatorial radius (m)
    'f': float(_WGS84.f),       # flattening (dimensionless)
})

# ───────────────────────────────────────────────────────────────────────────────
# 2) DERIVED CONSTANTS
# ───────────────────────────────────────────────────────────────────────────────
RE = ELLIPSOID['a']                           # equatorial radius (m)
FE = ELLIPSOID['f']                           # flattening
E2 = FE * (2.0 - FE)                          # eccentricity squared
RAD = math.pi / 180.0                         # radians per degree

# ───────────────────────────────────────────────────────────────────────────────
# 3) UNITS (factor per meter)
# ───────────────────────────────────────────────────────────────────────────────
UNITS = MappingProxyType({
    'kilometers': 1.0 / 1000.0,
    'miles': 1.0 / 1609.344,
    'nauticalmiles': 1.0 / 1852.0,
    'meters': 1.0,
    'metres': 1.0,
    'yards': 1.0 / 0.9144,
    'feet': 1.0 / 0.3048,
    'inches': 1.0 / 0.0254,
    'radians': 1.0 / RE,
})

# ───────────────────────────────────────────────────────────────────────────────
# 4) DEFAULTS
# ───────────────────────────────────────────────────────────────────────────────
DEFAULT_UNITS = 'meters'
