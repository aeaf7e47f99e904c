"""
cityruler

Fast approximations of geodesic measurements for city-scale work. Build a
`Ruler` once for the latitude of your area of interest and reuse it:

    import cityruler

    ruler = cityruler.create(52.52, units='kilometers')
    ruler.distance((13.40, 52.52), (13.45, 52.51))
    ruler.along(line, 1.5)

Accuracy degrades with distance from the construction latitude; create a new
ruler when the area of interest moves.
"""
from cityruler.config import UNITS, DEFAULT_UNITS
from cityruler.errors import InvalidInput
from cityruler.ruler import PointOnLine, Ruler, create, from_tile

__version__ = "0.1.0"

__all__ = [
    'DEFAULT_UNITS',
    'InvalidInput',
    'PointOnLine',
    'Ruler',
    'UNITS',
    'create',
    'from_tile',
]
