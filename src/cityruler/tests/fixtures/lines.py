"""Sample coordinates for ruler tests.

`SF_LINE` is a short street-scale polyline through downtown San Francisco,
roughly 2 km long, used where a realistic city-scale line is wanted.
"""

SF_LAT = 37.78

SF_LINE = [
    (-122.4194, 37.7749),
    (-122.4140, 37.7785),
    (-122.4081, 37.7812),
    (-122.4039, 37.7858),
    (-122.3990, 37.7880),
]


def make_rect(ruler, origin, width, height, clockwise=False):
    """Closed-by-implication rectangle ring with sides `width` x `height` ruler units."""
    p0 = tuple(origin)
    p1 = ruler.offset(p0, width, 0.0)
    p2 = ruler.offset(p0, width, height)
    p3 = ruler.offset(p0, 0.0, height)
    ring = [p0, p1, p2, p3]
    if clockwise:
        ring.reverse()
    return ring
