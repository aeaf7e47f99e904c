"""Exceptions raised by cityruler."""


class InvalidInput(ValueError):
    """Raised when a ruler is built from, or asked to measure, unusable input.

    Covers latitudes outside [-90, 90], unknown unit names, invalid tile
    coordinates, malformed points and empty lines passed to operations that
    need at least one point.
    """
