"""Exception types raised by geoframes"""

__all__ = ['EmptyInputError', 'GeoframesError', 'PreconditionError']


class GeoframesError(Exception):
    """Base exception for all geoframes errors."""


class EmptyInputError(GeoframesError, ValueError):
    """A reduction (center, bounds) was requested over zero points."""


class PreconditionError(GeoframesError, RuntimeError):
    """A transform was used before its reference center was established."""
