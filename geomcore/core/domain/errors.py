"""
Exceptions raised by the coordinate model.

Read access never raises for a missing ordinate (it returns NULL_ORDINATE);
these exceptions cover the strict paths: writes, shape construction,
ring closure preconditions and configuration.
"""


class GeomCoreError(Exception):
    """Base class for geomcore errors."""


class OrdinateRangeError(GeomCoreError, IndexError):
    """
    Write to an ordinate slot the target does not hold.

    Raised when setting an ordinate index outside 0..dimension-1, or a named
    ordinate (Z, M, ...) that the coordinate variant cannot store.
    """


class ShapeRangeError(GeomCoreError, ValueError):
    """
    Invalid (dimension, measures) shape.

    Raised for negative dimension, negative measures, or fewer than two
    spatial ordinates (dimension - measures < 2).
    """


class RingNotClosedError(GeomCoreError, ValueError):
    """A non-empty ring-like sequence whose first and last points differ in 2D."""


class ConfigurationError(GeomCoreError, ValueError):
    """Invalid process-wide defaults or an attempt to replace them after use."""
