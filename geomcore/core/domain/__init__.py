"""
Domain models: coordinate variants, ordinate identifiers, coordinate list
and equality comparers.
"""

from geomcore.core.domain import coordinates as Coordinates
from geomcore.core.domain.coordinate import (
    Coordinate,
    CoordinateKind,
    CoordinateM,
    CoordinateZ,
    CoordinateZM,
    ExtraDimensionalCoordinate,
)
from geomcore.core.domain.coordinate_list import CoordinateList
from geomcore.core.domain.equality import (
    CoordinateEqualityComparer,
    PerOrdinateEqualityComparer,
)
from geomcore.core.domain.errors import (
    ConfigurationError,
    GeomCoreError,
    OrdinateRangeError,
    RingNotClosedError,
    ShapeRangeError,
)
from geomcore.core.domain.ordinates import (
    Ordinate,
    Ordinates,
    ordinate_index_for_shape,
    ordinates_for_shape,
    ordinates_to_dimension,
    ordinates_to_measures,
    ordinates_to_spatial,
)

__all__ = [
    # Coordinate variants
    "Coordinate",
    "CoordinateKind",
    "CoordinateM",
    "CoordinateZ",
    "CoordinateZM",
    "ExtraDimensionalCoordinate",
    # Dispatcher module
    "Coordinates",
    # Coordinate list
    "CoordinateList",
    # Equality comparers
    "CoordinateEqualityComparer",
    "PerOrdinateEqualityComparer",
    # Exceptions
    "ConfigurationError",
    "GeomCoreError",
    "OrdinateRangeError",
    "RingNotClosedError",
    "ShapeRangeError",
    # Ordinates
    "Ordinate",
    "Ordinates",
    "ordinate_index_for_shape",
    "ordinates_for_shape",
    "ordinates_to_dimension",
    "ordinates_to_measures",
    "ordinates_to_spatial",
]
