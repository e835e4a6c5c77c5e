"""
Coordinates — shape introspection and shape-directed construction

Selection table (dimension, measures) -> variant:
    (2, 0) -> Coordinate
    (3, 0) -> CoordinateZ
    (3, 1) -> CoordinateM
    (4, 1) -> CoordinateZM
    other  -> ExtraDimensionalCoordinate

Introspection dispatches on the exact `kind` discriminant of a coordinate.
isinstance would misclassify CoordinateZM as CoordinateZ.
"""

from collections.abc import Iterable
from typing import Final

from geomcore.core.domain.coordinate import (
    Coordinate,
    CoordinateKind,
    CoordinateM,
    CoordinateZ,
    CoordinateZM,
    ExtraDimensionalCoordinate,
)

# =============================================================================
# SHAPE TABLE
# =============================================================================

# (dimension, measures) of the fixed-shape variants
FIXED_SHAPES: Final[dict[CoordinateKind, tuple[int, int]]] = {
    CoordinateKind.XY: (2, 0),
    CoordinateKind.XYZ: (3, 0),
    CoordinateKind.XYM: (3, 1),
    CoordinateKind.XYZM: (4, 1),
}

# Shape reported for None or for objects outside the variant family
DEFAULT_SHAPE: Final[tuple[int, int]] = (2, 0)


# =============================================================================
# CONSTRUCTION
# =============================================================================


def create(dimension: int = 2, measures: int = 0) -> Coordinate:
    """
    Create a coordinate able to hold the given shape.

    Args:
        dimension: Total ordinate count
        measures: Number of measure ordinates

    Returns:
        A fixed-shape variant when the shape matches the table, otherwise an
        ExtraDimensionalCoordinate

    Raises:
        ShapeRangeError: If the shape falls through to the extended variant
            and is invalid (negative counts, fewer than two spatial ordinates)
    """
    if measures == 0:
        if dimension == 2:
            return Coordinate()
        if dimension == 3:
            return CoordinateZ()
    elif measures == 1:
        if dimension == 3:
            return CoordinateM()
        if dimension == 4:
            return CoordinateZM()

    return ExtraDimensionalCoordinate(dimension, measures)


# =============================================================================
# INTROSPECTION
# =============================================================================


def shape_of(coordinate: Coordinate | None) -> tuple[int, int]:
    """
    (dimension, measures) of a coordinate.

    Returns:
        The stored shape for ExtraDimensionalCoordinate, the table shape for
        the fixed variants, DEFAULT_SHAPE for None or anything unrecognised
    """
    if coordinate is None:
        return DEFAULT_SHAPE

    kind = getattr(type(coordinate), "kind", None)
    if kind is None:
        return DEFAULT_SHAPE

    fixed = FIXED_SHAPES.get(kind)
    if fixed is not None:
        return fixed

    if kind is CoordinateKind.EXTENDED:
        return coordinate.dimension, coordinate.measures

    return DEFAULT_SHAPE


def dimension_of(coordinate: Coordinate | None) -> int:
    """Total ordinate count of a coordinate (2 for None)."""
    return shape_of(coordinate)[0]


def measures_of(coordinate: Coordinate | None) -> int:
    """Measure count of a coordinate (0 for None)."""
    return shape_of(coordinate)[1]


def spatial_dimension_of(coordinate: Coordinate | None) -> int:
    """dimension - measures."""
    dimension, measures = shape_of(coordinate)
    return dimension - measures


def has_z(coordinate: Coordinate | None) -> bool:
    """True if the coordinate carries more than two spatial ordinates."""
    return spatial_dimension_of(coordinate) > 2


def has_m(coordinate: Coordinate | None) -> bool:
    """True if the coordinate carries at least one measure."""
    return measures_of(coordinate) > 0


def common_shape(coordinates: Iterable[Coordinate | None] | None) -> tuple[int, int]:
    """
    Smallest shape able to hold every coordinate of a collection.

    Spatial ordinates and measures are maximised separately, so XYZ and XYM
    inputs give (4, 1). None elements are skipped; an empty or None
    collection gives DEFAULT_SHAPE.
    """
    if coordinates is None:
        return DEFAULT_SHAPE

    max_spatial, max_measures = 2, 0
    for coordinate in coordinates:
        if coordinate is None:
            continue
        dimension, measures = shape_of(coordinate)
        max_spatial = max(max_spatial, dimension - measures)
        max_measures = max(max_measures, measures)

    return max_spatial + max_measures, max_measures
