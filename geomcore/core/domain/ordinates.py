"""
Ordinate — named ordinate slots; Ordinates — capability masks

An Ordinate identifies one slot of a coordinate by meaning rather than by
position: the n-th spatial ordinate or the n-th measure. Ordinates is the
bit-flag form used by sequences and factories to describe which slots they
support.

Layout of the flags:
- bits 0..15  : SPATIAL_1..SPATIAL_16 (X, Y, Z are the first three)
- bits 16..31 : MEASURE_1..MEASURE_16 (M is the first)

Shapes with more than 16 spatial ordinates or 16 measures still work; only
their mask is truncated to the first 16 of each kind.
"""

from enum import IntEnum, IntFlag
from typing import Final

from geomcore.core.domain.errors import ShapeRangeError

# =============================================================================
# CONSTANTS
# =============================================================================

# Number of spatial / measure slots representable in a mask
MAX_FLAGGED_SPATIAL: Final[int] = 16
MAX_FLAGGED_MEASURES: Final[int] = 16

# Bit offset of MEASURE_1 in the mask
MEASURE_FLAG_SHIFT: Final[int] = 16


# =============================================================================
# ORDINATE
# =============================================================================


class Ordinate(IntEnum):
    """Named ordinate slot."""

    SPATIAL_1 = 0
    SPATIAL_2 = 1
    SPATIAL_3 = 2
    SPATIAL_4 = 3
    SPATIAL_5 = 4
    SPATIAL_6 = 5
    SPATIAL_7 = 6
    SPATIAL_8 = 7
    SPATIAL_9 = 8
    SPATIAL_10 = 9
    SPATIAL_11 = 10
    SPATIAL_12 = 11
    SPATIAL_13 = 12
    SPATIAL_14 = 13
    SPATIAL_15 = 14
    SPATIAL_16 = 15
    MEASURE_1 = 16
    MEASURE_2 = 17
    MEASURE_3 = 18
    MEASURE_4 = 19
    MEASURE_5 = 20
    MEASURE_6 = 21
    MEASURE_7 = 22
    MEASURE_8 = 23
    MEASURE_9 = 24
    MEASURE_10 = 25
    MEASURE_11 = 26
    MEASURE_12 = 27
    MEASURE_13 = 28
    MEASURE_14 = 29
    MEASURE_15 = 30
    MEASURE_16 = 31

    # Aliases
    X = 0
    Y = 1
    Z = 2
    M = 16

    @property
    def is_measure(self) -> bool:
        return self >= Ordinate.MEASURE_1

    @property
    def spatial_index(self) -> int:
        """Index among spatial ordinates, or -1 for a measure."""
        return -1 if self.is_measure else int(self)

    @property
    def measure_index(self) -> int:
        """Index among measures, or -1 for a spatial ordinate."""
        return int(self) - MEASURE_FLAG_SHIFT if self.is_measure else -1

    @property
    def flag(self) -> "Ordinates":
        return Ordinates(1 << int(self))


# =============================================================================
# ORDINATES (FLAGS)
# =============================================================================


class Ordinates(IntFlag):
    """Capability mask: one bit per Ordinate."""

    NONE = 0

    X = 1 << 0
    Y = 1 << 1
    Z = 1 << 2
    M = 1 << MEASURE_FLAG_SHIFT

    XY = X | Y
    XYZ = XY | Z
    XYM = XY | M
    XYZM = XYZ | M

    ALL_SPATIAL = (1 << MAX_FLAGGED_SPATIAL) - 1
    ALL_MEASURES = ((1 << MAX_FLAGGED_MEASURES) - 1) << MEASURE_FLAG_SHIFT
    ALL_ORDINATES = ALL_SPATIAL | ALL_MEASURES

    def has(self, ordinate: Ordinate) -> bool:
        return bool(self & ordinate.flag)

    @classmethod
    def parse(cls, name: str) -> "Ordinates":
        """
        Resolve a mask by name ("XYZM", "ALL_ORDINATES", case-insensitive).

        Raises:
            ValueError: If the name is unknown
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown ordinates mask: {name!r}") from None


# =============================================================================
# CONVERSIONS
# =============================================================================


def _count_contiguous_bits(value: int) -> int:
    count = 0
    while value & 1:
        count += 1
        value >>= 1
    return count


def ordinates_to_dimension(ordinates: Ordinates) -> int:
    """
    Total ordinate count described by a mask.

    Spatial ordinates count only as a contiguous run starting at X, measures
    only as a contiguous run starting at M; gaps end the run.

    Examples:
        >>> ordinates_to_dimension(Ordinates.XYZM)
        4
        >>> ordinates_to_dimension(Ordinates.XYM)
        3
    """
    return ordinates_to_spatial(ordinates) + ordinates_to_measures(ordinates)


def ordinates_to_spatial(ordinates: Ordinates) -> int:
    """Number of contiguous spatial ordinates in a mask."""
    return _count_contiguous_bits(int(ordinates) & int(Ordinates.ALL_SPATIAL))


def ordinates_to_measures(ordinates: Ordinates) -> int:
    """Number of contiguous measures in a mask."""
    return _count_contiguous_bits(
        (int(ordinates) & int(Ordinates.ALL_MEASURES)) >> MEASURE_FLAG_SHIFT
    )


def ordinates_for_shape(dimension: int, measures: int) -> Ordinates:
    """
    Mask for a (dimension, measures) shape.

    Raises:
        ShapeRangeError: If the shape is invalid

    Examples:
        >>> ordinates_for_shape(4, 1) == Ordinates.XYZM
        True
    """
    if dimension < 0:
        raise ShapeRangeError(f"dimension must be non-negative, got {dimension}")
    if measures < 0:
        raise ShapeRangeError(f"measures must be non-negative, got {measures}")

    spatial = dimension - measures
    if spatial < 2:
        raise ShapeRangeError(
            f"must have at least two spatial dimensions, got dimension={dimension}, "
            f"measures={measures}"
        )

    spatial_flags = (1 << min(spatial, MAX_FLAGGED_SPATIAL)) - 1
    measure_flags = (1 << min(measures, MAX_FLAGGED_MEASURES)) - 1
    return Ordinates(spatial_flags | (measure_flags << MEASURE_FLAG_SHIFT))


def ordinate_index_for_shape(ordinate: Ordinate, dimension: int, measures: int) -> int:
    """
    Positional index of a named ordinate within a shape, or -1 if absent.

    Examples:
        >>> ordinate_index_for_shape(Ordinate.M, 4, 1)
        3
        >>> ordinate_index_for_shape(Ordinate.M, 3, 1)
        2
        >>> ordinate_index_for_shape(Ordinate.Z, 3, 1)
        -1
    """
    spatial = dimension - measures
    if ordinate.is_measure:
        index = ordinate.measure_index
        return spatial + index if index < measures else -1
    index = ordinate.spatial_index
    return index if index < spatial else -1
