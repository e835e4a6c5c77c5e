"""
CoordinateSequence — contract for fixed-length containers of coordinates

A sequence holds `count` coordinates that all share one (dimension,
measures) shape. Every ordinate is addressable as (position, ordinate_index).

ORDINATE ACCESS CONTRACT:
1. get_ordinate with an index outside 0..dimension-1, or with a named
   Ordinate the sequence does not carry, returns NULL_ORDINATE
2. set_ordinate with a named Ordinate the sequence does not carry is ignored
3. set_ordinate with a positional index outside 0..dimension-1 raises
   OrdinateRangeError

Sequences are owned by the geometry that holds them; nothing in geomcore
keeps a reference to a sequence beyond the call that receives it.
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator

from geomcore.core.domain import coordinates as Coordinates
from geomcore.core.domain.coordinate import Coordinate
from geomcore.core.domain.errors import OrdinateRangeError, ShapeRangeError
from geomcore.core.domain.ordinates import (
    Ordinate,
    Ordinates,
    ordinate_index_for_shape,
    ordinates_for_shape,
)
from geomcore.core.math.numerical_safeguards import NULL_ORDINATE


class CoordinateSequence(ABC):
    """
    Abstract fixed-length sequence of same-shaped coordinates.

    Subclasses implement get_ordinate_at, set_ordinate_at and copy; all other
    operations are expressed through them and may be overridden for speed.

    Args:
        count: Number of coordinates
        dimension: Ordinates per coordinate (including measures)
        measures: Trailing measure ordinates per coordinate

    Raises:
        ShapeRangeError: If any argument is negative or
            dimension - measures < 2
    """

    def __init__(self, count: int, dimension: int, measures: int) -> None:
        if count < 0:
            raise ShapeRangeError(f"count must be non-negative, got {count}")
        # ordinates_for_shape validates dimension/measures
        self._ordinates = ordinates_for_shape(dimension, measures)

        self._count = count
        self._dimension = dimension
        self._measures = measures
        self._spatial = dimension - measures

        # cached positions of the named ordinates
        self._z_index = ordinate_index_for_shape(Ordinate.Z, dimension, measures)
        self._m_index = ordinate_index_for_shape(Ordinate.M, dimension, measures)

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def measures(self) -> int:
        return self._measures

    @property
    def spatial(self) -> int:
        return self._spatial

    @property
    def ordinates(self) -> Ordinates:
        return self._ordinates

    @property
    def has_z(self) -> bool:
        return self._z_index >= 0

    @property
    def has_m(self) -> bool:
        return self._m_index >= 0

    @property
    def z_ordinate_index(self) -> int:
        """Position of Z, or -1 if the sequence has no Z."""
        return self._z_index

    @property
    def m_ordinate_index(self) -> int:
        """Position of M, or -1 if the sequence has no M."""
        return self._m_index

    def try_get_ordinate_index(self, ordinate: Ordinate) -> int:
        """Position of a named ordinate in this sequence, or -1."""
        return ordinate_index_for_shape(ordinate, self._dimension, self._measures)

    # -------------------------------------------------------------------------
    # Raw ordinate access (implemented by subclasses)
    # -------------------------------------------------------------------------

    @abstractmethod
    def get_ordinate_at(self, index: int, ordinate_index: int) -> float:
        """Read an ordinate; ordinate_index is already within 0..dimension-1."""

    @abstractmethod
    def set_ordinate_at(self, index: int, ordinate_index: int, value: float) -> None:
        """Write an ordinate; ordinate_index is already within 0..dimension-1."""

    @abstractmethod
    def copy(self) -> "CoordinateSequence":
        """Deep copy of this sequence."""

    # -------------------------------------------------------------------------
    # Ordinate access
    # -------------------------------------------------------------------------

    def _check_position(self, index: int) -> None:
        if index < 0 or index >= self._count:
            raise IndexError(f"coordinate index {index} out of range 0..{self._count - 1}")

    def get_ordinate(self, index: int, ordinate: int | Ordinate) -> float:
        """
        Read one ordinate of the coordinate at `index`.

        Args:
            index: Coordinate position
            ordinate: Positional ordinate index or named Ordinate

        Returns:
            The value, or NULL_ORDINATE if the sequence does not carry it

        Raises:
            IndexError: If index is not a valid coordinate position
        """
        self._check_position(index)
        if isinstance(ordinate, Ordinate):
            ordinate = self.try_get_ordinate_index(ordinate)
        if ordinate < 0 or ordinate >= self._dimension:
            return NULL_ORDINATE
        return self.get_ordinate_at(index, ordinate)

    def set_ordinate(self, index: int, ordinate: int | Ordinate, value: float) -> None:
        """
        Write one ordinate of the coordinate at `index`.

        A named Ordinate the sequence does not carry is ignored.

        Raises:
            IndexError: If index is not a valid coordinate position
            OrdinateRangeError: If a positional ordinate index is out of range
        """
        self._check_position(index)
        if isinstance(ordinate, Ordinate):
            ordinate_index = self.try_get_ordinate_index(ordinate)
            if ordinate_index < 0:
                return
            self.set_ordinate_at(index, ordinate_index, float(value))
            return

        if ordinate < 0 or ordinate >= self._dimension:
            raise OrdinateRangeError(
                f"ordinate index {ordinate} out of range for sequence "
                f"(dimension={self._dimension})"
            )
        self.set_ordinate_at(index, ordinate, float(value))

    def get_x(self, index: int) -> float:
        return self.get_ordinate(index, 0)

    def get_y(self, index: int) -> float:
        return self.get_ordinate(index, 1)

    def get_z(self, index: int) -> float:
        if self._z_index < 0:
            return NULL_ORDINATE
        return self.get_ordinate(index, self._z_index)

    def get_m(self, index: int) -> float:
        if self._m_index < 0:
            return NULL_ORDINATE
        return self.get_ordinate(index, self._m_index)

    def set_x(self, index: int, value: float) -> None:
        self.set_ordinate(index, 0, value)

    def set_y(self, index: int, value: float) -> None:
        self.set_ordinate(index, 1, value)

    def set_z(self, index: int, value: float) -> None:
        """Set Z if the sequence carries it; otherwise do nothing."""
        if self._z_index >= 0:
            self.set_ordinate(index, self._z_index, value)

    def set_m(self, index: int, value: float) -> None:
        """Set M if the sequence carries it; otherwise do nothing."""
        if self._m_index >= 0:
            self.set_ordinate(index, self._m_index, value)

    # -------------------------------------------------------------------------
    # Coordinate access
    # -------------------------------------------------------------------------

    def create_coordinate(self) -> Coordinate:
        """A new coordinate of this sequence's shape."""
        return Coordinates.create(self._dimension, self._measures)

    def get_coordinate(self, index: int) -> Coordinate:
        """
        The coordinate at `index`.

        Whether this is the stored object or a copy depends on the
        implementation; treat it as read-only unless it is known to be a copy.
        """
        return self.get_coordinate_copy(index)

    def get_coordinate_copy(self, index: int) -> Coordinate:
        """A new coordinate holding the values at `index`."""
        coordinate = self.create_coordinate()
        self.get_coordinate_into(index, coordinate)
        return coordinate

    def get_coordinate_into(self, index: int, coordinate: Coordinate) -> None:
        """
        Copy the values at `index` into an existing coordinate.

        Spatial ordinates are matched by spatial index and measures by
        measure position; slots `coordinate` cannot hold are skipped.
        """
        self._check_position(index)
        coordinate.x = self.get_ordinate_at(index, 0)
        coordinate.y = self.get_ordinate_at(index, 1)

        for i in range(2, min(self._spatial, coordinate.spatial)):
            coordinate.set_ordinate(i, self.get_ordinate_at(index, i))

        target_spatial = coordinate.spatial
        for j in range(min(self._measures, coordinate.measures)):
            coordinate.set_ordinate(
                target_spatial + j, self.get_ordinate_at(index, self._spatial + j)
            )

    @property
    def first(self) -> Coordinate | None:
        return self.get_coordinate(0) if self._count > 0 else None

    @property
    def last(self) -> Coordinate | None:
        return self.get_coordinate(self._count - 1) if self._count > 0 else None

    def to_coordinate_array(self) -> list[Coordinate]:
        return [self.get_coordinate(i) for i in range(self._count)]

    def __iter__(self) -> Iterator[Coordinate]:
        for i in range(self._count):
            yield self.get_coordinate(i)

    def reversed(self) -> "CoordinateSequence":
        """A reversed deep copy of this sequence."""
        result = self.copy()
        last = self._count - 1
        for i in range(self._count):
            for d in range(self._dimension):
                result.set_ordinate_at(i, d, self.get_ordinate_at(last - i, d))
        return result

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(count={self._count}, "
            f"dimension={self._dimension}, measures={self._measures})"
        )


# =============================================================================
# TEXT FORMAT
# =============================================================================


def format_ordinate(value: float) -> str:
    """
    Shortest text for an ordinate: up to 16 significant digits, no trailing
    zeros, "NaN" and "Inf"/"-Inf" for the non-finite values.

    Examples:
        >>> format_ordinate(1.0)
        '1'
        >>> format_ordinate(float("nan"))
        'NaN'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    return f"{value:.16g}"


def format_sequence(sequence: CoordinateSequence) -> str:
    """
    "(x,y x,y ...)" with every ordinate of every coordinate, "()" when empty.
    """
    parts = []
    for i in range(sequence.count):
        parts.append(
            ",".join(
                format_ordinate(sequence.get_ordinate_at(i, d))
                for d in range(sequence.dimension)
            )
        )
    return f"({' '.join(parts)})"
