"""
Packed coordinate sequences — one interleaved numpy buffer per sequence

Buffer layout: count x dimension values, coordinate after coordinate:
    [x0, y0, (z0, ...), (m0, ...), x1, y1, ...]

Coordinates handed out by these sequences are always copies; writes go
through set_ordinate.
"""

from collections.abc import Sequence
from typing import ClassVar

import numpy as np
import numpy.typing as npt

from geomcore.core.domain import coordinates as Coordinates
from geomcore.core.domain.coordinate import Coordinate
from geomcore.core.domain.errors import ShapeRangeError
from geomcore.core.math.numerical_safeguards import NULL_ORDINATE
from geomcore.sequences.base import CoordinateSequence, format_sequence


class PackedCoordinateSequence(CoordinateSequence):
    """
    Base for numpy-backed sequences; subclasses pick the storage dtype.

    Args:
        coordinates: Coordinates to pack. Spatial ordinates are matched by
            spatial index and measures by measure position; anything the
            input does not carry stays NULL_ORDINATE.
        dimension: Sequence dimension (default: common shape of the input)
        measures: Sequence measures (default: common shape of the input)
    """

    dtype: ClassVar[type[np.floating]] = np.float64

    def __init__(
        self,
        coordinates: Sequence[Coordinate | None] | None = None,
        dimension: int | None = None,
        measures: int | None = None,
    ) -> None:
        items = list(coordinates) if coordinates is not None else []

        if dimension is None or measures is None:
            common_dimension, common_measures = Coordinates.common_shape(items)
            if dimension is None:
                dimension = common_dimension
            if measures is None:
                measures = common_measures if dimension - common_measures >= 2 else 0

        super().__init__(len(items), dimension, measures)
        self._coords = np.full(len(items) * dimension, NULL_ORDINATE, dtype=self.dtype)

        spatial = self.spatial
        for i, coordinate in enumerate(items):
            if coordinate is None:
                continue
            offset = i * dimension
            for d in range(min(spatial, coordinate.spatial)):
                self._coords[offset + d] = coordinate.get_spatial(d)
            for j in range(min(measures, coordinate.measures)):
                self._coords[offset + spatial + j] = coordinate.get_measure(j)

    @classmethod
    def with_size(
        cls, size: int, dimension: int = 2, measures: int = 0
    ) -> "PackedCoordinateSequence":
        """Sequence of `size` coordinates, every ordinate 0.0."""
        if size < 0:
            raise ShapeRangeError(f"count must be non-negative, got {size}")
        return cls.from_raw(np.zeros(size * dimension, dtype=cls.dtype), dimension, measures)

    @classmethod
    def from_raw(
        cls, raw: npt.ArrayLike | None, dimension: int, measures: int = 0
    ) -> "PackedCoordinateSequence":
        """
        Wrap a flat interleaved buffer.

        The buffer is taken over without copying when it already has the
        sequence dtype and is one-dimensional.

        Raises:
            ShapeRangeError: If the shape is invalid or the buffer length is
                not a multiple of dimension
        """
        buffer = (
            np.empty(0, dtype=cls.dtype)
            if raw is None
            else np.asarray(raw, dtype=cls.dtype).reshape(-1)
        )
        if dimension <= 0:
            raise ShapeRangeError(f"dimension must be positive, got {dimension}")
        if buffer.size % dimension != 0:
            raise ShapeRangeError(
                f"packed buffer of {buffer.size} values does not hold a whole "
                f"number of {dimension}-ordinate coordinates"
            )

        sequence = cls.__new__(cls)
        CoordinateSequence.__init__(sequence, buffer.size // dimension, dimension, measures)
        sequence._coords = buffer
        return sequence

    @classmethod
    def from_sequence(
        cls, sequence: CoordinateSequence | None
    ) -> "PackedCoordinateSequence":
        """Copy of any sequence in packed form; empty XY sequence for None."""
        if sequence is None:
            return cls.from_raw(None, 2, 0)
        result = cls.with_size(sequence.count, sequence.dimension, sequence.measures)
        for i in range(sequence.count):
            for d in range(sequence.dimension):
                result.set_ordinate_at(i, d, sequence.get_ordinate_at(i, d))
        return result

    def get_raw_coordinates(self) -> np.ndarray:
        """The live backing buffer (writes to it are visible in the sequence)."""
        return self._coords

    # -------------------------------------------------------------------------
    # CoordinateSequence
    # -------------------------------------------------------------------------

    def get_ordinate_at(self, index: int, ordinate_index: int) -> float:
        return float(self._coords[index * self.dimension + ordinate_index])

    def set_ordinate_at(self, index: int, ordinate_index: int, value: float) -> None:
        self._coords[index * self.dimension + ordinate_index] = value

    def copy(self) -> "PackedCoordinateSequence":
        return type(self).from_raw(self._coords.copy(), self.dimension, self.measures)

    def reversed(self) -> "PackedCoordinateSequence":
        rows = self._coords.reshape(-1, self.dimension)
        return type(self).from_raw(
            rows[::-1].copy().reshape(-1), self.dimension, self.measures
        )

    def __str__(self) -> str:
        return format_sequence(self)


class PackedDoubleCoordinateSequence(PackedCoordinateSequence):
    """Packed sequence stored as float64."""

    dtype = np.float64


class PackedFloatCoordinateSequence(PackedCoordinateSequence):
    """
    Packed sequence stored as float32.

    Values are rounded to single precision on write; reads return the
    rounded value widened to float.
    """

    dtype = np.float32
