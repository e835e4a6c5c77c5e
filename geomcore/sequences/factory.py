"""
CoordinateSequenceFactory — creation of sequences within a capability limit

Each factory declares the largest shape it builds as an Ordinates mask.
Requests for a larger shape are clamped to that limit, never rejected:
measures are cut first to what the factory supports, then spatial
ordinates, and spatial never drops below X/Y.

Clamping is logged at DEBUG on the "geomcore.sequences.factory" logger.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Final, Literal

import numpy as np

from geomcore.core.domain import coordinates as Coordinates
from geomcore.core.domain.coordinate import Coordinate
from geomcore.core.domain.ordinates import (
    Ordinates,
    ordinates_to_measures,
    ordinates_to_spatial,
)
from geomcore.core.math.numerical_safeguards import clamp
from geomcore.sequences.array_sequence import CoordinateArraySequence
from geomcore.sequences.base import CoordinateSequence
from geomcore.sequences.packed_sequence import (
    PackedCoordinateSequence,
    PackedDoubleCoordinateSequence,
    PackedFloatCoordinateSequence,
)
from geomcore.sequences.utilities import copy as copy_sequence

logger = logging.getLogger(__name__)

# CoordinateArraySequence stores the four fixed variants (XY, XYZ, XYM, XYZM)
ARRAY_MAX_SPATIAL: Final[int] = 3
ARRAY_MAX_MEASURES: Final[int] = 1

PackedDType = Literal["float64", "float32"]


def get_common_shape(coordinates: Sequence[Coordinate | None] | None) -> tuple[int, int]:
    """
    (dimension, measures) able to hold every coordinate of a collection.

    Spatial ordinates and measures are maximised independently; (2, 0) for
    an empty or None collection.
    """
    return Coordinates.common_shape(coordinates)


class CoordinateSequenceFactory(ABC):
    """
    Abstract sequence factory.

    Args:
        ordinates: Largest set of ordinates this factory creates. X and Y are
            always included.
    """

    def __init__(self, ordinates: Ordinates = Ordinates.ALL_ORDINATES) -> None:
        self._ordinates = Ordinates(ordinates | Ordinates.XY)

    @property
    def ordinates(self) -> Ordinates:
        return self._ordinates

    @property
    def max_spatial(self) -> int:
        return ordinates_to_spatial(self._ordinates)

    @property
    def max_measures(self) -> int:
        return ordinates_to_measures(self._ordinates)

    def clamp_shape(self, dimension: int, measures: int) -> tuple[int, int]:
        """
        Largest supported shape not exceeding the requested one.

        Measures are limited to max_measures, spatial ordinates to
        2..max_spatial.
        """
        clamped_measures = clamp(measures, 0, self.max_measures)
        clamped_spatial = clamp(dimension - measures, 2, self.max_spatial)
        return clamped_spatial + clamped_measures, clamped_measures

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    def create(self, size: int, dimension: int = 2, measures: int = 0) -> CoordinateSequence:
        """
        Create a sequence of `size` coordinates.

        Args:
            size: Number of coordinates (negative sizes give an empty sequence)
            dimension: Requested ordinates per coordinate
            measures: Requested measures per coordinate

        Returns:
            A sequence of the requested shape, or of the largest supported
            shape below it
        """
        clamped = self.clamp_shape(dimension, measures)
        if clamped != (dimension, measures):
            logger.debug(
                "sequence shape clamped",
                extra={
                    "extra": {
                        "factory": type(self).__name__,
                        "requested": [dimension, measures],
                        "created": list(clamped),
                    }
                },
            )
        return self._create_sequence(max(size, 0), *clamped)

    def create_with_dimension(self, size: int, dimension: int) -> CoordinateSequence:
        """create(size, dimension, measures=0)."""
        return self.create(size, dimension, 0)

    def create_with_ordinates(self, size: int, ordinates: Ordinates) -> CoordinateSequence:
        """create() for the shape described by a mask (X and Y always included)."""
        ordinates = Ordinates(ordinates | Ordinates.XY)
        measures = ordinates_to_measures(ordinates)
        return self.create(size, ordinates_to_spatial(ordinates) + measures, measures)

    def create_from_coordinates(
        self, coordinates: Sequence[Coordinate | None] | None
    ) -> CoordinateSequence:
        """
        Sequence holding copies of the given coordinates.

        The shape is the common shape of the input, clamped to this factory;
        None gives an empty sequence.
        """
        items = list(coordinates) if coordinates is not None else []
        dimension, measures = self.clamp_shape(*get_common_shape(items))
        return self._create_from_coordinates(items, dimension, measures)

    def create_from_sequence(self, sequence: CoordinateSequence | None) -> CoordinateSequence:
        """
        Copy of an existing sequence built by this factory.

        None gives an empty XY sequence.
        """
        if sequence is None:
            return self.create(0, 2, 0)
        result = self.create(sequence.count, sequence.dimension, sequence.measures)
        copy_sequence(sequence, 0, result, 0, sequence.count)
        return result

    @abstractmethod
    def _create_sequence(self, size: int, dimension: int, measures: int) -> CoordinateSequence:
        """Build an empty sequence of an already supported shape."""

    @abstractmethod
    def _create_from_coordinates(
        self, coordinates: list[Coordinate | None], dimension: int, measures: int
    ) -> CoordinateSequence:
        """Build a sequence from coordinates in an already supported shape."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ordinates={self._ordinates!r})"


class CoordinateArraySequenceFactory(CoordinateSequenceFactory):
    """
    Factory for CoordinateArraySequence.

    Never builds more than three spatial ordinates or one measure, whatever
    the mask allows.
    """

    def __init__(self, ordinates: Ordinates = Ordinates.XYZM) -> None:
        super().__init__(ordinates)

    @property
    def max_spatial(self) -> int:
        return min(ARRAY_MAX_SPATIAL, super().max_spatial)

    @property
    def max_measures(self) -> int:
        return min(ARRAY_MAX_MEASURES, super().max_measures)

    def _create_sequence(self, size: int, dimension: int, measures: int) -> CoordinateSequence:
        return CoordinateArraySequence.with_size(size, dimension, measures)

    def _create_from_coordinates(
        self, coordinates: list[Coordinate | None], dimension: int, measures: int
    ) -> CoordinateSequence:
        return CoordinateArraySequence(
            [c.copy() if c is not None else None for c in coordinates],
            dimension,
            measures,
        )


class PackedCoordinateSequenceFactory(CoordinateSequenceFactory):
    """
    Factory for packed sequences.

    Args:
        dtype: "float64" for PackedDoubleCoordinateSequence, "float32" for
            PackedFloatCoordinateSequence
        ordinates: Largest set of ordinates created
    """

    def __init__(
        self,
        dtype: PackedDType = "float64",
        ordinates: Ordinates = Ordinates.ALL_ORDINATES,
    ) -> None:
        super().__init__(ordinates)
        resolved = np.dtype(dtype)
        if resolved == np.float64:
            self._sequence_type: type[PackedCoordinateSequence] = PackedDoubleCoordinateSequence
        elif resolved == np.float32:
            self._sequence_type = PackedFloatCoordinateSequence
        else:
            raise ValueError(f"Unsupported packed dtype: {dtype!r}")
        self._dtype = resolved

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def _create_sequence(self, size: int, dimension: int, measures: int) -> CoordinateSequence:
        return self._sequence_type.with_size(size, dimension, measures)

    def _create_from_coordinates(
        self, coordinates: list[Coordinate | None], dimension: int, measures: int
    ) -> CoordinateSequence:
        return self._sequence_type(coordinates, dimension, measures)

    def __repr__(self) -> str:
        return (
            f"PackedCoordinateSequenceFactory(dtype={self._dtype.name!r}, "
            f"ordinates={self._ordinates!r})"
        )
