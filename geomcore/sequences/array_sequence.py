"""
CoordinateArraySequence — sequence backed by a list of coordinate objects

get_coordinate returns the stored coordinate itself, so geometry code that
edits coordinates in place sees its changes in the sequence. Elements are
normalised to the sequence shape on construction.
"""

from collections.abc import Sequence

from geomcore.core.domain import coordinates as Coordinates
from geomcore.core.domain.coordinate import Coordinate
from geomcore.sequences.base import CoordinateSequence


class CoordinateArraySequence(CoordinateSequence):
    """
    Sequence of coordinate objects.

    Args:
        coordinates: Coordinates to hold. Elements whose shape differs from
            the sequence shape (and None elements) are replaced by a new
            coordinate of the sequence shape carrying their values; matching
            elements are taken over as-is.
        dimension: Sequence dimension (default: common shape of the input)
        measures: Sequence measures (default: common shape of the input)
    """

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
        self._coordinates = self._enforce_shape(items)

    @classmethod
    def with_size(
        cls, size: int, dimension: int = 2, measures: int = 0
    ) -> "CoordinateArraySequence":
        """Sequence of `size` fresh coordinates (X=Y=0, other slots absent)."""
        return cls(
            [Coordinates.create(dimension, measures) for _ in range(max(size, 0))],
            dimension,
            measures,
        )

    @classmethod
    def from_sequence(
        cls, sequence: CoordinateSequence | None
    ) -> "CoordinateArraySequence":
        """Deep copy of any sequence; empty XY sequence for None."""
        if sequence is None:
            return cls([], 2, 0)
        return cls(
            [sequence.get_coordinate_copy(i) for i in range(sequence.count)],
            sequence.dimension,
            sequence.measures,
        )

    def _enforce_shape(self, items: list[Coordinate | None]) -> list[Coordinate]:
        shape = (self.dimension, self.measures)
        result = []
        for item in items:
            if item is not None and Coordinates.shape_of(item) == shape:
                result.append(item)
                continue
            normalised = self.create_coordinate()
            if item is not None:
                normalised.assign(item)
            result.append(normalised)
        return result

    # -------------------------------------------------------------------------
    # CoordinateSequence
    # -------------------------------------------------------------------------

    def get_ordinate_at(self, index: int, ordinate_index: int) -> float:
        return self._coordinates[index]._get_index(ordinate_index)

    def set_ordinate_at(self, index: int, ordinate_index: int, value: float) -> None:
        self._coordinates[index]._set_index(ordinate_index, value)

    def get_coordinate(self, index: int) -> Coordinate:
        self._check_position(index)
        return self._coordinates[index]

    def get_coordinate_copy(self, index: int) -> Coordinate:
        self._check_position(index)
        return self._coordinates[index].copy()

    def copy(self) -> "CoordinateArraySequence":
        return CoordinateArraySequence(
            [c.copy() for c in self._coordinates], self.dimension, self.measures
        )

    def reversed(self) -> "CoordinateArraySequence":
        return CoordinateArraySequence(
            [c.copy() for c in reversed(self._coordinates)],
            self.dimension,
            self.measures,
        )

    def to_coordinate_array(self) -> list[Coordinate]:
        return list(self._coordinates)

    def __str__(self) -> str:
        return f"({', '.join(str(c) for c in self._coordinates)})"
