"""
CoordinateSequenceComparator — total order over coordinate sequences

ORDER:
1. min_dim = min(dimension of both sequences). With a dimension_limit at
   or below min_dim, only the first dimension_limit ordinates are compared
   and the dimensions themselves are ignored ("capped").
2. Uncapped: the sequence with fewer ordinates per coordinate sorts first.
3. Positions are compared in order over the common length, each ordinate
   by ordinate over 0..min_dim-1; the first difference decides.
4. If all compared positions tie, the shorter sequence sorts first.

Ordinates use the NaN-aware order of compare_ordinates, so sequences
holding NaN still sort consistently.
"""

from geomcore.core.math.numerical_safeguards import compare_ordinates
from geomcore.sequences.base import CoordinateSequence


class CoordinateSequenceComparator:
    """
    Comparator over CoordinateSequence.

    Callable as comparator(a, b), so it plugs into functools.cmp_to_key:

        >>> sorted(sequences, key=cmp_to_key(CoordinateSequenceComparator()))

    Args:
        dimension_limit: Maximum number of ordinates compared per coordinate
            (None: no limit)
    """

    def __init__(self, dimension_limit: int | None = None) -> None:
        self._dimension_limit = dimension_limit

    @property
    def dimension_limit(self) -> int | None:
        return self._dimension_limit

    @staticmethod
    def compare_ordinate(a: float, b: float) -> int:
        """NaN before every number, NaN == NaN, numeric order otherwise."""
        return compare_ordinates(a, b)

    def compare_coordinate(
        self,
        s1: CoordinateSequence,
        s2: CoordinateSequence,
        index: int,
        dimension: int,
    ) -> int:
        """Compare position `index` of two sequences over `dimension` ordinates."""
        for d in range(dimension):
            comp = compare_ordinates(s1.get_ordinate(index, d), s2.get_ordinate(index, d))
            if comp != 0:
                return comp
        return 0

    def compare(self, s1: CoordinateSequence, s2: CoordinateSequence) -> int:
        """
        Returns:
            -1, 0 or +1 as s1 sorts before, equal to or after s2
        """
        size1 = s1.count
        size2 = s2.count
        dim1 = s1.dimension
        dim2 = s2.dimension

        min_dim = min(dim1, dim2)
        capped = False
        if self._dimension_limit is not None and self._dimension_limit <= min_dim:
            min_dim = self._dimension_limit
            capped = True

        if not capped:
            if dim1 < dim2:
                return -1
            if dim1 > dim2:
                return 1

        for i in range(min(size1, size2)):
            comp = self.compare_coordinate(s1, s2, i, min_dim)
            if comp != 0:
                return comp

        if size1 < size2:
            return -1
        if size1 > size2:
            return 1
        return 0

    def __call__(self, s1: CoordinateSequence, s2: CoordinateSequence) -> int:
        return self.compare(s1, s2)

    def __repr__(self) -> str:
        return f"CoordinateSequenceComparator(dimension_limit={self._dimension_limit})"
