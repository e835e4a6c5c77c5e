"""
Equality comparers for coordinates

- CoordinateEqualityComparer: 2D equality, exact or within a disk of radius
  `tolerance` around the first point
- PerOrdinateEqualityComparer: X, Y, Z and M each within `tolerance`,
  absent ordinates equal only to absent ordinates

Neither comparer raises. A negative or NaN tolerance matches nothing.

hash() of both comparers is consistent with tolerance=0 only. A tolerance
relation is not transitive, so tolerance>0 equality is unsuitable as a
hashing/key equality.
"""

from typing import Iterable

from geomcore.core.domain.coordinate import Coordinate
from geomcore.core.math.numerical_safeguards import (
    is_valid_tolerance,
    ordinate_distance,
    ordinate_hash,
)


# =============================================================================
# WHOLE-DISTANCE COMPARER
# =============================================================================


class CoordinateEqualityComparer:
    """
    2D coordinate equality.

    tolerance == 0: X and Y equal by value.
    tolerance > 0:  X and Y equal by value, or 2D Euclidean distance <= tolerance.
    """

    def equals(self, a: Coordinate, b: Coordinate, tolerance: float = 0.0) -> bool:
        """
        Args:
            a: First coordinate
            b: Second coordinate
            tolerance: Acceptance radius; negative or NaN never matches
        """
        if not is_valid_tolerance(tolerance):
            return False
        return self._is_equal(a, b, tolerance)

    def __call__(self, a: Coordinate, b: Coordinate, tolerance: float = 0.0) -> bool:
        return self.equals(a, b, tolerance)

    def _is_equal(self, a: Coordinate, b: Coordinate, tolerance: float) -> bool:
        # identical infinite ordinates have a NaN distance
        if a.equals_2d(b):
            return True
        return tolerance > 0.0 and a.distance(b) <= tolerance

    def hash(self, coordinate: Coordinate) -> int:
        """Hash consistent with equals(..., tolerance=0)."""
        return hash((ordinate_hash(coordinate.x), ordinate_hash(coordinate.y)))

    def contains(
        self,
        coordinates: Iterable[Coordinate],
        target: Coordinate,
        tolerance: float = 0.0,
    ) -> bool:
        """True if any element of `coordinates` equals `target`."""
        if not is_valid_tolerance(tolerance):
            return False
        return any(self._is_equal(c, target, tolerance) for c in coordinates)


# =============================================================================
# PER-ORDINATE COMPARER
# =============================================================================


class PerOrdinateEqualityComparer(CoordinateEqualityComparer):
    """
    Ordinate-wise equality over X, Y, Z and M.

    Each ordinate is tested on its own against `tolerance` using
    ordinate_distance: both absent -> 0, exactly one absent -> +inf.
    """

    def _is_equal(self, a: Coordinate, b: Coordinate, tolerance: float) -> bool:
        if ordinate_distance(a.x, b.x) > tolerance:
            return False
        if ordinate_distance(a.y, b.y) > tolerance:
            return False
        if ordinate_distance(a.z, b.z) > tolerance:
            return False
        return ordinate_distance(a.m, b.m) <= tolerance

    def hash(self, coordinate: Coordinate) -> int:
        return hash(
            (
                ordinate_hash(coordinate.x),
                ordinate_hash(coordinate.y),
                ordinate_hash(coordinate.z),
                ordinate_hash(coordinate.m),
            )
        )
