"""
Coordinate — variant family of point value types

Shapes:
- Coordinate                  (XY)   dimension=2, measures=0
- CoordinateZ                 (XYZ)  dimension=3, measures=0
- CoordinateM                 (XYM)  dimension=3, measures=1
- CoordinateZM                (XYZM) dimension=4, measures=1
- ExtraDimensionalCoordinate  any other shape with at least 2 spatial ordinates

The four fixed variants keep their shape at class level (no per-instance
dimension/measures, no per-instance arrays). Every class declares a `kind`
discriminant; shape questions are answered from `kind`, never from
isinstance checks, because CoordinateZM specialises CoordinateZ.

ORDINATE ACCESS CONTRACT:
1. Reads are lenient: an index outside 0..dimension-1 or a named ordinate
   the variant does not hold returns NULL_ORDINATE
2. Writes are strict: the same misuse raises OrdinateRangeError
3. Layout: X=0, Y=1, further spatial ordinates next, measures last

Coordinates are mutable, independently owned values. copy() is deep;
assign() copies values in from a coordinate of any shape; to_tuple() gives
an immutable snapshot for values that cross an ownership boundary.
"""

from enum import Enum
from typing import ClassVar

from geomcore.core.domain.errors import OrdinateRangeError, ShapeRangeError
from geomcore.core.domain.ordinates import Ordinate, ordinate_index_for_shape
from geomcore.core.math.numerical_safeguards import (
    NULL_ORDINATE,
    compare_ordinates,
    distance_2d,
    distance_3d,
    equals_with_tolerance,
    is_valid_float,
    ordinate_distance,
    ordinate_hash,
    is_valid_tolerance,
)


# =============================================================================
# ENUMS
# =============================================================================


class CoordinateKind(str, Enum):
    """Discriminant of the coordinate variant family."""

    XY = "XY"
    XYZ = "XYZ"
    XYM = "XYM"
    XYZM = "XYZM"
    EXTENDED = "EXTENDED"


# =============================================================================
# COORDINATE (XY)
# =============================================================================


class Coordinate:
    """
    Point on the 2-dimensional Cartesian plane.

    Base of the variant family. Z and M read as NULL_ORDINATE; writing them
    raises OrdinateRangeError.
    """

    __slots__ = ("x", "y")

    kind: ClassVar[CoordinateKind] = CoordinateKind.XY
    DIMENSION: ClassVar[int] = 2
    MEASURES: ClassVar[int] = 0

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return self.DIMENSION

    @property
    def measures(self) -> int:
        return self.MEASURES

    @property
    def spatial(self) -> int:
        return self.dimension - self.measures

    # -------------------------------------------------------------------------
    # Named ordinates
    # -------------------------------------------------------------------------

    @property
    def z(self) -> float:
        return NULL_ORDINATE

    @z.setter
    def z(self, value: float) -> None:
        raise OrdinateRangeError(f"{type(self).__name__} does not support setting Z")

    @property
    def m(self) -> float:
        return NULL_ORDINATE

    @m.setter
    def m(self, value: float) -> None:
        raise OrdinateRangeError(f"{type(self).__name__} does not support setting M")

    # -------------------------------------------------------------------------
    # Indexed access
    # -------------------------------------------------------------------------

    def _get_index(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        return NULL_ORDINATE

    def _set_index(self, index: int, value: float) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            self._raise_index(index)

    def _raise_index(self, index: int) -> None:
        raise OrdinateRangeError(
            f"ordinate index {index} out of range for {type(self).__name__} "
            f"(dimension={self.dimension})"
        )

    def get_ordinate(self, ordinate: int | Ordinate) -> float:
        """
        Read an ordinate by position or by name.

        Args:
            ordinate: Positional index, or an Ordinate member

        Returns:
            The value, or NULL_ORDINATE if this coordinate has no such slot
        """
        if isinstance(ordinate, Ordinate):
            index = ordinate_index_for_shape(ordinate, self.dimension, self.measures)
            if index < 0:
                return NULL_ORDINATE
            return self._get_index(index)
        return self._get_index(ordinate)

    def set_ordinate(self, ordinate: int | Ordinate, value: float) -> None:
        """
        Write an ordinate by position or by name.

        Raises:
            OrdinateRangeError: If this coordinate has no such slot
        """
        if isinstance(ordinate, Ordinate):
            index = ordinate_index_for_shape(ordinate, self.dimension, self.measures)
            if index < 0:
                raise OrdinateRangeError(
                    f"{type(self).__name__} does not support ordinate {ordinate.name}"
                )
            self._set_index(index, float(value))
            return
        self._set_index(ordinate, float(value))

    def __getitem__(self, ordinate: int | Ordinate) -> float:
        return self.get_ordinate(ordinate)

    def __setitem__(self, ordinate: int | Ordinate, value: float) -> None:
        self.set_ordinate(ordinate, value)

    def get_spatial(self, index: int) -> float:
        """index-th spatial ordinate (0=X, 1=Y, 2=Z, ...), NULL_ORDINATE if absent."""
        if 0 <= index < self.spatial:
            return self._get_index(index)
        return NULL_ORDINATE

    def get_measure(self, index: int) -> float:
        """index-th measure (0=M), NULL_ORDINATE if absent."""
        if 0 <= index < self.measures:
            return self._get_index(self.spatial + index)
        return NULL_ORDINATE

    # -------------------------------------------------------------------------
    # Construction and copying
    # -------------------------------------------------------------------------

    def create(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = NULL_ORDINATE,
        m: float = NULL_ORDINATE,
    ) -> "Coordinate":
        """
        New coordinate of the same variant; z and m are silently dropped here.
        """
        return Coordinate(x, y)

    def copy(self) -> "Coordinate":
        return self.create(self.x, self.y, self.z, self.m)

    def __copy__(self) -> "Coordinate":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Coordinate":
        return self.copy()

    def assign(self, other: "Coordinate") -> None:
        """
        Copy the values of another coordinate into this one.

        Slots this variant holds take the corresponding value of `other`
        (NULL_ORDINATE where `other` has none); values this variant cannot
        hold are dropped.
        """
        self.x = other.x
        self.y = other.y

    def to_tuple(self) -> tuple[float, ...]:
        """Immutable snapshot of all ordinates in positional order."""
        return tuple(self._get_index(i) for i in range(self.dimension))

    # -------------------------------------------------------------------------
    # Predicates, equality and ordering
    # -------------------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        """True if X and Y are both finite."""
        return is_valid_float(self.x) and is_valid_float(self.y)

    def equals_2d(self, other: "Coordinate", tolerance: float = 0.0) -> bool:
        """
        Compare X and Y only.

        Identical X and Y are equal at any valid tolerance (infinite values
        included); otherwise each of X and Y must lie within tolerance. A
        negative or NaN tolerance matches nothing.
        """
        if not is_valid_tolerance(tolerance):
            return False
        if self.x == other.x and self.y == other.y:
            return True
        if tolerance == 0.0:
            return False
        if not equals_with_tolerance(self.x, other.x, tolerance):
            return False
        return equals_with_tolerance(self.y, other.y, tolerance)

    def equals(self, other: "Coordinate", tolerance: float = 0.0) -> bool:
        """
        Full-shape equality.

        X and Y as in equals_2d. Every further spatial ordinate and every
        measure carried by either coordinate must match as well, with
        absent-equals-absent and absent-never-equals-present. A negative or
        NaN tolerance matches nothing.
        """
        if not self.equals_2d(other, tolerance):
            return False

        for i in range(2, max(self.spatial, other.spatial)):
            if ordinate_distance(self.get_spatial(i), other.get_spatial(i)) > tolerance:
                return False

        for j in range(max(self.measures, other.measures)):
            if ordinate_distance(self.get_measure(j), other.get_measure(j)) > tolerance:
                return False

        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # X/Y only: coordinates equal under equals() always share X and Y.
        # Mutating a coordinate held in a set or as a dict key breaks lookup.
        return hash((ordinate_hash(self.x), ordinate_hash(self.y)))

    def compare_to(self, other: "Coordinate") -> int:
        """
        2D lexicographic order: X first, then Y.

        Absent values sort before numbers (see compare_ordinates).
        """
        result = compare_ordinates(self.x, other.x)
        if result != 0:
            return result
        return compare_ordinates(self.y, other.y)

    def __lt__(self, other: "Coordinate") -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.compare_to(other) < 0

    def distance(self, other: "Coordinate") -> float:
        """2D Euclidean distance; Z and M are ignored."""
        return distance_2d(self.x, self.y, other.x, other.y)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self}"

    def __str__(self) -> str:
        return f"({self.x!r}, {self.y!r})"


# =============================================================================
# COORDINATE Z (XYZ)
# =============================================================================


class CoordinateZ(Coordinate):
    """Coordinate with an elevation (Z) ordinate at index 2."""

    __slots__ = ("_z",)

    kind: ClassVar[CoordinateKind] = CoordinateKind.XYZ
    DIMENSION: ClassVar[int] = 3
    MEASURES: ClassVar[int] = 0

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = NULL_ORDINATE
    ) -> None:
        super().__init__(x, y)
        self._z = float(z)

    @property
    def z(self) -> float:
        return self._z

    @z.setter
    def z(self, value: float) -> None:
        self._z = float(value)

    def _get_index(self, index: int) -> float:
        if index == 2:
            return self._z
        return super()._get_index(index)

    def _set_index(self, index: int, value: float) -> None:
        if index == 2:
            self._z = value
        else:
            super()._set_index(index, value)

    def create(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = NULL_ORDINATE,
        m: float = NULL_ORDINATE,
    ) -> "CoordinateZ":
        return CoordinateZ(x, y, z)

    def assign(self, other: Coordinate) -> None:
        super().assign(other)
        self._z = other.z

    def equals_3d(self, other: Coordinate, tolerance: float = 0.0) -> bool:
        """
        Compare X, Y and Z.

        Z uses absent-equals-absent; X and Y follow equals_2d.
        """
        if not self.equals_2d(other, tolerance):
            return False
        return ordinate_distance(self._z, other.z) <= tolerance

    def distance_3d(self, other: Coordinate) -> float:
        """3D Euclidean distance; NaN if either Z is absent."""
        return distance_3d(self.x, self.y, self._z, other.x, other.y, other.z)

    def __str__(self) -> str:
        return f"({self.x!r}, {self.y!r}, {self._z!r})"


# =============================================================================
# COORDINATE M (XYM)
# =============================================================================


class CoordinateM(Coordinate):
    """Coordinate with a single measure at index 2 and no elevation."""

    __slots__ = ("_m",)

    kind: ClassVar[CoordinateKind] = CoordinateKind.XYM
    DIMENSION: ClassVar[int] = 3
    MEASURES: ClassVar[int] = 1

    def __init__(
        self, x: float = 0.0, y: float = 0.0, m: float = NULL_ORDINATE
    ) -> None:
        super().__init__(x, y)
        self._m = float(m)

    @property
    def m(self) -> float:
        return self._m

    @m.setter
    def m(self, value: float) -> None:
        self._m = float(value)

    def _get_index(self, index: int) -> float:
        if index == 2:
            return self._m
        return super()._get_index(index)

    def _set_index(self, index: int, value: float) -> None:
        if index == 2:
            self._m = value
        else:
            super()._set_index(index, value)

    def create(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = NULL_ORDINATE,
        m: float = NULL_ORDINATE,
    ) -> "CoordinateM":
        return CoordinateM(x, y, m)

    def assign(self, other: Coordinate) -> None:
        super().assign(other)
        self._m = other.m

    def __str__(self) -> str:
        return f"({self.x!r}, {self.y!r}, m={self._m!r})"


# =============================================================================
# COORDINATE ZM (XYZM)
# =============================================================================


class CoordinateZM(CoordinateZ):
    """Coordinate with elevation (index 2) and one measure (index 3)."""

    __slots__ = ("_m",)

    kind: ClassVar[CoordinateKind] = CoordinateKind.XYZM
    DIMENSION: ClassVar[int] = 4
    MEASURES: ClassVar[int] = 1

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = NULL_ORDINATE,
        m: float = NULL_ORDINATE,
    ) -> None:
        super().__init__(x, y, z)
        self._m = float(m)

    @property
    def m(self) -> float:
        return self._m

    @m.setter
    def m(self, value: float) -> None:
        self._m = float(value)

    def _get_index(self, index: int) -> float:
        if index == 3:
            return self._m
        return super()._get_index(index)

    def _set_index(self, index: int, value: float) -> None:
        if index == 3:
            self._m = value
        else:
            super()._set_index(index, value)

    def create(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = NULL_ORDINATE,
        m: float = NULL_ORDINATE,
    ) -> "CoordinateZM":
        return CoordinateZM(x, y, z, m)

    def assign(self, other: Coordinate) -> None:
        super().assign(other)
        self._m = other.m

    def __str__(self) -> str:
        return f"({self.x!r}, {self.y!r}, {self._z!r}, m={self._m!r})"


# =============================================================================
# EXTRA DIMENSIONAL COORDINATE
# =============================================================================


class ExtraDimensionalCoordinate(Coordinate):
    """
    Coordinate of any shape not covered by the fixed variants.

    Keeps extra spatial ordinates (index 2..spatial-1) and measures
    (index spatial..dimension-1) in two separate lists. New slots start out
    as NULL_ORDINATE.

    Args:
        dimension: Total ordinate count
        measures: Number of trailing measure ordinates
        x: X value
        y: Y value

    Raises:
        ShapeRangeError: If dimension < 0, measures < 0 or
            dimension - measures < 2
    """

    __slots__ = ("_dimension", "_measures", "_extra_spatial", "_measure_values")

    kind: ClassVar[CoordinateKind] = CoordinateKind.EXTENDED

    def __init__(
        self, dimension: int, measures: int, x: float = 0.0, y: float = 0.0
    ) -> None:
        if dimension < 0:
            raise ShapeRangeError(f"dimension must be non-negative, got {dimension}")
        if measures < 0:
            raise ShapeRangeError(f"measures must be non-negative, got {measures}")
        if dimension - measures < 2:
            raise ShapeRangeError(
                "must have at least two spatial dimensions, "
                f"got dimension={dimension}, measures={measures}"
            )

        super().__init__(x, y)
        self._dimension = dimension
        self._measures = measures
        self._extra_spatial = [NULL_ORDINATE] * (dimension - measures - 2)
        self._measure_values = [NULL_ORDINATE] * measures

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def measures(self) -> int:
        return self._measures

    @property
    def z(self) -> float:
        if self._extra_spatial:
            return self._extra_spatial[0]
        return NULL_ORDINATE

    @z.setter
    def z(self, value: float) -> None:
        if not self._extra_spatial:
            raise OrdinateRangeError(
                f"{type(self).__name__} with dimension={self._dimension}, "
                f"measures={self._measures} does not support setting Z"
            )
        self._extra_spatial[0] = float(value)

    @property
    def m(self) -> float:
        if self._measure_values:
            return self._measure_values[0]
        return NULL_ORDINATE

    @m.setter
    def m(self, value: float) -> None:
        if not self._measure_values:
            raise OrdinateRangeError(
                f"{type(self).__name__} with dimension={self._dimension}, "
                f"measures={self._measures} does not support setting M"
            )
        self._measure_values[0] = float(value)

    def _get_index(self, index: int) -> float:
        if index < 2:
            return super()._get_index(index)
        spatial = self._dimension - self._measures
        if index < spatial:
            return self._extra_spatial[index - 2]
        if index < self._dimension:
            return self._measure_values[index - spatial]
        return NULL_ORDINATE

    def _set_index(self, index: int, value: float) -> None:
        if index < 2:
            super()._set_index(index, value)
            return
        spatial = self._dimension - self._measures
        if index < spatial:
            self._extra_spatial[index - 2] = value
        elif index < self._dimension:
            self._measure_values[index - spatial] = value
        else:
            self._raise_index(index)

    def create(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = NULL_ORDINATE,
        m: float = NULL_ORDINATE,
    ) -> "ExtraDimensionalCoordinate":
        result = ExtraDimensionalCoordinate(self._dimension, self._measures, x, y)
        if result._extra_spatial:
            result._extra_spatial[0] = float(z)
        if result._measure_values:
            result._measure_values[0] = float(m)
        return result

    def copy(self) -> "ExtraDimensionalCoordinate":
        result = ExtraDimensionalCoordinate(
            self._dimension, self._measures, self.x, self.y
        )
        result._extra_spatial = list(self._extra_spatial)
        result._measure_values = list(self._measure_values)
        return result

    def assign(self, other: Coordinate) -> None:
        """
        Re-home the values of a coordinate of any shape.

        Extra spatial slots take the source spatial ordinate with the same
        spatial index, or NULL_ORDINATE when the source has none. Measure
        slots take the source measure at the same position.

        A source without measures leaves every measure slot NULL_ORDINATE.
        A source with fewer measures than this coordinate is padded: slots
        past its last measure carry no meaningful ordinate and are set to
        0.0.
        """
        self.x = other.x
        self.y = other.y

        other_spatial = other.spatial
        for i in range(len(self._extra_spatial)):
            spatial_index = i + 2
            if spatial_index < other_spatial:
                self._extra_spatial[i] = other.get_spatial(spatial_index)
            else:
                self._extra_spatial[i] = NULL_ORDINATE

        other_measures = other.measures
        for j in range(len(self._measure_values)):
            if j < other_measures:
                self._measure_values[j] = other.get_measure(j)
            elif other_measures == 0:
                self._measure_values[j] = NULL_ORDINATE
            else:
                self._measure_values[j] = 0.0

    def __str__(self) -> str:
        parts = [repr(self.x), repr(self.y)]
        parts.extend(repr(v) for v in self._extra_spatial)
        parts.extend(f"m{j + 1}={v!r}" for j, v in enumerate(self._measure_values))
        return f"({', '.join(parts)})"

    def __repr__(self) -> str:
        return (
            f"ExtraDimensionalCoordinate(dimension={self._dimension}, "
            f"measures={self._measures}, ordinates={self})"
        )
