"""
Tests for named ordinates and ordinate masks

Checks:
1. Ordinate aliases and spatial/measure classification
2. Ordinates mask composition and parsing
3. Mask <-> shape conversions
4. Named ordinate positions within a shape
"""

import pytest

from geomcore.core.domain.errors import ShapeRangeError
from geomcore.core.domain.ordinates import (
    Ordinate,
    Ordinates,
    ordinate_index_for_shape,
    ordinates_for_shape,
    ordinates_to_dimension,
    ordinates_to_measures,
    ordinates_to_spatial,
)

# =============================================================================
# ORDINATE TESTS
# =============================================================================


class TestOrdinate:
    """Tests for the Ordinate enum"""

    def test_aliases(self) -> None:
        """X/Y/Z/M alias the first spatial slots and the first measure"""
        assert Ordinate.X is Ordinate.SPATIAL_1
        assert Ordinate.Y is Ordinate.SPATIAL_2
        assert Ordinate.Z is Ordinate.SPATIAL_3
        assert Ordinate.M is Ordinate.MEASURE_1

    def test_classification(self) -> None:
        """Measures are recognised, spatial ordinates are not"""
        assert not Ordinate.Z.is_measure
        assert Ordinate.M.is_measure
        assert Ordinate.MEASURE_16.is_measure

    def test_indexes(self) -> None:
        """spatial_index / measure_index split the two ranges"""
        assert Ordinate.Z.spatial_index == 2
        assert Ordinate.Z.measure_index == -1
        assert Ordinate.MEASURE_3.measure_index == 2
        assert Ordinate.MEASURE_3.spatial_index == -1

    def test_flag(self) -> None:
        """Each ordinate maps to its own mask bit"""
        assert Ordinate.X.flag == Ordinates.X
        assert Ordinate.M.flag == Ordinates.M


# =============================================================================
# ORDINATES MASK TESTS
# =============================================================================


class TestOrdinatesMask:
    """Tests for the Ordinates flag"""

    def test_composites(self) -> None:
        """Named composites are unions of the single flags"""
        assert Ordinates.XYZM == Ordinates.X | Ordinates.Y | Ordinates.Z | Ordinates.M
        assert Ordinates.XYM == Ordinates.XY | Ordinates.M

    def test_has(self) -> None:
        """has() checks the ordinate's bit"""
        assert Ordinates.XYM.has(Ordinate.M)
        assert not Ordinates.XYM.has(Ordinate.Z)
        assert Ordinates.ALL_ORDINATES.has(Ordinate.MEASURE_16)

    @pytest.mark.parametrize("name", ["XYZM", "xyzm", " xym ", "ALL_ORDINATES"])
    def test_parse_known(self, name: str) -> None:
        """Names resolve case-insensitively"""
        assert Ordinates.parse(name) == Ordinates[name.strip().upper()]

    def test_parse_unknown(self) -> None:
        """Unknown names raise ValueError"""
        with pytest.raises(ValueError, match="Unknown ordinates mask"):
            Ordinates.parse("XYQ")


# =============================================================================
# CONVERSION TESTS
# =============================================================================


class TestConversions:
    """Tests for mask <-> shape conversions"""

    @pytest.mark.parametrize(
        "mask,dimension,spatial,measures",
        [
            (Ordinates.XY, 2, 2, 0),
            (Ordinates.XYZ, 3, 3, 0),
            (Ordinates.XYM, 3, 2, 1),
            (Ordinates.XYZM, 4, 3, 1),
            (Ordinates.ALL_ORDINATES, 32, 16, 16),
        ],
    )
    def test_mask_to_shape(
        self, mask: Ordinates, dimension: int, spatial: int, measures: int
    ) -> None:
        """Mask sizes"""
        assert ordinates_to_dimension(mask) == dimension
        assert ordinates_to_spatial(mask) == spatial
        assert ordinates_to_measures(mask) == measures

    def test_gap_ends_run(self) -> None:
        """Only the contiguous run from X counts"""
        assert ordinates_to_spatial(Ordinates.X | Ordinates.Y | Ordinate.SPATIAL_4.flag) == 2

    @pytest.mark.parametrize(
        "dimension,measures,mask",
        [
            (2, 0, Ordinates.XY),
            (3, 0, Ordinates.XYZ),
            (3, 1, Ordinates.XYM),
            (4, 1, Ordinates.XYZM),
        ],
    )
    def test_shape_to_mask(self, dimension: int, measures: int, mask: Ordinates) -> None:
        """Fixed shapes map to the named masks"""
        assert ordinates_for_shape(dimension, measures) == mask

    def test_shape_round_trip_extended(self) -> None:
        """(5, 2) round-trips through the mask"""
        mask = ordinates_for_shape(5, 2)
        assert ordinates_to_dimension(mask) == 5
        assert ordinates_to_measures(mask) == 2

    @pytest.mark.parametrize("dimension,measures", [(-1, 0), (3, -1), (2, 1), (1, 0)])
    def test_invalid_shape_raises(self, dimension: int, measures: int) -> None:
        """Negative counts and fewer than two spatial ordinates raise"""
        with pytest.raises(ShapeRangeError):
            ordinates_for_shape(dimension, measures)

    def test_shape_error_is_value_error(self) -> None:
        """ShapeRangeError is a ValueError"""
        with pytest.raises(ValueError):
            ordinates_for_shape(1, 0)


class TestOrdinateIndexForShape:
    """Tests for ordinate_index_for_shape"""

    @pytest.mark.parametrize(
        "ordinate,dimension,measures,expected",
        [
            (Ordinate.X, 2, 0, 0),
            (Ordinate.Z, 2, 0, -1),
            (Ordinate.Z, 3, 0, 2),
            (Ordinate.M, 3, 0, -1),
            (Ordinate.M, 3, 1, 2),
            (Ordinate.Z, 3, 1, -1),
            (Ordinate.M, 4, 1, 3),
            (Ordinate.MEASURE_2, 5, 2, 4),
            (Ordinate.MEASURE_3, 5, 2, -1),
        ],
    )
    def test_positions(
        self, ordinate: Ordinate, dimension: int, measures: int, expected: int
    ) -> None:
        """Named ordinate positions"""
        assert ordinate_index_for_shape(ordinate, dimension, measures) == expected
