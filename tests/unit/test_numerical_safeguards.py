"""
Tests for the Numerical Safeguards module

Checks:
1. Absent-ordinate detection and mapping
2. NaN-aware equality, ordering, distance and hashing of ordinates
3. Epsilon comparisons of derived floats
4. Distances
5. Parameter validation and clamping
"""

import math

import pytest

from geomcore.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    NULL_ORDINATE,
    ORDINATE_MISMATCH_DISTANCE,
    clamp,
    compare_ordinates,
    distance_2d,
    distance_3d,
    equals_with_tolerance,
    is_close,
    is_null_ordinate,
    is_valid_float,
    ordinate_distance,
    ordinate_hash,
    ordinate_or_null,
    ordinates_equal,
    is_valid_tolerance,
)

NAN = float("nan")
INF = float("inf")


# =============================================================================
# ABSENT ORDINATE TESTS
# =============================================================================


class TestNullOrdinate:
    """Tests for the absent sentinel"""

    def test_sentinel_is_nan(self) -> None:
        """NULL_ORDINATE is NaN"""
        assert math.isnan(NULL_ORDINATE)

    def test_is_null_ordinate(self) -> None:
        """Only NaN is absent"""
        assert is_null_ordinate(NAN)
        assert not is_null_ordinate(0.0)
        assert not is_null_ordinate(INF)

    def test_ordinate_or_null(self) -> None:
        """None maps to the sentinel, numbers to float"""
        assert math.isnan(ordinate_or_null(None))
        assert ordinate_or_null(3) == 3.0
        assert isinstance(ordinate_or_null(3), float)


class TestIsValidFloat:
    """Tests for is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Finite values are valid"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_nan_invalid(self) -> None:
        """NaN is invalid"""
        assert not is_valid_float(NAN)

    def test_inf_invalid(self) -> None:
        """±Inf is invalid"""
        assert not is_valid_float(INF)
        assert not is_valid_float(-INF)


# =============================================================================
# ORDINATE COMPARISON TESTS
# =============================================================================


class TestOrdinatesEqual:
    """Tests for ordinates_equal"""

    def test_equal_numbers(self) -> None:
        """Same value is equal, -0.0 equals 0.0"""
        assert ordinates_equal(1.5, 1.5)
        assert ordinates_equal(-0.0, 0.0)

    def test_nan_equals_nan(self) -> None:
        """Two absent ordinates are equal"""
        assert ordinates_equal(NAN, NAN)

    def test_nan_not_equal_number(self) -> None:
        """Absent differs from any recorded value"""
        assert not ordinates_equal(NAN, 0.0)
        assert not ordinates_equal(0.0, NAN)


class TestCompareOrdinates:
    """Tests for compare_ordinates"""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (1.0, 2.0, -1),
            (2.0, 1.0, 1),
            (1.0, 1.0, 0),
            (-INF, INF, -1),
            (NAN, -INF, -1),
            (-INF, NAN, 1),
            (NAN, NAN, 0),
            (-0.0, 0.0, 0),
        ],
    )
    def test_order(self, a: float, b: float, expected: int) -> None:
        """NaN sorts first, everything else numerically"""
        assert compare_ordinates(a, b) == expected

    def test_sort_with_nan(self) -> None:
        """A sort keyed on compare_ordinates puts NaN first"""
        from functools import cmp_to_key

        values = [3.0, NAN, -1.0, NAN, 0.0]
        result = sorted(values, key=cmp_to_key(compare_ordinates))
        assert math.isnan(result[0]) and math.isnan(result[1])
        assert result[2:] == [-1.0, 0.0, 3.0]


class TestOrdinateDistance:
    """Tests for ordinate_distance"""

    def test_numbers(self) -> None:
        """Absolute difference of recorded values"""
        assert ordinate_distance(1.0, 3.5) == 2.5
        assert ordinate_distance(3.5, 1.0) == 2.5

    def test_both_absent(self) -> None:
        """Both absent: zero"""
        assert ordinate_distance(NAN, NAN) == 0.0

    def test_one_absent(self) -> None:
        """One absent: mismatch distance (+inf)"""
        assert ordinate_distance(NAN, 5.0) == ORDINATE_MISMATCH_DISTANCE
        assert ordinate_distance(5.0, NAN) == math.inf

    def test_equal_infinities(self) -> None:
        """Equal infinities are zero apart, opposite ones infinitely far"""
        assert ordinate_distance(INF, INF) == 0.0
        assert ordinate_distance(-INF, -INF) == 0.0
        assert ordinate_distance(INF, -INF) == INF


class TestOrdinateHash:
    """Tests for ordinate_hash"""

    def test_all_nans_hash_alike(self) -> None:
        """Distinct NaN objects share a hash"""
        assert ordinate_hash(float("nan")) == ordinate_hash(float("nan"))

    def test_signed_zero(self) -> None:
        """-0.0 and 0.0 hash alike"""
        assert ordinate_hash(-0.0) == ordinate_hash(0.0)

    def test_numbers_use_float_hash(self) -> None:
        """Recorded values hash as floats"""
        assert ordinate_hash(2.5) == hash(2.5)


# =============================================================================
# EPSILON COMPARISON TESTS
# =============================================================================


class TestEqualsWithTolerance:
    """Tests for equals_with_tolerance"""

    def test_within(self) -> None:
        """Difference at or under tolerance passes"""
        assert equals_with_tolerance(1.0, 1.5, 0.5)

    def test_outside(self) -> None:
        """Difference over tolerance fails"""
        assert not equals_with_tolerance(1.0, 1.6, 0.5)

    def test_nan_fails(self) -> None:
        """NaN never passes"""
        assert not equals_with_tolerance(NAN, NAN, 1.0)

    def test_equal_infinities(self) -> None:
        """Equal infinities pass at any tolerance"""
        assert equals_with_tolerance(INF, INF, 0.0)
        assert equals_with_tolerance(-INF, -INF, 1.0)
        assert not equals_with_tolerance(INF, -INF, 1e300)


class TestIsClose:
    """Tests for is_close"""

    def test_exact_match(self) -> None:
        """Exact match"""
        assert is_close(1.0, 1.0)

    def test_close_values_within_tolerance(self) -> None:
        """Values within relative tolerance"""
        assert is_close(1.0, 1.0 + EPS_FLOAT_COMPARE_REL / 2)

    def test_far_values_not_close(self) -> None:
        """Far values"""
        assert not is_close(1.0, 1.001)

    def test_small_absolute_difference(self) -> None:
        """Absolute tolerance near zero"""
        assert is_close(0.0, EPS_FLOAT_COMPARE_ABS / 2)


# =============================================================================
# DISTANCE TESTS
# =============================================================================


class TestDistances:
    """Tests for distance_2d / distance_3d"""

    def test_distance_2d(self) -> None:
        """3-4-5 triangle"""
        assert distance_2d(0.0, 0.0, 3.0, 4.0) == 5.0

    def test_distance_3d(self) -> None:
        """Unit cube diagonal"""
        assert distance_3d(0.0, 0.0, 0.0, 1.0, 1.0, 1.0) == pytest.approx(math.sqrt(3))

    def test_distance_3d_absent_z(self) -> None:
        """Absent Z gives NaN"""
        assert math.isnan(distance_3d(0.0, 0.0, NAN, 1.0, 1.0, 1.0))


# =============================================================================
# VALIDATION AND CLAMPING TESTS
# =============================================================================


class TestIsValidTolerance:
    """Tests for is_valid_tolerance"""

    @pytest.mark.parametrize("tolerance", [0.0, 1e-9, 1.0, INF])
    def test_usable(self, tolerance: float) -> None:
        """Zero and positive tolerances are usable"""
        assert is_valid_tolerance(tolerance)

    @pytest.mark.parametrize("tolerance", [-0.1, -INF, NAN])
    def test_unusable(self, tolerance: float) -> None:
        """Negative and NaN tolerances are not"""
        assert not is_valid_tolerance(tolerance)


class TestClamp:
    """Tests for clamp"""

    @pytest.mark.parametrize(
        "value,low,high,expected",
        [
            (5, 2, 4, 4),
            (1, 2, 4, 2),
            (3, 2, 4, 3),
            (-1, 0, None, 0),
            (9, None, 3, 3),
            (7, None, None, 7),
        ],
    )
    def test_clamp(self, value: int, low: int | None, high: int | None, expected: int) -> None:
        """Value limited to [low, high]"""
        assert clamp(value, low, high) == expected
