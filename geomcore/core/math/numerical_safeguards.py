"""
Numerical Safeguards — Ordinate Math Primitives

Primitives every coordinate operation relies on:
- The absent-ordinate sentinel (NaN) and its detection
- A NaN-aware total order over ordinate values
- Per-ordinate distance with present/absent mismatch detection
- Tolerance checks and tolerance-based comparisons
- Shape arithmetic helpers (clamping of integer dimension counts)

CRITICAL INVARIANTS:
1. NULL_ORDINATE is NaN; NaN compares equal to NaN wherever ordinates are
   compared for equality or ordered
2. compare_ordinates is reflexive, antisymmetric and transitive for every
   pair of floats, NaN included
3. ordinate_distance never lets a tolerance hide a present-vs-absent mismatch
4. No function in this module raises on NaN input
"""

import math
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Value used for ordinates that were not supplied or that a coordinate
# cannot hold (for example Z of a 2D coordinate)
NULL_ORDINATE: Final[float] = math.nan

# Absolute tolerance for float comparisons of derived values (distances)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Relative tolerance for float comparisons of derived values
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Distance reported between a present and an absent ordinate
ORDINATE_MISMATCH_DISTANCE: Final[float] = math.inf


# =============================================================================
# ABSENT ORDINATE DETECTION
# =============================================================================


def is_null_ordinate(value: float) -> bool:
    """
    Check whether an ordinate value is the absent sentinel.

    Args:
        value: Ordinate value

    Returns:
        True if value is NaN
    """
    return math.isnan(value)


def is_valid_float(value: float) -> bool:
    """
    Check whether a float is usable as a recorded ordinate (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    return math.isfinite(value)


def ordinate_or_null(value: float | None) -> float:
    """
    Map a missing value to the absent sentinel.

    Args:
        value: Ordinate value or None

    Returns:
        float(value), or NULL_ORDINATE when value is None
    """
    if value is None:
        return NULL_ORDINATE
    return float(value)


def ordinate_hash(value: float) -> int:
    """
    Hash an ordinate consistently with ordinates_equal.

    Python hashes NaN objects by identity, which would break the
    NaN-equals-NaN rule for hashed containers, so all NaNs share one hash.
    -0.0 and 0.0 already hash alike.
    """
    if math.isnan(value):
        return 0x7FF8
    return hash(value)


# =============================================================================
# ORDINATE COMPARISONS
# =============================================================================


def ordinates_equal(a: float, b: float) -> bool:
    """
    Exact equality of two ordinates with NaN-equals-NaN semantics.

    Examples:
        >>> ordinates_equal(1.0, 1.0)
        True
        >>> ordinates_equal(math.nan, math.nan)
        True
        >>> ordinates_equal(math.nan, 1.0)
        False
    """
    if a == b:
        return True
    return math.isnan(a) and math.isnan(b)


def compare_ordinates(a: float, b: float) -> int:
    """
    Total order over ordinate values.

    NaN sorts before every number and equals NaN; all other values use
    the usual numeric order (-0.0 == 0.0).

    Args:
        a: First ordinate
        b: Second ordinate

    Returns:
        -1 if a < b, 0 if a == b, +1 if a > b

    Examples:
        >>> compare_ordinates(1.0, 2.0)
        -1
        >>> compare_ordinates(math.nan, -math.inf)
        -1
        >>> compare_ordinates(math.nan, math.nan)
        0
    """
    if a < b:
        return -1
    if a > b:
        return 1

    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan:
        return 0 if b_nan else -1
    if b_nan:
        return 1
    return 0


def ordinate_distance(a: float, b: float) -> float:
    """
    Distance between two ordinates of the same slot.

    Both absent: 0.0. Exactly one absent: +inf, so that no tolerance can
    make a recorded ordinate equal to a missing one.

    Examples:
        >>> ordinate_distance(1.0, 3.5)
        2.5
        >>> ordinate_distance(math.nan, math.nan)
        0.0
        >>> ordinate_distance(math.nan, 0.0)
        inf
        >>> ordinate_distance(math.inf, math.inf)
        0.0
    """
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan and b_nan:
        return 0.0
    if a_nan or b_nan:
        return ORDINATE_MISMATCH_DISTANCE
    if a == b:
        return 0.0
    return abs(a - b)


def equals_with_tolerance(a: float, b: float, tolerance: float) -> bool:
    """
    Plain tolerance test on two ordinate values: a == b or
    abs(a - b) <= tolerance.

    Equal infinities pass at any tolerance. NaN on either side makes the
    test fail, as in any float comparison.
    """
    return a == b or abs(a - b) <= tolerance


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Compare derived floats (distances, areas) with machine-precision slack.

    Algorithm:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# DISTANCES
# =============================================================================


def distance_2d(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance in the XY plane."""
    return math.hypot(x1 - x2, y1 - y2)


def distance_3d(
    x1: float, y1: float, z1: float, x2: float, y2: float, z2: float
) -> float:
    """Euclidean distance in XYZ; NaN if either Z is absent."""
    return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2 + (z1 - z2) ** 2)


# =============================================================================
# VALIDATION AND CLAMPING
# =============================================================================


def is_valid_tolerance(tolerance: float) -> bool:
    """
    True for a usable comparison tolerance: non-negative and not NaN.

    Equality tests given any other tolerance report "not equal" rather than
    raise; no distance is <= a negative or NaN bound.
    """
    return tolerance >= 0.0


def clamp(
    value: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """
    Limit an integer to [min_value, max_value].

    Examples:
        >>> clamp(5, 2, 4)
        4
        >>> clamp(-1, 0)
        0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
