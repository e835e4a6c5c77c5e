"""
Core math modules for geomcore.

Ordinate-level numerical primitives with explicit NaN semantics.
"""

from geomcore.core.math.numerical_safeguards import (
    # Constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    NULL_ORDINATE,
    ORDINATE_MISMATCH_DISTANCE,
    # Absent ordinate detection
    is_null_ordinate,
    is_valid_float,
    ordinate_hash,
    ordinate_or_null,
    # Comparisons
    compare_ordinates,
    equals_with_tolerance,
    is_close,
    ordinate_distance,
    ordinates_equal,
    # Distances
    distance_2d,
    distance_3d,
    # Validation
    clamp,
    is_valid_tolerance,
)

__all__ = [
    # Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "NULL_ORDINATE",
    "ORDINATE_MISMATCH_DISTANCE",
    # Absent ordinate detection
    "is_null_ordinate",
    "is_valid_float",
    "ordinate_hash",
    "ordinate_or_null",
    # Comparisons
    "compare_ordinates",
    "equals_with_tolerance",
    "is_close",
    "ordinate_distance",
    "ordinates_equal",
    # Distances
    "distance_2d",
    "distance_3d",
    # Validation
    "clamp",
    "is_valid_tolerance",
]
