"""
Coordinate sequences: the abstract contract, list-backed and packed
implementations, factories, the sequence comparator and utilities.
"""

from geomcore.sequences import utilities as CoordinateSequences
from geomcore.sequences.array_sequence import CoordinateArraySequence
from geomcore.sequences.base import CoordinateSequence, format_ordinate, format_sequence
from geomcore.sequences.comparator import CoordinateSequenceComparator
from geomcore.sequences.factory import (
    CoordinateArraySequenceFactory,
    CoordinateSequenceFactory,
    PackedCoordinateSequenceFactory,
    get_common_shape,
)
from geomcore.sequences.packed_sequence import (
    PackedCoordinateSequence,
    PackedDoubleCoordinateSequence,
    PackedFloatCoordinateSequence,
)

__all__ = [
    # Contract
    "CoordinateSequence",
    # Implementations
    "CoordinateArraySequence",
    "PackedCoordinateSequence",
    "PackedDoubleCoordinateSequence",
    "PackedFloatCoordinateSequence",
    # Factories
    "CoordinateArraySequenceFactory",
    "CoordinateSequenceFactory",
    "PackedCoordinateSequenceFactory",
    "get_common_shape",
    # Ordering
    "CoordinateSequenceComparator",
    # Utilities module
    "CoordinateSequences",
    "format_ordinate",
    "format_sequence",
]
