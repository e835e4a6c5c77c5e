"""
Sequence utilities — in-place editing, copying, ring handling and
comparison helpers that work on any CoordinateSequence

Copies between sequences of different shapes move the common spatial
ordinates (by spatial index) and the common measures (by measure
position); ordinates only one side has are left alone.
"""

from typing import TYPE_CHECKING

from geomcore.core.domain.coordinate import Coordinate
from geomcore.core.domain.errors import RingNotClosedError
from geomcore.core.math.numerical_safeguards import ordinates_equal
from geomcore.sequences.base import CoordinateSequence, format_sequence
from geomcore.sequences.packed_sequence import PackedCoordinateSequence

if TYPE_CHECKING:
    from geomcore.sequences.factory import CoordinateSequenceFactory

# Fewest positions a non-empty ring can have: three corners plus closure
MIN_RING_SIZE = 4


# =============================================================================
# IN-PLACE EDITING
# =============================================================================


def swap(sequence: CoordinateSequence, i: int, j: int) -> None:
    """Exchange every ordinate of positions i and j."""
    if i == j:
        return
    for d in range(sequence.dimension):
        tmp = sequence.get_ordinate(i, d)
        sequence.set_ordinate(i, d, sequence.get_ordinate(j, d))
        sequence.set_ordinate(j, d, tmp)


def reverse(sequence: CoordinateSequence) -> None:
    """Reverse a sequence in place."""
    last = sequence.count - 1
    for i in range(sequence.count // 2):
        swap(sequence, i, last - i)


def scroll(
    sequence: CoordinateSequence,
    first: int | Coordinate,
    ensure_ring: bool | None = None,
) -> None:
    """
    Rotate a sequence in place so that `first` becomes position 0.

    Args:
        sequence: Sequence to rotate
        first: New first position, or a coordinate looked up with index_of
            (a coordinate not found leaves the sequence unchanged)
        ensure_ring: Treat the sequence as a closed ring: rotate all but the
            closing position and rewrite it as a copy of the new start.
            Defaults to is_ring(sequence).
    """
    index = index_of(first, sequence) if isinstance(first, Coordinate) else first
    if index <= 0:
        return
    if ensure_ring is None:
        ensure_ring = is_ring(sequence)

    snapshot = sequence.copy()
    last = sequence.count - 1 if ensure_ring else sequence.count

    for j in range(last):
        source = (index + j) % last
        for d in range(sequence.dimension):
            sequence.set_ordinate(j, d, snapshot.get_ordinate(source, d))

    if ensure_ring:
        for d in range(sequence.dimension):
            sequence.set_ordinate(last, d, sequence.get_ordinate(0, d))


# =============================================================================
# COPYING
# =============================================================================


def copy(
    source: CoordinateSequence,
    source_pos: int,
    dest: CoordinateSequence,
    dest_pos: int,
    length: int,
) -> None:
    """
    Copy `length` coordinates from source[source_pos:] to dest[dest_pos:].

    Packed sequences of the same type and shape are copied as one buffer
    slice.
    """
    if length <= 0:
        return

    if (
        isinstance(source, PackedCoordinateSequence)
        and type(source) is type(dest)
        and source.ordinates == dest.ordinates
        and source_pos + length <= source.count
        and dest_pos + length <= dest.count
    ):
        dimension = source.dimension
        src_raw = source.get_raw_coordinates()
        dest_raw = dest.get_raw_coordinates()
        dest_raw[dest_pos * dimension:(dest_pos + length) * dimension] = src_raw[
            source_pos * dimension:(source_pos + length) * dimension
        ]
        return

    spatial = min(source.spatial, dest.spatial)
    measures = min(source.measures, dest.measures)
    for i in range(length):
        _copy_coord(source, source_pos + i, dest, dest_pos + i, spatial, measures)


def copy_coord(
    source: CoordinateSequence,
    source_pos: int,
    dest: CoordinateSequence,
    dest_pos: int,
) -> None:
    """Copy one coordinate; only ordinates both sequences carry are written."""
    _copy_coord(
        source,
        source_pos,
        dest,
        dest_pos,
        min(source.spatial, dest.spatial),
        min(source.measures, dest.measures),
    )


def _copy_coord(
    source: CoordinateSequence,
    source_pos: int,
    dest: CoordinateSequence,
    dest_pos: int,
    spatial: int,
    measures: int,
) -> None:
    for d in range(spatial):
        dest.set_ordinate(dest_pos, d, source.get_ordinate(source_pos, d))
    for j in range(measures):
        dest.set_ordinate(
            dest_pos,
            dest.spatial + j,
            source.get_ordinate(source_pos, source.spatial + j),
        )


# =============================================================================
# RINGS
# =============================================================================


def _is_closed(sequence: CoordinateSequence) -> bool:
    last = sequence.count - 1
    return (
        sequence.get_x(0) == sequence.get_x(last)
        and sequence.get_y(0) == sequence.get_y(last)
    )


def is_ring(sequence: CoordinateSequence) -> bool:
    """
    True for an empty sequence, or for one with at least four positions
    whose first and last coordinates are equal in X/Y.
    """
    if sequence.count == 0:
        return True
    if sequence.count < MIN_RING_SIZE:
        return False
    return _is_closed(sequence)


def validate_closed_ring(sequence: CoordinateSequence) -> None:
    """
    Check that a non-empty sequence ends where it starts.

    Raises:
        RingNotClosedError: If first and last coordinates differ in X/Y
    """
    if sequence.count == 0:
        return
    if not _is_closed(sequence):
        raise RingNotClosedError(
            f"ring is not closed: first ({sequence.get_x(0)}, {sequence.get_y(0)}) "
            f"!= last ({sequence.get_x(sequence.count - 1)}, "
            f"{sequence.get_y(sequence.count - 1)})"
        )


def ensure_valid_ring(
    factory: "CoordinateSequenceFactory", sequence: CoordinateSequence
) -> CoordinateSequence:
    """
    A sequence usable as a ring.

    Empty and valid rings are returned unchanged. A sequence shorter than
    four positions is padded to four with copies of its first coordinate;
    an open one gets its first coordinate appended. Both cases build a new
    sequence with `factory`.
    """
    count = sequence.count
    if count == 0:
        return sequence
    if count < MIN_RING_SIZE:
        return _create_closed_ring(factory, sequence, MIN_RING_SIZE)
    if _is_closed(sequence):
        return sequence
    return _create_closed_ring(factory, sequence, count + 1)


def _create_closed_ring(
    factory: "CoordinateSequenceFactory", sequence: CoordinateSequence, size: int
) -> CoordinateSequence:
    result = factory.create(size, sequence.dimension, sequence.measures)
    count = sequence.count
    copy(sequence, 0, result, 0, count)
    for i in range(count, size):
        copy(sequence, 0, result, i, 1)
    return result


def extend(
    factory: "CoordinateSequenceFactory", sequence: CoordinateSequence, size: int
) -> CoordinateSequence:
    """
    Copy of `sequence` grown to `size` positions, padded with its last
    coordinate (positions past the input stay as the factory created them
    when the input is empty).
    """
    result = factory.create(size, sequence.dimension, sequence.measures)
    count = min(sequence.count, result.count)
    copy(sequence, 0, result, 0, count)
    if sequence.count > 0:
        for i in range(count, result.count):
            copy(sequence, sequence.count - 1, result, i, 1)
    return result


# =============================================================================
# COMPARISON AND SEARCH
# =============================================================================


def is_equal(first: CoordinateSequence, second: CoordinateSequence) -> bool:
    """
    True if both sequences have the same length and every pair of
    positions is equal over the ordinates both carry (NaN equals NaN).
    """
    if first.count != second.count:
        return False
    spatial = min(first.spatial, second.spatial)
    measures = min(first.measures, second.measures)
    return all(
        _is_equal_at(first, i, second, i, spatial, measures) for i in range(first.count)
    )


def is_equal_at(
    first: CoordinateSequence,
    first_pos: int,
    second: CoordinateSequence,
    second_pos: int,
) -> bool:
    """Equality of one position from each sequence over their common ordinates."""
    return _is_equal_at(
        first,
        first_pos,
        second,
        second_pos,
        min(first.spatial, second.spatial),
        min(first.measures, second.measures),
    )


def _is_equal_at(
    first: CoordinateSequence,
    first_pos: int,
    second: CoordinateSequence,
    second_pos: int,
    spatial: int,
    measures: int,
) -> bool:
    for d in range(spatial):
        if not ordinates_equal(
            first.get_ordinate(first_pos, d), second.get_ordinate(second_pos, d)
        ):
            return False
    for j in range(measures):
        if not ordinates_equal(
            first.get_ordinate(first_pos, first.spatial + j),
            second.get_ordinate(second_pos, second.spatial + j),
        ):
            return False
    return True


def min_coordinate_index(
    sequence: CoordinateSequence, start: int = 0, end: int | None = None
) -> int:
    """
    Position of the smallest coordinate (2D order) in start..end inclusive.

    Returns:
        The first position holding the minimum, or -1 for an empty range
    """
    if end is None:
        end = sequence.count - 1

    min_index = -1
    min_coord: Coordinate | None = None
    for i in range(start, end + 1):
        candidate = sequence.get_coordinate(i)
        if min_coord is None or min_coord.compare_to(candidate) > 0:
            min_coord = candidate
            min_index = i
    return min_index


def min_coordinate(sequence: CoordinateSequence) -> Coordinate | None:
    """Smallest coordinate in 2D order, or None for an empty sequence."""
    index = min_coordinate_index(sequence)
    return sequence.get_coordinate(index) if index >= 0 else None


def index_of(coordinate: Coordinate, sequence: CoordinateSequence) -> int:
    """First position whose X/Y equal the coordinate's, or -1."""
    for i in range(sequence.count):
        if coordinate.x == sequence.get_x(i) and coordinate.y == sequence.get_y(i):
            return i
    return -1


def to_string(sequence: CoordinateSequence) -> str:
    """
    Compact text form: "(x,y x,y ...)" listing every ordinate.

    Examples:
        "(0,0 1,2.5)" for two XY coordinates, "()" for an empty sequence
    """
    return format_sequence(sequence)
