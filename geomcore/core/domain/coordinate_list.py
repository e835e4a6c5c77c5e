"""
CoordinateList — growable list of coordinates with optional repeat suppression

With allow_repeated=False a coordinate is not added when it is 2D-equal to
its would-be neighbour (the last element when appending, the elements on
either side when inserting). Every bulk operation goes through the single
insertion rule, so the no-consecutive-repeats property holds whatever the
entry path.

Duplicates are detected on X/Y only, also for coordinates that carry Z or
measures.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from geomcore.core.domain.coordinate import Coordinate


class CoordinateList(Sequence[Coordinate]):
    """
    Ordered, growable list of coordinates.

    Args:
        coordinates: Initial coordinates (added as-is, repeats allowed unless
            allow_repeated is False)
        allow_repeated: Repeat policy applied to the initial coordinates
    """

    def __init__(
        self,
        coordinates: Iterable[Coordinate] | None = None,
        allow_repeated: bool = True,
    ) -> None:
        self._items: list[Coordinate] = []
        if coordinates is not None:
            self.add_all(coordinates, allow_repeated)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> Coordinate: ...

    @overload
    def __getitem__(self, index: slice) -> list[Coordinate]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __delitem__(self, index: int | slice) -> None:
        del self._items[index]

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CoordinateList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"CoordinateList([{', '.join(str(c) for c in self._items)}])"

    def get_coordinate(self, index: int) -> Coordinate:
        return self._items[index]

    # -------------------------------------------------------------------------
    # Single insertion
    # -------------------------------------------------------------------------

    def add(self, coordinate: Coordinate, allow_repeated: bool = True) -> bool:
        """
        Append a coordinate.

        Args:
            coordinate: Coordinate to append (stored by reference)
            allow_repeated: If False, skip when 2D-equal to the last element

        Returns:
            True if the coordinate was appended
        """
        if not allow_repeated and self._items:
            if self._items[-1].equals_2d(coordinate):
                return False
        self._items.append(coordinate)
        return True

    def insert(
        self, index: int, coordinate: Coordinate, allow_repeated: bool = True
    ) -> bool:
        """
        Insert a coordinate before position `index`.

        Args:
            index: Insertion point, 0..len(self)
            coordinate: Coordinate to insert
            allow_repeated: If False, skip when 2D-equal to the element before
                or after the insertion point

        Returns:
            True if the coordinate was inserted

        Raises:
            IndexError: If index is outside 0..len(self)
        """
        size = len(self._items)
        if index < 0 or index > size:
            raise IndexError(f"insertion index {index} out of range 0..{size}")

        if not allow_repeated:
            if index > 0 and self._items[index - 1].equals_2d(coordinate):
                return False
            if index < size and self._items[index].equals_2d(coordinate):
                return False

        self._items.insert(index, coordinate)
        return True

    # -------------------------------------------------------------------------
    # Bulk insertion
    # -------------------------------------------------------------------------

    def add_range(
        self,
        coordinates: Sequence[Coordinate],
        allow_repeated: bool,
        start: int,
        end: int,
    ) -> bool:
        """
        Append coordinates[start..end], both ends inclusive.

        Iterates backwards when start > end.
        """
        step = 1 if start <= end else -1
        for i in range(start, end + step, step):
            self.add(coordinates[i], allow_repeated)
        return True

    def add_coordinates(
        self,
        coordinates: Sequence[Coordinate],
        allow_repeated: bool = True,
        forward: bool = True,
    ) -> bool:
        """Append a whole array, forwards or in reverse order."""
        if forward:
            for coordinate in coordinates:
                self.add(coordinate, allow_repeated)
        else:
            for coordinate in reversed(coordinates):
                self.add(coordinate, allow_repeated)
        return True

    def add_all(
        self,
        coordinates: Iterable[Coordinate],
        allow_repeated: bool = True,
        reverse: bool = False,
    ) -> bool:
        """
        Append every coordinate of an iterable.

        Returns:
            True if at least one coordinate was appended
        """
        items = list(coordinates)
        if reverse:
            items.reverse()

        added = False
        for coordinate in items:
            added |= self.add(coordinate, allow_repeated)
        return added

    # -------------------------------------------------------------------------
    # Rings and materialisation
    # -------------------------------------------------------------------------

    def close_ring(self) -> None:
        """Append a copy of the first element unless already closed in 2D."""
        if self._items:
            self.add(self._items[0].copy(), allow_repeated=False)

    def to_coordinate_array(self, forward: bool = True) -> list[Coordinate]:
        """
        Snapshot of the elements as a new list.

        The coordinates themselves are shared with this list; the list
        object is not, and reverse order leaves this list untouched.
        """
        if forward:
            return list(self._items)
        return self._items[::-1]

    def clone(self) -> "CoordinateList":
        """Deep copy: each coordinate is copied too."""
        result = CoordinateList()
        result._items = [c.copy() for c in self._items]
        return result

    def __copy__(self) -> "CoordinateList":
        return self.clone()
