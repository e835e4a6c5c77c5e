"""
Tests for CoordinateList

Checks:
1. Sequence protocol
2. Repeat suppression on every entry path
3. Range / bulk insertion order
4. Ring closing
5. Snapshots and deep copies
"""

import copy
import random

import pytest

from geomcore.core.domain.coordinate import Coordinate, CoordinateZ
from geomcore.core.domain.coordinate_list import CoordinateList


def c(x: float, y: float) -> Coordinate:
    return Coordinate(x, y)


def xs(coordinates: CoordinateList | list) -> list[tuple[float, float]]:
    return [(p.x, p.y) for p in coordinates]


def has_consecutive_repeats(coordinates: CoordinateList) -> bool:
    return any(
        coordinates[i].equals_2d(coordinates[i + 1]) for i in range(len(coordinates) - 1)
    )


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def triangle() -> CoordinateList:
    return CoordinateList([c(0, 0), c(1, 0), c(1, 1)])


# =============================================================================
# PROTOCOL TESTS
# =============================================================================


class TestProtocol:
    """Tests for the sequence protocol"""

    def test_len_index_iter(self, triangle: CoordinateList) -> None:
        """len, indexing, slicing and iteration"""
        assert len(triangle) == 3
        assert triangle[1].x == 1.0
        assert triangle[-1].y == 1.0
        assert xs(triangle[:2]) == [(0, 0), (1, 0)]
        assert xs(triangle) == [(0, 0), (1, 0), (1, 1)]

    def test_del(self, triangle: CoordinateList) -> None:
        """del removes an element"""
        del triangle[0]
        assert xs(triangle) == [(1, 0), (1, 1)]

    def test_equality(self, triangle: CoordinateList) -> None:
        """Equal to lists with equal content"""
        assert triangle == CoordinateList([c(0, 0), c(1, 0), c(1, 1)])
        assert triangle == [c(0, 0), c(1, 0), c(1, 1)]
        assert triangle != CoordinateList([c(0, 0)])

    def test_unhashable(self, triangle: CoordinateList) -> None:
        """Mutable, so not hashable"""
        with pytest.raises(TypeError):
            hash(triangle)

    def test_contains(self, triangle: CoordinateList) -> None:
        """Membership uses coordinate equality"""
        assert c(1, 0) in triangle
        assert c(5, 5) not in triangle

    def test_repr(self) -> None:
        """repr lists the coordinates"""
        assert repr(CoordinateList([c(0, 1)])) == "CoordinateList([(0.0, 1.0)])"

    def test_get_coordinate(self, triangle: CoordinateList) -> None:
        """get_coordinate returns the stored element"""
        assert triangle.get_coordinate(2) is triangle[2]


# =============================================================================
# REPEAT SUPPRESSION TESTS
# =============================================================================


class TestRepeatSuppression:
    """Tests for allow_repeated=False"""

    def test_add_skips_repeat(self) -> None:
        """Equal-to-last is skipped, and reported as not added"""
        lst = CoordinateList()
        assert lst.add(c(0, 0), allow_repeated=False)
        assert not lst.add(c(0, 0), allow_repeated=False)
        assert len(lst) == 1

    def test_add_allows_repeat_by_default(self) -> None:
        """Default policy keeps repeats"""
        lst = CoordinateList()
        lst.add(c(0, 0))
        lst.add(c(0, 0))
        assert len(lst) == 2

    def test_repeat_is_2d(self) -> None:
        """Coordinates differing only in Z count as repeats"""
        lst = CoordinateList([CoordinateZ(0, 0, 1)])
        assert not lst.add(CoordinateZ(0, 0, 2), allow_repeated=False)

    def test_non_adjacent_repeat_kept(self) -> None:
        """Only the last element is checked"""
        lst = CoordinateList([c(0, 0), c(1, 1)])
        assert lst.add(c(0, 0), allow_repeated=False)

    def test_insert_checks_both_neighbours(self, triangle: CoordinateList) -> None:
        """Insertion next to an equal coordinate is skipped"""
        assert not triangle.insert(1, c(0, 0), allow_repeated=False)
        assert not triangle.insert(1, c(1, 0), allow_repeated=False)
        assert triangle.insert(1, c(0.5, 0), allow_repeated=False)
        assert xs(triangle) == [(0, 0), (0.5, 0), (1, 0), (1, 1)]

    @pytest.mark.parametrize("index", [-1, 4])
    def test_insert_out_of_range(self, triangle: CoordinateList, index: int) -> None:
        """Insertion points outside 0..len raise IndexError"""
        with pytest.raises(IndexError):
            triangle.insert(index, c(5, 5))

    def test_insert_at_ends(self, triangle: CoordinateList) -> None:
        """0 and len are valid insertion points"""
        triangle.insert(0, c(-1, -1))
        triangle.insert(len(triangle), c(2, 2))
        assert xs(triangle)[0] == (-1, -1)
        assert xs(triangle)[-1] == (2, 2)

    def test_constructor_policy(self) -> None:
        """The constructor applies allow_repeated to its input"""
        lst = CoordinateList([c(0, 0), c(0, 0), c(1, 1)], allow_repeated=False)
        assert xs(lst) == [(0, 0), (1, 1)]

    def test_no_consecutive_repeats_any_path(self) -> None:
        """Random mix of every entry path never leaves consecutive repeats"""
        rng = random.Random(1234)
        pool = [c(x, y) for x in range(3) for y in range(2)]
        lst = CoordinateList()

        for _ in range(300):
            path = rng.randrange(5)
            if path == 0:
                lst.add(rng.choice(pool), allow_repeated=False)
            elif path == 1:
                lst.insert(rng.randint(0, len(lst)), rng.choice(pool), allow_repeated=False)
            elif path == 2:
                items = [rng.choice(pool) for _ in range(4)]
                lst.add_range(items, False, rng.randrange(4), rng.randrange(4))
            elif path == 3:
                lst.add_all([rng.choice(pool) for _ in range(3)], False, rng.random() < 0.5)
            else:
                lst.add_coordinates([rng.choice(pool) for _ in range(3)], False, rng.random() < 0.5)
            assert not has_consecutive_repeats(lst)


# =============================================================================
# BULK INSERTION TESTS
# =============================================================================


class TestBulkInsertion:
    """Tests for add_range / add_coordinates / add_all"""

    def test_add_range_forward(self) -> None:
        """start..end inclusive"""
        lst = CoordinateList()
        lst.add_range([c(0, 0), c(1, 1), c(2, 2), c(3, 3)], True, 1, 2)
        assert xs(lst) == [(1, 1), (2, 2)]

    def test_add_range_backward(self) -> None:
        """start > end walks backwards"""
        lst = CoordinateList()
        lst.add_range([c(0, 0), c(1, 1), c(2, 2), c(3, 3)], True, 3, 1)
        assert xs(lst) == [(3, 3), (2, 2), (1, 1)]

    def test_add_range_single(self) -> None:
        """start == end adds one element"""
        lst = CoordinateList()
        lst.add_range([c(0, 0), c(1, 1)], True, 1, 1)
        assert xs(lst) == [(1, 1)]

    def test_add_coordinates_reverse(self) -> None:
        """forward=False appends in reverse order"""
        lst = CoordinateList([c(9, 9)])
        lst.add_coordinates([c(0, 0), c(1, 1)], True, forward=False)
        assert xs(lst) == [(9, 9), (1, 1), (0, 0)]

    def test_add_all_iterable(self) -> None:
        """Any iterable, optionally reversed"""
        lst = CoordinateList()
        assert lst.add_all(c(i, 0) for i in range(3))
        assert lst.add_all(iter([c(5, 0), c(6, 0)]), reverse=True)
        assert xs(lst) == [(0, 0), (1, 0), (2, 0), (6, 0), (5, 0)]

    def test_add_all_reports_nothing_added(self) -> None:
        """False when every element was a repeat"""
        lst = CoordinateList([c(0, 0)])
        assert not lst.add_all([c(0, 0), c(0, 0)], allow_repeated=False)


# =============================================================================
# RING AND SNAPSHOT TESTS
# =============================================================================


class TestCloseRing:
    """Tests for close_ring"""

    def test_close_ring(self, triangle: CoordinateList) -> None:
        """An open ring gets its first coordinate appended"""
        triangle.close_ring()
        assert xs(triangle) == [(0, 0), (1, 0), (1, 1), (0, 0)]

    def test_idempotent(self, triangle: CoordinateList) -> None:
        """Closing twice changes nothing"""
        triangle.close_ring()
        triangle.close_ring()
        assert len(triangle) == 4

    def test_appends_copy(self, triangle: CoordinateList) -> None:
        """The closing coordinate is a copy of the first"""
        triangle.close_ring()
        assert triangle[-1] is not triangle[0]

    def test_empty(self) -> None:
        """Empty list stays empty"""
        lst = CoordinateList()
        lst.close_ring()
        assert len(lst) == 0


class TestSnapshots:
    """Tests for to_coordinate_array / clone"""

    def test_to_coordinate_array(self, triangle: CoordinateList) -> None:
        """Forward snapshot is a new list sharing the coordinates"""
        array = triangle.to_coordinate_array()
        array.append(c(7, 7))
        assert len(triangle) == 3
        assert array[0] is triangle[0]

    def test_reverse_snapshot_leaves_list(self, triangle: CoordinateList) -> None:
        """Reverse order does not touch the list"""
        array = triangle.to_coordinate_array(forward=False)
        assert xs(array) == [(1, 1), (1, 0), (0, 0)]
        assert xs(triangle) == [(0, 0), (1, 0), (1, 1)]

    def test_clone_is_deep(self, triangle: CoordinateList) -> None:
        """clone copies every coordinate"""
        duplicate = triangle.clone()
        assert duplicate == triangle
        duplicate[0].x = 42.0
        assert triangle[0].x == 0.0

    def test_copy_module(self, triangle: CoordinateList) -> None:
        """copy.copy gives a deep clone"""
        duplicate = copy.copy(triangle)
        duplicate[0].x = 42.0
        assert triangle[0].x == 0.0
