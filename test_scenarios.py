import random

import pytest

from benchtimer.scenarios import (
    UnionFind,
    array_supplier,
    count_pairs,
    insertion_sort,
    is_sorted,
    ordered_array,
    partial_array,
    random_array,
    reverse_array,
)


def test_ordered_and_reverse_arrays():
    assert ordered_array(5) == [0, 1, 2, 3, 4]
    assert reverse_array(5) == [4, 3, 2, 1, 0]
    assert ordered_array(0) == []


def test_partial_array_has_ordered_first_half():
    values = partial_array(10, random.Random(1))
    assert len(values) == 10
    assert values[:5] == [0, 1, 2, 3, 4]


def test_random_array_is_reproducible_with_seed():
    assert random_array(20, random.Random(7)) == random_array(20, random.Random(7))


def test_array_supplier_returns_fresh_arrays():
    supplier = array_supplier("reverse", 4)
    first = supplier()
    first.sort()
    assert supplier() == [3, 2, 1, 0]


def test_array_supplier_rejects_unknown_ordering():
    with pytest.raises(ValueError):
        array_supplier("shuffled", 10)


@pytest.mark.parametrize("kind", ["random", "ordered", "reverse", "partial"])
def test_insertion_sort_sorts_every_ordering(kind):
    values = array_supplier(kind, 200, random.Random(42))()
    expected = sorted(values)
    assert insertion_sort(values) == expected
    assert is_sorted(values)


def test_insertion_sort_subrange():
    values = [5, 4, 3, 2, 1]
    insertion_sort(values, 1, 4)
    assert values == [5, 2, 3, 4, 1]


@pytest.mark.parametrize("mode", ["halving", "full"])
def test_union_find_connects_sites(mode):
    uf = UnionFind(6, mode)
    assert uf.components() == 6
    assert uf.union(0, 1)
    assert uf.union(1, 2)
    assert not uf.union(0, 2)
    assert uf.connected(0, 2)
    assert not uf.connected(0, 3)
    assert uf.components() == 4


def test_union_find_rejects_unknown_mode():
    with pytest.raises(ValueError):
        UnionFind(3, "none")


def test_union_find_validates_sites():
    with pytest.raises(IndexError):
        UnionFind(3).find(3)


@pytest.mark.parametrize("mode", ["halving", "full"])
def test_count_pairs_needs_at_least_n_minus_one_pairs(mode):
    n = 100
    assert count_pairs(n, random.Random(3), mode) >= n - 1


def test_count_pairs_single_site():
    assert count_pairs(1) == 0
