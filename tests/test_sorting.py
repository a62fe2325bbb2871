import random
from collections import Counter

import pytest
from hypothesis import given, strategies as st

from dsexercises.sorting import counting_sort, heap_sort, odd_first, randomized_select


def test_heap_sort_source_example():
    values = [12, 11, 13, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1]
    assert heap_sort(values) == sorted(values)
    assert values[0] == 12


@given(st.lists(st.integers()))
def test_heap_sort_matches_sorted(values):
    assert heap_sort(values) == sorted(values)


def test_counting_sort_source_example():
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert counting_sort(reversed(values)) == values


@given(st.lists(st.integers(min_value=0, max_value=200)))
def test_counting_sort_matches_sorted(values):
    assert counting_sort(values) == sorted(values)


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


@pytest.mark.parametrize("seed", range(5))
def test_randomized_select_source_example(seed):
    values = [10, 9, 8, 7, 6, 5, 4, 3, 2, 1]
    assert randomized_select(values, 3, random.Random(seed)) == 3


@given(st.lists(st.integers(), min_size=1), st.data(), st.integers())
def test_randomized_select_matches_sorted(values, data, seed):
    rank = data.draw(st.integers(min_value=1, max_value=len(values)))
    assert randomized_select(values, rank, random.Random(seed)) == sorted(values)[rank - 1]


@pytest.mark.parametrize("rank", [0, 4])
def test_randomized_select_rank_out_of_range(rank):
    with pytest.raises(ValueError):
        randomized_select([1, 2, 3], rank)


def test_odd_first_source_example():
    assert odd_first([1, 2, 3, 4, 5, 6]) == [1, 5, 3, 4, 2, 6]


@given(st.lists(st.integers()))
def test_odd_first_partitions(values):
    result = odd_first(values)
    assert Counter(result) == Counter(values)
    parities = [v % 2 for v in result]
    assert parities == sorted(parities, reverse=True)