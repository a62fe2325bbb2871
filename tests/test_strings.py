from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dsexercises.strings import (
    convert_digits,
    failure_function,
    kmp_index,
    kmp_search,
    next_values,
    power_set,
)

small_text = st.text(alphabet="abc", max_size=30)
digit_text = st.text(alphabet="0123456789", min_size=1, max_size=12)


def test_failure_function_textbook_pattern():
    assert failure_function("abcabcacab") == [-1, -1, -1, 0, 1, 2, 3, -1, 0, 1]


@given(small_text)
def test_failure_entries_are_borders(pattern):
    table = failure_function(pattern)
    assert len(table) == len(pattern)
    for j, f in enumerate(table):
        assert -1 <= f < j or (j == 0 and f == -1)
        if f >= 0:
            assert pattern[: f + 1] == pattern[j - f : j + 1]


@given(small_text, st.text(alphabet="abc", max_size=5))
def test_kmp_search_agrees_with_find(text, pattern):
    assert kmp_search(text, pattern) == text.find(pattern)


def test_kmp_search_source_example():
    assert kmp_search("abababcd", "abcd") == "abababcd".find("abcd")


def test_next_values_empty():
    assert next_values("") == []


@given(st.text(alphabet="ab", min_size=1, max_size=20))
def test_next_values_bounds(pattern):
    table = next_values(pattern)
    assert len(table) == len(pattern)
    assert table[0] == 0
    for i, value in enumerate(table):
        assert 0 <= value < max(i, 1)


@pytest.mark.parametrize(
    "text, pattern, start",
    [("abcd", "cd", 0), ("abcabc", "ab", 1), ("aaa", "bb", 0)],
)
def test_kmp_index_matches_find(text, pattern, start):
    assert kmp_index(text, pattern, start) == text.find(pattern, start)


def test_kmp_index_first_character_is_wildcard():
    assert kmp_index("xbc", "abc", 0) == 0


def test_kmp_index_negative_start():
    with pytest.raises(ValueError):
        kmp_index("abc", "a", -1)


@given(digit_text)
def test_convert_plain_digits(text):
    assert convert_digits(text) == int(text)


def test_convert_non_digits_count_as_zero():
    assert convert_digits("1a2") == convert_digits("102")


@given(digit_text)
def test_convert_negative_drops_last_character(text):
    assert convert_digits("-" + text + "7") == -convert_digits(text)


@given(st.lists(st.integers(), max_size=6, unique=True))
def test_power_set_contents(items):
    subsets = list(power_set(items))
    assert len(subsets) == 2 ** len(items)
    assert len(set(subsets)) == len(subsets)
    assert subsets[0] == ()
    assert subsets[-1] == tuple(items)
    expected = {c for r in range(len(items) + 1) for c in combinations(items, r)}
    assert set(subsets) == expected