from hypothesis import given
from hypothesis import strategies as st

from dsexercises.linked import Node, from_iterable, reverse, to_list

values = st.lists(st.integers())


@given(values)
def test_round_trip(items):
    assert to_list(from_iterable(items)) == items


@given(values)
def test_reverse(items):
    assert to_list(reverse(from_iterable(items))) == items[::-1]


@given(values)
def test_reverse_twice_restores(items):
    assert to_list(reverse(reverse(from_iterable(items)))) == items


def test_empty_list():
    assert from_iterable([]) is None
    assert to_list(None) == []
    assert reverse(None) is None


def test_reverse_is_in_place():
    head = from_iterable([1, 2, 3])
    new_head = reverse(head)
    assert head.next is None
    assert new_head.data == 3
    assert list(new_head) == [3, 2, 1]


def test_node_iterates_values():
    head = Node("a", Node("b"))
    assert list(head) == ["a", "b"]