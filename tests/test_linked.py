import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.libft.linked import LinkedList


@given(st.lists(st.integers()))
def test_construct_and_iterate(items):
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_add_front_and_back():
    lst = LinkedList([2])
    lst.add_front(1)
    lst.add_back(3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3
    assert lst.last() == 3


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    lst.add_front("x")
    assert lst.last() == "x"
    lst.add_back("y")
    assert list(lst) == ["x", "y"]


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_pop_front_calls_delete():
    deleted = []
    lst = LinkedList(["a", "b"])
    assert lst.pop_front(deleted.append) == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]
    assert lst.last() == "b"


def test_pop_front_empties_then_raises():
    lst = LinkedList([1])
    assert lst.pop_front() == 1
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.pop_front()
    with pytest.raises(IndexError):
        lst.last()


@given(st.lists(st.integers()))
def test_clear_deletes_in_order(items):
    deleted = []
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert list(lst) == []
    assert len(lst) == 0


def test_iterate_visits_every_content():
    seen = []
    LinkedList([3, 1, 2]).iterate(seen.append)
    assert seen == [3, 1, 2]


@given(st.lists(st.integers()))
def test_map_applies_function_and_keeps_original(items):
    original = LinkedList(items)
    mapped = original.map(lambda x: x * 2)
    assert list(mapped) == [x * 2 for x in items]
    assert list(original) == items


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [11, 12]