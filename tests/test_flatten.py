import itertools

import pytest

from crusty.flatten import flatten


def test_empty():
    assert len(list(flatten(iter([])))) == 0


def test_empty_wide():
    assert len(list(flatten([[], [], []]))) == 0


def test_once():
    assert len(list(flatten(iter([["a"]])))) == 1


def test_two():
    assert len(list(flatten(iter([["a", "b"]])))) == 2


def test_two_wide():
    assert len(list(flatten([["a"], ["b"]]))) == 2


def test_reverse():
    assert list(reversed(flatten(iter([["a", "b"]])))) == ["b", "a"]


def test_reverse_wide():
    assert list(reversed(flatten([["a"], ["b"]]))) == ["b", "a"]


def test_both_ends():
    v = flatten([["a", "b"], ["c", "d"]])
    assert next(v) == "a"
    assert v.next_back() == "d"
    assert next(v) == "b"
    assert v.next_back() == "c"
    with pytest.raises(StopIteration):
        next(v)
    with pytest.raises(StopIteration):
        v.next_back()


def test_both_ends_one_back():
    v = flatten([["a", "b"], ["c", "d"]])
    assert next(v) == "a"
    assert v.next_back() == "d"
    assert next(v) == "b"
    assert next(v) == "c"
    with pytest.raises(StopIteration):
        next(v)
    with pytest.raises(StopIteration):
        v.next_back()


def test_both_ends_one_front():
    v = flatten([["a", "b"], ["c", "d"]])
    assert next(v) == "a"
    assert v.next_back() == "d"
    assert v.next_back() == "c"
    assert v.next_back() == "b"
    with pytest.raises(StopIteration):
        next(v)
    with pytest.raises(StopIteration):
        v.next_back()


def test_infinite():
    x = flatten(range(i) for i in itertools.count())
    assert next(x) == 0
    assert next(x) == 0
    assert next(x) == 1


def test_deep():
    assert len(list(flatten(flatten([[[0, 1]]])))) == 2


def test_iteration_order():
    assert list(flatten([[0, 1], [], [2], [3, 4]])) == [0, 1, 2, 3, 4]