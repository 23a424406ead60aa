import pytest

from crusty.linked_list import LinkedList, LinkedListIter


def generate_test():
    return LinkedList([0, 1, 2, 3, 4, 5, 6])


def _unordered(a, b):
    """True when none of the four ordering comparisons holds."""
    return not any((a < b, a > b, a <= b, a >= b))


def test_basic_front():
    lst = LinkedList()
    # (value to push, or None to pop; expected popped value; expected length after)
    steps = [
        (None, None, 0),
        (10, None, 1),
        (None, 10, 0),
        (None, None, 0),
        (10, None, 1),
        (20, None, 2),
        (30, None, 3),
        (None, 30, 2),
        (40, None, 3),
        (None, 40, 2),
        (None, 20, 1),
        (None, 10, 0),
        (None, None, 0),
        (None, None, 0),
    ]
    for push, popped, length in steps:
        if push is None:
            assert lst.pop_front() == popped
        else:
            lst.push_front(push)
        assert len(lst) == length


def test_basic():
    m = LinkedList()
    assert (m.pop_front(), m.pop_back(), m.pop_front()) == (None, None, None)
    m.push_front(1)
    assert m.pop_front() == 1
    m.extend([2, 3])
    assert len(m) == 2
    assert (m.pop_front(), m.pop_front()) == (2, 3)
    assert len(m) == 0
    assert m.pop_front() is None
    m.extend([1, 3, 5, 7])
    assert m.pop_front() == 1

    n = LinkedList()
    n.push_front(2)
    n.push_front(3)
    assert n.front() == 3
    assert n.replace_front(0) == 3
    assert n.back() == 2
    assert n.replace_back(1) == 2
    assert (n.pop_front(), n.pop_front()) == (0, 1)


def test_pop_back_keeps_rest():
    lst = LinkedList([1, 2, 3])
    assert lst.pop_back() == 3
    assert (lst.front(), lst.back(), len(lst)) == (1, 2, 2)
    assert [lst.pop_back() for _ in range(3)] == [2, 1, None]
    assert lst.front() is None


def test_replace_on_empty_raises():
    lst = LinkedList()
    with pytest.raises(IndexError):
        lst.replace_front(1)
    with pytest.raises(IndexError):
        lst.replace_back(1)
    assert len(lst) == 0
    assert (lst.front(), lst.back()) == (None, None)


def test_iterator():
    assert list(enumerate(generate_test().iter())) == [(i, i) for i in range(7)]
    n = LinkedList()
    assert next(n.iter(), None) is None
    n.push_front(4)
    it = n.iter()
    assert len(it) == 1
    assert next(it) == 4
    assert len(it) == 0
    assert next(it, None) is None


def test_iterator_double_end():
    n = LinkedList()
    assert next(n.iter(), None) is None
    for value in (4, 5, 6):
        n.push_front(value)
    it = n.iter()
    assert isinstance(it, LinkedListIter)
    assert len(it) == 3
    assert next(it) == 6
    assert len(it) == 2
    assert it.next_back() == 4
    assert len(it) == 1
    assert it.next_back() == 5
    with pytest.raises(StopIteration):
        it.next_back()
    assert next(it, None) is None


def test_rev_iter():
    assert list(reversed(generate_test())) == [6, 5, 4, 3, 2, 1, 0]
    n = LinkedList()
    assert list(reversed(n)) == []
    n.push_front(4)
    assert list(reversed(n)) == [4]


def test_mut_iter():
    m = generate_test()
    remaining = len(m)
    for i, elt in enumerate(m):
        assert i == elt
        remaining -= 1
    assert remaining == 0
    n = LinkedList()
    assert list(n) == []
    n.push_front(4)
    n.push_back(5)
    it = n.iter()
    assert len(it) == 2
    assert (next(it), next(it)) == (4, 5)
    assert len(it) == 0
    assert next(it, None) is None


def test_eq():
    n = LinkedList([])
    m = LinkedList([])
    assert n == m
    n.push_front(1)
    assert n != m
    m.push_back(1)
    assert n == m

    assert LinkedList([2, 3, 4]) != LinkedList([1, 2, 3])


def test_ord():
    n = LinkedList([])
    m = LinkedList([1, 2, 3])
    assert n < m
    assert m > n
    assert n <= n
    assert n >= n


def test_ord_nan():
    nan = float("nan")
    one = LinkedList([1.0])
    assert _unordered(LinkedList([nan]), LinkedList([nan]))
    assert _unordered(LinkedList([nan]), one)
    assert _unordered(LinkedList([1.0, 2.0, nan]), LinkedList([1.0, 2.0, 3.0]))

    s = LinkedList([1.0, 2.0, 4.0, 2.0])
    t = LinkedList([1.0, 2.0, 3.0, 2.0])
    assert not (s < t)
    assert s > one
    assert not (s <= one)
    assert s >= one


def test_repr():
    assert repr(LinkedList(range(10))) == "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]"
    words = LinkedList(["just", "one", "test", "more"])
    assert repr(words) == "['just', 'one', 'test', 'more']"


def test_hashmap():
    list1 = LinkedList(range(10))
    list2 = LinkedList(range(1, 11))
    mapping = {}

    assert mapping.get(list1) is None
    mapping[list1.copy()] = "list1"
    assert mapping.get(list2) is None
    mapping[list2.copy()] = "list2"

    assert len(mapping) == 2
    assert (mapping[list1], mapping[list2]) == ("list1", "list2")

    assert (mapping.pop(list1), mapping.pop(list2)) == ("list1", "list2")
    assert not mapping


def test_copy_is_independent():
    original = LinkedList([1, 2, 3])
    duplicate = original.copy()
    assert duplicate == original
    duplicate.push_back(4)
    assert list(original) == [1, 2, 3]
    assert list(duplicate) == [1, 2, 3, 4]


def test_extend_and_clear():
    lst = LinkedList([1])
    lst.extend([2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3
    lst.clear()
    assert len(lst) == 0
    assert (lst.front(), lst.back()) == (None, None)


def test_drain_empties_list():
    lst = LinkedList([1, 2, 3])
    assert list(lst.drain()) == [1, 2, 3]
    assert len(lst) == 0
    assert lst.pop_front() is None