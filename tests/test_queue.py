from crusty.queue import UnsafeQueue


def _queue_of(*values):
    queue = UnsafeQueue()
    for value in values:
        queue.push(value)
    return queue


def test_basics():
    queue = _queue_of()
    assert queue.pop() is None

    for value in (1, 2, 3):
        queue.push(value)
    assert (queue.pop(), queue.pop()) == (1, 2)

    for value in (4, 5):
        queue.push(value)
    assert [queue.pop() for _ in range(4)] == [3, 4, 5, None]

    # exhaustion must have reset the tail pointer
    for value in (6, 7):
        queue.push(value)
    assert [queue.pop() for _ in range(3)] == [6, 7, None]


def test_iter_then_drain():
    queue = _queue_of(1, 2, 3)
    assert list(queue) == [1, 2, 3]
    assert list(queue.drain()) == [1, 2, 3]
    assert queue.pop() is None


def test_update_all():
    queue = _queue_of(1, 2, 3)
    queue.update_all(lambda x: x + 1)
    assert repr(queue) == "UnsafeQueue([2, 3, 4])"


def test_peek_iter():
    queue = _queue_of(1, 2, 3)

    assert queue.pop() == 1
    queue.push(4)
    assert queue.pop() == 2
    queue.push(5)

    assert queue.peek() == 3
    queue.push(6)
    queue.map_peek(lambda x: x * 10)
    assert queue.peek() == 30
    assert queue.pop() == 30

    queue.update_all(lambda x: x * 100)

    it = iter(queue)
    assert [next(it), next(it), next(it)] == [400, 500, 600]
    assert next(it, None) is None

    assert queue.pop() == 400
    queue.map_peek(lambda x: x * 10)
    assert queue.peek() == 5000
    queue.push(7)
    assert list(queue) == [5000, 600, 7]


def test_empty_peek():
    queue = _queue_of()
    assert queue.peek() is None
    assert queue.map_peek(lambda x: x * 2) is None