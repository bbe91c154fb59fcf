import pytest

from dsakit.linkedqueue import LinkedQueue


def test_fifo_order():
    values = [5, 1, 8, 3]
    queue = LinkedQueue()
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values
    assert len(queue) == 0


def test_iteration_shows_front_to_rear():
    values = ["a", "b", "c"]
    queue = LinkedQueue(values)
    assert list(queue) == values
    queue.dequeue()
    assert list(queue) == values[1:]


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        LinkedQueue().dequeue()


def test_reuse_after_emptying():
    queue = LinkedQueue([1])
    assert queue.dequeue() == 1
    assert not queue
    queue.enqueue(2)
    queue.enqueue(3)
    assert list(queue) == [2, 3]
    assert queue.dequeue() == 2


def test_length_tracks_operations():
    queue = LinkedQueue(range(4))
    queue.dequeue()
    queue.enqueue(9)
    assert len(queue) == 4
    assert bool(queue) is True