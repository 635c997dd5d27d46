import threading

import pytest
from hypothesis import given, strategies as st

from connectorcore.uint_queue import QueueEmptyError, QueueFullError, UintQueue

uints = st.integers(min_value=0, max_value=0xFFFFFFFF)


@given(st.integers(min_value=1, max_value=64))
def test_capacity_at_least_requested(size):
    queue = UintQueue(size)
    assert queue.capacity >= size
    assert queue.capacity <= size + 2


@given(st.lists(uints, max_size=40))
def test_fifo_round_trip(values):
    queue = UintQueue(max(len(values), 1))
    for value in values:
        queue.push(value)
    assert len(queue) == len(values)
    assert [queue.pop() for _ in values] == values
    assert len(queue) == 0


@given(st.integers(min_value=1, max_value=20))
def test_fill_then_full_error(size):
    queue = UintQueue(size)
    for value in range(queue.capacity):
        queue.push(value)
    assert len(queue) == queue.capacity
    with pytest.raises(QueueFullError):
        queue.push(0)


def test_pop_empty_raises():
    queue = UintQueue(4)
    with pytest.raises(QueueEmptyError):
        queue.pop()


def test_wraparound_preserves_order():
    queue = UintQueue(3)
    popped = []
    for value in range(25):
        queue.push(value)
        if len(queue) == queue.capacity:
            popped.append(queue.pop())
    while len(queue):
        popped.append(queue.pop())
    assert popped == list(range(25))


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        UintQueue(0)


@pytest.mark.parametrize("bad", [-1, 0x100000000])
def test_out_of_range_element_raises(bad):
    queue = UintQueue(2)
    with pytest.raises(ValueError):
        queue.push(bad)
    assert len(queue) == 0


def test_concurrent_pushes_lose_nothing():
    queue = UintQueue(400)

    def worker(offset):
        for value in range(offset, offset + 100):
            queue.push(value)

    threads = [threading.Thread(target=worker, args=(n * 100,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    drained = sorted(queue.pop() for _ in range(len(queue)))
    assert drained == list(range(400))