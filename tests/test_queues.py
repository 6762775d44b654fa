from collections import deque

import pytest

from dsakit.queues import (
    ArrayDeque,
    CircularQueue,
    LinearQueue,
    first_negatives,
    first_non_repeating,
    reverse_queue,
)


def test_circular_queue_fills_to_capacity():
    queue = CircularQueue(5)
    for value in [1, 2, 3, 4, 5]:
        queue.push(value)
    assert queue.is_full()
    assert len(queue) == 5
    with pytest.raises(OverflowError):
        queue.push(6)


def test_circular_queue_wraps_around():
    queue = CircularQueue(5)
    for value in [1, 2, 3, 4, 5]:
        queue.push(value)
    assert queue.peek() == 1
    assert queue.pop() == 1
    queue.push(6)
    assert queue.is_full()
    assert [queue.pop() for _ in range(5)] == [2, 3, 4, 5, 6]
    assert queue.is_empty()


def test_circular_queue_empty_errors():
    queue = CircularQueue(3)
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()
    assert queue.is_empty() and not queue.is_full()


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        CircularQueue(0)
    with pytest.raises(ValueError):
        ArrayDeque(0)
    with pytest.raises(ValueError):
        LinearQueue(0)


def test_deque_example():
    dq = ArrayDeque(5)
    dq.push_back(5)
    dq.push_back(10)
    dq.push_front(3)
    dq.push_front(1)
    assert dq.front() == 1
    assert dq.rear() == 10
    assert dq.pop_front() == 1
    assert dq.pop_back() == 10
    assert dq.front() == 3
    assert dq.rear() == 5
    assert len(dq) == 2


def test_deque_full_and_empty():
    dq = ArrayDeque(2)
    dq.push_front("a")
    dq.push_back("b")
    assert dq.is_full()
    with pytest.raises(OverflowError):
        dq.push_front("c")
    with pytest.raises(OverflowError):
        dq.push_back("c")
    assert dq.pop_back() == "b"
    assert dq.pop_back() == "a"
    assert dq.is_empty()
    with pytest.raises(IndexError):
        dq.pop_front()
    with pytest.raises(IndexError):
        dq.pop_back()
    with pytest.raises(IndexError):
        dq.front()
    with pytest.raises(IndexError):
        dq.rear()


def test_deque_as_stack_from_front():
    values = [7, 8, 9, 10]
    dq = ArrayDeque(len(values))
    for value in values:
        dq.push_front(value)
    assert [dq.pop_front() for _ in values] == values[::-1]


def test_linear_queue_basic():
    queue = LinearQueue(5)
    with pytest.raises(IndexError):
        queue.pop()
    queue.push(1)
    queue.push(3)
    assert queue.peek() == 1
    assert not queue.is_empty()
    assert queue.pop() == 1
    assert queue.pop() == 3
    assert queue.is_empty()


def test_linear_queue_slots_are_not_reused_until_reset():
    queue = LinearQueue(2)
    queue.push("x")
    queue.push("y")
    queue.pop()
    queue.pop()
    with pytest.raises(OverflowError):
        queue.push("z")
    with pytest.raises(IndexError):
        queue.pop()
    queue.push("z")
    assert queue.peek() == "z"


def test_first_negatives_example():
    assert first_negatives([12, -1, -7, 8, -15, 30, 16, 28], 3) == [
        -1,
        -1,
        -7,
        -15,
        -15,
        0,
    ]


def test_first_negatives_invariants():
    items = [4, -2, 5, -9, -1, 3, 8, 2, -6, 7]
    k = 4
    result = first_negatives(items, k)
    assert len(result) == len(items) - k + 1
    for start, value in enumerate(result):
        window = items[start : start + k]
        if value == 0:
            assert all(item >= 0 for item in window)
        else:
            assert value < 0
            assert value in window
            assert all(item >= 0 for item in window[: window.index(value)])


@pytest.mark.parametrize("k", [0, 4])
def test_first_negatives_bad_window(k):
    with pytest.raises(ValueError):
        first_negatives([1, -2, 3], k)


def test_first_non_repeating_example():
    assert first_non_repeating("aabc") == "a#bb"


def test_first_non_repeating_shape():
    stream = "zxyzxq"
    result = first_non_repeating(stream)
    assert len(result) == len(stream)
    assert result[0] == stream[0]
    for index, ch in enumerate(result):
        if ch != "#":
            assert stream[: index + 1].count(ch) == 1


def test_reverse_queue():
    values = [1, 3, 5, 7, 9, 11]
    queue = deque(values)
    reverse_queue(queue)
    assert list(queue) == values[::-1]
    reverse_queue(queue)
    assert list(queue) == values