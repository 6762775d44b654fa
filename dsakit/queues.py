"""Bounded queues and queue-based algorithms."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from typing import Any


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1, got {capacity}")
    return capacity


class CircularQueue:
    """A first-in first-out queue in a fixed ring of ``capacity`` slots."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def push(self, value: Any) -> None:
        """Add ``value`` at the rear; raise OverflowError when the queue is full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._slots[(self._front + self._count) % self.capacity] = value
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise IndexError("pop from an empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("peek at an empty queue")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count


class ArrayDeque:
    """A double-ended queue in a fixed ring of ``capacity`` slots."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def _rear_index(self) -> int:
        return (self._front + self._count - 1) % self.capacity

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the front; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._front = (self._front - 1) % self.capacity
        self._slots[self._front] = value
        self._count += 1

    def push_back(self, value: Any) -> None:
        """Insert ``value`` after the rear; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._slots[(self._front + self._count) % self.capacity] = value
        self._count += 1

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise IndexError("pop from an empty deque")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the rear value."""
        if self.is_empty():
            raise IndexError("pop from an empty deque")
        index = self._rear_index()
        value = self._slots[index]
        self._slots[index] = None
        self._count -= 1
        return value

    def front(self) -> Any:
        """Return the front value."""
        if self.is_empty():
            raise IndexError("the deque is empty")
        return self._slots[self._front]

    def rear(self) -> Any:
        """Return the rear value."""
        if self.is_empty():
            raise IndexError("the deque is empty")
        return self._slots[self._rear_index()]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count


class LinearQueue:
    """A queue whose ``capacity`` slots are used once each, front to back.

    Popped slots are not reused; popping from an empty queue resets it so that
    all slots become available again (and still raises IndexError).
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Any] = []
        self._front = 0

    def push(self, value: Any) -> None:
        """Append ``value``; raise OverflowError once every slot has been used."""
        if len(self._slots) == self.capacity:
            raise OverflowError("queue overflow")
        self._slots.append(value)

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            self._slots.clear()
            self._front = 0
            raise IndexError("pop from an empty queue")
        value = self._slots[self._front]
        self._front += 1
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("peek at an empty queue")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._front == len(self._slots)


def first_negatives(items: Sequence[int], k: int) -> list[int]:
    """Return the first negative value of every window of ``k`` items, 0 if none."""
    if not 1 <= k <= len(items):
        raise ValueError(f"window size must be between 1 and {len(items)}, got {k}")
    negatives: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(items):
        if negatives and index - negatives[0] >= k:
            negatives.popleft()
        if value < 0:
            negatives.append(index)
        if index >= k - 1:
            result.append(items[negatives[0]] if negatives else 0)
    return result


def first_non_repeating(stream: str) -> str:
    """For each prefix of ``stream``, give its first unrepeated character or '#'."""
    counts: Counter[str] = Counter()
    candidates: deque[str] = deque()
    answer: list[str] = []
    for ch in stream:
        counts[ch] += 1
        candidates.append(ch)
        while candidates and counts[candidates[0]] > 1:
            candidates.popleft()
        answer.append(candidates[0] if candidates else "#")
    return "".join(answer)


def reverse_queue(queue: deque[Any]) -> None:
    """Reverse ``queue`` in place by passing its items through a stack."""
    stack: list[Any] = []
    while queue:
        stack.append(queue.popleft())
    while stack:
        queue.append(stack.pop())