"""Array-backed max-heap, heap sort and k-th smallest selection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def heapify(items: list[Any], size: int, index: int) -> None:
    """Sift ``items[index]`` down within the first ``size`` elements, in place."""
    if not 0 <= size <= len(items):
        raise ValueError(f"size {size} is outside 0..{len(items)}")
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def build_max_heap(items: Iterable[Any]) -> list[Any]:
    """Return the values of ``items`` arranged as a max-heap."""
    values = list(items)
    for index in range(len(values) // 2 - 1, -1, -1):
        heapify(values, len(values), index)
    return values


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return an ascending copy of ``items`` using heap sort."""
    values = build_max_heap(items)
    for end in range(len(values) - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        heapify(values, end, 0)
    return values


def kth_smallest(items: Iterable[Any], k: int) -> Any:
    """Return the ``k``-th smallest value, counting from 1."""
    values = list(items)
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}, got {k}")
    heap = build_max_heap(values[:k])
    for value in values[k:]:
        if value < heap[0]:
            heap[0] = value
            heapify(heap, k, 0)
    return heap[0]


class MaxHeap:
    """A max-heap stored in a list."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            heapify(self._items, len(self._items), 0)
        return top

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in their heap-array order."""
        return iter(list(self._items))