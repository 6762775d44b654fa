"""Searching and order checks over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> bool:
    """Return True if ``key`` occurs in the ascending sequence ``items``."""

    def search(low: int, high: int) -> bool:
        if low > high:
            return False
        mid = low + (high - low) // 2
        if items[mid] == key:
            return True
        if items[mid] < key:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(items) - 1)


def linear_search(items: Iterable[Any], key: Any) -> bool:
    """Return True if any element of ``items`` equals ``key``."""
    return any(item == key for item in items)


def is_sorted(items: Iterable[Any]) -> bool:
    """Return True if ``items`` is in non-decreasing order."""
    return all(left <= right for left, right in pairwise(items))


def find_index(items: Iterable[Any], value: Any) -> int:
    """Return the index of the first element equal to ``value``, or -1."""
    return next((index for index, item in enumerate(items) if item == value), -1)