"""Singly and doubly linked lists and algorithms on chains of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked node; nodes compare and hash by identity."""

    value: Any
    next: Optional[ListNode] = None


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a chain of nodes holding ``values`` and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def to_list(head: Optional[ListNode]) -> list[Any]:
    """Return the values of the chain starting at ``head``."""
    return [node.value for node in _walk(head)]


def reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the chain in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def _merge(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    anchor = ListNode(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def _split(head: ListNode) -> Optional[ListNode]:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    middle = slow.next
    slow.next = None
    return middle


def merge_sort(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the chain by relinking its nodes and return the new head."""
    if head is None or head.next is None:
        return head
    middle = _split(head)
    return _merge(merge_sort(head), merge_sort(middle))


def find_intersection(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both chains, or None."""
    first_length = sum(1 for _ in _walk(first))
    second_length = sum(1 for _ in _walk(second))
    for _ in range(first_length - second_length):
        first = first.next
    for _ in range(second_length - first_length):
        second = second.next
    while first is not None and second is not None:
        if first is second:
            return first
        first = first.next
        second = second.next
    return None


class LinkedList:
    """A singly linked list; positions count from 0."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[ListNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        self._head = ListNode(value, self._head)
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = ListNode(value)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def _node_before(self, position: int) -> ListNode:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} is outside 0..{self._size}")
        if position == 0:
            self.push_front(value)
            return
        previous = self._node_before(position)
        previous.next = ListNode(value, previous.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self.delete_at(0)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self.delete_at(self._size - 1)

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at index ``position``."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} is outside the list")
        if position == 0:
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_before(position)
            removed = previous.next
            previous.next = removed.next
        self._size -= 1
        return removed.value

    def remove(self, value: Any) -> bool:
        """Remove the first element equal to ``value``; return whether one was found."""
        for index, node in enumerate(_walk(self._head)):
            if node.value == value:
                self.delete_at(index)
                return True
        return False

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._head = reverse(self._head)

    def sort(self) -> None:
        """Sort the list in place with merge sort."""
        self._head = merge_sort(self._head)

    def remove_duplicates(self) -> None:
        """Drop elements equal to the one just before them."""
        node = self._head
        while node is not None and node.next is not None:
            if node.value == node.next.value:
                node.next = node.next.next
                self._size -= 1
            else:
                node = node.next

    def remove_alternate(self) -> None:
        """Drop every second element, keeping the first."""
        node = self._head
        while node is not None and node.next is not None:
            node.next = node.next.next
            self._size -= 1
            node = node.next

    def __contains__(self, value: Any) -> bool:
        return any(node.value == value for node in _walk(self._head))

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _walk(self._head))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


@dataclass(eq=False)
class _DoublyNode:
    value: Any
    prev: Optional[_DoublyNode] = None
    next: Optional[_DoublyNode] = None


class DoublyLinkedList:
    """A doubly linked list; positions count from 0."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoublyNode] = None
        self._tail: Optional[_DoublyNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = _DoublyNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _DoublyNode(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _DoublyNode:
        node = self._head
        for _ in range(position):
            node = node.next
        return node

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} is outside 0..{self._size}")
        if position == 0:
            self.push_front(value)
        elif position == self._size:
            self.push_back(value)
        else:
            following = self._node_at(position)
            previous = following.prev
            node = _DoublyNode(value, previous, following)
            previous.next = node
            following.prev = node
            self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at index ``position``."""
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} is outside the list")
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"