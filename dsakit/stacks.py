"""Bounded stacks and stack-based algorithms.

Functions that take a plain ``list`` as a stack treat its last element as the top.
"""

from __future__ import annotations

from typing import Any

_OPERATORS = frozenset("+-*/")
_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    return capacity


class ArrayStack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise OverflowError when the stack is full."""
        if len(self._items) == self.capacity:
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class TwoStacks:
    """Two stacks sharing one block of ``capacity`` slots."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._first: list[Any] = []
        self._second: list[Any] = []

    def _ensure_room(self) -> None:
        if len(self._first) + len(self._second) == self.capacity:
            raise OverflowError("stack overflow")

    def push1(self, value: Any) -> None:
        """Push ``value`` onto the first stack."""
        self._ensure_room()
        self._first.append(value)

    def push2(self, value: Any) -> None:
        """Push ``value`` onto the second stack."""
        self._ensure_room()
        self._second.append(value)

    def pop1(self) -> Any:
        """Remove and return the top of the first stack."""
        if not self._first:
            raise IndexError("stack 1 is empty")
        return self._first.pop()

    def pop2(self) -> Any:
        """Remove and return the top of the second stack."""
        if not self._second:
            raise IndexError("stack 2 is empty")
        return self._second.pop()

    def peek1(self) -> Any:
        """Return the top of the first stack."""
        if not self._first:
            raise IndexError("stack 1 is empty")
        return self._first[-1]

    def peek2(self) -> Any:
        """Return the top of the second stack."""
        if not self._second:
            raise IndexError("stack 2 is empty")
        return self._second[-1]


def insert_at_bottom(stack: list[Any], value: Any) -> None:
    """Place ``value`` beneath every element of ``stack``, in place."""
    stack.insert(0, value)


def reverse_stack(stack: list[Any]) -> None:
    """Reverse ``stack`` in place, so the old bottom becomes the top."""
    stack.reverse()


def delete_middle(stack: list[Any]) -> Any:
    """Remove and return the element ``len(stack) // 2`` places below the top."""
    if not stack:
        raise IndexError("delete from an empty stack")
    middle = len(stack) // 2
    return stack.pop(len(stack) - 1 - middle)


def sort_stack(stack: list[Any]) -> None:
    """Sort ``stack`` in place so that the largest value is on top."""
    stack.sort()


def has_redundant_brackets(expression: str) -> bool:
    """Return True if some bracket pair encloses no operator.

    The expression may hold ``(``, ``)``, ``+``, ``-``, ``*``, ``/`` and letters.
    """
    pending: list[str] = []
    for ch in expression:
        if ch == "(" or ch in _OPERATORS:
            pending.append(ch)
        elif ch == ")":
            redundant = True
            while pending and pending[-1] != "(":
                if pending.pop() in _OPERATORS:
                    redundant = False
            if not pending:
                raise ValueError(f"unbalanced brackets in {expression!r}")
            if redundant:
                return True
            pending.pop()
    return False


def reverse_with_stack(text: str) -> str:
    """Return ``text`` reversed by pushing its characters and popping them back."""
    pending = list(text)
    reversed_chars = []
    while pending:
        reversed_chars.append(pending.pop())
    return "".join(reversed_chars)


def is_valid_parentheses(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order.

    Any character that is not an opening bracket must close the latest open one.
    """
    open_brackets: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            open_brackets.append(ch)
        elif not open_brackets or _PAIRS.get(ch) != open_brackets[-1]:
            return False
        else:
            open_brackets.pop()
    return not open_brackets