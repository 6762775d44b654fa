"""Binary search tree operations on :class:`~dsakit.trees.TreeNode` nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any, Optional

from dsakit.trees import TreeNode


def insert(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Insert ``value`` and return the root; equal values go to the right."""
    if root is None:
        return TreeNode(value)
    if value < root.value:
        root.left = insert(root.left, value)
    else:
        root.right = insert(root.right, value)
    return root


def build_bst(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a search tree by inserting ``values`` in order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = insert(root, value)
    return root


def search(root: Optional[TreeNode], value: Any) -> bool:
    """Return True if ``value`` is stored in the tree."""
    node = root
    while node is not None:
        if node.value == value:
            return True
        node = node.right if value > node.value else node.left
    return False


def _require_tree(root: Optional[TreeNode]) -> TreeNode:
    if root is None:
        raise ValueError("the tree is empty")
    return root


def minimum(root: Optional[TreeNode]) -> Any:
    """Return the smallest value in a non-empty tree."""
    node = _require_tree(root)
    while node.left is not None:
        node = node.left
    return node.value


def maximum(root: Optional[TreeNode]) -> Any:
    """Return the largest value in a non-empty tree."""
    node = _require_tree(root)
    while node.right is not None:
        node = node.right
    return node.value


def delete(root: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    """Remove one node holding ``value`` and return the new root."""
    if root is None:
        return None
    if root.value == value:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = minimum(root.right)
        root.value = successor
        root.right = delete(root.right, successor)
        return root
    if value < root.value:
        root.left = delete(root.left, value)
    else:
        root.right = delete(root.right, value)
    return root


def _ascending(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _ascending(node.left)
    yield node.value
    yield from _ascending(node.right)


def kth_smallest(root: Optional[TreeNode], k: int) -> Any:
    """Return the ``k``-th smallest value, counting from 1."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    for value in islice(_ascending(root), k - 1, None):
        return value
    raise ValueError(f"the tree holds fewer than {k} values")


def lowest_common_ancestor(
    root: Optional[TreeNode], a: Any, b: Any
) -> Optional[TreeNode]:
    """Return the node where the search paths to ``a`` and ``b`` split."""
    node = root
    while node is not None:
        if a > node.value and b > node.value:
            node = node.right
        elif a < node.value and b < node.value:
            node = node.left
        else:
            return node
    return None


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if every value lies strictly between its ancestors' bounds."""

    def within(node: Optional[TreeNode], low: Any, high: Any) -> bool:
        if node is None:
            return True
        if low is not None and not node.value > low:
            return False
        if high is not None and not node.value < high:
            return False
        return within(node.left, low, node.value) and within(
            node.right, node.value, high
        )

    return within(root, None, None)