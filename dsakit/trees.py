"""Binary tree construction, traversals and structural queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional

#: Value that marks a missing child when a tree is read from a flat sequence.
NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _next_value(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None


def build_preorder(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from a pre-order listing where ``NULL_MARKER`` means no node."""
    stream = iter(values)

    def build() -> Optional[TreeNode]:
        value = _next_value(stream)
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing; each node lists both children."""
    stream = iter(values)
    first = _next_value(stream)
    if first == NULL_MARKER:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _next_value(stream)
        if left != NULL_MARKER:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = _next_value(stream)
        if right != NULL_MARKER:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def _children(node: TreeNode) -> Iterator[TreeNode]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def level_order(root: Optional[TreeNode]) -> list[list[Any]]:
    """Return node values grouped level by level, top to bottom."""
    levels: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.value for node in current])
        current = [child for node in current for child in _children(node)]
    return levels


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the in-order sequence of values."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the post-order sequence of values."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if every node's subtree heights differ by at most one."""

    def check(node: Optional[TreeNode]) -> tuple[bool, int]:
        if node is None:
            return True, 0
        left_ok, left_height = check(node.left)
        right_ok, right_height = check(node.right)
        balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
        return balanced, max(left_height, right_height) + 1

    return check(root)[0]


def diameter(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path between any two nodes."""

    def measure(node: Optional[TreeNode]) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_diameter, left_height = measure(node.left)
        right_diameter, right_height = measure(node.right)
        through = left_height + right_height + 1
        return (
            max(left_diameter, right_diameter, through),
            max(left_height, right_height) + 1,
        )

    return measure(root)[0]


def boundary_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Return the anticlockwise boundary: root, left edge, leaves, right edge."""
    if root is None:
        return []

    def left_edge(node: Optional[TreeNode]) -> list[Any]:
        edge: list[Any] = []
        while node is not None and not node.is_leaf:
            edge.append(node.value)
            node = node.left if node.left is not None else node.right
        return edge

    def right_edge(node: Optional[TreeNode]) -> list[Any]:
        edge: list[Any] = []
        while node is not None and not node.is_leaf:
            edge.append(node.value)
            node = node.right if node.right is not None else node.left
        return edge[::-1]

    def leaves(node: Optional[TreeNode]) -> list[Any]:
        if node is None:
            return []
        if node.is_leaf:
            return [node.value]
        return [*leaves(node.left), *leaves(node.right)]

    return [
        root.value,
        *left_edge(root.left),
        *leaves(root.left),
        *leaves(root.right),
        *right_edge(root.right),
    ]


def zigzag_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Return level-order values, alternating direction on each level."""
    result: list[Any] = []
    for depth, level in enumerate(level_order(root)):
        result.extend(level if depth % 2 == 0 else reversed(level))
    return result


def build_from_inorder_preorder(
    inorder_values: Sequence[Any], preorder_values: Sequence[Any]
) -> Optional[TreeNode]:
    """Rebuild a tree with distinct values from its in-order and pre-order listings."""
    if len(inorder_values) != len(preorder_values):
        raise ValueError("in-order and pre-order listings differ in length")
    positions = {value: index for index, value in enumerate(inorder_values)}
    if len(positions) != len(inorder_values):
        raise ValueError("values must be distinct")
    preorder_iter = iter(preorder_values)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        value = next(preorder_iter)
        position = positions.get(value)
        if position is None or not start <= position <= end:
            raise ValueError(f"listings are inconsistent at value {value!r}")
        node = TreeNode(value)
        node.left = build(start, position - 1)
        node.right = build(position + 1, end)
        return node

    return build(0, len(inorder_values) - 1)


def lowest_common_ancestor(
    root: Optional[TreeNode], p: Any, q: Any
) -> Optional[TreeNode]:
    """Return the deepest node having nodes valued ``p`` and ``q`` below or at it."""
    if root is None:
        return None
    if root.value == p or root.value == q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def find_node(root: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    """Return the first node in pre-order holding ``value``, or None."""
    if root is None:
        return None
    if root.value == value:
        return root
    return find_node(root.left, value) or find_node(root.right, value)


def min_time_to_burn(root: Optional[TreeNode], target: Any) -> int:
    """Return the steps a fire starting at the node valued ``target`` needs to spread."""
    start = find_node(root, target)
    if start is None:
        raise ValueError(f"no node with value {target!r}")

    parents: dict[TreeNode, Optional[TreeNode]] = {root: None}
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for child in _children(node):
            parents[child] = node
            pending.append(child)

    burnt = {start}
    frontier = [start]
    time = 0
    while True:
        spread = []
        for node in frontier:
            for neighbour in (node.left, node.right, parents[node]):
                if neighbour is not None and neighbour not in burnt:
                    burnt.add(neighbour)
                    spread.append(neighbour)
        if not spread:
            return time
        time += 1
        frontier = spread


def count_k_sum_paths(root: Optional[TreeNode], k: Any) -> int:
    """Count downward paths whose values sum to ``k``."""
    path: list[Any] = []

    def walk(node: Optional[TreeNode]) -> int:
        if node is None:
            return 0
        path.append(node.value)
        found = walk(node.left) + walk(node.right)
        total = 0
        for value in reversed(path):
            total += value
            if total == k:
                found += 1
        path.pop()
        return found

    return walk(root)


def longest_path_sum(root: Optional[TreeNode]) -> int:
    """Sum the longest root-to-leaf path, taking the largest sum among ties."""

    def best(node: Optional[TreeNode]) -> tuple[int, int]:
        if node is None:
            return 0, 0
        length, total = max(best(node.left), best(node.right))
        return length + 1, total + node.value

    return best(root)[1]


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def is_complete(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a complete binary tree."""
    total = count_nodes(root)

    def check(node: Optional[TreeNode], index: int) -> bool:
        if node is None:
            return True
        if index >= total:
            return False
        return check(node.left, 2 * index + 1) and check(node.right, 2 * index + 2)

    return check(root, 0)


def is_max_heap(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is complete and no child exceeds its parent."""

    def ordered(node: Optional[TreeNode]) -> bool:
        if node is None:
            return True
        if any(child.value > node.value for child in _children(node)):
            return False
        return ordered(node.left) and ordered(node.right)

    return is_complete(root) and ordered(root)