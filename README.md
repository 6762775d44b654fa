# dsakit

A small library of classic data structures and algorithms, written as plain
Python functions and classes. It is meant for study, for interview practice,
and as a compact reference. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `binary_search`, `linear_search`, `is_sorted`, `find_index` |
| `dsakit.text_puzzles` | `can_say_hello`, `gender_by_username`, `string_task`, `is_dangerous` |
| `dsakit.number_puzzles` | `beautiful_matrix_moves`, `is_product_of_binary_decimals` |
| `dsakit.trees` | `TreeNode`, `build_preorder`, `build_level_order`, `level_order`, `inorder`, `postorder`, `height`, `is_balanced`, `diameter`, `boundary_traversal`, `zigzag_traversal`, `build_from_inorder_preorder`, `lowest_common_ancestor`, `find_node`, `min_time_to_burn`, `count_k_sum_paths`, `longest_path_sum`, `count_nodes`, `is_complete`, `is_max_heap` |
| `dsakit.bst` | `insert`, `build_bst`, `search`, `minimum`, `maximum`, `delete`, `kth_smallest`, `lowest_common_ancestor`, `is_valid_bst` |
| `dsakit.heaps` | `MaxHeap`, `heapify`, `build_max_heap`, `heap_sort`, `kth_smallest` |
| `dsakit.backtracking` | `subsets`, `unique_subsets`, `subsequences`, `permutations`, `combination_sum`, `letter_combinations`, `rat_in_maze` |
| `dsakit.stacks` | `ArrayStack`, `TwoStacks`, `insert_at_bottom`, `reverse_stack`, `delete_middle`, `sort_stack`, `has_redundant_brackets`, `reverse_with_stack`, `is_valid_parentheses` |
| `dsakit.queues` | `CircularQueue`, `ArrayDeque`, `LinearQueue`, `first_negatives`, `first_non_repeating`, `reverse_queue` |
| `dsakit.linked_lists` | `ListNode`, `from_values`, `to_list`, `reverse`, `merge_sort`, `find_intersection`, `LinkedList`, `DoublyLinkedList` |
| `dsakit.shortest_paths` | `WeightedGraph` (`dijkstra`, `dag_shortest_paths`), `bellman_ford` |

## Examples

Searching:

```python
from dsakit.searching import binary_search, find_index

binary_search([2, 3, 5, 8, 10, 11], 10)  # True
find_index([1, 2, 3, 4, 5, 1], 1)        # 0
```

Binary trees are built from `TreeNode` objects. The builders read flat
listings in which `-1` marks a missing child:

```python
from dsakit.trees import build_from_inorder_preorder, postorder, height

root = build_from_inorder_preorder([3, 1, 4, 0, 5, 2], [0, 1, 3, 4, 2, 5])
postorder(root)  # [3, 4, 1, 5, 2, 0]
height(root)     # 3
```

Binary search trees use the same nodes:

```python
from dsakit.bst import build_bst, kth_smallest, is_valid_bst
from dsakit.trees import inorder

root = build_bst([8, 4, 16, 6, 10, 9])
inorder(root)          # [4, 6, 8, 9, 10, 16]
kth_smallest(root, 3)  # 8
is_valid_bst(root)     # True
```

Heaps:

```python
from dsakit.heaps import MaxHeap, heap_sort, kth_smallest

heap = MaxHeap()
for value in (10, 2, 66, 5, 11):
    heap.push(value)
heap.pop()                                # 66
heap_sort([54, 53, 55, 52, 50])           # [50, 52, 53, 54, 55]
kth_smallest([5, 10, 3, 1, 2, 7, 15], 4)  # 5
```

Backtracking:

```python
from dsakit.backtracking import combination_sum, rat_in_maze

combination_sum([2, 5, 6, 9], 9)  # [[2, 2, 5], [9]]
rat_in_maze([[1, 1], [1, 1]])     # ['DR', 'RD']
```

Stacks and queues:

```python
from dsakit.stacks import is_valid_parentheses, has_redundant_brackets
from dsakit.queues import first_negatives, first_non_repeating

is_valid_parentheses("{[()]}")      # True
has_redundant_brackets("((a+b))")   # True
first_negatives([12, -1, -7, 8, -15, 30, 16, 28], 3)  # [-1, -1, -7, -15, -15, 0]
first_non_repeating("aabc")         # 'a#bb'
```

Linked lists:

```python
from dsakit.linked_lists import LinkedList

items = LinkedList([1, 2, 2, 2, 3, 3, 4])
items.remove_duplicates()
list(items)  # [1, 2, 3, 4]
```

Shortest paths:

```python
from dsakit.shortest_paths import WeightedGraph, bellman_ford

g = WeightedGraph()
g.add_edge(0, 1, 4)
g.add_edge(0, 2, 1)
g.add_edge(2, 1, 2)
g.dijkstra(0)  # {0: 0, 1: 3, 2: 1}

bellman_ford(3, [(0, 1, 5), (1, 2, -2)])  # [0, 5, 3]
```

`WeightedGraph.dijkstra` gives `-1` for nodes it cannot reach;
`WeightedGraph.dag_shortest_paths` and `bellman_ford` give `math.inf`.

## Errors

Operations that cannot be carried out raise an exception rather than printing
a message: popping from or peeking at an empty container raises `IndexError`,
pushing onto a full fixed-capacity container raises `OverflowError`, and
invalid arguments (an empty tree for `minimum`, a `k` out of range, a negative
weight passed to `dijkstra`, a cycle in `dag_shortest_paths`) raise
`ValueError`.

## What it does not do

- There are no general-purpose sorting functions beyond `heaps.heap_sort` and
  the linked-list `merge_sort`.
- There is no unweighted graph type with breadth-first or depth-first
  traversal, cycle detection or topological ordering; graph support is limited
  to the weighted shortest-path tools in `dsakit.shortest_paths`.
- There is no command-line program: the package is a library to import.