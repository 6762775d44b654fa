"""Classic data structures and algorithms: searching, trees, heaps, backtracking,
stacks, queues, linked lists, shortest paths and short puzzles."""

__version__ = "0.1.0"