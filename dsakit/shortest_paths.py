"""Shortest paths on weighted graphs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable
from itertools import count


class WeightedGraph:
    """A weighted adjacency-list graph; undirected unless ``directed`` is true."""

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self._adjacency: dict[Hashable, list[tuple[Hashable, float]]] = {}

    def add_edge(self, u: Hashable, v: Hashable, weight: float) -> None:
        """Add an edge from ``u`` to ``v`` of ``weight`` (and back, when undirected)."""
        self._adjacency.setdefault(u, []).append((v, weight))
        targets = self._adjacency.setdefault(v, [])
        if not self.directed:
            targets.append((u, weight))

    def neighbours(self, node: Hashable) -> list[tuple[Hashable, float]]:
        """Return ``(neighbour, weight)`` pairs for the edges leaving ``node``."""
        return list(self._adjacency.get(node, ()))

    def _require_node(self, node: Hashable) -> None:
        if node not in self._adjacency:
            raise ValueError(f"{node!r} is not a node of the graph")

    def dijkstra(self, source: Hashable) -> dict[Hashable, float]:
        """Return the least total weight from ``source`` to each node; -1 if unreachable.

        Weights must be non-negative.
        """
        self._require_node(source)
        if any(w < 0 for edges in self._adjacency.values() for _, w in edges):
            raise ValueError("Dijkstra's algorithm needs non-negative weights")
        best: dict[Hashable, float] = {source: 0}
        tie = count()
        pending = [(0, next(tie), source)]
        while pending:
            distance, _, node = heapq.heappop(pending)
            if distance > best[node]:
                continue
            for neighbour, weight in self._adjacency[node]:
                candidate = distance + weight
                if candidate < best.get(neighbour, math.inf):
                    best[neighbour] = candidate
                    heapq.heappush(pending, (candidate, next(tie), neighbour))
        return {node: best.get(node, -1) for node in self._adjacency}

    def _topological_order(self) -> list[Hashable]:
        visited: set[Hashable] = set()
        on_path: set[Hashable] = set()
        finished: list[Hashable] = []

        def visit(node: Hashable) -> None:
            visited.add(node)
            on_path.add(node)
            for neighbour, _ in self._adjacency[node]:
                if neighbour in on_path:
                    raise ValueError("the graph has a cycle")
                if neighbour not in visited:
                    visit(neighbour)
            on_path.discard(node)
            finished.append(node)

        for node in self._adjacency:
            if node not in visited:
                visit(node)
        return finished[::-1]

    def dag_shortest_paths(self, source: Hashable) -> dict[Hashable, float]:
        """Return least total weights from ``source`` in a directed acyclic graph.

        Unreachable nodes get ``math.inf``; negative weights are allowed.
        """
        if not self.directed:
            raise ValueError("this method needs a directed graph")
        self._require_node(source)
        distances = dict.fromkeys(self._adjacency, math.inf)
        distances[source] = 0
        for node in self._topological_order():
            if distances[node] == math.inf:
                continue
            for neighbour, weight in self._adjacency[node]:
                candidate = distances[node] + weight
                if candidate < distances[neighbour]:
                    distances[neighbour] = candidate
        return distances


def bellman_ford(
    node_count: int,
    edges: Iterable[tuple[int, int, float]],
    source: int = 0,
) -> list[float]:
    """Relax directed ``(u, v, weight)`` edges over nodes ``0..node_count-1``.

    Returns the distance from ``source`` to each node, ``math.inf`` where
    unreachable. Negative weights are allowed.
    """
    edge_list = list(edges)
    nodes = range(node_count)
    if source not in nodes:
        raise ValueError(f"source {source} is outside 0..{node_count - 1}")
    for u, v, _ in edge_list:
        if u not in nodes or v not in nodes:
            raise ValueError(f"edge ({u}, {v}) names a node outside 0..{node_count - 1}")
    distances = [math.inf] * node_count
    distances[source] = 0
    for _ in range(node_count - 1):
        for u, v, weight in edge_list:
            if distances[u] != math.inf and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
    return distances