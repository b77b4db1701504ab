"""Adjacency-list graphs with traversal and unweighted shortest paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

__all__ = ["Graph"]


class Graph:
    """A graph of integer nodes stored as adjacency lists in insertion order."""

    def __init__(self) -> None:
        self._adjacency: dict[int, list[int]] = {}

    def add_edge(self, u: int, v: int, directed: bool) -> None:
        """Add an edge from ``u`` to ``v``, and back again unless ``directed``."""
        self._adjacency.setdefault(u, []).append(v)
        if not directed:
            self._adjacency.setdefault(v, []).append(u)

    def _neighbours(self, node: int) -> list[int]:
        return self._adjacency.get(node, [])

    def format(self) -> str:
        """Return one ``node -> neighbours`` line per node that has edges listed."""
        return "\n".join(
            f"{node} -> {' '.join(str(n) for n in neighbours)}"
            for node, neighbours in self._adjacency.items()
        )

    def __str__(self) -> str:
        return self.format()

    def bfs(self, start: int) -> list[int]:
        """Return the nodes reachable from ``start`` in breadth-first order."""
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._neighbours(node):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the nodes reachable from ``start`` in depth-first order."""
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [iter(self._neighbours(start))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._neighbours(neighbour)))
                    break
            else:
                stack.pop()
        return order

    def shortest_path(self, source: int, target: int) -> list[int]:
        """Return a path with the fewest edges from ``source`` to ``target``.

        Raises ValueError if ``target`` cannot be reached.
        """
        parents: dict[int, int | None] = {source: None}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for neighbour in self._neighbours(node):
                if neighbour not in parents:
                    parents[neighbour] = node
                    queue.append(neighbour)
        if target not in parents:
            raise ValueError(f"node {target} is not reachable from {source}")
        path: list[int] = []
        current: int | None = target
        while current is not None:
            path.append(current)
            current = parents[current]
        path.reverse()
        return path