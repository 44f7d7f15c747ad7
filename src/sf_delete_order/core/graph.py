"""Directed graph over dense integer vertices with Kahn topological sort.

Vertices are the indices ``0..vertex_count - 1``. Callers that work with
named objects keep their own name -> index map and translate the sorted
indices back (see :mod:`sf_delete_order.salesforce.ordering`).
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from sf_delete_order.exceptions import InvalidGraphSize, VertexIndexError


class DirectedGraph:
    """Adjacency-list digraph.

    Duplicate edges are stored as given. They raise the in-degree of the
    target and are released by the same number of decrements, so they never
    change the result of :meth:`topological_sort`.
    """

    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise InvalidGraphSize(vertex_count)
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise VertexIndexError(vertex, len(self._adjacency))

    def add_edges(self, source: int, targets: Iterable[int]) -> None:
        """Append every vertex in ``targets`` as an outgoing edge of ``source``.

        All endpoints are checked before anything is appended.

        Raises:
            VertexIndexError: If ``source`` or any target is out of range.
        """
        self._check_vertex(source)
        targets = list(targets)
        for target in targets:
            self._check_vertex(target)
        self._adjacency[source].extend(targets)

    def successors(self, vertex: int) -> tuple[int, ...]:
        self._check_vertex(vertex)
        return tuple(self._adjacency[vertex])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield ``(source, target)`` pairs in insertion order."""
        for source, targets in enumerate(self._adjacency):
            for target in targets:
                yield source, target

    def topological_sort(self) -> list[int] | None:
        """Order vertices so every edge ``u -> v`` has ``u`` before ``v``.

        Vertices that become free at the same time are emitted in FIFO order:
        ascending index for the initial seed, then edge scan order.

        Returns:
            The vertex order, or ``None`` when the graph contains a cycle.
        """
        in_degrees = [0] * len(self._adjacency)
        for targets in self._adjacency:
            for target in targets:
                in_degrees[target] += 1

        ready = deque(vertex for vertex, degree in enumerate(in_degrees) if degree == 0)

        result: list[int] = []
        while ready:
            vertex = ready.popleft()
            result.append(vertex)
            for neighbor in self._adjacency[vertex]:
                in_degrees[neighbor] -= 1
                if in_degrees[neighbor] == 0:
                    ready.append(neighbor)

        # Vertices on or behind a cycle never reach in-degree zero
        if len(result) != len(in_degrees):
            return None
        return result

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.vertex_count}, edges={self.edge_count})"


__all__ = ["DirectedGraph"]
