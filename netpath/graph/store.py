"""
Weighted undirected graph backed by insertion-ordered adjacency lists.

Usage:
    from netpath.graph import Graph

    graph = Graph.build([(0, 1, 4), (1, 2, 3)])
    graph.neighbors(1)      # ((0, 4), (2, 3))
    graph.edge_weight(2, 1) # 3
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable, Sequence

from netpath.graph.errors import InvalidVertexError, MalformedEdgeError

logger = logging.getLogger(__name__)

Edge = tuple[int, int, int]


class Graph:
    """
    Undirected multigraph over dense integer vertex ids.

    Every edge (u, v, w) is recorded in both u's and v's adjacency list
    with the same weight. Parallel edges and self-loops are kept as given;
    adjacency order follows insertion order.

    Attributes:
        vertex_count: Number of vertices; ids are in [0, vertex_count)
        edge_count: Number of edges added (each undirected edge counts once)
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self._vertex_count = vertex_count
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
        self._edges: list[Edge] = []

    @classmethod
    def build(cls, edges: Iterable[Sequence[int]]) -> Graph:
        """
        Build a graph from a sequence of (u, v, weight) records.

        The vertex count is max(u, v) + 1 over all records, or 0 when
        there are none.

        Raises:
            MalformedEdgeError: If a record is not three non-negative integers
        """
        records = [_validate_edge(i, record) for i, record in enumerate(edges)]

        vertex_count = 0
        for u, v, _ in records:
            vertex_count = max(vertex_count, u + 1, v + 1)

        graph = cls(vertex_count)
        for u, v, w in records:
            graph.add_edge(u, v, w)

        logger.debug(f"Built graph with {vertex_count:,} vertices and {len(records):,} edges")
        return graph

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an undirected edge; no de-duplication is performed."""
        self._check_vertex(u)
        self._check_vertex(v)
        if weight < 0:
            raise MalformedEdgeError(f"Negative weight {weight} on edge ({u}, {v})")

        self._adj[u].append((v, weight))
        self._adj[v].append((u, weight))
        self._edges.append((u, v, weight))

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return self._vertex_count

    def has_vertex(self, vertex: int) -> bool:
        """Check if vertex id is in [0, vertex_count)."""
        return 0 <= vertex < self._vertex_count

    def neighbors(self, vertex: int) -> tuple[tuple[int, int], ...]:
        """Get (neighbor, weight) pairs for a vertex in insertion order."""
        self._check_vertex(vertex)
        return tuple(self._adj[vertex])

    def degree(self, vertex: int) -> int:
        """Number of adjacency entries (parallel edges count separately)."""
        self._check_vertex(vertex)
        return len(self._adj[vertex])

    def edge_weight(self, u: int, v: int) -> int | None:
        """
        Weight of the first-inserted edge from u to v, or None if not adjacent.

        With parallel edges only the earliest weight is reported.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        for neighbor, weight in self._adj[u]:
            if neighbor == v:
                return weight
        return None

    def edges(self) -> list[Edge]:
        """All edges as (u, v, weight) in insertion order."""
        return list(self._edges)

    def _check_vertex(self, vertex: int) -> None:
        if not self.has_vertex(vertex):
            raise InvalidVertexError(vertex, self._vertex_count)

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edge_count={self.edge_count})"


def _validate_edge(index: int, record: Sequence[int]) -> Edge:
    """Check a raw edge record and return it as an (int, int, int) tuple."""
    try:
        fields = tuple(record)
    except TypeError:
        raise MalformedEdgeError(f"Edge record {index} is not a sequence: {record!r}", index) from None

    if len(fields) != 3:
        raise MalformedEdgeError(
            f"Edge record {index} needs 3 fields (u, v, weight), got {len(fields)}: {record!r}",
            index,
        )

    for value in fields:
        # bool is an int subclass but never a valid id or weight
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise MalformedEdgeError(f"Edge record {index} has non-integer field {value!r}", index)

    u, v, w = (int(x) for x in fields)
    if u < 0 or v < 0:
        raise MalformedEdgeError(f"Edge record {index} has negative vertex id: {record!r}", index)
    if w < 0:
        raise MalformedEdgeError(f"Edge record {index} has negative weight: {record!r}", index)
    return u, v, w
