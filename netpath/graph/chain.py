"""
Longest score-increasing chain over graph edges.

Vertices are processed in ascending score order, so by the time a vertex
is visited every chain that can end in it is already known. Each vertex
then tries to extend its chain to every strictly higher-scored neighbor.
Extension edges always increase the score, so they form a DAG and one
pass suffices: O(V log V + E).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import numpy as np

from netpath.config import CHAIN_STRICT_SCORES
from netpath.graph.errors import MissingScoreError
from netpath.graph.path import Chain
from netpath.graph.store import Graph

logger = logging.getLogger(__name__)

# Predecessor marker for vertices that start their own chain
NO_PREDECESSOR = -1


class ChainBuilder:
    """
    Finds the longest chain of adjacent vertices with strictly increasing score.

    Ties on the sort are broken by vertex id; ties on chain length pick the
    lowest-id endpoint. Vertices without a score never join a chain unless
    strict mode is on, in which case they are an error.
    """

    def __init__(
        self,
        graph: Graph,
        scores: Mapping[int, int],
        strict: bool = CHAIN_STRICT_SCORES,
    ) -> None:
        """
        Initialize the chain builder.

        Args:
            graph: Graph whose edges constrain the chain
            scores: Mapping of vertex id to integer score, may be partial
            strict: Raise MissingScoreError for unscored vertices instead of
                excluding them
        """
        self._graph = graph
        self._scores = dict(scores)
        self._strict = strict

        stray = [v for v in self._scores if not graph.has_vertex(v)]
        if stray:
            logger.warning(
                f"Ignoring {len(stray)} score(s) for vertices outside "
                f"[0, {graph.vertex_count}): {sorted(stray)[:10]}"
            )

    def score(self, vertex: int) -> int | None:
        """Score of a vertex, or None if it has none."""
        return self._scores.get(vertex)

    def build(self) -> Chain:
        """
        Compute the longest chain.

        Returns:
            The chain, empty if the graph has no scored vertices

        Raises:
            MissingScoreError: In strict mode, if any vertex has no score
        """
        n = self._graph.vertex_count
        scored = np.array([v in self._scores for v in range(n)], dtype=bool)
        excluded = tuple(int(v) for v in np.flatnonzero(~scored))

        if excluded:
            if self._strict:
                raise MissingScoreError(excluded[0])
            logger.warning(f"Excluding {len(excluded)} unscored vertices from chains")

        candidates = np.flatnonzero(scored)
        if candidates.size == 0:
            logger.info("No scored vertices; chain is empty")
            return Chain(excluded=excluded)

        # Scores are arbitrary-size ints, so sort in Python; ties keep id order
        order = sorted(candidates.tolist(), key=self._scores.__getitem__)

        length = np.zeros(n, dtype=np.int64)
        length[candidates] = 1
        predecessor = np.full(n, NO_PREDECESSOR, dtype=np.int64)

        for u in order:
            score_u = self._scores[u]
            for v, _ in self._graph.neighbors(u):
                score_v = self._scores.get(v)
                if score_v is None or score_v <= score_u:
                    continue
                if length[u] + 1 > length[v]:
                    length[v] = length[u] + 1
                    predecessor[v] = u

        # argmax returns the first maximum, i.e. the lowest vertex id
        end = int(np.argmax(length))

        nodes = []
        node = end
        while node != NO_PREDECESSOR:
            nodes.append(node)
            node = int(predecessor[node])
        nodes.reverse()

        logger.debug(f"Longest chain has {len(nodes)} vertices, ending at {end}")
        return Chain(
            nodes=tuple(nodes),
            scores=tuple(self._scores[v] for v in nodes),
            excluded=excluded,
        )
