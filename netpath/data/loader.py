"""
Loading of edge lists, influence scores and cached graphs.

Usage:
    from netpath.data import NetworkData

    data = NetworkData(edges_path, scores_path)
    data.graph.degree(0)    # first access parses the files
    data.scores.get(0)
"""

from __future__ import annotations

import logging
from pathlib import Path

import msgpack

from netpath.graph.errors import MalformedEdgeError, MalformedScoreError
from netpath.graph.store import Edge, Graph

logger = logging.getLogger(__name__)

# Bump when the cache layout changes
GRAPH_CACHE_VERSION = 1


def _data_lines(path: Path) -> list[tuple[int, list[str]]]:
    """Collect (line number, fields) for non-blank, non-comment lines."""
    lines = []
    with open(path, encoding="utf-8") as f:
        for line_no, raw in enumerate(f, start=1):
            fields = raw.split("#", 1)[0].split()
            if fields:
                lines.append((line_no, fields))
    return lines


def load_edge_list(path: str | Path) -> list[Edge]:
    """
    Parse a whitespace-separated `u v weight` edge list.

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedEdgeError: If a line does not hold exactly three integers
    """
    path = Path(path)
    logger.info(f"Loading edge list from {path}...")

    edges = []
    for line_no, fields in _data_lines(path):
        if len(fields) != 3:
            raise MalformedEdgeError(
                f"{path}:{line_no}: expected 'u v weight', got {len(fields)} field(s)",
                line_no,
            )
        try:
            u, v, w = (int(x) for x in fields)
        except ValueError:
            raise MalformedEdgeError(
                f"{path}:{line_no}: non-integer field in {' '.join(fields)!r}",
                line_no,
            ) from None
        edges.append((u, v, w))

    logger.info(f"Loaded {len(edges):,} edges")
    return edges


def load_scores(path: str | Path) -> dict[int, int]:
    """
    Parse a whitespace-separated `vertex score` file.

    A vertex listed twice keeps its last score.

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedScoreError: If a line does not hold exactly two integers
    """
    path = Path(path)
    logger.info(f"Loading scores from {path}...")

    scores: dict[int, int] = {}
    for line_no, fields in _data_lines(path):
        if len(fields) != 2:
            raise MalformedScoreError(
                f"{path}:{line_no}: expected 'vertex score', got {len(fields)} field(s)",
                line_no,
            )
        try:
            vertex, score = int(fields[0]), int(fields[1])
        except ValueError:
            raise MalformedScoreError(
                f"{path}:{line_no}: non-integer field in {' '.join(fields)!r}",
                line_no,
            ) from None
        scores[vertex] = score

    logger.info(f"Loaded {len(scores):,} scores")
    return scores


def save_graph_cache(graph: Graph, path: str | Path) -> None:
    """Write the graph to a msgpack cache, preserving edge insertion order."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "version": GRAPH_CACHE_VERSION,
        "vertex_count": graph.vertex_count,
        "edges": [list(edge) for edge in graph.edges()],
    }
    with open(path, "wb") as f:
        msgpack.pack(payload, f)
    logger.info(f"Saved graph cache ({graph.edge_count:,} edges) to {path}")


def load_graph_cache(path: str | Path) -> Graph:
    """
    Read a graph written by save_graph_cache.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the cache version is unknown
        MalformedEdgeError: If a cached edge is invalid
    """
    path = Path(path)
    logger.info(f"Loading graph cache from {path}...")
    with open(path, "rb") as f:
        payload = msgpack.unpack(f)

    version = payload.get("version")
    if version != GRAPH_CACHE_VERSION:
        raise ValueError(f"Unsupported graph cache version {version!r} in {path}")

    graph = Graph.build(payload["edges"])
    vertex_count = payload["vertex_count"]
    if vertex_count != graph.vertex_count:
        # Trailing isolated vertices are not implied by the edges
        padded = Graph(vertex_count)
        for u, v, w in graph.edges():
            padded.add_edge(u, v, w)
        graph = padded

    logger.info(f"Loaded graph with {graph.vertex_count:,} vertices")
    return graph


class NetworkData:
    """
    Lazy-loading container for one run's graph and scores.

    Files are parsed on first access to any accessor. Edge lists ending in
    `.msgpack` are read as graph caches. With a cache_path, an existing cache
    is read instead of the edge list; otherwise the parsed graph is saved there.

    Attributes:
        edges_path: Edge list (or msgpack cache) path
        scores_path: Optional influence score file path
        cache_path: Optional msgpack cache to read or populate
    """

    def __init__(
        self,
        edges_path: str | Path,
        scores_path: str | Path | None = None,
        cache_path: str | Path | None = None,
    ) -> None:
        self.edges_path = Path(edges_path)
        self.scores_path = Path(scores_path) if scores_path is not None else None
        self.cache_path = Path(cache_path) if cache_path is not None else None
        self._graph: Graph | None = None
        self._scores: dict[int, int] = {}
        self._initialized = False

    def _ensure_loaded(self) -> None:
        """Load all data on first access."""
        if self._initialized:
            return

        self._graph = self._load_graph()

        if self.scores_path is not None:
            self._scores = load_scores(self.scores_path)

        self._initialized = True

    def _load_graph(self) -> Graph:
        """Load the graph from the cache if present, else parse (and cache) the edge list."""
        if self.edges_path.suffix == ".msgpack":
            return load_graph_cache(self.edges_path)

        if self.cache_path is not None and self.cache_path.exists():
            return load_graph_cache(self.cache_path)

        graph = Graph.build(load_edge_list(self.edges_path))
        if self.cache_path is not None:
            save_graph_cache(graph, self.cache_path)
        return graph

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def graph(self) -> Graph:
        self._ensure_loaded()
        return self._graph

    @property
    def scores(self) -> dict[int, int]:
        self._ensure_loaded()
        return self._scores

    def unscored_vertices(self) -> list[int]:
        """Vertices of the graph that have no score."""
        self._ensure_loaded()
        return [v for v in range(self._graph.vertex_count) if v not in self._scores]

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run validation checks on loaded data."""
        self._ensure_loaded()
        graph = self._graph
        return {
            "graph_loaded": graph.vertex_count > 0,
            "has_edges": graph.edge_count > 0,
            "scores_loaded": self.scores_path is None or len(self._scores) > 0,
            "scores_in_range": all(graph.has_vertex(v) for v in self._scores),
            "all_vertices_scored": self.scores_path is None or not self.unscored_vertices(),
        }

    def stats(self) -> dict:
        """Get statistics about the loaded data."""
        self._ensure_loaded()
        graph = self._graph
        degrees = [graph.degree(v) for v in range(graph.vertex_count)]
        return {
            "vertices": graph.vertex_count,
            "edges": graph.edge_count,
            "isolated_vertices": sum(1 for d in degrees if d == 0),
            "max_degree": max(degrees, default=0),
            "scored_vertices": len(self._scores),
        }
