"""
Data loading module.

Provides parsers for edge lists and influence scores, a msgpack graph
cache, and the lazy NetworkData container.

Usage:
    from netpath.data import NetworkData

    data = NetworkData("data/edges.txt", "data/influences.txt")
    data.graph.vertex_count
    data.scores[0]
"""

from netpath.data.loader import (
    NetworkData,
    load_edge_list,
    load_graph_cache,
    load_scores,
    save_graph_cache,
)

__all__ = [
    "NetworkData",
    "load_edge_list",
    "load_scores",
    "load_graph_cache",
    "save_graph_cache",
]
