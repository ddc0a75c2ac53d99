"""
Graph module.

Provides the graph store and the two search engines built on it:
- Graph: Weighted undirected adjacency-list graph
- Pathfinder: A*-style shortest path search
- ChainBuilder: Longest score-increasing chain (DP)
"""

from netpath.graph.astar import Pathfinder
from netpath.graph.chain import ChainBuilder
from netpath.graph.errors import (
    InvalidVertexError,
    MalformedEdgeError,
    MalformedScoreError,
    MissingScoreError,
)
from netpath.graph.path import Chain, PathStep, WeightedPath
from netpath.graph.store import Graph

__all__ = [
    "Graph",
    "Pathfinder",
    "ChainBuilder",
    "WeightedPath",
    "PathStep",
    "Chain",
    "InvalidVertexError",
    "MalformedEdgeError",
    "MalformedScoreError",
    "MissingScoreError",
]
