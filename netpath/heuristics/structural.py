"""
Heuristics derived from graph structure alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from netpath.heuristics.base import Heuristic

if TYPE_CHECKING:
    from netpath.graph.store import Graph


class DegreeHeuristic(Heuristic):
    """
    h(v) = degree(v), the number of adjacency entries of v.

    Not a lower bound on the remaining distance, so paths found with it
    are not guaranteed shortest. Kept as the default to reproduce the
    reference outputs.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @property
    def name(self) -> str:
        return "degree"

    def __call__(self, vertex: int) -> float:
        return self._graph.degree(vertex)


class ZeroHeuristic(Heuristic):
    """h(v) = 0. Admissible; the search degrades to Dijkstra."""

    @property
    def name(self) -> str:
        return "zero"

    @property
    def admissible(self) -> bool:
        return True

    def __call__(self, vertex: int) -> float:
        return 0
