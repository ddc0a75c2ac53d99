"""
Heuristics module.

Provides heuristic functions for guiding the pathfinder:
- DegreeHeuristic: Vertex degree (default, inadmissible)
- ZeroHeuristic: Constant zero (admissible, Dijkstra)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from netpath.heuristics.base import Heuristic
from netpath.heuristics.structural import DegreeHeuristic, ZeroHeuristic

if TYPE_CHECKING:
    from netpath.graph.store import Graph

__all__ = [
    "Heuristic",
    "DegreeHeuristic",
    "ZeroHeuristic",
    "HEURISTICS",
    "get_heuristic",
]

# Name -> factory taking the graph the heuristic will be evaluated on
HEURISTICS: dict[str, Callable[[Graph], Heuristic]] = {
    "degree": DegreeHeuristic,
    "zero": lambda graph: ZeroHeuristic(),
}


def get_heuristic(name: str, graph: Graph) -> Heuristic:
    """
    Get a heuristic by name.

    Args:
        name: Heuristic identifier (degree, zero)
        graph: Graph the heuristic will be evaluated on

    Returns:
        Instantiated heuristic

    Raises:
        ValueError: If heuristic name is unknown
    """
    if name not in HEURISTICS:
        available = ", ".join(HEURISTICS.keys())
        raise ValueError(f"Unknown heuristic '{name}'. Available: {available}")

    return HEURISTICS[name](graph)
