"""
A*-style best-first search between two vertices.

With the default degree heuristic the estimate is not a lower bound on
the remaining distance, so the search stops at the first time the goal
leaves the frontier and the result may be longer than the true shortest
path. Pass an admissible heuristic (e.g. ZeroHeuristic) for guaranteed
shortest paths.

Frontier ties are broken by ascending (f, vertex id).
"""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Callable

from netpath.config import ASTAR_HEURISTIC_WEIGHT
from netpath.graph.errors import InvalidVertexError
from netpath.graph.path import PathStep, WeightedPath
from netpath.graph.store import Graph
from netpath.heuristics import DegreeHeuristic

logger = logging.getLogger(__name__)

HeuristicFn = Callable[[int], float]


class Pathfinder:
    """
    Finds a low-cost walk from a start vertex to a goal vertex.

    The graph is only read; one pathfinder can serve many queries.
    """

    def __init__(
        self,
        graph: Graph,
        heuristic: HeuristicFn | None = None,
        heuristic_weight: float = ASTAR_HEURISTIC_WEIGHT,
    ) -> None:
        """
        Initialize the pathfinder.

        Args:
            graph: Graph to search
            heuristic: Estimate of remaining cost per vertex (default: vertex degree)
            heuristic_weight: Multiplier on the heuristic, f = g + weight * h
        """
        if heuristic_weight < 0:
            raise ValueError(f"heuristic_weight must be non-negative, got {heuristic_weight}")
        self._graph = graph
        self._heuristic = heuristic if heuristic is not None else DegreeHeuristic(graph)
        self._heuristic_weight = heuristic_weight

    @property
    def heuristic(self) -> HeuristicFn:
        return self._heuristic

    def find_path(self, start: int, goal: int) -> WeightedPath:
        """
        Search from start to goal.

        Returns:
            The weighted path, or an empty path if goal is unreachable

        Raises:
            InvalidVertexError: If start or goal is outside [0, vertex_count)
        """
        graph = self._graph
        for vertex in (start, goal):
            if not graph.has_vertex(vertex):
                raise InvalidVertexError(vertex, graph.vertex_count)

        g_score = [math.inf] * graph.vertex_count
        f_score = [math.inf] * graph.vertex_count
        came_from: list[int | None] = [None] * graph.vertex_count

        g_score[start] = 0
        f_score[start] = self._estimate(start)

        frontier = [(f_score[start], start)]
        expanded = 0

        while frontier:
            f, current = heapq.heappop(frontier)
            if f > f_score[current]:
                # Superseded by a cheaper entry pushed later
                continue
            expanded += 1

            if current == goal:
                path = self._reconstruct(came_from, goal, expanded)
                logger.debug(
                    f"Path {start} -> {goal} found: {path.hops} hops, "
                    f"cost {path.total_cost}, {expanded} expanded"
                )
                return path

            for neighbor, weight in graph.neighbors(current):
                tentative = g_score[current] + weight
                if tentative < g_score[neighbor]:
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    f_score[neighbor] = tentative + self._estimate(neighbor)
                    heapq.heappush(frontier, (f_score[neighbor], neighbor))

        logger.debug(f"No path {start} -> {goal} ({expanded} expanded)")
        return WeightedPath.not_found(expanded)

    def _estimate(self, vertex: int) -> float:
        return self._heuristic_weight * self._heuristic(vertex)

    def _reconstruct(self, came_from: list[int | None], goal: int, expanded: int) -> WeightedPath:
        """Walk parents back from goal and attach the weight of each outgoing edge."""
        nodes = []
        node: int | None = goal
        while node is not None:
            nodes.append(node)
            node = came_from[node]
        nodes.reverse()

        steps = [
            PathStep(node=u, weight=self._graph.edge_weight(u, v))
            for u, v in zip(nodes, nodes[1:])
        ]
        steps.append(PathStep(node=nodes[-1], weight=0))
        return WeightedPath(steps=tuple(steps), expanded=expanded)
