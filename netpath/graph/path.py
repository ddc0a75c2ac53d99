"""
Result dataclasses handed from the search engines to the reporting layer.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PathStep:
    """
    A single node on a weighted path.

    Attributes:
        node: Vertex id
        weight: Weight of the edge to the next node (0 on the last step)
    """

    node: int
    weight: int


@dataclass(frozen=True)
class WeightedPath:
    """
    Walk found by the pathfinder, or an empty path when none exists.

    Attributes:
        steps: Ordered steps from start to goal
        expanded: Number of vertices popped from the frontier during search
    """

    steps: tuple[PathStep, ...] = ()
    expanded: int = 0

    @classmethod
    def not_found(cls, expanded: int = 0) -> WeightedPath:
        return cls(steps=(), expanded=expanded)

    @property
    def found(self) -> bool:
        """Whether a path was found (an empty path means no connectivity)."""
        return bool(self.steps)

    @property
    def nodes(self) -> list[int]:
        return [step.node for step in self.steps]

    @property
    def total_cost(self) -> int:
        """Sum of edge weights along the path (0 for a single-node path)."""
        return sum(step.weight for step in self.steps)

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return max(len(self.steps) - 1, 0)

    def edges(self) -> list[tuple[int, int, int]]:
        """Traversed edges as (u, v, weight) triples."""
        return [
            (a.node, b.node, a.weight)
            for a, b in zip(self.steps, self.steps[1:])
        ]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[PathStep]:
        return iter(self.steps)


@dataclass(frozen=True)
class Chain:
    """
    Score-increasing walk found by the chain builder.

    Attributes:
        nodes: Vertex ids in chain order
        scores: Score of each node, parallel to nodes
        excluded: Vertices left out because they had no score
    """

    nodes: tuple[int, ...] = ()
    scores: tuple[int, ...] = ()
    excluded: tuple[int, ...] = field(default=(), compare=False)

    @property
    def length(self) -> int:
        return len(self.nodes)

    def pairs(self) -> list[tuple[int, int]]:
        """Consecutive (u, v) vertex pairs along the chain."""
        return list(zip(self.nodes, self.nodes[1:]))

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[int]:
        return iter(self.nodes)
