"""
Heuristic base class for guiding the pathfinder.

A heuristic estimates the remaining cost from a vertex to the goal. The
pathfinder accepts any `Heuristic` instance or plain callable
`vertex -> number`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Heuristic(ABC):
    """
    Abstract base class for pathfinder heuristics.

    Subclasses need not be admissible; an inadmissible heuristic turns the
    search into best-first search whose result may not be optimal.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the heuristic (e.g., 'degree', 'zero')."""
        ...

    @property
    def admissible(self) -> bool:
        """Whether the estimate never exceeds the true remaining cost."""
        return False

    @abstractmethod
    def __call__(self, vertex: int) -> float:
        """Estimated remaining cost from vertex to the goal."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
