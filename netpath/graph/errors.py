"""
Exceptions raised by the graph core.

Each subclasses the builtin it specialises so callers that only care
about the broad category (bad value, bad index, missing key) can catch that.
"""

from __future__ import annotations


class MalformedEdgeError(ValueError):
    """An edge record is missing fields or holds invalid values."""

    def __init__(self, message: str, record_index: int | None = None) -> None:
        super().__init__(message)
        self.record_index = record_index


class MalformedScoreError(ValueError):
    """A score record is missing fields or holds invalid values."""

    def __init__(self, message: str, record_index: int | None = None) -> None:
        super().__init__(message)
        self.record_index = record_index


class InvalidVertexError(IndexError):
    """A vertex id lies outside [0, vertex_count)."""

    def __init__(self, vertex: int, vertex_count: int) -> None:
        super().__init__(f"Vertex {vertex} out of range [0, {vertex_count})")
        self.vertex = vertex
        self.vertex_count = vertex_count


class MissingScoreError(KeyError):
    """A vertex considered by the chain builder has no score."""

    def __init__(self, vertex: int) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Vertex {self.vertex} has no score"
