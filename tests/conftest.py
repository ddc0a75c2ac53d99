"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from netpath.graph import Graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def triangle() -> Graph:
    """Triangle where the two-hop route (cost 2) beats the direct edge (cost 5)."""
    return Graph.build([(0, 1, 1), (1, 2, 1), (0, 2, 5)])


@pytest.fixture
def two_components() -> Graph:
    """Vertices {0, 1, 2} and {3, 4} with no edge between them."""
    return Graph.build([(0, 1, 2), (1, 2, 3), (3, 4, 1)])


@pytest.fixture
def social_graph() -> Graph:
    """Small weighted network with a cycle and a dangling branch."""
    return Graph.build([
        (0, 1, 4),
        (0, 2, 1),
        (2, 3, 2),
        (1, 3, 1),
        (3, 4, 3),
        (4, 5, 2),
        (1, 5, 9),
        (5, 6, 1),
    ])


@pytest.fixture
def social_scores() -> dict[int, int]:
    """Influence scores for social_graph."""
    return {0: 10, 1: 40, 2: 20, 3: 30, 4: 50, 5: 60, 6: 5}


@pytest.fixture
def edge_file(tmp_path: Path) -> Path:
    """Edge list file for the triangle graph."""
    path = tmp_path / "edges.txt"
    path.write_text("0 1 1\n1 2 1\n0 2 5\n", encoding="utf-8")
    return path


@pytest.fixture
def score_file(tmp_path: Path) -> Path:
    """Score file for the triangle graph."""
    path = tmp_path / "influences.txt"
    path.write_text("0 1\n1 2\n2 3\n", encoding="utf-8")
    return path
