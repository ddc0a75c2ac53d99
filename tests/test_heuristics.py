"""
Unit tests for heuristic functions and the heuristic registry.
"""

import pytest

from netpath.heuristics import HEURISTICS, DegreeHeuristic, Heuristic, ZeroHeuristic, get_heuristic


class TestDegreeHeuristic:
    def test_returns_degree(self, social_graph):
        """Estimate should equal the number of adjacency entries."""
        heuristic = DegreeHeuristic(social_graph)
        assert heuristic(1) == 3
        assert heuristic(6) == 1

    def test_not_admissible(self, triangle):
        assert DegreeHeuristic(triangle).admissible is False


class TestZeroHeuristic:
    def test_always_zero(self):
        heuristic = ZeroHeuristic()
        assert heuristic(0) == 0
        assert heuristic(12345) == 0

    def test_admissible(self):
        assert ZeroHeuristic().admissible is True


class TestGetHeuristic:
    """Test lookup by name."""

    def test_known_names(self, triangle):
        assert isinstance(get_heuristic("degree", triangle), DegreeHeuristic)
        assert isinstance(get_heuristic("zero", triangle), ZeroHeuristic)

    def test_unknown_name_raises(self, triangle):
        with pytest.raises(ValueError, match="Unknown heuristic"):
            get_heuristic("euclidean", triangle)

    def test_repr(self, triangle):
        assert repr(get_heuristic("degree", triangle)) == "DegreeHeuristic(name='degree')"

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Heuristic()

    def test_every_registered_name_builds(self, triangle):
        """Each registry factory should yield a heuristic named after its key."""
        for name in HEURISTICS:
            heuristic = get_heuristic(name, triangle)
            assert isinstance(heuristic, Heuristic)
            assert heuristic.name == name

    def test_degree_bound_to_graph(self, social_graph):
        assert get_heuristic("degree", social_graph)(1) == 3
