"""
Unit tests for text and Graphviz reports.
"""

from netpath.graph import Chain, ChainBuilder, Graph, Pathfinder, WeightedPath
from netpath.reports import (
    format_chain_report,
    format_graph,
    format_nodes_info,
    format_path_report,
    path_to_dot,
    write_chain_report,
    write_dot,
    write_graph,
    write_path_report,
)


class TestGraphReport:
    def test_format_graph(self, triangle):
        """Each vertex block should list neighbors in insertion order."""
        assert format_graph(triangle) == (
            "Node 0 connects to:\n"
            "  Node 1 with weight 1\n"
            "  Node 2 with weight 5\n"
            "\n"
            "Node 1 connects to:\n"
            "  Node 0 with weight 1\n"
            "  Node 2 with weight 1\n"
            "\n"
            "Node 2 connects to:\n"
            "  Node 1 with weight 1\n"
            "  Node 0 with weight 5\n"
            "\n"
        )

    def test_isolated_vertices_skipped(self):
        graph = Graph.build([(0, 2, 4)])
        assert "Node 1 connects" not in format_graph(graph)

    def test_empty_graph(self):
        assert format_graph(Graph(0)) == ""

    def test_write_graph_creates_dirs(self, tmp_path, triangle):
        out = write_graph(triangle, tmp_path / "out" / "graph.txt")
        assert out.read_text(encoding="utf-8") == format_graph(triangle)


class TestPathReport:
    """Test the detailed path report."""

    def test_table_and_total(self, triangle):
        path = Pathfinder(triangle).find_path(0, 2)
        lines = format_path_report(path).splitlines()
        assert lines[0] == "Detailed Shortest Path Information:"
        assert lines[1] == f"{'Node':<10}{'Edge Weight':<15}"
        assert lines[2] == f"{0:<10}{1:<15}"
        assert lines[4] == f"{2:<10}{0:<15}"
        assert lines[-1] == "Total Path Weight: 2"

    def test_nodes_info(self, triangle):
        path = Pathfinder(triangle).find_path(2, 0)
        text = format_nodes_info(triangle, path)
        assert "Detailed Nodes Information (for nodes in the shortest path):" in text
        assert "Node 1 connections:\n  -> Node 0 (Weight: 1)\n  -> Node 2 (Weight: 1)" in text
        # Ascending node order regardless of path order
        assert text.index("Node 0 connections:") < text.index("Node 2 connections:")

    def test_nodes_info_no_connections(self):
        graph = Graph.build([(0, 2, 4)])
        path = Pathfinder(graph).find_path(1, 1)
        assert "Node 1 connections:\n  No connections" in format_nodes_info(graph, path)

    def test_write_path_report(self, tmp_path, triangle):
        path = Pathfinder(triangle).find_path(0, 2)
        out = write_path_report(triangle, path, tmp_path / "path.txt")
        text = out.read_text(encoding="utf-8")
        assert text.startswith("Detailed Shortest Path Information:")
        assert "Total Path Weight: 2" in text
        assert "Node 2 connections:" in text


class TestDot:
    def test_path_to_dot(self, triangle):
        path = Pathfinder(triangle).find_path(0, 2)
        assert path_to_dot(path) == (
            "graph G {\n"
            '  0 -- 1 [label="1", color="red", penwidth=2.0];\n'
            '  1 -- 2 [label="1", color="red", penwidth=2.0];\n'
            "}\n"
        )

    def test_empty_path(self):
        assert path_to_dot(WeightedPath.not_found()) == "graph G {\n}\n"

    def test_write_dot(self, tmp_path, triangle):
        path = Pathfinder(triangle).find_path(0, 2)
        out = write_dot(path, tmp_path / "path.dot")
        assert out.read_text(encoding="utf-8").startswith("graph G {")


class TestChainReport:
    def test_format_chain_report(self, triangle):
        chain = ChainBuilder(triangle, {0: 1, 1: 2, 2: 3}).build()
        assert format_chain_report(chain) == (
            "Longest Chain Length: 3\n"
            "\n"
            "User Sequence: 0 1 2\n"
            "\n"
            "Influence Scores for Each Node in the Sequence:\n"
            "Node 0: 1\n"
            "Node 1: 2\n"
            "Node 2: 3\n"
        )

    def test_empty_chain(self):
        assert format_chain_report(Chain()) == "No path found.\n"

    def test_write_chain_report(self, tmp_path):
        chain = Chain(nodes=(4, 7), scores=(1, 9))
        out = write_chain_report(chain, tmp_path / "chain.txt")
        assert "User Sequence: 4 7" in out.read_text(encoding="utf-8")
