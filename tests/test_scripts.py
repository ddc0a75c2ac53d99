"""
End-to-end tests for the command-line scripts.
"""

import importlib.util
import sys
from pathlib import Path

import pytest


def load_script(project_root: Path, name: str):
    """Import a script from scripts/ as a module."""
    spec = importlib.util.spec_from_file_location(name, project_root / "scripts" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestFindPathScript:
    def test_writes_reports(self, project_root, edge_file, tmp_path, monkeypatch, capsys):
        """Should write graph, path and DOT outputs and exit cleanly."""
        script = load_script(project_root, "find_path")
        monkeypatch.setattr(sys, "argv", [
            "find_path.py",
            "--edges", str(edge_file),
            "--graph-out", str(tmp_path / "graph.txt"),
            "--path-out", str(tmp_path / "path.txt"),
            "--dot-out", str(tmp_path / "path.dot"),
        ])

        assert script.main() == 0
        assert "Finding shortest path from node 0 to node 2" in capsys.readouterr().out
        assert "Total Path Weight: 2" in (tmp_path / "path.txt").read_text(encoding="utf-8")
        assert (tmp_path / "graph.txt").exists()
        assert (tmp_path / "path.dot").exists()

    def test_no_path(self, project_root, tmp_path, monkeypatch, capsys):
        script = load_script(project_root, "find_path")
        edges = tmp_path / "edges.txt"
        edges.write_text("0 1 1\n2 3 1\n", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", [
            "find_path.py",
            "--edges", str(edges),
            "--graph-out", str(tmp_path / "graph.txt"),
            "--path-out", str(tmp_path / "path.txt"),
            "--dot-out", str(tmp_path / "path.dot"),
        ])

        assert script.main() == 0
        assert "No path found between nodes 0 and 3" in capsys.readouterr().out
        assert not (tmp_path / "path.txt").exists()

    @pytest.mark.parametrize("goal", ["7", "-2"])
    def test_invalid_goal_fails(self, project_root, edge_file, tmp_path, monkeypatch, goal):
        script = load_script(project_root, "find_path")
        monkeypatch.setattr(sys, "argv", [
            "find_path.py",
            "--edges", str(edge_file),
            "--goal", goal,
            "--graph-out", str(tmp_path / "graph.txt"),
        ])
        assert script.main() == 1


class TestLongestChainScript:
    def test_writes_report(self, project_root, edge_file, score_file, tmp_path, monkeypatch):
        script = load_script(project_root, "longest_chain")
        out = tmp_path / "chain.txt"
        monkeypatch.setattr(sys, "argv", [
            "longest_chain.py",
            "--edges", str(edge_file),
            "--scores", str(score_file),
            "--out", str(out),
        ])

        assert script.main() == 0
        assert "User Sequence: 0 1 2" in out.read_text(encoding="utf-8")

    def test_strict_missing_score_fails(self, project_root, edge_file, tmp_path, monkeypatch):
        script = load_script(project_root, "longest_chain")
        scores = tmp_path / "scores.txt"
        scores.write_text("0 1\n", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", [
            "longest_chain.py",
            "--edges", str(edge_file),
            "--scores", str(scores),
            "--out", str(tmp_path / "chain.txt"),
            "--strict",
        ])
        assert script.main() == 1

    def test_large_scores(self, project_root, edge_file, tmp_path, monkeypatch):
        """Scores beyond 64 bits should produce a report, not a crash."""
        script = load_script(project_root, "longest_chain")
        scores = tmp_path / "scores.txt"
        scores.write_text("0 1\n1 100000000000000000000\n2 100000000000000000001\n", encoding="utf-8")
        out = tmp_path / "chain.txt"
        monkeypatch.setattr(sys, "argv", [
            "longest_chain.py",
            "--edges", str(edge_file),
            "--scores", str(scores),
            "--out", str(out),
        ])

        assert script.main() == 0
        text = out.read_text(encoding="utf-8")
        assert "User Sequence: 0 1 2" in text
        assert "Node 1: 100000000000000000000" in text


class TestGraphCacheOption:
    """Test the --cache option of both scripts."""

    def test_find_path_writes_then_reads_cache(self, project_root, edge_file, tmp_path, monkeypatch):
        script = load_script(project_root, "find_path")
        cache = tmp_path / "graph.msgpack"
        argv = [
            "find_path.py",
            "--cache", str(cache),
            "--graph-out", str(tmp_path / "graph.txt"),
            "--path-out", str(tmp_path / "path.txt"),
            "--dot-out", str(tmp_path / "path.dot"),
        ]

        monkeypatch.setattr(sys, "argv", argv[:1] + ["--edges", str(edge_file)] + argv[1:])
        assert script.main() == 0
        assert cache.exists()

        # Second run reads the cache; the edge list is no longer needed
        monkeypatch.setattr(sys, "argv", argv[:1] + ["--edges", str(tmp_path / "gone.txt")] + argv[1:])
        assert script.main() == 0
        assert "Total Path Weight: 2" in (tmp_path / "path.txt").read_text(encoding="utf-8")

    def test_longest_chain_uses_cache(self, project_root, edge_file, score_file, tmp_path, monkeypatch):
        script = load_script(project_root, "longest_chain")
        cache = tmp_path / "graph.msgpack"
        monkeypatch.setattr(sys, "argv", [
            "longest_chain.py",
            "--edges", str(edge_file),
            "--scores", str(score_file),
            "--cache", str(cache),
            "--out", str(tmp_path / "chain.txt"),
        ])
        assert script.main() == 0
        assert cache.exists()


class TestMissingDefaultData:
    """Scripts should stop early when default data files are absent."""

    def test_find_path_missing_edge_list(self, project_root, tmp_path, monkeypatch, capsys):
        from netpath import config

        monkeypatch.setattr(config, "EDGE_LIST_PATH", tmp_path / "absent.txt")
        script = load_script(project_root, "find_path")
        monkeypatch.setattr(sys, "argv", ["find_path.py", "--graph-out", str(tmp_path / "graph.txt")])

        assert script.main() == 1
        assert "edge list not found" in capsys.readouterr().err
        assert not (tmp_path / "graph.txt").exists()

    def test_longest_chain_missing_scores(self, project_root, edge_file, tmp_path, monkeypatch, capsys):
        from netpath import config

        monkeypatch.setattr(config, "SCORES_PATH", tmp_path / "absent.txt")
        script = load_script(project_root, "longest_chain")
        monkeypatch.setattr(sys, "argv", [
            "longest_chain.py",
            "--edges", str(edge_file),
            "--out", str(tmp_path / "chain.txt"),
        ])

        assert script.main() == 1
        assert "missing data file(s): scores" in capsys.readouterr().err
