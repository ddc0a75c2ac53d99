"""
Plain-text reports for graphs, weighted paths and chains.

The format_* functions return strings; the write_* functions put them on
disk (creating parent directories) and log where they went.
"""

from __future__ import annotations

import logging
from pathlib import Path

from netpath.config import REPORT_NODE_WIDTH, REPORT_WEIGHT_WIDTH
from netpath.graph.path import Chain, WeightedPath
from netpath.graph.store import Graph

logger = logging.getLogger(__name__)


def _write(text: str, path: str | Path, append: bool = False) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a" if append else "w", encoding="utf-8") as f:
        f.write(text)
    return path


# =============================================================================
# Graph
# =============================================================================

def format_graph(graph: Graph) -> str:
    """Adjacency listing of every vertex that has at least one edge."""
    lines = []
    for node in range(graph.vertex_count):
        neighbors = graph.neighbors(node)
        if not neighbors:
            continue
        lines.append(f"Node {node} connects to:")
        for neighbor, weight in neighbors:
            lines.append(f"  Node {neighbor} with weight {weight}")
        lines.append("")
    return "\n".join(lines) + ("\n" if lines else "")


def write_graph(graph: Graph, path: str | Path) -> Path:
    path = _write(format_graph(graph), path)
    logger.info(f"Graph written to {path}")
    return path


# =============================================================================
# Weighted Path
# =============================================================================

def format_path_report(path: WeightedPath) -> str:
    """Node / edge-weight table followed by the total path weight."""
    lines = [
        "Detailed Shortest Path Information:",
        f"{'Node':<{REPORT_NODE_WIDTH}}{'Edge Weight':<{REPORT_WEIGHT_WIDTH}}",
    ]
    for step in path:
        lines.append(f"{step.node:<{REPORT_NODE_WIDTH}}{step.weight:<{REPORT_WEIGHT_WIDTH}}")
    lines.append("")
    lines.append(f"Total Path Weight: {path.total_cost}")
    return "\n".join(lines) + "\n"


def format_nodes_info(graph: Graph, path: WeightedPath) -> str:
    """Connections of each distinct node on the path, in ascending id order."""
    lines = ["", "", "Detailed Nodes Information (for nodes in the shortest path):"]
    for node in sorted(set(path.nodes)):
        lines.append("")
        lines.append(f"Node {node} connections:")
        neighbors = graph.neighbors(node)
        if not neighbors:
            lines.append("  No connections")
        for dest, weight in neighbors:
            lines.append(f"  -> Node {dest} (Weight: {weight})")
    return "\n".join(lines) + "\n"


def write_path_report(graph: Graph, path: WeightedPath, out: str | Path) -> Path:
    """Write the path table and the per-node connection details."""
    out = _write(format_path_report(path), out)
    _write(format_nodes_info(graph, path), out, append=True)
    logger.info(f"Path written to {out}")
    return out


# =============================================================================
# Chain
# =============================================================================

def format_chain_report(chain: Chain) -> str:
    if not chain.nodes:
        return "No path found.\n"

    lines = [
        f"Longest Chain Length: {chain.length}",
        "",
        "User Sequence: " + " ".join(str(node) for node in chain.nodes),
        "",
        "Influence Scores for Each Node in the Sequence:",
    ]
    for node, score in zip(chain.nodes, chain.scores):
        lines.append(f"Node {node}: {score}")
    return "\n".join(lines) + "\n"


def write_chain_report(chain: Chain, out: str | Path) -> Path:
    out = _write(format_chain_report(chain), out)
    logger.info(f"Results written to {out}")
    return out
