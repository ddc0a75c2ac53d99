"""
Graphviz rendering of a found path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from netpath.config import DOT_EDGE_COLOR, DOT_EDGE_PENWIDTH
from netpath.graph.path import WeightedPath

logger = logging.getLogger(__name__)


def path_to_dot(path: WeightedPath) -> str:
    """Undirected DOT graph containing only the edges along the path."""
    lines = ["graph G {"]
    for u, v, weight in path.edges():
        lines.append(
            f'  {u} -- {v} [label="{weight}", color="{DOT_EDGE_COLOR}", '
            f"penwidth={DOT_EDGE_PENWIDTH}];"
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(path: WeightedPath, out: str | Path) -> Path:
    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        f.write(path_to_dot(path))
    logger.info(f"Shortest path visualization written to {out}")
    return out
