"""
Reports module.

Renders graphs, weighted paths and chains for humans and Graphviz:
- Text reports: graph dump, path table, node details, chain summary
- DOT: Path-only undirected graph for `dot -Tpng`
"""

from netpath.reports.dot import path_to_dot, write_dot
from netpath.reports.text import (
    format_chain_report,
    format_graph,
    format_nodes_info,
    format_path_report,
    write_chain_report,
    write_graph,
    write_path_report,
)

__all__ = [
    "format_graph",
    "write_graph",
    "format_path_report",
    "format_nodes_info",
    "write_path_report",
    "format_chain_report",
    "write_chain_report",
    "path_to_dot",
    "write_dot",
]
