#!/usr/bin/env python3
"""
Find a path between two vertices of a weighted social graph.

Usage:
    python scripts/find_path.py
    python scripts/find_path.py --edges data/edges.txt --start 0 --goal 42
    python scripts/find_path.py --start 3 --goal 17 --heuristic zero --verbose

Heuristics:
    degree  - Vertex degree (default, fast but not guaranteed shortest)
    zero    - No estimate (Dijkstra, always shortest)

Outputs:
    graph dump, detailed path report and Graphviz DOT file of the path.
    Render the DOT file with: dot -Tpng shortest_path_visualization.dot -o path.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from netpath.config import (  # noqa: E402 - must be after sys.path modification
    ASTAR_HEURISTIC_WEIGHT,
    DEFAULT_HEURISTIC,
    EDGE_LIST_PATH,
    GRAPH_CACHE_PATH,
    GRAPH_OUTPUT_PATH,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    PATH_DOT_PATH,
    PATH_OUTPUT_PATH,
    get_missing_data_files,
)
from netpath.data import NetworkData  # noqa: E402
from netpath.graph import Pathfinder  # noqa: E402
from netpath.heuristics import HEURISTICS, get_heuristic  # noqa: E402
from netpath.reports import write_dot, write_graph, write_path_report  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a path between two vertices with A* search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--edges",
        type=Path,
        default=EDGE_LIST_PATH,
        help=f"Edge list 'u v weight' per line, or a .msgpack cache (default: {EDGE_LIST_PATH})",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=0,
        help="Start vertex (default: 0)",
    )
    parser.add_argument(
        "--goal",
        type=int,
        default=None,
        help="Goal vertex (default: last vertex)",
    )
    parser.add_argument(
        "--heuristic",
        type=str,
        default=DEFAULT_HEURISTIC,
        choices=sorted(HEURISTICS),
        help=f"Search heuristic (default: {DEFAULT_HEURISTIC})",
    )
    parser.add_argument(
        "--heuristic-weight",
        type=float,
        default=ASTAR_HEURISTIC_WEIGHT,
        help=f"Multiplier on the heuristic, f = g + w*h (default: {ASTAR_HEURISTIC_WEIGHT})",
    )
    parser.add_argument(
        "--cache",
        type=Path,
        nargs="?",
        const=GRAPH_CACHE_PATH,
        default=None,
        help=f"Read the graph from this msgpack cache, or write it there after parsing "
        f"(default when given without a path: {GRAPH_CACHE_PATH})",
    )
    parser.add_argument(
        "--graph-out",
        type=Path,
        default=GRAPH_OUTPUT_PATH,
        help=f"Graph dump output (default: {GRAPH_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--path-out",
        type=Path,
        default=PATH_OUTPUT_PATH,
        help=f"Path report output (default: {PATH_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--dot-out",
        type=Path,
        default=PATH_DOT_PATH,
        help=f"Graphviz output (default: {PATH_DOT_PATH})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    cached = args.cache is not None and args.cache.exists()
    if args.edges == EDGE_LIST_PATH and not cached and "edge_list" in get_missing_data_files():
        print(f"Error: edge list not found at {EDGE_LIST_PATH} (use --edges)", file=sys.stderr)
        return 1

    try:
        data = NetworkData(args.edges, cache_path=args.cache)
        graph = data.graph
        write_graph(graph, args.graph_out)

        start = args.start
        goal = args.goal if args.goal is not None else graph.vertex_count - 1

        print(f"Finding shortest path from node {start} to node {goal}")

        pathfinder = Pathfinder(
            graph,
            heuristic=get_heuristic(args.heuristic, graph),
            heuristic_weight=args.heuristic_weight,
        )
        path = pathfinder.find_path(start, goal)

        if not path.found:
            print(f"No path found between nodes {start} and {goal}")
            return 0

        write_path_report(graph, path, args.path_out)
        write_dot(path, args.dot_out)

        print(f"  Path:  {' -> '.join(str(node) for node in path.nodes)}")
        print(f"  Hops:  {path.hops}")
        print(f"  Total: {path.total_cost}")

    except (OSError, ValueError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
