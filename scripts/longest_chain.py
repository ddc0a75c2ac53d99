#!/usr/bin/env python3
"""
Find the longest chain of connected users with strictly increasing influence.

Usage:
    python scripts/longest_chain.py
    python scripts/longest_chain.py --edges data/edges.txt --scores data/influences.txt
    python scripts/longest_chain.py --strict --out results/chain.txt

Users without an influence score are left out of every chain unless
--strict is given, in which case they abort the run.
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
    CHAIN_OUTPUT_PATH,
    CHAIN_STRICT_SCORES,
    EDGE_LIST_PATH,
    GRAPH_CACHE_PATH,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    SCORES_PATH,
    get_missing_data_files,
)
from netpath.data import NetworkData  # noqa: E402
from netpath.graph import ChainBuilder  # noqa: E402
from netpath.reports import write_chain_report  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the longest influence-increasing chain",
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
        "--scores",
        type=Path,
        default=SCORES_PATH,
        help=f"Influence scores 'vertex score' per line (default: {SCORES_PATH})",
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
        "--out",
        type=Path,
        default=CHAIN_OUTPUT_PATH,
        help=f"Chain report output (default: {CHAIN_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=CHAIN_STRICT_SCORES,
        help="Fail if any user has no influence score",
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
    using_default = {
        "edge_list": args.edges == EDGE_LIST_PATH and not cached,
        "scores": args.scores == SCORES_PATH,
    }
    missing = [name for name in get_missing_data_files() if using_default[name]]
    if missing:
        print(f"Error: missing data file(s): {', '.join(missing)}", file=sys.stderr)
        return 1

    try:
        data = NetworkData(args.edges, args.scores, cache_path=args.cache)
        chain = ChainBuilder(data.graph, data.scores, strict=args.strict).build()
        write_chain_report(chain, args.out)
    except (OSError, ValueError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if chain.nodes:
        print(f"Longest chain ({chain.length} users): {' -> '.join(str(n) for n in chain.nodes)}")
    else:
        print("No path found.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
