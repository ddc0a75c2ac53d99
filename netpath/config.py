"""
Configuration constants for the netpath project.

All paths, defaults and tunable parameters are defined here.
Environment variables (optionally from a .env file) override the defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of netpath/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (contains the edge list and influence scores)
DATA_DIR = Path(os.environ.get("NETPATH_DATA_DIR", PROJECT_ROOT / "data"))

# Input files
EDGE_LIST_PATH = DATA_DIR / "social-network-proj-graph.txt"
SCORES_PATH = DATA_DIR / "social-network-proj-Influences.txt"

# Binary graph cache (avoids re-parsing large edge lists)
GRAPH_CACHE_PATH = DATA_DIR / "graph.msgpack"

# Output directory for reports
RESULTS_DIR = Path(os.environ.get("NETPATH_RESULTS_DIR", PROJECT_ROOT / "results"))

GRAPH_OUTPUT_PATH = RESULTS_DIR / "graph_output.txt"
PATH_OUTPUT_PATH = RESULTS_DIR / "a_star_shortest_path.txt"
PATH_DOT_PATH = RESULTS_DIR / "shortest_path_visualization.dot"
CHAIN_OUTPUT_PATH = RESULTS_DIR / "longest_chain.txt"

# =============================================================================
# Search Configuration
# =============================================================================

# Heuristic used by the pathfinder when none is given ("degree" or "zero")
DEFAULT_HEURISTIC = "degree"

# f(n) = g(n) + WEIGHT * h(n); 1.0 reproduces plain A* bookkeeping
ASTAR_HEURISTIC_WEIGHT = float(os.environ.get("ASTAR_HEURISTIC_WEIGHT", "1.0"))

# =============================================================================
# Chain Configuration
# =============================================================================

# Raise on unscored vertices instead of excluding them
CHAIN_STRICT_SCORES = os.environ.get("CHAIN_STRICT_SCORES", "0") == "1"

# =============================================================================
# Report Configuration
# =============================================================================

# Column widths of the detailed path table
REPORT_NODE_WIDTH = 10
REPORT_WEIGHT_WIDTH = 15

# Graphviz styling for path edges
DOT_EDGE_COLOR = "red"
DOT_EDGE_PENWIDTH = 2.0

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "edge_list": EDGE_LIST_PATH.exists(),
        "scores": SCORES_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
