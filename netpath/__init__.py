"""
Social network path analysis.

Shortest-path search (A* with a pluggable structural heuristic) and
longest score-increasing chain discovery over weighted undirected graphs
loaded from edge lists.
"""

__version__ = "0.1.0"
