"""Pathfinder Visualizer - step-by-step A* and Dijkstra on an editable grid."""

__version__ = "1.0.0"
