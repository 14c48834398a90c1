"""Depth-first and breadth-first maze solving on character grids."""

__version__ = "0.1.0"