"""Adjacency-list graphs with BFS, DFS, Prim's minimum spanning tree and a command line tool."""

__version__ = "0.1.0"
__all__ = ["graph", "traversal", "spanning", "cli"]