"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DijkstraPathFinder: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraPathFinder

__all__ = ["DijkstraPathFinder"]
