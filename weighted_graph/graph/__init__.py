"""Graph core: the in-memory weighted digraph and path finding.

This subpackage contains the vertex/edge store and the Dijkstra
shortest-path engine that runs on top of it.
"""

from .dijkstra import dijkstra, shortest_path
from .store import WeightedDigraph

__all__ = ["WeightedDigraph", "dijkstra", "shortest_path"]
