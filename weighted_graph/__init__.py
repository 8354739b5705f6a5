"""Top-level package for the weighted graph library.

The package provides a directed, weighted graph store keyed by vertex
identifiers and a Dijkstra shortest-path engine that runs on top of it.
"""

from .domain import (
    DuplicateEdgeError,
    DuplicateVertexError,
    Edge,
    EdgeNotFoundError,
    GraphStoreError,
    InvalidWeightError,
    PathResult,
    VertexNotFoundError,
)
from .graph import WeightedDigraph, dijkstra, shortest_path
from .ports import Identifiable
from .services import GraphService

__all__ = [
    "WeightedDigraph",
    "GraphService",
    "Identifiable",
    "dijkstra",
    "shortest_path",
    "Edge",
    "PathResult",
    "GraphStoreError",
    "DuplicateVertexError",
    "VertexNotFoundError",
    "DuplicateEdgeError",
    "EdgeNotFoundError",
    "InvalidWeightError",
]
