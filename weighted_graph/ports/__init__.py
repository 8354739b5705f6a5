"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the graph core and the adapters
that drive it, so implementations can be swapped in tests.
"""

from .graph import GraphReaderPort, Identifiable, PathFinderPort

__all__ = [
    "Identifiable",
    "GraphReaderPort",
    "PathFinderPort",
]
