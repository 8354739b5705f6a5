"""Immutable domain models for the weighted graph.

All models are frozen dataclasses with slots. They carry data out of the
store and the path finder; the store itself never holds them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted edge between two stored vertices.

    Attributes:
        source: Identifier of the vertex the edge leaves from
        target: Identifier of the vertex the edge points to
        weight: Non-negative cost of following the edge
    """

    source: str
    target: str
    weight: int


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path search between two vertices.

    Attributes:
        path: Ordered tuple of vertex identifiers, source to target inclusive
        total_weight: Sum of edge weights along the path (inf if unreachable)
    """

    path: tuple[str, ...]
    total_weight: float = math.inf

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.path) == 0

    @property
    def num_hops(self) -> int:
        """Return the number of edges followed along the path."""
        return max(len(self.path) - 1, 0)

    @classmethod
    def unreachable(cls) -> PathResult:
        """Build the empty result used when the target cannot be reached."""
        return cls(path=(), total_weight=math.inf)
