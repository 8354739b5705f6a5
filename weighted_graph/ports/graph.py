"""Graph ports - Abstractions for vertex payloads and path finding.

These protocols define the contracts between the store, the path-finding
engine and callers. The engine only depends on the read side of the
store, so any structure exposing it can be searched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.models import PathResult


@runtime_checkable
class Identifiable(Protocol):
    """Capability every vertex payload must provide.

    The store keys vertices by the returned identifier and does not
    look at the payload otherwise.
    """

    def get_id(self) -> str:
        """Return the unique, stable identifier of this vertex."""
        ...


class GraphReaderPort(Protocol):
    """Read-only view of a weighted graph, as consumed by path finders.

    Implementation: graph/store.py (WeightedDigraph)
    """

    def vertex_exists(self, vertex_id: str) -> bool:
        """Denote whether a vertex with this identifier is stored."""
        ...

    def vertex_exists_or_raise(self, vertex_id: str) -> None:
        """Raise VertexNotFoundError if the vertex is not stored."""
        ...

    def neighbors(self, vertex_id: str) -> Mapping[str, int]:
        """Return the outgoing edges of a vertex.

        Args:
            vertex_id: Identifier of the source vertex.

        Returns:
            Mapping of neighbor identifier to edge weight.
        """
        ...


class PathFinderPort(Protocol):
    """Port for shortest-path computation.

    Implementation: adapters/graph/dijkstra_solver.py
    Wraps: graph/dijkstra.py
    """

    def solve(
        self,
        graph: GraphReaderPort,
        source_id: str,
        target_id: str,
    ) -> PathResult:
        """Find the least-cost path between two vertices.

        Args:
            graph: The graph to search.
            source_id: Identifier of the start vertex.
            target_id: Identifier of the end vertex.

        Returns:
            PathResult with the path and its total weight. The path is
            empty when the target cannot be reached.
        """
        ...
