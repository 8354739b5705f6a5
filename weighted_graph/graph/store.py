"""Directed weighted graph store.

Vertices are owned by the store and keyed by their identifier. Edges
reference vertices only by identifier, never by object:

- A -> B with weight w is stored as the entry ``{A: {B: w}}``
- B -> A is a separate entry ``{B: {A: w}}``

The store has no internal locking; see ``services.GraphService`` for a
lock-guarded facade.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Generic, Iterator, Mapping, Optional, TypeVar

from ..config import GraphConfig, get_config
from ..domain.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    EdgeNotFoundError,
    InvalidWeightError,
    VertexNotFoundError,
)
from ..domain.models import Edge
from ..ports.graph import Identifiable

V = TypeVar("V", bound=Identifiable)


@dataclass
class WeightedDigraph(Generic[V]):
    """Directed graph with non-negative integer edge weights.

    Every operation checks its preconditions before touching the maps,
    so a call that raises leaves the graph exactly as it was.

    Attributes:
        config: Graph configuration (weight validation)

    Example:
        graph = WeightedDigraph[City]()
        graph.add_vertex(City("a"))
        graph.add_vertex(City("b"))
        graph.add_edge("a", "b", 4)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)

    _vertices: Dict[str, V] = field(default_factory=dict, init=False, repr=False)
    _edges: Dict[str, Dict[str, int]] = field(default_factory=dict, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def vertices(self) -> Mapping[str, V]:
        """Read-only view of identifier -> vertex payload."""
        return MappingProxyType(self._vertices)

    @property
    def edges(self) -> Mapping[str, Mapping[str, int]]:
        """Read-only view of source -> (target -> weight)."""
        return MappingProxyType(
            {source: MappingProxyType(targets) for source, targets in self._edges.items()}
        )

    def add_vertex(self, vertex: V) -> None:
        """Add a vertex to the graph.

        Args:
            vertex: Payload exposing ``get_id()``.

        Raises:
            DuplicateVertexError: If a vertex with the same id exists.
        """
        vertex_id = vertex.get_id()

        if self.vertex_exists(vertex_id):
            raise DuplicateVertexError(
                f"Vertex {vertex_id} already exists",
                vertex_id=vertex_id,
            )

        self._vertices[vertex_id] = vertex
        self._edges[vertex_id] = {}
        self._logger.debug("Vertex added", extra={"vertex_id": vertex_id})

    def remove_vertex(self, vertex_id: str) -> None:
        """Remove a vertex and every edge leaving or reaching it.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        self.vertex_exists_or_raise(vertex_id)

        outgoing = len(self._edges.pop(vertex_id))
        incoming = 0
        for targets in self._edges.values():
            if targets.pop(vertex_id, None) is not None:
                incoming += 1

        del self._vertices[vertex_id]
        self._logger.debug(
            "Vertex removed",
            extra={
                "vertex_id": vertex_id,
                "outgoing_removed": outgoing,
                "incoming_removed": incoming,
            },
        )

    def add_edge(self, source_id: str, target_id: str, weight: int) -> None:
        """Add a directed edge from ``source_id`` to ``target_id``.

        Args:
            source_id: Identifier of the vertex the edge leaves from.
            target_id: Identifier of the vertex the edge points to.
            weight: Non-negative integer cost of the edge.

        Raises:
            VertexNotFoundError: If either endpoint does not exist.
            InvalidWeightError: If the weight is not an integer, or is
                negative while negative weights are rejected.
            DuplicateEdgeError: If the edge already exists.
        """
        self.vertex_exists_or_raise(source_id)
        self.vertex_exists_or_raise(target_id)
        self._validate_weight(weight)

        targets = self._edges[source_id]
        if target_id in targets:
            raise DuplicateEdgeError(
                f"Edge between from vertex {source_id} to vertex {target_id} already exists",
                source_id=source_id,
                target_id=target_id,
            )

        targets[target_id] = weight
        self._logger.debug(
            "Edge added",
            extra={"source_id": source_id, "target_id": target_id, "weight": weight},
        )

    def remove_edge(self, source_id: str, target_id: str) -> None:
        """Remove the directed edge from ``source_id`` to ``target_id``.

        Raises:
            VertexNotFoundError: If either endpoint does not exist.
            EdgeNotFoundError: If there is no such edge.
        """
        self.vertex_exists_or_raise(source_id)
        self.vertex_exists_or_raise(target_id)

        targets = self._edges[source_id]
        if target_id not in targets:
            raise EdgeNotFoundError(
                f"Edge from vertex {source_id} to vertex {target_id} does not exist",
                source_id=source_id,
                target_id=target_id,
            )

        del targets[target_id]
        self._logger.debug(
            "Edge removed",
            extra={"source_id": source_id, "target_id": target_id},
        )

    def vertex_exists(self, vertex_id: str) -> bool:
        """Denote if a vertex exists."""
        return vertex_id in self._vertices

    def vertex_exists_or_raise(self, vertex_id: str) -> None:
        """Raise VertexNotFoundError if the vertex does not exist."""
        if not self.vertex_exists(vertex_id):
            raise VertexNotFoundError(
                f"Vertex {vertex_id} does not exist",
                vertex_id=vertex_id,
            )

    def lookup_vertex(self, vertex_id: str) -> Optional[V]:
        """Get a vertex payload by identifier.

        Returns:
            The stored payload, or None if not found.
        """
        return self._vertices.get(vertex_id)

    def get_vertex_or_raise(self, vertex_id: str) -> V:
        """Get a vertex payload by identifier, raising if not found.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        self.vertex_exists_or_raise(vertex_id)
        return self._vertices[vertex_id]

    def has_edge(self, source_id: str, target_id: str) -> bool:
        """Denote if an edge exists from ``source_id`` to ``target_id``."""
        return target_id in self._edges.get(source_id, {})

    def edge_weight(self, source_id: str, target_id: str) -> Optional[int]:
        """Return the weight of an edge, or None if it does not exist."""
        return self._edges.get(source_id, {}).get(target_id)

    def neighbors(self, vertex_id: str) -> Mapping[str, int]:
        """Return a read-only view of a vertex's outgoing edges.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        self.vertex_exists_or_raise(vertex_id)
        return MappingProxyType(self._edges[vertex_id])

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over every edge in the graph."""
        for source_id, targets in self._edges.items():
            for target_id, weight in targets.items():
                yield Edge(source=source_id, target=target_id, weight=weight)

    @property
    def vertex_count(self) -> int:
        """Number of stored vertices."""
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        """Number of stored edges."""
        return sum(len(targets) for targets in self._edges.values())

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._vertices.clear()
        self._edges.clear()
        self._logger.debug("Graph cleared")

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def _validate_weight(self, weight: int) -> None:
        # bool is an int subclass but never a meaningful weight
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidWeightError(
                f"Edge weight must be an integer, got {weight!r}",
                weight=weight,
            )
        if weight < 0 and self.config.reject_negative_weights:
            raise InvalidWeightError(
                f"Edge weight must be non-negative, got {weight}",
                weight=weight,
            )
