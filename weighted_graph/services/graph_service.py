"""Graph service - Lock-guarded access to a shared weighted graph.

The raw store has no synchronization. This service serializes every
mutation and every path search behind one re-entrant lock, so a search
never sees the graph change underneath it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from ..adapters.graph import DijkstraPathFinder
from ..domain.errors import GraphStoreError
from ..domain.models import PathResult
from ..graph.store import WeightedDigraph
from ..ports.graph import Identifiable, PathFinderPort

V = TypeVar("V", bound=Identifiable)


@dataclass
class GraphService(Generic[V]):
    """Thread-safe facade over a WeightedDigraph and a path finder.

    Attributes:
        graph: The underlying store
        path_finder: Computes shortest paths over ``graph``
    """

    graph: WeightedDigraph[V] = field(default_factory=WeightedDigraph)
    path_finder: PathFinderPort = field(default_factory=DijkstraPathFinder)

    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_vertex(self, vertex: V) -> None:
        with self._lock:
            self.graph.add_vertex(vertex)

    def remove_vertex(self, vertex_id: str) -> None:
        with self._lock:
            self.graph.remove_vertex(vertex_id)

    def add_edge(self, source_id: str, target_id: str, weight: int) -> None:
        with self._lock:
            self.graph.add_edge(source_id, target_id, weight)

    def remove_edge(self, source_id: str, target_id: str) -> None:
        with self._lock:
            self.graph.remove_edge(source_id, target_id)

    def vertex_exists(self, vertex_id: str) -> bool:
        with self._lock:
            return self.graph.vertex_exists(vertex_id)

    def lookup_vertex(self, vertex_id: str) -> Optional[V]:
        with self._lock:
            return self.graph.lookup_vertex(vertex_id)

    def shortest_path(self, source_id: str, target_id: str) -> PathResult:
        """Compute the shortest path while holding the graph lock.

        Raises:
            VertexNotFoundError: If source or target is not in the graph.
        """
        with self._lock:
            return self.path_finder.solve(self.graph, source_id, target_id)

    def shortest_path_safe(
        self, source_id: str, target_id: str
    ) -> tuple[Optional[PathResult], Optional[str]]:
        """Compute the shortest path, returning an error message instead of raising.

        Returns:
            Tuple of (PathResult or None, error message or None). An
            unreachable target is a successful, empty PathResult.
        """
        try:
            return self.shortest_path(source_id, target_id), None
        except GraphStoreError as e:
            self._logger.warning(
                "Shortest path request failed",
                extra={
                    "source_id": source_id,
                    "target_id": target_id,
                    "error": e.message,
                },
            )
            return None, e.message
