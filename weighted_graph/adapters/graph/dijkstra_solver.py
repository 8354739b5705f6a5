"""Dijkstra path finder adapter.

This adapter wraps the engine in graph/dijkstra.py and adds:
- Domain model output (PathResult)
- Logging
- A non-raising variant for callers that want result values
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import VertexNotFoundError
from ...domain.models import PathResult
from ...graph.dijkstra import dijkstra
from ...ports.graph import GraphReaderPort


@dataclass
class DijkstraPathFinder:
    """Path finder using Dijkstra's shortest path algorithm.

    This adapter implements PathFinderPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: GraphReaderPort,
        source_id: str,
        target_id: str,
    ) -> PathResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The graph to search.
            source_id: Identifier of the start vertex.
            target_id: Identifier of the end vertex.

        Returns:
            PathResult with path and total weight. An unreachable target
            gives an empty path, not an error.

        Raises:
            VertexNotFoundError: If source or target is not in the graph.
        """
        self._logger.debug(
            "Solving shortest path",
            extra={"source_id": source_id, "target_id": target_id},
        )

        path, total_weight = dijkstra(graph, source_id, target_id)

        if not path:
            self._logger.warning(
                "No path found",
                extra={"source_id": source_id, "target_id": target_id},
            )
            return PathResult.unreachable()

        self._logger.info(
            "Path found",
            extra={
                "source_id": source_id,
                "target_id": target_id,
                "hops": len(path) - 1,
                "total_weight": total_weight,
            },
        )
        return PathResult(path=tuple(path), total_weight=total_weight)

    def solve_safe(
        self,
        graph: GraphReaderPort,
        source_id: str,
        target_id: str,
    ) -> PathResult:
        """Find the shortest path, returning an empty result on failure.

        Like solve(), but unknown vertices give an empty PathResult
        instead of raising.
        """
        try:
            return self.solve(graph, source_id, target_id)
        except VertexNotFoundError as e:
            self._logger.debug(
                "Unknown vertex in path request",
                extra={"vertex_id": e.vertex_id},
            )
            return PathResult.unreachable()
