"""Shortest-path computation using Dijkstra's algorithm.

The search stops as soon as the target is settled, so it returns a
single source-to-target path rather than a full shortest-path tree.
Stale heap entries are discarded when popped instead of being updated
in place.
"""

import heapq
import itertools
import math
from typing import Dict, List, Set, Tuple

from ..ports.graph import GraphReaderPort


def dijkstra(
    graph: GraphReaderPort, source_id: str, target_id: str
) -> Tuple[List[str], float]:
    """Compute the shortest path between two vertices using Dijkstra.

    Parameters
    ----------
    graph:
        Graph exposing ``vertex_exists_or_raise`` and ``neighbors``.
    source_id:
        Identifier of the start vertex.
    target_id:
        Identifier of the end vertex.

    Returns
    -------
    list[str], float
        The sequence of vertex identifiers from ``source_id`` to
        ``target_id`` (inclusive) and its total weight. If no path
        exists, returns ``([], math.inf)``. If both identifiers are
        the same, returns ``([source_id], 0)``.

    Raises
    ------
    VertexNotFoundError
        If ``source_id`` or ``target_id`` is not in the graph.
    """
    graph.vertex_exists_or_raise(source_id)
    graph.vertex_exists_or_raise(target_id)

    distances: Dict[str, int] = {source_id: 0}
    previous: Dict[str, str] = {}
    settled: Set[str] = set()

    # The counter breaks distance ties by push order
    counter = itertools.count()
    heap: List[Tuple[int, int, str]] = [(0, next(counter), source_id)]

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in settled:
            continue

        settled.add(u)

        if u == target_id:
            break

        for v, weight in graph.neighbors(u).items():
            if v in settled:
                continue

            new_distance = current_distance + weight
            if new_distance < distances.get(v, math.inf):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, next(counter), v))

    if target_id not in settled:
        return [], math.inf

    path: List[str] = [target_id]
    current = target_id
    while current in previous:
        current = previous[current]
        path.append(current)

    path.reverse()
    return path, distances[target_id]


def shortest_path(graph: GraphReaderPort, source_id: str, target_id: str) -> List[str]:
    """Return only the path computed by :func:`dijkstra`."""
    path, _ = dijkstra(graph, source_id, target_id)
    return path
