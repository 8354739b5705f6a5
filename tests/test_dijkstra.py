import math

import pytest

from weighted_graph.config import GraphConfig
from weighted_graph.domain.errors import VertexNotFoundError
from weighted_graph.graph.dijkstra import dijkstra, shortest_path
from weighted_graph.graph.store import WeightedDigraph


def build_graph(make_city, vertices, edges, config=None):
    graph = WeightedDigraph(config=config) if config else WeightedDigraph()
    for name in vertices:
        graph.add_vertex(make_city(name))
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)
    return graph


def test_dijkstra_finds_direct_edge(city_graph):
    path, distance = dijkstra(city_graph, "a", "b")

    assert path == ["a", "b"]
    assert distance == 4


def test_dijkstra_finds_multi_hop_path(city_graph):
    path, distance = dijkstra(city_graph, "a", "e")

    assert path == ["a", "c", "d", "f", "e"]
    assert distance == 6


def test_dijkstra_prefers_cheaper_detour(make_city):
    graph = build_graph(
        make_city,
        "abc",
        [("a", "b", 4), ("a", "c", 2), ("c", "b", 1)],
    )

    path, distance = dijkstra(graph, "a", "b")

    assert path == ["a", "c", "b"]
    assert distance == 3


def test_dijkstra_no_path_returns_inf(city_graph):
    # Edges are directed, nothing leads back to a
    path, distance = dijkstra(city_graph, "b", "a")

    assert path == []
    assert math.isinf(distance)


def test_shortest_path_disconnected(make_city):
    graph = build_graph(make_city, ["x", "y"], [])

    assert shortest_path(graph, "x", "y") == []


def test_shortest_path_source_equals_target(city_graph):
    path, distance = dijkstra(city_graph, "a", "a")

    assert path == ["a"]
    assert distance == 0


def test_shortest_path_source_equals_target_with_self_loop(make_city):
    graph = build_graph(make_city, ["a"], [("a", "a", 3)])

    assert shortest_path(graph, "a", "a") == ["a"]


@pytest.mark.parametrize(
    "source, target",
    [("a", "z"), ("z", "a"), ("z", "z")],
)
def test_shortest_path_unknown_vertex_raises(city_graph, source, target):
    with pytest.raises(VertexNotFoundError) as exc_info:
        shortest_path(city_graph, source, target)

    assert exc_info.value.vertex_id == "z"


def test_dijkstra_skips_settled_neighbor(make_city):
    # c is settled before b relaxes b -> c, so c keeps its cheaper predecessor
    graph = build_graph(
        make_city,
        "abcd",
        [("a", "b", 5), ("a", "c", 1), ("b", "c", 1), ("c", "d", 10), ("b", "d", 1)],
    )

    path, distance = dijkstra(graph, "a", "d")

    assert path == ["a", "b", "d"]
    assert distance == 6


def test_dijkstra_ignores_stale_frontier_entries(make_city):
    # b is pushed at 10 first, then improved to 2 through c
    graph = build_graph(
        make_city,
        "abcd",
        [("a", "b", 10), ("a", "c", 1), ("c", "b", 1), ("b", "d", 1)],
    )

    path, distance = dijkstra(graph, "a", "d")

    assert path == ["a", "c", "b", "d"]
    assert distance == 3


def test_dijkstra_stops_at_target(make_city):
    # d is unreachable; the search must not need it
    graph = build_graph(make_city, "abcd", [("a", "b", 1), ("b", "c", 1)])

    assert shortest_path(graph, "a", "b") == ["a", "b"]
    assert shortest_path(graph, "a", "d") == []


def test_dijkstra_zero_weight_edges(make_city):
    graph = build_graph(
        make_city,
        "abc",
        [("a", "b", 0), ("b", "c", 0), ("a", "c", 1)],
    )

    path, distance = dijkstra(graph, "a", "c")

    assert path == ["a", "b", "c"]
    assert distance == 0


def test_dijkstra_large_weights_do_not_overflow(make_city):
    big = 2**40
    graph = build_graph(
        make_city,
        "abc",
        [("a", "b", big), ("b", "c", big)],
    )

    path, distance = dijkstra(graph, "a", "c")

    assert path == ["a", "b", "c"]
    assert distance == 2 * big


def test_dijkstra_equal_cost_paths_break_ties_by_push_order(make_city):
    # b is pushed before c at the same distance, so d is reached through b
    graph = build_graph(
        make_city,
        "abcd",
        [("a", "b", 1), ("a", "c", 1), ("b", "d", 1), ("c", "d", 1)],
    )

    assert dijkstra(graph, "a", "d") == (["a", "b", "d"], 2)


def test_dijkstra_tie_break_follows_edge_insertion_order(make_city):
    graph = build_graph(
        make_city,
        "abcd",
        [("a", "c", 1), ("a", "b", 1), ("b", "d", 1), ("c", "d", 1)],
    )

    assert dijkstra(graph, "a", "d") == (["a", "c", "d"], 2)


def test_dijkstra_is_idempotent(city_graph):
    first = dijkstra(city_graph, "a", "e")
    second = dijkstra(city_graph, "a", "e")

    assert first == second


def test_dijkstra_reflects_edge_removal(city_graph):
    city_graph.remove_edge("f", "e")

    path, distance = dijkstra(city_graph, "a", "e")

    assert distance == 7
    assert path[0] == "a" and path[-1] == "e"


def test_dijkstra_terminates_with_negative_weights(make_city):
    graph = build_graph(
        make_city,
        "abc",
        [("a", "b", 2), ("a", "c", 3), ("c", "b", -5)],
        config=GraphConfig(reject_negative_weights=False),
    )

    path, _ = dijkstra(graph, "a", "b")

    assert path[0] == "a" and path[-1] == "b"
