"""Shared fixtures for the weighted graph tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from weighted_graph.config import reset_config
from weighted_graph.graph.store import WeightedDigraph


@dataclass(frozen=True)
class City:
    """Minimal Identifiable payload."""

    name: str

    def get_id(self) -> str:
        return self.name


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read configuration from a clean cache."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_city():
    return City


@pytest.fixture
def city_graph() -> WeightedDigraph[City]:
    """Six cities with a unique shortest path a -> c -> d -> f -> e."""
    graph: WeightedDigraph[City] = WeightedDigraph()
    for name in "abcdef":
        graph.add_vertex(City(name))

    graph.add_edge("a", "b", 4)
    graph.add_edge("a", "c", 2)
    graph.add_edge("b", "e", 3)
    graph.add_edge("c", "d", 2)
    graph.add_edge("c", "f", 4)
    graph.add_edge("d", "e", 3)
    graph.add_edge("d", "f", 1)
    graph.add_edge("f", "e", 1)
    return graph
