"""Shared fixtures: the six-vertex example graph used across the suite."""

from __future__ import annotations

import pytest

from shortpath.adapters.graph import AdjacencyGraph
from shortpath.config import reset_config

EDGES = [(1, 2), (2, 3), (2, 4), (4, 5), (1, 6), (6, 4)]


@pytest.fixture
def directed_graph() -> AdjacencyGraph:
    graph = AdjacencyGraph(directed=True)
    graph.add_edges(*EDGES)
    return graph


@pytest.fixture
def undirected_graph() -> AdjacencyGraph:
    graph = AdjacencyGraph(directed=False)
    graph.add_edges(*EDGES)
    return graph


@pytest.fixture
def unit_weights() -> dict:
    return {edge: 1 for edge in EDGES}


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()
