"""Tests for the Dijkstra route solver adapter."""

import math

import pytest

from shortpath.adapters.graph import AdjacencyGraph, DijkstraRouteSolver
from shortpath.domain.errors import (
    InvalidWeightError,
    NoRouteFoundError,
    VertexNotFoundError,
)
from shortpath.graph.visitor import RecordingVisitor


class TestDijkstraRouteSolver:
    """Test suite for DijkstraRouteSolver."""

    @pytest.fixture
    def solver(self):
        return DijkstraRouteSolver()

    def test_solve_returns_route_with_distance(self, solver, directed_graph, unit_weights):
        unit_weights[(4, 5)] = 2.5

        route = solver.solve(directed_graph, unit_weights, 1, 5)

        assert route.path == (1, 2, 4, 5)
        assert route.total_distance == 4.5
        assert route.num_stops == 4
        assert not route.is_empty

    def test_solve_source_equals_target(self, solver, directed_graph, unit_weights):
        route = solver.solve(directed_graph, unit_weights, 2, 2)

        assert route.path == (2,)
        assert route.total_distance == 0

    def test_unknown_vertex_raises(self, solver, directed_graph, unit_weights):
        with pytest.raises(VertexNotFoundError) as excinfo:
            solver.solve(directed_graph, unit_weights, 1, 99)
        assert excinfo.value.vertex == 99

    def test_unreachable_raises(self, solver, directed_graph, unit_weights):
        directed_graph.add_vertex(7)

        with pytest.raises(NoRouteFoundError) as excinfo:
            solver.solve(directed_graph, unit_weights, 1, 7)
        assert (excinfo.value.source, excinfo.value.target) == (1, 7)

    def test_solve_safe_returns_empty_route(self, solver, directed_graph, unit_weights):
        directed_graph.add_vertex(7)

        unreachable = solver.solve_safe(directed_graph, unit_weights, 1, 7)
        unknown = solver.solve_safe(directed_graph, unit_weights, 1, 99)

        for route in (unreachable, unknown):
            assert route.is_empty
            assert math.isinf(route.total_distance)

    def test_solve_safe_still_raises_on_bad_weight(self, solver, directed_graph, unit_weights):
        unit_weights[(1, 2)] = -1

        with pytest.raises(InvalidWeightError):
            solver.solve_safe(directed_graph, unit_weights, 1, 5)

    def test_custom_visitor_factory(self, directed_graph, unit_weights):
        visitors = []

        def factory():
            visitors.append(RecordingVisitor())
            return visitors[-1]

        solver = DijkstraRouteSolver(visitor_factory=factory)
        solver.solve(directed_graph, unit_weights, 1, 3)
        solver.solve(directed_graph, unit_weights, 1, 5)

        assert len(visitors) == 2
        assert visitors[0].finish_order() == [1, 2, 6]

    def test_works_with_undirected_graph(self, solver):
        graph = AdjacencyGraph(directed=False)
        graph.add_edges(("x", "y"), ("y", "z"))

        route = solver.solve(graph, {("x", "y"): 2, ("y", "z"): 3}, "z", "x")

        assert route.path == ("z", "y", "x")
        assert route.total_distance == 5
