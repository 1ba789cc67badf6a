"""Dijkstra Route Solver adapter.

Wraps the shortest-path engine and adds:
- Domain model output (RouteResult)
- Endpoint validation
- Logging
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Hashable

from ...domain.errors import NoRouteFoundError, VertexNotFoundError
from ...domain.models import RouteResult
from ...graph.dijkstra import DijkstraAlgorithm
from ...graph.visitor import DijkstraVisitor
from ...ports.graph import EdgeWeightSource, GraphPort
from ...ports.visitor import DijkstraVisitorPort


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.

    Attributes:
        visitor_factory: Builds the visitor for each solve call
    """

    visitor_factory: Callable[[], DijkstraVisitorPort] = DijkstraVisitor
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: GraphPort,
        weights: EdgeWeightSource,
        source: Hashable,
        target: Hashable,
    ) -> RouteResult:
        """Find the shortest route between two vertices.

        Args:
            graph: The graph to search.
            weights: Edge weights of the graph.
            source: Source vertex.
            target: Target vertex.

        Returns:
            RouteResult with path and total distance.

        Raises:
            VertexNotFoundError: If source or target is not in the graph.
            NoRouteFoundError: If no path exists.
            InvalidWeightError: If an examined edge weight is invalid.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "target": target},
        )

        vertices = set(graph.vertices())
        for role, vertex in (("Source", source), ("Target", target)):
            if vertex not in vertices:
                raise VertexNotFoundError(
                    f"{role} vertex not in graph: {vertex!r}",
                    vertex=vertex,
                )

        route = self._route(graph, weights, source, target)

        if route.is_empty:
            self._logger.warning(
                "No route found",
                extra={"source": source, "target": target},
            )
            raise NoRouteFoundError(
                f"No path from {source!r} to {target!r}",
                source=source,
                target=target,
            )

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "target": target,
                "stops": route.num_stops,
                "distance": route.total_distance,
            },
        )
        return route

    def solve_safe(
        self,
        graph: GraphPort,
        weights: EdgeWeightSource,
        source: Hashable,
        target: Hashable,
    ) -> RouteResult:
        """Find the shortest route, returning an empty result when there is none.

        Unknown endpoints and unreachable targets give an empty
        RouteResult with infinite distance. Invalid weights still raise.
        """
        vertices = set(graph.vertices())
        if source not in vertices or target not in vertices:
            return RouteResult(path=(), total_distance=math.inf)
        return self._route(graph, weights, source, target)

    def _route(
        self,
        graph: GraphPort,
        weights: EdgeWeightSource,
        source: Hashable,
        target: Hashable,
    ) -> RouteResult:
        visitor = self.visitor_factory()
        path = DijkstraAlgorithm(graph, weights, visitor).shortest_path(source, target)
        if path is None:
            return RouteResult(path=(), total_distance=math.inf)
        return RouteResult(
            path=tuple(path),
            total_distance=visitor.state.distance(target),
        )
