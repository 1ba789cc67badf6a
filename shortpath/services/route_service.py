"""Route service - Shortest paths over the configured graph.

Joins a graph repository and a route solver so callers can ask for
routes by vertex id without handling graph loading themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional

from ..domain.errors import VertexNotFoundError
from ..domain.models import RouteResult, ShortestPathTree
from ..graph.dijkstra import DijkstraAlgorithm
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


@dataclass
class RouteService:
    """Main service for answering shortest-path queries.

    Attributes:
        graph_repository: Loads the weighted graph
        route_solver: Computes shortest routes
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def route(self, source: Hashable, target: Hashable) -> RouteResult:
        """Return the shortest route from ``source`` to ``target``.

        Raises:
            VertexNotFoundError: If either endpoint is unknown.
            NoRouteFoundError: If the target is unreachable.
            InvalidWeightError: If an examined edge weight is invalid.
        """
        graph, weights = self.graph_repository.load()
        route = self.route_solver.solve(graph, weights, source, target)
        self._logger.info(
            "Route computed",
            extra={"stops": route.num_stops, "distance": route.total_distance},
        )
        return route

    def routes_from(self, source: Hashable) -> Dict[Hashable, Optional[List[Hashable]]]:
        """Return the shortest path from ``source`` to every vertex.

        Raises:
            VertexNotFoundError: If ``source`` is unknown.
        """
        graph, weights = self.graph_repository.load()
        if source not in set(graph.vertices()):
            raise VertexNotFoundError(f"Source vertex not in graph: {source!r}", vertex=source)
        return DijkstraAlgorithm(graph, weights).shortest_paths(source)

    def tree_from(self, source: Hashable) -> ShortestPathTree:
        """Return the shortest-path tree rooted at ``source``."""
        graph, weights = self.graph_repository.load()
        if source not in set(graph.vertices()):
            raise VertexNotFoundError(f"Source vertex not in graph: {source!r}", vertex=source)
        tree = DijkstraAlgorithm(graph, weights).shortest_path_tree(source)
        self._logger.debug(
            "Shortest-path tree built",
            extra={"source": source, "reachable": len(tree.distances)},
        )
        return tree
