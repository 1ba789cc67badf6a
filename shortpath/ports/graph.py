"""Graph ports - Abstractions for graphs, edge weights and routing.

These protocols define what the engine consumes from the outside world:
a graph that can enumerate adjacency, a source of edge weights, and
the higher-level repository/solver pair used by the container.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Hashable,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Union,
)

if TYPE_CHECKING:
    from ..domain.models import RouteResult

Vertex = Hashable
Edge = Tuple[Vertex, Vertex]

# Either a mapping keyed by (u, v) or a lookup returning None when undefined
WeightLookup = Callable[[Vertex, Vertex], Optional[float]]
EdgeWeightSource = Union[Mapping[Edge, float], WeightLookup]


class GraphPort(Protocol):
    """Port for the graph the engine traverses.

    Implementation: adapters/graph/adjacency_graph.py

    The engine never mutates the graph; it only asks for its
    directedness, its vertex set and the neighbours of a vertex.
    """

    def is_directed(self) -> bool:
        """Return True if edges are ordered pairs."""
        ...

    def vertices(self) -> Sequence[Vertex]:
        """Return every vertex of the graph."""
        ...

    def each_adjacent(self, u: Vertex, callback: Callable[[Vertex], None]) -> None:
        """Invoke ``callback`` once per vertex adjacent to ``u``.

        Adjacent means reachable through an outgoing edge (directed) or
        an incident edge (undirected).
        """
        ...


class GraphRepositoryPort(Protocol):
    """Port for loading a weighted graph.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> Tuple[GraphPort, Mapping[Edge, float]]:
        """Load the graph and its edge weights.

        Returns:
            The graph and a mapping of (u, v) pairs to weights.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: GraphPort,
        weights: EdgeWeightSource,
        source: Vertex,
        target: Vertex,
    ) -> RouteResult:
        """Find the shortest route between two vertices.

        Args:
            graph: The graph to search.
            weights: Edge weights of the graph.
            source: Source vertex.
            target: Target vertex.

        Returns:
            RouteResult with path and total distance.
        """
        ...
