"""Top-level package for shortpath.

Single-source shortest paths with Dijkstra's algorithm over any graph
that can enumerate its adjacency, with pluggable visitors for
instrumentation and a decrease-key priority queue.

    from shortpath import AdjacencyGraph, shortest_path

    graph = AdjacencyGraph()
    graph.add_edges((1, 2), (2, 3))
    shortest_path(graph, {(1, 2): 1, (2, 3): 2}, 1, 3)  # [1, 2, 3]
"""

from .adapters.graph import AdjacencyGraph, CSVGraphRepository, DijkstraRouteSolver
from .domain import (
    Color,
    GraphError,
    InvalidWeightError,
    NoRouteFoundError,
    PathReconstructionError,
    QueueProtocolError,
    RouteResult,
    ShortestPathError,
    ShortestPathTree,
    VertexNotFoundError,
)
from .graph import (
    DecreaseKeyQueue,
    DijkstraAlgorithm,
    DijkstraVisitor,
    NonNegativeEdgeWeights,
    PathBuilder,
    RecordingVisitor,
    StopSearch,
    TraversalState,
    shortest_path,
    shortest_paths,
)

__all__ = [
    "shortest_path",
    "shortest_paths",
    "DijkstraAlgorithm",
    "DijkstraVisitor",
    "RecordingVisitor",
    "StopSearch",
    "DecreaseKeyQueue",
    "NonNegativeEdgeWeights",
    "PathBuilder",
    "TraversalState",
    "AdjacencyGraph",
    "CSVGraphRepository",
    "DijkstraRouteSolver",
    "Color",
    "RouteResult",
    "ShortestPathTree",
    "ShortestPathError",
    "InvalidWeightError",
    "QueueProtocolError",
    "PathReconstructionError",
    "GraphError",
    "VertexNotFoundError",
    "NoRouteFoundError",
]
