"""Shortest-path core.

This subpackage contains Dijkstra's algorithm and its building blocks:
the validating weight view, the per-run traversal state, the
decrease-key queue, the visitors and the path builder.
"""

from .dijkstra import DijkstraAlgorithm, shortest_path, shortest_paths
from .edge_weights import NonNegativeEdgeWeights
from .path_builder import PathBuilder
from .queue import DecreaseKeyQueue
from .traversal_state import TraversalState
from .visitor import DijkstraVisitor, RecordingVisitor, StopSearch

__all__ = [
    "DijkstraAlgorithm",
    "shortest_path",
    "shortest_paths",
    "NonNegativeEdgeWeights",
    "PathBuilder",
    "DecreaseKeyQueue",
    "TraversalState",
    "DijkstraVisitor",
    "RecordingVisitor",
    "StopSearch",
]
