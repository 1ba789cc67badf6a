"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the shortest-path core and the
collaborators it consumes: graphs, weight sources and visitors.
"""

from .graph import (
    Edge,
    EdgeWeightSource,
    GraphPort,
    GraphRepositoryPort,
    RouteSolverPort,
    Vertex,
    WeightLookup,
)
from .visitor import DijkstraVisitorPort

__all__ = [
    # Graph
    "Vertex",
    "Edge",
    "WeightLookup",
    "EdgeWeightSource",
    "GraphPort",
    "GraphRepositoryPort",
    "RouteSolverPort",
    # Visitor
    "DijkstraVisitorPort",
]
