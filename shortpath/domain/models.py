"""Immutable domain models for the shortest-path engine.

These models have no external dependencies and represent the values
that flow out of a run: vertex colors, routes and shortest-path trees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Hashable, List, Mapping, Optional


class Color(Enum):
    """Traversal color of a vertex during a Dijkstra run.

    Transitions only go forward: UNVISITED -> FRONTIER -> FINALIZED.
    """

    UNVISITED = auto()
    FRONTIER = auto()
    FINALIZED = auto()


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of route computation between two vertices.

    Attributes:
        path: Ordered tuple of vertices forming the route
        total_distance: Sum of the edge weights along the route
    """

    path: tuple[Any, ...]
    total_distance: float

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of vertices in the route."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class ShortestPathTree:
    """Distances and parent pointers of a completed single-source run.

    Attributes:
        source: The source vertex of the run
        distances: Final distance of every reachable vertex
        parents: Predecessor of every reachable vertex except the source
    """

    source: Hashable
    distances: Mapping[Hashable, float] = field(default_factory=dict)
    parents: Mapping[Hashable, Hashable] = field(default_factory=dict)

    def is_reachable(self, vertex: Hashable) -> bool:
        return vertex in self.distances

    def distance_to(self, vertex: Hashable) -> float:
        """Return the shortest distance to ``vertex`` (inf if unreachable)."""
        return self.distances.get(vertex, math.inf)

    def path_to(self, vertex: Hashable) -> Optional[List[Hashable]]:
        """Return the shortest path to ``vertex``, or None if unreachable."""
        from ..graph.path_builder import PathBuilder

        return PathBuilder(self.source, self.parents).path(vertex)
