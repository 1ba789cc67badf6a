"""Per-run vertex state: color, tentative distance and parent.

The maps are keyed by vertex identity and only hold vertices the run
has touched; lookups for anything else return the defaults
(UNVISITED, inf, no parent).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, Optional

from ..domain.models import Color


@dataclass
class TraversalState:
    """Color, distance and parent maps of one Dijkstra run.

    Attributes:
        colors: Vertex -> Color for every touched vertex
        distances: Vertex -> best known distance from the source
        parents: Vertex -> predecessor on the best known path
    """

    colors: Dict[Hashable, Color] = field(default_factory=dict)
    distances: Dict[Hashable, float] = field(default_factory=dict)
    parents: Dict[Hashable, Hashable] = field(default_factory=dict)

    def color(self, vertex: Hashable) -> Color:
        return self.colors.get(vertex, Color.UNVISITED)

    def distance(self, vertex: Hashable) -> float:
        return self.distances.get(vertex, math.inf)

    def parent(self, vertex: Hashable) -> Optional[Hashable]:
        return self.parents.get(vertex)

    def is_finalized(self, vertex: Hashable) -> bool:
        return self.color(vertex) is Color.FINALIZED

    def start(self, source: Hashable) -> None:
        """Seed the state with ``source`` at distance 0 on the frontier."""
        self.colors[source] = Color.FRONTIER
        self.distances[source] = 0.0

    def record(self, vertex: Hashable, distance: float, parent: Hashable) -> None:
        """Record a strictly shorter path to ``vertex`` through ``parent``."""
        self.distances[vertex] = distance
        self.parents[vertex] = parent

    def mark_frontier(self, vertex: Hashable) -> None:
        self.colors[vertex] = Color.FRONTIER

    def mark_finalized(self, vertex: Hashable) -> None:
        self.colors[vertex] = Color.FINALIZED

    def frontier(self) -> Iterator[Hashable]:
        """Iterate over the vertices currently colored FRONTIER."""
        return (v for v, c in self.colors.items() if c is Color.FRONTIER)

    def finalized(self) -> Iterator[Hashable]:
        """Iterate over the vertices currently colored FINALIZED."""
        return (v for v, c in self.colors.items() if c is Color.FINALIZED)
