"""Single-source shortest paths using Dijkstra's algorithm.

The engine seeds a decrease-key queue with the source, repeatedly pops
the closest frontier vertex, relaxes its edges to non-finalized
neighbours and finalizes it. All per-vertex state lives in the
visitor's TraversalState, which is rebuilt on every run, so one
DijkstraAlgorithm can be reused for several sources.

Weights are read through NonNegativeEdgeWeights: the first undefined
or negative weight on an examined edge aborts the run with
InvalidWeightError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, List, Optional

from ..domain.models import Color, ShortestPathTree
from ..ports.graph import EdgeWeightSource, GraphPort
from ..ports.visitor import DijkstraVisitorPort
from .edge_weights import NonNegativeEdgeWeights
from .path_builder import PathBuilder
from .queue import DecreaseKeyQueue
from .visitor import DijkstraVisitor, StopSearch

logger = logging.getLogger(__name__)

Path = List[Hashable]

_NO_TARGET = object()


def _describe(target: Any) -> Any:
    return None if target is _NO_TARGET else target


class DijkstraAlgorithm:
    """Dijkstra's algorithm over a graph with non-negative edge weights.

    Args:
        graph: Graph to search, see GraphPort.
        edge_weights: Mapping of (u, v) to weight, or a lookup callable.
        visitor: Visitor receiving the run events; a DijkstraVisitor
            is created when omitted.
    """

    def __init__(
        self,
        graph: GraphPort,
        edge_weights: EdgeWeightSource,
        visitor: Optional[DijkstraVisitorPort] = None,
    ) -> None:
        self.graph = graph
        self.edge_weights = NonNegativeEdgeWeights(edge_weights, graph.is_directed())
        self.visitor: DijkstraVisitorPort = visitor or DijkstraVisitor()
        self.queue = DecreaseKeyQueue()

    def shortest_path(self, source: Hashable, target: Hashable) -> Optional[Path]:
        """Find the shortest path from ``source`` to ``target``.

        The search stops as soon as ``target`` is popped from the queue.

        Returns:
            The path as a list of vertices, or None if ``target`` is
            unreachable.

        Raises:
            InvalidWeightError: If an examined edge has a negative or
                undefined weight.
        """
        self._init(source)
        self._relax_edges(source, target)
        return PathBuilder(source, self.visitor.state.parents).path(target)

    def shortest_paths(self, source: Hashable) -> Dict[Hashable, Optional[Path]]:
        """Find the shortest path from ``source`` to every vertex.

        Returns:
            A dict mapping each vertex of the graph to its path, or to
            None if unreachable. The source maps to ``[source]``.

        Raises:
            InvalidWeightError: If an examined edge has a negative or
                undefined weight.
        """
        self._init(source)
        self._relax_edges(source)
        return PathBuilder(source, self.visitor.state.parents).paths(
            self.graph.vertices()
        )

    def shortest_path_tree(self, source: Hashable) -> ShortestPathTree:
        """Run to exhaustion and return distances and parents of reachable vertices."""
        self._init(source)
        self._relax_edges(source)
        state = self.visitor.state
        return ShortestPathTree(
            source=source,
            distances={v: state.distance(v) for v in state.finalized()},
            parents=dict(state.parents),
        )

    def _init(self, source: Hashable) -> None:
        self.visitor.set_source(source)
        self.queue = DecreaseKeyQueue()
        self.queue.push(source, self.visitor.state.distance(source))

    def _relax_edges(self, source: Hashable, target: Any = _NO_TARGET) -> None:
        state = self.visitor.state
        logger.debug(
            "Dijkstra run started",
            extra={"source": source, "target": _describe(target)},
        )

        try:
            while self.queue:
                u = self.queue.pop_min()

                if target is not _NO_TARGET and u == target:
                    # target is final once popped
                    state.mark_finalized(u)
                    break

                self.visitor.examine_vertex(u)
                self.graph.each_adjacent(u, lambda v: self._relax_neighbour(u, v))
                state.mark_finalized(u)
                self.visitor.finish_vertex(u)
        except StopSearch:
            logger.debug("Dijkstra run stopped by visitor", extra={"source": source})

        logger.debug(
            "Dijkstra run finished",
            extra={
                "source": source,
                "target": _describe(target),
                "finalized": sum(1 for _ in state.finalized()),
                "frontier": len(self.queue),
            },
        )

    def _relax_neighbour(self, u: Hashable, v: Hashable) -> None:
        if not self.visitor.state.is_finalized(v):
            self._relax_edge(u, v)

    def _relax_edge(self, u: Hashable, v: Hashable) -> None:
        state = self.visitor.state
        self.visitor.examine_edge(u, v)

        new_v_distance = state.distance(u) + self.edge_weights.edge_weight(u, v)

        if new_v_distance < state.distance(v):
            old_v_distance = state.distance(v)
            state.record(v, new_v_distance, u)

            color = state.color(v)
            if color is Color.UNVISITED:
                state.mark_frontier(v)
                self.queue.push(v, new_v_distance)
            elif color is Color.FRONTIER:
                self.queue.decrease_key(v, old_v_distance, new_v_distance)

            self.visitor.edge_relaxed(u, v)
        else:
            self.visitor.edge_not_relaxed(u, v)


def shortest_path(
    graph: GraphPort,
    edge_weights: EdgeWeightSource,
    source: Hashable,
    target: Hashable,
    visitor: Optional[DijkstraVisitorPort] = None,
) -> Optional[Path]:
    """Find the shortest path from ``source`` to ``target`` in ``graph``.

    Returns None if no path exists.

    Raises:
        InvalidWeightError: If an examined edge weight is negative or undefined.
    """
    return DijkstraAlgorithm(graph, edge_weights, visitor).shortest_path(source, target)


def shortest_paths(
    graph: GraphPort,
    edge_weights: EdgeWeightSource,
    source: Hashable,
    visitor: Optional[DijkstraVisitorPort] = None,
) -> Dict[Hashable, Optional[Path]]:
    """Find the shortest paths from ``source`` to each vertex of ``graph``.

    Unreachable vertices map to None; the source maps to ``[source]``.

    Raises:
        InvalidWeightError: If an examined edge weight is negative or undefined.
    """
    return DijkstraAlgorithm(graph, edge_weights, visitor).shortest_paths(source)
