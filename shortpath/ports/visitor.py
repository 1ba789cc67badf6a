"""Visitor port - Instrumentation interface for a Dijkstra run.

The engine calls these hooks at fixed points of the relaxation loop.
Any object that provides them (and a ``state`` attribute holding the
run's TraversalState) can be passed to the engine; no base class is
required.

Event order for one popped vertex ``u``:

    examine_vertex(u)
    for each non-finalized neighbour v:
        examine_edge(u, v)
        edge_relaxed(u, v) | edge_not_relaxed(u, v)
    finish_vertex(u)

``set_source`` is called once before the loop and must start a fresh
TraversalState with the source at distance 0 and colored FRONTIER.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Protocol

if TYPE_CHECKING:
    from ..graph.traversal_state import TraversalState


class DijkstraVisitorPort(Protocol):
    """Port for observing (and steering) a Dijkstra run.

    Implementations:
    - graph/visitor.py (DijkstraVisitor) - default bookkeeping
    - graph/visitor.py (RecordingVisitor) - records the event stream

    A visitor may stop the run by raising StopSearch from any hook.
    It must not move a vertex backwards through the color states.
    """

    state: TraversalState

    def set_source(self, source: Hashable) -> None:
        ...

    def examine_vertex(self, u: Hashable) -> None:
        ...

    def examine_edge(self, u: Hashable, v: Hashable) -> None:
        ...

    def edge_relaxed(self, u: Hashable, v: Hashable) -> None:
        ...

    def edge_not_relaxed(self, u: Hashable, v: Hashable) -> None:
        ...

    def finish_vertex(self, u: Hashable) -> None:
        ...
