"""Default Dijkstra visitors.

DijkstraVisitor does the bookkeeping the engine relies on (a fresh
TraversalState per run) and forwards each event to handlers registered
with ``on``. RecordingVisitor additionally keeps the ordered event
stream, which is handy for metrics and for checking traversal order.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, Dict, Hashable, List, Tuple

from ..domain.models import Color
from .traversal_state import TraversalState

EVENTS = (
    "set_source",
    "examine_vertex",
    "examine_edge",
    "edge_relaxed",
    "edge_not_relaxed",
    "finish_vertex",
)

Handler = Callable[..., None]


class StopSearch(Exception):
    """Raised by a visitor or event handler to end a run early."""


class DijkstraVisitor:
    """Visitor that maintains the run's TraversalState.

    Example:
        visitor = DijkstraVisitor()
        visitor.on("finish_vertex", lambda u: order.append(u))
        shortest_paths(graph, weights, "A", visitor=visitor)
    """

    def __init__(self) -> None:
        self.state = TraversalState()
        self._handlers: DefaultDict[str, List[Handler]] = defaultdict(list)
        self._logger = logging.getLogger(__name__)

    def on(self, event: str, handler: Handler) -> None:
        """Register ``handler`` to be called after the visitor's own work.

        Raises:
            ValueError: If ``event`` is not one of the visitor events.
        """
        if event not in EVENTS:
            raise ValueError(
                f"unknown visitor event {event!r}, expected one of {', '.join(EVENTS)}"
            )
        self._handlers[event].append(handler)

    @property
    def distance_map(self) -> Dict[Hashable, float]:
        return dict(self.state.distances)

    @property
    def parents_map(self) -> Dict[Hashable, Hashable]:
        return dict(self.state.parents)

    @property
    def color_map(self) -> Dict[Hashable, Color]:
        return dict(self.state.colors)

    def finished_vertex(self, vertex: Hashable) -> bool:
        return self.state.is_finalized(vertex)

    def set_source(self, source: Hashable) -> None:
        self.state = TraversalState()
        self.state.start(source)
        self._logger.debug("Traversal state reset", extra={"source": source})
        self._emit("set_source", source)

    def examine_vertex(self, u: Hashable) -> None:
        self._emit("examine_vertex", u)

    def examine_edge(self, u: Hashable, v: Hashable) -> None:
        self._emit("examine_edge", u, v)

    def edge_relaxed(self, u: Hashable, v: Hashable) -> None:
        self._emit("edge_relaxed", u, v)

    def edge_not_relaxed(self, u: Hashable, v: Hashable) -> None:
        self._emit("edge_not_relaxed", u, v)

    def finish_vertex(self, u: Hashable) -> None:
        self._emit("finish_vertex", u)

    def _emit(self, event: str, *args: Any) -> None:
        for handler in self._handlers.get(event, ()):
            handler(*args)


class RecordingVisitor(DijkstraVisitor):
    """DijkstraVisitor that records every event in call order.

    Attributes:
        events: List of (event name, args) tuples
    """

    def __init__(self) -> None:
        super().__init__()
        self.events: List[Tuple[str, Tuple[Hashable, ...]]] = []

    def set_source(self, source: Hashable) -> None:
        self.events = []
        super().set_source(source)

    def _emit(self, event: str, *args: Any) -> None:
        self.events.append((event, args))
        super()._emit(event, *args)

    def of(self, event: str) -> List[Tuple[Hashable, ...]]:
        """Return the arguments of every recorded ``event``."""
        return [args for name, args in self.events if name == event]

    def finish_order(self) -> List[Hashable]:
        return [args[0] for args in self.of("finish_vertex")]

    def counts(self) -> Dict[str, int]:
        """Return how many times each event fired."""
        totals = {name: 0 for name in EVENTS}
        for name, _ in self.events:
            totals[name] += 1
        return totals
