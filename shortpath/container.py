"""Wiring of the route-finding components.

Each port is bound to a factory. Bound ports resolve to one shared
instance unless bound with ``shared=False``; rebinding a port drops the
instance built from the previous factory.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Set

from .config import AppConfig, get_config

Factory = Callable[[], Any]


@dataclass
class Container:
    """Registry of factories keyed by port type.

    Tests swap an adapter by rebinding its port:

        container = Container.create_default()
        container.register(GraphRepositoryPort, lambda: InMemoryRepository())
        service = container.resolve(RouteService)
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type, Factory] = field(default_factory=dict, repr=False)
    _shared: Set[type] = field(default_factory=set, repr=False)
    _instances: Dict[type, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port: type, factory: Factory, singleton: bool = True) -> None:
        with self._lock:
            self._factories[port] = factory
            self._instances.pop(port, None)
            if singleton:
                self._shared.add(port)
            else:
                self._shared.discard(port)

    def resolve(self, port: type) -> Any:
        """Return the instance bound to ``port``.

        Raises:
            KeyError: If nothing is bound to ``port``.
        """
        with self._lock:
            try:
                factory = self._factories[port]
            except KeyError:
                raise KeyError(f"no factory bound to {port!r}") from None
            if port not in self._shared:
                return factory()
            if port not in self._instances:
                self._instances[port] = factory()
            return self._instances[port]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the CSV repository, the Dijkstra solver and RouteService."""
        from .adapters.graph import CSVGraphRepository, DijkstraRouteSolver
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .services import RouteService

        container = cls(config=config or get_config())
        graph_config = container.config.graph

        container.register(GraphRepositoryPort, lambda: CSVGraphRepository(graph_config))
        container.register(RouteSolverPort, DijkstraRouteSolver)
        container.register(
            RouteService,
            lambda: RouteService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
            ),
        )
        return container


@lru_cache(maxsize=1)
def get_container() -> Container:
    """Return the process-wide container built from get_config()."""
    return Container.create_default()


def reset_container() -> None:
    get_container.cache_clear()
