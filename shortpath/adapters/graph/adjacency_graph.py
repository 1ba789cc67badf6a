"""In-memory adjacency graph.

A small GraphPort implementation backed by insertion-ordered dicts.
Neighbours are enumerated in the order their edges were added, which
makes tie-breaking between equal-cost paths reproducible.
"""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, List, Tuple

from ...domain.errors import VertexNotFoundError


class AdjacencyGraph:
    """Directed or undirected graph stored as adjacency lists.

    Undirected edges are stored under both endpoints.

    Example:
        graph = AdjacencyGraph(directed=True)
        graph.add_edges((1, 2), (2, 3))
        graph.adjacent_vertices(1)  # [2]
    """

    def __init__(self, directed: bool = True) -> None:
        self._directed = directed
        self._adjacency: Dict[Hashable, Dict[Hashable, None]] = {}

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return (
            f"AdjacencyGraph({kind}, vertices={self.num_vertices()}, "
            f"edges={self.num_edges()})"
        )

    def is_directed(self) -> bool:
        return self._directed

    def add_vertex(self, vertex: Hashable) -> None:
        self._adjacency.setdefault(vertex, {})

    def add_vertices(self, *vertices: Hashable) -> None:
        for vertex in vertices:
            self.add_vertex(vertex)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        self.add_vertex(u)
        self.add_vertex(v)
        self._adjacency[u][v] = None
        if not self._directed:
            self._adjacency[v][u] = None

    def add_edges(self, *edges: Tuple[Hashable, Hashable]) -> None:
        for u, v in edges:
            self.add_edge(u, v)

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        return v in self._adjacency.get(u, {})

    def vertices(self) -> List[Hashable]:
        return list(self._adjacency)

    def edges(self) -> Iterable[Tuple[Hashable, Hashable]]:
        """Yield each edge once; undirected edges in insertion orientation."""
        seen = set()
        for u, neighbours in self._adjacency.items():
            for v in neighbours:
                if not self._directed:
                    key = frozenset((u, v))
                    if key in seen:
                        continue
                    seen.add(key)
                yield u, v

    def adjacent_vertices(self, u: Hashable) -> List[Hashable]:
        try:
            return list(self._adjacency[u])
        except KeyError:
            raise VertexNotFoundError(
                f"vertex {u!r} is not in the graph", vertex=u
            ) from None

    def each_adjacent(self, u: Hashable, callback: Callable[[Hashable], None]) -> None:
        for v in self.adjacent_vertices(u):
            callback(v)

    def num_vertices(self) -> int:
        return len(self._adjacency)

    def num_edges(self) -> int:
        return sum(1 for _ in self.edges())
