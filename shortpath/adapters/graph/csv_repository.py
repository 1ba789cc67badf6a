"""CSV Graph Repository adapter.

Loads a weighted graph from two CSV files:
- vertices.csv with a ``vertex_id`` column
- edges.csv with ``from_id``, ``to_id`` and ``weight`` columns

Vertex identifiers are kept as strings. Weights are parsed but not
validated here; negative weights are reported by the engine when the
edge is examined.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from .adjacency_graph import AdjacencyGraph

Weights = Dict[Tuple[str, str], float]


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names, directedness)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[AdjacencyGraph] = field(default=None, repr=False)
    _weights: Optional[Weights] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Tuple[AdjacencyGraph, Weights]:
        """Load the graph and its edge weights from CSV files.

        Returns:
            The graph and a mapping of (from_id, to_id) to weight.

        Raises:
            GraphError: If the graph cannot be loaded.
        """
        if self._graph is not None and self._weights is not None:
            return self._graph, self._weights

        self._logger.debug(
            "Loading graph",
            extra={
                "vertices_path": str(self.config.vertices_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        try:
            graph, weights = self._load_graph_from_csv()
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load graph: {e}",
                file_path=str(self.config.edges_path),
                cause=e,
            )

        self._graph, self._weights = graph, weights
        self._logger.info(
            "Graph loaded",
            extra={"vertices": graph.num_vertices(), "edges": len(weights)},
        )
        return graph, weights

    def _load_graph_from_csv(self) -> Tuple[AdjacencyGraph, Weights]:
        """Internal method to load graph from CSV files."""
        graph = AdjacencyGraph(directed=self.config.directed)
        weights: Weights = {}

        # Load vertices
        with self.config.vertices_path.open(encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                vertex_id = (row.get("vertex_id") or "").strip()
                if vertex_id:
                    graph.add_vertex(vertex_id)

        # Load edges
        with self.config.edges_path.open(encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                from_id = (row.get("from_id") or "").strip()
                to_id = (row.get("to_id") or "").strip()
                weight_str = (row.get("weight") or "").strip()

                if not from_id or not to_id or not weight_str:
                    continue

                graph.add_edge(from_id, to_id)
                weights[(from_id, to_id)] = float(weight_str)

        return graph, weights

    def list_vertices(self) -> List[str]:
        """List all vertices of the loaded graph."""
        graph, _ = self.load()
        return graph.vertices()

    def clear_cache(self) -> None:
        """Clear cached graph data."""
        self._graph = None
        self._weights = None
        self._logger.debug("Graph cache cleared")
