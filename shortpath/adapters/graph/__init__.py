"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- AdjacencyGraph: In-memory graph implementing GraphPort
- CSVGraphRepository: Loads a weighted graph from CSV files
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .adjacency_graph import AdjacencyGraph
from .csv_repository import CSVGraphRepository
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["AdjacencyGraph", "CSVGraphRepository", "DijkstraRouteSolver"]
