"""Typed domain errors for the shortest-path engine.

All errors inherit from ShortestPathError and can optionally wrap a
root cause exception for debugging.

Two families live here:
- data errors the caller must fix (bad weights, bad graph files)
- internal invariant violations (queue protocol, parent map) that
  indicate a bug in the engine or in a custom visitor
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional, Tuple


@dataclass
class ShortestPathError(Exception):
    """Base error for the shortest-path domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidWeightError(ShortestPathError, ValueError):
    """An examined edge has a negative or undefined weight.

    Fatal for the whole run: a static weight map will not change on retry.

    Attributes:
        edge: The (u, v) pair whose weight was queried
        weight: The offending value, or None when no weight is defined
    """

    edge: Optional[Tuple[Hashable, Hashable]] = None
    weight: Optional[float] = None

    @property
    def is_missing(self) -> bool:
        """Check if the error is due to an undefined weight."""
        return self.weight is None


@dataclass
class QueueProtocolError(ShortestPathError):
    """The priority queue was used against its contract.

    Raised on duplicate push, decrease-key of a non-live vertex, a
    stale old key, a non-decreasing new key, or pop from an empty queue.

    Attributes:
        vertex: The vertex involved, if any
    """

    vertex: Any = None


@dataclass
class PathReconstructionError(ShortestPathError):
    """The parent map does not form a tree rooted at the source.

    Attributes:
        vertex: The target whose path could not be rebuilt
    """

    vertex: Any = None


@dataclass
class GraphError(ShortestPathError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class VertexNotFoundError(ShortestPathError):
    """Vertex not found in the graph.

    Attributes:
        vertex: The vertex that was not found
    """

    vertex: Any = None


@dataclass
class NoRouteFoundError(ShortestPathError):
    """No path exists between the requested vertices.

    Attributes:
        source: Source vertex
        target: Target vertex
    """

    source: Any = None
    target: Any = None


@dataclass
class ConfigurationError(ShortestPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
