"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InvalidWeightError,
    NoRouteFoundError,
    PathReconstructionError,
    QueueProtocolError,
    ShortestPathError,
    VertexNotFoundError,
)
from .models import Color, RouteResult, ShortestPathTree

__all__ = [
    # Models
    "Color",
    "RouteResult",
    "ShortestPathTree",
    # Errors
    "ShortestPathError",
    "InvalidWeightError",
    "QueueProtocolError",
    "PathReconstructionError",
    "GraphError",
    "VertexNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
