"""Services layer - Application orchestration.

Available services:
- RouteService: Shortest-path queries over the configured graph
"""

from .route_service import RouteService

__all__ = ["RouteService"]
