"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration.

Configuration can be overridden via environment variables:
- SHORTPATH_GRAPH_DATA_DIR=/path/to/data
- SHORTPATH_GRAPH_DIRECTED=false
- SHORTPATH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with SHORTPATH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    vertices_file: str = "vertices.csv"
    edges_file: str = "edges.csv"
    directed: bool = True

    @property
    def vertices_path(self) -> Path:
        """Full path to vertices CSV file."""
        return self.data_dir / self.vertices_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SHORTPATH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.edges_path)
        print(config.observability.level)

    Environment variables prefixed with SHORTPATH_.
    """

    model_config = SettingsConfigDict(env_prefix="SHORTPATH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
