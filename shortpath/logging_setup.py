"""Apply the observability settings to the standard logging module."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Configure the ``shortpath`` logger hierarchy.

    Args:
        config: Logging settings; defaults to the application config.

    Returns:
        The package root logger.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="SHORTPATH_LOG_LEVEL",
            expected_type="DEBUG|INFO|WARNING|ERROR|CRITICAL",
        )

    logger = logging.getLogger("shortpath")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(handler)
    return logger
