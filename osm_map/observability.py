"""Logging setup for the osm_map logger tree."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("osm_map")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the ``osm_map`` logger.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.

    Args:
        config: Logging settings; defaults to the global configuration.

    Returns:
        The configured package logger.
    """
    config = config or get_config().observability

    for handler in list(logger.handlers):
        if getattr(handler, "_osm_map_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    handler._osm_map_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(config.level.upper())

    logger.debug("Logging configured", extra={"level": config.level})
    return logger
