"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger("stopgraph")


def configure_logging(
    config: Optional[ObservabilityConfig] = None,
    level: Optional[str] = None,
) -> None:
    """Attach a stream handler to the ``stopgraph`` logger.

    Args:
        config: Logging settings; defaults to the application config.
        level: Level overriding ``config.level`` (e.g. from the CLI).

    Raises:
        ConfigurationError: If the level is not a standard level name.
    """
    config = config or get_config().observability
    resolved = (level or config.level).strip().upper()
    if resolved not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {resolved!r}; "
            f"expected one of {', '.join(LOG_LEVELS)}",
            setting_name="level",
        )

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(handler)

    logger.setLevel(resolved)
    logger.debug("Logging configured", extra={"level": resolved})
