"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for tunable behavior of the
graph store and for logging setup.

Configuration can be overridden via environment variables:
- WG_GRAPH_REJECT_NEGATIVE_WEIGHTS=false
- WG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph store configuration.

    Environment variables prefixed with WG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_GRAPH_")

    # Dijkstra is only correct for non-negative weights
    reject_negative_weights: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with WG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.reject_negative_weights)
        print(config.observability.level)

    Environment variables prefixed with WG_.
    """

    model_config = SettingsConfigDict(env_prefix="WG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format to the root logger.

    Args:
        config: Logging settings; defaults to the cached configuration.
    """
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format, force=True)
