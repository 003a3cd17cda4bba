"""Application configuration helpers."""

from __future__ import annotations

from .env import (
    ConfigurationError,
    MissingConfigurationError,
    env_flag,
    env_int,
    optional_env_var,
    require_env_var,
    require_env_vars,
)
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .source import DEFAULT_TYPE_PREFIX, SourceConfig, get_source_config
from .storage import DatabaseConfig, default_data_dir, get_database_config
from .sync import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CREATE_NODES_CONCURRENCY,
    DEFAULT_PAGE_SIZE,
    IngestSettings,
    get_ingest_settings,
)

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_CREATE_NODES_CONCURRENCY",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TYPE_PREFIX",
    "ConfigurationError",
    "DatabaseConfig",
    "IngestSettings",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SourceConfig",
    "configure_logging",
    "default_data_dir",
    "env_flag",
    "env_int",
    "get_database_config",
    "get_ingest_settings",
    "get_source_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
