"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_int_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .reconcile import ReconcileConfig, get_reconcile_config
from .registry import RegistryConfig, get_registry_config
from .snapshot import SnapshotConfig, get_snapshot_config
from .storage import StorageConfig, get_storage_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ReconcileConfig",
    "RegistryConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "SnapshotConfig",
    "StorageConfig",
    "configure_logging",
    "get_reconcile_config",
    "get_registry_config",
    "get_snapshot_config",
    "get_storage_config",
    "optional_env_var",
    "optional_int_env_var",
    "require_env_vars",
]
