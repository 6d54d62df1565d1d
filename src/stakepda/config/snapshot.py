"""Stake snapshot provider configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, optional_int_env_var, require_env_vars
from .http_resilience import CacheConfig, ResilienceConfig

SNAPSHOT_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class SnapshotConfig:
    """Holds stake snapshot endpoint configuration values."""

    url: str
    api_key: str | None
    resilience: ResilienceConfig


def get_snapshot_config(*, resilience: ResilienceConfig | None = None) -> SnapshotConfig:
    values = require_env_vars(("STAKE_SNAPSHOT_URL",))
    api_key = optional_env_var("STAKE_SNAPSHOT_API_KEY")
    cache_ttl = optional_int_env_var("STAKE_SNAPSHOT_CACHE_TTL_SECONDS")

    headers = {"Authorization": f"Bearer {api_key}"} if api_key else None
    cache = (
        CacheConfig(backend="sqlite", default_ttl_seconds=float(cache_ttl))
        if cache_ttl is not None
        else None
    )
    return SnapshotConfig(
        url=values["STAKE_SNAPSHOT_URL"],
        api_key=api_key,
        resilience=resilience
        or ResilienceConfig(
            name="stake-snapshot",
            timeout_seconds=SNAPSHOT_TIMEOUT_SECONDS,
            cache=cache,
            default_headers=headers,
        ),
    )
