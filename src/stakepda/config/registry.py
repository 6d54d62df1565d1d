"""Credential registry configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

REGISTRY_TIMEOUT_SECONDS = 20.0


@dataclass(frozen=True)
class RegistryConfig:
    """Holds credential registry API configuration values."""

    base_url: str
    api_key: str
    org_gateway_id: str
    data_model_id: str
    resilience: ResilienceConfig


def get_registry_config(*, resilience: ResilienceConfig | None = None) -> RegistryConfig:
    values = require_env_vars(
        (
            "CREDENTIAL_REGISTRY_URL",
            "CREDENTIAL_REGISTRY_API_KEY",
            "ORG_GATEWAY_ID",
            "STAKER_DATA_MODEL_ID",
        )
    )
    base_url = values["CREDENTIAL_REGISTRY_URL"].rstrip("/") + "/"
    return RegistryConfig(
        base_url=base_url,
        api_key=values["CREDENTIAL_REGISTRY_API_KEY"],
        org_gateway_id=values["ORG_GATEWAY_ID"],
        data_model_id=values["STAKER_DATA_MODEL_ID"],
        resilience=resilience
        or ResilienceConfig(
            name="credential-registry",
            base_url=base_url,
            timeout_seconds=REGISTRY_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            default_headers={"x-api-key": values["CREDENTIAL_REGISTRY_API_KEY"]},
        ),
    )
