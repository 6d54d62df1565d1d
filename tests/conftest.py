from __future__ import annotations

import pytest

_CONFIG_ENV_VARS = (
    "CREDENTIAL_REGISTRY_URL",
    "CREDENTIAL_REGISTRY_API_KEY",
    "ORG_GATEWAY_ID",
    "STAKER_DATA_MODEL_ID",
    "STAKE_SNAPSHOT_URL",
    "STAKE_SNAPSHOT_API_KEY",
    "STAKE_SNAPSHOT_CACHE_TTL_SECONDS",
    "STAKER_PDA_SUBTYPE",
    "RESOLVER_WORKERS",
    "RECONCILE_INTERVAL_SECONDS",
    "STAKEPDA_DATA_DIR",
)


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
