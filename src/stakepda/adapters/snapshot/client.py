"""HTTP stake snapshot provider."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from stakepda.adapters.http_resilience import ClientFactory, default_client_factory
from stakepda.config.snapshot import SnapshotConfig, get_snapshot_config
from stakepda.domain.errors import RetrievalError
from stakepda.domain.ports import StakeSnapshotProvider

from .schema import StakeSnapshotPayload
from .translator import parse_snapshot

if TYPE_CHECKING:
    from stakepda.domain.model import StakeSnapshot

log = getLogger(__name__)


@dataclass(slots=True)
class HttpStakeSnapshotProvider:
    """Fetch the stake snapshot document from a configured URL."""

    config: SnapshotConfig = field(default_factory=get_snapshot_config)
    client_factory: ClientFactory = field(default=default_client_factory)

    def fetch_snapshot(self) -> StakeSnapshot:
        return asyncio.run(self._fetch_snapshot_async())

    async def _fetch_snapshot_async(self) -> StakeSnapshot:
        async with self.client_factory(self.config.resilience) as client:
            try:
                response = await client.get(self.config.url)
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise RetrievalError(f"Stake snapshot request failed: {exc}") from exc

            try:
                payload = StakeSnapshotPayload.model_validate(response.json())
            except ValueError as exc:
                raise RetrievalError(f"Unexpected stake snapshot payload: {exc}") from exc

        snapshot = parse_snapshot(payload)
        log.info(
            "Fetched stake snapshot: custodian=%d, non_custodian=%d",
            len(snapshot.custodian),
            len(snapshot.non_custodian),
        )
        return snapshot


if TYPE_CHECKING:
    _provider_check: StakeSnapshotProvider = HttpStakeSnapshotProvider()
