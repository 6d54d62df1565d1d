"""HTTP client for the credential registry API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from stakepda.adapters.http_resilience import (
    ClientFactory,
    build_limiter,
    default_client_factory,
)
from stakepda.config.registry import RegistryConfig, get_registry_config
from stakepda.domain.errors import RegistryError, RetrievalError
from stakepda.domain.model import PdaType
from stakepda.domain.ports import CredentialRegistry

from .schema import ErrorResponse, IssuedPdasResponse, PdaIdResponse
from .translator import create_request, parse_credential, update_request

if TYPE_CHECKING:
    from aiolimiter import AsyncLimiter

    from stakepda.domain.model import AddSpec, CredentialRecord, UpdateSpec

log = getLogger(__name__)

ISSUED_PDAS_PATH = "pdas"


@dataclass(slots=True)
class HttpCredentialRegistry:
    config: RegistryConfig = field(default_factory=get_registry_config)
    client_factory: ClientFactory = field(default=default_client_factory)
    _limiter: AsyncLimiter | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        # One limiter per registry; every call opens a fresh client.
        self._limiter = build_limiter(self.config.resilience.ratelimit)

    def list_valid_staker_credentials(self, owner_scope: str) -> list[CredentialRecord]:
        return asyncio.run(self._list_async(owner_scope))

    def create_credential(self, spec: AddSpec) -> str:
        body = create_request(
            spec,
            org_gateway_id=self.config.org_gateway_id,
            data_model_id=self.config.data_model_id,
        )
        return asyncio.run(self._write_async("POST", ISSUED_PDAS_PATH, body))

    def update_credential(self, spec: UpdateSpec) -> str:
        path = f"{ISSUED_PDAS_PATH}/{spec.pda_id}"
        return asyncio.run(self._write_async("PATCH", path, update_request(spec)))

    async def _list_async(self, owner_scope: str) -> list[CredentialRecord]:
        params = {"org_gateway_id": owner_scope, "pda_type": PdaType.STAKER.value}
        async with self.client_factory(self.config.resilience, limiter=self._limiter) as client:
            try:
                response = await client.get(ISSUED_PDAS_PATH, params=params)
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise RetrievalError(f"Listing issued credentials failed: {exc}") from exc

            try:
                payload = IssuedPdasResponse.model_validate(response.json())
            except ValueError as exc:
                raise RetrievalError(f"Unexpected issued credentials payload: {exc}") from exc

        records: list[CredentialRecord] = []
        for item in payload.issued_pdas:
            try:
                records.append(parse_credential(item))
            except ValueError as exc:
                log.warning("Skipping malformed issued credential %r: %s", item.get("id"), exc)
        valid = [
            record for record in records if record.is_valid and record.staker_claim is not None
        ]
        log.info(
            "Fetched %d issued credential(s) for %s, %d valid staker credential(s)",
            len(records),
            owner_scope,
            len(valid),
        )
        return valid

    async def _write_async(self, method: str, path: str, body: dict[str, object]) -> str:
        async with self.client_factory(self.config.resilience, limiter=self._limiter) as client:
            try:
                response = await client.request(method, path, json=body)
            except httpx.HTTPError as exc:
                raise RegistryError(f"{method} {path} failed: {exc}") from exc

            if response.is_error:
                raise RegistryError(
                    f"{method} {path} rejected: {_error_message(response)}",
                    status_code=response.status_code,
                )

            try:
                return PdaIdResponse.model_validate(response.json()).id
            except ValueError as exc:
                raise RegistryError(f"Unexpected response to {method} {path}: {exc}") from exc


def _error_message(response: httpx.Response) -> str:
    try:
        return ErrorResponse.model_validate(response.json()).message
    except ValueError:
        return f"HTTP {response.status_code}"


if TYPE_CHECKING:
    _registry_check: CredentialRegistry = HttpCredentialRegistry()
