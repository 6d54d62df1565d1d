"""Reusable fakes and builders for reconciliation tests."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from stakepda.domain.errors import RegistryError, ResolutionFailure, RetrievalError
from stakepda.domain.model import (
    AddSpec,
    CredentialRecord,
    CredentialStatus,
    OwnershipModel,
    StakeEntry,
    StakerClaim,
    StakerSubtype,
    StakeSnapshot,
    UpdateSpec,
    Wallet,
)

CUSTODIAN_DOMAIN = "example.comGATEWAY_ID=gatewayID"


def make_staker_record(
    *,
    pda_id: str = "pda_id",
    service_domain: str | None = CUSTODIAN_DOMAIN,
    model: OwnershipModel = OwnershipModel.CUSTODIAN,
    status: CredentialStatus = CredentialStatus.VALID,
    point: int = 10,
    owner: str = "gatewayID",
) -> CredentialRecord:
    return CredentialRecord(
        id=pda_id,
        status=status,
        claim=StakerClaim(
            point=point,
            pda_subtype=StakerSubtype.VALIDATOR,
            type=model,
            service_domain=service_domain,
            wallets=(Wallet(address="address", amount=1),),
        ),
        owner_gateway_id=owner,
    )


def custodian_entry(amount: int, wallet: str, domain: str = CUSTODIAN_DOMAIN) -> StakeEntry:
    return StakeEntry(staked_amount=amount, wallet_address=wallet, domain=domain)


def non_custodian_entry(amount: int, wallet: str) -> StakeEntry:
    return StakeEntry(staked_amount=amount, wallet_address=wallet)


class FakeResolver:
    """Resolver returning canned owners; unknown domains resolve to ``None``."""

    def __init__(
        self,
        owners: dict[str, str | None] | None = None,
        *,
        default: str | None = None,
        failing: frozenset[str] = frozenset(),
        crashing: frozenset[str] = frozenset(),
    ) -> None:
        self._owners = owners or {}
        self._default = default
        self._failing = failing
        self._crashing = crashing
        self._lock = threading.Lock()
        self.calls: list[str] = []

    def resolve_owner(self, encoded_domain: str) -> str | None:
        with self._lock:
            self.calls.append(encoded_domain)
        if encoded_domain in self._failing:
            raise ResolutionFailure("lookup failed", domain=encoded_domain)
        if encoded_domain in self._crashing:
            raise OSError(f"lookup for {encoded_domain} timed out")
        return self._owners.get(encoded_domain, self._default)


@dataclass
class FakeSnapshotProvider:
    snapshot: StakeSnapshot = field(default_factory=StakeSnapshot)
    error: RetrievalError | None = None
    calls: int = 0

    def fetch_snapshot(self) -> StakeSnapshot:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.snapshot


@dataclass
class FakeRegistry:
    credentials: list[CredentialRecord] = field(default_factory=list)
    list_error: RetrievalError | None = None
    rejected_ids: frozenset[str] = frozenset()
    rejected_owners: frozenset[str] = frozenset()
    scopes: list[str] = field(default_factory=list)
    created: list[AddSpec] = field(default_factory=list)
    updated: list[UpdateSpec] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)

    def list_valid_staker_credentials(self, owner_scope: str) -> list[CredentialRecord]:
        self.scopes.append(owner_scope)
        if self.list_error is not None:
            raise self.list_error
        return list(self.credentials)

    def create_credential(self, spec: AddSpec) -> str:
        self.calls.append("create")
        if spec.owner in self.rejected_owners:
            raise RegistryError("rejected", status_code=400)
        self.created.append(spec)
        return f"new-{len(self.created)}"

    def update_credential(self, spec: UpdateSpec) -> str:
        self.calls.append("update")
        if spec.pda_id in self.rejected_ids:
            raise RegistryError("rejected", status_code=409)
        self.updated.append(spec)
        return spec.pda_id
