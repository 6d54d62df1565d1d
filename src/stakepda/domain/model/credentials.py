"""Issued credential records ("PDAs") and their claim variants.

Claims form a tagged union keyed by ``pda_type``; each variant carries only the
fields valid for it. Reconciliation only ever looks at :class:`StakerClaim`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from .enums import (
    BuilderSubtype,
    CitizenSubtype,
    CredentialStatus,
    OwnershipModel,
    PdaType,
    StakerSubtype,
)
from .snapshot import Amount, StakeEntry


@dataclass(frozen=True, slots=True)
class Wallet:
    address: str
    amount: Amount

    @classmethod
    def from_entry(cls, entry: StakeEntry) -> Wallet:
        return cls(address=entry.wallet_address, amount=entry.staked_amount)

    def as_payload(self) -> dict[str, object]:
        return {"address": self.address, "amount": self.amount}


@dataclass(frozen=True, slots=True, kw_only=True)
class StakerClaim:
    point: Amount
    pda_subtype: StakerSubtype
    type: OwnershipModel
    service_domain: str | None = None
    wallets: tuple[Wallet, ...] = ()
    pda_type: Literal[PdaType.STAKER] = field(default=PdaType.STAKER, init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CitizenClaim:
    point: Amount
    pda_subtype: CitizenSubtype
    pda_type: Literal[PdaType.CITIZEN] = field(default=PdaType.CITIZEN, init=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class BuilderClaim:
    point: Amount
    pda_subtype: BuilderSubtype
    pda_type: Literal[PdaType.BUILDER] = field(default=PdaType.BUILDER, init=False)


Claim: TypeAlias = StakerClaim | CitizenClaim | BuilderClaim


@dataclass(frozen=True, slots=True, kw_only=True)
class CredentialRecord:
    """One issued credential as reported by the registry."""

    id: str
    status: CredentialStatus
    claim: Claim
    owner_gateway_id: str

    @property
    def is_valid(self) -> bool:
        return self.status is CredentialStatus.VALID

    @property
    def staker_claim(self) -> StakerClaim | None:
        if isinstance(self.claim, StakerClaim):
            return self.claim
        return None

    def held_under(self, model: OwnershipModel) -> bool:
        """Whether this is a staker credential for the given ownership model."""

        claim = self.staker_claim
        return claim is not None and claim.type is model
