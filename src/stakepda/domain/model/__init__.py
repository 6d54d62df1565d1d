"""Domain model for staker credential reconciliation."""

from __future__ import annotations

from .actions import AddSpec, UpcomingActions, UpdateSpec
from .credentials import (
    BuilderClaim,
    CitizenClaim,
    Claim,
    CredentialRecord,
    StakerClaim,
    Wallet,
)
from .enums import (
    BuilderSubtype,
    CitizenSubtype,
    CredentialStatus,
    OwnershipModel,
    PdaType,
    StakerSubtype,
)
from .snapshot import Amount, StakeEntry, StakeSnapshot

__all__ = [
    "AddSpec",
    "Amount",
    "BuilderClaim",
    "BuilderSubtype",
    "CitizenClaim",
    "CitizenSubtype",
    "Claim",
    "CredentialRecord",
    "CredentialStatus",
    "OwnershipModel",
    "PdaType",
    "StakeEntry",
    "StakeSnapshot",
    "StakerClaim",
    "StakerSubtype",
    "UpcomingActions",
    "UpdateSpec",
    "Wallet",
]
