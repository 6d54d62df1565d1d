"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class CredentialStatus(StrEnum):
    VALID = "Valid"
    SUSPENDED = "Suspended"
    REVOKED = "Revoked"
    EXPIRED = "Expired"


class PdaType(StrEnum):
    """Discriminator for the claim variants carried by issued credentials."""

    CITIZEN = "citizen"
    BUILDER = "builder"
    STAKER = "staker"


class OwnershipModel(StrEnum):
    """How ownership of a staking domain is established."""

    CUSTODIAN = "custodian"
    NON_CUSTODIAN = "non-custodian"


class StakerSubtype(StrEnum):
    VALIDATOR = "Validator"
    LIQUIDITY_PROVIDER = "Liquidity Provider"
    GATEWAY = "Gateway"


class CitizenSubtype(StrEnum):
    POKT_DNA = "POKT DNA"
    POKT_DAO = "POKT DAO"


class BuilderSubtype(StrEnum):
    PROTOCOL_BUILDER = "Protocol Builder"
    PRIORITY_BUILDER = "Priority Builder"
    SOCKET_BUILDER = "Socket Builder"
    PROPOSAL_BUILDER = "Proposal Builder"
    BOUNTY_HUNTER = "Bounty Hunter"
    THOUGHT_LEADER = "Thought Leader"
    DAO_SCHOLAR = "DAO Scholar"
    OG_GOVERNOR = "OG Governor"
