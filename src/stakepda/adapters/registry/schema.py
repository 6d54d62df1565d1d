"""Pydantic models describing credential registry payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from stakepda.domain.model import (
    BuilderSubtype,
    CitizenSubtype,
    CredentialStatus,
    OwnershipModel,
    StakerSubtype,
)


class RegistryBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class WalletPayload(RegistryBaseModel):
    address: str
    amount: int | float


class StakerClaimPayload(RegistryBaseModel):
    pda_type: Literal["staker"] = Field(alias="pdaType")
    point: int | float
    pda_subtype: StakerSubtype = Field(alias="pdaSubtype")
    type: OwnershipModel
    service_domain: str | None = Field(default=None, alias="serviceDomain")
    wallets: list[WalletPayload] = Field(default_factory=list)


class CitizenClaimPayload(RegistryBaseModel):
    pda_type: Literal["citizen"] = Field(alias="pdaType")
    point: int | float
    pda_subtype: CitizenSubtype = Field(alias="pdaSubtype")


class BuilderClaimPayload(RegistryBaseModel):
    pda_type: Literal["builder"] = Field(alias="pdaType")
    point: int | float
    pda_subtype: BuilderSubtype = Field(alias="pdaSubtype")


ClaimPayload = Annotated[
    StakerClaimPayload | CitizenClaimPayload | BuilderClaimPayload,
    Field(discriminator="pda_type"),
]


class OwnerPayload(RegistryBaseModel):
    gateway_id: str = Field(alias="gatewayId")


class DataAssetPayload(RegistryBaseModel):
    claim: ClaimPayload
    owner: OwnerPayload


class IssuedPdaPayload(RegistryBaseModel):
    id: str
    status: CredentialStatus
    data_asset: DataAssetPayload = Field(alias="dataAsset")


class IssuedPdasResponse(RegistryBaseModel):
    issued_pdas: list[Mapping[str, object]] = Field(alias="issuedPDAs")


class PdaIdResponse(RegistryBaseModel):
    id: str


class ErrorResponse(RegistryBaseModel):
    message: str
    code: str | None = None


IssuedPdaPayloadInput = IssuedPdaPayload | Mapping[str, object]
