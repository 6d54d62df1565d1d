"""Translate between registry payloads and domain credential types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stakepda.domain.model import (
    BuilderClaim,
    CitizenClaim,
    CredentialRecord,
    OwnershipModel,
    PdaType,
    StakerClaim,
    Wallet,
)

from .schema import (
    BuilderClaimPayload,
    CitizenClaimPayload,
    IssuedPdaPayload,
    StakerClaimPayload,
)

if TYPE_CHECKING:
    from stakepda.domain.model import AddSpec, Claim, UpdateSpec

    from .schema import ClaimPayload, IssuedPdaPayloadInput


def parse_credential(payload: IssuedPdaPayloadInput) -> CredentialRecord:
    model = (
        payload
        if isinstance(payload, IssuedPdaPayload)
        else IssuedPdaPayload.model_validate(payload)
    )
    return CredentialRecord(
        id=model.id,
        status=model.status,
        claim=_parse_claim(model.data_asset.claim),
        owner_gateway_id=model.data_asset.owner.gateway_id,
    )


def _parse_claim(payload: ClaimPayload) -> Claim:
    if isinstance(payload, StakerClaimPayload):
        return StakerClaim(
            point=payload.point,
            pda_subtype=payload.pda_subtype,
            type=payload.type,
            service_domain=payload.service_domain,
            wallets=tuple(
                Wallet(address=wallet.address, amount=wallet.amount) for wallet in payload.wallets
            ),
        )
    if isinstance(payload, CitizenClaimPayload):
        return CitizenClaim(point=payload.point, pda_subtype=payload.pda_subtype)
    if isinstance(payload, BuilderClaimPayload):
        return BuilderClaim(point=payload.point, pda_subtype=payload.pda_subtype)
    raise TypeError(f"Unsupported claim payload: {type(payload).__name__}")


def create_request(spec: AddSpec, *, org_gateway_id: str, data_model_id: str) -> dict[str, object]:
    """Build the body that issues a new staker credential for ``spec``."""

    claim: dict[str, object] = {
        "point": spec.point,
        "pdaType": PdaType.STAKER.value,
        "pdaSubtype": spec.pda_sub_type.value,
        "type": spec.node_type.value,
    }
    # Non-custodian credentials are matched on their owning domain.
    if spec.node_type is OwnershipModel.NON_CUSTODIAN:
        claim["serviceDomain"] = spec.owner
    elif spec.service_domain is not None:
        claim["serviceDomain"] = spec.service_domain
    claim["wallets"] = [wallet.as_payload() for wallet in spec.wallets]
    return {
        "org_gateway_id": org_gateway_id,
        "data_model_id": data_model_id,
        "owner": spec.owner,
        "claim": claim,
    }


def update_request(spec: UpdateSpec) -> dict[str, object]:
    """Build the body for updating an issued credential; ``pda_id`` goes in the path."""

    body: dict[str, object] = {"point": spec.point}
    if spec.wallets is not None:
        body["wallets"] = [wallet.as_payload() for wallet in spec.wallets]
    return body
