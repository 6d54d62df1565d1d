"""Translate snapshot payloads into the domain snapshot model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stakepda.domain.model import StakeEntry, StakeSnapshot

from .schema import StakeSnapshotPayload

if TYPE_CHECKING:
    from .schema import StakeEntryPayload, StakeSnapshotPayloadInput


def parse_snapshot(payload: StakeSnapshotPayloadInput) -> StakeSnapshot:
    model = (
        payload
        if isinstance(payload, StakeSnapshotPayload)
        else StakeSnapshotPayload.model_validate(payload)
    )
    return StakeSnapshot(
        custodian={
            key: [_entry(item, custodian=True) for item in items]
            for key, items in model.custodian.items()
        },
        non_custodian={
            key: [_entry(item, custodian=False) for item in items]
            for key, items in model.non_custodian.items()
        },
    )


def _entry(item: StakeEntryPayload, *, custodian: bool) -> StakeEntry:
    return StakeEntry(
        staked_amount=item.staked_amount,
        wallet_address=item.wallet_address,
        domain=item.domain if custodian else None,
    )
