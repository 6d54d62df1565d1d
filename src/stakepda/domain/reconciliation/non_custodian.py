"""Matching rules for non-custodian stake.

The claim's ``service_domain`` is the snapshot key itself and doubles as the
owner of newly issued credentials; no resolver is involved. When stake under a
known domain disappears only the point is zeroed, the wallet list is left as is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stakepda.domain.model import AddSpec, OwnershipModel, StakerSubtype, UpdateSpec

from .aggregate import aggregate_stake

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stakepda.domain.model import CredentialRecord, StakeSnapshot, UpcomingActions


@dataclass(slots=True)
class NonCustodianMatcher:
    subtype: StakerSubtype = StakerSubtype.VALIDATOR

    def __call__(
        self,
        snapshot: StakeSnapshot,
        credentials: Sequence[CredentialRecord],
        actions: UpcomingActions,
    ) -> None:
        partition = snapshot.non_custodian
        matched: set[str] = set()

        for record in credentials:
            if not record.held_under(OwnershipModel.NON_CUSTODIAN):
                continue
            claim = record.staker_claim
            domain = claim.service_domain if claim is not None else None
            entries = partition.get(domain) if domain else None
            if domain is None or entries is None:
                actions.record_update(UpdateSpec(pda_id=record.id, point=0))
                continue

            matched.add(domain)
            point, wallets = aggregate_stake(entries)
            actions.record_update(UpdateSpec(pda_id=record.id, point=point, wallets=wallets))

        for domain, entries in partition.items():
            if domain in matched:
                continue
            point, wallets = aggregate_stake(entries)
            actions.record_add(
                AddSpec(
                    point=point,
                    node_type=OwnershipModel.NON_CUSTODIAN,
                    pda_sub_type=self.subtype,
                    owner=domain,
                    wallets=wallets,
                )
            )
