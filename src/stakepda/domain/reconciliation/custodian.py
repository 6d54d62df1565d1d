"""Matching rules for custodian-held stake.

A custodian claim's ``service_domain`` is an encoded key of the form
``<domain>GATEWAY_ID=<owner>``. It is used verbatim both as the snapshot key and
as the input to the domain resolver:

- unresolvable domain -> zero the credential (point 0, no wallets)
- resolvable but not staked -> zero the credential
- resolvable and staked -> sum the entries, one wallet per entry
- staked key with no resolvable credential -> issue a new credential owned by
  the resolved identifier

"Matched" compares the literal ``service_domain`` strings, not the resolved
owners, so two encodings of the same owner are treated as distinct keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from stakepda.domain.model import AddSpec, OwnershipModel, StakerSubtype, UpdateSpec

from .aggregate import aggregate_stake
from .resolution import DEFAULT_MAX_WORKERS, resolve_owners

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stakepda.domain.model import CredentialRecord, StakeSnapshot, UpcomingActions
    from stakepda.domain.ports import DomainResolver

log = getLogger(__name__)


@dataclass(slots=True)
class CustodianMatcher:
    resolver: DomainResolver
    subtype: StakerSubtype = StakerSubtype.VALIDATOR
    max_workers: int = DEFAULT_MAX_WORKERS

    def __call__(
        self,
        snapshot: StakeSnapshot,
        credentials: Sequence[CredentialRecord],
        actions: UpcomingActions,
    ) -> None:
        records = [record for record in credentials if record.held_under(OwnershipModel.CUSTODIAN)]
        partition = snapshot.custodian

        claimed_domains = [
            domain
            for record in records
            if (domain := _service_domain(record)) is not None
        ]
        owners = resolve_owners(
            [*claimed_domains, *partition],
            resolver=self.resolver,
            max_workers=self.max_workers,
        )

        matched: set[str] = set()
        for record in records:
            domain = _service_domain(record)
            if domain is None or owners.get(domain) is None:
                log.info(
                    "Zeroing custodian credential %s: owner of %r unresolved", record.id, domain
                )
                actions.record_update(UpdateSpec(pda_id=record.id, point=0, wallets=()))
                continue

            matched.add(domain)
            entries = partition.get(domain)
            if entries is None:
                actions.record_update(UpdateSpec(pda_id=record.id, point=0, wallets=()))
                continue

            point, wallets = aggregate_stake(entries)
            actions.record_update(UpdateSpec(pda_id=record.id, point=point, wallets=wallets))

        for domain, entries in partition.items():
            if domain in matched:
                continue
            owner = owners.get(domain)
            if owner is None:
                log.warning("Skipping new custodian credential for %r: owner unresolved", domain)
                continue
            point, wallets = aggregate_stake(entries)
            actions.record_add(
                AddSpec(
                    point=point,
                    node_type=OwnershipModel.CUSTODIAN,
                    pda_sub_type=self.subtype,
                    owner=owner,
                    service_domain=domain,
                    wallets=wallets,
                )
            )


def _service_domain(record: CredentialRecord) -> str | None:
    claim = record.staker_claim
    if claim is None or not claim.service_domain:
        return None
    return claim.service_domain
