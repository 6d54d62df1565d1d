"""Plan the upcoming credential actions for one pass.

The planner composes the two partition matchers but does not know how they
match; it only guarantees that both see the same Valid credentials and append
into one :class:`UpcomingActions`. Custodian matching runs first so the action
order is stable across passes.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from stakepda.domain.model import StakerSubtype, UpcomingActions

from .custodian import CustodianMatcher
from .non_custodian import NonCustodianMatcher
from .resolution import DEFAULT_MAX_WORKERS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stakepda.domain.model import CredentialRecord, StakeSnapshot
    from stakepda.domain.ports import DomainResolver

    from .contracts import PartitionMatcher

log = getLogger(__name__)


@dataclass(slots=True)
class ReconciliationPlanner:
    """Run the custodian and non-custodian matchers into one action set."""

    custodian: PartitionMatcher
    non_custodian: PartitionMatcher

    def plan(
        self,
        snapshot: StakeSnapshot,
        credentials: Sequence[CredentialRecord],
    ) -> UpcomingActions:
        valid = [record for record in credentials if record.is_valid]
        if len(valid) != len(credentials):
            log.warning(
                "Ignoring %d credential(s) that are not Valid", len(credentials) - len(valid)
            )

        actions = UpcomingActions()
        self.custodian(snapshot, valid, actions)
        self.non_custodian(snapshot, valid, actions)
        return actions


def build_planner(
    *,
    resolver: DomainResolver,
    subtype: StakerSubtype = StakerSubtype.VALIDATOR,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> ReconciliationPlanner:
    return ReconciliationPlanner(
        custodian=CustodianMatcher(resolver=resolver, subtype=subtype, max_workers=max_workers),
        non_custodian=NonCustodianMatcher(subtype=subtype),
    )
