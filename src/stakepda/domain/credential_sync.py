"""Application service driving one reconciliation pass end to end."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from stakepda.domain.model import StakerSubtype
from stakepda.domain.reconciliation import build_planner, dispatch_actions
from stakepda.domain.reconciliation.resolution import DEFAULT_MAX_WORKERS

if TYPE_CHECKING:
    from stakepda.domain.model import CredentialRecord, StakeSnapshot, UpcomingActions
    from stakepda.domain.ports import CredentialRegistry, DomainResolver, StakeSnapshotProvider
    from stakepda.domain.reconciliation import DispatchResult, ReconciliationPlanner

log = getLogger(__name__)


@dataclass(slots=True)
class ReconciliationReport:
    """Outcome of one reconciliation pass.

    ``dispatch`` is ``None`` for dry runs, where actions are planned but not sent.
    """

    credentials_seen: int
    custodian_domains: int
    non_custodian_domains: int
    actions: UpcomingActions
    dispatch: DispatchResult | None = None

    @property
    def ok(self) -> bool:
        return self.dispatch is None or self.dispatch.ok


class ReconciliationService:
    """Bring issued staker credentials in line with observed stake.

    Only one pass runs at a time per service instance; a trigger that fires
    while a pass is in flight is skipped rather than queued.
    """

    def __init__(
        self,
        *,
        snapshot_provider: StakeSnapshotProvider,
        registry: CredentialRegistry,
        resolver: DomainResolver,
        owner_scope: str,
        subtype: StakerSubtype = StakerSubtype.VALIDATOR,
        resolver_workers: int = DEFAULT_MAX_WORKERS,
        planner: ReconciliationPlanner | None = None,
    ) -> None:
        self._snapshot_provider = snapshot_provider
        self._registry = registry
        self._owner_scope = owner_scope
        self._planner = planner or build_planner(
            resolver=resolver,
            subtype=subtype,
            max_workers=resolver_workers,
        )
        self._pass_lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._pass_lock.locked()

    def run_reconciliation_pass(self, *, dry_run: bool = False) -> ReconciliationReport | None:
        """Run one pass, or return ``None`` if another pass is still in flight.

        Raises :class:`~stakepda.domain.errors.RetrievalError` when either input
        cannot be retrieved; nothing is dispatched in that case.
        """

        if not self._pass_lock.acquire(blocking=False):
            log.warning("Reconciliation pass already in progress; skipping this trigger")
            return None
        try:
            return self._run(dry_run=dry_run)
        finally:
            self._pass_lock.release()

    def _run(self, *, dry_run: bool) -> ReconciliationReport:
        log.info("Starting reconciliation pass for %s (dry_run=%s)", self._owner_scope, dry_run)
        snapshot, credentials = self._retrieve()

        actions = self._planner.plan(snapshot, credentials)
        report = ReconciliationReport(
            credentials_seen=len(credentials),
            custodian_domains=len(snapshot.custodian),
            non_custodian_domains=len(snapshot.non_custodian),
            actions=actions,
        )
        log.info(
            "Planned %d create(s) and %d update(s) from %d credential(s)",
            len(actions.add),
            len(actions.update),
            len(credentials),
        )

        if dry_run:
            return report

        report.dispatch = dispatch_actions(actions, writer=self._registry)
        log.info(
            "Finished reconciliation pass: created=%d, updated=%d, failed=%d",
            len(report.dispatch.created),
            len(report.dispatch.updated),
            len(report.dispatch.failures),
        )
        return report

    def _retrieve(self) -> tuple[StakeSnapshot, list[CredentialRecord]]:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="retrieve") as executor:
            snapshot_future = executor.submit(self._snapshot_provider.fetch_snapshot)
            credentials_future = executor.submit(
                self._registry.list_valid_staker_credentials, self._owner_scope
            )
            snapshot = snapshot_future.result()
            credentials = credentials_future.result()
        return snapshot, credentials
