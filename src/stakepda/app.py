"""Application orchestration entry points."""

from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from logging import getLogger
from typing import TYPE_CHECKING

from stakepda.adapters.registry import HttpCredentialRegistry
from stakepda.adapters.resolver import EmbeddedGatewayResolver
from stakepda.adapters.snapshot import HttpStakeSnapshotProvider
from stakepda.config import get_reconcile_config, get_registry_config
from stakepda.domain.credential_sync import ReconciliationReport, ReconciliationService
from stakepda.domain.errors import RetrievalError

if TYPE_CHECKING:
    from collections.abc import Callable

    from stakepda.domain.ports import CredentialRegistry, DomainResolver, StakeSnapshotProvider


log = getLogger(__name__)


def build_reconciliation_service(
    *,
    snapshot_provider: StakeSnapshotProvider | None = None,
    registry: CredentialRegistry | None = None,
    resolver: DomainResolver | None = None,
) -> ReconciliationService:
    """Wire the reconciliation service from configuration and default adapters."""

    reconcile_config = get_reconcile_config()
    registry_config = get_registry_config()
    return ReconciliationService(
        snapshot_provider=snapshot_provider or HttpStakeSnapshotProvider(),
        registry=registry or HttpCredentialRegistry(config=registry_config),
        resolver=resolver or EmbeddedGatewayResolver(),
        owner_scope=registry_config.org_gateway_id,
        subtype=reconcile_config.default_subtype,
        resolver_workers=reconcile_config.resolver_workers,
    )


def reconcile_stake_credentials(
    *,
    dry_run: bool = False,
    service: ReconciliationService | None = None,
) -> ReconciliationReport | None:
    """Run a single reconciliation pass using the configured adapters."""

    active_service = service or build_reconciliation_service()
    report = active_service.run_reconciliation_pass(dry_run=dry_run)
    if report is not None and not report.ok and report.dispatch is not None:
        log.warning("%d registry write(s) failed this pass", len(report.dispatch.failures))
    return report


def seconds_until_next_midnight(now: datetime) -> float:
    """Seconds from ``now`` until the next 00:00 UTC."""

    current = now.astimezone(UTC)
    next_midnight = (current + timedelta(days=1)).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    return (next_midnight - current).total_seconds()


def _utcnow() -> datetime:
    return datetime.now(UTC)


def run_reconciliation_daemon(
    *,
    service: ReconciliationService | None = None,
    interval_seconds: int | None = None,
    max_passes: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
    now_provider: Callable[[], datetime] = _utcnow,
) -> int:
    """Run passes repeatedly, daily at midnight UTC unless an interval is given.

    A pass that cannot retrieve its inputs is logged and retried at the next
    trigger. Returns the number of passes attempted.
    """

    active_service = service or build_reconciliation_service()
    log.info(
        "Reconciliation daemon starting; schedule=%s",
        f"every {interval_seconds}s" if interval_seconds else "daily at 00:00 UTC",
    )

    passes = 0
    while max_passes is None or passes < max_passes:
        delay = (
            float(interval_seconds)
            if interval_seconds
            else seconds_until_next_midnight(now_provider())
        )
        log.info("Next reconciliation pass in %.0fs", delay)
        sleep(delay)

        passes += 1
        try:
            reconcile_stake_credentials(service=active_service)
        except RetrievalError:
            log.exception("Reconciliation pass aborted; waiting for next trigger")
    return passes
