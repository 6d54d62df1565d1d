from __future__ import annotations

import threading

import pytest

from stakepda.domain.credential_sync import ReconciliationService
from stakepda.domain.errors import RetrievalError
from stakepda.domain.model import OwnershipModel, StakeSnapshot, Wallet
from tests.helpers.credentials import (
    CUSTODIAN_DOMAIN,
    FakeRegistry,
    FakeResolver,
    FakeSnapshotProvider,
    custodian_entry,
    make_staker_record,
    non_custodian_entry,
)


def _service(
    provider: FakeSnapshotProvider,
    registry: FakeRegistry,
    resolver: FakeResolver | None = None,
) -> ReconciliationService:
    return ReconciliationService(
        snapshot_provider=provider,
        registry=registry,
        resolver=resolver or FakeResolver(default="gatewayID"),
        owner_scope="org-gateway",
    )


def test_custodian_pass_updates_existing_credential() -> None:
    provider = FakeSnapshotProvider(
        StakeSnapshot(custodian={CUSTODIAN_DOMAIN: [custodian_entry(1000, "w1")]})
    )
    registry = FakeRegistry(credentials=[make_staker_record()])

    report = _service(provider, registry).run_reconciliation_pass()

    assert report is not None
    assert report.ok
    assert registry.scopes == ["org-gateway"]
    assert registry.created == []
    (update,) = registry.updated
    assert update.pda_id == "pda_id"
    assert update.point == 1000
    assert update.wallets == (Wallet(address="w1", amount=1000),)
    assert report.dispatch is not None
    assert report.dispatch.updated == ["pda_id"]


def test_non_custodian_pass_issues_new_credential() -> None:
    provider = FakeSnapshotProvider(
        StakeSnapshot(non_custodian={"d.com": [non_custodian_entry(500, "w2")]})
    )
    registry = FakeRegistry()

    report = _service(provider, registry).run_reconciliation_pass()

    assert report is not None
    (created,) = registry.created
    assert created.node_type is OwnershipModel.NON_CUSTODIAN
    assert created.owner == "d.com"
    assert created.point == 500
    assert registry.updated == []


@pytest.mark.parametrize("failing", ["snapshot", "credentials"])
def test_retrieval_failure_aborts_pass_without_dispatch(failing: str) -> None:
    provider = FakeSnapshotProvider(
        StakeSnapshot(non_custodian={"d.com": [non_custodian_entry(500, "w2")]}),
        error=RetrievalError("snapshot down") if failing == "snapshot" else None,
    )
    registry = FakeRegistry(
        credentials=[make_staker_record()],
        list_error=RetrievalError("registry down") if failing == "credentials" else None,
    )
    service = _service(provider, registry)

    with pytest.raises(RetrievalError):
        service.run_reconciliation_pass()

    assert registry.calls == []
    assert not service.is_running


def test_dry_run_plans_without_writing() -> None:
    provider = FakeSnapshotProvider(
        StakeSnapshot(non_custodian={"d.com": [non_custodian_entry(500, "w2")]})
    )
    registry = FakeRegistry(credentials=[make_staker_record()])

    report = _service(provider, registry).run_reconciliation_pass(dry_run=True)

    assert report is not None
    assert report.dispatch is None
    assert len(report.actions.add) == 1
    assert len(report.actions.update) == 1
    assert registry.calls == []


def test_dispatch_failures_are_reported() -> None:
    provider = FakeSnapshotProvider(StakeSnapshot())
    registry = FakeRegistry(credentials=[make_staker_record()], rejected_ids=frozenset({"pda_id"}))

    report = _service(provider, registry).run_reconciliation_pass()

    assert report is not None
    assert not report.ok
    assert report.dispatch is not None
    assert len(report.dispatch.failures) == 1


def test_repeated_passes_plan_the_same_actions() -> None:
    provider = FakeSnapshotProvider(
        StakeSnapshot(
            custodian={CUSTODIAN_DOMAIN: [custodian_entry(1000, "w1")]},
            non_custodian={"d.com": [non_custodian_entry(500, "w2")]},
        )
    )
    registry = FakeRegistry(credentials=[make_staker_record()])
    service = _service(provider, registry)

    first = service.run_reconciliation_pass(dry_run=True)
    second = service.run_reconciliation_pass(dry_run=True)

    assert first is not None
    assert second is not None
    assert first.actions == second.actions


def test_overlapping_trigger_is_skipped() -> None:
    entered = threading.Event()
    release = threading.Event()

    class _SlowProvider(FakeSnapshotProvider):
        def fetch_snapshot(self) -> StakeSnapshot:
            entered.set()
            release.wait(timeout=5)
            return super().fetch_snapshot()

    provider = _SlowProvider()
    registry = FakeRegistry()
    service = _service(provider, registry)
    results: list[object] = []

    worker = threading.Thread(target=lambda: results.append(service.run_reconciliation_pass()))
    worker.start()
    assert entered.wait(timeout=5)

    assert service.is_running
    assert service.run_reconciliation_pass() is None

    release.set()
    worker.join(timeout=5)
    assert results
    assert results[0] is not None
    assert provider.calls == 1
