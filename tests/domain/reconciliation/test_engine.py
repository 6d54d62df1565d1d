from __future__ import annotations

from typing import TYPE_CHECKING

from stakepda.domain.model import (
    CredentialStatus,
    OwnershipModel,
    StakeSnapshot,
    UpcomingActions,
    UpdateSpec,
)
from stakepda.domain.reconciliation import ReconciliationPlanner, build_planner
from tests.helpers.credentials import (
    CUSTODIAN_DOMAIN,
    FakeResolver,
    custodian_entry,
    make_staker_record,
    non_custodian_entry,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stakepda.domain.model import CredentialRecord


def test_planner_runs_both_matchers_into_one_action_set() -> None:
    observed: list[tuple[str, UpcomingActions, list[str]]] = []

    class _Matcher:
        def __init__(self, name: str) -> None:
            self.name = name

        def __call__(
            self,
            snapshot: StakeSnapshot,
            credentials: Sequence[CredentialRecord],
            actions: UpcomingActions,
        ) -> None:
            observed.append((self.name, actions, [record.id for record in credentials]))
            actions.record_update(UpdateSpec(pda_id=self.name, point=1))

    planner = ReconciliationPlanner(
        custodian=_Matcher("custodian"),
        non_custodian=_Matcher("non-custodian"),
    )
    actions = planner.plan(StakeSnapshot(), [make_staker_record(pda_id="x")])

    assert [name for name, _, _ in observed] == ["custodian", "non-custodian"]
    assert observed[0][1] is observed[1][1] is actions
    assert [update.pda_id for update in actions.update] == ["custodian", "non-custodian"]


def test_planner_drops_credentials_that_are_not_valid() -> None:
    seen: list[str] = []

    class _Recorder:
        def __call__(
            self,
            snapshot: StakeSnapshot,
            credentials: Sequence[CredentialRecord],
            actions: UpcomingActions,
        ) -> None:
            seen.extend(record.id for record in credentials)

    planner = ReconciliationPlanner(custodian=_Recorder(), non_custodian=_Recorder())
    planner.plan(
        StakeSnapshot(),
        [
            make_staker_record(pda_id="valid"),
            make_staker_record(pda_id="revoked", status=CredentialStatus.REVOKED),
        ],
    )

    assert seen == ["valid", "valid"]


def _mixed_inputs() -> tuple[StakeSnapshot, list[CredentialRecord]]:
    snapshot = StakeSnapshot(
        custodian={
            CUSTODIAN_DOMAIN: [custodian_entry(1000, "w1")],
            "new.ioGATEWAY_ID=carol": [custodian_entry(40, "w4", domain="new.io")],
        },
        non_custodian={
            "example.com": [non_custodian_entry(10, "n1"), non_custodian_entry(5, "n2")],
            "d.com": [non_custodian_entry(500, "w2")],
        },
    )
    credentials = [
        make_staker_record(pda_id="cust"),
        make_staker_record(
            pda_id="non-cust",
            service_domain="example.com",
            model=OwnershipModel.NON_CUSTODIAN,
        ),
        make_staker_record(
            pda_id="gone",
            service_domain="gone.com",
            model=OwnershipModel.NON_CUSTODIAN,
        ),
    ]
    return snapshot, credentials


def test_planner_produces_combined_actions() -> None:
    snapshot, credentials = _mixed_inputs()
    resolver = FakeResolver({CUSTODIAN_DOMAIN: "gatewayID", "new.ioGATEWAY_ID=carol": "carol"})

    actions = build_planner(resolver=resolver).plan(snapshot, credentials)

    assert actions.as_payload() == {
        "add": [
            {
                "point": 40,
                "node_type": "custodian",
                "pda_sub_type": "Validator",
                "owner": "carol",
                "serviceDomain": "new.ioGATEWAY_ID=carol",
                "wallets": [{"address": "w4", "amount": 40}],
            },
            {
                "point": 500,
                "node_type": "non-custodian",
                "pda_sub_type": "Validator",
                "owner": "d.com",
                "wallets": [{"address": "w2", "amount": 500}],
            },
        ],
        "update": [
            {"pda_id": "cust", "point": 1000, "wallets": [{"address": "w1", "amount": 1000}]},
            {
                "pda_id": "non-cust",
                "point": 15,
                "wallets": [{"address": "n1", "amount": 10}, {"address": "n2", "amount": 5}],
            },
            {"pda_id": "gone", "point": 0},
        ],
    }


def test_planning_twice_on_unchanged_inputs_is_identical() -> None:
    snapshot, credentials = _mixed_inputs()
    planner = build_planner(
        resolver=FakeResolver({CUSTODIAN_DOMAIN: "gatewayID", "new.ioGATEWAY_ID=carol": "carol"}),
        max_workers=4,
    )

    first = planner.plan(snapshot, credentials)
    second = planner.plan(snapshot, credentials)

    assert first == second
    assert first is not second
