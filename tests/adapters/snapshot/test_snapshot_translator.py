from __future__ import annotations

import pytest
from pydantic import ValidationError

from stakepda.adapters.snapshot import StakeSnapshotPayload, parse_snapshot


def test_accepts_camel_case_partition_name() -> None:
    snapshot = parse_snapshot(
        {"nonCustodian": {"d.com": [{"staked_amount": 1.5, "wallet_address": "w"}]}}
    )

    assert snapshot.non_custodian["d.com"][0].staked_amount == 1.5
    assert dict(snapshot.custodian) == {}


def test_missing_partitions_default_to_empty() -> None:
    snapshot = parse_snapshot({})

    assert dict(snapshot.custodian) == {}
    assert dict(snapshot.non_custodian) == {}


def test_keys_with_no_entries_are_kept() -> None:
    snapshot = parse_snapshot(StakeSnapshotPayload.model_validate({"custodian": {"k": []}}))

    assert snapshot.custodian["k"] == ()


def test_negative_stake_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_snapshot({"custodian": {"k": [{"staked_amount": -1, "wallet_address": "w"}]}})


def test_blank_wallet_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_snapshot({"custodian": {"k": [{"staked_amount": 1, "wallet_address": ""}]}})
