"""Pydantic models describing the stake snapshot document."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _parse_amount(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        try:
            return int(stripped)
        except ValueError:
            return float(stripped)
    return value


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class StakeEntryPayload(SnapshotBaseModel):
    staked_amount: int | float
    wallet_address: str = Field(min_length=1)
    domain: str | None = None

    _parse_staked_amount = field_validator("staked_amount", mode="before")(_parse_amount)

    @field_validator("staked_amount")
    @classmethod
    def _non_negative(cls, value: int | float) -> int | float:
        if value < 0:
            raise ValueError("staked_amount must not be negative")
        return value


class StakeSnapshotPayload(SnapshotBaseModel):
    custodian: dict[str, list[StakeEntryPayload]] = Field(default_factory=dict)
    non_custodian: dict[str, list[StakeEntryPayload]] = Field(
        default_factory=dict, alias="nonCustodian"
    )


StakeSnapshotPayloadInput = StakeSnapshotPayload | Mapping[str, object]
