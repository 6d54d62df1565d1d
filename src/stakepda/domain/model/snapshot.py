"""In-memory view of a stake snapshot, partitioned by ownership model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

from .enums import OwnershipModel

Amount: TypeAlias = int | float


@dataclass(frozen=True, slots=True, kw_only=True)
class StakeEntry:
    """One staked position observed on chain.

    ``domain`` is only populated for custodian entries, where it repeats the
    (encoded) snapshot key the entry was grouped under.
    """

    staked_amount: Amount
    wallet_address: str
    domain: str | None = None


def _freeze(
    partition: Mapping[str, tuple[StakeEntry, ...] | list[StakeEntry]],
) -> Mapping[str, tuple[StakeEntry, ...]]:
    return MappingProxyType({key: tuple(entries) for key, entries in partition.items()})


@dataclass(frozen=True, slots=True, init=False)
class StakeSnapshot:
    """Point-in-time stake, keyed by domain within each ownership partition.

    A missing key means zero stake for that domain in that partition. Key order
    is preserved from construction so that downstream action order is stable.
    """

    custodian: Mapping[str, tuple[StakeEntry, ...]]
    non_custodian: Mapping[str, tuple[StakeEntry, ...]]

    def __init__(
        self,
        *,
        custodian: Mapping[str, tuple[StakeEntry, ...] | list[StakeEntry]] | None = None,
        non_custodian: Mapping[str, tuple[StakeEntry, ...] | list[StakeEntry]] | None = None,
    ) -> None:
        object.__setattr__(self, "custodian", _freeze(custodian or {}))
        object.__setattr__(self, "non_custodian", _freeze(non_custodian or {}))

    def partition(self, model: OwnershipModel) -> Mapping[str, tuple[StakeEntry, ...]]:
        if model is OwnershipModel.CUSTODIAN:
            return self.custodian
        return self.non_custodian

    def entries_for(self, model: OwnershipModel, domain: str) -> tuple[StakeEntry, ...] | None:
        """Return the entries staked under ``domain`` or ``None`` if it was not observed."""

        return self.partition(model).get(domain)
