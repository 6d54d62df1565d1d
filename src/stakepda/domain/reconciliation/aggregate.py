"""Fold the stake entries observed under one domain into a point total."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stakepda.domain.model import Wallet

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stakepda.domain.model import Amount, StakeEntry


def aggregate_stake(entries: Iterable[StakeEntry]) -> tuple[Amount, tuple[Wallet, ...]]:
    """Return the summed stake and one wallet per entry, in snapshot order."""

    wallets = tuple(Wallet.from_entry(entry) for entry in entries)
    point: Amount = sum(wallet.amount for wallet in wallets)
    return point, wallets
