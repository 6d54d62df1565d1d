"""Port for retrieving observed stake."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stakepda.domain.model import StakeSnapshot


@runtime_checkable
class StakeSnapshotProvider(Protocol):
    """Source of point-in-time stake data.

    Implementations raise :class:`~stakepda.domain.errors.RetrievalError` on network
    or payload failures.
    """

    def fetch_snapshot(self) -> StakeSnapshot: ...


__all__ = ["StakeSnapshotProvider"]
