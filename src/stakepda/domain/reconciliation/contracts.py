"""Stage contract shared by the per-partition matchers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stakepda.domain.model import CredentialRecord, StakeSnapshot, UpcomingActions


class PartitionMatcher(Protocol):
    """Match Valid credentials of one ownership model against its snapshot partition.

    Implementations only append to ``actions``; they never read back what other
    matchers recorded.
    """

    def __call__(
        self,
        snapshot: StakeSnapshot,
        credentials: Sequence[CredentialRecord],
        actions: UpcomingActions,
    ) -> None: ...
