"""Public interface for the stake snapshot adapter."""

from __future__ import annotations

from .client import HttpStakeSnapshotProvider
from .schema import StakeEntryPayload, StakeSnapshotPayload, StakeSnapshotPayloadInput
from .translator import parse_snapshot

__all__ = [
    "HttpStakeSnapshotProvider",
    "StakeEntryPayload",
    "StakeSnapshotPayload",
    "StakeSnapshotPayloadInput",
    "parse_snapshot",
]
