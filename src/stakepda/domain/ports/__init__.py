"""Domain port definitions for adapters."""

from __future__ import annotations

from .registry import CredentialReader, CredentialRegistry, CredentialWriter
from .resolver import DomainResolver
from .snapshot import StakeSnapshotProvider

__all__ = [
    "CredentialReader",
    "CredentialRegistry",
    "CredentialWriter",
    "DomainResolver",
    "StakeSnapshotProvider",
]
