"""Ports for reading and writing issued credentials."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stakepda.domain.model import AddSpec, CredentialRecord, UpdateSpec


@runtime_checkable
class CredentialReader(Protocol):
    """Read side of the credential registry."""

    def list_valid_staker_credentials(self, owner_scope: str) -> list[CredentialRecord]:
        """Return staker credentials issued under ``owner_scope`` whose status is Valid."""
        ...


@runtime_checkable
class CredentialWriter(Protocol):
    """Write side of the credential registry.

    Both operations return the affected credential id and raise
    :class:`~stakepda.domain.errors.RegistryError` when the registry rejects the call.
    """

    def create_credential(self, spec: AddSpec) -> str: ...

    def update_credential(self, spec: UpdateSpec) -> str: ...


@runtime_checkable
class CredentialRegistry(CredentialReader, CredentialWriter, Protocol):
    """Full registry contract consumed by the reconciliation service."""


__all__ = ["CredentialReader", "CredentialRegistry", "CredentialWriter"]
