"""Port for resolving a staking domain to its owner."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DomainResolver(Protocol):
    """Resolve an encoded service domain to an owner identifier.

    Returns ``None`` when no owner can be determined. Implementations may also
    raise :class:`~stakepda.domain.errors.ResolutionFailure`; callers treat both
    the same way.
    """

    def resolve_owner(self, encoded_domain: str) -> str | None: ...


__all__ = ["DomainResolver"]
