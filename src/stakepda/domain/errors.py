"""Error taxonomy for reconciliation passes."""

from __future__ import annotations


class StakePdaError(RuntimeError):
    """Base class for reconciliation errors."""


class RetrievalError(StakePdaError):
    """Raised when the stake snapshot or the credential list cannot be retrieved.

    Aborts the whole pass; nothing is dispatched.
    """


class ResolutionFailure(StakePdaError):
    """Raised by a resolver when an owner identifier cannot be extracted.

    Affects only the record being resolved.
    """

    def __init__(self, message: str, *, domain: str) -> None:
        super().__init__(message)
        self.domain = domain


class RegistryError(StakePdaError):
    """Raised when the registry rejects a create or update."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
