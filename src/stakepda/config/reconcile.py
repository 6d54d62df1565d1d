"""Reconciliation pass defaults."""

from __future__ import annotations

from dataclasses import dataclass

from stakepda.domain.model import StakerSubtype

from .env import optional_env_var, optional_int_env_var
from .errors import ConfigurationError

DEFAULT_RESOLVER_WORKERS = 8


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    default_subtype: StakerSubtype = StakerSubtype.VALIDATOR
    resolver_workers: int = DEFAULT_RESOLVER_WORKERS
    interval_seconds: int | None = None


def get_reconcile_config() -> ReconcileConfig:
    raw_subtype = optional_env_var("STAKER_PDA_SUBTYPE")
    try:
        subtype = StakerSubtype(raw_subtype) if raw_subtype else StakerSubtype.VALIDATOR
    except ValueError as exc:
        choices = ", ".join(member.value for member in StakerSubtype)
        raise ConfigurationError(
            f"STAKER_PDA_SUBTYPE must be one of: {choices}; got {raw_subtype!r}"
        ) from exc

    return ReconcileConfig(
        default_subtype=subtype,
        resolver_workers=optional_int_env_var("RESOLVER_WORKERS") or DEFAULT_RESOLVER_WORKERS,
        interval_seconds=optional_int_env_var("RECONCILE_INTERVAL_SECONDS"),
    )
