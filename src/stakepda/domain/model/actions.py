"""Create/update actions produced by one reconciliation pass."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from logging import getLogger

from .credentials import Wallet
from .enums import OwnershipModel, StakerSubtype
from .snapshot import Amount

log = getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class AddSpec:
    """A credential that should be issued for stake with no matching record."""

    point: Amount
    node_type: OwnershipModel
    pda_sub_type: StakerSubtype
    owner: str
    wallets: tuple[Wallet, ...]
    service_domain: str | None = None

    @property
    def target_key(self) -> tuple[OwnershipModel, str, str | None]:
        return (self.node_type, self.owner, self.service_domain)

    def as_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "point": self.point,
            "node_type": self.node_type.value,
            "pda_sub_type": self.pda_sub_type.value,
            "owner": self.owner,
        }
        if self.service_domain is not None:
            payload["serviceDomain"] = self.service_domain
        payload["wallets"] = [wallet.as_payload() for wallet in self.wallets]
        return payload


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdateSpec:
    """New target state for an existing credential.

    ``wallets`` is ``None`` when the wallet list should be left untouched.
    """

    pda_id: str
    point: Amount
    wallets: tuple[Wallet, ...] | None = None

    def as_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"pda_id": self.pda_id, "point": self.point}
        if self.wallets is not None:
            payload["wallets"] = [wallet.as_payload() for wallet in self.wallets]
        return payload


@dataclass(slots=True)
class UpcomingActions:
    """Append-only accumulator shared by the matcher runs of one pass.

    Appends are lock-protected. A second update for the same credential id, or
    a second add for the same target, is rejected.
    """

    add: list[AddSpec] = field(default_factory=list["AddSpec"])
    update: list[UpdateSpec] = field(default_factory=list["UpdateSpec"])
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
    _updated_ids: set[str] = field(default_factory=set[str], repr=False, compare=False)
    _added_targets: set[tuple[OwnershipModel, str, str | None]] = field(
        default_factory=set[tuple[OwnershipModel, str, str | None]],
        repr=False,
        compare=False,
    )

    def record_add(self, spec: AddSpec) -> bool:
        with self._lock:
            if spec.target_key in self._added_targets:
                log.warning("Ignoring duplicate add for %s", spec.target_key)
                return False
            self._added_targets.add(spec.target_key)
            self.add.append(spec)
            return True

    def record_update(self, spec: UpdateSpec) -> bool:
        with self._lock:
            if spec.pda_id in self._updated_ids:
                log.warning("Ignoring duplicate update for credential %s", spec.pda_id)
                return False
            self._updated_ids.add(spec.pda_id)
            self.update.append(spec)
            return True

    def is_empty(self) -> bool:
        return not self.add and not self.update

    def as_payload(self) -> dict[str, list[dict[str, object]]]:
        return {
            "add": [spec.as_payload() for spec in self.add],
            "update": [spec.as_payload() for spec in self.update],
        }
