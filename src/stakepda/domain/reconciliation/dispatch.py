"""Send planned actions to the credential registry.

Creates are sent before updates. A rejected action is logged and recorded;
it never stops the remaining actions from being sent. The next pass recomputes
everything from scratch, so nothing is rolled back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from stakepda.domain.errors import RegistryError

if TYPE_CHECKING:
    from stakepda.domain.model import AddSpec, UpcomingActions, UpdateSpec
    from stakepda.domain.ports import CredentialWriter

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class DispatchFailure:
    action: AddSpec | UpdateSpec
    error: RegistryError


@dataclass(slots=True)
class DispatchResult:
    created: list[str] = field(default_factory=list[str])
    updated: list[str] = field(default_factory=list[str])
    failures: list[DispatchFailure] = field(default_factory=list["DispatchFailure"])

    @property
    def ok(self) -> bool:
        return not self.failures


def dispatch_actions(actions: UpcomingActions, *, writer: CredentialWriter) -> DispatchResult:
    result = DispatchResult()

    for spec in actions.add:
        try:
            result.created.append(writer.create_credential(spec))
        except RegistryError as exc:
            log.exception("Failed to create credential for owner %s", spec.owner)
            result.failures.append(DispatchFailure(action=spec, error=exc))

    for spec in actions.update:
        try:
            result.updated.append(writer.update_credential(spec))
        except RegistryError as exc:
            log.exception("Failed to update credential %s", spec.pda_id)
            result.failures.append(DispatchFailure(action=spec, error=exc))

    return result
