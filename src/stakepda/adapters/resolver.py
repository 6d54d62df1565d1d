"""Resolve custodian service domains from their embedded gateway marker.

Custodian service domains carry the owner inline, e.g.
``node.example.comGATEWAY_ID=alice``. The identifier runs from the marker to
the next whitespace, ``;`` or ``,``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from stakepda.domain.ports import DomainResolver

log = getLogger(__name__)

GATEWAY_ID_MARKER: Final[str] = "GATEWAY_ID="


@dataclass(frozen=True, slots=True)
class EmbeddedGatewayResolver:
    marker: str = GATEWAY_ID_MARKER

    def resolve_owner(self, encoded_domain: str) -> str | None:
        match = re.search(re.escape(self.marker) + r"([^\s;,]+)", encoded_domain)
        if match is None:
            log.debug("No %s marker in %r", self.marker, encoded_domain)
            return None
        return match.group(1)


if TYPE_CHECKING:
    _resolver_check: DomainResolver = EmbeddedGatewayResolver()
