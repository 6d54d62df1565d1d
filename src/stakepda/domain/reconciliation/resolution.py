"""Owner resolution for custodian service domains.

Every distinct domain is resolved once per pass. Lookups are independent and run
on a bounded thread pool; a failed lookup only affects the domain it was made
for.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias

from stakepda.domain.errors import ResolutionFailure

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stakepda.domain.ports import DomainResolver

log = getLogger(__name__)

DEFAULT_MAX_WORKERS = 8

OwnersByDomain: TypeAlias = dict[str, str | None]


def resolve_owners(
    domains: Iterable[str],
    *,
    resolver: DomainResolver,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> OwnersByDomain:
    """Resolve each distinct domain, mapping failures to ``None``."""

    unique = list(dict.fromkeys(domains))
    if not unique:
        return {}

    def resolve(domain: str) -> str | None:
        try:
            owner = resolver.resolve_owner(domain)
        except ResolutionFailure as exc:
            log.warning("Could not resolve owner for %r: %s", domain, exc)
            return None
        except Exception:
            log.exception("Resolver raised unexpectedly for %r", domain)
            return None
        if not owner:
            log.warning("No owner identifier found for %r", domain)
            return None
        return owner

    workers = max(1, min(len(unique), max_workers))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="resolve") as executor:
        owners = list(executor.map(resolve, unique))
    return dict(zip(unique, owners, strict=True))
