"""Reconciliation core: match issued staker credentials against observed stake.

Flow for one pass:
1) resolve owners for custodian service domains
2) match custodian credentials against the custodian partition
3) match non-custodian credentials against the non-custodian partition
4) dispatch the accumulated creates, then the updates
"""

from __future__ import annotations

from .aggregate import aggregate_stake
from .custodian import CustodianMatcher
from .dispatch import DispatchFailure, DispatchResult, dispatch_actions
from .engine import ReconciliationPlanner, build_planner
from .non_custodian import NonCustodianMatcher
from .resolution import resolve_owners

__all__ = [
    "CustodianMatcher",
    "DispatchFailure",
    "DispatchResult",
    "NonCustodianMatcher",
    "ReconciliationPlanner",
    "aggregate_stake",
    "build_planner",
    "dispatch_actions",
    "resolve_owners",
]
