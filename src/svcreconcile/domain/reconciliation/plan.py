"""Decide how a live Service converges towards its desired state.

The plan is pure: it reads both Services, returns a merged copy of the desired
one and the two verdicts, and has no memory between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .compare import needs_recreate, needs_update
from .contracts import ServiceDiff
from .defaults import apply_server_side_values

if TYPE_CHECKING:
    from svcreconcile.domain.model import Service


def plan_service_reconciliation(desired: Service, observed: Service | None) -> ServiceDiff:
    """Merge server-side defaults into ``desired`` and compute both verdicts.

    ``observed`` is ``None`` when the Service does not exist yet; the desired
    Service is then returned as-is with a create action.
    """

    if observed is None:
        return ServiceDiff(merged=desired, exists=False)

    merged = apply_server_side_values(desired, observed)
    return ServiceDiff(
        merged=merged,
        needs_recreate=needs_recreate(merged, observed),
        needs_update=needs_update(merged, observed),
    )
