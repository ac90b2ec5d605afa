"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from svcreconcile.adapters.kubernetes import load_service_manifest, service_to_manifest
from svcreconcile.domain.reconciliation import plan_service_reconciliation

if TYPE_CHECKING:
    from pathlib import Path

    from svcreconcile.domain.reconciliation import ServiceDiff


log = getLogger(__name__)


def diff_service_manifests(desired_path: Path, observed_path: Path | None) -> ServiceDiff:
    """Plan the reconciliation of two Service manifests read from disk.

    ``observed_path`` is ``None`` when the live Service does not exist.
    """

    desired = load_service_manifest(desired_path)
    observed = load_service_manifest(observed_path) if observed_path is not None else None
    namespace, name = desired.key
    if observed is not None and observed.key != desired.key:
        log.warning(
            "Comparing %s/%s against a different live service %s/%s",
            namespace,
            name,
            *observed.key,
        )

    diff = plan_service_reconciliation(desired, observed)
    log.info(
        "Planned %s for service %s/%s: needs_recreate=%s, needs_update=%s",
        diff.action,
        namespace,
        name,
        diff.needs_recreate,
        diff.needs_update,
    )
    return diff


def render_diff(diff: ServiceDiff) -> dict[str, Any]:
    return {
        "action": str(diff.action),
        "needsRecreate": diff.needs_recreate,
        "needsUpdate": diff.needs_update,
        "merged": service_to_manifest(diff.merged),
    }
