"""Orchestrator for one Service reconciliation cycle.

The engine sequences create / recreate / update / no-op from the verdicts of
:func:`~svcreconcile.domain.reconciliation.plan.plan_service_reconciliation`
and persists the merged desired state through a :class:`ServiceClient`.

Cycles for different Services share no state. Callers must not run two cycles
for the same Service concurrently.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from logging import Logger, LoggerAdapter, getLogger
from typing import TYPE_CHECKING

from svcreconcile.domain.ports.services import ServiceNotFoundError

from .contracts import ReconcileAction, ReconcileResult
from .plan import plan_service_reconciliation

if TYPE_CHECKING:
    from svcreconcile.domain.model import OwnerReference, Service
    from svcreconcile.domain.ports.services import ServiceClient


def _default_logger() -> Logger:
    return getLogger(__name__)


@dataclass(slots=True)
class ServiceReconciler:
    """Converge a live Service towards a desired one."""

    client: ServiceClient
    log: Logger | LoggerAdapter[Logger] = field(default_factory=_default_logger)

    def reconcile(
        self,
        desired: Service,
        *,
        owner: OwnerReference | None = None,
    ) -> ReconcileResult:
        """Run one cycle for ``desired``.

        A Service that disappears before a recreate deletes it is simply
        created again. Other client errors propagate to the caller, which owns
        retries.
        """

        namespace, name = desired.key
        observed = self._fetch(namespace, name)
        diff = plan_service_reconciliation(desired, observed)
        action = diff.action

        if observed is None:
            self.log.info("Creating service %s/%s", namespace, name)
            created = self.client.create(diff.merged, owner=owner)
            return ReconcileResult(action=action, service=created)

        if action is ReconcileAction.RECREATE:
            self.log.info(
                "Deleting service %s/%s as it cannot be updated, it will be recreated",
                namespace,
                name,
            )
            try:
                self.client.delete(observed)
            except ServiceNotFoundError:
                self.log.info("Service %s/%s is already gone", namespace, name)
            self.log.info("Creating service %s/%s", namespace, name)
            created = self.client.create(diff.merged, owner=owner)
            return ReconcileResult(action=action, service=created)

        if action is ReconcileAction.UPDATE:
            self.log.info("Updating service %s/%s", namespace, name)
            updated = self.client.update(commit_merged_state(observed, diff.merged))
            return ReconcileResult(action=action, service=updated)

        self.log.debug("Service %s/%s is up to date", namespace, name)
        return ReconcileResult(action=action, service=observed)

    def _fetch(self, namespace: str, name: str) -> Service | None:
        try:
            return self.client.get(namespace, name)
        except ServiceNotFoundError:
            return None


def commit_merged_state(observed: Service, merged: Service) -> Service:
    """Return ``observed`` carrying the merged annotations, labels and spec.

    Server-owned identity (uid, resource version, owner references) is kept
    from ``observed`` so the update is applied against the version that was read.
    """

    metadata = replace(
        observed.metadata,
        annotations=dict(merged.metadata.annotations),
        labels=dict(merged.metadata.labels),
    )
    return replace(observed, metadata=metadata, spec=merged.spec)
