"""Shared reconciliation contract components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svcreconcile.domain.model import Service


class ReconcileAction(StrEnum):
    """What the orchestrator must do with the live Service."""

    CREATE = "create"
    RECREATE = "recreate"
    UPDATE = "update"
    NOOP = "noop"


@dataclass(slots=True, kw_only=True, frozen=True)
class ServiceDiff:
    """Outcome of comparing one desired Service with its live counterpart.

    ``merged`` is the desired Service after server-side defaults were folded
    in; it is what the orchestrator persists on create, recreate or update.
    """

    merged: Service
    needs_recreate: bool = False
    needs_update: bool = False
    exists: bool = True

    @property
    def action(self) -> ReconcileAction:
        if not self.exists:
            return ReconcileAction.CREATE
        if self.needs_recreate:
            return ReconcileAction.RECREATE
        if self.needs_update:
            return ReconcileAction.UPDATE
        return ReconcileAction.NOOP


@dataclass(slots=True, kw_only=True, frozen=True)
class ReconcileResult:
    """Action taken by one reconciliation cycle and the resulting live Service."""

    action: ReconcileAction
    service: Service
