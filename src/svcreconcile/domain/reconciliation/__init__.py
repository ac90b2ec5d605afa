"""Reconciliation core for Services.

Layered flow for one cycle:
1) fold server-side defaults of the live Service into the desired one
2) decide whether an immutable field changed (recreate)
3) decide whether any other field, label or annotation changed (update)
4) create, recreate, update or leave the live Service untouched
"""

from __future__ import annotations

from .compare import (
    labels_and_annotations_are_equal,
    needs_recreate,
    needs_update,
    ports_equal,
    specs_equal,
)
from .contracts import ReconcileAction, ReconcileResult, ServiceDiff
from .defaults import apply_server_side_values, is_ip_address
from .engine import ServiceReconciler, commit_merged_state
from .plan import plan_service_reconciliation

__all__ = [
    "ReconcileAction",
    "ReconcileResult",
    "ServiceDiff",
    "ServiceReconciler",
    "apply_server_side_values",
    "commit_merged_state",
    "is_ip_address",
    "labels_and_annotations_are_equal",
    "needs_recreate",
    "needs_update",
    "plan_service_reconciliation",
    "ports_equal",
    "specs_equal",
]
