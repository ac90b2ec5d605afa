"""Public domain model surface."""

from __future__ import annotations

from svcreconcile.domain.model.enums import (
    NODE_PORT_SERVICE_TYPES,
    IPFamily,
    IPFamilyPolicy,
    ServiceType,
    SessionAffinity,
)
from svcreconcile.domain.model.service import (
    ObjectMetadata,
    OwnerReference,
    Service,
    ServiceKey,
    ServicePort,
    ServiceSpec,
)

__all__ = [
    "NODE_PORT_SERVICE_TYPES",
    "IPFamily",
    "IPFamilyPolicy",
    "ObjectMetadata",
    "OwnerReference",
    "Service",
    "ServiceKey",
    "ServicePort",
    "ServiceSpec",
    "ServiceType",
    "SessionAffinity",
]
