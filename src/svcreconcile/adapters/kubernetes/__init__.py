"""Public interface for the Kubernetes manifest adapter."""

from __future__ import annotations

from .schema import (
    ObjectMetaPayload,
    ServiceManifest,
    ServicePortPayload,
    ServiceSpecPayload,
    SessionAffinityConfigPayload,
)
from .translator import (
    ManifestError,
    load_service_manifest,
    service_from_manifest,
    service_to_manifest,
)

__all__ = [
    "ManifestError",
    "ObjectMetaPayload",
    "ServiceManifest",
    "ServicePortPayload",
    "ServiceSpecPayload",
    "SessionAffinityConfigPayload",
    "load_service_manifest",
    "service_from_manifest",
    "service_to_manifest",
]
