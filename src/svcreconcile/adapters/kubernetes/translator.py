"""Translate Service manifests to and from domain Services.

Absent manifest fields map to the zero value of the matching domain field and
zero values are omitted again on the way out, so a manifest survives a round
trip unchanged apart from key order, defaulted ``apiVersion``/``kind`` and the
server-managed metadata and ``status`` the model does not carry.
"""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from svcreconcile.domain.model import (
    ObjectMetadata,
    OwnerReference,
    Service,
    ServicePort,
    ServiceSpec,
)

from .schema import (
    ClientIPConfigPayload,
    ObjectMetaPayload,
    OwnerReferencePayload,
    ServiceManifest,
    ServicePortPayload,
    ServiceSpecPayload,
    SessionAffinityConfigPayload,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


log = getLogger(__name__)

DEFAULT_NAMESPACE = "default"
DEFAULT_PROTOCOL = "TCP"


class ManifestError(ValueError):
    """Raised when a Service manifest cannot be read or validated."""


def load_service_manifest(path: Path) -> Service:
    """Read a JSON Service manifest from ``path``."""

    try:
        with path.open(encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest {path} is not valid JSON: {exc}") from exc
    log.debug("Loaded manifest from %s", path)
    return service_from_manifest(payload)


def service_from_manifest(payload: ServiceManifest | Mapping[str, Any]) -> Service:
    if isinstance(payload, ServiceManifest):
        manifest = payload
    else:
        try:
            manifest = ServiceManifest.model_validate(payload)
        except ValidationError as exc:
            raise ManifestError(f"Invalid Service manifest: {exc}") from exc
    return Service(
        metadata=_metadata_from_payload(manifest.metadata),
        spec=_spec_from_payload(manifest.spec),
    )


def service_to_manifest(service: Service) -> dict[str, Any]:
    manifest = ServiceManifest(
        metadata=_metadata_to_payload(service.metadata),
        spec=_spec_to_payload(service.spec),
    )
    return manifest.model_dump(by_alias=True, exclude_none=True, mode="json")


def _metadata_from_payload(payload: ObjectMetaPayload) -> ObjectMetadata:
    return ObjectMetadata(
        name=payload.name,
        namespace=payload.namespace or DEFAULT_NAMESPACE,
        labels=dict(payload.labels or {}),
        annotations=dict(payload.annotations or {}),
        uid=payload.uid or "",
        resource_version=payload.resource_version or "",
        owner_references=tuple(
            OwnerReference(
                api_version=ref.api_version,
                kind=ref.kind,
                name=ref.name,
                uid=ref.uid,
                controller=bool(ref.controller),
                block_owner_deletion=bool(ref.block_owner_deletion),
            )
            for ref in payload.owner_references or ()
        ),
    )


def _spec_from_payload(payload: ServiceSpecPayload) -> ServiceSpec:
    return ServiceSpec(
        type=payload.type,
        cluster_ip=payload.cluster_ip or "",
        cluster_ips=tuple(payload.cluster_ips or ()),
        ip_families=tuple(payload.ip_families or ()),
        ip_family_policy=payload.ip_family_policy,
        session_affinity=payload.session_affinity,
        ports=tuple(_port_from_payload(port) for port in payload.ports or ()),
        health_check_node_port=payload.health_check_node_port or 0,
        selector=dict(payload.selector or {}),
        external_name=payload.external_name or "",
        external_traffic_policy=payload.external_traffic_policy or "",
        publish_not_ready_addresses=bool(payload.publish_not_ready_addresses),
        external_ips=tuple(payload.external_ips or ()),
        load_balancer_ip=payload.load_balancer_ip or "",
        load_balancer_source_ranges=tuple(payload.load_balancer_source_ranges or ()),
        load_balancer_class=payload.load_balancer_class or "",
        allocate_load_balancer_node_ports=payload.allocate_load_balancer_node_ports,
        internal_traffic_policy=payload.internal_traffic_policy or "",
        traffic_distribution=payload.traffic_distribution or "",
        session_affinity_timeout_seconds=_affinity_timeout(payload.session_affinity_config),
    )


def _port_from_payload(payload: ServicePortPayload) -> ServicePort:
    return ServicePort(
        name=payload.name or "",
        protocol=payload.protocol or DEFAULT_PROTOCOL,
        app_protocol=payload.app_protocol or "",
        port=payload.port,
        target_port=payload.target_port if payload.target_port is not None else 0,
        node_port=payload.node_port or 0,
    )


def _metadata_to_payload(metadata: ObjectMetadata) -> ObjectMetaPayload:
    return ObjectMetaPayload(
        name=metadata.name,
        namespace=metadata.namespace,
        labels=dict(metadata.labels) or None,
        annotations=dict(metadata.annotations) or None,
        uid=metadata.uid or None,
        resource_version=metadata.resource_version or None,
        owner_references=[
            OwnerReferencePayload(
                api_version=ref.api_version,
                kind=ref.kind,
                name=ref.name,
                uid=ref.uid,
                controller=ref.controller,
                block_owner_deletion=ref.block_owner_deletion,
            )
            for ref in metadata.owner_references
        ]
        or None,
    )


def _spec_to_payload(spec: ServiceSpec) -> ServiceSpecPayload:
    return ServiceSpecPayload(
        type=spec.type,
        cluster_ip=spec.cluster_ip or None,
        cluster_ips=list(spec.cluster_ips) or None,
        ip_families=list(spec.ip_families) or None,
        ip_family_policy=spec.ip_family_policy,
        session_affinity=spec.session_affinity,
        ports=[_port_to_payload(port) for port in spec.ports] or None,
        health_check_node_port=spec.health_check_node_port or None,
        selector=dict(spec.selector) or None,
        external_name=spec.external_name or None,
        external_traffic_policy=spec.external_traffic_policy or None,
        publish_not_ready_addresses=spec.publish_not_ready_addresses or None,
        external_ips=list(spec.external_ips) or None,
        load_balancer_ip=spec.load_balancer_ip or None,
        load_balancer_source_ranges=list(spec.load_balancer_source_ranges) or None,
        load_balancer_class=spec.load_balancer_class or None,
        allocate_load_balancer_node_ports=spec.allocate_load_balancer_node_ports,
        internal_traffic_policy=spec.internal_traffic_policy or None,
        traffic_distribution=spec.traffic_distribution or None,
        session_affinity_config=_affinity_config(spec.session_affinity_timeout_seconds),
    )


def _port_to_payload(port: ServicePort) -> ServicePortPayload:
    return ServicePortPayload(
        name=port.name or None,
        protocol=port.protocol,
        app_protocol=port.app_protocol or None,
        port=port.port,
        target_port=port.target_port or None,
        node_port=port.node_port or None,
    )


def _affinity_timeout(payload: SessionAffinityConfigPayload | None) -> int:
    if payload is None or payload.client_ip is None:
        return 0
    return payload.client_ip.timeout_seconds or 0


def _affinity_config(timeout_seconds: int) -> SessionAffinityConfigPayload | None:
    if not timeout_seconds:
        return None
    return SessionAffinityConfigPayload(
        client_ip=ClientIPConfigPayload(timeout_seconds=timeout_seconds)
    )
