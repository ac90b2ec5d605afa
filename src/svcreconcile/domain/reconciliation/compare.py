"""Verdicts computed on a merged desired Service against the live one.

Both checks expect ``desired`` to already carry the server-side defaults of
``observed`` (see :func:`~svcreconcile.domain.reconciliation.defaults.apply_server_side_values`).
Ports are compared by position: the platform preserves port order, so a
reordered port list is reported as a difference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from svcreconcile.domain.model import ObjectMetadata, Service, ServicePort, ServiceSpec


def needs_recreate(desired: Service, observed: Service) -> bool:
    """Return whether an immutable field changed, so the Service must be recreated."""

    wanted, live = desired.spec, observed.spec

    # IP families are immutable
    if len(wanted.ip_families) != len(live.ip_families):
        return True
    if any(a != b for a, b in zip(wanted.ip_families, live.ip_families, strict=True)):
        return True

    # cluster IP is immutable
    return wanted.cluster_ip != live.cluster_ip


def needs_update(desired: Service, observed: Service) -> bool:
    """Return whether the spec, labels or annotations differ."""

    return not (
        specs_equal(desired.spec, observed.spec)
        and labels_and_annotations_are_equal(desired.metadata, observed.metadata)
    )


def labels_and_annotations_are_equal(a: ObjectMetadata, b: ObjectMetadata) -> bool:
    return _mappings_equal(a.labels, b.labels) and _mappings_equal(a.annotations, b.annotations)


def specs_equal(a: ServiceSpec, b: ServiceSpec) -> bool:
    return (
        a.type == b.type
        and a.cluster_ip == b.cluster_ip
        and a.cluster_ips == b.cluster_ips
        and a.ip_families == b.ip_families
        and a.ip_family_policy == b.ip_family_policy
        and a.session_affinity == b.session_affinity
        and ports_equal(a.ports, b.ports)
        and a.health_check_node_port == b.health_check_node_port
        and _mappings_equal(a.selector, b.selector)
        and a.external_name == b.external_name
        and a.external_traffic_policy == b.external_traffic_policy
        and a.publish_not_ready_addresses == b.publish_not_ready_addresses
        and a.external_ips == b.external_ips
        and a.load_balancer_ip == b.load_balancer_ip
        and a.load_balancer_source_ranges == b.load_balancer_source_ranges
        and a.load_balancer_class == b.load_balancer_class
        and a.allocate_load_balancer_node_ports == b.allocate_load_balancer_node_ports
        and a.internal_traffic_policy == b.internal_traffic_policy
        and a.traffic_distribution == b.traffic_distribution
        and a.session_affinity_timeout_seconds == b.session_affinity_timeout_seconds
    )


def ports_equal(a: tuple[ServicePort, ...], b: tuple[ServicePort, ...]) -> bool:
    if len(a) != len(b):
        return False
    return all(_port_equal(x, y) for x, y in zip(a, b, strict=True))


def _port_equal(a: ServicePort, b: ServicePort) -> bool:
    return (
        a.name == b.name
        and a.protocol == b.protocol
        and a.app_protocol == b.app_protocol
        and a.port == b.port
        and a.target_port == b.target_port
        and a.node_port == b.node_port
    )


def _mappings_equal(a: Mapping[str, str], b: Mapping[str, str]) -> bool:
    return dict(a) == dict(b)
