"""Fold server-assigned values into a desired Service.

The platform defaults several fields of a Service after creation (type, cluster
IPs, session affinity, target and node ports, IP families). A desired Service
authored by the caller usually leaves those unset, so comparing it with the
live object as-is would report a difference on every cycle.

``apply_server_side_values`` returns a copy of the desired Service in which each
unset field has absorbed the live value, but only where it is safe to assume
the caller had no opinion on it.
"""

from __future__ import annotations

import ipaddress
from dataclasses import replace
from typing import TYPE_CHECKING

from svcreconcile.common.maps import merge_preserving_existing_keys

if TYPE_CHECKING:
    from collections.abc import Iterable

    from svcreconcile.domain.model import Service, ServicePort, ServiceSpec


def is_ip_address(value: str) -> bool:
    """Return whether ``value`` is an IPv4 or IPv6 literal.

    Scoped IPv6 literals (``fe80::1%eth0``) are not valid Service addresses.
    """

    if "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def all_ip_addresses(values: Iterable[str]) -> bool:
    return all(is_ip_address(value) for value in values)


def apply_server_side_values(desired: Service, observed: Service) -> Service:
    """Return ``desired`` with the defaults the platform applied to ``observed``.

    Neither argument is modified.
    """

    spec = _merge_spec(desired.spec, observed.spec)
    metadata = replace(
        desired.metadata,
        annotations=merge_preserving_existing_keys(
            desired.metadata.annotations, observed.metadata.annotations
        ),
        labels=merge_preserving_existing_keys(desired.metadata.labels, observed.metadata.labels),
    )
    return replace(desired, metadata=metadata, spec=spec)


def _merge_spec(desired: ServiceSpec, observed: ServiceSpec) -> ServiceSpec:
    typed = replace(desired, type=desired.type if desired.type is not None else observed.type)
    same_type = typed.type == observed.type

    # A cluster IP assigned to the live object only carries over while the type
    # is unchanged, and only if the server actually assigned an address.
    cluster_ip = desired.cluster_ip
    if same_type and not cluster_ip and is_ip_address(observed.cluster_ip):
        cluster_ip = observed.cluster_ip

    cluster_ips = desired.cluster_ips
    if same_type and not cluster_ips and all_ip_addresses(observed.cluster_ips):
        cluster_ips = observed.cluster_ips

    session_affinity = desired.session_affinity
    if session_affinity is None:
        session_affinity = observed.session_affinity

    ports = desired.ports
    if len(desired.ports) == len(observed.ports):
        ports = tuple(
            _merge_port(wanted, live, allocates_node_ports=typed.allocates_node_ports)
            for wanted, live in zip(desired.ports, observed.ports, strict=True)
        )

    health_check_node_port = desired.health_check_node_port or observed.health_check_node_port

    # IP families and their policy are immutable: keep the server's choice
    # unless the caller set one explicitly.
    ip_families = desired.ip_families or observed.ip_families
    ip_family_policy = desired.ip_family_policy
    if ip_family_policy is None:
        ip_family_policy = observed.ip_family_policy

    return replace(
        typed,
        cluster_ip=cluster_ip,
        cluster_ips=cluster_ips,
        session_affinity=session_affinity,
        ports=ports,
        health_check_node_port=health_check_node_port,
        ip_families=ip_families,
        ip_family_policy=ip_family_policy,
    )


def _merge_port(
    desired: ServicePort,
    observed: ServicePort,
    *,
    allocates_node_ports: bool,
) -> ServicePort:
    target_port = desired.target_port
    if desired.target_port_value == 0:
        target_port = observed.target_port

    node_port = desired.node_port
    if allocates_node_ports and node_port == 0:
        node_port = observed.node_port

    return replace(desired, target_port=target_port, node_port=node_port)
