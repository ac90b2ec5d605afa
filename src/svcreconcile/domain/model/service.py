"""Service resource model.

The model mirrors the metadata the reconciler reasons about and every field of a
Kubernetes ``v1`` Service spec. Values are immutable but hold plain mappings, so
instances are unhashable. "Unset" is expressed with the zero value of each
field (``""``, ``0``, ``None`` or an empty collection), matching how the
platform reports fields it has not assigned.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeAlias

from svcreconcile.domain.model.enums import (
    NODE_PORT_SERVICE_TYPES,
    IPFamily,
    IPFamilyPolicy,
    ServiceType,
    SessionAffinity,
)

ServiceKey: TypeAlias = tuple[str, str]

_DECIMAL_PORT = re.compile(r"[+-]?[0-9]+")


@dataclass(slots=True, kw_only=True, frozen=True)
class OwnerReference:
    """Reference to the object owning a Service, used for garbage collection."""

    api_version: str
    kind: str
    name: str
    uid: str
    controller: bool = True
    block_owner_deletion: bool = True


@dataclass(slots=True, kw_only=True, frozen=True)
class ObjectMetadata:
    # mapping fields make instances unhashable
    __hash__ = None  # type: ignore[assignment]

    name: str
    namespace: str = "default"
    labels: Mapping[str, str] = field(default_factory=dict[str, str])
    annotations: Mapping[str, str] = field(default_factory=dict[str, str])
    # server-owned identity; empty on caller-authored objects
    uid: str = ""
    resource_version: str = ""
    owner_references: tuple[OwnerReference, ...] = ()


@dataclass(slots=True, kw_only=True, frozen=True)
class ServicePort:
    """One exposed port.

    ``target_port`` is either a port number or the name of a port on the
    backing workload.
    """

    name: str = ""
    protocol: str = "TCP"
    app_protocol: str = ""
    port: int = 0
    target_port: int | str = 0
    node_port: int = 0

    @property
    def target_port_value(self) -> int:
        """Numeric value of ``target_port``; ``0`` for named ports."""

        if isinstance(self.target_port, int):
            return self.target_port
        if _DECIMAL_PORT.fullmatch(self.target_port) is None:
            return 0
        return int(self.target_port)


@dataclass(slots=True, kw_only=True, frozen=True)
class ServiceSpec:
    __hash__ = None  # type: ignore[assignment]

    type: ServiceType | None = None
    cluster_ip: str = ""
    cluster_ips: tuple[str, ...] = ()
    ip_families: tuple[IPFamily, ...] = ()
    ip_family_policy: IPFamilyPolicy | None = None
    session_affinity: SessionAffinity | None = None
    ports: tuple[ServicePort, ...] = ()
    health_check_node_port: int = 0
    selector: Mapping[str, str] = field(default_factory=dict[str, str])
    external_name: str = ""
    external_traffic_policy: str = ""
    publish_not_ready_addresses: bool = False
    external_ips: tuple[str, ...] = ()
    load_balancer_ip: str = ""
    load_balancer_source_ranges: tuple[str, ...] = ()
    load_balancer_class: str = ""
    allocate_load_balancer_node_ports: bool | None = None
    internal_traffic_policy: str = ""
    traffic_distribution: str = ""
    # sessionAffinityConfig.clientIP.timeoutSeconds
    session_affinity_timeout_seconds: int = 0

    @property
    def allocates_node_ports(self) -> bool:
        return self.type in NODE_PORT_SERVICE_TYPES


@dataclass(slots=True, kw_only=True, frozen=True)
class Service:
    __hash__ = None  # type: ignore[assignment]

    metadata: ObjectMetadata
    spec: ServiceSpec = field(default_factory=ServiceSpec)

    @property
    def key(self) -> ServiceKey:
        return (self.metadata.namespace, self.metadata.name)
