"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ServiceType(StrEnum):
    """How a Service is exposed."""

    CLUSTER_IP = "ClusterIP"
    NODE_PORT = "NodePort"
    LOAD_BALANCER = "LoadBalancer"
    EXTERNAL_NAME = "ExternalName"


class IPFamily(StrEnum):
    IPV4 = "IPv4"
    IPV6 = "IPv6"


class IPFamilyPolicy(StrEnum):
    SINGLE_STACK = "SingleStack"
    PREFER_DUAL_STACK = "PreferDualStack"
    REQUIRE_DUAL_STACK = "RequireDualStack"


class SessionAffinity(StrEnum):
    NONE = "None"
    CLIENT_IP = "ClientIP"


NODE_PORT_SERVICE_TYPES: frozenset[ServiceType] = frozenset(
    {ServiceType.NODE_PORT, ServiceType.LOAD_BALANCER}
)
