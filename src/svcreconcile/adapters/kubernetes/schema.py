"""Pydantic models describing Kubernetes Service manifests."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from svcreconcile.domain.model import IPFamily, IPFamilyPolicy, ServiceType, SessionAffinity


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class KubernetesBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class OwnerReferencePayload(KubernetesBaseModel):
    api_version: str = Field(alias="apiVersion")
    kind: str
    name: str
    uid: str
    controller: bool | None = None
    block_owner_deletion: bool | None = Field(default=None, alias="blockOwnerDeletion")


class ObjectMetaPayload(KubernetesBaseModel):
    name: str
    namespace: str | None = None
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None
    uid: str | None = None
    resource_version: str | None = Field(default=None, alias="resourceVersion")
    owner_references: list[OwnerReferencePayload] | None = Field(
        default=None, alias="ownerReferences"
    )


class ServicePortPayload(KubernetesBaseModel):
    name: str | None = None
    protocol: str | None = None
    app_protocol: str | None = Field(default=None, alias="appProtocol")
    port: int
    target_port: int | str | None = Field(default=None, alias="targetPort")
    node_port: int | None = Field(default=None, alias="nodePort")


class ClientIPConfigPayload(KubernetesBaseModel):
    timeout_seconds: int | None = Field(default=None, alias="timeoutSeconds")


class SessionAffinityConfigPayload(KubernetesBaseModel):
    client_ip: ClientIPConfigPayload | None = Field(default=None, alias="clientIP")


class ServiceSpecPayload(KubernetesBaseModel):
    type: ServiceType | None = None
    cluster_ip: str | None = Field(default=None, alias="clusterIP")
    cluster_ips: list[str] | None = Field(default=None, alias="clusterIPs")
    ip_families: list[IPFamily] | None = Field(default=None, alias="ipFamilies")
    ip_family_policy: IPFamilyPolicy | None = Field(default=None, alias="ipFamilyPolicy")
    session_affinity: SessionAffinity | None = Field(default=None, alias="sessionAffinity")
    ports: list[ServicePortPayload] | None = None
    health_check_node_port: int | None = Field(default=None, alias="healthCheckNodePort")
    selector: dict[str, str] | None = None
    external_name: str | None = Field(default=None, alias="externalName")
    external_traffic_policy: str | None = Field(default=None, alias="externalTrafficPolicy")
    publish_not_ready_addresses: bool | None = Field(
        default=None, alias="publishNotReadyAddresses"
    )
    external_ips: list[str] | None = Field(default=None, alias="externalIPs")
    load_balancer_ip: str | None = Field(default=None, alias="loadBalancerIP")
    load_balancer_source_ranges: list[str] | None = Field(
        default=None, alias="loadBalancerSourceRanges"
    )
    load_balancer_class: str | None = Field(default=None, alias="loadBalancerClass")
    allocate_load_balancer_node_ports: bool | None = Field(
        default=None, alias="allocateLoadBalancerNodePorts"
    )
    internal_traffic_policy: str | None = Field(default=None, alias="internalTrafficPolicy")
    traffic_distribution: str | None = Field(default=None, alias="trafficDistribution")
    session_affinity_config: SessionAffinityConfigPayload | None = Field(
        default=None, alias="sessionAffinityConfig"
    )

    @field_validator("type", "ip_family_policy", "session_affinity", mode="before")
    @classmethod
    def _normalize_blank_enums(cls, value: object) -> object:
        return _blank_to_none(value)


class ServiceManifest(KubernetesBaseModel):
    api_version: Literal["v1"] = Field(default="v1", alias="apiVersion")
    kind: Literal["Service"] = "Service"
    metadata: ObjectMetaPayload
    spec: ServiceSpecPayload = Field(default_factory=ServiceSpecPayload)
