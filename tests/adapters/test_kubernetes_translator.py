from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from svcreconcile.adapters.kubernetes import (
    ManifestError,
    load_service_manifest,
    service_from_manifest,
    service_to_manifest,
)
from svcreconcile.domain.model import (
    IPFamily,
    IPFamilyPolicy,
    ServiceType,
    SessionAffinity,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


LIVE_SERVICE: dict[str, Any] = {
    "apiVersion": "v1",
    "kind": "Service",
    "metadata": {
        "name": "es-http",
        "namespace": "elastic",
        "uid": "1b4e28ba-2fa1-11d2-883f-0016d3cca427",
        "resourceVersion": "4711",
        "creationTimestamp": "2024-01-01T00:00:00Z",
        "labels": {"app": "es"},
        "annotations": {"cloud.example.com/lb-id": "abc"},
        "ownerReferences": [
            {
                "apiVersion": "example.com/v1",
                "kind": "Cluster",
                "name": "es",
                "uid": "owner-uid",
                "controller": True,
                "blockOwnerDeletion": True,
            }
        ],
    },
    "spec": {
        "type": "LoadBalancer",
        "clusterIP": "10.0.0.5",
        "clusterIPs": ["10.0.0.5", "fd00::5"],
        "ipFamilies": ["IPv4", "IPv6"],
        "ipFamilyPolicy": "PreferDualStack",
        "sessionAffinity": "None",
        "externalTrafficPolicy": "Local",
        "healthCheckNodePort": 32000,
        "internalTrafficPolicy": "Cluster",
        "allocateLoadBalancerNodePorts": True,
        "loadBalancerSourceRanges": ["10.1.0.0/16"],
        "externalIPs": ["192.0.2.10"],
        "ports": [
            {
                "name": "https",
                "protocol": "TCP",
                "appProtocol": "https",
                "port": 9200,
                "targetPort": 9200,
                "nodePort": 31200,
            },
            {"name": "web", "protocol": "TCP", "port": 80, "targetPort": "http", "nodePort": 31080},
        ],
        "selector": {"app": "es"},
    },
    "status": {"loadBalancer": {}},
}


def test_live_manifest_is_translated() -> None:
    service = service_from_manifest(LIVE_SERVICE)

    assert service.key == ("elastic", "es-http")
    assert service.metadata.resource_version == "4711"
    assert service.metadata.owner_references[0].uid == "owner-uid"
    assert service.spec.type is ServiceType.LOAD_BALANCER
    assert service.spec.cluster_ips == ("10.0.0.5", "fd00::5")
    assert service.spec.ip_families == (IPFamily.IPV4, IPFamily.IPV6)
    assert service.spec.ip_family_policy is IPFamilyPolicy.PREFER_DUAL_STACK
    assert service.spec.session_affinity is SessionAffinity.NONE
    assert service.spec.health_check_node_port == 32000
    assert [port.target_port for port in service.spec.ports] == [9200, "http"]
    assert [port.node_port for port in service.spec.ports] == [31200, 31080]
    assert service.spec.ports[0].app_protocol == "https"
    assert service.spec.load_balancer_source_ranges == ("10.1.0.0/16",)
    assert service.spec.external_ips == ("192.0.2.10",)
    assert service.spec.allocate_load_balancer_node_ports is True
    assert service.spec.internal_traffic_policy == "Cluster"


def test_minimal_manifest_uses_zero_values() -> None:
    service = service_from_manifest(
        {"metadata": {"name": "web"}, "spec": {"type": "", "ports": [{"port": 80}]}}
    )

    assert service.metadata.namespace == "default"
    assert service.spec.type is None
    assert service.spec.cluster_ip == ""
    assert service.spec.ip_families == ()
    assert service.spec.ports[0].protocol == "TCP"
    assert service.spec.ports[0].target_port == 0


def test_manifest_round_trip_drops_only_server_managed_fields() -> None:
    manifest = service_to_manifest(service_from_manifest(LIVE_SERVICE))

    expected_metadata = {
        key: value for key, value in LIVE_SERVICE["metadata"].items() if key != "creationTimestamp"
    }
    expected_spec = LIVE_SERVICE["spec"]
    assert manifest == {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": expected_metadata,
        "spec": expected_spec,
    }


def test_session_affinity_config_round_trips() -> None:
    payload: dict[str, Any] = {
        "metadata": {"name": "web", "namespace": "default"},
        "spec": {
            "sessionAffinity": "ClientIP",
            "sessionAffinityConfig": {"clientIP": {"timeoutSeconds": 600}},
        },
    }

    service = service_from_manifest(payload)

    assert service.spec.session_affinity_timeout_seconds == 600
    assert service_to_manifest(service)["spec"] == payload["spec"]


def test_disabled_load_balancer_node_ports_are_kept() -> None:
    manifest = service_to_manifest(
        service_from_manifest(
            {"metadata": {"name": "web"}, "spec": {"allocateLoadBalancerNodePorts": False}}
        )
    )

    assert manifest["spec"] == {"allocateLoadBalancerNodePorts": False}


def test_unset_fields_are_omitted_from_output() -> None:
    manifest = service_to_manifest(
        service_from_manifest({"metadata": {"name": "web"}, "spec": {"ports": [{"port": 80}]}})
    )

    assert manifest["metadata"] == {"name": "web", "namespace": "default"}
    assert manifest["spec"] == {"ports": [{"protocol": "TCP", "port": 80}]}


@pytest.mark.parametrize(
    "payload",
    [
        {"spec": {}},
        {"kind": "Pod", "metadata": {"name": "web"}},
        {"metadata": {"name": "web"}, "spec": {"type": "Headless"}},
        {"metadata": {"name": "web"}, "spec": {"ports": [{"name": "no-port"}]}},
    ],
)
def test_invalid_manifests_raise_manifest_error(payload: dict[str, Any]) -> None:
    with pytest.raises(ManifestError):
        service_from_manifest(payload)


def test_load_service_manifest_reads_json(
    write_manifest: Callable[[str, dict[str, Any]], Path],
) -> None:
    path = write_manifest("live.json", LIVE_SERVICE)

    assert load_service_manifest(path) == service_from_manifest(LIVE_SERVICE)


def test_load_service_manifest_reports_unreadable_files(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestError, match="not valid JSON"):
        load_service_manifest(broken)
    with pytest.raises(ManifestError, match="Cannot read"):
        load_service_manifest(tmp_path / "missing.json")


def test_manifest_is_json_serializable() -> None:
    manifest = service_to_manifest(service_from_manifest(LIVE_SERVICE))

    assert json.loads(json.dumps(manifest)) == manifest
