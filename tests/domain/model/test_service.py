from __future__ import annotations

import pytest

from svcreconcile.domain.model import ServicePort, ServiceSpec, ServiceType
from tests.support.services import make_port, make_service


@pytest.mark.parametrize(
    ("target_port", "expected"),
    [
        (8080, 8080),
        (0, 0),
        ("9200", 9200),
        ("+80", 80),
        ("http", 0),
        ("8_0", 0),
        (" 80", 0),
        ("\u0668\u0660", 0),
    ],
)
def test_target_port_value(target_port: int | str, expected: int) -> None:
    assert ServicePort(port=80, target_port=target_port).target_port_value == expected


def test_only_node_port_and_load_balancer_allocate_node_ports() -> None:
    allocating = {
        service_type
        for service_type in ServiceType
        if ServiceSpec(type=service_type).allocates_node_ports
    }

    assert allocating == {ServiceType.NODE_PORT, ServiceType.LOAD_BALANCER}
    assert not ServiceSpec().allocates_node_ports


def test_service_key_is_namespace_and_name() -> None:
    assert make_service("es-http", namespace="elastic").key == ("elastic", "es-http")


def test_services_compare_structurally() -> None:
    assert make_service(selector={"app": "web"}) == make_service(selector={"app": "web"})
    assert make_service(selector={"app": "web"}) != make_service(selector={"app": "api"})


def test_services_are_unhashable() -> None:
    with pytest.raises(TypeError, match="unhashable type"):
        hash(make_service())
    with pytest.raises(TypeError, match="unhashable type"):
        hash(ServiceSpec())


def test_ports_are_hashable() -> None:
    assert len({make_port(80), make_port(80), make_port(443)}) == 2
