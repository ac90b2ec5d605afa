"""Port for reading and writing Services on the platform."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from svcreconcile.domain.model import OwnerReference, Service


class ServiceClientError(RuntimeError):
    """Base class for failures reported by a service client."""


class ServiceNotFoundError(ServiceClientError):
    """Raised when the requested Service does not exist."""

    def __init__(self, namespace: str, name: str) -> None:
        super().__init__(f"Service {namespace}/{name} not found")
        self.namespace = namespace
        self.name = name


class ServiceConflictError(ServiceClientError):
    """Raised when a write is rejected because the stored object changed or already exists."""


@runtime_checkable
class ServiceClient(Protocol):
    """Platform API operations the reconciler relies on.

    ``delete`` must only remove the object if its uid and resource version
    still match ``service``; otherwise it raises :class:`ServiceConflictError`.
    """

    def get(self, namespace: str, name: str) -> Service: ...

    def create(self, service: Service, *, owner: OwnerReference | None = None) -> Service: ...

    def update(self, service: Service) -> Service: ...

    def delete(self, service: Service) -> None: ...


__all__ = [
    "ServiceClient",
    "ServiceClientError",
    "ServiceConflictError",
    "ServiceNotFoundError",
]
