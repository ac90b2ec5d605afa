"""Domain port definitions for adapters."""

from __future__ import annotations

from .services import (
    ServiceClient,
    ServiceClientError,
    ServiceConflictError,
    ServiceNotFoundError,
)

__all__ = [
    "ServiceClient",
    "ServiceClientError",
    "ServiceConflictError",
    "ServiceNotFoundError",
]
