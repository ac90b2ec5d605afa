"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, optional_int_env_var
from .errors import ConfigurationError
from .reconciler import ReconcilerConfig, get_reconciler_config

__all__ = [
    "ConfigurationError",
    "ReconcilerConfig",
    "get_reconciler_config",
    "optional_env_var",
    "optional_int_env_var",
]
