"""Reconciler runtime settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import optional_env_var, optional_int_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "SVCRECONCILE_LOG_LEVEL"
OUTPUT_INDENT_ENV_VAR = "SVCRECONCILE_OUTPUT_INDENT"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_OUTPUT_INDENT = 2


@dataclass(frozen=True, slots=True)
class ReconcilerConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    output_indent: int = DEFAULT_OUTPUT_INDENT

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.output_indent < 0:
            raise ConfigurationError("Output indent must be non-negative")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def get_reconciler_config() -> ReconcilerConfig:
    log_level = optional_env_var(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    return ReconcilerConfig(
        log_level=log_level.upper(),
        output_indent=optional_int_env_var(OUTPUT_INDENT_ENV_VAR, default=DEFAULT_OUTPUT_INDENT),
    )
