from __future__ import annotations

from .logging import configure_logging
from .maps import merge_preserving_existing_keys

__all__ = [
    "configure_logging",
    "merge_preserving_existing_keys",
]
