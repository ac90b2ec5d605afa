"""Shared logging helpers for svcreconcile."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
    force: bool = False,
) -> None:
    """Initialise the root logger once, writing to stderr by default.

    Standard output is reserved for command results, so log records never go
    there unless ``stream`` says otherwise. Pass ``force=True`` to reconfigure
    during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=stream or sys.stderr,
        force=force,
    )
