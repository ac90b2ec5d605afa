#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from svcreconcile.app import diff_service_manifests, render_diff
from svcreconcile.common.logging import configure_logging
from svcreconcile.config import ConfigurationError, get_reconciler_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

NOT_FOUND_MARKER = "-"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plan the reconciliation of a Service")
    subparsers = parser.add_subparsers(dest="command", required=True)

    diff = subparsers.add_parser(
        "diff",
        help="Compare a desired Service manifest with the live one",
    )
    diff.add_argument("desired", type=Path, help="JSON manifest of the desired Service")
    diff.add_argument(
        "observed",
        nargs="?",
        default=NOT_FOUND_MARKER,
        help="JSON manifest of the live Service ('-' or omitted if it does not exist)",
    )
    diff.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indentation of the JSON output (defaults to config)",
    )

    return parser.parse_args(list(argv))


def _observed_path(value: str) -> Path | None:
    if value == NOT_FOUND_MARKER:
        return None
    return Path(value)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_reconciler_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid configuration")
        sys.exit(2)
    configure_logging(level=config.log_level_value)

    try:
        parsed_args = _parse_args(args_list)
        indent = parsed_args.indent if parsed_args.indent is not None else config.output_indent
        if indent < 0:
            raise ValueError("Indent must be non-negative")  # noqa: TRY301
        diff = diff_service_manifests(parsed_args.desired, _observed_path(parsed_args.observed))
    except ValueError:
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while planning reconciliation")
        sys.exit(1)

    print(json.dumps(render_diff(diff), indent=indent or None, sort_keys=True))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
