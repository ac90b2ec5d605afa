from __future__ import annotations

import logging
import sys
from io import StringIO

import pytest

from svcreconcile.common.logging import LOG_FORMAT, configure_logging


def test_configure_logging_defaults_to_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging()

    assert captured["level"] == logging.INFO
    assert captured["stream"] is sys.stderr
    assert captured["format"] == LOG_FORMAT
    assert captured["force"] is False


def test_configure_logging_passes_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    stream = StringIO()

    configure_logging(level=logging.DEBUG, stream=stream, force=True)

    assert captured["level"] == logging.DEBUG
    assert captured["stream"] is stream
    assert captured["force"] is True
