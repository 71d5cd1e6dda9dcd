from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from xlogger import FileSink
from xlogger.config.structlog_config import _state as structlog_state
from xlogger.config.structlog_config import configure_structlog, get_logger, is_configured
from xlogger.logger import get_app_logger


@pytest.fixture
def diagnostics() -> Iterator[io.StringIO]:
    """Diagnostics configured at INFO into a buffer; previous state is restored."""
    previous = (structlog_state._log_level, structlog_state._processors, structlog_state._stream)
    structlog_state.reset()
    stream = io.StringIO()
    configure_structlog(logging.INFO, stream=stream)
    yield stream
    structlog_state.reset()
    if previous[1] is not None:
        structlog_state.store(*previous)


def test_get_logger_requires_configuration() -> None:
    previous = (structlog_state._log_level, structlog_state._processors, structlog_state._stream)
    structlog_state.reset()
    try:
        assert not is_configured()
        with pytest.raises(RuntimeError):
            get_logger("xlogger.test")
    finally:
        if previous[1] is not None:
            structlog_state.store(*previous)


def test_app_logger_writes_to_stream(diagnostics: io.StringIO) -> None:
    get_app_logger("xlogger.test").info("hello", key=1)
    output = diagnostics.getvalue()
    assert "hello" in output
    assert "key=1" in output


def test_level_filters_entries(diagnostics: io.StringIO) -> None:
    get_app_logger("xlogger.test").debug("hidden")
    assert "hidden" not in diagnostics.getvalue()


def test_reconfigure_with_same_level_is_allowed(diagnostics: io.StringIO) -> None:
    configure_structlog(logging.INFO)
    with pytest.raises(RuntimeError):
        configure_structlog(logging.DEBUG)


def test_dropped_record_is_reported(diagnostics: io.StringIO, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    FileSink(fullpath=str(blocker / "app.log")).error("lost")

    output = diagnostics.getvalue()
    assert "Log record dropped" in output
    assert "sink=file" in output


def test_invalid_diagnostics_level_falls_back_to_warning(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    previous = (structlog_state._log_level, structlog_state._processors, structlog_state._stream)
    structlog_state.reset()
    monkeypatch.setenv("XLOGGER_DIAGNOSTICS_LEVEL", "verbose")
    try:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        FileSink(fullpath=str(blocker / "app.log")).error("hello")

        assert is_configured()
        assert structlog_state.log_level == logging.WARNING
    finally:
        structlog_state.reset()
        if previous[1] is not None:
            structlog_state.store(*previous)
