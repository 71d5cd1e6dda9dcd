from __future__ import annotations

import inspect
import os

import pytest

from xlogger import ChromeLoggerSink, FirePHPSink, Severity, StructlogConsoleTransport
from xlogger.sinks import console_method
from xlogger.sinks.console_sink import _ConsoleSink
from xlogger.sinks.transports import BACKTRACE_LEVEL

from conftest import RecordingLogger, RecordingTransport

METHODS = {
    "emergency": "error",
    "alert": "error",
    "critical": "error",
    "error": "error",
    "warning": "warn",
    "notice": "log",
    "info": "info",
    "debug": "log",
}


@pytest.mark.parametrize("level,method", sorted(METHODS.items()))
def test_console_method_mapping(level: str, method: str) -> None:
    assert console_method(Severity(level)) == method


@pytest.mark.parametrize("level,method", sorted(METHODS.items()))
def test_firephp_sends_labeled_message(
    transport: RecordingTransport, level: str, method: str
) -> None:
    sink = FirePHPSink(transport=transport)
    sink.log(level, "something {what}", {"what": "happened"})
    assert transport.calls == [(method, (f"{level.upper()}: something happened",), {})]


def test_firephp_registers_itself_as_ignored(transport: RecordingTransport) -> None:
    FirePHPSink(transport=transport)
    assert transport.ignored_classes == [FirePHPSink]
    assert transport.ignored_paths
    assert all(os.path.isabs(path) for path in transport.ignored_paths)


def test_firephp_sends_extra_context_labeled(transport: RecordingTransport) -> None:
    sink = FirePHPSink(transport=transport)
    sink.warning("disk {disk} full", {"disk": "sda1", "free": 0, "mounts": ["/", "/home"]})
    assert transport.calls == [
        ("warn", ("WARNING: disk sda1 full",), {}),
        ("log", (0,), {"label": "free"}),
        ("log", (["/", "/home"],), {"label": "mounts"}),
    ]


def test_chromelogger_groups_extra_context(transport: RecordingTransport) -> None:
    sink = ChromeLoggerSink(transport=transport)
    sink.info("user {name}", {"name": "alice", "session": 42})
    assert transport.calls == [
        ("info", ("INFO: user alice",), {}),
        ("group", (), {}),
        ("info", ("session", 42), {}),
        ("group_end", (), {}),
    ]


def test_chromelogger_sets_backtrace_level(transport: RecordingTransport) -> None:
    ChromeLoggerSink(transport=transport)
    assert transport.settings == {BACKTRACE_LEVEL: 4}


def test_chromelogger_without_context_sends_no_group(transport: RecordingTransport) -> None:
    sink = ChromeLoggerSink(transport=transport)
    sink.error("plain")
    assert transport.calls == [("error", ("ERROR: plain",), {})]


def test_below_threshold_sends_nothing(transport: RecordingTransport) -> None:
    sink = ChromeLoggerSink("error", transport=transport)
    sink.warning("quiet", {"key": "value"})
    assert transport.calls == []


def test_failing_transport_is_swallowed(recording_logger: RecordingLogger) -> None:
    class BrokenTransport(RecordingTransport):
        def error(self, *values, **kwargs) -> None:
            raise ConnectionError("headers already sent")

    sink = ChromeLoggerSink(transport=BrokenTransport())
    sink._diagnostics = recording_logger
    sink.error("lost")

    ((level, msg, fields),) = recording_logger.entries
    assert level == "warning"
    assert msg == "Log record dropped"
    assert fields["sink"] == "chromelogger"
    assert "headers already sent" in fields["reason"]


def test_structlog_transport_reports_caller_for_firephp(
    recording_logger: RecordingLogger,
) -> None:
    sink = FirePHPSink(transport=StructlogConsoleTransport(logger=recording_logger))
    line = inspect.currentframe().f_lineno + 1
    sink.error("failed {step}", {"step": "load", "attempt": 2})

    (level, msg, fields), (ctx_level, ctx_msg, ctx_fields) = recording_logger.entries
    assert (level, msg) == ("error", "ERROR: failed load")
    assert fields["console"] == "error"
    assert fields["caller"].endswith(f"test_console_sink.py({line})")
    assert (ctx_level, ctx_msg) == ("info", "2")
    assert ctx_fields["label"] == "attempt"
    assert ctx_fields["caller"] == fields["caller"]


def test_structlog_transport_reports_caller_for_chromelogger(
    recording_logger: RecordingLogger,
) -> None:
    sink = ChromeLoggerSink(transport=StructlogConsoleTransport(logger=recording_logger))
    line = inspect.currentframe().f_lineno + 1
    sink.notice("started", {"pid": 77})

    (level, msg, fields), (ctx_level, ctx_msg, ctx_fields) = recording_logger.entries
    assert (level, msg) == ("info", "NOTICE: started")
    assert fields["console"] == "log"
    assert fields["caller"].endswith(f"test_console_sink.py({line})")
    # context entries are indented by the open group
    assert (ctx_level, ctx_msg) == ("info", "  pid 77")
    assert ctx_fields["caller"] == fields["caller"]


def test_console_sink_without_context_calls_cannot_be_built(transport: RecordingTransport) -> None:
    class IncompleteSink(_ConsoleSink):
        @property
        def name(self) -> str:
            return "incomplete"

    with pytest.raises(TypeError):
        IncompleteSink(transport)
