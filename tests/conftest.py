from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from xlogger import RequestEnvironment, bind_request_environment


class RecordingTransport:
    """Console transport double implementing both console call contracts."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.ignored_classes: list[type] = []
        self.ignored_paths: list[str] = []
        self.settings: dict[str, Any] = {}

    def _record(self, method: str, values: tuple[Any, ...], **kwargs: Any) -> None:
        self.calls.append((method, values, kwargs))

    def error(self, *values: Any, **kwargs: Any) -> None:
        self._record("error", values, **kwargs)

    def warn(self, *values: Any, **kwargs: Any) -> None:
        self._record("warn", values, **kwargs)

    def info(self, *values: Any, **kwargs: Any) -> None:
        self._record("info", values, **kwargs)

    def log(self, *values: Any, **kwargs: Any) -> None:
        self._record("log", values, **kwargs)

    def group(self, *values: Any) -> None:
        self._record("group", values)

    def group_end(self) -> None:
        self._record("group_end", ())

    def ignore_class_in_traces(self, cls: type) -> None:
        self.ignored_classes.append(cls)

    def ignore_path_in_traces(self, path: str) -> None:
        self.ignored_paths.append(path)

    def add_setting(self, key: str, value: Any) -> None:
        self.settings[key] = value


class RecordingLogger:
    """Stands in for the structlog backed AppLogger."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, str, dict[str, Any]]] = []

    def __getattr__(self, level: str) -> Callable[..., None]:
        if level not in ("debug", "info", "warning", "error", "critical"):
            raise AttributeError(level)

        def _log(msg: str, **kwargs: Any) -> None:
            self.entries.append((level, msg, kwargs))

        return _log


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def request_environment() -> Iterator[RequestEnvironment]:
    environment = RequestEnvironment(
        remote_addr="192.0.2.10",
        forwarded_for="",
        user_agent="Mozilla/5.0 (X11; Linux x86_64)",
        remote_user="webuser",
    )
    with bind_request_environment(environment):
        yield environment


@pytest.fixture
def read_lines() -> Callable[[Path], list[str]]:
    def _read(path: Path) -> list[str]:
        return path.read_text(encoding="utf-8").splitlines()

    return _read
