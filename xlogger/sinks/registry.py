# xlogger/sinks/registry.py
"""
Sink registry for building sinks by name.

Configure via the XLOGGER_SINK environment variable (see load_settings):
    XLOGGER_SINK=file           # delimited text file
    XLOGGER_SINK=xml            # XML document
    XLOGGER_SINK=chromelogger   # browser console
"""

from typing import Any, Dict, List, Optional, Type

from xlogger.config import SinkConfiguration, SinkKind, XLoggerSettings, get_config
from xlogger.context_vars import current_request_environment
from xlogger.errors import ConfigurationError
from .base import LogSink
from .console_sink import ChromeLoggerSink, FirePHPSink
from .file_sink import FileSink
from .null_sink import NullSink
from .xml_sink import XMLSink


# Registry of available sink classes
_SINK_REGISTRY: Dict[str, Type[LogSink]] = {
    SinkKind.FILE.value: FileSink,
    SinkKind.XML.value: XMLSink,
    SinkKind.FIREPHP.value: FirePHPSink,
    SinkKind.CHROMELOGGER.value: ChromeLoggerSink,
    SinkKind.NULL.value: NullSink,
}


def register_sink(name: str, sink_class: Type[LogSink]) -> None:
    """
    Register a custom sink class.

    Args:
        name: Sink identifier (e.g., 'syslog')
        sink_class: Sink class that extends LogSink

    Example:
        >>> register_sink('syslog', SyslogSink)
    """
    _SINK_REGISTRY[name] = sink_class


def available_sinks() -> List[str]:
    """Names accepted by create_sink()."""
    return sorted(_SINK_REGISTRY)


def create_sink(name: str, **kwargs: Any) -> LogSink:
    """
    Create a sink by registered name.

    Args:
        name: Registered sink name
        **kwargs: Constructor arguments of the sink class

    Raises:
        ConfigurationError: If no sink is registered under the name
    """
    try:
        sink_class = _SINK_REGISTRY[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown sink '{name}'. Available: {', '.join(available_sinks())}"
        ) from None
    return sink_class(**kwargs)


def create_sink_from_settings(settings: Optional[XLoggerSettings] = None) -> LogSink:
    """
    Create the sink described by validated settings.

    Args:
        settings: Settings to use (default: those of initialize_config())

    Returns:
        Configured sink; file based sinks are not opened before the first record
    """
    settings = settings or get_config()

    user = settings.user
    if user is None:
        user = current_request_environment().remote_user
    config = SinkConfiguration(level=settings.level, options=settings.options, user=user)
    if settings.document_root:
        config.document_root = settings.document_root

    kwargs: Dict[str, Any] = {"config": config}
    if settings.sink.needs_path:
        kwargs["fullpath"] = settings.fullpath
    if settings.stylesheet:
        kwargs["stylesheet"] = settings.stylesheet

    return create_sink(settings.sink.value, **kwargs)


__all__ = [
    "register_sink",
    "available_sinks",
    "create_sink",
    "create_sink_from_settings",
]
