# xlogger/logger_aware.py
from typing import Optional

from xlogger.sinks.base import LogSink
from xlogger.sinks.null_sink import NullSink


class LoggerAwareMixin:
    """
    Gives a class a `logger` that is always safe to call.

    Until set_logger() is called the logger is a NullSink, so code never
    has to check whether logging was configured.

    Example:
        class Importer(LoggerAwareMixin):
            def run(self):
                self.logger.info("Start {class}.run()", {"class": type(self).__name__})

        importer = Importer()
        importer.run()                      # logs nothing
        importer.set_logger(FileSink(fullpath="import.log"))
        importer.run()                      # written to import.log
    """

    _logger: Optional[LogSink] = None

    @property
    def logger(self) -> LogSink:
        if self._logger is None:
            self._logger = NullSink()
        return self._logger

    def set_logger(self, logger: LogSink) -> None:
        self._logger = logger


__all__ = ["LoggerAwareMixin"]
