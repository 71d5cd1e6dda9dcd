# xlogger/errors/xlogger_error.py
class XLoggerError(Exception):
    """Base error for all logging-library issues."""

    def __init__(
        self,
        message: str,
        code: str = "XLOGGER_ERROR",
    ):
        self.message = message
        self.code = code
        super().__init__(self.message)


class UnknownSeverityError(XLoggerError, ValueError):
    """
    Raised when a severity name is not one of the eight PSR-3 levels.

    Always propagates to the caller of the log operation.
    """

    def __init__(self, level: object):
        self.level = level
        super().__init__(
            f"Unknown logging level ({level})",
            code="UNKNOWN_SEVERITY",
        )


class SinkUnavailableError(XLoggerError):
    """
    Raised when a sink destination cannot be opened, created or parsed.

    Sinks catch it at their boundary: the log call degrades to a no-op.
    """

    def __init__(self, destination: str, reason: str):
        self.destination = destination
        self.reason = reason
        super().__init__(
            f"Log destination unavailable: {destination} ({reason})",
            code="SINK_UNAVAILABLE",
        )


__all__ = ["XLoggerError", "UnknownSeverityError", "SinkUnavailableError"]
