# xlogger/errors/config_error.py
class ConfigurationError(RuntimeError):
    """
    Raised when the logging configuration is invalid.
    """

    pass


__all__ = ["ConfigurationError"]
