# xlogger/config/logging_config.py
from dataclasses import dataclass
from .env_config import get_env
from .config_types import EnvLogLevel
from xlogger.errors import ConfigurationError

_default_diagnostics_level_env_key = "XLOGGER_DIAGNOSTICS_LEVEL"
_default_diagnostics_level = EnvLogLevel.WARNING


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration of the library's own diagnostics logger."""

    log_level: EnvLogLevel

    @property
    def level_value(self) -> str:
        """Get string value of log level."""
        return self.log_level.value

    @property
    def level_int(self) -> int:
        """Get numeric log level."""
        return self.log_level.level


DEFAULT_LOGGING_CONFIG = LoggingConfig(log_level=_default_diagnostics_level)


def load_logging_config(
    log_level_env_key: str = _default_diagnostics_level_env_key,
) -> LoggingConfig:
    """
    Load diagnostics logging configuration from environment.

    The variable is optional: a library must not refuse to log because
    its own diagnostics are unconfigured.

    Args:
        log_level_env_key: Environment variable name

    Returns:
        LoggingConfig instance

    Raises:
        ConfigurationError: If the variable holds an invalid level
    """
    log_level_val = get_env(log_level_env_key, _default_diagnostics_level.value)
    try:
        return LoggingConfig(log_level=EnvLogLevel(log_level_val.upper()))
    except ValueError as exc:
        valid_levels = ", ".join(level.value for level in EnvLogLevel)
        raise ConfigurationError(
            f"Invalid logging configuration. "
            f"{log_level_env_key} must be one of [{valid_levels}]"
        ) from exc


__all__ = [
    "LoggingConfig",
    "DEFAULT_LOGGING_CONFIG",
    "load_logging_config",
]
