# xlogger/config/initialize_config.py
"""
Configuration initialization module.

Handles loading the environment, validating settings and configuring
the diagnostics logger.
"""
from typing import List, Optional, Union
from os import PathLike
from dotenv import load_dotenv
from pydantic import ValidationError
from .app_config import XLoggerSettings, load_settings
from .structlog_config import configure_structlog
from xlogger.errors import ConfigurationError


class _ConfigState:
    """
    Singleton holding the settings of the last initialize_config() call.
    """

    _instance: Optional["_ConfigState"] = None
    _config: Optional[XLoggerSettings]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = None
        return cls._instance

    @property
    def config(self) -> XLoggerSettings:
        """Get validated settings."""
        if self._config is None:
            raise RuntimeError(
                "Configuration not initialized. Call initialize_config() at startup."
            )
        return self._config

    def set_config(self, config: XLoggerSettings) -> None:
        self._config = config

    def reset(self) -> None:
        """Forget the settings. FOR TESTING ONLY."""
        self._config = None


_state = _ConfigState()


def initialize_config(
    dotenv_path: Optional[Union[str, PathLike]] = None,
) -> XLoggerSettings:
    """
    Load, validate and store the logging settings.

    Variables from a .env file are loaded first; variables already set in
    the process environment win.

    Args:
        dotenv_path: Explicit .env file (default: search from the working directory)

    Returns:
        The validated settings

    Raises:
        ConfigurationError: If configuration is invalid or missing
    """
    load_dotenv(dotenv_path=dotenv_path, override=False)
    try:
        config = load_settings()
    except ValidationError as e:
        errors: List[str] = []
        for error in e.errors():
            field = ".".join(str(x) for x in error["loc"]) or "settings"
            msg = error["msg"]
            errors.append(f"{field}: {msg}")

        raise ConfigurationError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        ) from e
    except ValueError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e

    configure_structlog(config.logging.level_int)
    _state.set_config(config)
    return config


def get_config() -> XLoggerSettings:
    """
    Get validated settings.

    Raises:
        RuntimeError: If not initialized
    """
    return _state.config


__all__ = ["initialize_config", "get_config"]
