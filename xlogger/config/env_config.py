# xlogger/config/env_config.py
import os
from typing import Optional
from xlogger.errors import ConfigurationError


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get a stripped env variable; unset or blank values yield the default.
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def require_env(name: str) -> str:
    """
    Get required environment variable or raise immediately.
    """
    value = get_env(name)
    if value is None:
        raise ConfigurationError(f"Missing required env variable: {name}")
    return value


__all__ = ["require_env", "get_env"]
