# fanlog/config/env_config.py
import os
from typing import Optional
from fanlog.api_error import ConfigurationError
from .config_types import EnvBool


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get Env variable with optional default
    """
    return os.getenv(name, default=default)


def get_env_bool(name: str, default: bool) -> bool:
    """
    Get a boolean env variable, falling back to default when unset or empty.
    """
    value = os.getenv(name)
    if not value:
        return default
    try:
        return EnvBool.parse(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid env variable {name}: {e}") from e


def get_env_int(name: str, default: int) -> int:
    """
    Get an integer env variable, falling back to default when unset or empty.
    """
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid env variable {name}: expected an integer, got {value!r}"
        ) from e


__all__ = ["get_env", "get_env_bool", "get_env_int"]
