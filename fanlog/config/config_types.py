# fanlog/config/config_types.py
"""Configuration type definitions."""

from enum import Enum
import logging


class EnvBool(str, Enum):
    TRUE = "true"
    FALSE = "false"

    @classmethod
    def parse(cls, raw: str) -> bool:
        """Accept true/false (any case) plus 1/0, yes/no, on/off."""
        value = raw.strip().lower()
        if value in (cls.TRUE.value, "1", "yes", "on"):
            return True
        if value in (cls.FALSE.value, "0", "no", "off"):
            return False
        raise ValueError(f"Invalid boolean value: {raw!r}")

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


class EnvLogLevel(str, Enum):
    """
    Levels for fanlog's own diagnostics (not the fan-out severity levels).

    Inherits from str so enum values serialize naturally to JSON/strings
    without custom serialization logic.

    Examples:
        >>> EnvLogLevel.INFO
        <EnvLogLevel.INFO: 'INFO'>
        >>> str(EnvLogLevel.INFO)
        'INFO'
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return getattr(logging, self.value)

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


class EnvLogBackends(str, Enum):
    CONSOLE = "console"
    FILE = "file"
    SYSLOG = "syslog"

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


__all__ = [
    "EnvBool",
    "EnvLogLevel",
    "EnvLogBackends",
]
