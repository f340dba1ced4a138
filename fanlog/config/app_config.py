# fanlog/config/app_config.py
"""
Complete fanlog configuration with validation.
Which backends to build at startup and how each one is set up.
"""

from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator, model_validator
from .config_types import EnvLogLevel, EnvLogBackends
from .env_config import get_env
from .logging_config import LoggerInfo, load_logger_info
from pathlib import Path

DEFAULT_SYSLOG_ADDRESS = "/dev/log"


class FileBackendConfig(BaseModel):
    """File backend settings. The file is truncated when the backend is built."""

    path: Path = Field(..., description="File the backend writes to")

    model_config = {"frozen": True}

    @field_validator("path")
    @classmethod
    def validate_parent(cls, v: Path) -> Path:
        """The file may not exist yet, but its directory must."""
        if not v.parent.exists():
            raise ValueError(f"Log directory not found: {v.parent}")
        return v


class SyslogBackendConfig(BaseModel):
    """Syslog backend settings."""

    tag: str = Field(default="", description="Syslog tag, empty for program name")
    address: str = Field(default=DEFAULT_SYSLOG_ADDRESS, min_length=1)

    model_config = {"frozen": True}


class FanlogConfig(BaseModel):
    """
    Complete fanlog configuration.

    All configuration is loaded from environment variables and validated
    at startup. Invalid configuration will fail fast with clear error messages.
    """

    logger_info: LoggerInfo
    backends: Tuple[EnvLogBackends, ...] = Field(default=(EnvLogBackends.CONSOLE,))
    file: Optional[FileBackendConfig] = None
    syslog: SyslogBackendConfig = Field(default_factory=SyslogBackendConfig)
    internal_log_level: EnvLogLevel = EnvLogLevel.WARNING

    model_config = {"frozen": True}

    @field_validator("backends")
    @classmethod
    def validate_backends(
        cls, v: Tuple[EnvLogBackends, ...]
    ) -> Tuple[EnvLogBackends, ...]:
        """Drop duplicates, keep order."""
        seen: list[EnvLogBackends] = []
        for backend in v:
            if backend not in seen:
                seen.append(backend)
        return tuple(seen)

    @model_validator(mode="after")
    def validate_backend_settings(self) -> "FanlogConfig":
        """
        Every selected backend must have what it needs to start.
        """
        if EnvLogBackends.FILE in self.backends and self.file is None:
            raise ValueError("FANLOG_FILE_PATH required when file backend is enabled")
        return self


def _split_backends(raw: Optional[str]) -> list[str]:
    if not raw:
        return [EnvLogBackends.CONSOLE.value]
    return [name.strip().lower() for name in raw.split(",") if name.strip()]


def load_fanlog_config() -> FanlogConfig:
    """
    Load complete fanlog configuration.

    Environment variables:
    - FANLOG_DEBUG_LVL, FANLOG_SHOW_TIME, FANLOG_USE_COLORS, FANLOG_PADDING:
      rendering options shared by every configured backend
    - FANLOG_BACKENDS: comma separated list of console, file, syslog
      (default: console)
    - FANLOG_FILE_PATH: required when the file backend is enabled
    - FANLOG_SYSLOG_TAG, FANLOG_SYSLOG_ADDRESS: optional syslog settings
    - FANLOG_INTERNAL_LOG_LEVEL: level of fanlog's own diagnostics

    Returns:
        Validated FanlogConfig instance

    Raises:
        ValidationError: If configuration is invalid
        ConfigurationError: If an env variable cannot be parsed
    """
    backends = _split_backends(get_env("FANLOG_BACKENDS"))
    file_path = get_env("FANLOG_FILE_PATH")
    file_config = None
    if EnvLogBackends.FILE.value in backends and file_path:
        file_config = FileBackendConfig(path=Path(file_path))

    syslog_config = SyslogBackendConfig(
        tag=get_env("FANLOG_SYSLOG_TAG", "") or "",
        address=get_env("FANLOG_SYSLOG_ADDRESS") or DEFAULT_SYSLOG_ADDRESS,
    )

    return FanlogConfig(
        logger_info=load_logger_info(),
        backends=backends,
        file=file_config,
        syslog=syslog_config,
        internal_log_level=(
            get_env("FANLOG_INTERNAL_LOG_LEVEL") or EnvLogLevel.WARNING.value
        ).upper(),
    )


__all__ = [
    "FanlogConfig",
    "FileBackendConfig",
    "SyslogBackendConfig",
    "DEFAULT_SYSLOG_ADDRESS",
    "load_fanlog_config",
]
