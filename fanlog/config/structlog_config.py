# fanlog/config/structlog_config.py
"""
Structlog configuration for fanlog's own diagnostics.

These events (backend registered, backend failed to start, ...) describe the
fan-out machinery itself and are never routed through a LoggerRegistry.
Configured explicitly via configure_structlog(), or lazily with the
environment default on first use.
"""
import sys
import os
import logging
import threading
from typing import Any, Optional
import structlog

from .config_types import EnvLogLevel
from .env_config import get_env


class _StructlogState:
    """
    Thread-safe, process-safe singleton for structlog configuration state.

    Handles forked children, which must configure again in their own process.
    """

    _instance: Optional["_StructlogState"] = None
    _lock = threading.Lock()

    # Declare instance attributes with their types
    _initialized: bool
    _log_level: Optional[int]
    _process_id: Optional[int]

    def __new__(cls) -> "_StructlogState":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:  # Double-check locking
                    instance = super().__new__(cls)
                    instance._initialized = False
                    instance._log_level = None
                    instance._process_id = None  # Track which process configured
                    cls._instance = instance
        return cls._instance

    @property
    def is_configured(self) -> bool:
        """Check if configured in the CURRENT process."""
        current_pid = os.getpid()
        return self._initialized and self._process_id == current_pid

    @property
    def log_level(self) -> Optional[int]:
        return self._log_level

    def mark_configured(self, log_level: int) -> None:
        """Mark structlog as configured with given level in this process."""
        with self._lock:
            self._log_level = log_level
            self._process_id = os.getpid()
            self._initialized = True

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        with self._lock:
            self._initialized = False
            self._log_level = None
            self._process_id = None


_state = _StructlogState()


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def default_internal_log_level() -> int:
    """Level from FANLOG_INTERNAL_LOG_LEVEL, WARNING when unset or unknown."""
    raw = (get_env("FANLOG_INTERNAL_LOG_LEVEL") or "").upper()
    try:
        return EnvLogLevel(raw).level
    except ValueError:
        return logging.WARNING


def configure_structlog(log_level: int) -> None:
    """
    Configure structlog with the specified log level.

    Calling again with the same level in the same process is a no-op;
    a different level reconfigures.

    Args:
        log_level: Numeric logging level (e.g., logging.INFO)
    """
    if _state.is_configured and _state.log_level == log_level:
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,  # type: ignore[list-item]
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.RichTracebackFormatter(
                    show_locals=False,
                    width=None,
                ),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

    _state.mark_configured(log_level)


def get_logger(name: str = "fanlog") -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    Configures structlog with the environment default level if nothing
    configured it in this process yet.

    Args:
        name: Logger name

    Returns:
        Configured structlog logger
    """
    if not _state.is_configured:
        configure_structlog(default_internal_log_level())
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Check if structlog has been configured in this process."""
    return _state.is_configured


def reset_structlog_state() -> None:
    """Forget the configuration. FOR TESTING ONLY."""
    _state.reset()
    structlog.reset_defaults()


__all__ = [
    "configure_structlog",
    "default_internal_log_level",
    "get_logger",
    "is_configured",
    "reset_structlog_state",
]
