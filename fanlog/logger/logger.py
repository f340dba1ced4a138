# fanlog/logger/logger.py
"""
Logger for fanlog's own diagnostics.

Usage:
    from fanlog.logger.logger import get_app_logger

    logger = get_app_logger(__name__)
    logger.debug("Backend registered", key=3)

These events describe the fan-out machinery and always go to structlog,
never through a LoggerRegistry, so a failing backend cannot hide them.
"""
from typing import Any
import structlog

from fanlog.config.structlog_config import get_logger as _get_structlog_logger


class AppLogger:
    """
    Internal logger wrapper.

    Provides a type-safe interface to structlog with lazy initialization.
    """

    def __init__(self, name: str = "fanlog"):
        self._name = name

    @property
    def _logger(self) -> structlog.BoundLogger:
        """
        Resolve the structlog logger on each call.

        Configuration can change at runtime (initialize_config), so the
        bound logger is never cached here.
        """
        return _get_structlog_logger(self._name)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._logger.debug(msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self._logger.info(msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._logger.warning(msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self._logger.error(msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        """Log critical message."""
        self._logger.critical(msg, **kwargs)


def get_app_logger(name: str = "fanlog") -> AppLogger:
    """
    Get internal logger instance.

    Args:
        name: Logger name

    Returns:
        AppLogger instance
    """
    return AppLogger(name)


__all__ = ["AppLogger", "get_app_logger"]
