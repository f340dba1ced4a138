# fanlog/logger/log_backends/base.py
"""Base class for fan-out logger backends."""

import os
import sys
import threading
from abc import ABC, abstractmethod
from typing import NoReturn
from fanlog.api_error import FatalLogError
from fanlog.config.logging_config import LoggerInfo
from fanlog.logger.logger import get_app_logger

logger = get_app_logger(__name__)


class LoggerBackend(ABC):
    """
    Abstract base class for logger backends.

    A backend owns one sink (file, syslog socket, standard streams) and the
    LoggerInfo describing how messages for it are rendered.

    ``log`` always writes what it is given. Deciding whether a message
    reaches a backend at all is the dispatcher's job, using
    ``get_logger_info().debug_lvl``.
    """

    def __init__(self, info: LoggerInfo):
        """
        Initialize backend with its configuration.

        Args:
            info: Rendering options for this backend
        """
        self._info = info

    @abstractmethod
    def log(self, level: int, msg: str) -> None:
        """
        Write a fully formatted message to the sink.

        Args:
            level: Severity level of the message
            msg: Message text, written verbatim (no newline is added)

        Raises:
            FatalLogError: If the sink rejects the write
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """
        Release the sink.

        Called at most once per instance; the registry guarantees it.
        """
        pass

    def _write_failed(self, message: str, cause: BaseException) -> NoReturn:
        """
        Terminate after a failed write.

        On the main thread this raises FatalLogError. Off the main thread a
        SystemExit would only end that thread, so the failure is logged and
        the process exits with status 1 directly.
        """
        if threading.current_thread() is not threading.main_thread():
            logger.critical(
                "Log write failed, terminating process",
                backend=self.name,
                error=message,
            )
            sys.stderr.flush()
            os._exit(1)
        raise FatalLogError(message, backend=self.name) from cause

    def get_logger_info(self) -> LoggerInfo:
        """Backend configuration, used for filtering and introspection."""
        return self._info

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name for identification."""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} {self._info}>"


__all__ = ["LoggerBackend"]
