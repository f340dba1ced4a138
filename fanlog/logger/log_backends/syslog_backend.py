# fanlog/logger/log_backends/syslog_backend.py
"""Syslog logger backend built on the standard library's SysLogHandler."""
import logging
import os
import sys
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import Tuple, Union
from fanlog.api_error import BackendInitError
from fanlog.config.app_config import DEFAULT_SYSLOG_ADDRESS
from fanlog.config.logging_config import LoggerInfo
from fanlog.logger.logger import get_app_logger
from .base import LoggerBackend

logger = get_app_logger(__name__)

SyslogAddress = Union[str, Tuple[str, int]]


class _RawSysLogHandler(SysLogHandler):
    """
    SysLogHandler sending every record at one fixed priority.

    Send failures propagate to the caller instead of being printed by
    logging's handleError.
    """

    def __init__(self, address: SyslogAddress, facility: int, severity: int):
        super().__init__(address=address, facility=facility)
        self._severity = severity
        # SysLogHandler ignores an unreachable unix socket at construction;
        # socktype is only set once a connect succeeded
        if self.unixsocket and self.socktype is None:
            self.close()
            raise ConnectionError(f"syslog socket {address} is unreachable")

    def mapPriority(self, levelName: str) -> int:  # noqa: N802
        return self._severity

    def handleError(self, record: logging.LogRecord) -> None:  # noqa: N802
        # Only ever called from emit()'s except clause: re-raise what it caught
        raise


def default_tag() -> str:
    """Program name, used when no tag is given."""
    return Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "python"


class SyslogLogger(LoggerBackend):
    """
    Backend writing each message to the system log.

    The priority is the (facility, severity) pair, fixed for the lifetime of
    the backend. Each message is sent as ``<PRI>tag[pid]: msg``.
    """

    def __init__(
        self,
        info: LoggerInfo,
        tag: str = "",
        facility: int = SysLogHandler.LOG_USER,
        severity: int = SysLogHandler.LOG_INFO,
        address: SyslogAddress = DEFAULT_SYSLOG_ADDRESS,
    ):
        """
        Connect to the syslog facility.

        Args:
            info: Rendering options for this backend
            tag: Syslog tag, program name when empty
            facility: SysLogHandler.LOG_* facility code
            severity: SysLogHandler.LOG_* severity code
            address: Unix socket path, or (host, port) for UDP

        Raises:
            BackendInitError: If the syslog facility cannot be reached
        """
        super().__init__(info)
        self._tag = tag or default_tag()
        self._address = address
        try:
            self._handler = _RawSysLogHandler(address, facility, severity)
        except OSError as e:
            raise BackendInitError(
                f"Cannot connect to syslog at {address}: {e}", backend=self.name
            ) from e
        self._handler.ident = f"{self._tag}[{os.getpid()}]: "
        logger.debug("Syslog backend connected", address=str(address), tag=self._tag)

    @property
    def name(self) -> str:
        """Backend name."""
        return "syslog"

    @property
    def tag(self) -> str:
        return self._tag

    def log(self, level: int, msg: str) -> None:
        """
        Send ``msg`` to syslog.

        Raises:
            FatalLogError: If the send fails
        """
        record = logging.LogRecord(
            name=self._tag,
            level=logging.INFO,
            pathname="",
            lineno=0,
            msg=msg,
            args=None,
            exc_info=None,
        )
        try:
            self._handler.emit(record)
        except Exception as e:
            self._write_failed(f"Write to syslog at {self._address} failed: {e}", e)

    def close(self) -> None:
        """Close the syslog socket."""
        self._handler.close()
        logger.debug("Syslog backend closed", address=str(self._address))


__all__ = ["SyslogLogger", "SyslogAddress", "default_tag", "DEFAULT_SYSLOG_ADDRESS"]
