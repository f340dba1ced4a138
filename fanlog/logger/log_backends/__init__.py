# fanlog/logger/log_backends/__init__.py
"""
Logger backends and the registry that fans messages out to them.

Backends: console (stdout/stderr, optionally colored), file, syslog.
Configure via FANLOG_BACKENDS environment variable (comma-separated).

Example:
    FANLOG_BACKENDS=console,file
"""

from .base import LoggerBackend
from .colors import AnsiTerminal, Color, color_for_level
from .console_backend import ConsoleLogger, new_console_logger
from .file_backend import FileLogger
from .syslog_backend import SyslogLogger
from .registry import (
    LoggerRegistry,
    available_backends,
    build_backend,
    get_default_registry,
    register_backend_factory,
    register_logger,
    reset_default_registry,
    unregister_logger,
)

__all__ = [
    "LoggerBackend",
    "AnsiTerminal",
    "Color",
    "color_for_level",
    "ConsoleLogger",
    "new_console_logger",
    "FileLogger",
    "SyslogLogger",
    "LoggerRegistry",
    "available_backends",
    "build_backend",
    "get_default_registry",
    "register_backend_factory",
    "register_logger",
    "reset_default_registry",
    "unregister_logger",
]
