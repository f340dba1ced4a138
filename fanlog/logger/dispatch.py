# fanlog/logger/dispatch.py
"""
Fan-out helpers: format a message per backend and send it to a registry.

Usage:
    from fanlog.logger import dispatch as log

    log.info("listening on :8080")
    log.lvl(2, "cache warmed")
    log.error("upstream unreachable")

Every helper takes an optional ``registry``; the process-wide one is used
otherwise.
"""
from typing import NoReturn, Optional
from fanlog.api_error import PanicError
from .formatting import format_line
from .levels import LVL_ERROR, LVL_FATAL, LVL_INFO, LVL_PANIC, LVL_PRINT, LVL_WARNING
from .log_backends.registry import LoggerRegistry, get_default_registry


def _target(registry: Optional[LoggerRegistry]) -> LoggerRegistry:
    return registry if registry is not None else get_default_registry()


def lvl(level: int, msg: str, registry: Optional[LoggerRegistry] = None) -> int:
    """
    Send ``msg`` at ``level`` to every backend that accepts it.

    Returns:
        Number of backends written to
    """
    return _target(registry).dispatch(level, msg, formatter=format_line)


def print_(msg: str, registry: Optional[LoggerRegistry] = None) -> int:
    """Unlabelled line, shown by every backend."""
    return lvl(LVL_PRINT, msg, registry)


def info(msg: str, registry: Optional[LoggerRegistry] = None) -> int:
    return lvl(LVL_INFO, msg, registry)


def warn(msg: str, registry: Optional[LoggerRegistry] = None) -> int:
    return lvl(LVL_WARNING, msg, registry)


def error(msg: str, registry: Optional[LoggerRegistry] = None) -> int:
    return lvl(LVL_ERROR, msg, registry)


def fatal(msg: str, registry: Optional[LoggerRegistry] = None) -> NoReturn:
    """Dispatch ``msg`` then exit the process with status 1."""
    lvl(LVL_FATAL, msg, registry)
    raise SystemExit(1)


def panic(msg: str, registry: Optional[LoggerRegistry] = None) -> NoReturn:
    """Dispatch ``msg`` then raise PanicError."""
    lvl(LVL_PANIC, msg, registry)
    raise PanicError(msg)


__all__ = ["lvl", "print_", "info", "warn", "error", "fatal", "panic"]
