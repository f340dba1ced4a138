# fanlog/logger/log_backends/registry.py
"""
Registry of active logger backends and the fan-out over them.

A LoggerRegistry maps an integer key to each registered backend. Keys come
from a counter that only grows, so a key is never handed out twice, even
after its backend was unregistered.

One lock serializes register, unregister and the whole of dispatch, so a
backend is never closed while a message is being written to it.

Backend factories (console, file, syslog) let configuration build backends
by name:
    FANLOG_BACKENDS=console           # Console only (default)
    FANLOG_BACKENDS=console,file      # Multiple backends
"""

import threading
from typing import Any, Callable, Dict, List, Optional
from fanlog.config.logging_config import LoggerInfo
from fanlog.logger.levels import should_log
from fanlog.logger.logger import get_app_logger
from .base import LoggerBackend
from .console_backend import ConsoleLogger, new_console_logger
from .file_backend import FileLogger
from .syslog_backend import SyslogLogger

logger = get_app_logger(__name__)

Formatter = Callable[[int, str, LoggerInfo], str]
BackendFactory = Callable[..., LoggerBackend]


class LoggerRegistry:
    """
    Thread-safe table of active backends.

    The registry owns each backend from register() until unregister(),
    which closes it exactly once.

    Usage::

        registry = LoggerRegistry()
        key = registry.register(FileLogger(LoggerInfo(debug_lvl=3), "app.log"))
        registry.dispatch(2, "cache warmed\\n")
        registry.unregister(key)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loggers: Dict[int, LoggerBackend] = {}
        self._counter = 0

    def register(self, backend: LoggerBackend) -> int:
        """
        Add a backend; it receives every dispatched message it passes.

        Args:
            backend: Backend to register

        Returns:
            The key to unregister it with
        """
        with self._lock:
            key = self._counter
            self._loggers[key] = backend
            self._counter += 1
        logger.debug("Backend registered", key=key, backend=backend.name)
        return key

    def unregister(self, key: int) -> None:
        """
        Close and remove the backend registered under ``key``.

        Unknown or already unregistered keys are ignored.
        """
        with self._lock:
            backend = self._loggers.get(key)
            if backend is None:
                return
            try:
                backend.close()
            finally:
                del self._loggers[key]
        logger.debug("Backend unregistered", key=key, backend=backend.name)

    def dispatch(
        self, level: int, msg: str, formatter: Optional[Formatter] = None
    ) -> int:
        """
        Deliver one message to every registered backend that accepts it.

        A backend accepts the message when ``should_log(level, debug_lvl)``
        holds for its LoggerInfo. Backends are visited in registration order.

        Args:
            level: Severity level
            msg: Message text
            formatter: Renders ``msg`` for each backend's LoggerInfo;
                ``msg`` is passed through unchanged when None

        Returns:
            Number of backends the message was written to

        Raises:
            FatalLogError: From the first backend whose write fails
        """
        delivered = 0
        with self._lock:
            for backend in self._loggers.values():
                info = backend.get_logger_info()
                if not should_log(level, info.debug_lvl):
                    continue
                text = formatter(level, msg, info) if formatter else msg
                backend.log(level, text)
                delivered += 1
        return delivered

    def close_all(self) -> None:
        """Unregister every backend, closing each once."""
        with self._lock:
            keys = list(self._loggers)
            for key in keys:
                backend = self._loggers[key]
                try:
                    backend.close()
                finally:
                    del self._loggers[key]
        if keys:
            logger.debug("All backends unregistered", keys=keys)

    def get(self, key: int) -> Optional[LoggerBackend]:
        """Backend registered under ``key``, if any."""
        with self._lock:
            return self._loggers.get(key)

    def keys(self) -> List[int]:
        """Snapshot of the registered keys, in registration order."""
        with self._lock:
            return list(self._loggers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._loggers


# Backend constructors by configuration name
_BACKEND_FACTORIES: Dict[str, BackendFactory] = {
    "console": ConsoleLogger,
    "file": FileLogger,
    "syslog": SyslogLogger,
}


def register_backend_factory(name: str, factory: BackendFactory) -> None:
    """
    Register a custom backend constructor.

    Args:
        name: Backend identifier used in FANLOG_BACKENDS
        factory: Called as ``factory(info, **options)``

    Example:
        >>> register_backend_factory('journal', JournalLogger)
    """
    _BACKEND_FACTORIES[name] = factory


def available_backends() -> List[str]:
    """Names build_backend() accepts."""
    return list(_BACKEND_FACTORIES)


def build_backend(name: str, info: LoggerInfo, **options: Any) -> LoggerBackend:
    """
    Construct a backend by name.

    Raises:
        ValueError: If no factory is registered under ``name``
        BackendInitError: If the backend cannot acquire its sink
    """
    factory = _BACKEND_FACTORIES.get(name)
    if factory is None:
        raise ValueError(
            f"Unknown backend '{name}'. "
            f"Available: {', '.join(_BACKEND_FACTORIES.keys())}"
        )
    return factory(info, **options)


_default_registry: Optional[LoggerRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> LoggerRegistry:
    """
    The process-wide registry, created on first use with the default
    console backend registered under key 0.
    """
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:  # Double-check locking
                registry = LoggerRegistry()
                registry.register(new_console_logger())
                _default_registry = registry
    return _default_registry


def reset_default_registry() -> None:
    """Close every backend of the process-wide registry and drop it."""
    global _default_registry
    with _default_lock:
        registry, _default_registry = _default_registry, None
    if registry is not None:
        registry.close_all()


def register_logger(backend: LoggerBackend) -> int:
    """Register ``backend`` with the process-wide registry."""
    return get_default_registry().register(backend)


def unregister_logger(key: int) -> None:
    """Unregister ``key`` from the process-wide registry."""
    get_default_registry().unregister(key)


__all__ = [
    "LoggerRegistry",
    "Formatter",
    "BackendFactory",
    "register_backend_factory",
    "available_backends",
    "build_backend",
    "get_default_registry",
    "reset_default_registry",
    "register_logger",
    "unregister_logger",
]
