# fanlog/config/initialize_config.py
"""
Configuration initialization module.

Loads the environment configuration and builds the configured backends
into a registry.
"""
import threading
from typing import TYPE_CHECKING, Any, Dict, List, Optional
from pydantic import ValidationError
from fanlog.api_error import BackendInitError, ConfigurationError
from .app_config import FanlogConfig, load_fanlog_config
from .config_types import EnvLogBackends
from .structlog_config import configure_structlog

if TYPE_CHECKING:
    from fanlog.logger.log_backends.registry import LoggerRegistry


class _ConfigState:
    """
    Thread-safe singleton for fanlog configuration.
    """

    _instance: Optional["_ConfigState"] = None
    _lock = threading.Lock()
    _config: Optional[FanlogConfig]

    def __new__(cls) -> "_ConfigState":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._config = None
                    cls._instance = instance
        return cls._instance

    @property
    def config(self) -> FanlogConfig:
        """Get fanlog configuration."""
        if self._config is None:
            raise RuntimeError(
                "Configuration not initialized. Call initialize_config() at startup."
            )
        return self._config

    def set_config(self, config: FanlogConfig) -> None:
        """Set fanlog configuration."""
        with self._lock:
            self._config = config

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        with self._lock:
            self._config = None


_state = _ConfigState()


def _backend_options(config: FanlogConfig, backend: EnvLogBackends) -> Dict[str, Any]:
    if backend is EnvLogBackends.FILE and config.file is not None:
        return {"path": config.file.path}
    if backend is EnvLogBackends.SYSLOG:
        return {"tag": config.syslog.tag, "address": config.syslog.address}
    return {}


def _load_config() -> FanlogConfig:
    try:
        return load_fanlog_config()
    except ValidationError as e:
        # Convert Pydantic errors to ConfigurationError with better messages
        errors: List[str] = []
        for error in e.errors():
            field = ".".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"{field}: {msg}")

        raise ConfigurationError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        ) from e


def initialize_config(
    registry: Optional["LoggerRegistry"] = None,
) -> "LoggerRegistry":
    """
    Load configuration and register the configured backends.

    The registry's current backends are unregistered first. A backend that
    cannot start is reported and skipped; if none starts, a console backend
    is registered so messages still go somewhere.

    Args:
        registry: Registry to populate, the process-wide one when None

    Returns:
        The populated registry

    Raises:
        ConfigurationError: If configuration is invalid or missing
    """
    from fanlog.logger.log_backends.registry import build_backend, get_default_registry
    from fanlog.logger.log_backends.console_backend import ConsoleLogger
    from fanlog.logger.logger import get_app_logger

    config = _load_config()
    configure_structlog(config.internal_log_level.level)
    logger = get_app_logger(__name__)

    target = registry if registry is not None else get_default_registry()
    target.close_all()

    for backend_name in config.backends:
        try:
            backend = build_backend(
                backend_name.value,
                config.logger_info,
                **_backend_options(config, backend_name),
            )
        except BackendInitError as e:
            logger.warning(
                "Failed to initialize backend",
                backend=backend_name.value,
                error=e.message,
            )
            continue
        target.register(backend)

    if len(target) == 0:
        logger.warning("No backends initialized, falling back to console backend")
        target.register(ConsoleLogger(config.logger_info))

    _state.set_config(config)
    return target


def get_config() -> FanlogConfig:
    """
    Get validated fanlog configuration.

    Returns:
        FanlogConfig instance

    Raises:
        RuntimeError: If not initialized
    """
    return _state.config


def reset_config() -> None:
    """Forget the loaded configuration. FOR TESTING ONLY."""
    _state.reset()


__all__ = ["initialize_config", "get_config", "reset_config"]
