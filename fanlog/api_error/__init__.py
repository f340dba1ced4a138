# fanlog/api_error/__init__.py
from .config_error import ConfigurationError
from .fanlog_error import (
    FanlogError,
    BackendInitError,
    FatalLogError,
    PanicError,
)

__all__ = [
    "ConfigurationError",
    "FanlogError",
    "BackendInitError",
    "FatalLogError",
    "PanicError",
]
