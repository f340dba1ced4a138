# fanlog/__init__.py
"""
fanlog: fan one log call out to every registered backend.

Usage:
    from fanlog import FileLogger, LoggerInfo, get_default_registry, info

    key = get_default_registry().register(
        FileLogger(LoggerInfo(debug_lvl=3, show_time=True), "app.log")
    )
    info("service started")
"""
__version__ = "0.1.0"

from .api_error import (
    BackendInitError,
    ConfigurationError,
    FanlogError,
    FatalLogError,
    PanicError,
)
from .config import LoggerInfo, initialize_config, get_config
from .logger import *
