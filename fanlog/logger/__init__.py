# fanlog/logger/__init__.py
"""
Fan-out logging: backends, their registry, and the dispatch helpers.
"""
from . import levels as _levels
from . import log_backends as _log_backends
from .levels import *
from .log_backends import *
from .formatting import format_line, level_label
from .dispatch import lvl, print_, info, warn, error, fatal, panic

__all__ = [
    *_levels.__all__,
    *_log_backends.__all__,
    "format_line",
    "level_label",
    "lvl",
    "print_",
    "info",
    "warn",
    "error",
    "fatal",
    "panic",
]
