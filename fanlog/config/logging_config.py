# fanlog/config/logging_config.py
from dataclasses import dataclass, replace
from .env_config import get_env_bool, get_env_int

# Defaults for the process-wide console backend
DEFAULT_STD_DEBUG_LVL = 1
DEFAULT_STD_SHOW_TIME = False
DEFAULT_STD_USE_COLORS = False
DEFAULT_STD_PADDING = True

_default_debug_lvl_env_key = "FANLOG_DEBUG_LVL"
_default_show_time_env_key = "FANLOG_SHOW_TIME"
_default_use_colors_env_key = "FANLOG_USE_COLORS"
_default_padding_env_key = "FANLOG_PADDING"


@dataclass(frozen=True)
class LoggerInfo:
    """
    How a single backend renders messages.

    Attributes:
        debug_lvl: Debug levels whose magnitude exceeds this are not
            dispatched to the backend.
        show_time: Prefix each line with a timestamp.
        use_colors: Colorize console output. Colorful output usually wants
            padding as well.
        padding: Pad the level label so lines align.
    """

    debug_lvl: int = DEFAULT_STD_DEBUG_LVL
    show_time: bool = DEFAULT_STD_SHOW_TIME
    use_colors: bool = DEFAULT_STD_USE_COLORS
    padding: bool = DEFAULT_STD_PADDING

    def with_changes(self, **changes: object) -> "LoggerInfo":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


def default_std_logger_info() -> LoggerInfo:
    """The fixed configuration of the default console backend."""
    return LoggerInfo(
        debug_lvl=DEFAULT_STD_DEBUG_LVL,
        show_time=DEFAULT_STD_SHOW_TIME,
        use_colors=DEFAULT_STD_USE_COLORS,
        padding=DEFAULT_STD_PADDING,
    )


def load_logger_info(
    debug_lvl_env_key: str = _default_debug_lvl_env_key,
    show_time_env_key: str = _default_show_time_env_key,
    use_colors_env_key: str = _default_use_colors_env_key,
    padding_env_key: str = _default_padding_env_key,
) -> LoggerInfo:
    """
    Load backend rendering options from environment.

    Unset variables fall back to the console defaults.

    Raises:
        ConfigurationError: If a variable is set but cannot be parsed
    """
    return LoggerInfo(
        debug_lvl=get_env_int(debug_lvl_env_key, DEFAULT_STD_DEBUG_LVL),
        show_time=get_env_bool(show_time_env_key, DEFAULT_STD_SHOW_TIME),
        use_colors=get_env_bool(use_colors_env_key, DEFAULT_STD_USE_COLORS),
        padding=get_env_bool(padding_env_key, DEFAULT_STD_PADDING),
    )


__all__ = [
    "LoggerInfo",
    "DEFAULT_STD_DEBUG_LVL",
    "DEFAULT_STD_SHOW_TIME",
    "DEFAULT_STD_USE_COLORS",
    "DEFAULT_STD_PADDING",
    "default_std_logger_info",
    "load_logger_info",
]
