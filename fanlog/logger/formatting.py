# fanlog/logger/formatting.py
"""Render a message as a complete line for one backend's LoggerInfo."""
from datetime import datetime
from typing import Optional
from fanlog.config.logging_config import LoggerInfo
from .levels import LEVEL_LABELS, LVL_PRINT

TIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def level_label(level: int) -> Optional[str]:
    """Short label for a level; print-level lines carry none."""
    if level == LVL_PRINT:
        return None
    return LEVEL_LABELS.get(level, str(level))


def format_line(
    level: int, msg: str, info: LoggerInfo, now: Optional[datetime] = None
) -> str:
    """
    Build the line a backend receives.

    Examples:
        >>> format_line(-16, "ready", LoggerInfo(padding=True))
        'I  : ready\\n'
        >>> format_line(2, "ready", LoggerInfo(padding=False))
        '2: ready\\n'
    """
    parts = []
    if info.show_time:
        parts.append((now or datetime.now()).strftime(TIME_FORMAT) + " ")
    label = level_label(level)
    if label is not None:
        parts.append(f"{label:<2} : " if info.padding else f"{label}: ")
    parts.append(msg)
    if not msg.endswith("\n"):
        parts.append("\n")
    return "".join(parts)


__all__ = ["format_line", "level_label", "TIME_FORMAT"]
