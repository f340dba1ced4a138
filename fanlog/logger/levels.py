# fanlog/logger/levels.py
"""
Severity levels carried by every fan-out message.

A level is a plain signed int. The named ladder sits far below the debug
range so it never collides with it:

    -20      -19    -18    -17    -16   -15     -5 .. -1     0     1 .. 5
    warning  error  fatal  panic  info  print   bright debug plain debug

Levels below LVL_INFO are written to the error stream by the console
backend. A negative debug level is the bright variant of the same rank,
and is never filtered out by a backend threshold.
"""

LVL_WARNING = -20
LVL_ERROR = -19
LVL_FATAL = -18
LVL_PANIC = -17
LVL_INFO = -16
LVL_PRINT = -15

NAMED_LEVELS = frozenset(
    {LVL_WARNING, LVL_ERROR, LVL_FATAL, LVL_PANIC, LVL_INFO, LVL_PRINT}
)

# One-letter labels used when formatting a line
LEVEL_LABELS = {
    LVL_WARNING: "W",
    LVL_ERROR: "E",
    LVL_FATAL: "F",
    LVL_PANIC: "P",
    LVL_INFO: "I",
}


def is_error_stream_level(level: int) -> bool:
    """True when the console backend writes this level to stderr."""
    return level < LVL_INFO


def should_log(level: int, debug_lvl: int) -> bool:
    """
    Decide whether a backend with threshold ``debug_lvl`` receives ``level``.

    Everything at or below zero (named levels, level 0 and the bright
    debug levels) always goes through; positive debug levels go through
    when they do not exceed the threshold.
    """
    if level <= 0:
        return True
    return level <= debug_lvl


__all__ = [
    "LVL_WARNING",
    "LVL_ERROR",
    "LVL_FATAL",
    "LVL_PANIC",
    "LVL_INFO",
    "LVL_PRINT",
    "NAMED_LEVELS",
    "LEVEL_LABELS",
    "is_error_stream_level",
    "should_log",
]
