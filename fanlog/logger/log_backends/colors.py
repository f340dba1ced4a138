# fanlog/logger/log_backends/colors.py
"""
Level to color policy for the console backend, and the ANSI primitive that
applies it.
"""
from enum import Enum
from typing import Optional, TextIO, Tuple
from rich.color import Color as RichColor
from fanlog.logger.levels import (
    LVL_PRINT,
    LVL_INFO,
    LVL_WARNING,
    LVL_ERROR,
    LVL_FATAL,
    LVL_PANIC,
)


class Color(str, Enum):
    """Terminal hues, valued by their rich color name."""

    WHITE = "white"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    CYAN = "cyan"
    BLUE = "blue"

    def __str__(self) -> str:
        return self.value


# (hue, bright) for each named level
NAMED_LEVEL_COLORS = {
    LVL_PRINT: (Color.WHITE, True),
    LVL_INFO: (Color.WHITE, True),
    LVL_WARNING: (Color.GREEN, True),
    LVL_ERROR: (Color.RED, False),
    LVL_FATAL: (Color.RED, True),
    LVL_PANIC: (Color.RED, True),
}

# Hues for debug levels 1..5, indexed by abs(level) - 1
DEBUG_PALETTE = (Color.YELLOW, Color.CYAN, Color.GREEN, Color.BLUE, Color.CYAN)


def color_for_level(level: int) -> Optional[Tuple[Color, bool]]:
    """
    Hue and brightness for a level, or None when no color is set.

    Named levels use a fixed pair. Other levels pick a hue from the debug
    palette by magnitude, bright when negative. Level 0 and magnitudes
    outside the palette get no color.

    Examples:
        >>> color_for_level(LVL_ERROR)
        (<Color.RED: 'red'>, False)
        >>> color_for_level(-3)
        (<Color.GREEN: 'green'>, True)
        >>> color_for_level(0) is None
        True
    """
    if level in NAMED_LEVEL_COLORS:
        return NAMED_LEVEL_COLORS[level]
    if level == 0:
        return None
    magnitude = abs(level)
    if magnitude > len(DEBUG_PALETTE):
        return None
    return DEBUG_PALETTE[magnitude - 1], level < 0


class AnsiTerminal:
    """
    Writes SGR escape sequences to a stream.

    Stateless itself, but the terminal it drives is shared by the whole
    process: a set/write/reset sequence must not interleave with another.
    """

    RESET = "\x1b[0m"

    @staticmethod
    def foreground_code(color: Color, bright: bool) -> str:
        """SGR sequence selecting ``color`` (bright variant if asked)."""
        name = f"bright_{color.value}" if bright else color.value
        codes = RichColor.parse(name).get_ansi_codes(foreground=True)
        return f"\x1b[{';'.join(codes)}m"

    def set_foreground(self, stream: TextIO, color: Color, bright: bool) -> None:
        stream.write(self.foreground_code(color, bright))

    def reset(self, stream: TextIO) -> None:
        stream.write(self.RESET)


__all__ = [
    "Color",
    "NAMED_LEVEL_COLORS",
    "DEBUG_PALETTE",
    "color_for_level",
    "AnsiTerminal",
]
