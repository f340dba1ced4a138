# fanlog/logger/log_backends/console_backend.py
"""Console logger backend writing to the process's standard streams."""
import sys
from typing import Optional, TextIO
from fanlog.config.logging_config import LoggerInfo, default_std_logger_info
from fanlog.logger.levels import is_error_stream_level
from .base import LoggerBackend
from .colors import AnsiTerminal, color_for_level


class ConsoleLogger(LoggerBackend):
    """
    Backend writing to stdout/stderr, optionally colored.

    Levels below LVL_INFO go to the error stream, everything else to the
    output stream. The standard streams belong to the whole process, so
    one console backend per process is the convention, and close() leaves
    them open.

    With use_colors, each write is a set-color/write/reset sequence on
    shared terminal state. Calls must be serialized by the caller; routing
    them through LoggerRegistry.dispatch does that.
    """

    def __init__(
        self,
        info: LoggerInfo,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        terminal: Optional[AnsiTerminal] = None,
    ):
        """
        Args:
            info: Rendering options for this backend
            out: Output stream, sys.stdout at write time when None
            err: Error stream, sys.stderr at write time when None
            terminal: Color primitive, AnsiTerminal when None
        """
        super().__init__(info)
        self._out = out
        self._err = err
        self._terminal = terminal if terminal is not None else AnsiTerminal()

    @property
    def name(self) -> str:
        """Backend name."""
        return "console"

    def stream_for(self, level: int) -> TextIO:
        """Stream a message at ``level`` is written to."""
        if is_error_stream_level(level):
            return self._err if self._err is not None else sys.stderr
        return self._out if self._out is not None else sys.stdout

    def log(self, level: int, msg: str) -> None:
        """
        Write ``msg`` to the stream for ``level``, colored when enabled.

        Raises:
            FatalLogError: If the stream rejects the write; the color is
                not reset in that case
        """
        stream = self.stream_for(level)
        use_colors = self._info.use_colors
        try:
            if use_colors:
                color = color_for_level(level)
                if color is not None:
                    self._terminal.set_foreground(stream, *color)
            stream.write(msg)
            if use_colors:
                self._terminal.reset(stream)
            stream.flush()
        except (OSError, ValueError) as e:
            self._write_failed(f"Write to console failed: {e}", e)

    def close(self) -> None:
        """The standard streams are never closed by a backend."""
        pass


def new_console_logger() -> ConsoleLogger:
    """
    Console backend with the default configuration.

    Takes no LoggerInfo: the process-wide console backend always starts from
    the fixed defaults (debug_lvl=1, no time, no colors, padding).
    """
    return ConsoleLogger(default_std_logger_info())


__all__ = ["ConsoleLogger", "new_console_logger"]
