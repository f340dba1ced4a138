# fanlog/logger/log_backends/file_backend.py
"""File logger backend."""
from pathlib import Path
from typing import BinaryIO, Union
from fanlog.api_error import BackendInitError
from fanlog.config.logging_config import LoggerInfo
from fanlog.logger.logger import get_app_logger
from .base import LoggerBackend

logger = get_app_logger(__name__)


class FileLogger(LoggerBackend):
    """
    Backend writing raw message bytes to a file.

    The file is created when the backend is built, replacing any existing
    content. Messages are written exactly as given, unbuffered: the caller
    supplies newlines and timestamps.
    """

    def __init__(self, info: LoggerInfo, path: Union[str, Path]):
        """
        Create (or truncate) the log file.

        Args:
            info: Rendering options for this backend
            path: File to write to

        Raises:
            BackendInitError: If the file cannot be created
        """
        super().__init__(info)
        self._path = Path(path)
        try:
            self._file: BinaryIO = open(self._path, "wb", buffering=0)
        except OSError as e:
            raise BackendInitError(
                f"Cannot create log file {self._path}: {e}", backend=self.name
            ) from e
        logger.debug("File backend opened", path=str(self._path))

    @property
    def name(self) -> str:
        """Backend name."""
        return "file"

    @property
    def path(self) -> Path:
        """Path of the log file."""
        return self._path

    def log(self, level: int, msg: str) -> None:
        """
        Write ``msg`` to the file.

        Raises:
            FatalLogError: If the write fails
        """
        view = memoryview(msg.encode("utf-8"))
        try:
            while view:
                written = self._file.write(view)
                view = view[written:]
        except (OSError, ValueError) as e:
            self._write_failed(f"Write to log file {self._path} failed: {e}", e)

    def close(self) -> None:
        """Close the file handle."""
        self._file.close()
        logger.debug("File backend closed", path=str(self._path))


__all__ = ["FileLogger"]
