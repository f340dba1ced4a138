# fanlog/api_error/fanlog_error.py
class FanlogError(Exception):
    """Base error for all recoverable fanlog issues."""

    def __init__(
        self,
        message: str,
        code: str = "FANLOG_ERROR",
    ):
        self.message = message
        self.code = code
        super().__init__(self.message)


class BackendInitError(FanlogError):
    """A backend could not acquire its sink (file, syslog socket)."""

    def __init__(self, message: str, backend: str):
        self.backend = backend
        super().__init__(message, code="BACKEND_INIT_FAILED")


class PanicError(FanlogError):
    """Raised by ``panic()`` after the message has been dispatched."""

    def __init__(self, message: str):
        super().__init__(message, code="PANIC")


class FatalLogError(SystemExit):
    """
    A backend failed to write after construction.

    Logging is assumed infallible once a backend is established, so a failed
    write is not recoverable. Subclassing SystemExit keeps it out of
    ``except Exception`` handlers; left uncaught it ends the process with
    exit status 1.
    """

    def __init__(self, message: str, backend: str):
        self.message = message
        self.backend = backend
        super().__init__(1)

    def __str__(self) -> str:
        return self.message


__all__ = ["FanlogError", "BackendInitError", "PanicError", "FatalLogError"]
