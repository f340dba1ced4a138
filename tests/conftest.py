"""Shared test fixtures for fanlog test suite."""

import io
import os
from typing import List, Tuple

import pytest

from fanlog.config import LoggerInfo, reset_config, reset_structlog_state
from fanlog.logger.log_backends import AnsiTerminal, LoggerBackend, LoggerRegistry
from fanlog.logger.log_backends.registry import reset_default_registry


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------
class RecordingBackend(LoggerBackend):
    """Backend keeping every message it is given in memory."""

    def __init__(self, info: LoggerInfo = None, name: str = "recording"):
        super().__init__(info if info is not None else LoggerInfo())
        self._name = name
        self.messages: List[Tuple[int, str]] = []
        self.close_calls = 0

    @property
    def name(self) -> str:
        return self._name

    def log(self, level: int, msg: str) -> None:
        self.messages.append((level, msg))

    def close(self) -> None:
        self.close_calls += 1


class RecordingTerminal(AnsiTerminal):
    """Color primitive recording calls instead of writing escapes."""

    def __init__(self):
        self.calls: List[tuple] = []

    def set_foreground(self, stream, color, bright):
        self.calls.append(("set", color, bright))

    def reset(self, stream):
        self.calls.append(("reset",))


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _isolate_fanlog(monkeypatch):
    """Clear FANLOG_* variables and all process-wide fanlog state."""
    for name in list(os.environ):
        if name.startswith("FANLOG_"):
            monkeypatch.delenv(name)
    yield
    reset_default_registry()
    reset_config()
    reset_structlog_state()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def registry():
    """A fresh registry, closed after the test."""
    reg = LoggerRegistry()
    yield reg
    reg.close_all()


@pytest.fixture
def make_backend():
    """Factory for RecordingBackend instances."""

    def _make(debug_lvl: int = 1, name: str = "recording", **info_fields):
        return RecordingBackend(LoggerInfo(debug_lvl=debug_lvl, **info_fields), name)

    return _make


@pytest.fixture
def terminal():
    return RecordingTerminal()


@pytest.fixture
def out():
    """Stand-in for stdout."""
    return io.StringIO()


@pytest.fixture
def err():
    """Stand-in for stderr."""
    return io.StringIO()
