"""
Tests for LoggerRegistry: key assignment, unregister/close semantics,
filtered fan-out, and concurrent use.
"""

import os
import subprocess
import sys
import textwrap
import threading
from pathlib import Path

import pytest

from fanlog.api_error import FatalLogError
from fanlog.config import LoggerInfo
from fanlog.logger.levels import LVL_ERROR, LVL_INFO
from fanlog.logger.log_backends import (
    ConsoleLogger,
    FileLogger,
    LoggerRegistry,
    SyslogLogger,
    available_backends,
    build_backend,
    get_default_registry,
    register_backend_factory,
    register_logger,
    reset_default_registry,
    unregister_logger,
)
from fanlog.logger.log_backends import registry as _registry_mod


class _FailingBackend(ConsoleLogger):
    def log(self, level, msg):
        raise FatalLogError("sink gone", backend=self.name)


# =============================================================================
# Keys
# =============================================================================

class TestKeys:

    def test_keys_start_at_zero_and_increase(self, registry, make_backend):
        keys = [registry.register(make_backend()) for _ in range(5)]
        assert keys == [0, 1, 2, 3, 4]

    def test_keys_never_reused(self, registry, make_backend):
        first = registry.register(make_backend())
        registry.unregister(first)
        second = registry.register(make_backend())
        assert first == 0
        assert second == 1

    def test_unknown_key_is_noop(self, registry, make_backend):
        registry.register(make_backend())
        registry.unregister(42)
        assert len(registry) == 1
        assert registry.register(make_backend()) == 1

    def test_introspection(self, registry, make_backend):
        backend = make_backend()
        key = registry.register(backend)
        assert key in registry
        assert registry.get(key) is backend
        assert registry.keys() == [key]
        assert registry.get(99) is None


# =============================================================================
# Unregister / close
# =============================================================================

class TestUnregister:

    def test_closes_exactly_once(self, registry, make_backend):
        backend = make_backend()
        key = registry.register(backend)
        registry.unregister(key)
        registry.unregister(key)
        assert backend.close_calls == 1
        assert key not in registry

    def test_other_backends_untouched(self, registry, make_backend):
        a, b = make_backend(name="a"), make_backend(name="b")
        key_a = registry.register(a)
        registry.register(b)
        registry.unregister(key_a)
        assert a.close_calls == 1
        assert b.close_calls == 0
        assert len(registry) == 1

    def test_entry_removed_even_if_close_raises(self, registry, make_backend):
        backend = make_backend()

        def broken_close():
            backend.close_calls += 1
            raise OSError("close failed")

        backend.close = broken_close
        key = registry.register(backend)
        with pytest.raises(OSError):
            registry.unregister(key)
        registry.unregister(key)
        assert backend.close_calls == 1
        assert len(registry) == 0

    def test_close_all(self, registry, make_backend):
        backends = [make_backend() for _ in range(3)]
        for backend in backends:
            registry.register(backend)
        registry.close_all()
        assert len(registry) == 0
        assert [b.close_calls for b in backends] == [1, 1, 1]
        assert registry.register(make_backend()) == 3

    def test_unregister_closes_file(self, registry, tmp_path):
        backend = FileLogger(LoggerInfo(), tmp_path / "a.log")
        key = registry.register(backend)
        registry.unregister(key)
        with pytest.raises(FatalLogError):
            backend.log(0, "closed")


# =============================================================================
# Dispatch
# =============================================================================

class TestDispatch:

    def test_delivers_to_every_backend_once(self, registry, make_backend):
        backends = [make_backend(name=str(i)) for i in range(4)]
        for backend in reversed(backends):
            registry.register(backend)
        delivered = registry.dispatch(LVL_INFO, "hello\n")
        assert delivered == 4
        for backend in backends:
            assert backend.messages == [(LVL_INFO, "hello\n")]

    def test_empty_registry(self, registry):
        assert registry.dispatch(LVL_INFO, "nobody\n") == 0

    def test_filters_by_each_backend_threshold(self, registry, make_backend):
        quiet = make_backend(debug_lvl=1, name="quiet")
        loud = make_backend(debug_lvl=4, name="loud")
        registry.register(quiet)
        registry.register(loud)
        assert registry.dispatch(3, "detail") == 1
        assert registry.dispatch(-3, "bright detail") == 2
        assert quiet.messages == [(-3, "bright detail")]
        assert loud.messages == [(3, "detail"), (-3, "bright detail")]

    def test_named_levels_reach_zero_threshold(self, registry, make_backend):
        silent = make_backend(debug_lvl=0)
        registry.register(silent)
        registry.dispatch(LVL_ERROR, "bad")
        registry.dispatch(1, "debug")
        assert silent.messages == [(LVL_ERROR, "bad")]

    def test_unregistered_backend_gets_nothing(self, registry, make_backend):
        backend = make_backend()
        key = registry.register(backend)
        registry.unregister(key)
        registry.dispatch(LVL_INFO, "after")
        assert backend.messages == []

    def test_formatter_sees_each_backend_info(self, registry, make_backend):
        a = make_backend(name="a", padding=True)
        b = make_backend(name="b", padding=False)
        registry.register(a)
        registry.register(b)

        def formatter(level, msg, info):
            return f"{'padded' if info.padding else 'tight'}:{msg}"

        registry.dispatch(LVL_INFO, "m", formatter=formatter)
        assert a.messages == [(LVL_INFO, "padded:m")]
        assert b.messages == [(LVL_INFO, "tight:m")]

    def test_fatal_write_propagates(self, registry, make_backend, out, err):
        registry.register(_FailingBackend(LoggerInfo(), out=out, err=err))
        after = make_backend()
        registry.register(after)
        with pytest.raises(FatalLogError):
            registry.dispatch(LVL_INFO, "x")
        assert after.messages == []

    def test_lock_released_after_fatal(self, registry, out, err, make_backend):
        key = registry.register(_FailingBackend(LoggerInfo(), out=out, err=err))
        with pytest.raises(FatalLogError):
            registry.dispatch(LVL_INFO, "x")
        registry.unregister(key)
        assert registry.register(make_backend()) == 1

    def test_fatal_write_off_main_thread_exits_process(self, tmp_path):
        script = textwrap.dedent(
            """
            import sys
            import threading
            from fanlog.config import LoggerInfo
            from fanlog.logger.log_backends import FileLogger, LoggerRegistry

            registry = LoggerRegistry()
            backend = FileLogger(LoggerInfo(), sys.argv[1])
            registry.register(backend)
            backend.close()
            worker = threading.Thread(target=registry.dispatch, args=(-16, "x"))
            worker.start()
            worker.join()
            print("alive")
            """
        )
        root = Path(__file__).resolve().parents[1]
        env = dict(os.environ, PYTHONPATH=str(root))
        result = subprocess.run(
            [sys.executable, "-c", script, str(tmp_path / "closed.log")],
            cwd=root,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )
        assert result.returncode == 1
        assert "alive" not in result.stdout
        assert "Log write failed" in result.stderr


# =============================================================================
# Concurrency
# =============================================================================

@pytest.mark.slow
class TestConcurrency:

    def test_concurrent_register_unregister(self, registry, make_backend):
        threads_count, per_thread = 16, 200
        keys_by_thread = [[] for _ in range(threads_count)]
        backends_by_thread = [[] for _ in range(threads_count)]
        start = threading.Barrier(threads_count)

        def worker(idx):
            start.wait()
            for i in range(per_thread):
                backend = make_backend()
                key = registry.register(backend)
                keys_by_thread[idx].append(key)
                backends_by_thread[idx].append(backend)
                if i % 20 == 0:
                    registry.dispatch(LVL_INFO, "tick")
                if i % 2 == 0:
                    registry.unregister(key)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        all_keys = [k for keys in keys_by_thread for k in keys]
        total = threads_count * per_thread
        assert len(all_keys) == total
        assert sorted(all_keys) == list(range(total))
        for keys in keys_by_thread:
            assert keys == sorted(keys)
        assert len(registry) == total // 2
        assert registry.register(make_backend()) == total

        all_backends = [b for bs in backends_by_thread for b in bs]
        assert sum(b.close_calls for b in all_backends) == total // 2
        assert all(b.close_calls <= 1 for b in all_backends)

    def test_concurrent_double_unregister_closes_once(self, registry, make_backend):
        backends = [make_backend() for _ in range(100)]
        keys = [registry.register(b) for b in backends]

        def worker():
            for key in keys:
                registry.unregister(key)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert [b.close_calls for b in backends] == [1] * 100
        assert len(registry) == 0


# =============================================================================
# Default registry and factories
# =============================================================================

class TestDefaultRegistry:

    def test_starts_with_console_backend(self):
        registry = get_default_registry()
        assert registry.keys() == [0]
        console = registry.get(0)
        assert isinstance(console, ConsoleLogger)
        assert console.get_logger_info() == LoggerInfo(1, False, False, True)

    def test_same_instance(self):
        assert get_default_registry() is get_default_registry()

    def test_module_level_helpers(self, make_backend):
        backend = make_backend()
        key = register_logger(backend)
        assert key == 1
        unregister_logger(key)
        assert backend.close_calls == 1

    def test_reset_closes_backends(self, make_backend):
        backend = make_backend()
        register_logger(backend)
        reset_default_registry()
        assert backend.close_calls == 1
        assert get_default_registry().keys() == [0]


class TestFactories:

    @pytest.fixture(autouse=True)
    def _restore_factories(self):
        saved = dict(_registry_mod._BACKEND_FACTORIES)
        yield
        _registry_mod._BACKEND_FACTORIES.clear()
        _registry_mod._BACKEND_FACTORIES.update(saved)

    def test_builtin_names(self):
        assert available_backends() == ["console", "file", "syslog"]

    def test_build_file(self, tmp_path):
        backend = build_backend("file", LoggerInfo(debug_lvl=2), path=tmp_path / "x.log")
        try:
            assert isinstance(backend, FileLogger)
            assert backend.get_logger_info().debug_lvl == 2
        finally:
            backend.close()

    def test_build_syslog_class(self):
        assert _registry_mod._BACKEND_FACTORIES["syslog"] is SyslogLogger

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown backend 'journal'"):
            build_backend("journal", LoggerInfo())

    def test_custom_factory(self, make_backend):
        created = []

        def factory(info, **options):
            backend = make_backend(debug_lvl=info.debug_lvl, name="custom")
            created.append((backend, options))
            return backend

        register_backend_factory("custom", factory)
        backend = build_backend("custom", LoggerInfo(debug_lvl=5), flag=True)
        assert backend.name == "custom"
        assert created == [(backend, {"flag": True})]
