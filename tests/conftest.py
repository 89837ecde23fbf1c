"""Pytest configuration and shared fixtures for switchyard tests."""

import logging

import pytest
import structlog

import switchyard._config


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from switchyard import Ok

    return Ok(42)


@pytest.fixture
def sample_fail():
    """Sample string-message Fail for testing."""
    from switchyard import fail_with

    return fail_with('test error')


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from switchyard import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from switchyard import Nothing

    return Nothing


@pytest.fixture
def reset_config(monkeypatch):
    """Clear the module-level config and the env vars init() reads."""
    monkeypatch.setattr(switchyard._config, '_config', None)
    monkeypatch.delenv('SWITCHYARD_LOG_LEVEL', raising=False)
    monkeypatch.delenv('SWITCHYARD_LOG_FORMAT', raising=False)


@pytest.fixture
def restore_logging():
    """Undo configure_logging(): reset structlog and the root handlers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class Tracked:
    """Iterable that records how many items were pulled and whether it was closed."""

    def __init__(self, items):
        self.items = list(items)
        self.pulled = 0
        self.closed = False

    def __iter__(self):
        try:
            for item in self.items:
                self.pulled += 1
                yield item
        finally:
            self.closed = True


class AsyncTracked(Tracked):
    """Async iterable counterpart of Tracked."""

    def __aiter__(self):
        return self._agen()

    async def _agen(self):
        try:
            for item in self.items:
                self.pulled += 1
                yield item
        finally:
            self.closed = True


@pytest.fixture
def tracked():
    """Factory for sync Tracked iterables."""
    return Tracked


@pytest.fixture
def async_tracked():
    """Factory for AsyncTracked iterables."""
    return AsyncTracked
