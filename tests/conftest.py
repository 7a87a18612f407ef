"""Pytest configuration and shared fixtures for railway tests."""

from __future__ import annotations

import logging

import pytest
import structlog


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from railway import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from railway import Err

    return Err(ValueError("test error"))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from railway import Some

    return Some("hello")


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from railway import Nothing

    return Nothing


@pytest.fixture
def restore_logging():
    """Undo configure_logging: root handlers, root level and structlog config."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def recorded_sleeps(monkeypatch):
    """Replace anyio.sleep with a recorder so delays cost no wall time."""
    import anyio

    sleeps: list[float] = []

    async def fake_sleep(delay: float) -> None:
        sleeps.append(delay)

    monkeypatch.setattr(anyio, "sleep", fake_sleep)
    return sleeps
