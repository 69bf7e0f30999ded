"""Pytest configuration and shared fixtures for klaw-either tests."""

import pytest


@pytest.fixture
def sample_left():
    """Sample Left value for testing."""
    from klaw_either import Left

    return Left("cookie")


@pytest.fixture
def sample_right():
    """Sample Right value for testing."""
    from klaw_either import Right

    return Right(12)


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from klaw_either import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from klaw_either import Failure

    return Failure(ValueError("Not enough pancakes"))


@pytest.fixture
def reset_config(monkeypatch):
    """Restore the default library configuration around a test."""
    from klaw_either import init

    monkeypatch.delenv("KLAW_EITHER_LOG_LEVEL", raising=False)
    init()
    yield
    monkeypatch.delenv("KLAW_EITHER_LOG_LEVEL", raising=False)
    init()


@pytest.fixture
def restore_root_logger():
    """Undo configure_logging() changes to the root logger."""
    import logging

    from klaw_either._logging import clear_log_hooks

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    clear_log_hooks()
    yield root
    clear_log_hooks()
    root.handlers[:] = handlers
    root.setLevel(level)
