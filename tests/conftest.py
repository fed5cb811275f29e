"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the slogan test suite.
"""

from collections.abc import Callable, Generator
from io import StringIO
from typing import Any

import pytest

import slogan
from slogan import LogConfig, Logger

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (subprocess, filesystem)"
    )


# =============================================================================
# Helpers
# =============================================================================


class RecordingExitPolicy:
    """Exit policy recording exit codes instead of ending the process."""

    def __init__(self) -> None:
        self.codes: list[int] = []

    def terminate(self, code: int) -> None:
        self.codes.append(code)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def out() -> StringIO:
    """Provide a stream capturing logger output."""
    return StringIO()


@pytest.fixture
def exit_policy() -> RecordingExitPolicy:
    """Provide an exit policy that records instead of exiting."""
    return RecordingExitPolicy()


@pytest.fixture
def make_logger(
    out: StringIO, exit_policy: RecordingExitPolicy
) -> Callable[..., Logger]:
    """
    Provide a factory for loggers writing to `out`.

    Keyword arguments are passed to LogConfig.from_params().
    """

    def factory(**params: Any) -> Logger:
        return Logger(LogConfig.from_params(**params), stream=out, exit_policy=exit_policy)

    return factory


@pytest.fixture
def default_logger(
    out: StringIO, exit_policy: RecordingExitPolicy
) -> Generator[Logger, None, None]:
    """
    Install a fresh default logger for the module-level functions.

    The previous default logger is restored after the test.
    """
    logger = Logger(LogConfig(colorize=False), stream=out, exit_policy=exit_policy)
    previous = slogan.set_default(logger)
    try:
        yield logger
    finally:
        slogan.set_default(previous)
