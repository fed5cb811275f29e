"""
Thread-safe configuration holder.

This module provides a wrapper around LogConfig that allows atomic updates
while log calls keep reading consistent snapshots.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import LogConfig


class LogConfigHolder:
    """
    Thread-safe holder for LogConfig that supports atomic updates.

    Uses lock-free reads with atomic reference swap for minimal overhead on
    the hot path (reading config during a log call). Writers serialize on a
    lock so that concurrent setters changing different fields do not lose
    each other's updates.

    Example:
        >>> from slogan.config import LogConfig
        >>> holder = LogConfigHolder(LogConfig())
        >>> holder.config.verbosity
        5
        >>> old = holder.update(verbosity=8)
        >>> old.verbosity, holder.config.verbosity
        (5, 8)
    """

    def __init__(self, config: LogConfig) -> None:
        """
        Initialize the holder with a LogConfig.

        Args:
            config: Initial LogConfig instance
        """
        # Reads are lock-free (the GIL makes reference reads/writes atomic).
        # Updates swap the entire immutable config.
        self._config = config
        self._lock = threading.RLock()

    @property
    def config(self) -> LogConfig:
        """Get current config (lock-free read)."""
        return self._config

    def replace(self, new_config: LogConfig) -> LogConfig:
        """
        Install a whole new config.

        Args:
            new_config: LogConfig to install

        Returns:
            The previously installed LogConfig
        """
        with self._lock:
            old = self._config
            self._config = new_config
            return old

    def update(self, **changes: Any) -> LogConfig:
        """
        Change some fields of the current config atomically.

        Args:
            **changes: LogConfig field values to change

        Returns:
            The previously installed LogConfig
        """
        with self._lock:
            old = self._config
            self._config = old.replace(**changes)
            return old
