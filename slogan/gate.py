"""
Severity gate and exit policies.

The gate decides whether a line is emitted and whether it terminates the
process. Termination itself is delegated to an exit policy object so it can
be swapped (for instance in tests) without touching the gate.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, NoReturn, Protocol

from .constants import Level

if TYPE_CHECKING:
    from .config import LogConfig


class ExitPolicy(Protocol):
    """Anything able to end the process with an exit status."""

    def terminate(self, code: int) -> None: ...


class ProcessExitPolicy:
    """
    Ends the process immediately.

    Uses os._exit: no cleanup handlers, finally blocks or other threads are
    waited for. The logger flushes its own stream before calling this.
    """

    def terminate(self, code: int) -> NoReturn:
        os._exit(code)


class SystemExitPolicy:
    """Raises SystemExit so finally blocks and atexit handlers still run."""

    def terminate(self, code: int) -> NoReturn:
        raise SystemExit(code)


def should_emit(config: LogConfig, level: int) -> bool:
    """Check if a level passes the verbosity threshold."""
    return config.verbosity >= level


def allows(config: LogConfig, level: int, message: str) -> bool:
    """
    Check if a line is written.

    Args:
        config: Configuration snapshot
        level: Severity of the line
        message: Message text

    Returns:
        True if the level passes verbosity and the message is not a
        suppressed empty string
    """
    if not should_emit(config, level):
        return False
    return not (config.no_empty and len(message) == 0)


def should_terminate(config: LogConfig, level: int) -> bool:
    """
    Check if a line at this level terminates the process.

    Emergency to error terminate when exit_on_error is set; warning also
    terminates when warning_as_error is set too. Silent never terminates.
    """
    if not config.exit_on_error or level <= Level.SILENT:
        return False
    if level < Level.WARNING:
        return True
    return level == Level.WARNING and config.warning_as_error
