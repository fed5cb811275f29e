"""
Module-level logging functions bound to a default logger.

The default logger writes to stderr and is created at import time, so its
start and last time references mark the start of the process. Each function
forwards to the default logger with `stacklevel + 1` so caller locations
point at the code calling these functions.

Example:
    >>> import slogan
    >>> slogan.set_verbosity("debug")
    >>> slogan.debug("connected")          # doctest: +SKIP
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from typing import IO, Any

from .config import LogConfig
from .gate import ExitPolicy
from .logger import Logger

_default_lock = threading.Lock()
_default: Logger = Logger(LogConfig.from_env())


def get_default() -> Logger:
    """Get the default logger used by the module-level functions."""
    return _default


def set_default(logger: Logger) -> Logger:
    """
    Replace the default logger.

    Args:
        logger: Logger to use from now on

    Returns:
        The previous default logger
    """
    global _default
    with _default_lock:
        old = _default
        _default = logger
        return old


# -- configuration -----------------------------------------------------------


def get_config() -> LogConfig:
    return _default.config


def set_verbosity(level: str | int) -> None:
    _default.set_verbosity(level)


def get_verbosity() -> int:
    return _default.verbosity


def set_exit_on_error(mode: bool) -> None:
    _default.set_exit_on_error(mode)


def set_warning_as_error(mode: bool) -> None:
    _default.set_warning_as_error(mode)


def set_trace_caller(mode: bool) -> None:
    _default.set_trace_caller(mode)


def set_caller_base(mode: bool) -> None:
    _default.set_caller_base(mode)


def set_color(mode: bool) -> None:
    _default.set_color(mode)


def set_force_color(mode: bool) -> None:
    _default.set_force_color(mode)


def set_no_empty(mode: bool) -> None:
    _default.set_no_empty(mode)


def get_tags() -> tuple[str, ...]:
    return _default.get_tags()


def set_tags(tags: Iterable[str]) -> tuple[str, ...]:
    return _default.set_tags(tags)


def show_tags(file: IO[str] | None = None) -> None:
    _default.show_tags(file)


def get_formats() -> dict[str, str]:
    return _default.get_formats()


def set_formats(formats: Mapping[str, str]) -> dict[str, str]:
    return _default.set_formats(formats)


def show_formats(file: IO[str] | None = None) -> None:
    _default.show_formats(file)


def get_colors() -> dict[int, str]:
    return _default.get_colors()


def set_colors(colors: Mapping[int, str]) -> dict[int, str]:
    return _default.set_colors(colors)


def show_colors(file: IO[str] | None = None) -> None:
    _default.show_colors(file)


def get_parts() -> dict[str, bool]:
    return _default.get_parts()


def set_parts(parts: Mapping[str, bool]) -> dict[str, bool]:
    return _default.set_parts(parts)


def show_parts(file: IO[str] | None = None) -> None:
    _default.show_parts(file)


def set_prefix(prefix: str) -> str:
    return _default.set_prefix(prefix)


def get_flags() -> int:
    return _default.get_flags()


def set_flags(flags: int) -> None:
    _default.set_flags(flags)


def set_output(stream: IO[str]) -> IO[str]:
    return _default.set_output(stream)


def set_exit_policy(policy: ExitPolicy) -> ExitPolicy:
    return _default.set_exit_policy(policy)


def is_terminal() -> bool:
    return _default.is_terminal()


# -- logging -----------------------------------------------------------------


def log(level: int | str, message: str, stacklevel: int = 1) -> None:
    _default.log(level, message, stacklevel=stacklevel + 1)


def silent(message: str, stacklevel: int = 1) -> None:
    _default.silent(message, stacklevel=stacklevel + 1)


def emergency(message: str, stacklevel: int = 1) -> None:
    _default.emergency(message, stacklevel=stacklevel + 1)


def alert(message: str, stacklevel: int = 1) -> None:
    _default.alert(message, stacklevel=stacklevel + 1)


def critical(message: str, stacklevel: int = 1) -> None:
    _default.critical(message, stacklevel=stacklevel + 1)


def error(message: str, stacklevel: int = 1) -> None:
    _default.error(message, stacklevel=stacklevel + 1)


def warning(message: str, stacklevel: int = 1) -> None:
    _default.warning(message, stacklevel=stacklevel + 1)


def notice(message: str, stacklevel: int = 1) -> None:
    _default.notice(message, stacklevel=stacklevel + 1)


def info(message: str, stacklevel: int = 1) -> None:
    _default.info(message, stacklevel=stacklevel + 1)


def debug(message: str, stacklevel: int = 1) -> None:
    _default.debug(message, stacklevel=stacklevel + 1)


def trace(value: Any, stacklevel: int = 1) -> None:
    _default.trace(value, stacklevel=stacklevel + 1)


def trace_call(value: Any, stacklevel: int = 1) -> None:
    _default.trace_call(value, stacklevel=stacklevel + 1)


def runtime(stacklevel: int = 1) -> None:
    _default.runtime(stacklevel=stacklevel + 1)


def all_done(stacklevel: int = 1) -> float:
    return _default.all_done(stacklevel=stacklevel + 1)


def elapsed_time(stacklevel: int = 1) -> float:
    return _default.elapsed_time(stacklevel=stacklevel + 1)
