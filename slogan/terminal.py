"""Terminal capability detection for color output."""

import os
import sys
from typing import IO, Any


def is_terminal(stream: IO[Any] | None) -> bool:
    """Check if a stream is an interactive terminal."""
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        # No isatty, or the stream is closed
        return False


def is_standard_stream(stream: IO[Any] | None) -> bool:
    """Check if a stream is the process's standard output or error."""
    if stream is None:
        return False
    candidates = (sys.stdout, sys.stderr, sys.__stdout__, sys.__stderr__)
    return any(stream is s for s in candidates if s is not None)


def color_disabled_by_env() -> bool:
    """Respect the NO_COLOR environment variable (https://no-color.org/)."""
    return bool(os.environ.get("NO_COLOR"))


def color_forced_by_env() -> bool:
    """Respect FORCE_COLOR for CI environments that support color."""
    return bool(os.environ.get("FORCE_COLOR"))
