"""
Call-stack introspection for caller locations.

Depths are explicit: `find_caller(stacklevel)` walks `stacklevel` frames up
from the function that calls it, so each layer of the logger adds one to the
stacklevel it hands down instead of sharing a global offset.
"""

import os
import sys
from types import FrameType

from .constants import UNKNOWN_LOCATION


def find_caller(stacklevel: int = 1) -> tuple[str, int]:
    """
    Get the source file and line of a caller.

    Args:
        stacklevel: Frames to walk up from the function calling find_caller
                    (1 = that function's caller)

    Returns:
        (pathname, lineno), or ("?", 0) if the stack is not that deep
    """
    try:
        f: FrameType | None = sys._getframe(1)
    except ValueError:
        return UNKNOWN_LOCATION

    for _ in range(max(0, stacklevel)):
        if f is None:
            break
        f = f.f_back

    if f is None or f.f_code is None:
        return UNKNOWN_LOCATION
    return f.f_code.co_filename, f.f_lineno


def render_pathname(pathname: str, base_only: bool) -> str:
    """Render a caller path, reduced to its final component when base_only."""
    if base_only:
        return os.path.basename(pathname) or pathname
    return pathname
