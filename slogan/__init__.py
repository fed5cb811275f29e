"""
Leveled, colorized console logging.

Severities run from SILENT (0) through EMERGENCY (1) .. TRACE (9); a line is
written when its severity is not above the configured verbosity. Lines can be
annotated with the caller location, colorized per part (tag, message,
caller, prefix), and error-level lines can terminate the process.

Two ways to use it:
- Module-level functions (`slogan.debug(...)`) bound to a default logger
  writing to stderr
- Independent `Logger` instances, each with its own configuration and output

Example:
    >>> import slogan
    >>> slogan.set_verbosity("debug")
    >>> slogan.set_flags(slogan.SHORTFILE)
    >>> slogan.debug("cache warmed")       # doctest: +SKIP
"""

from importlib.metadata import PackageNotFoundError, version

from .api import (
    alert,
    all_done,
    critical,
    debug,
    elapsed_time,
    emergency,
    error,
    get_colors,
    get_config,
    get_default,
    get_flags,
    get_formats,
    get_parts,
    get_tags,
    get_verbosity,
    info,
    is_terminal,
    log,
    notice,
    runtime,
    set_caller_base,
    set_color,
    set_colors,
    set_default,
    set_exit_on_error,
    set_exit_policy,
    set_flags,
    set_force_color,
    set_formats,
    set_no_empty,
    set_output,
    set_parts,
    set_prefix,
    set_tags,
    set_trace_caller,
    set_verbosity,
    set_warning_as_error,
    show_colors,
    show_formats,
    show_parts,
    show_tags,
    silent,
    trace,
    trace_call,
    warning,
)
from .colors import ColorDecorator, ColorManager
from .config import LogConfig, resolve_flags, resolve_level
from .config_holder import LogConfigHolder
from .constants import (
    DATE,
    LONGFILE,
    MICROSECONDS,
    SHORTFILE,
    STD_FLAGS,
    TIME,
    UTC,
    Level,
)
from .exceptions import InvalidLevelError, LogConfigurationError, SloganError
from .formatters import LineFormatter
from .gate import ExitPolicy, ProcessExitPolicy, SystemExitPolicy
from .logger import Logger
from .timing import delta_str
from .writer import LineWriter

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("slogan")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    # Core classes
    "Logger",
    "LogConfig",
    "LogConfigHolder",
    "LineFormatter",
    "LineWriter",
    "ColorManager",
    "ColorDecorator",
    "Level",
    # Exit policies
    "ExitPolicy",
    "ProcessExitPolicy",
    "SystemExitPolicy",
    # Exceptions
    "SloganError",
    "InvalidLevelError",
    "LogConfigurationError",
    # Flags
    "DATE",
    "TIME",
    "MICROSECONDS",
    "LONGFILE",
    "SHORTFILE",
    "UTC",
    "STD_FLAGS",
    # Utility functions
    "resolve_level",
    "resolve_flags",
    "delta_str",
    # Default logger
    "get_default",
    "set_default",
    # Configuration
    "get_config",
    "set_verbosity",
    "get_verbosity",
    "set_exit_on_error",
    "set_warning_as_error",
    "set_trace_caller",
    "set_caller_base",
    "set_color",
    "set_force_color",
    "set_no_empty",
    "get_tags",
    "set_tags",
    "show_tags",
    "get_formats",
    "set_formats",
    "show_formats",
    "get_colors",
    "set_colors",
    "show_colors",
    "get_parts",
    "set_parts",
    "show_parts",
    "set_prefix",
    "get_flags",
    "set_flags",
    "set_output",
    "set_exit_policy",
    "is_terminal",
    # Logging
    "log",
    "silent",
    "emergency",
    "alert",
    "critical",
    "error",
    "warning",
    "notice",
    "info",
    "debug",
    "trace",
    "trace_call",
    "runtime",
    "all_done",
    "elapsed_time",
]
