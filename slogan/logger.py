"""
Logger class for the logging system.

A Logger owns its configuration, writer and exit policy, so independent
instances do not interfere with each other. Every public logging method
accepts a `stacklevel` argument with the same meaning as in the standard
library: 1 points the caller location at the direct caller of the method,
and wrappers pass `stacklevel + 1`.

Frame topology used for caller lookup (innermost first):

    find_caller <- _emit <- _log <- public method <- caller
    find_caller <- _emit <- _terminate <- _log <- public method <- caller

Public methods, trace helpers and timing checkpoints all call `_log`
directly, so each of them sits exactly one frame above it.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import IO, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import gate, terminal
from .caller import find_caller
from .colors import ColorManager
from .config import LogConfig, get_section, load_yaml, resolve_flags, resolve_level
from .config_holder import LogConfigHolder
from .constants import LONGFILE, SHORTFILE, Level
from .exceptions import InvalidLevelError
from .formatters import LineFormatter, get_format, render_trace, safe_format
from .gate import ExitPolicy, ProcessExitPolicy
from .timing import Checkpoints, delta_str
from .writer import LineWriter

lg = logging.getLogger(__name__)


def runtime_info() -> tuple[str, str, int, str, str]:
    """Get (os, architecture, cpu count, implementation, install root)."""
    return (
        platform.system().lower() or sys.platform,
        platform.machine(),
        os.cpu_count() or 0,
        platform.python_implementation(),
        sys.prefix,
    )


def _report_unknown_styles(colors: Mapping[int, str]) -> None:
    for slot, name in ColorManager.unknown_names(colors).items():
        lg.warning("unknown color style %r for slot %s, rendering unstyled", name, slot)


class Logger:
    """
    Leveled, colorized console logger.

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> log = Logger(LogConfig.from_params("debug", colorize=False), stream=out)
        >>> log.debug("A debug message")
        >>> out.getvalue()
        '   debug     A debug message\\n'
    """

    def __init__(
        self,
        config: LogConfig | None = None,
        stream: IO[str] | None = None,
        flags: int = 0,
        exit_policy: ExitPolicy | None = None,
    ) -> None:
        """
        Initialize the logger.

        Args:
            config: Logger configuration (defaults to LogConfig())
            stream: Output stream (defaults to sys.stderr)
            flags: Writer flags (DATE, TIME, MICROSECONDS, UTC, SHORTFILE, LONGFILE)
            exit_policy: Policy ending the process on fatal lines
                         (defaults to ProcessExitPolicy)
        """
        if config is None:
            config = LogConfig()
        self._lock = threading.RLock()
        self._holder = LogConfigHolder(config)
        self._writer = LineWriter(stream, prefix=config.prefix)
        self._terminal = self._detect_terminal(self._writer.stream)
        self._formatter = LineFormatter()
        self._exit_policy: ExitPolicy = exit_policy or ProcessExitPolicy()
        self._checkpoints = Checkpoints()
        if flags:
            self.set_flags(flags)
        _report_unknown_styles(config.colors)

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        section: str = "logging",
        stream: IO[str] | None = None,
        exit_policy: ExitPolicy | None = None,
    ) -> Logger:
        """
        Create a logger from a YAML configuration file.

        Besides the LogConfig keys, the section may hold `flags`, a list of
        flag names (e.g. ["date", "time", "shortfile"]).

        Raises:
            LogConfigurationError: If the file cannot be read or parsed
            InvalidLevelError: If the verbosity cannot be resolved
        """
        data = load_yaml(path)
        config = LogConfig.from_config(data, section)
        flags = resolve_flags(get_section(data, section).get("flags"))
        return cls(config, stream=stream, flags=flags, exit_policy=exit_policy)

    @staticmethod
    def _detect_terminal(stream: IO[str] | None) -> bool:
        # Redirected output is never auto-colorized
        return terminal.is_standard_stream(stream) and terminal.is_terminal(stream)

    # -- configuration -----------------------------------------------------

    @property
    def config(self) -> LogConfig:
        """Get the current configuration snapshot."""
        return self._holder.config

    @property
    def verbosity(self) -> int:
        return self._holder.config.verbosity

    @property
    def exit_on_error(self) -> bool:
        return self._holder.config.exit_on_error

    @property
    def warning_as_error(self) -> bool:
        return self._holder.config.warning_as_error

    @property
    def trace_caller(self) -> bool:
        return self._holder.config.trace_caller

    @property
    def caller_base(self) -> bool:
        return self._holder.config.caller_base

    @property
    def colorize(self) -> bool:
        return self._holder.config.colorize

    @property
    def force_colorize(self) -> bool:
        return self._holder.config.force_colorize

    @property
    def no_empty(self) -> bool:
        return self._holder.config.no_empty

    @property
    def prefix(self) -> str:
        return self._holder.config.prefix

    @property
    def stream(self) -> IO[str]:
        """Get the current output stream."""
        return self._writer.stream

    def is_terminal(self) -> bool:
        """Check whether the output is treated as an interactive terminal."""
        return self._terminal

    def configure(self, config: LogConfig) -> LogConfig:
        """
        Install a whole configuration and return the previous one.

        The writer prefix follows tag slot 0 of the new configuration.
        """
        with self._lock:
            old = self._holder.replace(config)
            self._writer.set_prefix(config.prefix)
        _report_unknown_styles(config.colors)
        return old

    def set_verbosity(self, level: str | int) -> None:
        """
        Set the highest severity still emitted.

        Raises:
            InvalidLevelError: If a level name cannot be resolved
        """
        self._holder.update(verbosity=resolve_level(level))

    def set_exit_on_error(self, mode: bool) -> None:
        """Terminate the process on emergency..error lines."""
        self._holder.update(exit_on_error=bool(mode))

    def set_warning_as_error(self, mode: bool) -> None:
        """Treat warnings as errors for exit_on_error."""
        self._holder.update(warning_as_error=bool(mode))

    def set_trace_caller(self, mode: bool) -> None:
        """Annotate lines with the caller location."""
        self._holder.update(trace_caller=bool(mode))

    def set_caller_base(self, mode: bool) -> None:
        """Show only the file name of the caller instead of its full path."""
        self._holder.update(caller_base=bool(mode))

    def set_color(self, mode: bool) -> None:
        self._holder.update(colorize=bool(mode))

    def set_force_color(self, mode: bool) -> None:
        """Colorize even when the output is not a terminal."""
        self._holder.update(force_colorize=bool(mode))

    def set_no_empty(self, mode: bool) -> None:
        """Skip lines whose message is empty."""
        self._holder.update(no_empty=bool(mode))

    def get_tags(self) -> tuple[str, ...]:
        return self._holder.config.tags

    def set_tags(self, tags: Iterable[str]) -> tuple[str, ...]:
        """Install a new tag table and return the previous one."""
        return self._holder.update(tags=tuple(tags)).tags

    def get_formats(self) -> dict[str, str]:
        return dict(self._holder.config.formats)

    def set_formats(self, formats: Mapping[str, str]) -> dict[str, str]:
        """Install a new format table and return the previous one."""
        return dict(self._holder.update(formats=dict(formats)).formats)

    def get_colors(self) -> dict[int, str]:
        return dict(self._holder.config.colors)

    def set_colors(self, colors: Mapping[int, str]) -> dict[int, str]:
        """
        Install a new color table and return the previous one.

        Unknown style names are reported through the package logger and
        render unstyled.
        """
        table = dict(colors)
        _report_unknown_styles(table)
        return dict(self._holder.update(colors=table).colors)

    def get_parts(self) -> dict[str, bool]:
        return dict(self._holder.config.parts)

    def set_parts(self, parts: Mapping[str, bool]) -> dict[str, bool]:
        """Install a new colorizable-parts table and return the previous one."""
        return dict(self._holder.update(parts=dict(parts)).parts)

    def set_prefix(self, prefix: str | None) -> str:
        """
        Set the line prefix and return the previous one.

        The prefix is stored in tag slot 0 and written before every line.
        None clears it.
        """
        prefix = "" if prefix is None else str(prefix)
        with self._lock:
            tags = self._holder.config.tags
            old = self._holder.update(tags=(prefix,) + tuple(tags[1:]))
            self._writer.set_prefix(prefix)
            return old.prefix

    def get_flags(self) -> int:
        return self._writer.flags

    def set_flags(self, flags: int) -> None:
        """
        Set writer flags.

        SHORTFILE and LONGFILE are not passed to the writer: they turn caller
        tracing on, with basename-only or full paths. LONGFILE wins when both
        are given.
        """
        with self._lock:
            if flags & (SHORTFILE | LONGFILE):
                self._holder.update(
                    trace_caller=True, caller_base=not flags & LONGFILE
                )
            self._writer.set_flags(flags & ~(SHORTFILE | LONGFILE))

    def set_output(self, stream: IO[str]) -> IO[str]:
        """
        Redirect output and return the previous stream.

        The output counts as a terminal only if it is the process's stdout or
        stderr and is a TTY.
        """
        with self._lock:
            old = self._writer.set_output(stream)
            self._terminal = self._detect_terminal(stream)
            return old

    def set_exit_policy(self, policy: ExitPolicy) -> ExitPolicy:
        """Install a new exit policy and return the previous one."""
        with self._lock:
            old = self._exit_policy
            self._exit_policy = policy
            return old

    # -- table dumps -------------------------------------------------------

    def _show(
        self,
        title: str,
        headers: tuple[str, str],
        rows: Iterable[tuple[Any, Any]],
        file: IO[str] | None,
    ) -> None:
        table = Table(title=title)
        table.add_column(headers[0], justify="right")
        table.add_column(headers[1])
        for key, value in rows:
            table.add_row(str(key), value if isinstance(value, Text) else Text(repr(value)))
        Console(file=file).print(table)

    def show_tags(self, file: IO[str] | None = None) -> None:
        """Print the tag table (to stdout by default)."""
        self._show("tags", ("level", "tag"), enumerate(self.get_tags()), file)

    def show_formats(self, file: IO[str] | None = None) -> None:
        """Print the format table (to stdout by default)."""
        self._show("formats", ("name", "template"), self.get_formats().items(), file)

    def show_colors(self, file: IO[str] | None = None) -> None:
        """Print the color table with a styled sample of each entry."""
        rows = [
            (slot, Text.from_ansi(ColorManager.apply(name, repr(name))))
            for slot, name in sorted(self.get_colors().items(), key=_slot_order)
        ]
        self._show("colors", ("slot", "style"), rows, file)

    def show_parts(self, file: IO[str] | None = None) -> None:
        """Print the colorizable-parts table (to stdout by default)."""
        self._show("parts", ("part", "enabled"), self.get_parts().items(), file)

    # -- logging -----------------------------------------------------------

    def log(self, level: int | str, message: str, stacklevel: int = 1) -> None:
        """
        Log a message at an explicit severity.

        The level may be a number or a level name ("debug"). An unknown name
        is reported on stderr and nothing is logged.
        """
        try:
            resolved = resolve_level(level)
        except InvalidLevelError as e:
            _report_failure(e, message)
            return
        self._log(resolved, message, stacklevel)

    def silent(self, message: str, stacklevel: int = 1) -> None:
        """Log a message at SILENT, rendered with tag slot 0 (the prefix)."""
        self._log(Level.SILENT, message, stacklevel)

    def emergency(self, message: str, stacklevel: int = 1) -> None:
        self._log(Level.EMERGENCY, message, stacklevel)

    def alert(self, message: str, stacklevel: int = 1) -> None:
        self._log(Level.ALERT, message, stacklevel)

    def critical(self, message: str, stacklevel: int = 1) -> None:
        self._log(Level.CRITICAL, message, stacklevel)

    def error(self, message: str, stacklevel: int = 1) -> None:
        self._log(Level.ERROR, message, stacklevel)

    def warning(self, message: str, stacklevel: int = 1) -> None:
        self._log(Level.WARNING, message, stacklevel)

    def notice(self, message: str, stacklevel: int = 1) -> None:
        self._log(Level.NOTICE, message, stacklevel)

    def info(self, message: str, stacklevel: int = 1) -> None:
        self._log(Level.INFO, message, stacklevel)

    def debug(self, message: str, stacklevel: int = 1) -> None:
        self._log(Level.DEBUG, message, stacklevel)

    def trace(self, value: Any, stacklevel: int = 1) -> None:
        """
        Log any value at TRACE.

        Empty collections render compactly with the `empty` template; other
        values render with the multi-part `trace` template.
        """
        config = self._holder.config
        if not gate.should_emit(config, Level.TRACE):
            return
        self._log(Level.TRACE, render_trace(config.formats, value), stacklevel, config)

    def trace_call(self, value: Any, stacklevel: int = 1) -> None:
        """Log a value at TRACE with the caller location, for this call only."""
        config = self._holder.config.replace(trace_caller=True)
        if not gate.should_emit(config, Level.TRACE):
            return
        self._log(Level.TRACE, render_trace(config.formats, value), stacklevel, config)

    def runtime(self, stacklevel: int = 1) -> None:
        """Log OS, architecture, CPU count, implementation and install root at DEBUG."""
        config = self._holder.config
        text = safe_format(get_format(config.formats, "runtime"), *runtime_info())
        self._log(Level.DEBUG, text, stacklevel, config)

    def all_done(self, stacklevel: int = 1) -> float:
        """
        Log the time elapsed since start at NOTICE and reset the start reference.

        Returns:
            float: Elapsed seconds
        """
        elapsed = self._checkpoints.since_start()
        config = self._holder.config
        text = safe_format(get_format(config.formats, "alldone"), delta_str(elapsed))
        self._log(Level.NOTICE, text, stacklevel, config)
        return elapsed

    def elapsed_time(self, stacklevel: int = 1) -> float:
        """
        Log the time elapsed since the previous call at NOTICE.

        Returns:
            float: Elapsed seconds
        """
        elapsed = self._checkpoints.since_last()
        config = self._holder.config
        text = safe_format(get_format(config.formats, "elapsed"), delta_str(elapsed))
        self._log(Level.NOTICE, text, stacklevel, config)
        return elapsed

    def _log(
        self,
        level: int,
        message: Any,
        stacklevel: int,
        config: LogConfig | None = None,
    ) -> None:
        """Gate, render and write one line, then apply the exit policy."""
        if config is None:
            config = self._holder.config
        if not isinstance(message, str):
            message = _to_text(message)

        if gate.allows(config, level, message):
            self._emit(config, level, message, stacklevel + 1)

        if gate.should_terminate(config, level):
            self._terminate(config, level, stacklevel + 1)

    def _emit(self, config: LogConfig, level: int, message: str, stacklevel: int) -> None:
        try:
            location = find_caller(stacklevel + 1) if config.trace_caller else None
            line = self._formatter.render(config, level, message, location, self._terminal)

            prefix = self._writer.prefix
            if prefix:
                prefix = self._formatter.decorator.colorize(
                    config, self._terminal, "prefix", Level.SILENT, prefix
                )
            self._writer.write(line, prefix=prefix)
        except Exception as e:
            _report_failure(e, message)

    def _terminate(self, config: LogConfig, level: int, stacklevel: int) -> None:
        fatal = safe_format(get_format(config.formats, "fatal"), int(level))
        if gate.allows(config, Level.DEBUG, fatal):
            self._emit(config, Level.DEBUG, fatal, stacklevel + 1)
        try:
            self._writer.flush()
        finally:
            self._exit_policy.terminate(int(level))


def _to_text(value: Any) -> str:
    try:
        return str(value)
    except Exception as e:
        return f"<unprintable {type(value).__name__}: {e}>"


def _report_failure(error: Exception, message: Any) -> None:
    text = message if isinstance(message, str) else _to_text(message)
    preview = text[:80] + "..." if len(text) > 80 else text
    sys.stderr.write(
        f"LOG_FORMAT_ERROR: {error.__class__.__name__}: {error} | msg={preview!r}\n"
    )


def _slot_order(item: tuple[Any, str]) -> tuple[int, Any]:
    slot = item[0]
    if isinstance(slot, int):
        return (0, slot)
    return (1, str(slot))
