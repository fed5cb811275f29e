"""
Line formatting for the logging system.

This module renders a log line from its severity, message and optional
caller location using the configured templates, and renders values passed
to trace().
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import TYPE_CHECKING, Any

from rich.pretty import pretty_repr

from .caller import render_pathname
from .colors import ColorDecorator
from .constants import CALLER_SLOT, DEFAULT_FORMATS

if TYPE_CHECKING:
    from .config import LogConfig


def safe_format(template: str, *args: Any) -> str:
    """
    Substitute positional arguments into a template without ever raising.

    A malformed template, or one asking for more arguments than given,
    renders as the raw template followed by the arguments.

    Args:
        template: str.format template using positional fields ("{0} {1}")
        *args: Positional arguments

    Returns:
        Formatted string
    """
    try:
        return str(template).format(*args)
    except Exception:
        rendered = " ".join(_safe(str, a) for a in args)
        return f"{template} {rendered}" if rendered else str(template)


def get_format(formats: Mapping[str, str], name: str) -> str:
    """Get a template by name, falling back to the built-in one if missing."""
    template = formats.get(name)
    if template is None:
        return DEFAULT_FORMATS.get(name, "")
    return template


def is_empty_value(value: Any) -> bool:
    """Check if a value is an empty collection (strings and bytes excluded)."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    if not isinstance(value, Collection):
        return False
    try:
        return len(value) == 0
    except Exception:
        return False


def type_name(value: Any) -> str:
    """Get the qualified type name of a value ("list", "pathlib.PosixPath")."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _safe(render: Any, value: Any) -> str:
    try:
        return str(render(value))
    except Exception as e:
        return f"<{render.__name__} failed: {e.__class__.__name__}: {e}>"


def render_trace(formats: Mapping[str, str], value: Any) -> str:
    """
    Render a value for trace().

    Empty collections use the compact `empty` template. Anything else uses
    the `trace` template with the type name, str(), the pretty-printed form
    and repr(), so nested structures stay readable.

    Args:
        formats: Format table
        value: Value to render

    Returns:
        Rendered text
    """
    if is_empty_value(value):
        return safe_format(get_format(formats, "empty"), value)
    return safe_format(
        get_format(formats, "trace"),
        type_name(value),
        _safe(str, value),
        _safe(pretty_repr, value),
        _safe(repr, value),
    )


class LineFormatter:
    """
    Renders single log lines.

    Tag, message and caller location are colorized separately by the
    decorator, then substituted into the `default` template, or the
    `caller` template when a caller location is given.
    """

    def __init__(self, decorator: ColorDecorator | None = None) -> None:
        """
        Initialize the line formatter.

        Args:
            decorator: Color decorator (a new one is created if None)
        """
        self._decorator = decorator or ColorDecorator()

    @property
    def decorator(self) -> ColorDecorator:
        return self._decorator

    def render_location(
        self, config: LogConfig, is_terminal: bool, location: tuple[str, int]
    ) -> str:
        """
        Render a caller location with the `where` template.

        Args:
            config: Configuration snapshot
            is_terminal: Whether the destination is a terminal
            location: (pathname, lineno)

        Returns:
            Colorized location string
        """
        pathname, lineno = location
        where = safe_format(
            get_format(config.formats, "where"),
            render_pathname(pathname, config.caller_base),
            lineno,
        )
        return self._decorator.colorize(config, is_terminal, "caller", CALLER_SLOT, where)

    def render(
        self,
        config: LogConfig,
        level: int,
        message: str,
        location: tuple[str, int] | None = None,
        is_terminal: bool = False,
    ) -> str:
        """
        Render a log line.

        Args:
            config: Configuration snapshot
            level: Severity of the line
            message: Message text
            location: Caller (pathname, lineno), or None without caller tracing
            is_terminal: Whether the destination is a terminal

        Returns:
            Rendered line
        """
        tags = config.tags
        tag = tags[level] if 0 <= level < len(tags) else ""
        colorize = self._decorator.colorize
        ctag = colorize(config, is_terminal, "tag", level, tag)
        cmsg = colorize(config, is_terminal, "log", level, message)

        if location is None:
            return safe_format(get_format(config.formats, "default"), ctag, cmsg, "")

        caller = self.render_location(config, is_terminal, location)
        return safe_format(get_format(config.formats, "caller"), ctag, cmsg, caller)
