"""
Configuration classes for the logging system.

This module provides the immutable configuration snapshot read by every log
call, and the helpers building one from parameters, a configuration
dictionary or a YAML file.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .constants import (
    DEFAULT_COLORS,
    DEFAULT_FORMATS,
    DEFAULT_PARTS,
    DEFAULT_TAGS,
    FLAG_NAMES,
    Level,
)
from .exceptions import InvalidLevelError, LogConfigurationError
from .terminal import color_disabled_by_env, color_forced_by_env


def resolve_level(value: str | int) -> int:
    """
    Resolve a severity from a level name or a numeric value.

    Args:
        value: Level name ("debug", "WARNING"), numeric string ("8") or int

    Returns:
        int: Numeric severity

    Raises:
        InvalidLevelError: If the value cannot be resolved
    """
    if isinstance(value, bool):
        raise InvalidLevelError(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
        try:
            return int(Level[text.upper()])
        except KeyError:
            pass
    raise InvalidLevelError(value)


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration for a logger.

    A log call reads one snapshot and uses it from gating to coloring, so a
    concurrent setter never produces a half-updated line. Setters install a
    new snapshot built with `replace()`.
    """

    verbosity: int = int(Level.WARNING)
    exit_on_error: bool = False
    warning_as_error: bool = False
    trace_caller: bool = False
    caller_base: bool = True
    colorize: bool = True
    force_colorize: bool = False
    no_empty: bool = False
    tags: tuple[str, ...] = DEFAULT_TAGS
    formats: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_FORMATS))
    colors: Mapping[int, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    parts: Mapping[str, bool] = field(default_factory=lambda: dict(DEFAULT_PARTS))

    def __post_init__(self) -> None:
        # Snapshots own read-only copies of their tables
        object.__setattr__(self, "tags", tuple(self.tags))
        for name in ("formats", "colors", "parts"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @property
    def prefix(self) -> str:
        """Get the prefix stored in tag slot 0."""
        return self.tags[0] if self.tags else ""

    def replace(self, **changes: Any) -> LogConfig:
        """Create a copy of this config with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_params(
        cls,
        verbosity: str | int = Level.WARNING,
        exit_on_error: bool = False,
        warning_as_error: bool = False,
        trace_caller: bool = False,
        caller_base: bool = True,
        colorize: bool = True,
        force_colorize: bool = False,
        no_empty: bool = False,
        tags: Iterable[str] | None = None,
        formats: Mapping[str, str] | None = None,
        colors: Mapping[int, str] | None = None,
        parts: Mapping[str, bool] | None = None,
        prefix: str | None = None,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Partial `formats`, `colors` and `parts` tables are merged over the
        defaults; `tags` replaces the whole tag table.

        Args:
            verbosity: Highest severity still emitted (name or number)
            exit_on_error: Terminate the process on error-level lines
            warning_as_error: Also terminate on warnings (with exit_on_error)
            trace_caller: Annotate lines with the caller location
            caller_base: Show only the file name of the caller
            colorize: Enable colored output
            force_colorize: Colorize even when the output is not a terminal
            no_empty: Skip lines whose message is empty
            tags: Full tag table (slot 0 is the prefix)
            formats: Format templates to override
            colors: Color slots to override
            parts: Colorizable parts to override
            prefix: Prefix stored in tag slot 0

        Returns:
            LogConfig instance

        Raises:
            InvalidLevelError: If verbosity cannot be resolved
        """
        resolved_tags = tuple(str(t) for t in tags) if tags is not None else DEFAULT_TAGS
        if prefix is not None:
            resolved_tags = (prefix,) + resolved_tags[1:]

        return cls(
            verbosity=resolve_level(verbosity),
            exit_on_error=bool(exit_on_error),
            warning_as_error=bool(warning_as_error),
            trace_caller=bool(trace_caller),
            caller_base=bool(caller_base),
            colorize=bool(colorize),
            force_colorize=bool(force_colorize),
            no_empty=bool(no_empty),
            tags=resolved_tags,
            formats={**DEFAULT_FORMATS, **dict(formats or {})},
            colors={**DEFAULT_COLORS, **_int_keys(colors or {})},
            parts={**DEFAULT_PARTS, **{k: bool(v) for k, v in (parts or {}).items()}},
        )

    @classmethod
    def from_env(cls) -> LogConfig:
        """
        Create the default LogConfig, honoring NO_COLOR and FORCE_COLOR.

        Returns:
            LogConfig instance
        """
        return cls(
            colorize=not color_disabled_by_env(),
            force_colorize=color_forced_by_env(),
        )

    @classmethod
    def from_config(
        cls, config_dict: Mapping[str, Any], section: str = "logging"
    ) -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary (e.g. loaded from YAML)
            section: Dotted path of the section to use (default: "logging")

        Returns:
            LogConfig instance

        Example:
            >>> LogConfig.from_config({"logging": {"verbosity": "debug"}}).verbosity
            8
        """
        current = get_section(config_dict, section)
        params = {
            key: current[key]
            for key in (
                "verbosity",
                "exit_on_error",
                "warning_as_error",
                "trace_caller",
                "caller_base",
                "colorize",
                "force_colorize",
                "no_empty",
                "tags",
                "formats",
                "colors",
                "parts",
                "prefix",
            )
            if key in current
        }
        return cls.from_params(**params)

    @classmethod
    def from_yaml(cls, path: str | Path, section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a YAML file.

        Args:
            path: YAML file path
            section: Dotted path of the section to use (default: "logging")

        Returns:
            LogConfig instance

        Raises:
            LogConfigurationError: If the file cannot be read or parsed
        """
        return cls.from_config(load_yaml(path), section)


def load_yaml(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Raises:
        LogConfigurationError: If the file cannot be read, parsed, or is not a mapping
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise LogConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise LogConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LogConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def _int_keys(colors: Mapping[Any, str]) -> dict[int, str]:
    """Convert color table keys to ints (YAML keys may be strings)."""
    result: dict[int, str] = {}
    for slot, name in colors.items():
        try:
            result[int(slot)] = "" if name is None else str(name)
        except (TypeError, ValueError) as e:
            raise LogConfigurationError(f"Invalid color slot: {slot!r}") from e
    return result


def get_section(config_dict: Mapping[str, Any], section: str) -> Mapping[str, Any]:
    """Navigate to a dotted section in a config dict, or {} if missing."""
    current: Any = config_dict
    for part in section.split(".") if section else []:
        if isinstance(current, Mapping) and part in current:
            current = current[part]
        else:
            return {}
    return current if isinstance(current, Mapping) else {}


def resolve_flags(flags: int | str | Iterable[str] | None) -> int:
    """
    Resolve writer flags from an int, a flag name or a list of flag names.

    Args:
        flags: Bitmask, name ("shortfile") or names (["date", "time"])

    Returns:
        int: Flag bitmask

    Raises:
        LogConfigurationError: If a flag name is not recognized
    """
    if flags is None:
        return 0
    if isinstance(flags, bool):
        raise LogConfigurationError(f"Invalid flags: {flags!r}")
    if isinstance(flags, int):
        return flags
    names = [flags] if isinstance(flags, str) else list(flags)

    result = 0
    for name in names:
        try:
            result |= FLAG_NAMES[str(name).strip().lower()]
        except KeyError as e:
            raise LogConfigurationError(f"Unknown flag: {name!r}") from e
    return result
