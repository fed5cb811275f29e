"""
Color management for the logging system.

This module provides the named ANSI styles used to decorate the parts of a
log line, and the decorator deciding whether a part gets styled at all.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from .constants import RESET

if TYPE_CHECKING:
    from .config import LogConfig

StyleFunc = Callable[[str], str]

# Foreground SGR codes, in the order used by the style names
_FOREGROUND: dict[str, int] = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "purple": 35,
    "cyan": 36,
    "lightgray": 37,
    "darkgray": 90,
    "lightred": 91,
    "lightgreen": 92,
    "lightyellow": 93,
    "lightblue": 94,
    "lightpurple": 95,
    "lightcyan": 96,
    "white": 97,
}

_EFFECTS: dict[str, int] = {
    "bold": 1,
    "dim": 2,
    "underline": 4,
    "blink": 5,
    "invert": 7,
    "hide": 8,
}


def _style(code: str) -> StyleFunc:
    """Create a style function wrapping text in the given SGR code."""
    prefix = f"\x1b[{code}m"

    def apply(text: str) -> str:
        return prefix + text + RESET

    return apply


def _passthrough(text: str) -> str:
    return text


def _build_styles() -> dict[str, StyleFunc]:
    """Create the style name -> style function table (keys are lowercase)."""
    styles: dict[str, StyleFunc] = {}
    for name, code in _FOREGROUND.items():
        styles[name] = _style(str(code))
        # Bold/bright variant
        styles["b" + name] = _style(f"1;{code}")
        # Background variant
        styles["g" + name] = _style(str(code + 10))
    for name, code in _EFFECTS.items():
        styles[name] = _style(str(code))
    return styles


class ColorManager:
    """Named ANSI styles for log line parts."""

    STYLES: dict[str, StyleFunc] = _build_styles()

    @staticmethod
    def resolve(style_name: str | None) -> StyleFunc | None:
        """
        Resolve a style name to its style function.

        Names are matched case-insensitively ("BRed", "bred", "BRED").

        Args:
            style_name: Style name such as "Red", "BLightRed", "GBlue" or "Underline"

        Returns:
            Style function, or None if the name is empty or not recognized
        """
        if not style_name or not isinstance(style_name, str):
            return None
        return ColorManager.STYLES.get(style_name.strip().lower())

    @staticmethod
    def is_known(style_name: str | None) -> bool:
        """Check whether a style name is recognized (empty counts as known)."""
        if not style_name:
            return True
        return ColorManager.resolve(style_name) is not None

    @staticmethod
    def apply(style_name: str | None, text: str) -> str:
        """
        Apply a named style to text.

        Unknown or empty names leave the text unchanged.
        """
        style = ColorManager.resolve(style_name) or _passthrough
        return style(text)

    @staticmethod
    def unknown_names(colors: Mapping[int, str]) -> dict[int, str]:
        """Return the entries of a color table whose style name is not recognized."""
        return {
            slot: name
            for slot, name in colors.items()
            if not ColorManager.is_known(name)
        }


class ColorDecorator:
    """
    Decides, per part of a log line, whether to apply a color style.

    Style functions are resolved once per installed color table and cached
    together with the table they were resolved from.
    """

    def __init__(self) -> None:
        self._cache: tuple[Mapping[int, str] | None, dict[int, StyleFunc]] = (
            None,
            {},
        )

    def _styles_for(self, colors: Mapping[int, str]) -> dict[int, StyleFunc]:
        table, resolved = self._cache
        if table is not colors:
            resolved = {
                slot: ColorManager.resolve(name) or _passthrough
                for slot, name in colors.items()
            }
            # Single reference swap, safe for concurrent readers
            self._cache = (colors, resolved)
        return resolved

    def colorize(
        self,
        config: LogConfig,
        is_terminal: bool,
        part: str,
        level: int,
        text: str,
    ) -> str:
        """
        Colorize one part of a log line.

        Args:
            config: Configuration snapshot for the current call
            is_terminal: Whether the destination is an interactive terminal
            part: Part name ("tag", "log", "caller" or "prefix")
            level: Color table slot (severity, or 10 for the caller)
            text: Text to colorize

        Returns:
            Styled text, or the text unchanged when colorization does not apply
        """
        if not is_terminal and not config.force_colorize:
            return text
        if not config.colorize or not config.parts.get(part, False):
            return text
        style = self._styles_for(config.colors).get(level, _passthrough)
        return style(text)
