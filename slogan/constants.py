"""
Constants and default tables for the logging system.

This module holds the severity levels, the writer flag bits and the default
tag, format, color and parts tables installed in every new configuration.
"""

from enum import IntEnum


class Level(IntEnum):
    """Severity of a log line. Lower values are more urgent, except SILENT."""

    SILENT = 0
    EMERGENCY = 1
    ALERT = 2
    CRITICAL = 3
    ERROR = 4
    WARNING = 5
    NOTICE = 6
    INFO = 7
    DEBUG = 8
    TRACE = 9


# Writer flags
DATE = 1
TIME = 2
MICROSECONDS = 4
LONGFILE = 8
SHORTFILE = 16
UTC = 32
STD_FLAGS = DATE | TIME

FLAG_NAMES: dict[str, int] = {
    "date": DATE,
    "time": TIME,
    "microseconds": MICROSECONDS,
    "longfile": LONGFILE,
    "shortfile": SHORTFILE,
    "utc": UTC,
    "std": STD_FLAGS,
}

# Color table slot used for the caller location
CALLER_SLOT = 10

# Slot 0 is the prefix
DEFAULT_TAGS: tuple[str, ...] = (
    "",
    "emergency",
    "alert    ",
    "critical ",
    "error    ",
    "warning  ",
    "notice   ",
    "info     ",
    "debug    ",
    "trace    ",
)

DEFAULT_FORMATS: dict[str, str] = {
    "fatal": "Immediate exit with code {0}",
    "trace": "type: {0}\n\nstr: {1}\n\npretty: {2}\n\nrepr: {3}",
    "empty": "{0!r}",
    "runtime": "OS:{0} ARCH:{1} CPU:{2} COMPILER:{3} ROOT:{4}",
    "default": "   {0} {1}",
    "caller": "   {0} {2}\t {1}",
    "where": "{0}:{1}",
    "alldone": "All done in : {0}",
    "elapsed": "Elapsed time : {0}",
}

DEFAULT_COLORS: dict[int, str] = {
    CALLER_SLOT: "Underline",
    9: "DarkGray",
    8: "DarkGray",
    7: "Purple",
    6: "Green",
    5: "Yellow",
    4: "LightRed",
    3: "Red",
    2: "BLightRed",
    1: "BRed",
    0: "",
}

# Which parts of a line are colorized when colorization is on
DEFAULT_PARTS: dict[str, bool] = {
    "caller": True,
    "tag": True,
    "log": False,
    "prefix": False,
}

# Placeholder location when the caller cannot be resolved
UNKNOWN_LOCATION: tuple[str, int] = ("?", 0)

# ANSI reset sequence
RESET: str = "\x1b[0m"
