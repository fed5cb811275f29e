"""
Line writer: the destination of finished log lines.

The writer is a thin layer over `logging.StreamHandler`, which provides the
write lock, flushing and I/O error reporting. A formatter renders the
prefix and the date/time stamp selected by the writer flags.
"""

from __future__ import annotations

import datetime
import logging
import sys
from typing import IO, Any

from .constants import DATE, MICROSECONDS, TIME, UTC


class StampFormatter(logging.Formatter):
    """
    Formatter rendering `<prefix><date> <time> <line>`.

    The date and time parts are controlled by the DATE, TIME, MICROSECONDS
    and UTC flag bits.
    """

    def __init__(self, flags: int = 0) -> None:
        super().__init__("%(message)s")
        self.flags = flags

    def format_stamp(self, created: float) -> str:
        """
        Format the timestamp part for a record creation time.

        Args:
            created: POSIX timestamp of the record

        Returns:
            Stamp followed by a space, or "" when no stamp flag is set
        """
        flags = self.flags
        if not flags & (DATE | TIME | MICROSECONDS):
            return ""

        tz = datetime.timezone.utc if flags & UTC else None
        moment = datetime.datetime.fromtimestamp(created, tz=tz)

        stamp = ""
        if flags & DATE:
            stamp += moment.strftime("%Y/%m/%d ")
        if flags & (TIME | MICROSECONDS):
            stamp += moment.strftime("%H:%M:%S")
            if flags & MICROSECONDS:
                stamp += f".{moment.microsecond:06d}"
            stamp += " "
        return stamp

    def format(self, record: logging.LogRecord) -> str:
        prefix = getattr(record, "prefix", "")
        return prefix + self.format_stamp(record.created) + record.getMessage()


class LineWriter:
    """
    Writes finished log lines to a stream.

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> writer = LineWriter(out, prefix="app: ")
        >>> writer.write("hello")
        >>> out.getvalue()
        'app: hello\\n'
    """

    def __init__(
        self, stream: IO[str] | None = None, prefix: str = "", flags: int = 0
    ) -> None:
        """
        Initialize the writer.

        Args:
            stream: Destination stream (defaults to sys.stderr)
            prefix: Text written before every line
            flags: Stamp flags (DATE, TIME, MICROSECONDS, UTC)
        """
        self._handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        self._formatter = StampFormatter(flags)
        self._handler.setFormatter(self._formatter)
        self._prefix = prefix

    @property
    def stream(self) -> IO[str]:
        """Get the current destination stream."""
        return self._handler.stream

    @property
    def prefix(self) -> str:
        """Get the current prefix."""
        return self._prefix

    @property
    def flags(self) -> int:
        """Get the current stamp flags."""
        return self._formatter.flags

    def set_prefix(self, prefix: str) -> str:
        """Set the prefix and return the previous one."""
        old = self._prefix
        self._prefix = prefix
        return old

    def set_flags(self, flags: int) -> int:
        """Set the stamp flags and return the previous ones."""
        old = self._formatter.flags
        self._formatter.flags = flags
        return old

    def set_output(self, stream: IO[str]) -> IO[str]:
        """
        Redirect output to another stream.

        Args:
            stream: New destination stream

        Returns:
            The previous destination stream
        """
        old = self._handler.stream
        self._handler.setStream(stream)
        return old

    def write(self, line: str, prefix: str | None = None) -> None:
        """
        Write one line.

        Args:
            line: Finished log line (without trailing newline)
            prefix: Prefix to use instead of the writer's own (e.g. colorized)
        """
        attrs: dict[str, Any] = {
            "msg": line,
            "args": None,
            "prefix": self._prefix if prefix is None else prefix,
        }
        self._handler.handle(logging.makeLogRecord(attrs))

    def flush(self) -> None:
        """Flush the destination stream."""
        self._handler.flush()
