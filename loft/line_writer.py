"""Line-oriented writer used by the standard handler."""

from __future__ import annotations

import io
import threading
from datetime import datetime, timezone
from enum import IntFlag
from typing import IO, Any, Callable


class LineFlags(IntFlag):
    """Header options for each written line."""

    NONE = 0
    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    UTC = 8
    MSGPREFIX = 16
    STD = DATE | TIME


def _is_binary(sink: Any) -> bool:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in str(getattr(sink, "mode", ""))


class LineWriter:
    """Write one complete line per call to a text or binary sink.

    Each line is assembled first and handed to the sink in a single
    ``write`` call while holding the writer's lock, so concurrent callers
    never interleave partial lines on the same sink.
    """

    def __init__(
        self,
        sink: IO[Any],
        prefix: str = "",
        flags: LineFlags = LineFlags.STD,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._sink = sink
        self._prefix = prefix
        self._flags = LineFlags(flags)
        self._clock = clock or datetime.now
        self._binary = _is_binary(sink)
        self._lock = threading.Lock()

    @property
    def sink(self) -> IO[Any]:
        return self._sink

    @property
    def flags(self) -> LineFlags:
        return self._flags

    def _header(self, now: datetime) -> str:
        flags = self._flags
        if flags & LineFlags.UTC:
            now = now.astimezone(timezone.utc)
        parts = []
        if flags & LineFlags.DATE:
            parts.append(now.strftime("%Y/%m/%d "))
        if flags & (LineFlags.TIME | LineFlags.MICROSECONDS):
            stamp = now.strftime("%H:%M:%S")
            if flags & LineFlags.MICROSECONDS:
                stamp += f".{now.microsecond:06d}"
            parts.append(stamp + " ")
        return "".join(parts)

    def format_line(self, message: str) -> str:
        """Build the full line for ``message``, including the trailing newline."""
        header = self._header(self._clock())
        if self._flags & LineFlags.MSGPREFIX:
            line = f"{header}{self._prefix}{message}"
        else:
            line = f"{self._prefix}{header}{message}"
        if not line.endswith("\n"):
            line += "\n"
        return line

    def output(self, message: str) -> None:
        """Write ``message`` as a single line. Sink errors are dropped."""
        try:
            line = self.format_line(message)
            data: Any = line.encode("utf-8") if self._binary else line
            with self._lock:
                self._sink.write(data)
                flush = getattr(self._sink, "flush", None)
                if flush is not None:
                    flush()
        except Exception:
            # Logging must never break the caller.
            pass

    def close(self) -> None:
        """Close the underlying sink. Errors are dropped."""
        try:
            with self._lock:
                self._sink.close()
        except Exception:
            pass
