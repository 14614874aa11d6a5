"""Handler interfaces and the standard line handler."""

from __future__ import annotations

from collections.abc import Mapping
from typing import IO, Any, Protocol, runtime_checkable

from loft.line_writer import LineFlags, LineWriter
from loft.severity import Severity


@runtime_checkable
class Handler(Protocol):
    """Output unit that filters by severity and writes accepted records."""

    def accepts(self, level: Severity) -> bool:
        """Return True when this handler services ``level``. Must not raise."""

    def emit(self, level: Severity, name: str, *args: Any) -> None:
        """Render ``args`` and write them for logger ``name``."""

    def emit_formatted(self, level: Severity, name: str, fmt: str, *args: Any) -> None:
        """Apply ``fmt % args`` and write the result for logger ``name``."""


def label(level: Severity, name: str) -> str:
    """Return the record label, e.g. ``"app.INFO: "``."""
    return f"{name}.{Severity(level).label}: "


def render(*args: Any) -> str:
    """Join loosely typed arguments into a single message.

    Every pair of arguments is separated by one space, as ``print`` does,
    including two adjacent strings: ``render("a", "b")`` is ``"a b"``.
    """
    return " ".join(str(arg) for arg in args)


def render_formatted(fmt: str, *args: Any) -> str:
    """Substitute printf-style ``args`` into ``fmt``.

    A format that does not match its arguments is not an error: the
    format is kept verbatim and the arguments are appended.
    """
    if not args:
        return fmt
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError):
        return f"{fmt} {args!r}"


class StdHandler:
    """Handler writing one text line per record through a LineWriter."""

    def __init__(
        self,
        threshold: Severity,
        sink: IO[Any],
        flags: LineFlags = LineFlags.STD,
        close_sink: bool = False,
    ) -> None:
        self._threshold = Severity.parse(threshold)
        self._writer = LineWriter(sink, flags=flags)
        self._close_sink = close_sink

    @property
    def threshold(self) -> Severity:
        return self._threshold

    @property
    def writer(self) -> LineWriter:
        return self._writer

    def accepts(self, level: Severity) -> bool:
        return level >= self._threshold

    def emit(self, level: Severity, name: str, *args: Any) -> None:
        self._writer.output(label(level, name) + render(*args))

    def emit_formatted(self, level: Severity, name: str, fmt: str, *args: Any) -> None:
        self._writer.output(label(level, name) + render_formatted(fmt, *args))

    def close(self) -> None:
        """Close the sink if this handler owns it."""
        if self._close_sink:
            self._writer.close()

    def __repr__(self) -> str:
        return f"StdHandler(threshold={self._threshold.label})"


def new_std_handler(threshold: Severity, sink: IO[Any], flags: LineFlags = LineFlags.STD) -> StdHandler:
    """Create the standard line handler.

    Args:
        threshold: Lowest severity the handler accepts.
        sink: Text or binary stream to write to.
        flags: Header options passed to the line writer untouched.

    Returns:
        New StdHandler.
    """
    return StdHandler(threshold, sink, flags)
