"""Logger with a stack of handlers and per-severity resolution."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from loft.handler import Handler
from loft.severity import Severity


DEFAULT_NAME = "default"


class HandlerStackEmptyError(IndexError):
    """Raised when popping a handler from an empty stack."""


class Logger:
    """Leveled logger routing each call to one handler.

    Handlers form a stack. For a given severity the stack is searched from
    the most recently pushed handler down to the first one, and the first
    handler that accepts the severity services the call. The result is
    remembered per severity until the next push or pop.

    All stack and cache access happens under a single lock. The handler is
    invoked after the lock is released.
    """

    def __init__(self, name: str = "", handlers: Iterable[Handler] | None = None) -> None:
        self._name = name or DEFAULT_NAME
        self._handlers: List[Handler] = list(handlers or [])
        self._resolved: Dict[Severity, Handler] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def handlers(self) -> Tuple[Handler, ...]:
        """Snapshot of the stack, bottom first."""
        with self._lock:
            return tuple(self._handlers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, handlers={len(self)})"

    def push_handler(self, handler: Handler) -> None:
        """Push ``handler`` on top of the stack."""
        with self._lock:
            self._resolved.clear()
            self._handlers.append(handler)

    def pop_handler(self) -> Handler:
        """Remove and return the top handler.

        Raises:
            HandlerStackEmptyError: If the stack is empty. The logger is left
                unchanged.
        """
        with self._lock:
            if not self._handlers:
                raise HandlerStackEmptyError(f"Logger {self._name!r} has no handlers to pop")
            self._resolved.clear()
            return self._handlers.pop()

    def remove_handler(self, handler: Handler) -> bool:
        """Remove the topmost occurrence of ``handler`` wherever it sits.

        Returns:
            True if the handler was on the stack.
        """
        with self._lock:
            for index in range(len(self._handlers) - 1, -1, -1):
                if self._handlers[index] is handler:
                    self._resolved.clear()
                    del self._handlers[index]
                    return True
            return False

    @contextmanager
    def pushed(self, handler: Handler) -> Iterator[Handler]:
        """Push ``handler`` for the duration of a ``with`` block.

        On exit exactly this handler is removed, even when other threads
        pushed handlers on top of it in the meantime.
        """
        self.push_handler(handler)
        try:
            yield handler
        finally:
            self.remove_handler(handler)

    def resolve(self, level: Severity) -> Handler | None:
        """Return the handler responsible for ``level``, or None."""
        with self._lock:
            handler = self._resolved.get(level)
            if handler is not None:
                return handler
            for handler in reversed(self._handlers):
                if _accepts(handler, level):
                    self._resolved[level] = handler
                    return handler
            return None

    def enabled_for(self, level: Severity) -> bool:
        """Return True when some handler would service ``level``."""
        return self.resolve(level) is not None

    def log(self, level: Severity, *args: Any) -> None:
        """Log ``args`` at ``level``. Dropped when no handler accepts it.

        ``level`` may also be an integer value or a name such as "info";
        an unknown level drops the record.
        """
        try:
            level = Severity.parse(level)
            handler = self.resolve(level)
            if handler is not None:
                handler.emit(level, self._name, *args)
        except Exception:
            # Logging must never break the caller.
            pass

    def log_formatted(self, level: Severity, fmt: str, *args: Any) -> None:
        """Log ``fmt % args`` at ``level``. Dropped when no handler accepts it."""
        try:
            level = Severity.parse(level)
            handler = self.resolve(level)
            if handler is not None:
                handler.emit_formatted(level, self._name, fmt, *args)
        except Exception:
            pass

    def close(self) -> None:
        """Close every handler on the stack that supports ``close()``."""
        for handler in self.handlers:
            close = getattr(handler, "close", None)
            if close is not None:
                close()

    def debug(self, *args: Any) -> None:
        self.log(Severity.DEBUG, *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Severity.DEBUG, fmt, *args)

    def info(self, *args: Any) -> None:
        self.log(Severity.INFO, *args)

    def infof(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Severity.INFO, fmt, *args)

    def notice(self, *args: Any) -> None:
        self.log(Severity.NOTICE, *args)

    def noticef(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Severity.NOTICE, fmt, *args)

    def warn(self, *args: Any) -> None:
        self.log(Severity.WARN, *args)

    def warnf(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Severity.WARN, fmt, *args)

    def error(self, *args: Any) -> None:
        self.log(Severity.ERROR, *args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Severity.ERROR, fmt, *args)

    def fatal(self, *args: Any) -> None:
        """Log at FATAL. Does not exit the process."""
        self.log(Severity.FATAL, *args)

    def fatalf(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Severity.FATAL, fmt, *args)

    def emergency(self, *args: Any) -> None:
        self.log(Severity.EMERGENCY, *args)

    def emergencyf(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Severity.EMERGENCY, fmt, *args)


def _accepts(handler: Handler, level: Severity) -> bool:
    # A handler whose predicate raises is treated as rejecting the level.
    try:
        return bool(handler.accepts(level))
    except Exception:
        return False


def new(name: str = "", handlers: Iterable[Handler] | None = None) -> Logger:
    """Create a logger named ``name`` with an initial handler stack."""
    return Logger(name, handlers)
